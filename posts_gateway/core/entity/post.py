from enum import Enum, auto

from pydantic import AwareDatetime, BaseModel, Field


class NewPost(BaseModel):
    title: str
    body: str
    user_id: str = Field(description="Identifier of the authoring user")


class Post(NewPost):
    id: int | str = Field(description="Identifier assigned by the data store")  # noqa: A003
    created_at: AwareDatetime | None = None


class PostOrdering(Enum):
    created_at_desc = auto()
