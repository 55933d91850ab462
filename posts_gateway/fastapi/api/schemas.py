from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

NonEmptyText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, strict=True)]


class ApiCreatePostBody(BaseModel):
    title: NonEmptyText = Field(..., description="Title of the post")
    body: NonEmptyText = Field(..., description="Text of the post")
    user_id: NonEmptyText = Field(..., description="Identifier of the authoring user")


class ApiPost(BaseModel):
    id: int | str  # noqa: A003
    title: str
    body: str
    user_id: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ApiPostList(BaseModel):
    success: bool = True
    data: list[ApiPost]
    count: int


class ApiCreatedPost(BaseModel):
    success: bool = True
    data: ApiPost
    message: str = "Post created successfully"
