from abc import ABC, abstractmethod

from posts_gateway.core.entity.post import NewPost, Post, PostOrdering


class PostStorageError(Exception):
    """The data store failed to serve a request."""


class PostRepository(ABC):
    @abstractmethod
    async def get_list(
        self,
        *,
        order_by: PostOrdering = PostOrdering.created_at_desc,
    ) -> list[Post]:
        ...

    @abstractmethod
    async def create_many(self, posts: list[NewPost]) -> list[Post]:
        ...
