from dataclasses import dataclass

import structlog

from posts_gateway.core.entity.post import Post, PostOrdering
from posts_gateway.core.repository.post import PostRepository

logger = structlog.get_logger()


@dataclass
class ListPostsOutput:
    posts: list[Post]


@dataclass
class ListPostsUseCase:
    post_repository: PostRepository

    async def execute(self) -> ListPostsOutput:
        posts = await self.post_repository.get_list(order_by=PostOrdering.created_at_desc)
        logger.debug("Fetched posts", count=len(posts))
        return ListPostsOutput(posts=posts)
