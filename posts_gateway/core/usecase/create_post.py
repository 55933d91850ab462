from dataclasses import dataclass

import structlog

from posts_gateway.core.entity.post import NewPost, Post
from posts_gateway.core.repository.post import PostRepository

logger = structlog.get_logger()


@dataclass
class CreatePostInput:
    title: str
    body: str
    user_id: str


@dataclass
class CreatePostOutput:
    post: Post


class PostNotCreatedError(Exception):
    """The insert went through but the data store returned no record."""


@dataclass
class CreatePostUseCase:
    post_repository: PostRepository

    async def execute(self, data: CreatePostInput) -> CreatePostOutput:
        new_post = NewPost(
            title=data.title.strip(),
            body=data.body.strip(),
            user_id=data.user_id.strip(),
        )
        created_posts = await self.post_repository.create_many([new_post])

        if not created_posts:
            logger.warning("Data store returned no inserted post", user_id=new_post.user_id)
            raise PostNotCreatedError(f"No post returned after insert for {new_post.user_id=}")

        post, *_ = created_posts
        logger.info("Created post", post_id=post.id, user_id=post.user_id)

        return CreatePostOutput(post=post)
