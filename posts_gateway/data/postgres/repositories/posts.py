from dataclasses import dataclass

import sqlalchemy as sa
import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from posts_gateway.core.entity.post import NewPost, Post, PostOrdering
from posts_gateway.core.repository.post import PostRepository, PostStorageError
from posts_gateway.data.postgres import models as mdl

logger = structlog.get_logger()

_LIST_COLUMNS = (
    mdl.Post.c.id,
    mdl.Post.c.title,
    mdl.Post.c.body,
    mdl.Post.c.user_id,
)


@dataclass
class PostgresPostRepository(PostRepository):
    db: AsyncEngine

    async def get_list(
        self,
        *,
        order_by: PostOrdering = PostOrdering.created_at_desc,
    ) -> list[Post]:
        query = sa.select(*_LIST_COLUMNS)

        match order_by:
            case PostOrdering.created_at_desc:
                query = query.order_by(mdl.Post.c.created_at.desc(), mdl.Post.c.id.desc())
            case _:
                raise ValueError(f"Unknown post ordering: {order_by}")

        try:
            async with self.db.connect() as conn:
                result = await conn.execute(query)
        except SQLAlchemyError as exc:
            logger.warning("Failed to fetch posts", error=exc)
            raise PostStorageError("failed to fetch posts") from exc

        return [Post.model_validate(dict(row)) for row in result.mappings()]

    async def create_many(self, posts: list[NewPost]) -> list[Post]:
        insert_q = (
            sa.insert(mdl.Post)
            .values([post.model_dump() for post in posts])
            .returning(mdl.Post)
        )

        try:
            async with self.db.begin() as conn:
                result = await conn.execute(insert_q)
                rows = result.mappings().fetchall()
        except SQLAlchemyError as exc:
            logger.warning("Failed to insert posts", count=len(posts), error=exc)
            raise PostStorageError("failed to insert posts") from exc

        return [Post.model_validate(dict(row)) for row in rows]
