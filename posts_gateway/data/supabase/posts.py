from dataclasses import dataclass
from typing import Any

import httpx
import pydantic
import structlog

from posts_gateway.core.entity.post import NewPost, Post, PostOrdering
from posts_gateway.core.repository.post import PostRepository, PostStorageError

logger = structlog.get_logger()

_LIST_COLUMNS = "id,title,body,user_id"


@dataclass
class SupabasePostRepository(PostRepository):
    client: httpx.AsyncClient
    table: str = "posts"

    async def get_list(
        self,
        *,
        order_by: PostOrdering = PostOrdering.created_at_desc,
    ) -> list[Post]:
        match order_by:
            case PostOrdering.created_at_desc:
                order = "created_at.desc"
            case _:
                raise ValueError(f"Unknown post ordering: {order_by}")

        rows = await self._request(
            "GET",
            params={"select": _LIST_COLUMNS, "order": order},
        )
        return self._parse_posts(rows)

    async def create_many(self, posts: list[NewPost]) -> list[Post]:
        rows = await self._request(
            "POST",
            params={"select": "*"},
            json=[post.model_dump() for post in posts],
            headers={"Prefer": "return=representation"},
        )
        return self._parse_posts(rows)

    async def _request(self, method: str, **kwargs: Any) -> Any:
        try:
            resp = await self.client.request(method, f"/{self.table}", **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("Data store request failed", method=method, table=self.table, error=exc)
            raise PostStorageError(f"failed to reach the data store: {exc}") from exc

        if resp.is_error:
            message = self._get_error_message(resp)
            logger.warning(
                "Data store rejected request",
                method=method,
                table=self.table,
                status_code=resp.status_code,
                error=message,
            )
            raise PostStorageError(message)

        # return=minimal and some empty inserts come back without a body
        if not resp.content:
            return []

        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("Data store returned malformed body", method=method, table=self.table)
            raise PostStorageError("data store returned a malformed response") from exc

    def _get_error_message(self, resp: httpx.Response) -> str:
        try:
            payload = resp.json()
        except ValueError:
            return f"data store responded with status {resp.status_code}"

        if isinstance(payload, dict) and (message := payload.get("message")):
            return str(message)

        return f"data store responded with status {resp.status_code}"

    def _parse_posts(self, rows: Any) -> list[Post]:
        if not isinstance(rows, list):
            raise PostStorageError("data store returned an unexpected payload")

        try:
            return [Post.model_validate(row) for row in rows]
        except pydantic.ValidationError as exc:
            logger.warning("Failed to validate posts returned by data store", error=exc)
            raise PostStorageError("data store returned invalid posts") from exc
