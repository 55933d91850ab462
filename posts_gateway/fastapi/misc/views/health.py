import time

from fastapi import APIRouter
from starlette.requests import Request

from posts_gateway.fastapi.misc.schemas import ApiHealth
from posts_gateway.utils.dtime import now_aware

router = APIRouter()


@router.get(
    "/api/health",
    summary="Check that the server is alive",
    response_model=ApiHealth,
)
async def get_health(request: Request) -> ApiHealth:
    return ApiHealth(
        timestamp=now_aware(),
        uptime=time.monotonic() - request.app.state.started_at,
    )
