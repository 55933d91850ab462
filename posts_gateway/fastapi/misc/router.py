from fastapi import APIRouter

from .views import health

router = APIRouter(tags=["misc"])

router.include_router(health.router)
