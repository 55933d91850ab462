from fastapi import APIRouter

from .views import posts

router = APIRouter()

router.include_router(posts.router)
