from fastapi import APIRouter, Body, Depends, status
from structlog.stdlib import BoundLogger

from posts_gateway.application.di import Container
from posts_gateway.core.repository.post import PostStorageError
from posts_gateway.core.usecase import create_post
from posts_gateway.fastapi.api.schemas import (
    ApiCreatedPost,
    ApiCreatePostBody,
    ApiPost,
    ApiPostList,
)
from posts_gateway.fastapi.depends.app_state import get_container, get_logger
from posts_gateway.fastapi.errors import ApiError

router = APIRouter(tags=["posts"])


@router.get(
    "/posts",
    summary="List posts, newest first",
    response_model=ApiPostList,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "description": "Data store failed to return posts",
        },
    },
)
async def list_posts(
    container: Container = Depends(get_container),
    logger: BoundLogger = Depends(get_logger),
) -> ApiPostList:
    uc = container.use_cases.list_posts()

    try:
        uc_result = await uc.execute()
    except PostStorageError as exc:
        logger.error("Failed to fetch posts", error=str(exc))
        raise ApiError(
            error="Failed to fetch posts",
            message="Could not fetch posts from the data store",
            exc=exc,
        )
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error while fetching posts")
        raise ApiError(
            error="Internal server error",
            message="Something went wrong while fetching posts",
            exc=exc,
        )

    posts = [ApiPost.model_validate(post) for post in uc_result.posts]
    return ApiPostList(data=posts, count=len(posts))


@router.post(
    "/posts",
    summary="Create a post",
    response_model=ApiCreatedPost,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "description": "A required field is missing, not a string or empty",
        },
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "description": "Data store failed to create the post",
        },
    },
)
async def create_new_post(
    container: Container = Depends(get_container),
    logger: BoundLogger = Depends(get_logger),
    body: ApiCreatePostBody = Body(...),
) -> ApiCreatedPost:
    uc = container.use_cases.create_post()
    uc_input = create_post.CreatePostInput(
        title=body.title,
        body=body.body,
        user_id=body.user_id,
    )

    try:
        uc_result = await uc.execute(uc_input)
    except PostStorageError as exc:
        logger.error("Failed to create post", user_id=body.user_id, error=str(exc))
        raise ApiError(
            error="Failed to create post",
            message="Could not save the post to the data store",
            exc=exc,
        )
    except create_post.PostNotCreatedError as exc:
        logger.error("Post was not returned after insert", user_id=body.user_id)
        raise ApiError(
            error="Failed to create post",
            message="The data store did not return the created post",
            exc=exc,
        )
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error while creating post", user_id=body.user_id)
        raise ApiError(
            error="Internal server error",
            message="Something went wrong while creating the post",
            exc=exc,
        )

    return ApiCreatedPost(data=ApiPost.model_validate(uc_result.post))
