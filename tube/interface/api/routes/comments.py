"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, Response, status
from pydantic import BaseModel

from tube.application.usecase.comment import (
    CommentItem,
    CommentPageResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListAllCommentsRequest,
    ListAllCommentsUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from tube.domain.service import JWTService
from tube.interface.api.auth import require_principal

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CommentContentAPIRequest(BaseModel):
    """API request carrying comment content.

    Content is trimmed and checked by the domain, so empty content is a
    400 validation error rather than a 422.
    """

    content: str


@router.post(
    "/videos/{video_id}",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    video_id: str,
    request: CommentContentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    access_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Add a top-level comment to a video.

    Requires authentication.

    Args:
        video_id: Video UUID
        request: Comment content
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        access_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Created comment enriched with its owner
    """
    user_id = require_principal(jwt_service, access_token, authorization)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            video_id=video_id,
            owner_id=str(user_id),
            content=request.content,
        )
    )


@router.get("/videos/{video_id}", response_model=CommentPageResponse)
async def list_comments(
    video_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    sort_by: str | None = Query(default=None, alias="sortBy"),
    sort_order: str | None = Query(default=None, alias="sortOrder"),
) -> CommentPageResponse:
    """List top-level comments on a video.

    Query values that cannot be used fall back to defaults: page 1,
    10 per page, newest first.

    Args:
        video_id: Video UUID
        list_comments_use_case: List comments use case from DI
        page: Page number (1-based)
        limit: Page size
        sort_by: createdAt or updatedAt
        sort_order: asc or desc

    Returns:
        One page of enriched comments
    """
    return await list_comments_use_case.execute(
        ListCommentsRequest(
            video_id=video_id,
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
        )
    )


@router.get("", response_model=CommentPageResponse)
async def list_all_comments(
    list_all_comments_use_case: FromDishka[ListAllCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    access_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentPageResponse:
    """List every comment and reply, newest first (administrative)."""
    require_principal(jwt_service, access_token, authorization)
    return await list_all_comments_use_case.execute(
        ListAllCommentsRequest(page=page, limit=limit)
    )


@router.patch("/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: str,
    request: CommentContentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    access_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Edit the content of a comment or reply.

    Only the owner can edit.

    Args:
        comment_id: Comment UUID
        request: New content
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        access_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Updated comment enriched with its owner
    """
    user_id = require_principal(jwt_service, access_token, authorization)
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id,
            user_id=str(user_id),
            content=request.content,
        )
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    access_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> Response:
    """Delete a comment together with all of its replies.

    Only the owner can delete.
    """
    user_id = require_principal(jwt_service, access_token, authorization)
    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=str(user_id))
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
