"""Reply routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, Response, status

from tube.application.usecase.comment import CommentItem, CommentPageResponse
from tube.application.usecase.reply import (
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    ListRepliesRequest,
    ListRepliesUseCase,
    UpdateReplyRequest,
    UpdateReplyUseCase,
)
from tube.domain.service import JWTService
from tube.interface.api.auth import require_principal
from tube.interface.api.routes.comments import CommentContentAPIRequest

router = APIRouter(prefix="/comments", tags=["replies"], route_class=DishkaRoute)


@router.post(
    "/{comment_id}/replies",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    comment_id: str,
    request: CommentContentAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    access_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Reply to a top-level comment.

    Requires authentication. Replies to replies are rejected with 409.

    Args:
        comment_id: Parent comment UUID
        request: Reply content
        create_reply_use_case: Create reply use case from DI
        jwt_service: JWT service for token verification (injected)
        access_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Created reply enriched with its owner
    """
    user_id = require_principal(jwt_service, access_token, authorization)
    return await create_reply_use_case.execute(
        CreateReplyRequest(
            parent_comment_id=comment_id,
            owner_id=str(user_id),
            content=request.content,
        )
    )


@router.get("/{comment_id}/replies", response_model=CommentPageResponse)
async def list_replies(
    comment_id: str,
    list_replies_use_case: FromDishka[ListRepliesUseCase],
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> CommentPageResponse:
    """List replies to a comment, oldest first."""
    return await list_replies_use_case.execute(
        ListRepliesRequest(parent_comment_id=comment_id, page=page, limit=limit)
    )


@router.patch("/{comment_id}/replies/{reply_id}", response_model=CommentItem)
async def update_reply(
    comment_id: str,
    reply_id: str,
    request: CommentContentAPIRequest,
    update_reply_use_case: FromDishka[UpdateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    access_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Edit a reply under the given parent comment. Only the owner can edit."""
    user_id = require_principal(jwt_service, access_token, authorization)
    return await update_reply_use_case.execute(
        UpdateReplyRequest(
            parent_comment_id=comment_id,
            reply_id=reply_id,
            user_id=str(user_id),
            content=request.content,
        )
    )


@router.delete(
    "/{comment_id}/replies/{reply_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_reply(
    comment_id: str,
    reply_id: str,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    jwt_service: FromDishka[JWTService],
    access_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> Response:
    """Delete a reply under the given parent comment.

    Only the owner can delete. The parent comment is left untouched.
    """
    user_id = require_principal(jwt_service, access_token, authorization)
    await delete_reply_use_case.execute(
        DeleteReplyRequest(
            parent_comment_id=comment_id, reply_id=reply_id, user_id=str(user_id)
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
