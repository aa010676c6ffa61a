"""Read projections of comment threads."""

import logfire

from tube.domain.error import DependencyError
from tube.domain.model import Comment, EnrichedComment, PublicProfile
from tube.domain.repository import ProfileRepository
from tube.domain.value import CommentId, Page, PageRequest, UserId, VideoId
from tube.domain.value.types import SortField, SortOrder

from .base import Service
from .comment_service import CommentService
from .thread_service import ThreadService


class CommentViewService(Service):
    """Builds paginated, owner-enriched comment listings.

    Owner profiles are fetched in one batch per page. If any owner cannot be
    resolved the whole page fails; rows are never returned without an owner.
    """

    def __init__(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        profile_repository: ProfileRepository,
    ) -> None:
        """Initialize comment view service.

        Args:
            comment_service: Comment store
            thread_service: Used to derive the video of replies
            profile_repository: Public profile lookup
        """
        self.comment_service = comment_service
        self.thread_service = thread_service
        self.profile_repository = profile_repository

    async def top_level_page(
        self,
        video_id: VideoId,
        page_request: PageRequest,
        sort_field: SortField = SortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> Page[EnrichedComment]:
        """Get one enriched page of top-level comments on a video.

        Raises:
            DependencyError: If owner profiles could not be resolved
        """
        with logfire.span(
            "view_service.top_level_page",
            video_id=str(video_id),
            page=page_request.page,
            page_size=page_request.page_size,
        ):
            page = await self.comment_service.list_top_level_by_video(
                video_id=video_id,
                page_request=page_request,
                sort_field=sort_field,
                sort_order=sort_order,
            )
            return await self._enrich_page(page, {})

    async def replies_page(
        self, parent: Comment, page_request: PageRequest
    ) -> Page[EnrichedComment]:
        """Get one enriched page of replies to a top-level comment, oldest first.

        Args:
            parent: The top-level comment
            page_request: Page number and size

        Raises:
            DependencyError: If owner profiles could not be resolved
        """
        with logfire.span(
            "view_service.replies_page",
            parent_comment_id=str(parent.id),
            page=page_request.page,
            page_size=page_request.page_size,
        ):
            page = await self.comment_service.list_replies_by_parent(
                parent.id, page_request
            )
            return await self._enrich_page(page, {parent.id: parent.video_id})

    async def all_page(self, page_request: PageRequest) -> Page[EnrichedComment]:
        """Get one enriched page of every comment, newest first."""
        with logfire.span(
            "view_service.all_page",
            page=page_request.page,
            page_size=page_request.page_size,
        ):
            page = await self.comment_service.list_all(page_request)
            return await self._enrich_page(page, {})

    async def owner_profile(self, owner_id: UserId) -> PublicProfile:
        """Resolve the profile a new or edited comment will be shown with.

        Called before writing so a comment is never stored for an owner
        that cannot be displayed.

        Raises:
            DependencyError: If the profile could not be resolved
        """
        profiles = await self._fetch_profiles([owner_id])
        return profiles[owner_id]

    async def enrich(
        self, comment: Comment, owner: PublicProfile | None = None
    ) -> EnrichedComment:
        """Enrich a single comment (used for create/update responses).

        Args:
            comment: Stored comment
            owner: Owner profile already resolved by the caller, if any
        """
        video_id = await self.thread_service.resolve_video_id(comment)
        if owner is None:
            owner = await self.owner_profile(comment.owner_id)
        return EnrichedComment.compose(comment, owner, video_id)

    async def _enrich_page(
        self, page: Page[Comment], parent_videos: dict[CommentId, VideoId]
    ) -> Page[EnrichedComment]:
        profiles = await self._fetch_profiles([c.owner_id for c in page.items])

        items = []
        for comment in page.items:
            if comment.video_id is not None:
                video_id = comment.video_id
            elif comment.parent_comment_id in parent_videos:
                video_id = parent_videos[comment.parent_comment_id]
            else:
                video_id = await self.thread_service.resolve_video_id(comment)
                parent_videos[comment.parent_comment_id] = video_id
            items.append(
                EnrichedComment.compose(comment, profiles[comment.owner_id], video_id)
            )

        return Page(
            items=items,
            total=page.total,
            page=page.page,
            page_size=page.page_size,
        )

    async def _fetch_profiles(
        self, owner_ids: list[UserId]
    ) -> dict[UserId, PublicProfile]:
        unique_ids = list(dict.fromkeys(owner_ids))
        if not unique_ids:
            return {}

        try:
            profiles = await self.profile_repository.find_profiles(unique_ids)
        except Exception as e:
            logfire.error(
                "Profile lookup failed", count=len(unique_ids), error=str(e)
            )
            raise DependencyError("Owner profile lookup failed") from e

        missing = [uid for uid in unique_ids if uid not in profiles]
        if missing:
            logfire.error(
                "Owner profiles missing",
                missing=[str(uid) for uid in missing],
            )
            raise DependencyError(f"Owner profile unavailable for user {missing[0]}")

        return profiles
