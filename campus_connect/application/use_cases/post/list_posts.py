# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.filters import PostFilter
from ....domain.models.pagination import PageInfo, PageRequest
from ...dto.post_dto import PostListResponse
from ...services.presenters import post_user_ids, present_pagination, present_post
from ...services.reference_expander import UserReferenceExpander


class ListPostsUseCase:
    """Use case for the post feed, newest first"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        author_id: Optional[str] = None,
    ) -> PostListResponse:
        page_request = PageRequest(page=page, limit=limit)
        posts, total = await self.post_repository.list(
            PostFilter(search=search, author_id=author_id), page_request
        )
        users = await self.expander.load(
            [user_id for post in posts for user_id in post_user_ids(post)]
        )
        return PostListResponse(
            posts=[present_post(post, users) for post in posts],
            pagination=present_pagination(PageInfo.from_total(page_request, total)),
        )
