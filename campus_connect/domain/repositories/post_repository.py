from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from ..models.post import Post
from ..models.filters import PostFilter
from ..models.mutation import Mutation
from ..models.pagination import PageRequest


class PostRepository(ABC):
    """Repository interface - defines contract for post data access"""

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID; a malformed ID finds nothing"""
        pass

    @abstractmethod
    async def list(self, post_filter: PostFilter, page: PageRequest) -> Tuple[List[Post], int]:
        """Return one page of posts, newest first, plus the total match count"""
        pass

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Insert a new post"""
        pass

    @abstractmethod
    async def apply(self, post_id: str, mutation: Mutation[Post]) -> Post:
        """Persist a mutation atomically and return the stored post"""
        pass

    @abstractmethod
    async def delete(self, post_id: str) -> bool:
        """Hard delete; returns False when nothing was deleted"""
        pass
