"""
Repository interfaces - abstractions for data access.
This allows swapping implementations (Supabase -> PostgreSQL -> in-memory for tests, etc.)
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar
from uuid import UUID

from core.domain.models import (
    AppRole,
    BlogPost,
    FAQ,
    Page,
    Player,
    Section,
    SiteStatistic,
    UserRoleRow,
)

T = TypeVar("T")


class ITableRepository(ABC, Generic[T]):
    """CRUD over one backend table"""

    @abstractmethod
    async def list_all(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        ascending: Optional[bool] = None,
        limit: Optional[int] = None,
    ) -> List[T]:
        """List rows, optionally filtered by equality and ordered"""
        pass

    @abstractmethod
    async def get_by_id(self, row_id: UUID) -> Optional[T]:
        pass

    @abstractmethod
    async def create(self, data: Dict[str, Any]) -> T:
        pass

    @abstractmethod
    async def update(self, row_id: UUID, data: Dict[str, Any]) -> Optional[T]:
        """Update a row; returns None when the row does not exist"""
        pass

    @abstractmethod
    async def delete(self, row_id: UUID) -> None:
        pass

    @abstractmethod
    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        pass


class ISectionRepository(ITableRepository[Section]):

    @abstractmethod
    async def get_active(self) -> List[Section]:
        """Active sections ordered by sort_order"""
        pass


class IPageRepository(ITableRepository[Page]):

    @abstractmethod
    async def get_published_by_slug(self, slug: str) -> Optional[Page]:
        pass


class IBlogRepository(ITableRepository[BlogPost]):

    @abstractmethod
    async def get_published(self, limit: Optional[int] = None) -> List[BlogPost]:
        """Published posts, newest first"""
        pass

    @abstractmethod
    async def get_published_by_slug(self, slug: str) -> Optional[BlogPost]:
        pass


class IPlayerRepository(ITableRepository[Player]):

    @abstractmethod
    async def get_homepage_players(self) -> List[Player]:
        """Players flagged for the homepage, featured first"""
        pass


class IFAQRepository(ITableRepository[FAQ]):

    @abstractmethod
    async def get_active(self) -> List[FAQ]:
        pass


class IRoleRepository(ABC):
    """Access to the user_roles table"""

    @abstractmethod
    async def get_roles(self, user_id: UUID) -> List[UserRoleRow]:
        pass

    @abstractmethod
    async def add_role(self, user_id: UUID, role: AppRole) -> UserRoleRow:
        pass

    @abstractmethod
    async def remove_role(self, user_id: UUID, role: AppRole) -> None:
        pass

    @abstractmethod
    async def count_by_role(self) -> Dict[str, int]:
        pass

    @abstractmethod
    async def any_with_role(self, role: AppRole) -> bool:
        pass


class IProfileRepository(ABC):

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def probe(self) -> bool:
        """Cheap one-row read used as a connectivity check"""
        pass


class IStatisticsRepository(ABC):

    @abstractmethod
    async def get_latest(self) -> List[SiteStatistic]:
        """All statistic rows, newest first"""
        pass
