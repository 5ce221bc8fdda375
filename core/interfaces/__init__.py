from core.interfaces.repositories import (
    ITableRepository,
    ISectionRepository,
    IPageRepository,
    IBlogRepository,
    IPlayerRepository,
    IFAQRepository,
    IRoleRepository,
    IProfileRepository,
    IStatisticsRepository,
)
from core.interfaces.auth import IAuthProvider, AuthProviderError

__all__ = [
    # Repositories
    "ITableRepository",
    "ISectionRepository",
    "IPageRepository",
    "IBlogRepository",
    "IPlayerRepository",
    "IFAQRepository",
    "IRoleRepository",
    "IProfileRepository",
    "IStatisticsRepository",
    # Auth
    "IAuthProvider",
    "AuthProviderError",
]
