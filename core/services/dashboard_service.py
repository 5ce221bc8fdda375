"""
Dashboard service - numbers for the role dashboards.
"""

import logging

from core.domain import constants
from core.domain.models import DashboardStats
from core.interfaces.repositories import IBlogRepository, IProfileRepository, IRoleRepository, IStatisticsRepository

logger = logging.getLogger(__name__)


class DashboardService:

    def __init__(
        self,
        role_repo: IRoleRepository,
        profile_repo: IProfileRepository,
        stats_repo: IStatisticsRepository,
        blog_repo: IBlogRepository,
    ):
        self.role_repo = role_repo
        self.profile_repo = profile_repo
        self.stats_repo = stats_repo
        self.blog_repo = blog_repo

    async def admin_stats(self) -> DashboardStats:
        """Each block is fetched independently; a failed block stays empty."""
        stats = DashboardStats()
        try:
            stats.role_counts = await self.role_repo.count_by_role()
            stats.total_users = await self.profile_repo.count()
        except Exception as e:
            logger.error(f"Error fetching dashboard stats: {e}")

        try:
            # Rows come newest first; keep the first value seen per metric
            for row in await self.stats_repo.get_latest():
                stats.statistics.setdefault(row.metric_name, row.metric_value)
        except Exception as e:
            logger.error(f"Error fetching statistics: {e}")

        try:
            stats.recent_posts = await self.blog_repo.list_all(limit=constants.RECENT_POSTS_LIMIT)
        except Exception as e:
            logger.error(f"Error fetching blog posts: {e}")
        return stats
