# juwonjulog/application.py
import logging
from dataclasses import dataclass

from juwonjulog.config import Config
from juwonjulog.database import BlogDatabase
from juwonjulog.repositories.post_repository import PostRepository
from juwonjulog.services.post_service import PostService

logger = logging.getLogger(__name__)


@dataclass
class Application:
    """Everything a request handler needs, wired once at startup."""
    config: Config
    database: BlogDatabase
    post_repository: PostRepository
    post_service: PostService

    @classmethod
    def build(cls, config: Config) -> "Application":
        database = BlogDatabase(config.database)
        post_repository = PostRepository(database)
        return cls(
            config=config,
            database=database,
            post_repository=post_repository,
            post_service=PostService(post_repository),
        )

    async def start(self) -> None:
        await self.database.initialize()
        logger.info("Blog service initialized: database ready")

    async def close(self) -> None:
        await self.database.close()
        logger.info("Blog service shutdown: database closed")
