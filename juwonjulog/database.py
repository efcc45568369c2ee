# juwonjulog/database.py
import os
import logging
from typing import Optional

import aiosqlite
import asyncpg

from juwonjulog.config import DatabaseConfig

logger = logging.getLogger(__name__)


class BlogDatabase:
    def __init__(self, config: DatabaseConfig):
        self.config = config
        self.use_postgres = config.use_postgres
        self.database_path = config.database_path
        self.pool: Optional[asyncpg.Pool] = None
        self._initialized = False

    async def initialize(self):
        """Initialize database connection pool and schema."""
        if self._initialized:
            return

        if self.use_postgres:
            try:
                self.pool = await asyncpg.create_pool(**self.config.pool_kwargs())
                logger.info(f"PostgreSQL connection pool created: {self.config.host}:{self.config.port}")
                await self._initialize_postgres_schema()
            except Exception as e:
                logger.error(f"PostgreSQL pool creation failed: {e}", exc_info=True)
                raise
        else:
            await self._initialize_sqlite_schema()

        self._initialized = True

    async def _initialize_postgres_schema(self):
        """Initialize PostgreSQL database schema."""
        async with self.pool.acquire() as conn:
            await conn.execute('''
                CREATE TABLE IF NOT EXISTS posts (
                    id SERIAL PRIMARY KEY,
                    title TEXT NOT NULL,
                    content TEXT NOT NULL
                )
            ''')
        logger.info("PostgreSQL blog database schema initialized")

    async def _initialize_sqlite_schema(self):
        """Initialize SQLite database schema."""
        directory = os.path.dirname(self.database_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        async with aiosqlite.connect(self.database_path) as conn:
            # AUTOINCREMENT keeps ids monotonic after deletes
            await conn.execute('''
                CREATE TABLE IF NOT EXISTS posts (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    content TEXT NOT NULL
                )
            ''')
            await conn.commit()

        logger.info("SQLite blog database schema initialized")

    async def close(self):
        """Close database connection pool."""
        if self.use_postgres and self.pool:
            await self.pool.close()
            logger.info("PostgreSQL connection pool closed")
        self._initialized = False
