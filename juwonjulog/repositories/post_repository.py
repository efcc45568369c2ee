# juwonjulog/repositories/post_repository.py
import logging
from typing import Optional, List

import aiosqlite

from juwonjulog.database import BlogDatabase
from juwonjulog.models.post import Post
from juwonjulog.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _deleted_rows(status: str) -> int:
    """Parse asyncpg's "DELETE N" command status."""
    return int(status.split()[-1]) if status and status.startswith('DELETE') else 0


class PostRepository(BaseRepository[Post]):
    """Repository for Post entity operations."""

    def __init__(self, database: BlogDatabase):
        self.db = database

    @property
    def use_postgres(self) -> bool:
        return self.db.use_postgres

    async def get_by_id(self, post_id: int) -> Optional[Post]:
        """Fetch single post by ID."""
        query = "SELECT id, title, content FROM posts WHERE id = "

        if self.use_postgres:
            query += "$1"
            async with self.db.pool.acquire() as conn:
                row = await conn.fetchrow(query, post_id)
                return Post.from_row(row) if row else None
        else:
            query += "?"
            async with aiosqlite.connect(self.db.database_path) as conn:
                conn.row_factory = aiosqlite.Row
                cursor = await conn.execute(query, (post_id,))
                row = await cursor.fetchone()
                return Post.from_row(row) if row else None

    async def get_all(self, offset: int = 0, limit: int = 10) -> List[Post]:
        """Fetch paginated posts, ordered by id DESC."""
        base_query = "SELECT id, title, content FROM posts ORDER BY id DESC"

        if self.use_postgres:
            async with self.db.pool.acquire() as conn:
                rows = await conn.fetch(base_query + " LIMIT $1 OFFSET $2", limit, offset)
                return [Post.from_row(row) for row in rows]
        else:
            async with aiosqlite.connect(self.db.database_path) as conn:
                conn.row_factory = aiosqlite.Row
                cursor = await conn.execute(base_query + " LIMIT ? OFFSET ?", (limit, offset))
                rows = await cursor.fetchall()
                return [Post.from_row(row) for row in rows]

    async def create(self, post: Post) -> Post:
        """Insert a new post and return it with the assigned id."""
        if self.use_postgres:
            async with self.db.pool.acquire() as conn:
                post.id = await conn.fetchval(
                    "INSERT INTO posts (title, content) VALUES ($1, $2) RETURNING id",
                    post.title, post.content
                )
        else:
            async with aiosqlite.connect(self.db.database_path) as conn:
                cursor = await conn.execute(
                    "INSERT INTO posts (title, content) VALUES (?, ?)",
                    (post.title, post.content)
                )
                post.id = cursor.lastrowid
                await conn.commit()

        logger.info(f"Post created with ID {post.id}")
        return post

    async def update(self, post: Post) -> Optional[Post]:
        """Write title and content of an existing post."""
        if self.use_postgres:
            async with self.db.pool.acquire() as conn:
                status = await conn.execute(
                    "UPDATE posts SET title = $1, content = $2 WHERE id = $3",
                    post.title, post.content, post.id
                )
                updated = status != "UPDATE 0"
        else:
            async with aiosqlite.connect(self.db.database_path) as conn:
                cursor = await conn.execute(
                    "UPDATE posts SET title = ?, content = ? WHERE id = ?",
                    (post.title, post.content, post.id)
                )
                await conn.commit()
                updated = cursor.rowcount > 0

        return post if updated else None

    async def delete(self, post_id: int) -> bool:
        """Delete a post."""
        if self.use_postgres:
            async with self.db.pool.acquire() as conn:
                result = await conn.execute("DELETE FROM posts WHERE id = $1", post_id)
                return result != "DELETE 0"
        else:
            async with aiosqlite.connect(self.db.database_path) as conn:
                cursor = await conn.execute("DELETE FROM posts WHERE id = ?", (post_id,))
                await conn.commit()
                return cursor.rowcount > 0

    async def delete_all(self) -> int:
        """Delete every post. Returns number of deleted posts."""
        if self.use_postgres:
            async with self.db.pool.acquire() as conn:
                return _deleted_rows(await conn.execute("DELETE FROM posts"))
        else:
            async with aiosqlite.connect(self.db.database_path) as conn:
                cursor = await conn.execute("DELETE FROM posts")
                await conn.commit()
                return cursor.rowcount

    async def count(self) -> int:
        """Get total number of posts."""
        if self.use_postgres:
            async with self.db.pool.acquire() as conn:
                count = await conn.fetchval("SELECT COUNT(*) FROM posts")
                return count or 0
        else:
            async with aiosqlite.connect(self.db.database_path) as conn:
                cursor = await conn.execute("SELECT COUNT(*) FROM posts")
                row = await cursor.fetchone()
                return row[0] if row else 0
