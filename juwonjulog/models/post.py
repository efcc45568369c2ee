# juwonjulog/models/post.py
from dataclasses import dataclass
from typing import Any, Mapping, Optional

# SERIAL (int4) upper bound; also fits SQLite INTEGER
MAX_POST_ID = 2147483647


@dataclass
class Post:
    title: str
    content: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Post":
        """Build a Post from an asyncpg Record or aiosqlite Row."""
        return cls(id=row["id"], title=row["title"], content=row["content"])

    def edit(self, title: Optional[str], content: Optional[str]) -> None:
        """Overwrite title and content; None leaves the stored value (columns are NOT NULL)."""
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content
