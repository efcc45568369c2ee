# juwonjulog/repositories/__init__.py
from juwonjulog.repositories.post_repository import PostRepository

__all__ = ["PostRepository"]
