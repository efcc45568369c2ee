# juwonjulog/models/__init__.py
from juwonjulog.models.post import Post

__all__ = ["Post"]
