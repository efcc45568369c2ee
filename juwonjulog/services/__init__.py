# juwonjulog/services/__init__.py
from juwonjulog.services.post_service import PostService

__all__ = ["PostService"]
