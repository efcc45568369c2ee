"""juwonjulog blog-post API."""

__version__ = "0.1.0"
