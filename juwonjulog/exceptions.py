# juwonjulog/exceptions.py
from typing import Dict, Optional


class JuwonjulogException(Exception):
    """Base class for errors rendered as the JSON error envelope."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.validation: Dict[str, str] = {}

    def add_validation(self, field_name: str, message: str) -> None:
        self.validation[field_name] = message


class InvalidRequest(JuwonjulogException):
    status_code = 400
    MESSAGE = "잘못된 요청입니다."

    def __init__(self, field_name: Optional[str] = None, message: Optional[str] = None):
        super().__init__(self.MESSAGE)
        if field_name is not None:
            self.add_validation(field_name, message or "")


class PostNotFound(JuwonjulogException):
    status_code = 404
    MESSAGE = "존재하지 않는 글입니다."

    def __init__(self):
        super().__init__(self.MESSAGE)
