# juwonjulog/models/schemas.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from juwonjulog.exceptions import InvalidRequest
from juwonjulog.models.post import Post

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 2000
# keeps (page - 1) * size inside a 64-bit OFFSET
MAX_PAGE = 2147483647
TITLE_PREVIEW_LENGTH = 10
FORBIDDEN_TITLE_WORD = "욕"


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass
class FieldError:
    field: str
    message: str


@dataclass
class ValidationResult:
    """Outcome of a required-field check: ok, or the field errors in declaration order."""
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def first_error(self) -> Optional[FieldError]:
        return self.errors[0] if self.errors else None


class PostCreate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None

    def check_required(self) -> ValidationResult:
        result = ValidationResult()
        if is_blank(self.title):
            result.errors.append(FieldError("title", "제목을 입력해주세요."))
        if is_blank(self.content):
            result.errors.append(FieldError("content", "내용을 입력해주세요."))
        return result

    def validate_rules(self) -> None:
        """Business rules that run after the required-field check."""
        if self.title and FORBIDDEN_TITLE_WORD in self.title:
            raise InvalidRequest("title", "제목에 욕을 포함할 수 없습니다.")


class PostEdit(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


class PostSearch(BaseModel):
    page: int = 1
    size: int = DEFAULT_PAGE_SIZE

    @field_validator('page')
    @classmethod
    def coerce_page(cls, v: int) -> int:
        return min(max(v, 1), MAX_PAGE)

    @field_validator('size')
    @classmethod
    def clamp_size(cls, v: int) -> int:
        return min(max(v, 1), MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (max(self.page, 1) - 1) * self.size


class PostResponse(BaseModel):
    id: int
    title: str
    content: str

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            title=post.title[:TITLE_PREVIEW_LENGTH],
            content=post.content,
        )


class ErrorResponse(BaseModel):
    code: str
    message: str
    validation: Dict[str, str] = Field(default_factory=dict)
