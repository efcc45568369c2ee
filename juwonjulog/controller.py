# juwonjulog/controller.py
import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from juwonjulog.exceptions import InvalidRequest, JuwonjulogException
from juwonjulog.models.schemas import (
    DEFAULT_PAGE_SIZE,
    ErrorResponse,
    PostCreate,
    PostEdit,
    PostResponse,
    PostSearch,
)
from juwonjulog.services.post_service import PostService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_post_service(request: Request) -> PostService:
    return request.app.state.application.post_service


# --- 에러 응답 ---
async def handle_juwonjulog_exception(request: Request, exc: JuwonjulogException) -> JSONResponse:
    body = ErrorResponse(
        code=str(exc.status_code),
        message=exc.message,
        validation=exc.validation,
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 파싱 실패도 400 에러 객체로 변환합니다 (첫 번째 오류만)."""
    errors = exc.errors()
    invalid = InvalidRequest()
    if errors:
        first = errors[0]
        location = first.get("loc") or ("body",)
        invalid.add_validation(str(location[-1]), first.get("msg", ""))
    logger.info(f"Request validation failed on {request.url.path}: {invalid.validation}")
    return await handle_juwonjulog_exception(request, invalid)


# --- API 핸들러 함수 ---
@router.post("/posts")
async def create_post(post_create: PostCreate, service: PostService = Depends(get_post_service)):
    """글 등록"""
    result = post_create.check_required()
    if not result.ok:
        first = result.first_error()
        raise InvalidRequest(first.field, first.message)

    await service.write(post_create)
    return {}


@router.get("/posts/{post_id}", response_model=PostResponse)
async def handle_get_post_by_id(post_id: int, service: PostService = Depends(get_post_service)):
    """ID로 특정 게시물을 찾아 반환합니다."""
    return await service.get(post_id)


@router.get("/posts", response_model=List[PostResponse])
async def handle_get_posts(
    page: int = Query(1),
    size: int = Query(DEFAULT_PAGE_SIZE),
    service: PostService = Depends(get_post_service),
):
    """게시물 목록을 반환합니다 (id 내림차순, 페이지네이션)."""
    return await service.get_list(PostSearch(page=page, size=size))


@router.patch("/posts/{post_id}")
async def edit_post(post_id: int, post_edit: PostEdit, service: PostService = Depends(get_post_service)):
    await service.edit(post_id, post_edit)
    return {}


@router.delete("/posts/{post_id}")
async def delete_post(post_id: int, service: PostService = Depends(get_post_service)):
    await service.delete(post_id)
    return {}


@router.get("/health")
async def handle_health():
    """Kubernetes를 위한 헬스 체크 엔드포인트"""
    return {"status": "ok", "service": "blog-service"}


@router.get("/stats")
async def handle_stats(service: PostService = Depends(get_post_service)):
    """대시보드를 위한 통계 엔드포인트"""
    try:
        post_count = await service.count()
    except Exception as e:
        logger.error(f"Failed to get post count: {e}", exc_info=True)
        post_count = 0

    return {
        "blog_service": {
            "service_status": "online",
            "post_count": post_count
        }
    }
