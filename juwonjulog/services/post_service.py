# juwonjulog/services/post_service.py
import logging
from typing import List

from juwonjulog.exceptions import PostNotFound
from juwonjulog.models.post import MAX_POST_ID, Post
from juwonjulog.models.schemas import PostCreate, PostEdit, PostResponse, PostSearch
from juwonjulog.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


class PostService:
    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository

    async def write(self, post_create: PostCreate) -> None:
        """게시글을 작성합니다. 제목에 금칙어가 있으면 InvalidRequest."""
        post_create.validate_rules()

        post = Post(title=post_create.title, content=post_create.content)
        await self.post_repository.create(post)

    async def get(self, post_id: int) -> PostResponse:
        post = await self._find(post_id)
        return PostResponse.from_post(post)

    async def get_list(self, post_search: PostSearch) -> List[PostResponse]:
        posts = await self.post_repository.get_all(post_search.offset, post_search.size)
        return [PostResponse.from_post(post) for post in posts]

    async def edit(self, post_id: int, post_edit: PostEdit) -> None:
        post = await self._find(post_id)
        post.edit(post_edit.title, post_edit.content)

        # Row may have been deleted between the read and the write
        if await self.post_repository.update(post) is None:
            raise PostNotFound()
        logger.info(f"Post {post_id} edited")

    async def delete(self, post_id: int) -> None:
        if not self._storable(post_id) or not await self.post_repository.delete(post_id):
            raise PostNotFound()
        logger.info(f"Post {post_id} deleted")

    async def count(self) -> int:
        return await self.post_repository.count()

    @staticmethod
    def _storable(post_id: int) -> bool:
        return 1 <= post_id <= MAX_POST_ID

    async def _find(self, post_id: int) -> Post:
        # ids outside the column range cannot exist
        if not self._storable(post_id):
            raise PostNotFound()
        post = await self.post_repository.get_by_id(post_id)
        if post is None:
            raise PostNotFound()
        return post
