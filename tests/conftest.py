"""
juwonjulog 테스트를 위한 pytest fixtures
"""
import os
import sys
import pytest
import pytest_asyncio
import tempfile
from fastapi.testclient import TestClient

# 프로젝트 루트를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from juwonjulog.app import create_app
from juwonjulog.config import Config, DatabaseConfig, MetricsConfig, ServerConfig
from juwonjulog.database import BlogDatabase
from juwonjulog.repositories.post_repository import PostRepository
from juwonjulog.services.post_service import PostService


@pytest.fixture
def temp_db_path():
    """테스트용 임시 SQLite 데이터베이스 경로"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield os.path.join(tmpdir, 'test_blog.db')


@pytest.fixture
def test_config(temp_db_path):
    """SQLite + 메트릭 비활성화 설정"""
    return Config(
        server=ServerConfig(host='127.0.0.1', port=8005, allowed_origins=['http://localhost:3000']),
        database=DatabaseConfig(use_postgres=False, database_path=temp_db_path),
        metrics=MetricsConfig(enabled=False),
    )


@pytest_asyncio.fixture
async def database(test_config):
    db = BlogDatabase(test_config.database)
    await db.initialize()
    yield db
    await db.close()


@pytest.fixture
def post_repository(database):
    return PostRepository(database)


@pytest.fixture
def post_service(post_repository):
    return PostService(post_repository)


@pytest.fixture
def client(test_config):
    """lifespan까지 실행되는 TestClient"""
    with TestClient(create_app(test_config)) as test_client:
        yield test_client


@pytest.fixture
def sample_post():
    """테스트용 게시물 데이터"""
    return {
        'title': '글 제목',
        'content': '글 내용...',
    }


@pytest.fixture
def sample_posts():
    """테스트용 다중 게시물 데이터 (title_1 ~ title_30)"""
    return [
        {'title': f'title_{i}', 'content': f'content_{i}'}
        for i in range(1, 31)
    ]
