# juwonjulog/config.py
import os
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

# Prometheus Metrics Configuration
REQUEST_LATENCY_BUCKETS = (
    0.001,
    0.005,
    0.01,
    0.025,
    0.05,
    0.075,
    0.1,
    0.25,
    0.5,
    0.75,
    1.0,
    2.5,
    5.0,
    10.0,
)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


@dataclass
class ServerConfig:
    """blog-service 서버 실행 설정"""
    host: str = field(default_factory=lambda: os.getenv('HOST', '0.0.0.0'))
    port: int = field(default_factory=lambda: int(os.getenv('PORT', '8005')))
    allowed_origins: List[str] = field(
        default_factory=lambda: os.getenv('ALLOWED_ORIGINS', '*').split(',')
    )


@dataclass
class DatabaseConfig:
    """게시글 저장소 설정 (SQLite 또는 PostgreSQL)"""
    use_postgres: bool = field(default_factory=lambda: _env_flag('USE_POSTGRES', 'false'))
    database_path: str = field(default_factory=lambda: os.getenv('BLOG_DATABASE_PATH', '/app/blog.db'))
    host: str = field(default_factory=lambda: os.getenv('POSTGRES_HOST', 'postgresql-service'))
    port: int = field(default_factory=lambda: int(os.getenv('POSTGRES_PORT', '5432')))
    database: str = field(default_factory=lambda: os.getenv('POSTGRES_DB', 'juwonjulog'))
    user: str = field(default_factory=lambda: os.getenv('POSTGRES_USER', 'postgres'))
    password: str = field(default_factory=lambda: os.getenv('POSTGRES_PASSWORD', ''))
    ssl_mode: str = field(default_factory=lambda: os.getenv('POSTGRES_SSLMODE', 'disable').lower())
    min_pool_size: int = 5
    max_pool_size: int = 20

    def __post_init__(self):
        if self.use_postgres and not self.password:
            raise ValueError(
                "POSTGRES_PASSWORD environment variable is required for PostgreSQL. "
                "Please set it in Kubernetes Secret or environment variables."
            )

    @property
    def ssl_enabled(self) -> bool:
        # asyncpg uses the ssl parameter, not sslmode
        return self.ssl_mode not in ('disable', 'false', 'no', '0')

    def pool_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for asyncpg.create_pool()."""
        return {
            'host': self.host,
            'port': self.port,
            'database': self.database,
            'user': self.user,
            'password': self.password,
            'ssl': self.ssl_enabled,
            'min_size': self.min_pool_size,
            'max_size': self.max_pool_size,
        }


@dataclass
class MetricsConfig:
    """Prometheus 메트릭 설정"""
    enabled: bool = field(default_factory=lambda: _env_flag('METRICS_ENABLED', 'true'))
    latency_buckets: tuple = REQUEST_LATENCY_BUCKETS


class Config:
    def __init__(
        self,
        server: Optional[ServerConfig] = None,
        database: Optional[DatabaseConfig] = None,
        metrics: Optional[MetricsConfig] = None,
    ):
        self.server = server or ServerConfig()
        self.database = database or DatabaseConfig()
        self.metrics = metrics or MetricsConfig()

        if self.database.use_postgres:
            logger.info("🐘 Using PostgreSQL database for blog posts")
        else:
            logger.info("💾 Using SQLite database for blog posts")
