# juwonjulog/app.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from juwonjulog.application import Application
from juwonjulog.config import Config
from juwonjulog.controller import (
    handle_juwonjulog_exception,
    handle_request_validation_error,
    router,
)
from juwonjulog.exceptions import JuwonjulogException
from juwonjulog.metrics import configure_metrics


def create_app(config: Optional[Config] = None) -> FastAPI:
    config = config or Config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize and cleanup resources."""
        application = Application.build(config)
        await application.start()
        app.state.application = application
        yield
        await application.close()

    app = FastAPI(title="juwonjulog", lifespan=lifespan)

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )

    app.add_exception_handler(JuwonjulogException, handle_juwonjulog_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    if config.metrics.enabled:
        configure_metrics(app, config.metrics)

    app.include_router(router)
    return app
