import time
import traceback
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from granian import Granian
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.v1.errors import app_error_handler
from app.api.v1.routers.live_stream import router as live_stream_router
from app.app_config import AppEnvironConfig, get_app_environ_config
from app.domain.live.live_stream._catalog import (
    EventCatalog,
    InMemoryEventCatalog,
    load_event_catalog,
)
from app.domain.live.live_stream.live_stream_domain import LiveStreamService
from app.shared.api.utils import api_failure, init_logger, validation_exception_handler
from app.utils.app_errors import AppError, AppErrorCode


class HTTPLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):  # type: ignore
        start_time = time.time()
        request_id = str(uuid.uuid4())[:8]

        logger.info(f"[{request_id}] {request.method} {request.url.path}")

        try:
            response = await call_next(request)

            process_time = (time.time() - start_time) * 1000
            logger.info(
                f"[{request_id}] {request.method} {request.url.path} - "
                f"Status: {response.status_code} - "
                f"Duration: {process_time:.2f}ms"
            )

            return response

        except Exception as exc:
            process_time = (time.time() - start_time) * 1000
            logger.error(
                f"[{request_id}] Unhandled exception in {request.method} {request.url.path} - "
                f"Duration: {process_time:.2f}ms - "
                f"Error: {type(exc).__name__}: {exc}\n"
                f"Traceback:\n{traceback.format_exc()}"
            )

            failure = api_failure(
                errcode=AppErrorCode.E_INTERNAL_ERROR.value,
                errmesg=f"Internal server error (request_id: {request_id})",
            )
            return ORJSONResponse(
                status_code=500,
                content=failure.model_dump(),
            )


def build_event_catalog(cfg: AppEnvironConfig) -> EventCatalog:
    if not cfg.LIVE_STREAM_CATALOG_PATH:
        logger.warning("LIVE_STREAM_CATALOG_PATH not configured, starting with an empty event catalog")
        return InMemoryEventCatalog()
    return load_event_catalog(cfg.LIVE_STREAM_CATALOG_PATH)


@asynccontextmanager
async def lifespan(server: FastAPI):
    cfg = get_app_environ_config()
    init_logger(cfg.DEBUG)

    logger.info("Application startup...")

    server.state.live_stream_service = LiveStreamService(build_event_catalog(cfg), cfg=cfg)

    yield

    logger.info("Application shutdown...")


app = FastAPI(
    version="1.0",
    title="Live Stream Access API",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    default_response_class=ORJSONResponse,
    lifespan=lifespan,
)

app.add_middleware(HTTPLoggingMiddleware)

app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore
app.add_exception_handler(AppError, app_error_handler)  # type: ignore

app.include_router(live_stream_router, prefix="/api/v1")


def build_granian_kwargs():
    cfg = get_app_environ_config()
    return {
        "interface": "asgi",
        "address": cfg.API_HOST,
        "port": cfg.API_PORT,
        "workers": cfg.API_WORKERS,
        "reload": cfg.DEBUG,
    }


if __name__ == "__main__":
    Granian("app.main:app", **build_granian_kwargs()).serve()
