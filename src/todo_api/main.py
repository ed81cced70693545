"""Entry point for the task board FastAPI application."""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.routers import api_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.middleware import CorrelationIdMiddleware
from .deps import SettingsDependency
from .errors import register_exception_handlers
from .repositories import TaskRepository, UserRepository
from .schemas.system import RootResponse
from .seed import seed_demo_tasks
from .storage import UploadStorage


def _normalise_prefix(raw_prefix: str) -> str:
    router_prefix = raw_prefix.strip()
    if router_prefix and not router_prefix.startswith("/"):
        router_prefix = f"/{router_prefix}"
    router_prefix = router_prefix.rstrip("/")
    if router_prefix == "/":
        router_prefix = ""
    return router_prefix


def create_app(settings: Settings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""

    settings = settings or get_settings()
    configure_logging(settings)

    router_prefix = _normalise_prefix(settings.api_prefix)
    openapi_url = "/openapi.json" if not router_prefix else f"{router_prefix}/openapi.json"

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        summary="In-memory task board with image attachments and a minimal account flow.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=openapi_url,
    )

    storage = UploadStorage(settings.upload_dir, settings.upload_url_prefix)
    storage.ensure_directory()

    application.state.settings = settings
    application.state.task_repository = TaskRepository()
    application.state.user_repository = UserRepository()
    application.state.upload_storage = storage

    if settings.seed_demo_data:
        seed_demo_tasks(application.state.task_repository)

    application.add_middleware(CorrelationIdMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    application.mount(
        storage.url_prefix,
        StaticFiles(directory=storage.directory),
        name="uploads",
    )

    if router_prefix:
        application.include_router(api_router, prefix=router_prefix)
    else:
        application.include_router(api_router)

    @application.get("/", response_model=RootResponse, summary="Service metadata")
    async def read_root(settings: SettingsDependency) -> RootResponse:
        """Expose minimal service metadata at the root endpoint."""
        return RootResponse(
            name=settings.project_name,
            environment=settings.environment,
            version=settings.version,
            api_prefix=router_prefix,
        )

    register_exception_handlers(application)

    return application


def run() -> None:
    """Console entry point installed as ``todo-api``."""

    settings: Settings = get_settings()
    uvicorn.run(
        "todo_api.main:create_app",
        factory=True,
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":  # pragma: no cover - manual execution entry-point
    run()
