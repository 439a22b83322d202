# Application factory and ASGI entry point
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import auth_router, health_router, notes_router
from .config import Settings, get_settings
from .core.errors import register_exception_handlers
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import MessageResponse
from .database import create_tables, dispose_engine

setup_logging()
logger = get_logger("main")


def _lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Starting Jotter",
            extra={"version": __version__, "environment": settings.environment, "port": settings.port},
        )
        if not settings.secret_key:
            # the server still boots; every token operation answers 500
            logger.critical("SECRET_KEY is not set, auth and note routes will fail")

        if settings.skip_lifespan_db:
            logger.info("Table creation skipped (SKIP_LIFESPAN_DB)")
        else:
            await create_tables()
            logger.info("Database tables ready")

        yield

        await dispose_engine()
        logger.info("Jotter stopped")

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app with middleware, error handlers and routers."""
    settings = settings or get_settings()

    application = FastAPI(
        title=settings.app_name,
        description="Personal notes API with bearer-token auth",
        version=__version__,
        lifespan=_lifespan(settings),
    )

    application.add_middleware(LoggingMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(application)

    for router in (auth_router, notes_router, health_router):
        application.include_router(router, prefix="/api")

    @application.get("/", response_model=MessageResponse)
    async def root():
        return MessageResponse(message="API is running...")

    return application


app = create_app()


def run():
    """Console entry point: serve with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("jotter.main:app", host=settings.host, port=settings.port, reload=settings.reload)


if __name__ == "__main__":
    run()
