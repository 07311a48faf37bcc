import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from kudos.admin.router import router as admin_router
from kudos.auth.router import router as auth_router
from kudos.backoffice import mount_backoffice
from kudos.core.cors import add_cors_middleware
from kudos.core.email import init_resend
from kudos.core.exception_handlers import register_exception_handlers
from kudos.core.logging import configure_logging
from kudos.core.request_logging import add_request_logging_middleware
from kudos.core.settings import Settings, get_settings
from kudos.db.engine import create_db_engine, create_tables
from kudos.health.router import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    init_resend(settings)
    if settings.db_create_tables:
        create_tables(app.state.engine)
    logger.info("Kudos API started (env=%s)", settings.env_name)
    yield
    app.state.engine.dispose()
    logger.info("Database engine disposed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application and its database engine.

    The engine lives on ``app.state.engine`` for the lifetime of the app;
    the lifespan disposes it on shutdown.
    """
    settings = settings or get_settings()
    engine = create_db_engine(settings.database_url)

    app = FastAPI(title="Kudos", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine

    api_router = APIRouter()
    api_router.include_router(health_router)
    api_router.include_router(auth_router)
    api_router.include_router(admin_router)
    app.include_router(api_router)

    add_request_logging_middleware(app)
    add_cors_middleware(app, settings)
    register_exception_handlers(app)

    mount_backoffice(app, engine, settings)
    return app


configure_logging()

app = create_app()
