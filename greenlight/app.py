from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from greenlight.infrastructure.config.settings import APP_VERSION, Settings
from greenlight.infrastructure.logging.logger import setup_logging
from greenlight.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from greenlight.infrastructure.persistence.database import create_engine, ping
from greenlight.presentation.routers import healthcheck, movies

logger = StdLoggerAdapter(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app_settings = settings or Settings()
        setup_logging(app_settings.LOG_LEVEL)

        engine = create_engine(app_settings)
        try:
            await ping(engine, timeout=app_settings.DB_CONNECT_TIMEOUT)
        except Exception:
            logger.exception("could not reach the database")
            await engine.dispose()
            raise
        logger.info("database connection pool established")

        app.state.settings = app_settings
        app.state.engine = engine
        logger.info("starting server env=%s version=%s", app_settings.ENV, APP_VERSION)
        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(title="greenlight", version=APP_VERSION, lifespan=lifespan)
    app.include_router(healthcheck.router)
    app.include_router(movies.router)
    return app


app = create_app()
