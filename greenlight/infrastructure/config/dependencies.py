from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from greenlight.domain.ports.repositories.movie_repository import MovieRepository
from greenlight.domain.ports.services.logger import LoggerPort
from greenlight.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)
from greenlight.infrastructure.config.settings import Settings
from greenlight.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from greenlight.infrastructure.persistence.database import get_session


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("greenlight.data")


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_movie_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> MovieRepository:
    return SQLAlchemyMovieRepository(session, logger)
