from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from greenlight.domain.exceptions import BackendError, EditConflictError, NotFoundError
from greenlight.domain.models.movie import Movie as DomainMovie
from greenlight.domain.models.runtime import Runtime
from greenlight.domain.ports.repositories.movie_repository import MovieRepository
from greenlight.domain.ports.services.logger import LoggerPort
from greenlight.infrastructure.persistence.models import Movie as SQLMovie


class SQLAlchemyMovieRepository(MovieRepository):
    def __init__(self, session: AsyncSession, logger: LoggerPort):
        self.session = session
        self.logger = logger

    def _to_domain(self, sql_movie: SQLMovie) -> DomainMovie:
        return DomainMovie(
            id=sql_movie.id,
            created_at=sql_movie.created_at,
            title=sql_movie.title,
            year=sql_movie.year,
            runtime=Runtime(sql_movie.runtime),
            genres=list(sql_movie.genres),
            version=sql_movie.version,
        )

    def _column_values(self, movie: DomainMovie) -> dict:
        return {
            "title": movie.title,
            "year": movie.year,
            "runtime": int(movie.runtime) if movie.runtime is not None else None,
            "genres": movie.genres,
        }

    async def _fail(self, operation: str, error: SQLAlchemyError) -> BackendError:
        try:
            await self.session.rollback()
        except SQLAlchemyError as rollback_error:
            self.logger.error("movie %s rollback failed: %s", operation, rollback_error)
        self.logger.error("movie %s failed: %s", operation, error)
        return BackendError(f"movie {operation} failed", cause=error)

    async def insert(self, movie: DomainMovie) -> DomainMovie:
        stmt = (
            insert(SQLMovie)
            .values(**self._column_values(movie))
            .returning(SQLMovie.id, SQLMovie.created_at, SQLMovie.version)
        )
        try:
            result = await self.session.execute(stmt)
            row = result.one()
            await self.session.commit()
        except SQLAlchemyError as e:
            raise await self._fail("insert", e) from e

        movie.id, movie.created_at, movie.version = row.id, row.created_at, row.version
        self.logger.debug("inserted movie id=%s", movie.id)
        return movie

    async def get(self, movie_id: int) -> DomainMovie:
        # identities start at 1, nothing to look up below that
        if movie_id < 1:
            raise NotFoundError(f"movie {movie_id} not found")

        query = select(SQLMovie).where(SQLMovie.id == movie_id).execution_options(populate_existing=True)
        try:
            result = await self.session.execute(query)
            sql_movie = result.scalar_one()
        except NoResultFound:
            raise NotFoundError(f"movie {movie_id} not found")
        except SQLAlchemyError as e:
            raise await self._fail("get", e) from e

        return self._to_domain(sql_movie)

    async def update(self, movie: DomainMovie) -> DomainMovie:
        stmt = (
            update(SQLMovie)
            .where(SQLMovie.id == movie.id, SQLMovie.version == movie.version)
            .values(**self._column_values(movie), version=SQLMovie.version + 1)
            .returning(SQLMovie.version)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            new_version = result.scalar_one_or_none()
            if new_version is None:
                await self.session.rollback()
                raise await self._classify_missed_update(movie)
            await self.session.commit()
        except SQLAlchemyError as e:
            raise await self._fail("update", e) from e

        movie.version = new_version
        self.logger.debug("updated movie id=%s version=%s", movie.id, movie.version)
        return movie

    async def _classify_missed_update(self, movie: DomainMovie) -> Exception:
        stored = await self.session.scalar(select(SQLMovie.id).where(SQLMovie.id == movie.id))
        if stored is None:
            return NotFoundError(f"movie {movie.id} not found")
        self.logger.info("edit conflict on movie id=%s version=%s", movie.id, movie.version)
        return EditConflictError(f"movie {movie.id} was modified concurrently")

    async def delete(self, movie_id: int) -> None:
        if movie_id < 1:
            raise NotFoundError(f"movie {movie_id} not found")

        stmt = delete(SQLMovie).where(SQLMovie.id == movie_id).execution_options(synchronize_session=False)
        try:
            result = await self.session.execute(stmt)
            if result.rowcount == 0:
                await self.session.rollback()
                raise NotFoundError(f"movie {movie_id} not found")
            await self.session.commit()
        except SQLAlchemyError as e:
            raise await self._fail("delete", e) from e

        self.logger.debug("deleted movie id=%s", movie_id)
