from abc import ABC, abstractmethod

from greenlight.domain.models.movie import Movie


class MovieRepository(ABC):
    """Persistence port for movies.

    Callers validate movies before handing them to ``insert`` or ``update``;
    implementations store whatever they are given.
    """

    @abstractmethod
    async def insert(self, movie: Movie) -> Movie:
        """Persist a new movie and fill in its id, created_at and version."""
        pass

    @abstractmethod
    async def get(self, movie_id: int) -> Movie:
        """Fetch a movie by id, raising NotFoundError when there is none."""
        pass

    @abstractmethod
    async def update(self, movie: Movie) -> Movie:
        """Rewrite a movie whose stored version still equals ``movie.version``.

        The new version is written back into ``movie``. Raises NotFoundError
        when the id is gone and EditConflictError when the version moved on.
        """
        pass

    @abstractmethod
    async def delete(self, movie_id: int) -> None:
        pass
