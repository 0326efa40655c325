from greenlight.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from greenlight.domain.exceptions import ValidationError
from greenlight.domain.models.movie import validate_movie
from greenlight.domain.ports.repositories.movie_repository import MovieRepository
from greenlight.domain.validator import Validator


class UpdateMovieUseCase:
    """Apply a partial update to a stored movie.

    The version read here is the one the store compares against, so a write
    that lands between the read and the update surfaces as an edit conflict.
    """

    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int, movie_data: MovieSchema) -> MoviePublic:
        movie = await self.movie_repository.get(movie_id)

        for field, value in movie_data.model_dump(exclude_none=True).items():
            setattr(movie, field, value)

        v = Validator()
        validate_movie(v, movie)
        if not v.valid():
            raise ValidationError(v.errors)

        updated_movie = await self.movie_repository.update(movie)

        return MoviePublic.model_validate(updated_movie)
