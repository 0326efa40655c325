from greenlight.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from greenlight.domain.exceptions import ValidationError
from greenlight.domain.models.movie import Movie, validate_movie
from greenlight.domain.ports.repositories.movie_repository import MovieRepository
from greenlight.domain.validator import Validator


class CreateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_data: MovieSchema) -> MoviePublic:
        movie = Movie(
            title=movie_data.title or "",
            year=movie_data.year,
            runtime=movie_data.runtime,
            genres=movie_data.genres,
        )

        v = Validator()
        validate_movie(v, movie)
        if not v.valid():
            raise ValidationError(v.errors)

        created_movie = await self.movie_repository.insert(movie)

        return MoviePublic.model_validate(created_movie)
