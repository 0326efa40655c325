from greenlight.applications.interfaces.dtos.message import Message
from greenlight.domain.ports.repositories.movie_repository import MovieRepository


class DeleteMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int) -> Message:
        await self.movie_repository.delete(movie_id)
        return Message(message="movie successfully deleted")
