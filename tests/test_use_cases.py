import pytest

from greenlight.applications.interfaces.dtos.message import Message
from greenlight.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from greenlight.applications.use_cases.movie.create_movie import CreateMovieUseCase
from greenlight.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from greenlight.applications.use_cases.movie.get_movie import GetMovieUseCase
from greenlight.applications.use_cases.movie.update_movie import UpdateMovieUseCase
from greenlight.domain.exceptions import EditConflictError, NotFoundError, ValidationError

from .factories import movie_factory


async def _store_assigns_identity(movie):
    movie.id = 1
    movie.version = 1
    return movie


async def _store_bumps_version(movie):
    movie.version += 1
    return movie


class TestCreateMovieUseCase:
    @pytest.fixture
    def movie_schema(self):
        return MovieSchema(**movie_factory.create_movie_data())

    @pytest.mark.asyncio
    async def test_create_movie_success(self, mock_movie_repository, movie_schema):
        mock_movie_repository.insert.side_effect = _store_assigns_identity

        result = await CreateMovieUseCase(mock_movie_repository).execute(movie_schema)

        assert isinstance(result, MoviePublic)
        assert result.id == 1
        assert result.version == 1
        assert result.title == "Titanic"
        assert result.runtime == 195
        mock_movie_repository.insert.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_movie_never_reaches_store(self, mock_movie_repository):
        schema = MovieSchema(**movie_factory.create_movie_data(title="", genres=["drama", "drama"]))

        with pytest.raises(ValidationError) as exc_info:
            await CreateMovieUseCase(mock_movie_repository).execute(schema)

        assert exc_info.value.errors == {
            "title": "must be provided",
            "genres": "must not contain duplicate values",
        }
        mock_movie_repository.insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_fields_are_reported(self, mock_movie_repository):
        with pytest.raises(ValidationError) as exc_info:
            await CreateMovieUseCase(mock_movie_repository).execute(MovieSchema())

        assert set(exc_info.value.errors) == {"title", "year", "runtime", "genres"}


class TestGetMovieUseCase:
    @pytest.mark.asyncio
    async def test_get_movie(self, mock_movie_repository):
        mock_movie_repository.get.return_value = movie_factory.create_stored_movie(id=3)

        result = await GetMovieUseCase(mock_movie_repository).execute(3)

        assert result.id == 3
        mock_movie_repository.get.assert_awaited_once_with(3)

    @pytest.mark.asyncio
    async def test_get_movie_not_found(self, mock_movie_repository):
        mock_movie_repository.get.side_effect = NotFoundError("movie 3 not found")

        with pytest.raises(NotFoundError):
            await GetMovieUseCase(mock_movie_repository).execute(3)


class TestUpdateMovieUseCase:
    @pytest.mark.asyncio
    async def test_partial_update_keeps_unsent_fields(self, mock_movie_repository):
        mock_movie_repository.get.return_value = movie_factory.create_stored_movie(id=3, version=4)
        mock_movie_repository.update.side_effect = _store_bumps_version

        result = await UpdateMovieUseCase(mock_movie_repository).execute(3, MovieSchema(title="Titanic 3D"))

        assert result.title == "Titanic 3D"
        assert result.year == 1997
        assert result.runtime == 195
        assert result.genres == ["drama", "romance"]
        assert result.version == 5

        sent = mock_movie_repository.update.await_args.args[0]
        assert sent.id == 3

    @pytest.mark.asyncio
    async def test_store_sees_the_version_that_was_read(self, mock_movie_repository):
        mock_movie_repository.get.return_value = movie_factory.create_stored_movie(id=3, version=4)

        async def check_version(movie):
            assert movie.version == 4
            raise EditConflictError("movie 3 was modified concurrently")

        mock_movie_repository.update.side_effect = check_version

        with pytest.raises(EditConflictError):
            await UpdateMovieUseCase(mock_movie_repository).execute(3, MovieSchema(year=1998))

    @pytest.mark.asyncio
    async def test_invalid_update_never_reaches_store(self, mock_movie_repository):
        mock_movie_repository.get.return_value = movie_factory.create_stored_movie(id=3)

        with pytest.raises(ValidationError) as exc_info:
            await UpdateMovieUseCase(mock_movie_repository).execute(3, MovieSchema(genres=[]))

        assert exc_info.value.errors == {"genres": "must contain between 1 and 5 genres"}
        mock_movie_repository.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_missing_movie(self, mock_movie_repository):
        mock_movie_repository.get.side_effect = NotFoundError("movie 3 not found")

        with pytest.raises(NotFoundError):
            await UpdateMovieUseCase(mock_movie_repository).execute(3, MovieSchema(title="x"))

        mock_movie_repository.update.assert_not_called()


class TestDeleteMovieUseCase:
    @pytest.mark.asyncio
    async def test_delete_movie(self, mock_movie_repository):
        result = await DeleteMovieUseCase(mock_movie_repository).execute(3)

        assert result == Message(message="movie successfully deleted")
        mock_movie_repository.delete.assert_awaited_once_with(3)

    @pytest.mark.asyncio
    async def test_delete_missing_movie(self, mock_movie_repository):
        mock_movie_repository.delete.side_effect = NotFoundError("movie 3 not found")

        with pytest.raises(NotFoundError):
            await DeleteMovieUseCase(mock_movie_repository).execute(3)
