from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response

from greenlight.applications.interfaces.dtos.message import Message
from greenlight.applications.interfaces.dtos.movie import MovieEnvelope, MovieSchema
from greenlight.applications.use_cases.movie.create_movie import CreateMovieUseCase
from greenlight.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from greenlight.applications.use_cases.movie.get_movie import GetMovieUseCase
from greenlight.applications.use_cases.movie.update_movie import UpdateMovieUseCase
from greenlight.domain.exceptions import BackendError, EditConflictError, NotFoundError, ValidationError
from greenlight.domain.ports.repositories.movie_repository import MovieRepository
from greenlight.infrastructure.config.dependencies import get_movie_repository
from greenlight.infrastructure.logging.std_logger_adapter import StdLoggerAdapter

logger = StdLoggerAdapter(__name__)

router = APIRouter(prefix="/v1/movies", tags=["movies"])

MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]

NOT_FOUND_MESSAGE = "the requested resource could not be found"
EDIT_CONFLICT_MESSAGE = "unable to update the record due to an edit conflict, please try again"
SERVER_ERROR_MESSAGE = "the server encountered a problem and could not process your request"


def _server_error(e: BackendError) -> HTTPException:
    logger.exception("backend failure: %s", e)
    return HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=SERVER_ERROR_MESSAGE)


@router.post("", status_code=HTTPStatus.CREATED, response_model=MovieEnvelope, response_model_exclude_none=True)
async def create_movie(movie: MovieSchema, response: Response, movie_repository: MovieRepositoryDep):
    try:
        use_case = CreateMovieUseCase(movie_repository)
        created = await use_case.execute(movie)
    except ValidationError as e:
        raise HTTPException(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, detail=e.errors)
    except BackendError as e:
        raise _server_error(e)

    response.headers["Location"] = f"/v1/movies/{created.id}"
    return MovieEnvelope(movie=created)


@router.get("/{movie_id}", response_model=MovieEnvelope, response_model_exclude_none=True)
async def show_movie(movie_id: int, movie_repository: MovieRepositoryDep):
    try:
        use_case = GetMovieUseCase(movie_repository)
        return MovieEnvelope(movie=await use_case.execute(movie_id))
    except NotFoundError:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    except BackendError as e:
        raise _server_error(e)


@router.patch("/{movie_id}", response_model=MovieEnvelope, response_model_exclude_none=True)
async def update_movie(movie_id: int, movie: MovieSchema, movie_repository: MovieRepositoryDep):
    try:
        use_case = UpdateMovieUseCase(movie_repository)
        return MovieEnvelope(movie=await use_case.execute(movie_id, movie))
    except ValidationError as e:
        raise HTTPException(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, detail=e.errors)
    except NotFoundError:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    except EditConflictError:
        raise HTTPException(status_code=HTTPStatus.CONFLICT, detail=EDIT_CONFLICT_MESSAGE)
    except BackendError as e:
        raise _server_error(e)


@router.delete("/{movie_id}", response_model=Message)
async def delete_movie(movie_id: int, movie_repository: MovieRepositoryDep):
    try:
        use_case = DeleteMovieUseCase(movie_repository)
        return await use_case.execute(movie_id)
    except NotFoundError:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    except BackendError as e:
        raise _server_error(e)
