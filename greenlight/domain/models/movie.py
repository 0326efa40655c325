from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel

from greenlight.domain.models.runtime import MAX_RUNTIME, Runtime
from greenlight.domain.validator import Validator, no_empty_strings, unique_strings

MAX_TITLE_LENGTH = 500
MAX_GENRES = 5
FIRST_FILM_YEAR = 1888


class Movie(BaseModel):
    title: str = ""
    year: Optional[int] = None
    runtime: Optional[Runtime] = None
    genres: Optional[List[str]] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    version: int = 0


def validate_movie(v: Validator, movie: Movie) -> None:
    """Record every rule violation of ``movie`` in ``v``.

    The year bound moves with the calendar, so a movie dated the current
    year only stays valid until it is checked against a later year.
    """
    v.check(movie.title != "", "title", "must be provided")
    v.check(len(movie.title.encode("utf-8")) < MAX_TITLE_LENGTH, "title", "must not be more than 500 bytes long")

    v.check(movie.year is not None, "year", "must be provided")
    v.check(
        movie.year is not None and FIRST_FILM_YEAR < movie.year <= date.today().year,
        "year",
        "must be between 1888 and the current year",
    )

    v.check(movie.runtime is not None, "runtime", "must be provided")
    v.check(movie.runtime is not None and movie.runtime > 0, "runtime", "must be a positive integer")
    v.check(
        movie.runtime is None or movie.runtime <= MAX_RUNTIME, "runtime", "must not be more than 2147483647 minutes"
    )

    genres = movie.genres or []
    v.check(movie.genres is not None, "genres", "must be provided")
    v.check(no_empty_strings(genres), "genres", "must not contain empty values")
    v.check(1 <= len(genres) <= MAX_GENRES, "genres", "must contain between 1 and 5 genres")
    v.check(unique_strings(genres), "genres", "must not contain duplicate values")
