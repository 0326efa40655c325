from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from greenlight.domain.models.runtime import Runtime


class MovieSchema(BaseModel):
    """Inbound movie payload.

    Every field is optional so that "not sent" stays distinguishable from a
    zero value; create requires them through validation, partial updates
    leave missing fields untouched.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    year: Optional[int] = None
    runtime: Optional[Runtime] = None
    genres: Optional[List[str]] = None


class MoviePublic(BaseModel):
    id: int
    title: str
    year: Optional[int] = None
    runtime: Optional[Runtime] = None
    genres: Optional[List[str]] = None
    version: int
    model_config = ConfigDict(from_attributes=True)


class MovieEnvelope(BaseModel):
    movie: MoviePublic
