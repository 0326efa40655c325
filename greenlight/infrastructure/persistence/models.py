from datetime import datetime
from typing import List

from sqlalchemy import BigInteger, DateTime, Identity, Text, func, text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


@table_registry.mapped_as_dataclass
class Movie:
    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(BigInteger, Identity(), init=False, primary_key=True)
    title: Mapped[str] = mapped_column(Text)
    year: Mapped[int]
    runtime: Mapped[int]
    genres: Mapped[List[str]] = mapped_column(ARRAY(Text))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), init=False, server_default=func.now())
    version: Mapped[int] = mapped_column(init=False, server_default=text("1"))
