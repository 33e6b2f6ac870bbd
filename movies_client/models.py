from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter


class Movie(BaseModel):
    """A movie as exchanged with the movie service.

    Every field is optional so the same type can describe a partial update.
    Field names match the wire format.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    movie_id: int | None = None
    name: str | None = None
    cast: str | None = None
    year: int | None = None
    release_date: date | None = None

    def to_create_payload(self) -> dict[str, Any]:
        # movie_id is assigned by the service
        return self.model_dump(mode="json", exclude={"movie_id"}, exclude_none=True)

    def to_patch_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


MOVIE = TypeAdapter(Movie)
MOVIE_LIST = TypeAdapter(list[Movie])
