from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, urlencode

from .. import constants
from ..models import Movie


@dataclass(frozen=True)
class MovieRequest:
	operation: str
	method: str
	# path (and encoded query) relative to the transport's base URL
	url: str
	json: dict[str, Any] | None = None


def _expand(template: str, movie_id: int) -> str:
	return template.format(id=movie_id)


def _with_query(path: str, params: dict[str, Any]) -> str:
	# Percent-encoded once here (space -> %20, reserved chars escaped);
	# the same string is sent and logged
	return f"{path}?{urlencode(params, quote_via=quote)}"


def all_movies() -> MovieRequest:
	return MovieRequest("retrieve_all_movies", "GET", constants.GET_ALL_MOVIES_V1)


def movie_by_id(movie_id: int) -> MovieRequest:
	return MovieRequest("retrieve_movie_by_id", "GET", _expand(constants.GET_MOVIE_BY_ID, movie_id))


def movies_by_name(name: str) -> MovieRequest:
	url = _with_query(constants.GET_MOVIES_BY_NAME, {constants.MOVIE_NAME_PARAM: name})
	return MovieRequest("retrieve_movies_by_name", "GET", url)


def movies_by_year(year: int) -> MovieRequest:
	url = _with_query(constants.GET_MOVIES_BY_YEAR, {constants.MOVIE_YEAR_PARAM: year})
	return MovieRequest("retrieve_movies_by_year", "GET", url)


def add_movie(movie: Movie) -> MovieRequest:
	return MovieRequest("add_movie", "POST", constants.ADD_MOVIE_V1, movie.to_create_payload())


def update_movie(movie_id: int, patch: Movie) -> MovieRequest:
	url = _expand(constants.UPDATE_MOVIE_V1, movie_id)
	return MovieRequest("update_movie", "PUT", url, patch.to_patch_payload())


def delete_movie(movie_id: int) -> MovieRequest:
	return MovieRequest("delete_movie", "DELETE", _expand(constants.DELETE_MOVIE_BY_ID_V1, movie_id))
