from __future__ import annotations

import logging
from typing import Callable, TypeVar

import httpx

from ..errors import MovieClientError
from ..models import MOVIE, MOVIE_LIST, Movie
from ..settings import AppSettings, get_settings
from . import request_builder
from .request_builder import MovieRequest
from .transport import MovieServiceTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _movie(response: httpx.Response) -> Movie:
	return MOVIE.validate_json(response.content)


def _movie_list(response: httpx.Response) -> list[Movie]:
	return MOVIE_LIST.validate_json(response.content)


def _text(response: httpx.Response) -> str:
	return response.text


class MoviesRestClient:
	"""Blocking client for the movie service.

	Each operation sends exactly one request and either returns the decoded
	body or raises ``MovieClientError``.
	"""

	def __init__(self, transport: MovieServiceTransport, *, call_timeout: float | None = None) -> None:
		self._transport = transport
		self._call_timeout = call_timeout

	@classmethod
	def from_settings(cls, settings: AppSettings | None = None) -> MoviesRestClient:
		settings = settings or get_settings()
		return cls(MovieServiceTransport.from_settings(settings), call_timeout=settings.MOVIES_CALL_TIMEOUT)

	@property
	def transport(self) -> MovieServiceTransport:
		return self._transport

	@property
	def call_timeout(self) -> float | None:
		return self._call_timeout

	def retrieve_all_movies(self, *, timeout: float | None = None) -> list[Movie]:
		return self._execute(request_builder.all_movies(), _movie_list, timeout)

	def retrieve_movie_by_id(self, movie_id: int, *, timeout: float | None = None) -> Movie:
		return self._execute(request_builder.movie_by_id(movie_id), _movie, timeout)

	def retrieve_movies_by_name(self, name: str, *, timeout: float | None = None) -> list[Movie]:
		return self._execute(request_builder.movies_by_name(name), _movie_list, timeout)

	def retrieve_movies_by_year(self, year: int, *, timeout: float | None = None) -> list[Movie]:
		return self._execute(request_builder.movies_by_year(year), _movie_list, timeout)

	def add_movie(self, movie: Movie, *, timeout: float | None = None) -> Movie:
		return self._execute(request_builder.add_movie(movie), _movie, timeout)

	def update_movie(self, movie_id: int, patch: Movie, *, timeout: float | None = None) -> Movie:
		return self._execute(request_builder.update_movie(movie_id, patch), _movie, timeout)

	def delete_movie(self, movie_id: int, *, timeout: float | None = None) -> str:
		# Success is the 2xx status; the confirmation text is not inspected
		return self._execute(request_builder.delete_movie(movie_id), _text, timeout)

	def _execute(
		self,
		request: MovieRequest,
		decode: Callable[[httpx.Response], T],
		timeout: float | None,
	) -> T:
		deadline = timeout if timeout is not None else self._call_timeout
		try:
			response = self._transport.call(request, timeout=deadline)
			response.raise_for_status()
			return decode(response)
		except httpx.HTTPStatusError as exc:
			logger.error(
				"Remote rejected %s (%s %s). Status code is %s and message is %s",
				request.operation,
				request.method,
				request.url,
				exc.response.status_code,
				exc.response.text,
			)
			raise MovieClientError.remote_rejected(request.method, request.url, exc.response) from None
		except (httpx.HTTPError, TimeoutError, ValueError) as exc:
			# ValueError covers malformed JSON and shape validation on a 2xx body
			logger.error(
				"Exception in %s (%s %s). Message is %s",
				request.operation,
				request.method,
				request.url,
				exc,
			)
			raise MovieClientError.transport_failure(request.method, request.url, exc) from exc

	def close(self) -> None:
		self._transport.close()

	def __enter__(self) -> MoviesRestClient:
		return self

	def __exit__(self, *exc_info) -> None:
		self.close()
