"""Blocking client for the movie catalog REST service."""

from .errors import ErrorKind, MovieClientError
from .logging_setup import configure_logging
from .models import Movie
from .results import Failure, Result, Success, capture
from .services import MovieRequest, MovieServiceTransport, MoviesRestClient
from .settings import AppSettings, get_settings

__all__ = [
    "AppSettings",
    "ErrorKind",
    "Failure",
    "Movie",
    "MovieClientError",
    "MovieRequest",
    "MovieServiceTransport",
    "MoviesRestClient",
    "Result",
    "Success",
    "capture",
    "configure_logging",
    "get_settings",
]
