from .movies_rest_client import MoviesRestClient
from .request_builder import MovieRequest
from .transport import MovieServiceTransport

__all__ = ["MoviesRestClient", "MovieRequest", "MovieServiceTransport"]
