"""Path templates of the movie service (relative to the base URL)."""

GET_ALL_MOVIES_V1 = "/movieservice/v1/allMovies"
GET_MOVIE_BY_ID = "/movieservice/v1/movie/{id}"
GET_MOVIES_BY_NAME = "/movieservice/v1/movieName"
GET_MOVIES_BY_YEAR = "/movieservice/v1/movieYear"
ADD_MOVIE_V1 = "/movieservice/v1/movie"
UPDATE_MOVIE_V1 = "/movieservice/v1/movie/{id}"
DELETE_MOVIE_BY_ID_V1 = "/movieservice/v1/movie/{id}"

MOVIE_NAME_PARAM = "movie_name"
MOVIE_YEAR_PARAM = "year"
