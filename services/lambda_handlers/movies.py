"""
Lambda handlers for the movie API

One entry point per API Gateway route, plus ``lambda_handler`` which routes a
proxy event to the right one when the API is deployed as a single function.
Domain errors become 4xx responses; anything else propagates to the runtime.
"""
import logging
from typing import Any, Dict, Optional

from shared import config
from shared.database import database
from shared.errors import MovieApiError, NotFoundError, classify_error
from shared.repositories import MovieRepository
from shared.responses import build_response, empty_response

from .services import MovieService

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.app.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
# The Lambda runtime installs its own root handler, so basicConfig is a no-op there
logging.getLogger().setLevel(config.app.log_level.upper())
logger = logging.getLogger(__name__)

Event = Dict[str, Any]
Response = Dict[str, Any]


def get_repository() -> MovieRepository:
    return MovieRepository(database.table)


def get_movie_service() -> MovieService:
    """Movie service bound to the shared table handle"""
    return MovieService(repository=get_repository())


def _path_param(event: Event, name: str) -> Optional[str]:
    return (event.get("pathParameters") or {}).get(name)


def _client_error(e: MovieApiError) -> Response:
    detail = f"{str(e)} (id={e.movie_id!r})" if isinstance(e, NotFoundError) else str(e)
    logger.warning(f"Request rejected ({e.kind.value}): {detail}")
    return classify_error(e)


def create_movie(event: Event, context: Any = None) -> Response:
    """POST /movies"""
    try:
        movie = get_movie_service().create_movie(
            event.get("body"), bool(event.get("isBase64Encoded"))
        )
        return build_response(201, movie)
    except MovieApiError as e:
        return _client_error(e)


def get_movie(event: Event, context: Any = None) -> Response:
    """GET /movies/{id}"""
    try:
        movie = get_movie_service().get_movie(_path_param(event, "id"))
        return build_response(200, movie)
    except MovieApiError as e:
        return _client_error(e)


def update_movie(event: Event, context: Any = None) -> Response:
    """PUT /movies/{id}"""
    try:
        movie = get_movie_service().update_movie(
            _path_param(event, "id"), event.get("body"), bool(event.get("isBase64Encoded"))
        )
        return build_response(200, movie)
    except MovieApiError as e:
        return _client_error(e)


def delete_movie(event: Event, context: Any = None) -> Response:
    """DELETE /movies/{id}"""
    try:
        get_movie_service().delete_movie(_path_param(event, "id"))
        return empty_response(204)
    except MovieApiError as e:
        return _client_error(e)


def list_movies(event: Event, context: Any = None) -> Response:
    """GET /movies"""
    movies = get_movie_service().list_movies()
    return build_response(200, movies)


def search_movies(event: Event, context: Any = None) -> Response:
    """GET /movies/search/{queryParams}"""
    try:
        results = get_movie_service().search_movies(_path_param(event, "queryParams"))
        return build_response(200, results)
    except MovieApiError as e:
        return _client_error(e)


ROUTES = {
    ("POST", "/movies"): create_movie,
    ("GET", "/movies"): list_movies,
    ("GET", "/movies/search/{queryParams}"): search_movies,
    ("GET", "/movies/{id}"): get_movie,
    ("PUT", "/movies/{id}"): update_movie,
    ("DELETE", "/movies/{id}"): delete_movie,
}


def lambda_handler(event: Event, context: Any = None) -> Response:
    """Dispatch a proxy event by HTTP method and resource template"""
    method = (event.get("httpMethod") or "").upper()
    resource = event.get("resource") or ""
    handler = ROUTES.get((method, resource))
    if handler is None:
        logger.warning(f"No route for {method} {resource}")
        return classify_error(NotFoundError())
    logger.debug(f"Routing {method} {resource} to {handler.__name__}")
    return handler(event, context)
