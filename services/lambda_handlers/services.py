"""
Business logic service layer
"""
import base64
import binascii
import json
import logging
import uuid
from decimal import Decimal
from typing import Any, Dict, List, Optional

from shared.errors import InvalidQueryError, MalformedInputError, NotFoundError, ValidationError
from shared.models import validate_movie
from shared.repositories import MovieRepository

logger = logging.getLogger(__name__)

SEARCH_FIELD = "movie_name"
SEARCH_PROJECTION = ["id", "movie_name"]


def _reject_constant(name: str):
    raise MalformedInputError(f"invalid number {name}")


def parse_body(body: Optional[str], is_base64_encoded: bool = False) -> Dict[str, Any]:
    """Parse a request body into a JSON object

    API Gateway base64 encodes binary payloads and flags them with
    ``isBase64Encoded``; those are decoded as UTF-8 before parsing.
    """
    if body is None:
        raise MalformedInputError("request body is empty")
    if is_base64_encoded:
        try:
            body = base64.b64decode(body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise MalformedInputError(str(e)) from e
    try:
        # DynamoDB rejects float, so keep fractional numbers exact
        payload = json.loads(body, parse_float=Decimal, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise MalformedInputError(str(e)) from e
    if not isinstance(payload, dict):
        raise MalformedInputError("request body must be a JSON object")
    return payload


def parse_search_query(query_params: Optional[str]) -> str:
    """Extract the movie name from a ``movie_name=<value>`` path segment"""
    if not query_params or "=" not in query_params:
        raise InvalidQueryError(f"expected {SEARCH_FIELD}=<value>")
    _, value = query_params.split("=", 1)
    if not value:
        raise InvalidQueryError(f"{SEARCH_FIELD} must not be empty")
    return value


class MovieService:
    """Movie business logic service"""

    def __init__(self, repository: MovieRepository):
        self.repository = repository

    def _validated(self, body: Optional[str], is_base64_encoded: bool) -> Dict[str, Any]:
        payload = parse_body(body, is_base64_encoded)
        errors = validate_movie(payload)
        if errors:
            raise ValidationError(errors)
        return payload

    def get_movie(self, movie_id: Optional[str]) -> Dict[str, Any]:
        """Get movie by ID, raising NotFoundError if absent"""
        movie = self.repository.get(movie_id) if movie_id else None
        if movie is None:
            raise NotFoundError(movie_id or "")
        return movie

    def create_movie(self, body: Optional[str], is_base64_encoded: bool = False) -> Dict[str, Any]:
        """Create a new movie with a generated id"""
        payload = self._validated(body, is_base64_encoded)
        # Any client supplied id is replaced
        movie = {**payload, "id": str(uuid.uuid4())}
        self.repository.put(movie)
        logger.info(f"Created movie: {movie['movie_name']} ({movie['id']})")
        return movie

    def update_movie(self, movie_id: Optional[str], body: Optional[str],
                     is_base64_encoded: bool = False) -> Dict[str, Any]:
        """Fully replace an existing movie; the path id wins over any body id"""
        self.get_movie(movie_id)
        payload = self._validated(body, is_base64_encoded)
        movie = {**payload, "id": movie_id}
        self.repository.put(movie)
        logger.info(f"Updated movie: {movie['movie_name']} ({movie_id})")
        return movie

    def delete_movie(self, movie_id: Optional[str]) -> None:
        """Delete an existing movie"""
        self.get_movie(movie_id)
        self.repository.delete(movie_id)
        logger.info(f"Deleted movie: {movie_id}")

    def list_movies(self) -> List[Dict[str, Any]]:
        """All movies, in store order"""
        return self.repository.scan_all()

    def search_movies(self, query_params: Optional[str]) -> List[Dict[str, Any]]:
        """Exact, case-sensitive match on movie name"""
        movie_name = parse_search_query(query_params)
        results = self.repository.scan_filtered(SEARCH_FIELD, movie_name, SEARCH_PROJECTION)
        logger.debug(f"Search for {movie_name!r} matched {len(results)} movies")
        return results
