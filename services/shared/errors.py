"""
Domain errors and their mapping to HTTP-style responses
"""
from enum import Enum
from typing import Any, Dict, List

from .responses import build_response


class ErrorKind(str, Enum):
    """Client-correctable failure kinds"""
    VALIDATION = "validation"
    MALFORMED_INPUT = "malformed_input"
    INVALID_QUERY = "invalid_query"
    NOT_FOUND = "not_found"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.MALFORMED_INPUT: 400,
    ErrorKind.INVALID_QUERY: 400,
    ErrorKind.NOT_FOUND: 404,
}


class MovieApiError(Exception):
    """Base class for failures recovered into a 4xx response"""
    kind: ErrorKind

    def body(self) -> Dict[str, Any]:
        return {"error": str(self)}


class ValidationError(MovieApiError):
    """One or more required fields are missing or invalid"""
    kind = ErrorKind.VALIDATION

    def __init__(self, messages: List[str]):
        super().__init__("; ".join(messages))
        self.messages = list(messages)

    def body(self) -> Dict[str, Any]:
        return {"errors": self.messages}


class MalformedInputError(MovieApiError):
    """Request body could not be parsed as a JSON object"""
    kind = ErrorKind.MALFORMED_INPUT

    def __init__(self, detail: str):
        super().__init__(f"invalid request body format: {detail}")
        self.detail = detail


class InvalidQueryError(MovieApiError):
    """Search path segment is not of the form movie_name=<value>"""
    kind = ErrorKind.INVALID_QUERY

    def __init__(self, detail: str):
        super().__init__(f"invalid search query: {detail}")
        self.detail = detail


class NotFoundError(MovieApiError):
    """Referenced movie id does not exist"""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, movie_id: str = ""):
        super().__init__("not found")
        self.movie_id = movie_id


def classify_error(e: MovieApiError) -> Dict[str, Any]:
    """Map a domain error to its response.

    Only ``MovieApiError`` is classified here; anything else is left to
    propagate to the hosting runtime.
    """
    return build_response(STATUS_BY_KIND[e.kind], e.body())
