"""
Shared data models for the movie master platform
"""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError


# Fields every stored movie must carry, in the order errors are reported
REQUIRED_FIELDS = ("movie_name", "details", "genre", "actor", "release_date")


class MovieInput(BaseModel):
    """Movie data submitted on create and update

    Fields outside the schema are tolerated and stored as submitted.
    ``release_date`` is not checked beyond being a non-empty string.
    """
    movie_name: StrictStr = Field(..., min_length=1)
    details: StrictStr = Field(..., min_length=1)
    genre: StrictStr = Field(..., min_length=1)
    actor: StrictStr = Field(..., min_length=1)
    release_date: StrictStr = Field(..., min_length=1)

    model_config = ConfigDict(extra="allow")


class Movie(MovieInput):
    """Stored movie record"""
    id: StrictStr = Field(..., min_length=1)


class SearchResult(BaseModel):
    """Projection returned by the search endpoint"""
    id: str
    movie_name: str


def _error_message(error: Dict[str, Any]) -> str:
    field = error["loc"][0] if error["loc"] else "body"
    if error["type"] == "string_type":
        return f"{field} must be a `string` type"
    return f"{field} is a required field"


def validate_movie(payload: Dict[str, Any]) -> List[str]:
    """Validate a submitted movie against the required-field schema.

    Returns an empty list when the payload is valid, otherwise one message per
    violated field. All violations are collected, not just the first.
    """
    try:
        MovieInput.model_validate(payload)
    except ValidationError as e:
        return [_error_message(error) for error in e.errors()]
    return []
