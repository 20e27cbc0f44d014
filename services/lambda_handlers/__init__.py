"""
Lambda entry points for the movie API
"""
from .movies import (
    create_movie,
    delete_movie,
    get_movie,
    lambda_handler,
    list_movies,
    search_movies,
    update_movie,
)

__all__ = [
    "create_movie",
    "delete_movie",
    "get_movie",
    "lambda_handler",
    "list_movies",
    "search_movies",
    "update_movie",
]
