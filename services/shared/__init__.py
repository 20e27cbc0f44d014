"""
Shared modules for movie master services
"""
from .models import Movie, MovieInput, SearchResult, validate_movie
from .config import config

__all__ = ["Movie", "MovieInput", "SearchResult", "validate_movie", "config"]
