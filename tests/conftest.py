"""
Shared fixtures: an in-memory movie repository standing in for DynamoDB.
"""

import copy
import json

import pytest

from lambda_handlers import movies


class InMemoryMovieRepository:
    """Dict-backed repository with the same contract as MovieRepository."""

    def __init__(self):
        self.items = {}

    def get(self, movie_id):
        item = self.items.get(movie_id)
        return copy.deepcopy(item) if item is not None else None

    def put(self, movie):
        self.items[movie["id"]] = copy.deepcopy(movie)
        return movie

    def delete(self, movie_id):
        self.items.pop(movie_id, None)

    def scan_all(self):
        return [copy.deepcopy(item) for item in self.items.values()]

    def scan_filtered(self, field_name, field_value, projected_fields):
        return [
            {field: item[field] for field in projected_fields if field in item}
            for item in self.items.values()
            if item.get(field_name) == field_value
        ]


@pytest.fixture
def repository(monkeypatch):
    """Route every handler to a fresh in-memory repository."""
    repo = InMemoryMovieRepository()
    monkeypatch.setattr(movies, "get_repository", lambda: repo)
    return repo


@pytest.fixture
def movie_payload():
    return {
        "movie_name": "Dune",
        "details": "A noble family becomes embroiled in a war for Arrakis.",
        "genre": "Sci-Fi",
        "actor": "Timothee Chalamet",
        "release_date": "2021-10-22",
    }


def make_event(method="GET", resource="/movies", path_parameters=None, body=None):
    """Build a minimal API Gateway proxy event."""
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)
    return {
        "httpMethod": method,
        "resource": resource,
        "pathParameters": path_parameters,
        "body": body,
    }


@pytest.fixture
def event():
    """Factory for proxy events."""
    return make_event
