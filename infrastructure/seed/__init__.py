"""Seed data loaded into the tables when the database stack is created."""

from .batch import generate_batch
from .movies import MOVIES, MOVIE_CASTS

__all__ = [
    "generate_batch",
    "MOVIES",
    "MOVIE_CASTS",
]
