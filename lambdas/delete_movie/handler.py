"""
Delete Movie Lambda Handler.

Serves DELETE /movies/{movieId} (Cognito-protected). The delete is
unconditional, so removing an id that does not exist still succeeds.
Cast entries for the movie are left in place.
"""

import json
import logging
from typing import Any, Dict

from lambdas.shared.events import loggable_event, parse_movie_id, path_parameter
from lambdas.shared.responses import (
    HandlerResult,
    not_found,
    ok,
    server_error,
    to_response,
)
from lambdas.shared.store import MovieStore, get_store

# Setup logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)


def delete_movie(event: Dict[str, Any], store: MovieStore) -> HandlerResult:
    movie_id = parse_movie_id(path_parameter(event, "movieId"))
    if movie_id is None:
        return not_found("Missing movie Id")

    try:
        store.delete_movie(movie_id)
    except Exception as e:
        logger.error(f"Failed to delete movie {movie_id}: {e}", exc_info=True)
        return server_error(e)

    logger.info(f"Deleted movie {movie_id}")
    return ok({"message": "Movie deleted", "movieId": movie_id})


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda entry point for DELETE /movies/{movieId}."""
    logger.info(f"Event: {json.dumps(loggable_event(event))}")

    try:
        store = get_store()
    except Exception as e:
        logger.error(f"Failed to initialize store: {e}", exc_info=True)
        return to_response(server_error(e))

    return to_response(delete_movie(event, store))
