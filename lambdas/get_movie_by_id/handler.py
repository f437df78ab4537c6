"""
Get Movie By Id Lambda Handler.

Serves GET /movies/{movieId}[?cast=true]:
1. Validates the movieId path parameter (404 without touching DynamoDB)
2. Fetches the movie by key (404 when absent)
3. When ?cast=true, queries the MovieCast table for the movie's cast
4. Returns {"movie": ..., "cast": [...]} with cast only when requested

A fault in either DynamoDB call returns 500; the primary fetch is not
returned on its own.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from lambdas.shared.events import (
    flag_enabled,
    loggable_event,
    parse_movie_id,
    path_parameter,
)
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


def get_movie_by_id(event: Dict[str, Any], store: MovieStore) -> HandlerResult:
    """
    Look up a movie and, optionally, its cast.

    Args:
        event: API Gateway proxy event
        store: MovieStore bound to the deployment settings

    Returns:
        SuccessResult with the movie (and cast), or ErrorResult
    """
    movie_id = parse_movie_id(path_parameter(event, "movieId"))
    if movie_id is None:
        return not_found("Missing movie Id")

    include_cast = flag_enabled(event, "cast")

    try:
        movie = store.get_movie(movie_id)
        if not movie:
            logger.info(f"Movie {movie_id} not found")
            return not_found("Invalid movie Id")

        cast: Optional[List[Dict[str, Any]]] = None
        if include_cast:
            cast = store.query_cast(movie_id) if store.has_cast_table else []
            logger.info(f"Found {len(cast)} cast entries for movie {movie_id}")

    except Exception as e:
        logger.error(f"Failed to get movie {movie_id}: {e}", exc_info=True)
        return server_error(e)

    body: Dict[str, Any] = {"movie": movie}
    if include_cast:
        body["cast"] = cast
    return ok(body)


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda entry point.

    Args:
        event: API Gateway proxy event
        context: Lambda context

    Returns:
        API Gateway proxy response
    """
    logger.info(f"Event: {json.dumps(loggable_event(event))}")

    try:
        store = get_store()
    except Exception as e:
        logger.error(f"Failed to initialize store: {e}", exc_info=True)
        return to_response(server_error(e))

    return to_response(get_movie_by_id(event, store))
