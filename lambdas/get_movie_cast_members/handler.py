"""
Get Movie Cast Members Lambda Handler.

Serves GET /movies/cast?movieId=...[&actorName=...][&roleName=...].

This function is deployed with TABLE_NAME pointing at the MovieCast table.
Results come back in DynamoDB order (actorName, or roleName when the
roleIx index is used); they are not re-sorted here.
"""

import json
import logging
from typing import Any, Dict

from lambdas.shared.events import loggable_event, parse_movie_id, query_parameter
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


def get_movie_cast_members(event: Dict[str, Any], store: MovieStore) -> HandlerResult:
    """
    Query cast entries under one movie.

    Args:
        event: API Gateway proxy event
        store: MovieStore whose TABLE_NAME is the cast table

    Returns:
        SuccessResult with {"data": [...]}, or ErrorResult
    """
    movie_id = parse_movie_id(query_parameter(event, "movieId"))
    if movie_id is None:
        return not_found("Missing movie Id")

    actor_name = query_parameter(event, "actorName")
    role_name = query_parameter(event, "roleName")

    try:
        cast = store.query_cast(
            movie_id,
            table_name=store.settings.require_table(),
            actor_name=actor_name,
            role_name=role_name,
        )
    except Exception as e:
        logger.error(f"Failed to query cast for movie {movie_id}: {e}", exc_info=True)
        return server_error(e)

    logger.info(f"Found {len(cast)} cast entries for movie {movie_id}")
    return ok({"data": cast})


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda entry point for GET /movies/cast."""
    logger.info(f"Event: {json.dumps(loggable_event(event))}")

    try:
        store = get_store()
    except Exception as e:
        logger.error(f"Failed to initialize store: {e}", exc_info=True)
        return to_response(server_error(e))

    return to_response(get_movie_cast_members(event, store))
