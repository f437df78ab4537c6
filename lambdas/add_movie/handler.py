"""
Add Movie Lambda Handler.

Serves POST /movies (Cognito-protected). The request body is a movie
object with an integer id; it is written with a full PutItem, replacing any
existing movie with the same id.
"""

import json
import logging
from typing import Any, Dict

from lambdas.shared.events import json_body, loggable_event
from lambdas.shared.models import MovieIn
from lambdas.shared.responses import HandlerResult, ok, server_error, to_response
from lambdas.shared.store import MovieStore, get_store

# Setup logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)


def add_movie(event: Dict[str, Any], store: MovieStore) -> HandlerResult:
    """
    Validate the body and write the movie.

    Args:
        event: API Gateway proxy event
        store: MovieStore bound to the deployment settings

    Returns:
        SuccessResult (201) with the written movie, or a 500 ErrorResult for
        a missing/malformed body or a store fault
    """
    try:
        movie = MovieIn.model_validate(json_body(event)).to_item()
        store.put_movie(movie)
    except Exception as e:
        logger.error(f"Failed to add movie: {e}", exc_info=True)
        return server_error(e)

    logger.info(f"Added movie {movie['id']}")
    return ok({"message": "Movie added", "movie": movie}, status_code=201)


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda entry point for POST /movies."""
    logger.info(f"Event: {json.dumps(loggable_event(event))}")

    try:
        store = get_store()
    except Exception as e:
        logger.error(f"Failed to initialize store: {e}", exc_info=True)
        return to_response(server_error(e))

    return to_response(add_movie(event, store))
