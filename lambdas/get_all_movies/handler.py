"""
Get All Movies Lambda Handler.

Serves GET /movies with a single scan of the Movies table. There is no
pagination, filtering or sorting; the catalog is expected to stay small.
"""

import json
import logging
from typing import Any, Dict

from lambdas.shared.events import loggable_event
from lambdas.shared.responses import HandlerResult, ok, server_error, to_response
from lambdas.shared.store import MovieStore, get_store

# Setup logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)


def get_all_movies(store: MovieStore) -> HandlerResult:
    try:
        movies = store.list_movies()
    except Exception as e:
        logger.error(f"Failed to scan movies: {e}", exc_info=True)
        return server_error(e)

    logger.info(f"Returning {len(movies)} movies")
    return ok({"data": movies})


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda entry point for GET /movies."""
    logger.info(f"Event: {json.dumps(loggable_event(event))}")

    try:
        store = get_store()
    except Exception as e:
        logger.error(f"Failed to initialize store: {e}", exc_info=True)
        return to_response(server_error(e))

    return to_response(get_all_movies(store))
