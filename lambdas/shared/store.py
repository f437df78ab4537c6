"""
DynamoDB access for the movie handlers.

DynamoDB Schema:
- Movies table: partition key id (NUMBER)
- MovieCast table: partition key movieId (NUMBER), sort key actorName (STRING)
- LSI roleIx on MovieCast: sort key roleName (STRING)

Every call is a fresh lookup; nothing is cached besides the boto3 resource.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional

import boto3
from boto3.dynamodb.conditions import Attr, Key

from .settings import HandlerSettings, get_settings

logger = logging.getLogger(__name__)

ROLE_INDEX_NAME = "roleIx"


class MovieStore:
    """Thin wrapper over the movies and cast tables."""

    def __init__(self, settings: HandlerSettings, dynamodb=None):
        """
        Initialize the store.

        Args:
            settings: Handler settings with table names and region
            dynamodb: Optional boto3 DynamoDB service resource
        """
        self.settings = settings
        self.dynamodb = dynamodb or boto3.resource(
            "dynamodb", region_name=settings.region
        )

    def _table(self, table_name: str):
        return self.dynamodb.Table(table_name)

    @property
    def movies_table(self):
        return self._table(self.settings.require_table())

    @property
    def has_cast_table(self) -> bool:
        return bool(self.settings.cast_table_name)

    def get_movie(self, movie_id: int) -> Optional[Dict[str, Any]]:
        response = self.movies_table.get_item(Key={"id": movie_id})
        return response.get("Item")

    def list_movies(self) -> List[Dict[str, Any]]:
        # Single scan page; the catalog is small and bounded
        response = self.movies_table.scan()
        return response.get("Items", [])

    def put_movie(self, movie: Dict[str, Any]) -> None:
        self.movies_table.put_item(Item=movie)

    def delete_movie(self, movie_id: int) -> None:
        self.movies_table.delete_item(Key={"id": movie_id})

    def query_cast(
        self,
        movie_id: int,
        table_name: Optional[str] = None,
        actor_name: Optional[str] = None,
        role_name: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Query cast entries for a movie.

        Args:
            movie_id: Partition key value
            table_name: Cast table (defaults to CAST_TABLE_NAME)
            actor_name: Optional actorName prefix
            role_name: Optional roleName prefix, queried through roleIx

        Returns:
            Cast entries in store order
        """
        table = self._table(table_name or self.settings.cast_table_name)
        key_condition = Key("movieId").eq(movie_id)
        query_args: Dict[str, Any] = {}

        if role_name:
            query_args["IndexName"] = ROLE_INDEX_NAME
            key_condition = key_condition & Key("roleName").begins_with(role_name)
            if actor_name:
                query_args["FilterExpression"] = Attr("actorName").begins_with(actor_name)
        elif actor_name:
            key_condition = key_condition & Key("actorName").begins_with(actor_name)

        response = table.query(KeyConditionExpression=key_condition, **query_args)
        return response.get("Items", [])


@lru_cache(maxsize=1)
def get_store() -> MovieStore:
    """
    Get the process-wide store (cached).

    Returns:
        MovieStore bound to the settings from get_settings()
    """
    return MovieStore(get_settings())
