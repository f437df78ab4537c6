"""
Shared pytest fixtures for the Lambda handler tests.

Provides:
- AWS credentials and handler environment variables
- moto-backed Movies and MovieCast tables (with the roleIx index)
- Seed movies and cast entries
- API Gateway proxy event builder
"""

import json
from typing import Any, Dict, Optional

import boto3
import pytest
from moto import mock_aws

from lambdas.shared.identity import get_identity_client
from lambdas.shared.settings import HandlerSettings, get_settings
from lambdas.shared.store import MovieStore, get_store

TEST_REGION = "us-east-1"
MOVIES_TABLE = "Movies-test"
CAST_TABLE = "MovieCast-test"

SAMPLE_MOVIES = [
    {
        "id": 1234,
        "title": "The Shawshank Redemption",
        "original_language": "en",
        "release_date": "1994-09-23",
        "genre_ids": [18, 80],
        "adult": False,
        "vote_count": 26000,
    },
    {
        "id": 2345,
        "title": "The Godfather",
        "original_language": "en",
        "release_date": "1972-03-14",
        "genre_ids": [18, 80],
        "adult": False,
        "vote_count": 19700,
    },
]

SAMPLE_CAST = [
    {"movieId": 1234, "actorName": "Tim Robbins", "roleName": "Andy Dufresne"},
    {"movieId": 1234, "actorName": "Morgan Freeman", "roleName": "Ellis Boyd 'Red' Redding"},
    {"movieId": 1234, "actorName": "Bob Gunton", "roleName": "Warden Norton"},
    {"movieId": 2345, "actorName": "Marlon Brando", "roleName": "Don Vito Corleone"},
]


def _clear_caches():
    get_settings.cache_clear()
    get_store.cache_clear()
    get_identity_client.cache_clear()


@pytest.fixture
def aws_env(monkeypatch):
    """Fake credentials plus the variables the compute stack injects."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)
    monkeypatch.setenv("REGION", TEST_REGION)
    monkeypatch.setenv("TABLE_NAME", MOVIES_TABLE)
    monkeypatch.setenv("CAST_TABLE_NAME", CAST_TABLE)
    _clear_caches()
    yield
    _clear_caches()


@pytest.fixture
def dynamodb(aws_env):
    """Create mock Movies and MovieCast tables."""
    with mock_aws():
        resource = boto3.resource("dynamodb", region_name=TEST_REGION)

        resource.create_table(
            TableName=MOVIES_TABLE,
            KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "N"}],
            BillingMode="PAY_PER_REQUEST",
        )

        resource.create_table(
            TableName=CAST_TABLE,
            KeySchema=[
                {"AttributeName": "movieId", "KeyType": "HASH"},
                {"AttributeName": "actorName", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "movieId", "AttributeType": "N"},
                {"AttributeName": "actorName", "AttributeType": "S"},
                {"AttributeName": "roleName", "AttributeType": "S"},
            ],
            LocalSecondaryIndexes=[
                {
                    "IndexName": "roleIx",
                    "KeySchema": [
                        {"AttributeName": "movieId", "KeyType": "HASH"},
                        {"AttributeName": "roleName", "KeyType": "RANGE"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                }
            ],
            BillingMode="PAY_PER_REQUEST",
        )

        yield resource


@pytest.fixture
def seeded(dynamodb):
    """Load the sample movies and cast entries."""
    movies = dynamodb.Table(MOVIES_TABLE)
    for movie in SAMPLE_MOVIES:
        movies.put_item(Item=movie)

    cast = dynamodb.Table(CAST_TABLE)
    for entry in SAMPLE_CAST:
        cast.put_item(Item=entry)

    return dynamodb


@pytest.fixture
def store(seeded):
    """MovieStore bound to the seeded mock tables."""
    return MovieStore(HandlerSettings(), dynamodb=seeded)


def make_event(
    method: str = "GET",
    path: str = "/movies",
    path_parameters: Optional[Dict[str, str]] = None,
    query: Optional[Dict[str, str]] = None,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Build a REST API Lambda proxy event."""
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)
    return {
        "resource": path,
        "path": path,
        "httpMethod": method,
        "headers": headers,
        "pathParameters": path_parameters,
        "queryStringParameters": query,
        "body": body,
        "isBase64Encoded": False,
        "requestContext": {"stage": "dev", "httpMethod": method},
    }


@pytest.fixture
def api_event():
    """Factory for API Gateway proxy events."""
    return make_event


def response_body(response: Dict[str, Any]) -> Dict[str, Any]:
    """Decode the JSON body of a proxy response."""
    return json.loads(response["body"])


@pytest.fixture
def body():
    return response_body
