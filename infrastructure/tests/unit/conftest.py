"""Shared helpers for the CDK stack tests."""

import aws_cdk as cdk
import pytest
from aws_cdk import aws_cognito as cognito, aws_dynamodb as dynamodb

# Skip Docker bundling of the dependencies layer during synthesis
NO_BUNDLING_CONTEXT = {"aws:cdk:bundling-stacks": []}


@pytest.fixture
def app():
    """CDK app that synthesizes assets without Docker bundling."""
    return cdk.App(context=NO_BUNDLING_CONTEXT)


@pytest.fixture
def dependencies(app):
    """Tables and user pool the compute stack is built against."""
    stack = cdk.Stack(app, "MockDependencies")
    movies_table = dynamodb.Table(
        stack,
        "MockMoviesTable",
        partition_key=dynamodb.Attribute(name="id", type=dynamodb.AttributeType.NUMBER),
    )
    cast_table = dynamodb.Table(
        stack,
        "MockCastTable",
        partition_key=dynamodb.Attribute(name="movieId", type=dynamodb.AttributeType.NUMBER),
        sort_key=dynamodb.Attribute(name="actorName", type=dynamodb.AttributeType.STRING),
    )
    user_pool = cognito.UserPool(stack, "MockUserPool")
    user_pool_client = user_pool.add_client("MockClient")
    return {
        "movies_table": movies_table,
        "cast_table": cast_table,
        "user_pool": user_pool,
        "user_pool_client": user_pool_client,
    }
