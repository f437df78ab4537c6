"""Fixtures for the auth handler tests: a moto Cognito user pool and client."""

import boto3
import pytest
from moto import mock_aws

from lambdas.shared.identity import IdentityClient
from lambdas.shared.settings import HandlerSettings

TEST_PASSWORD = "Movies2025!secure"


@pytest.fixture
def password():
    return TEST_PASSWORD


@pytest.fixture
def cognito(aws_env, monkeypatch):
    """Create a mock user pool and app client, exported via the environment."""
    with mock_aws():
        client = boto3.client("cognito-idp", region_name="us-east-1")
        user_pool_id = client.create_user_pool(PoolName="movies-test")["UserPool"]["Id"]
        client_id = client.create_user_pool_client(
            UserPoolId=user_pool_id,
            ClientName="movies-test-client",
            ExplicitAuthFlows=["ALLOW_USER_PASSWORD_AUTH", "ALLOW_REFRESH_TOKEN_AUTH"],
        )["UserPoolClient"]["ClientId"]

        monkeypatch.setenv("USER_POOL_ID", user_pool_id)
        monkeypatch.setenv("CLIENT_ID", client_id)

        yield {
            "client": client,
            "user_pool_id": user_pool_id,
            "client_id": client_id,
        }


@pytest.fixture
def identity(cognito):
    return IdentityClient(HandlerSettings(), cognito=cognito["client"])


@pytest.fixture
def confirmed_user(cognito, identity):
    """A signed-up and confirmed user."""
    identity.sign_up("moviefan", TEST_PASSWORD, "moviefan@example.com")
    cognito["client"].admin_confirm_sign_up(
        UserPoolId=cognito["user_pool_id"],
        Username="moviefan",
    )
    return {"username": "moviefan", "password": TEST_PASSWORD}
