"""Unit tests for AuthStack."""

import aws_cdk as cdk
from aws_cdk import assertions

from stacks.auth_stack import AuthStack


def create_auth_stack() -> AuthStack:
    app = cdk.App()
    return AuthStack(app, "TestAuthStack", env_name="dev", env_config={})


def test_auth_stack_creates_user_pool():
    """Test that a self sign-up user pool is created."""
    template = assertions.Template.from_stack(create_auth_stack())

    template.resource_count_is("AWS::Cognito::UserPool", 1)
    template.has_resource_properties(
        "AWS::Cognito::UserPool",
        {
            "UserPoolName": "movies-dev",
            "AdminCreateUserConfig": {"AllowAdminCreateUserOnly": False},
            "AliasAttributes": assertions.Match.array_with(["email"]),
        },
    )


def test_auth_stack_creates_client_with_password_auth():
    """Test that the app client allows USER_PASSWORD_AUTH."""
    template = assertions.Template.from_stack(create_auth_stack())

    template.resource_count_is("AWS::Cognito::UserPoolClient", 1)
    template.has_resource_properties(
        "AWS::Cognito::UserPoolClient",
        {
            "ExplicitAuthFlows": assertions.Match.array_with(["ALLOW_USER_PASSWORD_AUTH"]),
            "GenerateSecret": False,
        },
    )


def test_auth_stack_outputs():
    """Test that stack creates required outputs."""
    template = assertions.Template.from_stack(create_auth_stack())

    template.has_output("UserPoolId", {})
    template.has_output("UserPoolClientId", {})
