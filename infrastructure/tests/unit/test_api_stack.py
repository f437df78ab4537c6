"""Unit tests for ApiStack."""

import aws_cdk as cdk
from aws_cdk import assertions, aws_lambda as lambda_

from stacks.api_stack import ApiStack


def create_test_api_stack(app, dependencies, auth_routes=("signup",)):
    """Helper to create ApiStack with placeholder Lambdas."""
    functions_stack = cdk.Stack(app, "MockFunctions")

    def placeholder(name):
        return lambda_.Function(
            functions_stack,
            name,
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler="index.handler",
            code=lambda_.Code.from_inline("def handler(event, context):\n    return {}"),
        )

    return ApiStack(
        app,
        "TestApiStack",
        env_name="dev",
        env_config={"stage_name": "dev"},
        user_pool=dependencies["user_pool"],
        get_movie_by_id_lambda=placeholder("GetMovieById"),
        get_all_movies_lambda=placeholder("GetAllMovies"),
        add_movie_lambda=placeholder("AddMovie"),
        delete_movie_lambda=placeholder("DeleteMovie"),
        get_cast_members_lambda=placeholder("GetCastMembers"),
        auth_lambdas={route: placeholder(f"Auth-{route}") for route in auth_routes},
    )


def test_api_stack_creates_rest_api(app, dependencies):
    """Test that a REST API with a dev stage is created."""
    template = assertions.Template.from_stack(create_test_api_stack(app, dependencies))

    template.resource_count_is("AWS::ApiGateway::RestApi", 1)
    template.has_resource_properties("AWS::ApiGateway::Stage", {"StageName": "dev"})


def test_api_stack_creates_resources(app, dependencies):
    """Test the /movies, /movies/{movieId}, /movies/cast and /auth/signup paths."""
    template = assertions.Template.from_stack(create_test_api_stack(app, dependencies))

    resources = template.find_resources("AWS::ApiGateway::Resource")
    path_parts = sorted(r["Properties"]["PathPart"] for r in resources.values())
    assert path_parts == ["auth", "cast", "movies", "signup", "{movieId}"]


def test_api_stack_creates_cognito_authorizer(app, dependencies):
    """Test that a Cognito user pools authorizer is created."""
    template = assertions.Template.from_stack(create_test_api_stack(app, dependencies))

    template.resource_count_is("AWS::ApiGateway::Authorizer", 1)
    template.has_resource_properties(
        "AWS::ApiGateway::Authorizer",
        {"Type": "COGNITO_USER_POOLS"},
    )


def test_only_write_methods_are_protected(app, dependencies):
    """Test that only POST /movies and DELETE /movies/{movieId} need a token."""
    template = assertions.Template.from_stack(create_test_api_stack(app, dependencies))

    protected = template.find_resources(
        "AWS::ApiGateway::Method",
        {"Properties": {"AuthorizationType": "COGNITO_USER_POOLS"}},
    )
    methods = sorted(m["Properties"]["HttpMethod"] for m in protected.values())
    assert methods == ["DELETE", "POST"]

    public_gets = template.find_resources(
        "AWS::ApiGateway::Method",
        {"Properties": {"HttpMethod": "GET", "AuthorizationType": "NONE"}},
    )
    assert len(public_gets) == 3


def test_api_stack_wires_enabled_auth_routes(app, dependencies):
    """Test that each auth Lambda gets a POST /auth/<route> method."""
    stack = create_test_api_stack(app, dependencies, auth_routes=("signup", "signin"))
    template = assertions.Template.from_stack(stack)

    resources = template.find_resources("AWS::ApiGateway::Resource")
    path_parts = {r["Properties"]["PathPart"] for r in resources.values()}
    assert {"signup", "signin"} <= path_parts


def test_api_stack_grants_invoke_permissions(app, dependencies):
    """Test that API Gateway may invoke each integrated Lambda."""
    template = assertions.Template.from_stack(create_test_api_stack(app, dependencies))

    permissions = template.find_resources(
        "AWS::Lambda::Permission",
        {"Properties": {"Principal": "apigateway.amazonaws.com"}},
    )
    # One for the deployed stage and one for test-invoke per method
    assert len(permissions) == 12


def test_api_stack_outputs(app, dependencies):
    """Test that stack creates required outputs."""
    template = assertions.Template.from_stack(create_test_api_stack(app, dependencies))

    template.has_output("ApiUrl", {})
    template.has_output("ApiId", {})
