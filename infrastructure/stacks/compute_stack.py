"""Compute stack: Lambda functions for the movies and auth routes."""

from aws_cdk import (
    Aws,
    Stack,
    Duration,
    CfnOutput,
    aws_lambda as lambda_,
    aws_logs as logs,
    aws_dynamodb as dynamodb,
    aws_cognito as cognito,
)
from constructs import Construct
from typing import Dict, Any, List

from cdk_constructs import LambdaFunction, dependencies_layer_code, handler_code

# Auth handlers that can be wired under /auth; only signup is on by default
AUTH_HANDLERS = {
    "signup": "lambdas.auth.signup.handler",
    "confirm_signup": "lambdas.auth.confirm_signup.handler",
    "signin": "lambdas.auth.signin.handler",
    "signout": "lambdas.auth.signout.handler",
}
DEFAULT_AUTH_ROUTES = ["signup"]


class ComputeStack(Stack):
    """
    Compute infrastructure stack.

    Components:
    - Dependencies layer (pydantic, pydantic-settings)
    - 5 movie Lambda functions:
      1. GetMovieById (Movies read, MovieCast read)
      2. GetAllMovies (Movies read)
      3. AddMovie (Movies read/write)
      4. DeleteMovie (Movies read/write)
      5. GetCastMembers (MovieCast read)
    - One auth Lambda per enabled auth route (Cognito app client calls)
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        env_name: str,
        env_config: Dict[str, Any],
        movies_table: dynamodb.ITable,
        cast_table: dynamodb.ITable,
        user_pool: cognito.IUserPool,
        user_pool_client: cognito.IUserPoolClient,
        **kwargs
    ):
        """
        Initialize compute stack.

        Args:
            scope: CDK app
            construct_id: Stack ID
            env_name: Environment name (dev/test/prod)
            env_config: Environment-specific configuration
            movies_table: DynamoDB movies table
            cast_table: DynamoDB movie cast table
            user_pool: Cognito User Pool
            user_pool_client: Cognito User Pool Client
            **kwargs: Additional stack properties
        """
        super().__init__(scope, construct_id, **kwargs)

        self.env_name = env_name
        self.env_config = env_config
        self.movies_table = movies_table
        self.cast_table = cast_table
        self.user_pool = user_pool
        self.user_pool_client = user_pool_client

        self.code = handler_code()
        self._create_dependencies_layer()

        # Create Lambda functions
        self._create_movie_lambdas()
        self._create_auth_lambdas()

        # Grant table access
        self._grant_permissions()

        # Stack outputs
        self._create_outputs()

        self.all_lambdas: List[lambda_.IFunction] = [
            self.get_movie_by_id_lambda,
            self.get_all_movies_lambda,
            self.add_movie_lambda,
            self.delete_movie_lambda,
            self.get_cast_members_lambda,
            *self.auth_lambdas.values(),
        ]

    def _get_log_retention(self, days: int) -> logs.RetentionDays:
        """Convert integer days to RetentionDays enum."""
        retention_map = {
            1: logs.RetentionDays.ONE_DAY,
            3: logs.RetentionDays.THREE_DAYS,
            5: logs.RetentionDays.FIVE_DAYS,
            7: logs.RetentionDays.ONE_WEEK,
            14: logs.RetentionDays.TWO_WEEKS,
            30: logs.RetentionDays.ONE_MONTH,
            60: logs.RetentionDays.TWO_MONTHS,
            90: logs.RetentionDays.THREE_MONTHS,
        }
        return retention_map.get(days, logs.RetentionDays.ONE_WEEK)

    def _create_dependencies_layer(self):
        """Create the Lambda layer holding the handlers' third-party packages."""
        self.dependencies_layer = lambda_.LayerVersion(
            self,
            "DependenciesLayer",
            code=dependencies_layer_code(lambda_.Architecture.ARM_64),
            compatible_runtimes=[lambda_.Runtime.PYTHON_3_12],
            compatible_architectures=[lambda_.Architecture.ARM_64],
            description=f"Movies API handler dependencies - {self.env_name}",
        )

    def _create_function(
        self,
        construct_id: str,
        handler: str,
        environment: Dict[str, str],
        description: str,
    ) -> lambda_.Function:
        """Create one handler function with the environment's standard settings."""
        construct = LambdaFunction(
            self,
            construct_id,
            handler=handler,
            code=self.code,
            environment={"REGION": Aws.REGION, **environment},
            timeout=Duration.seconds(self.env_config.get("lambda_timeout", 10)),
            memory_size=self.env_config.get("lambda_memory", 128),
            log_retention=self._get_log_retention(self.env_config.get("log_retention_days", 7)),
            description=f"{description} - {self.env_name}",
            layers=[self.dependencies_layer],
        )
        return construct.function

    def _create_movie_lambdas(self):
        """Create one Lambda per movie route."""
        self.get_movie_by_id_lambda = self._create_function(
            "GetMovieByIdFn",
            "lambdas.get_movie_by_id.handler.handler",
            {
                "TABLE_NAME": self.movies_table.table_name,
                "CAST_TABLE_NAME": self.cast_table.table_name,
            },
            "Get movie by id (optional cast)",
        )

        self.get_all_movies_lambda = self._create_function(
            "GetAllMoviesFn",
            "lambdas.get_all_movies.handler.handler",
            {"TABLE_NAME": self.movies_table.table_name},
            "List all movies",
        )

        self.add_movie_lambda = self._create_function(
            "AddMovieFn",
            "lambdas.add_movie.handler.handler",
            {"TABLE_NAME": self.movies_table.table_name},
            "Add movie",
        )

        self.delete_movie_lambda = self._create_function(
            "DeleteMovieFn",
            "lambdas.delete_movie.handler.handler",
            {"TABLE_NAME": self.movies_table.table_name},
            "Delete movie",
        )

        # TABLE_NAME is the cast table for this function
        self.get_cast_members_lambda = self._create_function(
            "GetCastMemberFn",
            "lambdas.get_movie_cast_members.handler.handler",
            {"TABLE_NAME": self.cast_table.table_name},
            "Get movie cast members",
        )

    def _create_auth_lambdas(self):
        """Create a Lambda for each auth route enabled in env_config."""
        auth_routes = self.env_config.get("auth_routes", DEFAULT_AUTH_ROUTES)
        unknown = [route for route in auth_routes if route not in AUTH_HANDLERS]
        if unknown:
            raise ValueError(
                f"Unknown auth routes {unknown}. Available: {', '.join(AUTH_HANDLERS)}"
            )

        auth_env = {
            "USER_POOL_ID": self.user_pool.user_pool_id,
            "CLIENT_ID": self.user_pool_client.user_pool_client_id,
        }

        self.auth_lambdas: Dict[str, lambda_.Function] = {}
        for route in auth_routes:
            construct_id = "".join(part.capitalize() for part in route.split("_")) + "Fn"
            self.auth_lambdas[route] = self._create_function(
                construct_id,
                AUTH_HANDLERS[route],
                auth_env,
                f"Auth {route}",
            )

    def _grant_permissions(self):
        """Grant least-privilege table access."""
        self.movies_table.grant_read_data(self.get_movie_by_id_lambda)
        self.movies_table.grant_read_data(self.get_all_movies_lambda)
        self.movies_table.grant_read_write_data(self.add_movie_lambda)
        self.movies_table.grant_read_write_data(self.delete_movie_lambda)

        self.cast_table.grant_read_data(self.get_movie_by_id_lambda)
        self.cast_table.grant_read_data(self.get_cast_members_lambda)

    def _create_outputs(self):
        """Create CloudFormation outputs."""
        CfnOutput(
            self,
            "GetMovieByIdFunctionName",
            value=self.get_movie_by_id_lambda.function_name,
            description="Get movie by id Lambda function name",
        )

        CfnOutput(
            self,
            "AddMovieFunctionName",
            value=self.add_movie_lambda.function_name,
            description="Add movie Lambda function name",
        )
