"""API stack: API Gateway REST API with a Cognito authorizer."""

from aws_cdk import (
    Stack,
    CfnOutput,
    aws_apigateway as apig,
    aws_cognito as cognito,
    aws_lambda as lambda_,
)
from constructs import Construct
from typing import Dict, Any, Optional


class ApiStack(Stack):
    """
    API infrastructure stack.

    Components:
    - API Gateway REST API with Lambda proxy integrations
    - Cognito user pools authorizer
    - CORS configuration

    Routes:
    - GET    /movies             public
    - GET    /movies/{movieId}   public
    - GET    /movies/cast        public
    - POST   /movies             Cognito authorizer
    - DELETE /movies/{movieId}   Cognito authorizer
    - POST   /auth/<route>       public, one per enabled auth Lambda
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        env_name: str,
        env_config: Dict[str, Any] = None,
        user_pool: cognito.IUserPool,
        get_movie_by_id_lambda: lambda_.IFunction,
        get_all_movies_lambda: lambda_.IFunction,
        add_movie_lambda: lambda_.IFunction,
        delete_movie_lambda: lambda_.IFunction,
        get_cast_members_lambda: lambda_.IFunction,
        auth_lambdas: Optional[Dict[str, lambda_.IFunction]] = None,
        **kwargs
    ):
        """
        Initialize API stack.

        Args:
            scope: CDK app
            construct_id: Stack ID
            env_name: Environment name (dev/test/prod)
            env_config: Environment-specific configuration
            user_pool: Cognito User Pool backing the authorizer
            get_movie_by_id_lambda: GET /movies/{movieId}
            get_all_movies_lambda: GET /movies
            add_movie_lambda: POST /movies
            delete_movie_lambda: DELETE /movies/{movieId}
            get_cast_members_lambda: GET /movies/cast
            auth_lambdas: Route name -> Lambda for /auth/<route>
            **kwargs: Additional stack properties
        """
        super().__init__(scope, construct_id, **kwargs)

        self.env_name = env_name
        self.env_config = env_config or {}
        self.user_pool = user_pool
        self.auth_lambdas = auth_lambdas or {}

        # Create API Gateway
        self._create_rest_api()

        # Cognito authorizer for protected methods
        self.authorizer = apig.CognitoUserPoolsAuthorizer(
            self,
            "MoviesAuthorizer",
            cognito_user_pools=[self.user_pool],
        )

        self._add_movie_routes(
            self._import_function("GetMovieById", get_movie_by_id_lambda),
            self._import_function("GetAllMovies", get_all_movies_lambda),
            self._import_function("AddMovie", add_movie_lambda),
            self._import_function("DeleteMovie", delete_movie_lambda),
            self._import_function("GetCastMembers", get_cast_members_lambda),
        )
        self._add_auth_routes()

        # Stack outputs
        self._create_outputs()

    def _import_function(self, name: str, function: lambda_.IFunction) -> lambda_.IFunction:
        """
        Reference a compute stack function from this stack.

        Invoke permissions for API Gateway are then created here instead of in
        the compute stack, which would otherwise depend back on this stack.
        """
        return lambda_.Function.from_function_attributes(
            self,
            f"{name}Function",
            function_arn=function.function_arn,
            same_environment=True,
        )

    def _create_rest_api(self):
        """Create the REST API with CORS preflight on every resource."""
        self.rest_api = apig.RestApi(
            self,
            "RestAPI",
            rest_api_name=f"movies-{self.env_name}",
            description=f"Movies API - {self.env_name}",
            deploy_options=apig.StageOptions(
                stage_name=self.env_config.get("stage_name", self.env_name),
            ),
            default_cors_preflight_options=apig.CorsOptions(
                allow_headers=["Content-Type", "X-Amz-Date", "Authorization"],
                allow_methods=["OPTIONS", "GET", "POST", "PUT", "PATCH", "DELETE"],
                allow_credentials=True,
                allow_origins=["*"],
            ),
        )

    def _add_movie_routes(
        self,
        get_movie_by_id_lambda: lambda_.IFunction,
        get_all_movies_lambda: lambda_.IFunction,
        add_movie_lambda: lambda_.IFunction,
        delete_movie_lambda: lambda_.IFunction,
        get_cast_members_lambda: lambda_.IFunction,
    ):
        """Wire /movies, /movies/{movieId} and /movies/cast."""
        movies = self.rest_api.root.add_resource("movies")
        movie = movies.add_resource("{movieId}")
        movie_cast = movies.add_resource("cast")

        # Public methods
        movies.add_method(
            "GET",
            apig.LambdaIntegration(get_all_movies_lambda, proxy=True),
        )
        movie.add_method(
            "GET",
            apig.LambdaIntegration(get_movie_by_id_lambda, proxy=True),
        )
        movie_cast.add_method(
            "GET",
            apig.LambdaIntegration(get_cast_members_lambda, proxy=True),
        )

        # Protected methods
        movies.add_method(
            "POST",
            apig.LambdaIntegration(add_movie_lambda, proxy=True),
            authorizer=self.authorizer,
            authorization_type=apig.AuthorizationType.COGNITO,
        )
        movie.add_method(
            "DELETE",
            apig.LambdaIntegration(delete_movie_lambda, proxy=True),
            authorizer=self.authorizer,
            authorization_type=apig.AuthorizationType.COGNITO,
        )

    def _add_auth_routes(self):
        """Wire POST /auth/<route> for each auth Lambda."""
        auth = self.rest_api.root.add_resource("auth")
        for route, function in self.auth_lambdas.items():
            auth.add_resource(route).add_method(
                "POST",
                apig.LambdaIntegration(
                    self._import_function(f"Auth{route.title().replace('_', '')}", function),
                    proxy=True,
                ),
            )

    def _create_outputs(self):
        """Create CloudFormation outputs."""
        CfnOutput(
            self,
            "ApiUrl",
            value=self.rest_api.url,
            description="API Gateway endpoint URL",
            export_name=f"movies-{self.env_name}-api-url",
        )

        CfnOutput(
            self,
            "ApiId",
            value=self.rest_api.rest_api_id,
            description="API Gateway ID",
            export_name=f"movies-{self.env_name}-api-id",
        )

        CfnOutput(
            self,
            "Region",
            value=self.region,
            description="AWS Region",
            export_name=f"movies-{self.env_name}-region",
        )
