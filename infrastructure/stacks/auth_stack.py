"""Auth stack: Cognito User Pool and app client."""

from aws_cdk import (
    Stack,
    Duration,
    RemovalPolicy,
    CfnOutput,
    aws_cognito as cognito,
)
from constructs import Construct
from typing import Dict, Any


class AuthStack(Stack):
    """
    Identity infrastructure stack.

    Components:
    - Cognito User Pool with self sign-up (username or email sign-in)
    - Cognito User Pool Client with USER_PASSWORD_AUTH enabled
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        env_name: str,
        env_config: Dict[str, Any] = None,
        **kwargs
    ):
        """
        Initialize auth stack.

        Args:
            scope: CDK app
            construct_id: Stack ID
            env_name: Environment name (dev/test/prod)
            env_config: Environment-specific configuration
            **kwargs: Additional stack properties
        """
        super().__init__(scope, construct_id, **kwargs)

        self.env_name = env_name
        self.env_config = env_config or {}

        # Create Cognito User Pool
        self._create_cognito_user_pool()

        # Stack outputs
        self._create_outputs()

    def _create_cognito_user_pool(self):
        """Create Cognito User Pool for user authentication."""
        # User Pool
        self.user_pool = cognito.UserPool(
            self,
            "UserPool",
            user_pool_name=f"movies-{self.env_name}",
            self_sign_up_enabled=True,  # /auth/signup registers users
            sign_in_aliases=cognito.SignInAliases(
                username=True,
                email=True,
            ),
            auto_verify=cognito.AutoVerifiedAttrs(email=True),
            standard_attributes=cognito.StandardAttributes(
                email=cognito.StandardAttribute(
                    required=True,
                    mutable=True,
                )
            ),
            password_policy=cognito.PasswordPolicy(
                min_length=8,
                require_lowercase=True,
                require_uppercase=True,
                require_digits=True,
                require_symbols=False,
            ),
            account_recovery=cognito.AccountRecovery.EMAIL_ONLY,
            removal_policy=RemovalPolicy.RETAIN if self.env_name == "prod" else RemovalPolicy.DESTROY,
        )

        # User Pool Client
        self.user_pool_client = self.user_pool.add_client(
            "AppClient",
            user_pool_client_name=f"movies-{self.env_name}-client",
            auth_flows=cognito.AuthFlow(
                user_password=True,  # Enable USER_PASSWORD_AUTH
            ),
            generate_secret=False,  # No client secret for public clients
            id_token_validity=Duration.hours(1),
            access_token_validity=Duration.hours(1),
            refresh_token_validity=Duration.days(30),
        )

    def _create_outputs(self):
        """Create CloudFormation outputs."""
        CfnOutput(
            self,
            "UserPoolId",
            value=self.user_pool.user_pool_id,
            description="Cognito User Pool ID",
            export_name=f"movies-{self.env_name}-user-pool-id",
        )

        CfnOutput(
            self,
            "UserPoolClientId",
            value=self.user_pool_client.user_pool_client_id,
            description="Cognito User Pool Client ID",
            export_name=f"movies-{self.env_name}-user-pool-client-id",
        )
