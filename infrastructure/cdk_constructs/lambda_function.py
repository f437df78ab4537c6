"""Reusable Lambda function construct for the movies API handlers."""

import os

from aws_cdk import (
    BundlingOptions,
    Duration,
    IgnoreMode,
    aws_lambda as lambda_,
    aws_logs as logs,
)
from constructs import Construct
from typing import Dict, List, Optional

# Repository root; the handler code lives under <root>/lambdas
PROJECT_ROOT = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "..")
)
LAMBDAS_PATH = os.path.join(PROJECT_ROOT, "lambdas")

HANDLER_CODE_EXCLUDES = [
    "*",
    "!lambdas",
    "lambdas/**/tests",
    "**/__pycache__",
    "**/*.pyc",
]


def handler_code() -> lambda_.Code:
    """
    Code asset with the lambdas/ package only.

    Functions import lambdas.shared, so the asset root is the repository root
    with everything but lambdas/ excluded.
    """
    return lambda_.Code.from_asset(
        PROJECT_ROOT,
        exclude=HANDLER_CODE_EXCLUDES,
        ignore_mode=IgnoreMode.DOCKER,
    )


def dependencies_layer_code(
    architecture: lambda_.Architecture = lambda_.Architecture.ARM_64,
) -> lambda_.Code:
    """Layer asset with lambdas/requirements.txt installed under python/."""
    return lambda_.Code.from_asset(
        LAMBDAS_PATH,
        bundling=BundlingOptions(
            image=lambda_.Runtime.PYTHON_3_12.bundling_image,
            platform=f"linux/{'arm64' if architecture == lambda_.Architecture.ARM_64 else 'amd64'}",
            command=[
                "bash",
                "-c",
                "pip install --no-cache-dir -r requirements.txt -t /asset-output/python",
            ],
        ),
    )


class LambdaFunction(Construct):
    """
    Lambda function construct with the handlers' standard configuration.

    Features:
    - Python 3.12 on ARM64
    - 10 second timeout and 128 MB by default
    - CloudWatch log retention
    - Shared dependencies layer
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        handler: str,
        code: lambda_.Code,
        environment: Optional[Dict[str, str]] = None,
        runtime: lambda_.Runtime = lambda_.Runtime.PYTHON_3_12,
        architecture: lambda_.Architecture = lambda_.Architecture.ARM_64,
        timeout: Duration = Duration.seconds(10),
        memory_size: int = 128,
        log_retention: logs.RetentionDays = logs.RetentionDays.ONE_WEEK,
        description: Optional[str] = None,
        layers: Optional[List[lambda_.ILayerVersion]] = None,
        **kwargs
    ):
        """
        Initialize Lambda function construct.

        Args:
            scope: CDK scope
            construct_id: Construct identifier
            handler: Dotted handler path, e.g. lambdas.add_movie.handler.handler
            code: Lambda code
            environment: Environment variables
            runtime: Lambda runtime
            architecture: Instruction set
            timeout: Function timeout
            memory_size: Memory allocation in MB
            log_retention: CloudWatch log retention
            description: Function description
            layers: Lambda layers
            **kwargs: Additional Lambda function properties
        """
        super().__init__(scope, construct_id)

        self.function = lambda_.Function(
            self,
            "Function",
            runtime=runtime,
            architecture=architecture,
            handler=handler,
            code=code,
            timeout=timeout,
            memory_size=memory_size,
            environment=environment or {},
            description=description,
            layers=layers,
            log_retention=log_retention,
            **kwargs
        )
