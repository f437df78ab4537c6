"""Database stack: DynamoDB movies and cast tables plus seed data."""

from aws_cdk import (
    Stack,
    RemovalPolicy,
    CfnOutput,
    aws_dynamodb as dynamodb,
    custom_resources as custom,
)
from constructs import Construct
from typing import Dict, Any

from seed import MOVIES, MOVIE_CASTS, generate_batch
from seed.batch import MAX_BATCH_SIZE

ROLE_INDEX_NAME = "roleIx"


class DatabaseStack(Stack):
    """
    Database infrastructure stack.

    Components:
    - Movies table (partition key: id NUMBER)
    - MovieCast table (partition key: movieId NUMBER, sort key: actorName STRING)
    - roleIx local secondary index on MovieCast (sort key: roleName STRING)
    - Custom resource that batch-writes the seed data on stack creation
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        env_name: str,
        env_config: Dict[str, Any] = None,
        seed_data: bool = True,
        **kwargs
    ):
        """
        Initialize database stack.

        Args:
            scope: CDK app
            construct_id: Stack ID
            env_name: Environment name (dev/test/prod)
            env_config: Environment-specific configuration
            seed_data: Load the seed movies and cast on creation
            **kwargs: Additional stack properties
        """
        super().__init__(scope, construct_id, **kwargs)

        self.env_name = env_name
        self.env_config = env_config or {}

        self.movies_table_name = f"Movies-{env_name}"
        self.cast_table_name = f"MovieCast-{env_name}"

        # Create DynamoDB tables
        self._create_tables()

        # Seed both tables once
        if seed_data:
            self._create_seed_data()

        # Stack outputs
        self._create_outputs()

    def _removal_policy(self) -> RemovalPolicy:
        return RemovalPolicy.RETAIN if self.env_name == "prod" else RemovalPolicy.DESTROY

    def _create_tables(self):
        """Create the movies and cast tables."""
        self.movies_table = dynamodb.Table(
            self,
            "MoviesTable",
            table_name=self.movies_table_name,
            partition_key=dynamodb.Attribute(
                name="id",
                type=dynamodb.AttributeType.NUMBER,
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,  # On-demand pricing
            removal_policy=self._removal_policy(),
        )

        self.cast_table = dynamodb.Table(
            self,
            "MovieCastTable",
            table_name=self.cast_table_name,
            partition_key=dynamodb.Attribute(
                name="movieId",
                type=dynamodb.AttributeType.NUMBER,
            ),
            sort_key=dynamodb.Attribute(
                name="actorName",
                type=dynamodb.AttributeType.STRING,
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=self._removal_policy(),
        )

        # Local Secondary Index for listing a movie's cast by role
        self.cast_table.add_local_secondary_index(
            index_name=ROLE_INDEX_NAME,
            sort_key=dynamodb.Attribute(
                name="roleName",
                type=dynamodb.AttributeType.STRING,
            ),
        )

    def _create_seed_data(self):
        """Batch-write the seed movies and cast when the stack is created."""
        if len(MOVIES) + len(MOVIE_CASTS) > MAX_BATCH_SIZE:
            raise ValueError("Seed data does not fit in a single BatchWriteItem call")

        self.seed_resource = custom.AwsCustomResource(
            self,
            "MoviesDdbInitData",
            on_create=custom.AwsSdkCall(
                service="DynamoDB",
                action="batchWriteItem",
                parameters={
                    "RequestItems": {
                        # Literal names; token keys would not resolve in the map
                        self.movies_table_name: generate_batch(MOVIES),
                        self.cast_table_name: generate_batch(MOVIE_CASTS),
                    },
                },
                physical_resource_id=custom.PhysicalResourceId.of(
                    f"moviesddbInitData-{self.env_name}"
                ),
            ),
            policy=custom.AwsCustomResourcePolicy.from_sdk_calls(
                resources=[self.movies_table.table_arn, self.cast_table.table_arn],
            ),
        )
        self.seed_resource.node.add_dependency(self.movies_table)
        self.seed_resource.node.add_dependency(self.cast_table)

    def _create_outputs(self):
        """Create CloudFormation outputs."""
        CfnOutput(
            self,
            "MoviesTableName",
            value=self.movies_table.table_name,
            description="DynamoDB movies table name",
            export_name=f"movies-{self.env_name}-movies-table",
        )

        CfnOutput(
            self,
            "MovieCastTableName",
            value=self.cast_table.table_name,
            description="DynamoDB movie cast table name",
            export_name=f"movies-{self.env_name}-cast-table",
        )
