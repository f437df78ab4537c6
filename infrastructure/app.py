#!/usr/bin/env python3
"""
CDK Application for the Movies API.

Deploys the movies catalog tables, Cognito user pool, handler Lambdas and
REST API.

Usage:
    cdk synth --context env=dev
    cdk deploy --context env=dev --all
    cdk destroy --context env=dev --all

Environment: dev, test, or prod (default: dev)
"""

import os
from aws_cdk import App, Environment, Tags

from stacks.database_stack import DatabaseStack
from stacks.auth_stack import AuthStack
from stacks.compute_stack import ComputeStack
from stacks.api_stack import ApiStack

# Initialize CDK app
app = App()

# Get environment from context or environment variable
env_name = app.node.try_get_context("env") or os.getenv("CDK_ENV", "dev")

# Get environment configuration
env_config = (app.node.try_get_context("environments") or {}).get(env_name)

if not env_config:
    raise ValueError(
        f"Environment '{env_name}' not found in cdk.json context. "
        "Available: dev, test, prod"
    )

# Update account ID if provided via environment variable
account_id = os.getenv("CDK_DEFAULT_ACCOUNT") or env_config["account"]
region = os.getenv("CDK_DEFAULT_REGION") or env_config["region"]

# Define AWS environment
aws_env = Environment(
    account=account_id,
    region=region,
)

print(f"Deploying to environment: {env_name}")
print(f"AWS Account: {account_id}")
print(f"AWS Region: {region}")

# ============================================================================
# Deploy Stacks in Dependency Order
# ============================================================================

# 1. Database Stack (DynamoDB tables + seed data)
db_stack = DatabaseStack(
    app,
    f"MoviesDB-{env_name}",
    env=aws_env,
    env_name=env_name,
    env_config=env_config,
    seed_data=env_config.get("seed_data", True),
    description=f"Movies Database Stack - {env_name}",
)

# 2. Auth Stack (Cognito)
auth_stack = AuthStack(
    app,
    f"MoviesAuth-{env_name}",
    env=aws_env,
    env_name=env_name,
    env_config=env_config,
    description=f"Movies Auth Stack - {env_name}",
)

# 3. Compute Stack (Lambda functions)
compute_stack = ComputeStack(
    app,
    f"MoviesCompute-{env_name}",
    env=aws_env,
    env_name=env_name,
    env_config=env_config,
    movies_table=db_stack.movies_table,
    cast_table=db_stack.cast_table,
    user_pool=auth_stack.user_pool,
    user_pool_client=auth_stack.user_pool_client,
    description=f"Movies Compute Stack - {env_name}",
)

# 4. API Stack (API Gateway + Cognito authorizer)
api_stack = ApiStack(
    app,
    f"MoviesAPI-{env_name}",
    env=aws_env,
    env_name=env_name,
    env_config=env_config,
    user_pool=auth_stack.user_pool,
    get_movie_by_id_lambda=compute_stack.get_movie_by_id_lambda,
    get_all_movies_lambda=compute_stack.get_all_movies_lambda,
    add_movie_lambda=compute_stack.add_movie_lambda,
    delete_movie_lambda=compute_stack.delete_movie_lambda,
    get_cast_members_lambda=compute_stack.get_cast_members_lambda,
    auth_lambdas=compute_stack.auth_lambdas,
    description=f"Movies API Stack - {env_name}",
)

# ============================================================================
# Add Common Tags
# ============================================================================

Tags.of(app).add("Environment", env_name)
Tags.of(app).add("Project", "movies-api")
Tags.of(app).add("ManagedBy", "CDK")

# ============================================================================
# Synthesize CloudFormation Templates
# ============================================================================

app.synth()
