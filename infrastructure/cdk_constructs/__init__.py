"""Reusable CDK Constructs."""

from .lambda_function import LambdaFunction, dependencies_layer_code, handler_code

__all__ = [
    "LambdaFunction",
    "dependencies_layer_code",
    "handler_code",
]
