"""CDK Stacks for the Movies API."""

from .database_stack import DatabaseStack
from .auth_stack import AuthStack
from .compute_stack import ComputeStack
from .api_stack import ApiStack

__all__ = [
    "DatabaseStack",
    "AuthStack",
    "ComputeStack",
    "ApiStack",
]
