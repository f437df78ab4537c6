"""
Cognito User Pool calls used by the auth handlers.

Cognito is authoritative for the identity lifecycle; nothing here keeps
session or token state.
"""

import logging
from functools import lru_cache
from typing import Any, Dict

import boto3

from .settings import HandlerSettings, get_settings

logger = logging.getLogger(__name__)


class IdentityClient:
    """Single-call wrappers around the cognito-idp API for one app client."""

    def __init__(self, settings: HandlerSettings, cognito=None):
        self.settings = settings
        self.cognito = cognito or boto3.client(
            "cognito-idp", region_name=settings.region
        )

    def sign_up(self, username: str, password: str, email: str) -> Dict[str, Any]:
        return self.cognito.sign_up(
            ClientId=self.settings.require_client_id(),
            Username=username,
            Password=password,
            UserAttributes=[{"Name": "email", "Value": email}],
        )

    def confirm_sign_up(self, username: str, code: str) -> Dict[str, Any]:
        return self.cognito.confirm_sign_up(
            ClientId=self.settings.require_client_id(),
            Username=username,
            ConfirmationCode=code,
        )

    def sign_in(self, username: str, password: str) -> Dict[str, Any]:
        return self.cognito.initiate_auth(
            ClientId=self.settings.require_client_id(),
            AuthFlow="USER_PASSWORD_AUTH",
            AuthParameters={"USERNAME": username, "PASSWORD": password},
        )

    def sign_out(self, access_token: str) -> Dict[str, Any]:
        return self.cognito.global_sign_out(AccessToken=access_token)


@lru_cache(maxsize=1)
def get_identity_client() -> IdentityClient:
    """Get the process-wide identity client (cached)."""
    return IdentityClient(get_settings())
