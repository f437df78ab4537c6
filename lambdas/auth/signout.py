"""
Sign Out Lambda Handler.

Serves POST /auth/signout. The access token comes from the body
({"accessToken": ...}) or the Authorization header, and every session for
that user is revoked with GlobalSignOut. Wired only when "signout" is
listed in the environment's auth_routes.
"""

import logging
from typing import Any, Dict

from lambdas.shared.events import bearer_token, json_body
from lambdas.shared.identity import IdentityClient, get_identity_client
from lambdas.shared.models import SignOutRequest
from lambdas.shared.responses import HandlerResult, ok, server_error, to_response

# Setup logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)


def _access_token(event: Dict[str, Any]) -> str:
    token = None
    if event.get("body"):
        token = SignOutRequest.model_validate(json_body(event)).access_token
    token = token or bearer_token(event)
    if not token:
        raise ValueError("Missing access token")
    return token


def sign_out(event: Dict[str, Any], identity: IdentityClient) -> HandlerResult:
    try:
        identity.sign_out(_access_token(event))
    except Exception as e:
        logger.error(f"Signout failed: {e}", exc_info=True)
        return server_error(e)

    return ok({"message": "Signout successful"})


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda entry point for POST /auth/signout."""
    logger.info(f"Event: {event.get('httpMethod')} {event.get('path')}")

    try:
        identity = get_identity_client()
    except Exception as e:
        logger.error(f"Failed to initialize identity client: {e}", exc_info=True)
        return to_response(server_error(e))

    return to_response(sign_out(event, identity))
