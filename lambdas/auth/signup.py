"""
Sign Up Lambda Handler.

Serves POST /auth/signup with body {"username", "password", "email"} and
registers the user in the Cognito User Pool through the configured app
client.
"""

import logging
from typing import Any, Dict

from lambdas.shared.events import json_body
from lambdas.shared.identity import IdentityClient, get_identity_client
from lambdas.shared.models import SignUpRequest
from lambdas.shared.responses import HandlerResult, ok, server_error, to_response

# Setup logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)


def sign_up(event: Dict[str, Any], identity: IdentityClient) -> HandlerResult:
    """
    Register a new user.

    Args:
        event: API Gateway proxy event
        identity: IdentityClient for the user pool app client

    Returns:
        SuccessResult with the Cognito confirmation state, or a 500
        ErrorResult for a bad body or a Cognito error
    """
    try:
        request = SignUpRequest.model_validate(json_body(event))
        response = identity.sign_up(request.username, request.password, request.email)
    except Exception as e:
        logger.error(f"Signup failed: {e}", exc_info=True)
        return server_error(e)

    logger.info(f"Signed up user {request.username}")
    return ok({
        "message": "Signup successful",
        "userConfirmed": response.get("UserConfirmed", False),
        "userSub": response.get("UserSub"),
    })


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda entry point for POST /auth/signup."""
    # Body carries a password; log only the route
    logger.info(f"Event: {event.get('httpMethod')} {event.get('path')}")

    try:
        identity = get_identity_client()
    except Exception as e:
        logger.error(f"Failed to initialize identity client: {e}", exc_info=True)
        return to_response(server_error(e))

    return to_response(sign_up(event, identity))
