"""
Sign In Lambda Handler.

Serves POST /auth/signin with body {"username", "password"} using the
USER_PASSWORD_AUTH flow. The returned id token is the bearer credential
expected by the protected movie routes. Wired only when "signin" is listed
in the environment's auth_routes.
"""

import logging
from typing import Any, Dict

from lambdas.shared.events import json_body
from lambdas.shared.identity import IdentityClient, get_identity_client
from lambdas.shared.models import SignInRequest
from lambdas.shared.responses import (
    ErrorResult,
    HandlerResult,
    ok,
    server_error,
    to_response,
)

# Setup logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)


def sign_in(event: Dict[str, Any], identity: IdentityClient) -> HandlerResult:
    """
    Authenticate a user and return their tokens.

    Args:
        event: API Gateway proxy event
        identity: IdentityClient for the user pool app client

    Returns:
        SuccessResult with idToken/accessToken/expiresIn, or ErrorResult
        (500) when Cognito rejects the credentials or answers with a
        challenge instead of tokens
    """
    try:
        request = SignInRequest.model_validate(json_body(event))
        response = identity.sign_in(request.username, request.password)
    except Exception as e:
        logger.error(f"Signin failed: {e}", exc_info=True)
        return server_error(e)

    result = response.get("AuthenticationResult")
    if not result:
        challenge = response.get("ChallengeName", "unknown")
        logger.warning(f"Signin for {request.username} returned challenge {challenge}")
        return ErrorResult(
            status_code=500,
            error={"name": "AuthChallenge", "message": challenge},
        )

    return ok({
        "message": "Signin successful",
        "idToken": result.get("IdToken"),
        "accessToken": result.get("AccessToken"),
        "expiresIn": result.get("ExpiresIn"),
    })


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda entry point for POST /auth/signin."""
    logger.info(f"Event: {event.get('httpMethod')} {event.get('path')}")

    try:
        identity = get_identity_client()
    except Exception as e:
        logger.error(f"Failed to initialize identity client: {e}", exc_info=True)
        return to_response(server_error(e))

    return to_response(sign_in(event, identity))
