"""
Confirm Sign Up Lambda Handler.

Serves POST /auth/confirm_signup with body {"username", "code"}. The route
is only wired when "confirm_signup" is listed in the environment's
auth_routes.
"""

import logging
from typing import Any, Dict

from lambdas.shared.events import json_body
from lambdas.shared.identity import IdentityClient, get_identity_client
from lambdas.shared.models import ConfirmSignUpRequest
from lambdas.shared.responses import HandlerResult, ok, server_error, to_response

# Setup logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)


def confirm_sign_up(event: Dict[str, Any], identity: IdentityClient) -> HandlerResult:
    try:
        request = ConfirmSignUpRequest.model_validate(json_body(event))
        identity.confirm_sign_up(request.username, request.code)
    except Exception as e:
        logger.error(f"Signup confirmation failed: {e}", exc_info=True)
        return server_error(e)

    return ok({"message": f"User {request.username} successfully confirmed"})


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda entry point for POST /auth/confirm_signup."""
    logger.info(f"Event: {event.get('httpMethod')} {event.get('path')}")

    try:
        identity = get_identity_client()
    except Exception as e:
        logger.error(f"Failed to initialize identity client: {e}", exc_info=True)
        return to_response(server_error(e))

    return to_response(confirm_sign_up(event, identity))
