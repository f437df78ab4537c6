"""Helpers for reading API Gateway proxy events."""

import json
import re
from decimal import Decimal, DecimalException
from typing import Any, Dict, Optional

from boto3.dynamodb.types import DYNAMODB_CONTEXT

MOVIE_ID_PATTERN = re.compile(r"-?[0-9]+")

REDACTED = "[REDACTED]"
SENSITIVE_HEADERS = {"authorization"}


def path_parameter(event: Dict[str, Any], name: str) -> Optional[str]:
    return (event.get("pathParameters") or {}).get(name)


def query_parameter(event: Dict[str, Any], name: str) -> Optional[str]:
    return (event.get("queryStringParameters") or {}).get(name)


def parse_movie_id(raw: Optional[str]) -> Optional[int]:
    """
    Parse a movie identifier from a path or query string value.

    Only plain ASCII digits with an optional leading minus are accepted, and
    the value must fit a DynamoDB number (38 significant digits).

    Args:
        raw: Raw parameter value (may be None)

    Returns:
        The integer id, or None when the value is absent or not a storable
        integer
    """
    if raw is None:
        return None
    value = raw.strip()
    if not MOVIE_ID_PATTERN.fullmatch(value):
        return None
    try:
        DYNAMODB_CONTEXT.create_decimal(value)
    except DecimalException:
        return None
    return int(value)


def flag_enabled(event: Dict[str, Any], name: str) -> bool:
    """True only when the query parameter is the string 'true' (any case)."""
    value = query_parameter(event, name)
    return value is not None and value.lower() == "true"


def json_body(event: Dict[str, Any]) -> Any:
    """
    Decode the request body.

    Floats are decoded as Decimal so the payload can be written to DynamoDB.

    Raises:
        ValueError: If the body is missing
        json.JSONDecodeError: If the body is not valid JSON
    """
    body = event.get("body")
    if body is None or body == "":
        raise ValueError("Missing request body")
    if isinstance(body, (dict, list)):
        return body
    return json.loads(body, parse_float=Decimal)


def bearer_token(event: Dict[str, Any]) -> Optional[str]:
    """Extract the bearer credential from the Authorization header, if any."""
    headers = {k.lower(): v for k, v in (event.get("headers") or {}).items()}
    authorization = headers.get("authorization")
    if not authorization:
        return None
    if authorization.lower().startswith("bearer "):
        return authorization[7:].strip()
    return authorization.strip()


def loggable_event(event: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of the event with credential headers masked, for logging."""
    redacted = dict(event)
    for key in ("headers", "multiValueHeaders"):
        headers = event.get(key)
        if not headers:
            continue
        redacted[key] = {
            name: REDACTED if name.lower() in SENSITIVE_HEADERS else value
            for name, value in headers.items()
        }
    return redacted
