"""
API Gateway proxy responses.

Handlers build either a SuccessResult or an ErrorResult and convert it with
to_response(); both go through the same JSON encoder so DynamoDB Decimals
and botocore faults serialize uniformly.
"""

import json
from decimal import Decimal
from typing import Any, Dict, Literal, Union

from botocore.exceptions import ClientError
from pydantic import BaseModel

JSON_HEADERS = {"content-type": "application/json"}


def _json_default(value: Any) -> Any:
    """Encode values json.dumps does not handle natively."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def to_json(payload: Any) -> str:
    """Serialize a response payload, rendering DynamoDB numbers as JSON numbers."""
    return json.dumps(payload, default=_json_default)


def describe_error(error: BaseException) -> Dict[str, Any]:
    """
    Serialize a fault for the response body.

    Args:
        error: Exception raised by the store or identity provider

    Returns:
        Dict with the exception type and message, plus the provider error
        code and HTTP status for botocore ClientErrors
    """
    details: Dict[str, Any] = {
        "name": type(error).__name__,
        "message": str(error),
    }
    if isinstance(error, ClientError):
        provider_error = error.response.get("Error", {})
        details["code"] = provider_error.get("Code")
        details["message"] = provider_error.get("Message", str(error))
        details["httpStatusCode"] = error.response.get(
            "ResponseMetadata", {}
        ).get("HTTPStatusCode")
    return details


class SuccessResult(BaseModel):
    """Handler outcome carrying a domain payload."""

    kind: Literal["success"] = "success"
    status_code: int = 200
    payload: Dict[str, Any]

    def body(self) -> Dict[str, Any]:
        return self.payload


class ErrorResult(BaseModel):
    """Handler outcome describing a client or upstream failure."""

    kind: Literal["error"] = "error"
    status_code: int
    message: str = ""
    error: Dict[str, Any] = {}

    def body(self) -> Dict[str, Any]:
        # Client errors carry a Message, upstream faults the raw error
        if self.error:
            return {"error": self.error}
        return {"Message": self.message}


HandlerResult = Union[SuccessResult, ErrorResult]


def ok(payload: Dict[str, Any], status_code: int = 200) -> SuccessResult:
    return SuccessResult(status_code=status_code, payload=payload)


def not_found(message: str) -> ErrorResult:
    return ErrorResult(status_code=404, message=message)


def server_error(error: BaseException) -> ErrorResult:
    return ErrorResult(status_code=500, error=describe_error(error))


def to_response(result: HandlerResult) -> Dict[str, Any]:
    """
    Convert a handler result to an API Gateway Lambda proxy response.

    Args:
        result: SuccessResult or ErrorResult

    Returns:
        Dict with statusCode, headers and a JSON string body
    """
    return {
        "statusCode": result.status_code,
        "headers": dict(JSON_HEADERS),
        "body": to_json(result.body()),
    }
