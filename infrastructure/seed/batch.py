"""Marshal seed items into DynamoDB BatchWriteItem put requests."""

from decimal import Decimal
from typing import Any, Dict, List

from boto3.dynamodb.types import TypeSerializer

# DynamoDB rejects batches with more than 25 write requests
MAX_BATCH_SIZE = 25

_serializer = TypeSerializer()


def _to_dynamodb_value(value: Any) -> Any:
    # TypeSerializer refuses floats; DynamoDB numbers travel as Decimal
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, list):
        return [_to_dynamodb_value(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_dynamodb_value(v) for k, v in value.items()}
    return value


def marshal_item(item: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a plain dict into DynamoDB attribute-value format."""
    return {
        key: _serializer.serialize(_to_dynamodb_value(value))
        for key, value in item.items()
        if value is not None
    }


def generate_batch(items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Build the put requests for one table in a BatchWriteItem call.

    Args:
        items: Plain seed items

    Returns:
        List of {"PutRequest": {"Item": ...}} entries

    Raises:
        ValueError: If there are more items than one batch accepts
    """
    if len(items) > MAX_BATCH_SIZE:
        raise ValueError(
            f"Seed batch has {len(items)} items; BatchWriteItem accepts at most {MAX_BATCH_SIZE}"
        )
    return [{"PutRequest": {"Item": marshal_item(item)}} for item in items]
