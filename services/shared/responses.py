"""
API Gateway proxy response helpers
"""
import json
from decimal import Decimal
from typing import Any, Dict

HEADERS = {
    "content-type": "application/json",
    "Access-Control-Allow-Headers": "*",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "*",
    "Accepts": "*/*",
}


def _json_default(value: Any) -> Any:
    # DynamoDB hands numbers back as Decimal
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(body: Any) -> str:
    return json.dumps(body, default=_json_default)


def build_response(status_code: int, body: Any) -> Dict[str, Any]:
    """JSON response with permissive CORS headers"""
    return {
        "statusCode": status_code,
        "headers": dict(HEADERS),
        "body": to_json(body),
    }


def empty_response(status_code: int = 204) -> Dict[str, Any]:
    """Bodiless response, used by delete"""
    return {
        "statusCode": status_code,
        "body": "",
    }
