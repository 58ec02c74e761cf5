"""
API Gateway proxy integration responses.
"""

import json
from typing import Any, Dict, Optional

from models import ErrorResponse

JSON_HEADERS = {'Content-Type': 'application/json'}


def json_response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build a Lambda proxy response with a JSON body.

    Args:
        status_code: HTTP status code
        body: JSON-serializable payload

    Returns:
        Dict with statusCode, headers and serialized body
    """
    return {
        'statusCode': status_code,
        'headers': dict(JSON_HEADERS),
        'body': json.dumps(body),
    }


def error_response(status_code: int, message: str, error: Optional[str] = None) -> Dict[str, Any]:
    """Build an error response; `error` is omitted when not given."""
    body = ErrorResponse(message=message, error=error).model_dump(exclude_none=True)
    return json_response(status_code, body)
