"""
CreateUser Lambda Handler.

Triggered by API Gateway (POST /users), this Lambda:
1. Parses the request body and validates `name`
2. Generates a version-4 UUID for the new user
3. Writes {userId, name} to the users table (unconditional PutItem)
4. Returns the generated userId
"""

import base64
import binascii
import json
import logging
import uuid
from typing import Any, Dict

from pydantic import ValidationError

from app.config import get_config
from database.user_store import get_user_store
from models import CreateUserRequest, User, UserCreatedResponse
from utils.responses import error_response, json_response
from utils.result import Failure

# Setup logging
logger = logging.getLogger()
logger.setLevel(get_config().get_log_level())

INVALID_INPUT_MESSAGE = 'Name is required and must be a string'
FAILURE_MESSAGE = 'Failed to add user'


class InvalidInputError(ValueError):
    """Raised when the request body does not carry a usable name."""
    pass


def parse_request_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract the JSON object carried in an API Gateway proxy event.

    A missing or null body is treated as an empty object. Base64 bodies are
    decoded when `isBase64Encoded` is set, and a dict body (direct Lambda
    invocation) is used as-is.

    Args:
        event: API Gateway proxy event

    Returns:
        Decoded body as a dict

    Raises:
        InvalidInputError: If the body is not a JSON object
    """
    body = event.get('body')
    if body is None:
        return {}
    if isinstance(body, dict):
        return body

    try:
        if event.get('isBase64Encoded'):
            body = base64.b64decode(body, validate=True).decode('utf-8')
        parsed = json.loads(body or '{}')
    except (binascii.Error, UnicodeDecodeError, TypeError, ValueError) as e:
        raise InvalidInputError(f"Request body is not valid JSON: {e}")

    if not isinstance(parsed, dict):
        raise InvalidInputError("Request body must be a JSON object")
    return parsed


def validate_request(body: Dict[str, Any]) -> CreateUserRequest:
    """
    Validate the decoded body.

    Raises:
        InvalidInputError: If name is missing, null, empty or not a string
    """
    try:
        return CreateUserRequest.model_validate(body)
    except ValidationError as e:
        raise InvalidInputError(str(e))


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for creating a user.

    Args:
        event: API Gateway proxy event with body {"name": string}
        context: Lambda context

    Returns:
        API Gateway proxy response
    """
    event = event or {}
    logger.info(f"CreateUser invoked: {event.get('httpMethod', '-')} {event.get('path', '-')}")

    try:
        request = validate_request(parse_request_body(event))
    except InvalidInputError as e:
        logger.warning(f"Rejected CreateUser request: {e}")
        return error_response(400, INVALID_INPUT_MESSAGE)

    user = User(userId=str(uuid.uuid4()), name=request.name)
    result = get_user_store().put_user(user)

    if isinstance(result, Failure):
        logger.error(f"CreateUser failed: {result.error}")
        return error_response(500, FAILURE_MESSAGE, result.error)

    return json_response(200, UserCreatedResponse(userId=user.userId).model_dump())
