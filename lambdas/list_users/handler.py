"""
ListUsers Lambda Handler.

Triggered by API Gateway (GET /users), this Lambda:
1. Scans the users table (single page, no pagination)
2. Projects every item to its name
3. Returns {"users": [...]} or a 500 with the underlying error text
"""

import logging
from typing import Any, Dict

from app.config import get_config
from database.user_store import get_user_store
from models import UserListResponse
from utils.responses import error_response, json_response
from utils.result import Failure

# Setup logging
logger = logging.getLogger()
logger.setLevel(get_config().get_log_level())

FAILURE_MESSAGE = 'Failed to retrieve users'


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for listing users.

    Args:
        event: API Gateway proxy event (body is ignored)
        context: Lambda context

    Returns:
        API Gateway proxy response
    """
    event = event or {}
    logger.info(f"ListUsers invoked: {event.get('httpMethod', '-')} {event.get('path', '-')}")

    result = get_user_store().list_user_names()

    if isinstance(result, Failure):
        logger.error(f"ListUsers failed: {result.error}")
        return error_response(500, FAILURE_MESSAGE, result.error)

    return json_response(200, UserListResponse(users=result.value).model_dump())
