"""
Users table access.

Wraps the two DynamoDB calls the Users API makes (a full Scan and a single
PutItem) and converts any exception raised along the way into a `Failure`.

DynamoDB Schema:
- Table: value of TABLE_NAME
- Partition key: userId (STRING)
- Attributes: name (STRING)
"""

import logging
from functools import lru_cache

from app.config import get_config
from database.connection import get_dynamodb_resource, reset_connection
from models import User
from utils.result import Failure, FailureKind, Result, Success

logger = logging.getLogger(__name__)


class UserStore:
    """
    Item store for User records.

    The table name is resolved on every call so it always reflects the
    current environment. The shared DynamoDB resource is also resolved per
    call, inside the same error handling, so a client that cannot be built
    surfaces as a Failure.

    Attributes:
        dynamodb: boto3 DynamoDB resource
    """

    def __init__(self, dynamodb=None):
        self._dynamodb = dynamodb

    @property
    def dynamodb(self):
        if self._dynamodb is not None:
            return self._dynamodb
        return get_dynamodb_resource()

    def _table(self):
        return self.dynamodb.Table(get_config().get_table_name())

    def list_user_names(self) -> Result:
        """
        Scan the users table and project each item to its name.

        Only the first Scan page is read. DynamoDB truncates a Scan at 1 MB, so
        very large tables return a partial list.

        Returns:
            Success with a list of names, or Failure(STORE_ACCESS)
        """
        try:
            response = self._table().scan()
            names = []
            for item in response.get('Items', []):
                if 'name' not in item:
                    raise ValueError(f"Item {item.get('userId', 'unknown')} has no 'name' attribute")
                if not isinstance(item['name'], str):
                    raise ValueError(f"Item {item.get('userId', 'unknown')} has a non-string 'name' attribute")
                names.append(item['name'])
        except Exception as e:
            logger.error(f"Error retrieving users from DynamoDB: {e}", exc_info=True)
            return Failure.from_exception(FailureKind.STORE_ACCESS, e)

        logger.info(f"Retrieved {len(names)} users")
        return Success(names)

    def put_user(self, user: User) -> Result:
        """
        Write a single user item.

        The write is unconditional: an existing item with the same userId is
        overwritten.

        Args:
            user: User to store

        Returns:
            Success with the stored user, or Failure(STORE_ACCESS)
        """
        try:
            self._table().put_item(Item=user.model_dump())
        except Exception as e:
            logger.error(f"Error adding user to DynamoDB: {e}", exc_info=True)
            return Failure.from_exception(FailureKind.STORE_ACCESS, e)

        logger.info(f"Stored user data: userId={user.userId}, name={user.name}")
        return Success(user)


@lru_cache(maxsize=1)
def get_user_store() -> UserStore:
    """Get the process-wide UserStore (cached)."""
    return UserStore()


def reset_user_store() -> None:
    """Drop the cached store and DynamoDB resource; used by tests that swap the backend."""
    get_user_store.cache_clear()
    reset_connection()
