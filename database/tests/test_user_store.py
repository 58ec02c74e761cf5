"""Unit tests for UserStore.

Uses moto to mock DynamoDB for testing without AWS infrastructure.
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from database.connection import get_dynamodb_resource
from database.user_store import UserStore, get_user_store, reset_user_store
from models import User
from utils.result import Failure, FailureKind, Success


@pytest.fixture
def store(users_table):
    """UserStore bound to the moto resource."""
    return get_user_store()


class TestUserStoreInit:
    """Test UserStore construction."""

    def test_uses_shared_resource(self, users_table):
        """Test the default store is built once and reuses the cached resource."""
        store = get_user_store()

        assert store is get_user_store()
        assert store.dynamodb is get_dynamodb_resource()

    def test_region_from_config(self, users_table):
        assert get_dynamodb_resource().meta.client.meta.region_name == 'ap-southeast-2'

    def test_explicit_resource(self):
        dynamodb = MagicMock()

        assert UserStore(dynamodb=dynamodb).dynamodb is dynamodb


class TestListUserNames:
    """Test list_user_names."""

    def test_empty_table(self, store):
        assert store.list_user_names() == Success([])

    def test_returns_names(self, store, users_table):
        users_table.put_item(Item={'userId': 'u-1', 'name': 'Alice'})
        users_table.put_item(Item={'userId': 'u-2', 'name': 'Bob'})

        result = store.list_user_names()

        assert isinstance(result, Success)
        assert sorted(result.value) == ['Alice', 'Bob']

    def test_item_without_name(self, store, users_table):
        users_table.put_item(Item={'userId': 'u-1'})

        result = store.list_user_names()

        assert isinstance(result, Failure)
        assert result.kind == FailureKind.STORE_ACCESS
        assert 'u-1' in result.error

    def test_missing_table_name(self, store, monkeypatch):
        monkeypatch.delenv('TABLE_NAME')

        result = store.list_user_names()

        assert isinstance(result, Failure)
        assert "Required configuration key 'TABLE_NAME' not found" in result.error

    def test_item_with_non_string_name(self, store, users_table):
        users_table.put_item(Item={'userId': 'u-1', 'name': 5})

        result = store.list_user_names()

        assert isinstance(result, Failure)
        assert result.kind == FailureKind.STORE_ACCESS
        assert "u-1 has a non-string 'name' attribute" in result.error

    def test_client_cannot_be_built(self, mock_env, monkeypatch):
        """Test a bad region becomes a Failure instead of raising."""
        monkeypatch.setenv('AWS_REGION', 'not a region!')
        reset_user_store()

        try:
            result = get_user_store().list_user_names()
        finally:
            reset_user_store()

        assert isinstance(result, Failure)
        assert result.kind == FailureKind.STORE_ACCESS

    def test_client_error(self, mock_env):
        """Test botocore errors become a Failure carrying the error text."""
        dynamodb = MagicMock()
        dynamodb.Table.return_value.scan.side_effect = ClientError(
            {'Error': {'Code': 'ProvisionedThroughputExceededException', 'Message': 'Slow down'}},
            'Scan',
        )

        result = UserStore(dynamodb=dynamodb).list_user_names()

        assert isinstance(result, Failure)
        assert 'ProvisionedThroughputExceededException' in result.error


class TestPutUser:
    """Test put_user."""

    def test_writes_item(self, store, users_table):
        user = User(userId='u-1', name='Alice')

        result = store.put_user(user)

        assert result == Success(user)
        assert users_table.get_item(Key={'userId': 'u-1'})['Item'] == {'userId': 'u-1', 'name': 'Alice'}

    def test_overwrites_existing_id(self, store, users_table):
        """Test writes are unconditional."""
        store.put_user(User(userId='u-1', name='Alice'))
        store.put_user(User(userId='u-1', name='Bob'))

        items = users_table.scan()['Items']
        assert items == [{'userId': 'u-1', 'name': 'Bob'}]

    def test_missing_table(self, store, monkeypatch):
        monkeypatch.setenv('TABLE_NAME', 'no-such-table')

        result = store.put_user(User(userId='u-1', name='Alice'))

        assert isinstance(result, Failure)
        assert result.kind == FailureKind.STORE_ACCESS
        assert result.error
