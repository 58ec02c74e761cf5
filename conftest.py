"""
Shared pytest fixtures.

Provides:
- Fake AWS credentials and Users API environment variables
- A moto-backed DynamoDB users table
"""

import pytest
import boto3
from moto import mock_aws

from database.user_store import reset_user_store

TEST_TABLE_NAME = 'test-users-table'
TEST_REGION = 'ap-southeast-2'


@pytest.fixture
def mock_env(monkeypatch):
    """Environment for the Lambdas, with credentials that can never reach AWS."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', TEST_REGION)
    monkeypatch.setenv('AWS_REGION', TEST_REGION)
    monkeypatch.setenv('TABLE_NAME', TEST_TABLE_NAME)
    yield


@pytest.fixture
def users_table(mock_env):
    """Create a mock DynamoDB users table; the store is rebuilt inside the mock."""
    with mock_aws():
        reset_user_store()
        dynamodb = boto3.resource('dynamodb', region_name=TEST_REGION)
        table = dynamodb.create_table(
            TableName=TEST_TABLE_NAME,
            KeySchema=[{'AttributeName': 'userId', 'KeyType': 'HASH'}],
            AttributeDefinitions=[{'AttributeName': 'userId', 'AttributeType': 'S'}],
            BillingMode='PAY_PER_REQUEST',
        )
        yield table
        reset_user_store()
