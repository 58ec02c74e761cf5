"""
DynamoDB connection manager.

This module provides:
- A single boto3 DynamoDB resource per process, built on first use
- Region selection from configuration (AWS_REGION, default ap-southeast-2)

The resource holds only read-only configuration (region, credentials), so it
is shared by every invocation of a warm Lambda container and never torn down.
"""

import logging
from functools import lru_cache

import boto3

from app.config import get_config

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_dynamodb_resource():
    """
    Get the process-wide DynamoDB resource (cached).

    Returns:
        boto3 DynamoDB ServiceResource
    """
    region = get_config().get_region()
    logger.info(f"Initializing DynamoDB resource in region {region}")
    return boto3.resource('dynamodb', region_name=region)


def reset_connection() -> None:
    """Drop the cached resource so the next call builds a new one."""
    get_dynamodb_resource.cache_clear()
