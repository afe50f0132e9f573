# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for Cosmos DB SDK tests.

This module provides common test fixtures, mock objects, and configuration
that can be used across all test modules.
"""

import pytest

from cosmosdb_sdk.core.config import CosmosConfig

# base64("test-master-key")
MASTER_KEY = "dGVzdC1tYXN0ZXIta2V5"


@pytest.fixture
def dummy_auth():
    """Signer that returns a fixed token and records what it signed."""

    class DummyAuth:
        def __init__(self):
            self.calls = []

        def _sign(self, method, resource_type, resource_id, date):
            self.calls.append((method, resource_type, resource_id, date))
            return "test-token"

    return DummyAuth()


@pytest.fixture
def test_config():
    """Test configuration with safe defaults."""
    return CosmosConfig(http_timeout=5)


@pytest.fixture
def master_key():
    return MASTER_KEY


@pytest.fixture
def sample_base_url():
    """Standard test endpoint."""
    return "https://account.example.com"


@pytest.fixture
def sample_document():
    return {"id": "x", "v": 1}
