# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Client library for the Azure Cosmos DB SQL REST API.

Example::

    from cosmosdb_sdk import CosmosClient

    with CosmosClient("https://myaccount.documents.azure.com", master_key) as client:
        client.create("dbs/db1/colls/orders/docs", {"id": "o-1", "total": 10})
        doc = client.read("dbs/db1/colls/orders/docs/o-1")
"""

from .__version__ import __version__
from .client import ClientProtocol, CosmosClient
from .core.config import CosmosConfig
from .core.errors import (
    AuthError,
    ConstructionError,
    CosmosError,
    DecodeError,
    SerializationError,
    StatusMismatchError,
    TransportError,
    ValidationError,
)

__all__ = [
    "__version__",
    "CosmosClient",
    "ClientProtocol",
    "CosmosConfig",
    "CosmosError",
    "ValidationError",
    "SerializationError",
    "ConstructionError",
    "AuthError",
    "TransportError",
    "DecodeError",
    "StatusMismatchError",
]
