# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the Cosmos DB SDK.

This module contains the foundational components including authentication,
configuration, HTTP transport, and error handling.
"""

from .config import CosmosConfig
from .errors import (
    CosmosError,
    ValidationError,
    SerializationError,
    ConstructionError,
    AuthError,
    TransportError,
    DecodeError,
    StatusMismatchError,
)

__all__ = [
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
