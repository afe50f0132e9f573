# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models and type definitions for the Cosmos DB SDK.

This module provides dataclasses for Cosmos DB resources and request markers:

- :class:`~cosmosdb_sdk.models.resource.Resource`: System properties shared by every resource.
- :class:`~cosmosdb_sdk.models.resource.Document`: Document with dict-like access.
- :class:`~cosmosdb_sdk.models.resource.AsyncCall`: Marker for asynchronous replace.
- :class:`~cosmosdb_sdk.models.resource.RequestError`: Service error payload.
- :class:`~cosmosdb_sdk.models.query.SqlQuery`: SQL query envelope.

Note:
    This ``__init__.py`` does NOT import/export models.
    Users should import directly from the specific module files.
"""
