# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespace classes for the Cosmos DB SDK.

This module contains the operation namespace classes that organize
related operations under intuitive namespaces:
- DatabaseOperations: database create, read, list and delete
- CollectionOperations: collection create, read, list and delete
- DocumentOperations: document CRUD, async replace and queries
- StoredProcedureOperations: stored procedure create, execute and delete
"""

__all__ = []
