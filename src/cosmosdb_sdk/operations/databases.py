# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Database operations namespace."""

from __future__ import annotations

from typing import List, TYPE_CHECKING

from ..common.constants import RESOURCE_DATABASES
from ..models.resource import Database
from ._names import _check_name, _join

if TYPE_CHECKING:
    from ..client import CosmosClient


class DatabaseOperations:
    """
    Database operations, accessed via ``client.databases``.

    Example::

        db = client.databases.create("inventory")
        print(db.rid, db.etag)
        for db in client.databases.list():
            print(db.id)
        client.databases.delete("inventory")
    """

    def __init__(self, client: "CosmosClient") -> None:
        self._client = client

    def create(self, database: str) -> Database:
        """Create a database named ``database``."""
        _check_name(database, "database")
        return self._client.create(RESOURCE_DATABASES, {"id": database}, into=Database)

    def get(self, database: str) -> Database:
        _check_name(database, "database")
        return self._client.read(_join(RESOURCE_DATABASES, database), into=Database)

    def list(self) -> List[Database]:
        """List all databases in the account (first page only)."""
        body = self._client.read(RESOURCE_DATABASES)
        return [Database.from_dict(item) for item in body.get("Databases", [])]

    def delete(self, database: str) -> None:
        _check_name(database, "database")
        self._client.delete(_join(RESOURCE_DATABASES, database))
