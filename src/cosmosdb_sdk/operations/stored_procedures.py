# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Stored procedure operations namespace."""

from __future__ import annotations

from typing import Any, List, Optional, TYPE_CHECKING

from ..common.constants import RESOURCE_COLLECTIONS, RESOURCE_DATABASES, RESOURCE_STORED_PROCEDURES
from ..models.resource import StoredProcedure
from ._names import _check_name, _join

if TYPE_CHECKING:
    from ..client import CosmosClient


class StoredProcedureOperations:
    """
    Stored procedure operations, accessed via ``client.stored_procedures``.

    Example::

        client.stored_procedures.create("db", "orders", "hello", "function () { getContext().getResponse().setBody('hi'); }")
        client.stored_procedures.execute("db", "orders", "hello")   # "hi"
    """

    def __init__(self, client: "CosmosClient") -> None:
        self._client = client

    @staticmethod
    def _feed(database: str, collection: str) -> str:
        return _join(
            RESOURCE_DATABASES,
            _check_name(database, "database"),
            RESOURCE_COLLECTIONS,
            _check_name(collection, "collection"),
            RESOURCE_STORED_PROCEDURES,
        )

    def create(self, database: str, collection: str, procedure: str, body: str) -> StoredProcedure:
        _check_name(procedure, "stored procedure")
        sproc = StoredProcedure(id=procedure, body=body)
        return self._client.create(self._feed(database, collection), sproc, into=StoredProcedure)

    def execute(
        self,
        database: str,
        collection: str,
        procedure: str,
        params: Optional[List[Any]] = None,
    ) -> Any:
        """
        Execute a stored procedure.

        :param params: Positional arguments passed to the procedure (sent as a JSON array).
        :type params: list or None
        :return: Whatever the procedure set as its response body.
        """
        _check_name(procedure, "stored procedure")
        link = _join(self._feed(database, collection), procedure)
        return self._client.execute(link, list(params or []))

    def delete(self, database: str, collection: str, procedure: str) -> None:
        _check_name(procedure, "stored procedure")
        self._client.delete(_join(self._feed(database, collection), procedure))
