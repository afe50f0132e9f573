# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Document operations namespace."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union, TYPE_CHECKING

from ..common.constants import RESOURCE_COLLECTIONS, RESOURCE_DATABASES, RESOURCE_DOCUMENTS
from ..models.query import ParameterSpec
from ..models.resource import Document
from ._names import _check_name, _join

if TYPE_CHECKING:
    from ..client import CosmosClient


def _document_id(document: Union[Document, Dict[str, Any]]) -> str:
    doc_id = document.id if isinstance(document, Document) else document.get("id")
    return _check_name(doc_id, "document id")


class DocumentOperations:
    """
    Document operations, accessed via ``client.documents``.

    Documents are returned as :class:`~cosmosdb_sdk.models.resource.Document`,
    which keeps system properties (``etag``, ``rid``...) as attributes and user
    properties behind dict-style access.

    Example::

        doc = client.documents.create("db", "orders", {"id": "o-1", "total": 10})
        doc["total"] = 12
        client.documents.replace_async("db", "orders", doc)   # If-Match: doc.etag

        rows = client.documents.query("db", "orders", "SELECT * FROM c WHERE c.total > @t", {"@t": 5})
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
            RESOURCE_DOCUMENTS,
        )

    def create(self, database: str, collection: str, document: Union[Document, Dict[str, Any]]) -> Document:
        """Create ``document``; its ``id`` must be set."""
        _document_id(document)
        return self._client.create(self._feed(database, collection), document, into=Document)

    def get(self, database: str, collection: str, document_id: str) -> Document:
        _check_name(document_id, "document id")
        return self._client.read(_join(self._feed(database, collection), document_id), into=Document)

    def replace(self, database: str, collection: str, document: Union[Document, Dict[str, Any]]) -> Document:
        link = _join(self._feed(database, collection), _document_id(document))
        return self._client.replace(link, document, into=Document)

    def replace_async(self, database: str, collection: str, document: Union[Document, Dict[str, Any]]) -> Document:
        """
        Replace ``document`` without waiting for completion.

        The document's etag, if any, guards against overwriting a concurrent update.
        """
        link = _join(self._feed(database, collection), _document_id(document))
        return self._client.replace_async(link, document, into=Document)

    def delete(self, database: str, collection: str, document_id: str) -> None:
        _check_name(document_id, "document id")
        self._client.delete(_join(self._feed(database, collection), document_id))

    def query(
        self,
        database: str,
        collection: str,
        query: str,
        parameters: Optional[ParameterSpec] = None,
    ) -> List[Document]:
        """
        Run a SQL query over the collection and return the first page of matches.

        :param query: SQL text, e.g. ``"SELECT * FROM c WHERE c.status = @s"``.
        :type query: str
        :param parameters: Named parameters, e.g. ``{"@s": "open"}``.
        :type parameters: dict or list[dict] or None
        :rtype: list[~cosmosdb_sdk.models.resource.Document]
        """
        body = self._client.query(self._feed(database, collection), query, parameters=parameters)
        return [Document.from_dict(item) for item in body.get("Documents", []) if isinstance(item, dict)]
