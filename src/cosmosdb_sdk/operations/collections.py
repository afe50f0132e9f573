# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Collection operations namespace."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TYPE_CHECKING

from ..common.constants import RESOURCE_COLLECTIONS, RESOURCE_DATABASES
from ..models.resource import Collection
from ._names import _check_name, _join

if TYPE_CHECKING:
    from ..client import CosmosClient


class CollectionOperations:
    """
    Collection (container) operations, accessed via ``client.collections``.

    Creating a collection provisions ``config.offer_throughput`` request units.

    Example::

        coll = client.collections.create("inventory", "items")
        client.collections.delete("inventory", "items")
    """

    def __init__(self, client: "CosmosClient") -> None:
        self._client = client

    @staticmethod
    def _feed(database: str) -> str:
        return _join(RESOURCE_DATABASES, _check_name(database, "database"), RESOURCE_COLLECTIONS)

    def create(
        self,
        database: str,
        collection: str,
        indexing_policy: Optional[Dict[str, Any]] = None,
    ) -> Collection:
        """
        Create a collection in ``database``.

        :param database: Database id.
        :type database: str
        :param collection: Collection id.
        :type collection: str
        :param indexing_policy: Optional indexing policy sent as ``indexingPolicy``.
        :type indexing_policy: dict or None
        :rtype: ~cosmosdb_sdk.models.resource.Collection
        """
        _check_name(collection, "collection")
        body = Collection(id=collection, indexing_policy=indexing_policy)
        return self._client.create(self._feed(database), body, into=Collection)

    def get(self, database: str, collection: str) -> Collection:
        _check_name(collection, "collection")
        return self._client.read(_join(self._feed(database), collection), into=Collection)

    def list(self, database: str) -> List[Collection]:
        body = self._client.read(self._feed(database))
        return [Collection.from_dict(item) for item in body.get("DocumentCollections", [])]

    def delete(self, database: str, collection: str) -> None:
        _check_name(collection, "collection")
        self._client.delete(_join(self._feed(database), collection))
