# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Optional, Protocol, Union, runtime_checkable

import requests

from azure.core.credentials import AzureKeyCredential

from .core._auth import _AuthManager
from .core.config import CosmosConfig
from .core.errors import SerializationError
from .data._response import (
    STATUS_CREATE,
    STATUS_DELETE,
    STATUS_EXECUTE,
    STATUS_QUERY,
    STATUS_READ,
    STATUS_REPLACE,
)
from .data._links import locate
from .data._rest import _RestClient
from .models.query import ParameterSpec, SqlQuery
from .models.resource import AsyncCall
from .operations.collections import CollectionOperations
from .operations.databases import DatabaseOperations
from .operations.documents import DocumentOperations
from .operations.stored_procedures import StoredProcedureOperations


@runtime_checkable
class ClientProtocol(Protocol):
    """
    Capability set of a Cosmos DB client.

    Implement this protocol to substitute the client, e.g. with an in-memory
    fake in tests. :class:`CosmosClient` is the HTTP implementation.
    """

    def read(self, link: str, into: Any = None) -> Any: ...

    def delete(self, link: str) -> None: ...

    def query(self, link: str, query: Union[str, SqlQuery], into: Any = None, parameters: Optional[ParameterSpec] = None) -> Any: ...

    def create(self, link: str, body: Any, into: Any = None) -> Any: ...

    def replace(self, link: str, body: Any, into: Any = None) -> Any: ...

    def replace_async(self, link: str, body: Any, into: Any = None) -> Any: ...

    def execute(self, link: str, body: Any, into: Any = None) -> Any: ...

    def get_uri(self) -> str: ...

    def get_config(self) -> CosmosConfig: ...

    def enable_debug(self) -> None: ...

    def disable_debug(self) -> None: ...


def _etag_of(body: Any) -> str:
    """Concurrency token exposed by ``body``, or an empty string."""
    if isinstance(body, Mapping):
        etag = body.get("_etag")
    else:
        etag = getattr(body, "etag", None)
    return etag if isinstance(etag, str) else ""


class CosmosClient:
    """
    High-level client for Azure Cosmos DB (SQL API) over REST.

    Every operation takes a resource link such as ``"dbs/db1/colls/orders/docs/o-1"``,
    signs the request with the account master key, sends it, and returns the
    decoded JSON body. Failures raise a subclass of
    :class:`~cosmosdb_sdk.core.errors.CosmosError`; nothing is retried.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager shares one HTTP session across
        calls and closes it on exit::

            with CosmosClient(endpoint, master_key) as client:
                doc = client.create("dbs/db1/colls/orders/docs", {"id": "o-1", "total": 10})

    **Namespace API**:
        Typed helpers that build links from names:

        - ``client.databases``: create, get, list, delete databases
        - ``client.collections``: create, get, list, delete collections
        - ``client.documents``: document CRUD, async replace and SQL queries
        - ``client.stored_procedures``: create, execute, delete stored procedures

    :param base_url: Account endpoint, for example ``"https://myaccount.documents.azure.com"``.
        Trailing slash is automatically removed.
    :type base_url: :class:`str`
    :param credential: Account master key, as a string or an ``AzureKeyCredential``.
    :type credential: :class:`str` or ~azure.core.credentials.AzureKeyCredential
    :param config: Optional configuration. Defaults to :meth:`CosmosConfig.from_env`.
    :type config: ~cosmosdb_sdk.core.config.CosmosConfig or None

    :raises ValueError: If ``base_url`` is missing or empty after trimming.
    :raises TypeError: If ``credential`` is neither a string nor an ``AzureKeyCredential``.
    """

    def __init__(
        self,
        base_url: str,
        credential: Union[str, AzureKeyCredential],
        config: Optional[CosmosConfig] = None,
    ) -> None:
        self.auth = _AuthManager(credential)
        self._base_url = (base_url or "").rstrip("/")
        if not self._base_url:
            raise ValueError("base_url is required.")
        self._config = config or CosmosConfig.from_env()
        self._rest: Optional[_RestClient] = None
        self._session: Optional[requests.Session] = None
        self._owns_session: bool = False

        # Initialize operation namespaces
        self.databases = DatabaseOperations(self)
        self.collections = CollectionOperations(self)
        self.documents = DocumentOperations(self)
        self.stored_procedures = StoredProcedureOperations(self)

    def __enter__(self) -> "CosmosClient":
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
            if self._rest is not None:
                self._rest._http._session = self._session
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Close the client and release its HTTP session.

        Safe to call multiple times.
        """
        if self._rest is not None:
            self._rest.close()
            self._rest = None
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
            self._owns_session = False

    def _get_rest(self) -> _RestClient:
        """Get or create the internal REST client, sharing the context-manager session if any."""
        if self._rest is None:
            self._rest = _RestClient(
                self.auth,
                self._base_url,
                self._config,
                session=self._session,
            )
        return self._rest

    # ---------------- Accessors ----------------
    def get_uri(self) -> str:
        """Return the account endpoint this client talks to."""
        return self._base_url

    def get_config(self) -> CosmosConfig:
        """Return a snapshot of the client configuration."""
        return self._config

    def enable_debug(self) -> None:
        """Turn on debug logging for subsequent calls. Idempotent."""
        self._set_config(replace(self._config, debug=True))

    def disable_debug(self) -> None:
        """Turn off debug logging for subsequent calls. Idempotent."""
        self._set_config(replace(self._config, debug=False))

    def _set_config(self, config: CosmosConfig) -> None:
        self._config = config
        if self._rest is not None:
            self._rest.config = config

    # ---------------- Resource operations ----------------
    def read(self, link: str, into: Any = None) -> Any:
        """
        Read a resource by link.

        :param link: Item link, e.g. ``"dbs/db1/colls/orders/docs/o-1"``.
        :type link: :class:`str`
        :param into: Optional target type for the decoded body: a model class with
            ``from_dict``, a dataclass, or any callable taking the decoded JSON.
        :return: Decoded body.
        :raises ~cosmosdb_sdk.core.errors.StatusMismatchError: If the service does not answer 200.
        """
        return self._get_rest()._execute("GET", link, STATUS_READ, into=into)

    def delete(self, link: str) -> None:
        """
        Delete a resource by link. The empty 204 body is not decoded.

        :raises ~cosmosdb_sdk.core.errors.StatusMismatchError: If the service does not
            answer 204, including when the resource is already gone (404).
        """
        self._get_rest()._execute("DELETE", link, STATUS_DELETE, discard=True)

    def query(
        self,
        link: str,
        query: Union[str, SqlQuery],
        into: Any = None,
        parameters: Optional[ParameterSpec] = None,
    ) -> Any:
        """
        Run a SQL query against a feed.

        The body is sent as ``{"query": "<text>"}`` (plus ``"parameters"`` when given).

        :param link: Feed link, e.g. ``"dbs/db1/colls/orders/docs"``.
        :type link: :class:`str`
        :param query: Query text or a prepared :class:`~cosmosdb_sdk.models.query.SqlQuery`.
        :param into: Optional target type for the decoded body.
        :param parameters: Named parameters as a mapping or the wire list.
        :return: Decoded body, typically ``{"_rid": ..., "Documents": [...], "_count": n}``.
        :raises ~cosmosdb_sdk.core.errors.SerializationError: If the query text or parameters are malformed.
        """
        try:
            if not isinstance(query, SqlQuery):
                query = SqlQuery.build(query, parameters)
            elif parameters is not None:
                query = SqlQuery.build(query.query, parameters)
        except (TypeError, ValueError, AttributeError) as exc:
            resource_type, resource_id = locate(link)
            raise SerializationError(
                f"Invalid query for {link!r}: {exc}",
                resource_id=resource_id,
                resource_type=resource_type,
            ) from exc
        return self._get_rest()._execute("POST", link, STATUS_QUERY, query, into=into, is_query=True)

    def create(self, link: str, body: Any, into: Any = None) -> Any:
        """
        Create a resource under a feed link.

        Creating on a database's ``colls`` feed also provisions throughput.

        :param link: Feed link, e.g. ``"dbs/db1/colls/orders/docs"``.
        :param body: Text, raw bytes, a model, or any JSON-serializable value.
        :return: The created resource as returned by the service.
        """
        return self._get_rest()._execute("POST", link, STATUS_CREATE, body, into=into)

    def replace(self, link: str, body: Any, into: Any = None) -> Any:
        """Replace a resource by link."""
        return self._get_rest()._execute("PUT", link, STATUS_REPLACE, body, into=into)

    def replace_async(self, link: str, body: Any, into: Any = None) -> Any:
        """
        Replace a resource without waiting for the write to complete.

        When ``body`` exposes a concurrency token (a model's ``etag`` or a
        mapping's ``"_etag"``) it is sent as ``If-Match`` so a concurrent update
        makes the call fail with 412 instead of being overwritten.
        """
        async_call = AsyncCall(etag=_etag_of(body))
        return self._get_rest()._execute("PUT", link, STATUS_REPLACE, body, into=into, async_call=async_call)

    def execute(self, link: str, body: Any, into: Any = None) -> Any:
        """Execute a server-side script (e.g. a stored procedure link) with ``body`` as its input."""
        return self._get_rest()._execute("POST", link, STATUS_EXECUTE, body, into=into)


__all__ = ["CosmosClient", "ClientProtocol"]
