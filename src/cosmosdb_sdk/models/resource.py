# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Resource data models for Cosmos DB.

Every Cosmos DB resource carries the same system properties (``_rid``,
``_self``, ``_etag``, ``_ts``) next to its user-visible ``id``. The models
below expose those as attributes and convert to and from the wire form.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

# Wire name -> attribute name for system properties
_SYSTEM_PROPERTIES = {
    "_rid": "rid",
    "_self": "self_link",
    "_etag": "etag",
    "_ts": "ts",
}


@dataclass
class Resource:
    """
    System properties shared by all Cosmos DB resources.

    :param id: User-defined unique name of the resource.
    :type id: str
    :param rid: Service-generated resource id (``_rid``).
    :type rid: str | None
    :param self_link: Addressable self link (``_self``).
    :type self_link: str | None
    :param etag: Concurrency token (``_etag``).
    :type etag: str | None
    :param ts: Last-modified timestamp in epoch seconds (``_ts``).
    :type ts: int | None
    """

    id: str = ""
    rid: Optional[str] = None
    self_link: Optional[str] = None
    etag: Optional[str] = None
    ts: Optional[int] = None

    @classmethod
    def _system_kwargs(cls, payload: Dict[str, Any]) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"id": str(payload.get("id", ""))}
        for wire, attr in _SYSTEM_PROPERTIES.items():
            if wire in payload:
                kwargs[attr] = payload[wire]
        return kwargs

    def _system_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"id": self.id}
        for wire, attr in _SYSTEM_PROPERTIES.items():
            value = getattr(self, attr)
            if value is not None:
                out[wire] = value
        return out

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Resource":
        """
        Create a resource from a decoded service response.

        :param payload: Decoded JSON object.
        :type payload: dict[str, Any]
        :rtype: Resource
        """
        if not isinstance(payload, dict):
            raise TypeError(f"{cls.__name__} payload must be a JSON object")
        return cls(**cls._system_kwargs(payload))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire representation."""
        return self._system_dict()


@dataclass
class Database(Resource):
    """A database resource."""

    colls: Optional[str] = None
    users: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Database":
        if not isinstance(payload, dict):
            raise TypeError("Database payload must be a JSON object")
        return cls(**cls._system_kwargs(payload), colls=payload.get("_colls"), users=payload.get("_users"))

    def to_dict(self) -> Dict[str, Any]:
        return self._system_dict()


@dataclass
class Collection(Resource):
    """
    A collection (container) resource.

    :param indexing_policy: Indexing policy as returned by the service.
    :type indexing_policy: dict[str, Any] | None
    """

    indexing_policy: Optional[Dict[str, Any]] = None
    docs: Optional[str] = None
    sprocs: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Collection":
        if not isinstance(payload, dict):
            raise TypeError("Collection payload must be a JSON object")
        return cls(
            **cls._system_kwargs(payload),
            indexing_policy=payload.get("indexingPolicy"),
            docs=payload.get("_docs"),
            sprocs=payload.get("_sprocs"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out = self._system_dict()
        if self.indexing_policy is not None:
            out["indexingPolicy"] = self.indexing_policy
        return out


@dataclass
class StoredProcedure(Resource):
    """A server-side JavaScript stored procedure."""

    body: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "StoredProcedure":
        if not isinstance(payload, dict):
            raise TypeError("StoredProcedure payload must be a JSON object")
        return cls(**cls._system_kwargs(payload), body=payload.get("body", ""))

    def to_dict(self) -> Dict[str, Any]:
        out = self._system_dict()
        out["body"] = self.body
        return out


@dataclass
class Document(Resource):
    """
    A JSON document with dict-like access to its user properties.

    Example::

        doc = client.documents.get("db", "orders", "o-1")
        print(doc.etag)        # concurrency token
        print(doc["total"])    # user property
        doc["total"] = 42
        client.documents.replace_async("db", "orders", doc)
    """

    data: Dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.data[key] = value

    def __delitem__(self, key: str) -> None:
        del self.data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Document":
        """
        Create a document from a decoded service response.

        Known system properties move to attributes; everything else, including
        other underscore keys such as ``_attachments``, stays in ``data``.
        """
        if not isinstance(payload, dict):
            raise TypeError("Document payload must be a JSON object")
        data = {k: v for k, v in payload.items() if k != "id" and k not in _SYSTEM_PROPERTIES}
        return cls(**cls._system_kwargs(payload), data=data)

    def to_dict(self) -> Dict[str, Any]:
        out = dict(self.data)
        out.update(self._system_dict())
        return out


@dataclass(frozen=True)
class AsyncCall:
    """
    Marker requesting that a replace is acknowledged without waiting for completion.

    :param etag: Concurrency token of the entity being replaced; empty when unknown.
    :type etag: str
    """

    etag: str = ""


@dataclass(frozen=True)
class RequestError:
    """
    Error payload returned by the service on a failed request.

    :param code: Service error code, e.g. ``"NotFound"``.
    :type code: str
    :param message: Service error message.
    :type message: str
    """

    code: str = ""
    message: str = ""

    @classmethod
    def from_body(cls, text: str) -> "RequestError":
        """
        Decode a response body into a :class:`RequestError`.

        Bodies that are not a JSON object keep a short excerpt as the message.
        """
        try:
            payload = json.loads(text) if text else {}
        except ValueError:
            return cls(message=text[:200])
        if not isinstance(payload, dict):
            return cls(message=text[:200])
        return cls(code=str(payload.get("code") or ""), message=str(payload.get("message") or ""))

    def __str__(self) -> str:
        if self.code:
            return f"{self.code}: {self.message}"
        return self.message


__all__ = [
    "Resource",
    "Database",
    "Collection",
    "StoredProcedure",
    "Document",
    "AsyncCall",
    "RequestError",
]
