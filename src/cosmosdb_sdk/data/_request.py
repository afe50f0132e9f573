# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Outbound request construction.

:func:`build_request` turns a verb, a resource link and a body into a fully
headered :class:`_ResourceRequest`. Building performs no network I/O; the only
inputs besides the arguments are the client configuration and the current time.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from email.utils import formatdate
from functools import singledispatch
from typing import Any, Dict, Optional, Union

import requests

from ..common.constants import (
    CONSISTENCY_LEVELS,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_QUERY_JSON,
    HEADER_AUTHORIZATION,
    HEADER_CONSISTENCY_LEVEL,
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
    HEADER_DATE,
    HEADER_IF_MATCH,
    HEADER_IS_QUERY,
    HEADER_OFFER_THROUGHPUT,
    HEADER_POPULATE_QUERY_METRICS,
    HEADER_PREFER,
    HEADER_VERSION,
    PREFER_RESPOND_ASYNC,
)
from ..core._error_codes import CONSTRUCTION_INVALID_REQUEST
from ..core.config import CosmosConfig
from ..core.errors import AuthError, ConstructionError, SerializationError
from ..models.query import SqlQuery
from ..models.resource import AsyncCall, Resource
from ._links import ResourceLink, parse_link


@singledispatch
def _serialize(body: Any) -> bytes:
    """Encode a request body: text and raw bytes pass through, anything else becomes JSON."""
    try:
        return json.dumps(body).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Body of type {type(body).__name__} is not JSON serializable: {exc}") from exc


@_serialize.register(str)
def _serialize_text(body: str) -> bytes:
    return body.encode("utf-8")


@_serialize.register(bytes)
@_serialize.register(bytearray)
def _serialize_raw(body: Union[bytes, bytearray]) -> bytes:
    return bytes(body)


@_serialize.register(type(None))
def _serialize_empty(body: None) -> bytes:
    return b""


@_serialize.register(Resource)
@_serialize.register(SqlQuery)
def _serialize_model(body: Union[Resource, SqlQuery]) -> bytes:
    return _serialize(body.to_dict())


def _http_date() -> str:
    """Current UTC time in RFC 1123 format, as ``x-ms-date`` requires."""
    return formatdate(usegmt=True)


@dataclass
class _ResourceRequest:
    """
    An outbound request plus the resource it addresses.

    Headers are attached by :func:`build_request`; once :attr:`prepared` is set
    the request is final and is only read from then on.
    """

    method: str
    url: str
    link: ResourceLink
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    prepared: Optional[requests.PreparedRequest] = field(default=None, repr=False)

    @property
    def resource_id(self) -> str:
        return self.link.resource_id

    @property
    def resource_type(self) -> str:
        return self.link.resource_type

    def __repr__(self) -> str:
        headers = {k: ("<redacted>" if k == HEADER_AUTHORIZATION else v) for k, v in self.headers.items()}
        return f"<{self.method} {self.url} headers={headers} body={len(self.body)} bytes>"

    def default_headers(self, auth: Any, config: CosmosConfig, date: Optional[str] = None) -> None:
        """Attach content type, API version, date, authorization and consistency headers."""
        date = date or _http_date()
        try:
            token = auth._sign(self.method, self.resource_type, self.resource_id, date)
        except AuthError as exc:
            exc.resource_id = self.resource_id
            exc.resource_type = self.resource_type
            exc.request = self
            raise
        except (TypeError, ValueError) as exc:
            raise AuthError(
                f"Failed to sign request: {exc}",
                resource_id=self.resource_id,
                resource_type=self.resource_type,
                request=self,
            ) from exc
        self.headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON
        self.headers[HEADER_VERSION] = config.api_version
        self.headers[HEADER_DATE] = date
        self.headers[HEADER_AUTHORIZATION] = token
        if config.consistency_level:
            if config.consistency_level not in CONSISTENCY_LEVELS:
                raise ConstructionError(
                    f"Unsupported consistency level {config.consistency_level!r}.",
                    subcode=CONSTRUCTION_INVALID_REQUEST,
                    resource_id=self.resource_id,
                    resource_type=self.resource_type,
                    request=self,
                )
            self.headers[HEADER_CONSISTENCY_LEVEL] = config.consistency_level

    def query_headers(self) -> None:
        self.headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_QUERY_JSON
        self.headers[HEADER_IS_QUERY] = "True"
        self.headers[HEADER_CONTENT_LENGTH] = str(len(self.body))

    def async_headers(self, etag: str) -> None:
        if etag:
            self.headers[HEADER_IF_MATCH] = etag
        self.headers[HEADER_PREFER] = PREFER_RESPOND_ASYNC

    def throughput_headers(self, throughput: int) -> None:
        self.headers[HEADER_OFFER_THROUGHPUT] = str(throughput)

    def query_metrics_headers(self) -> None:
        self.headers[HEADER_POPULATE_QUERY_METRICS] = "True"

    def prepare(self) -> requests.PreparedRequest:
        try:
            self.prepared = requests.Request(
                self.method,
                self.url,
                headers=dict(self.headers),
                data=self.body or None,
            ).prepare()
        except (requests.exceptions.RequestException, ValueError) as exc:
            raise ConstructionError(
                f"Invalid request for {self.url!r}: {exc}",
                subcode=CONSTRUCTION_INVALID_REQUEST,
                resource_id=self.resource_id,
                resource_type=self.resource_type,
                request=self,
            ) from exc
        return self.prepared


def build_request(
    method: str,
    base_url: str,
    link: str,
    body: Any = None,
    *,
    auth: Any,
    config: CosmosConfig,
    async_call: Optional[AsyncCall] = None,
    is_query: bool = False,
    date: Optional[str] = None,
) -> _ResourceRequest:
    """
    Build a fully headered request for ``method`` on ``link``.

    :param method: HTTP verb.
    :type method: :class:`str`
    :param base_url: Account endpoint without trailing slash.
    :type base_url: :class:`str`
    :param link: Resource link relative to the endpoint.
    :type link: :class:`str`
    :param body: Request body: text, raw bytes, a model, or any JSON-serializable value.
        For queries, the query text or a :class:`~cosmosdb_sdk.models.query.SqlQuery`.
    :param auth: Signer exposing ``_sign(method, resource_type, resource_id, date)``.
    :param config: Client configuration.
    :type config: ~cosmosdb_sdk.core.config.CosmosConfig
    :param async_call: Marker requesting an asynchronous replace.
    :type async_call: ~cosmosdb_sdk.models.resource.AsyncCall or None
    :param is_query: Wrap ``body`` in the query envelope and send it as a query.
    :type is_query: :class:`bool`
    :param date: Override for the ``x-ms-date`` value.
    :type date: :class:`str` or None
    :return: The built request, with :attr:`_ResourceRequest.prepared` set.
    :rtype: _ResourceRequest
    :raises ~cosmosdb_sdk.core.errors.ConstructionError: Malformed link or request.
    :raises ~cosmosdb_sdk.core.errors.SerializationError: Body is not encodable.
    :raises ~cosmosdb_sdk.core.errors.AuthError: Signing failed.
    """
    parsed = parse_link(link)
    if is_query and not isinstance(body, SqlQuery):
        body = SqlQuery.build(body) if isinstance(body, str) else body
    try:
        data = _serialize(body)
    except SerializationError as exc:
        exc.resource_id = parsed.resource_id
        exc.resource_type = parsed.resource_type
        raise

    request = _ResourceRequest(
        method=method.upper(),
        url=f"{base_url.rstrip('/')}/{parsed.link}",
        link=parsed,
        body=data,
    )
    request.default_headers(auth, config, date=date)
    if is_query:
        request.query_headers()
    if async_call is not None:
        request.async_headers(async_call.etag)
    if request.method == "POST" and parsed.is_container_root:
        request.throughput_headers(config.offer_throughput)
    if config.debug:
        request.query_metrics_headers()
    request.prepare()
    return request


__all__ = ["build_request", "_ResourceRequest"]
