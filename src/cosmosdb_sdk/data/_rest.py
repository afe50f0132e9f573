# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level Cosmos DB REST client: builds, dispatches and interprets one request per call.
"""

from __future__ import annotations

import logging
import shlex
import time
from pprint import pformat
from typing import Any, Optional

import requests

from ..common.constants import HEADER_REQUEST_CHARGE
from ..core._http import _HttpClient
from ..core.config import CosmosConfig
from ..core.errors import TransportError
from ..models.resource import AsyncCall
from ._request import _ResourceRequest, build_request
from ._response import interpret_response


def _curl_command(request: _ResourceRequest) -> str:
    """Shell command that replays ``request`` (valid while its ``x-ms-date`` is fresh)."""
    prepared = request.prepared
    headers = prepared.headers if prepared is not None else request.headers
    parts = ["curl", "-X", request.method]
    for name, value in headers.items():
        parts += ["-H", f"{name}: {value}"]
    if request.body:
        parts += ["-d", request.body.decode("utf-8", errors="replace")]
    parts.append(request.url)
    return " ".join(shlex.quote(p) for p in parts)


class _RestClient:
    """Cosmos DB REST client: request pipeline shared by all public operations."""

    def __init__(
        self,
        auth: Any,
        base_url: str,
        config: Optional[CosmosConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.auth = auth
        self.base_url = (base_url or "").rstrip("/")
        if not self.base_url:
            raise ValueError("base_url is required.")
        self.config = config or CosmosConfig.from_env()
        self._http = _HttpClient(timeout=self.config.http_timeout, session=session)

    @property
    def _logger(self) -> logging.Logger:
        return logging.getLogger(self.config.logger_name)

    def _execute(
        self,
        method: str,
        link: str,
        expected_status: int,
        body: Any = None,
        *,
        into: Any = None,
        discard: bool = False,
        async_call: Optional[AsyncCall] = None,
        is_query: bool = False,
    ) -> Any:
        """Build, dispatch and interpret a single request."""
        config = self.config
        request = build_request(
            method,
            self.base_url,
            link,
            body,
            auth=self.auth,
            config=config,
            async_call=async_call,
            is_query=is_query,
        )
        response = self._dispatch(request, config)
        result = interpret_response(response, expected_status, request, into=into, discard=discard)
        if config.debug and config.verbose and not discard:
            self._logger.info("Cosmos DB response content: %s", pformat(result))
        return result

    def _dispatch(self, request: _ResourceRequest, config: Optional[CosmosConfig] = None) -> requests.Response:
        """
        Send ``request`` through the transport.

        :raises ~cosmosdb_sdk.core.errors.TransportError: If no response is received.
        """
        config = config or self.config
        if config.debug:
            logger = self._logger
            logger.info(
                "Cosmos DB request: id=%s, type=%s, request=%r",
                request.resource_id,
                request.resource_type,
                request,
            )
            logger.info("CURL: %s", _curl_command(request))

        start = time.perf_counter()
        try:
            response = self._http._send(request.prepared)
        except requests.exceptions.RequestException as exc:
            raise TransportError(
                f"Request {request.method} {request.url} failed: {exc}",
                resource_id=request.resource_id,
                resource_type=request.resource_type,
                request=request,
            ) from exc

        if config.debug:
            logger = self._logger
            duration_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "Cosmos DB response: id=%s, type=%s, status=%s, %.1fms, charge=%s",
                request.resource_id,
                request.resource_type,
                response.status_code,
                duration_ms,
                response.headers.get(HEADER_REQUEST_CHARGE),
            )
            if config.verbose:
                logger.info("Cosmos DB request: %r", request)
                logger.info("Cosmos DB response headers: %s", pformat(dict(response.headers)))
                logger.info("Cosmos DB response content-length: %s", response.headers.get("Content-Length"))
        return response

    def close(self) -> None:
        """Release the transport. Safe to call multiple times."""
        if self._http is not None:
            self._http.close()
