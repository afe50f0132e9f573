# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
HTTP transport with optional session support.

This module provides :class:`~cosmosdb_sdk.core._http._HttpClient`, a thin wrapper
around the requests library that sends already-prepared requests, applying the
configured timeout and reusing a session for connection pooling when one is given.
The client never retries; every failure is surfaced to the caller.
"""

from __future__ import annotations

from typing import Optional

import requests


class _HttpClient:
    """
    HTTP client that sends prepared requests, optionally through a shared session.

    :param timeout: Request timeout in seconds. If None, no timeout is applied.
    :type timeout: :class:`float` | None
    :param session: Optional requests.Session for connection pooling. If provided,
        all requests use this session for efficient connection reuse.
    :type session: :class:`requests.Session` | None
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.default_timeout: Optional[float] = timeout
        self._session = session

    def _send(self, prepared: requests.PreparedRequest) -> requests.Response:
        """
        Send a prepared request and return the response.

        :param prepared: Fully-headered request.
        :type prepared: :class:`requests.PreparedRequest`
        :return: HTTP response object. The caller owns it and must close it.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: If no response is received.
        """
        if self._session is not None:
            return self._session.send(prepared, timeout=self.default_timeout)
        with requests.Session() as session:
            return session.send(prepared, timeout=self.default_timeout)

    def close(self) -> None:
        """
        Close the HTTP client and release resources.

        If a session was provided, this method closes it. Safe to call multiple times.
        """
        if self._session is not None:
            self._session.close()
            self._session = None
