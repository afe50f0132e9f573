# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured exceptions raised by the Cosmos DB SDK.

Every error carries the resource id and resource type of the call that failed
and, once it has been built, the outbound request, so a failure can be traced
back to the exact HTTP call that caused it.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional

from ._error_codes import _http_subcode, _is_transient_status


class CosmosError(Exception):
    """Base structured error for the Cosmos DB SDK."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        is_transient: bool = False,
        resource_id: Optional[str] = None,
        resource_type: Optional[str] = None,
        request: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.is_transient = is_transient
        self.resource_id = resource_id
        self.resource_type = resource_type
        self.request = request
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat().replace("+00:00", "Z")

    def __str__(self) -> str:
        if self.resource_type is None and self.resource_id is None:
            return self.message
        return f"{self.message} (id={self.resource_id!r}, type={self.resource_type!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "is_transient": self.is_transient,
            "resource_id": self.resource_id,
            "resource_type": self.resource_type,
            "request": repr(self.request) if self.request is not None else None,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class ValidationError(CosmosError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", subcode=subcode, details=details, source="client")


class SerializationError(CosmosError):
    """Request body could not be encoded."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, code="serialization_error", source="client", **kwargs)


class ConstructionError(CosmosError):
    """Resource link or outbound request is malformed."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, code="construction_error", source="client", **kwargs)


class AuthError(CosmosError):
    """Authorization signature could not be computed."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, code="auth_error", source="client", **kwargs)


class TransportError(CosmosError):
    """No response was obtained from the service (network, DNS or TLS failure)."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, code="transport_error", source="client", is_transient=True, **kwargs)


class DecodeError(CosmosError):
    """Response body could not be decoded into the requested type."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, code="decode_error", source="server", **kwargs)


class StatusMismatchError(CosmosError):
    """
    The service answered with a status other than the one the verb expects.

    :param message: Human readable summary.
    :type message: :class:`str`
    :param status_code: HTTP status returned by the service.
    :type status_code: :class:`int`
    :param service_error: Decoded service error payload.
    :type service_error: ~cosmosdb_sdk.models.resource.RequestError or None
    :param expected_status: Status the verb expected.
    :type expected_status: :class:`int` or None
    :param activity_id: Value of the ``x-ms-activity-id`` response header.
    :type activity_id: :class:`str` or None
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        *,
        service_error: Any = None,
        expected_status: Optional[int] = None,
        activity_id: Optional[str] = None,
        resource_id: Optional[str] = None,
        resource_type: Optional[str] = None,
        request: Any = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = details or {}
        if service_error is not None:
            d["service_error_code"] = service_error.code
            d["service_error_message"] = service_error.message
        if expected_status is not None:
            d["expected_status"] = expected_status
        if activity_id is not None:
            d["activity_id"] = activity_id
        super().__init__(
            message,
            code="http_error",
            subcode=_http_subcode(status_code),
            status_code=status_code,
            details=d,
            source="server",
            is_transient=_is_transient_status(status_code),
            resource_id=resource_id,
            resource_type=resource_type,
            request=request,
        )
        self.service_error = service_error


__all__ = [
    "CosmosError",
    "ValidationError",
    "SerializationError",
    "ConstructionError",
    "AuthError",
    "TransportError",
    "DecodeError",
    "StatusMismatchError",
]
