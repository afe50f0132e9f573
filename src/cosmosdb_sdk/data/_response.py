# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Response interpretation.

Each verb has a fixed expected status. A response with that status is decoded
into the caller's type; any other status becomes a
:class:`~cosmosdb_sdk.core.errors.StatusMismatchError` carrying the service's
error payload. The response is closed on every path.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Optional

from ..common.constants import HEADER_ACTIVITY_ID
from ..core._error_codes import DECODE_INVALID_JSON, DECODE_TYPE_MISMATCH
from ..core.errors import DecodeError, StatusMismatchError
from ..models.resource import RequestError

# Expected status per public operation
STATUS_READ = 200
STATUS_DELETE = 204
STATUS_QUERY = 200
STATUS_CREATE = 201
STATUS_REPLACE = 200
STATUS_EXECUTE = 200


def _decode_into(payload: Any, into: Any) -> Any:
    """Convert decoded JSON into ``into``; ``None`` keeps the plain JSON value."""
    if into is None:
        return payload
    from_dict = getattr(into, "from_dict", None)
    if from_dict is not None:
        return from_dict(payload)
    if isinstance(into, type) and dataclasses.is_dataclass(into):
        if not isinstance(payload, dict):
            raise TypeError(f"{into.__name__} expects a JSON object, got {type(payload).__name__}")
        names = {f.name for f in dataclasses.fields(into) if f.init}
        return into(**{k: v for k, v in payload.items() if k in names})
    return into(payload)


def interpret_response(
    response: Any,
    expected_status: int,
    request: Any,
    *,
    into: Any = None,
    discard: bool = False,
) -> Any:
    """
    Turn a response into the caller's result or raise.

    :param response: Transport response; closed before this function returns.
    :type response: :class:`requests.Response`
    :param expected_status: Status the verb expects.
    :type expected_status: :class:`int`
    :param request: The request that produced ``response``.
    :type request: ~cosmosdb_sdk.data._request._ResourceRequest
    :param into: Optional target type for the decoded body.
    :param discard: Skip decoding and return None on success (no-content verbs).
    :type discard: :class:`bool`
    :return: Decoded body, converted with ``into`` when given, or None.
    :raises ~cosmosdb_sdk.core.errors.StatusMismatchError: Unexpected status.
    :raises ~cosmosdb_sdk.core.errors.DecodeError: Body could not be decoded.
    """
    with response:
        status = response.status_code
        if status != expected_status:
            service_error = RequestError.from_body(response.text or "")
            raise StatusMismatchError(
                f"Request failed with status {status} (expected {expected_status}): {service_error}",
                status,
                service_error=service_error,
                expected_status=expected_status,
                activity_id=(response.headers or {}).get(HEADER_ACTIVITY_ID),
                resource_id=request.resource_id,
                resource_type=request.resource_type,
                request=request,
            )
        if discard:
            return None

        try:
            payload = json.loads(response.text)
        except ValueError as exc:
            raise DecodeError(
                f"Response body is not valid JSON: {exc}",
                subcode=DECODE_INVALID_JSON,
                status_code=status,
                resource_id=request.resource_id,
                resource_type=request.resource_type,
                request=request,
            ) from exc
        try:
            return _decode_into(payload, into)
        except (TypeError, ValueError, KeyError) as exc:
            name: Optional[str] = getattr(into, "__name__", None)
            raise DecodeError(
                f"Response body could not be decoded into {name or into!r}: {exc}",
                subcode=DECODE_TYPE_MISMATCH,
                status_code=status,
                resource_id=request.resource_id,
                resource_type=request.resource_type,
                request=request,
            ) from exc


__all__ = [
    "interpret_response",
    "STATUS_READ",
    "STATUS_DELETE",
    "STATUS_QUERY",
    "STATUS_CREATE",
    "STATUS_REPLACE",
    "STATUS_EXECUTE",
]
