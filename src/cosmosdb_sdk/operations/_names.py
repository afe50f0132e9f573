# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Resource name validation and link assembly for the operation namespaces."""

from __future__ import annotations

from ..core._error_codes import VALIDATION_NAME_EMPTY, VALIDATION_NAME_INVALID
from ..core.errors import ValidationError


def _check_name(value: str, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{what} must be a non-empty string", subcode=VALIDATION_NAME_EMPTY)
    if "/" in value or "\\" in value or "?" in value or "#" in value:
        raise ValidationError(
            f"{what} {value!r} must not contain '/', '\\\\', '?' or '#'",
            subcode=VALIDATION_NAME_INVALID,
        )
    return value


def _join(*segments: str) -> str:
    return "/".join(segments)
