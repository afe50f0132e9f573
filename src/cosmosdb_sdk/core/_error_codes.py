# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

# HTTP subcode constants
HTTP_400 = "http_400"
HTTP_401 = "http_401"
HTTP_403 = "http_403"
HTTP_404 = "http_404"
HTTP_408 = "http_408"
HTTP_409 = "http_409"
HTTP_412 = "http_412"
HTTP_413 = "http_413"
HTTP_429 = "http_429"
HTTP_449 = "http_449"
HTTP_500 = "http_500"
HTTP_503 = "http_503"

_HTTP_STATUS_TO_SUBCODE = {
    400: HTTP_400,
    401: HTTP_401,
    403: HTTP_403,
    404: HTTP_404,
    408: HTTP_408,
    409: HTTP_409,
    412: HTTP_412,
    413: HTTP_413,
    429: HTTP_429,
    449: HTTP_449,
    500: HTTP_500,
    503: HTTP_503,
}

# Statuses the service documents as safe to retry (the SDK itself never retries)
TRANSIENT_STATUS = {408, 429, 449, 500, 503}

# Construction subcodes
CONSTRUCTION_EMPTY_LINK = "construction_empty_link"
CONSTRUCTION_EMPTY_SEGMENT = "construction_empty_segment"
CONSTRUCTION_UNKNOWN_RESOURCE_TYPE = "construction_unknown_resource_type"
CONSTRUCTION_INVALID_REQUEST = "construction_invalid_request"

# Auth subcodes
AUTH_MALFORMED_KEY = "auth_malformed_key"
AUTH_MISSING_KEY = "auth_missing_key"

# Decode subcodes
DECODE_INVALID_JSON = "decode_invalid_json"
DECODE_TYPE_MISMATCH = "decode_type_mismatch"

# Validation subcodes
VALIDATION_NAME_EMPTY = "validation_name_empty"
VALIDATION_NAME_INVALID = "validation_name_invalid"


def _http_subcode(status: int) -> str:
    return _HTTP_STATUS_TO_SUBCODE.get(status, f"http_{status}")


def _is_transient_status(status: int) -> bool:
    return status in TRANSIENT_STATUS
