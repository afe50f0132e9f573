# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Master-key authorization for the Cosmos DB REST API.

Each request is signed with an HMAC-SHA256 over the verb, resource type,
resource id and request date, keyed by the base64-decoded account master key.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
from typing import Union
from urllib.parse import quote

from azure.core.credentials import AzureKeyCredential

from ._error_codes import AUTH_MALFORMED_KEY, AUTH_MISSING_KEY
from .errors import AuthError


class _AuthManager:
    """Signs requests with the account master key held in an :class:`AzureKeyCredential`."""

    def __init__(self, credential: Union[str, AzureKeyCredential]) -> None:
        if isinstance(credential, str):
            credential = AzureKeyCredential(credential)
        if not isinstance(credential, AzureKeyCredential):
            raise TypeError("credential must be a master key string or azure.core.credentials.AzureKeyCredential.")
        self.credential: AzureKeyCredential = credential

    def _sign(self, method: str, resource_type: str, resource_id: str, date: str) -> str:
        """
        Compute the ``Authorization`` header value for one request.

        :param method: HTTP verb.
        :type method: :class:`str`
        :param resource_type: Resource type segment, e.g. ``"docs"``.
        :type resource_type: :class:`str`
        :param resource_id: Resource link the signature is scoped to (may be empty).
        :type resource_id: :class:`str`
        :param date: The exact value sent in ``x-ms-date``.
        :type date: :class:`str`
        :return: URL-encoded master token.
        :rtype: :class:`str`
        :raises ~cosmosdb_sdk.core.errors.AuthError: If the key is missing or not valid base64.
        """
        key = self.credential.key
        if not key:
            raise AuthError(
                "Master key is empty.",
                subcode=AUTH_MISSING_KEY,
                resource_id=resource_id,
                resource_type=resource_type,
            )
        try:
            secret = base64.b64decode(key, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise AuthError(
                f"Master key is not valid base64: {exc}",
                subcode=AUTH_MALFORMED_KEY,
                resource_id=resource_id,
                resource_type=resource_type,
            ) from exc

        payload = f"{method.lower()}\n{resource_type.lower()}\n{resource_id}\n{date.lower()}\n\n"
        digest = hmac.new(secret, payload.encode("utf-8"), hashlib.sha256).digest()
        signature = base64.b64encode(digest).decode("ascii")
        return quote(f"type=master&ver=1.0&sig={signature}", safe="")
