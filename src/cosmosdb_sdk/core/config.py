# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.constants import DEFAULT_API_VERSION, DEFAULT_OFFER_THROUGHPUT


@dataclass(frozen=True)
class CosmosConfig:
    """
    Configuration settings for Cosmos DB client operations.

    Each :class:`~cosmosdb_sdk.client.CosmosClient` owns its own instance. The
    client replaces it with a modified copy when debug logging is toggled, so a
    snapshot returned by :meth:`~cosmosdb_sdk.client.CosmosClient.get_config`
    never changes underneath the caller.

    :param debug: Log every outbound request, its curl form, and query metrics headers. Default is False.
    :type debug: bool
    :param verbose: When ``debug`` is also set, dump full response headers and bodies. Default is False.
    :type verbose: bool
    :param api_version: Service API version sent in ``x-ms-version``.
    :type api_version: str
    :param consistency_level: Optional ``x-ms-consistency-level`` override (e.g. ``"Session"``).
    :type consistency_level: str or None
    :param offer_throughput: Request units provisioned when a collection is created (default: 400).
    :type offer_throughput: int
    :param http_timeout: Request timeout in seconds passed to the transport. None means no timeout.
    :type http_timeout: float or None
    :param logger_name: Name of the :mod:`logging` logger used for debug output.
    :type logger_name: str
    """

    debug: bool = False
    verbose: bool = False
    api_version: str = DEFAULT_API_VERSION
    consistency_level: Optional[str] = None
    offer_throughput: int = DEFAULT_OFFER_THROUGHPUT

    # Transport configuration
    http_timeout: Optional[float] = None

    # Logging configuration
    logger_name: str = "cosmosdb_sdk"

    @classmethod
    def from_env(cls) -> "CosmosConfig":
        """
        Create a configuration instance with default settings.

        :return: Configuration instance with default values.
        :rtype: ~cosmosdb_sdk.core.config.CosmosConfig
        """
        # Environment-free defaults
        return cls(
            debug=False,
            verbose=False,
            api_version=DEFAULT_API_VERSION,
            consistency_level=None,
            offer_throughput=DEFAULT_OFFER_THROUGHPUT,
            http_timeout=None,  # Transport decides; the SDK imposes no timeout
        )
