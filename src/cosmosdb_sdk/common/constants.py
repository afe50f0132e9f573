# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for the Cosmos DB SQL REST API wire protocol.

Header names and values the service expects on every request, plus the
resource type segments that may appear in a resource link.
"""

# Service API version sent in ``x-ms-version``
DEFAULT_API_VERSION = "2018-12-31"

# Throughput provisioned on container creation (request units per second)
DEFAULT_OFFER_THROUGHPUT = 400

# Standard headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_IF_MATCH = "If-Match"
HEADER_PREFER = "Prefer"

# Service headers
HEADER_DATE = "x-ms-date"
HEADER_VERSION = "x-ms-version"
HEADER_CONSISTENCY_LEVEL = "x-ms-consistency-level"
HEADER_OFFER_THROUGHPUT = "x-ms-offer-throughput"
HEADER_IS_QUERY = "x-ms-documentdb-isquery"
HEADER_POPULATE_QUERY_METRICS = "x-ms-documentdb-populatequerymetrics"
HEADER_ACTIVITY_ID = "x-ms-activity-id"
HEADER_REQUEST_CHARGE = "x-ms-request-charge"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_QUERY_JSON = "application/query+json"

# Asks the service to acknowledge a write without waiting for completion (RFC 7240)
PREFER_RESPOND_ASYNC = "respond-async"

# Consistency levels accepted in ``x-ms-consistency-level``
CONSISTENCY_LEVELS = frozenset({"Strong", "BoundedStaleness", "Session", "ConsistentPrefix", "Eventual"})

# Resource type segments of a resource link
RESOURCE_DATABASES = "dbs"
RESOURCE_COLLECTIONS = "colls"
RESOURCE_DOCUMENTS = "docs"
RESOURCE_STORED_PROCEDURES = "sprocs"
RESOURCE_USER_DEFINED_FUNCTIONS = "udfs"
RESOURCE_TRIGGERS = "triggers"
RESOURCE_USERS = "users"
RESOURCE_PERMISSIONS = "permissions"
RESOURCE_ATTACHMENTS = "attachments"
RESOURCE_CONFLICTS = "conflicts"
RESOURCE_OFFERS = "offers"
RESOURCE_PARTITION_KEY_RANGES = "pkranges"
RESOURCE_SCHEMAS = "schemas"
RESOURCE_USER_DEFINED_TYPES = "udts"
RESOURCE_CLIENT_ENCRYPTION_KEYS = "clientencryptionkeys"

RESOURCE_TYPES = frozenset(
    {
        RESOURCE_DATABASES,
        RESOURCE_COLLECTIONS,
        RESOURCE_DOCUMENTS,
        RESOURCE_STORED_PROCEDURES,
        RESOURCE_USER_DEFINED_FUNCTIONS,
        RESOURCE_TRIGGERS,
        RESOURCE_USERS,
        RESOURCE_PERMISSIONS,
        RESOURCE_ATTACHMENTS,
        RESOURCE_CONFLICTS,
        RESOURCE_OFFERS,
        RESOURCE_PARTITION_KEY_RANGES,
        RESOURCE_SCHEMAS,
        RESOURCE_USER_DEFINED_TYPES,
        RESOURCE_CLIENT_ENCRYPTION_KEYS,
    }
)
