# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request execution pipeline for the Cosmos DB SDK.

Internal modules: resource link parsing, request building, dispatch, and
response interpretation. Not part of the public API.
"""

__all__ = []
