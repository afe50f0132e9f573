# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Resource link parsing.

A resource link alternates type and id segments, e.g.
``dbs/d1/colls/c1/docs/doc1``. A link with an even number of segments names a
single resource; an odd number names a feed (the collection of resources of the
last type under an owner), e.g. ``dbs/d1/colls``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..common.constants import RESOURCE_COLLECTIONS, RESOURCE_TYPES
from ..core._error_codes import (
    CONSTRUCTION_EMPTY_LINK,
    CONSTRUCTION_EMPTY_SEGMENT,
    CONSTRUCTION_UNKNOWN_RESOURCE_TYPE,
)
from ..core.errors import ConstructionError


@dataclass(frozen=True)
class ResourceLink:
    """
    A parsed resource link.

    :param link: Normalised link without leading or trailing slashes.
    :type link: str
    :param resource_type: Type segment the request addresses, e.g. ``"docs"``.
    :type resource_type: str
    :param resource_id: Link the request is authorized against. For an item this
        is the whole link; for a feed it is the owning resource's link, which is
        empty for top-level feeds such as ``dbs``.
    :type resource_id: str
    :param is_feed: True when the link names a feed rather than an item.
    :type is_feed: bool
    """

    link: str
    resource_type: str
    resource_id: str
    is_feed: bool

    @property
    def is_container_root(self) -> bool:
        """True when the link is the collections feed of a database (``dbs/<db>/colls``)."""
        return self.is_feed and self.resource_type == RESOURCE_COLLECTIONS


def parse_link(link: str) -> ResourceLink:
    """
    Parse a resource link into its resource type and resource id.

    :param link: Resource link, e.g. ``"dbs/d1/colls/c1/docs"``.
    :type link: :class:`str`
    :return: Parsed link.
    :rtype: ResourceLink
    :raises ~cosmosdb_sdk.core.errors.ConstructionError: If the link is empty,
        has empty segments, or names an unknown resource type.

    Example::

        parse_link("dbs/d1/colls/c1/docs/x")   # type "docs", id "dbs/d1/colls/c1/docs/x"
        parse_link("dbs/d1/colls/c1/docs")     # type "docs", id "dbs/d1/colls/c1"
        parse_link("dbs")                      # type "dbs",  id ""
    """
    if not isinstance(link, str):
        raise ConstructionError(f"Resource link must be a string, got {type(link).__name__}.")
    normalised = link.strip().strip("/")
    if not normalised:
        raise ConstructionError("Resource link is empty.", subcode=CONSTRUCTION_EMPTY_LINK)

    segments = normalised.split("/")
    if any(not s for s in segments):
        raise ConstructionError(
            f"Resource link {link!r} contains an empty segment.",
            subcode=CONSTRUCTION_EMPTY_SEGMENT,
        )
    for type_segment in segments[0::2]:
        if type_segment not in RESOURCE_TYPES:
            raise ConstructionError(
                f"Resource link {link!r} names unknown resource type {type_segment!r}.",
                subcode=CONSTRUCTION_UNKNOWN_RESOURCE_TYPE,
            )

    if len(segments) % 2 == 0:
        return ResourceLink(normalised, segments[-2], normalised, is_feed=False)
    return ResourceLink(normalised, segments[-1], "/".join(segments[:-1]), is_feed=True)


def locate(link: str) -> Tuple[str, str]:
    """Return ``(resource_type, resource_id)`` for ``link``."""
    parsed = parse_link(link)
    return parsed.resource_type, parsed.resource_id


__all__ = ["ResourceLink", "parse_link", "locate"]
