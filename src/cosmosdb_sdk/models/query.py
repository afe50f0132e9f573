# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""SQL query envelope sent as the body of a query request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

ParameterSpec = Union[Mapping[str, Any], List[Dict[str, Any]]]


@dataclass(frozen=True)
class SqlQuery:
    """
    A SQL query with optional named parameters.

    :param query: Query text, e.g. ``"SELECT * FROM c WHERE c.id = @id"``.
    :type query: str
    :param parameters: Parameters as ``[{"name": "@id", "value": 1}]``.
    :type parameters: list[dict[str, Any]]

    Example::

        q = SqlQuery.build("SELECT * FROM c WHERE c.v > @v", {"@v": 1})
        q.to_dict()
        # {"query": "SELECT * FROM c WHERE c.v > @v", "parameters": [{"name": "@v", "value": 1}]}
    """

    query: str
    parameters: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def build(cls, query: str, parameters: Optional[ParameterSpec] = None) -> "SqlQuery":
        """Accept parameters either as a name->value mapping or as the wire list."""
        if not isinstance(query, str):
            raise TypeError("query must be a string")
        if parameters is None:
            return cls(query)
        if isinstance(parameters, Mapping):
            params = [
                {"name": name if name.startswith("@") else f"@{name}", "value": value}
                for name, value in parameters.items()
            ]
        else:
            params = [dict(p) for p in parameters]
        return cls(query, params)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"query": self.query}
        if self.parameters:
            out["parameters"] = list(self.parameters)
        return out


__all__ = ["SqlQuery", "ParameterSpec"]
