# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Request accessor used by the transform filter.

The filter only needs query parameters and whether the response carries a
body. Web frameworks plug in their own implementation
(see flux.middleware.fastapi.StarletteRequestContext).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class RequestContext(ABC):
    """Read-only view of the inbound request."""

    @abstractmethod
    def get(self, name: str) -> str | None:
        """Return query parameter ``name``, or None when absent."""
        ...

    @abstractmethod
    def is_head(self) -> bool:
        """Whether the response must not carry a body (HEAD request)."""
        ...


class QueryRequest(RequestContext):
    """RequestContext backed by a plain mapping of query parameters."""

    def __init__(self, params: Mapping[str, Any] | None = None, method: str = "GET"):
        self.params = dict(params or {})
        self.method = method.upper()

    def get(self, name: str) -> str | None:
        value = self.params.get(name)
        return value if isinstance(value, str) else None

    def is_head(self) -> bool:
        return self.method == "HEAD"

    def __repr__(self) -> str:
        return f"QueryRequest(params={self.params!r}, method={self.method!r})"
