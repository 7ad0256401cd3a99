# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Data providers — collections of models an action returns for rendering.

When an action returns a DataProvider, the filter renders its models as a
collection instead of rendering the provider itself as one item.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class Pagination:
    """Page window over a model sequence. Pages are 1-based."""

    page: int = 1
    page_size: int = 20

    def __post_init__(self):
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def page_count(self, total_count: int) -> int:
        return max(1, math.ceil(total_count / self.page_size))


class DataProvider(ABC):
    """A source of multiple models, optionally paginated."""

    @abstractmethod
    def get_models(self) -> list[Any]:
        """Return the models of the current page."""
        ...

    @abstractmethod
    def get_total_count(self) -> int:
        """Return the number of models across all pages."""
        ...

    def get_pagination(self) -> Pagination | None:
        return None


class ArrayDataProvider(DataProvider):
    """DataProvider over an in-memory sequence."""

    def __init__(self, models: Sequence[Any], pagination: Pagination | None = None):
        self.all_models = list(models)
        self.pagination = pagination

    def get_models(self) -> list[Any]:
        if self.pagination is None:
            return list(self.all_models)
        start = self.pagination.offset
        return self.all_models[start:start + self.pagination.page_size]

    def get_total_count(self) -> int:
        return len(self.all_models)

    def get_pagination(self) -> Pagination | None:
        return self.pagination

    def __repr__(self) -> str:
        return f"ArrayDataProvider(total={len(self.all_models)}, pagination={self.pagination!r})"
