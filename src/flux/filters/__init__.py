# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Action filters."""

from .context import QueryRequest, RequestContext
from .providers import ArrayDataProvider, DataProvider, Pagination
from .transform_filter import (
    WILDCARD,
    CollectionTarget,
    RenderTarget,
    SingleItem,
    TransformFilter,
)

__all__ = [
    "RequestContext",
    "QueryRequest",
    "DataProvider",
    "ArrayDataProvider",
    "Pagination",
    "TransformFilter",
    "RenderTarget",
    "SingleItem",
    "CollectionTarget",
    "WILDCARD",
]
