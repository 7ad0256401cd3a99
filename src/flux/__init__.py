# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Flux — response transformation for web actions.

Resolves a transformer per action and reshapes action results (single
objects or paginated collections), honouring the client's fields, includes
and excludes query parameters.
"""

from .filters import ArrayDataProvider, DataProvider, Pagination, QueryRequest, RequestContext, TransformFilter
from .transformer import (
    GLOBAL_SCOPE,
    Collection,
    Item,
    ShapingOptions,
    Transformer,
    TransformEngine,
    register_transformer,
    resolve,
)

__version__ = "0.1.0"

__all__ = [
    "TransformFilter",
    "RequestContext",
    "QueryRequest",
    "DataProvider",
    "ArrayDataProvider",
    "Pagination",
    "Transformer",
    "Item",
    "Collection",
    "ShapingOptions",
    "TransformEngine",
    "GLOBAL_SCOPE",
    "register_transformer",
    "resolve",
]
