# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Web framework integrations."""

from .fastapi import StarletteRequestContext, pagination_headers, transform_action

__all__ = [
    "StarletteRequestContext",
    "pagination_headers",
    "transform_action",
]
