# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Resources returned by include hooks.

A resource pairs raw data with the transformer reference that should shape
it, so nested includes get the same resolution and shaping as the top level.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class Item:
    """A single nested object to render with ``transformer``."""

    data: Any
    transformer: Any


@dataclass(frozen=True)
class Collection:
    """A sequence of nested objects, each rendered with ``transformer``."""

    items: Sequence[Any]
    transformer: Any
