# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Transformer abstract base class.

A transformer turns one raw domain object into its serializable shape.
Any single-argument callable works as a transformer; subclassing
Transformer adds includes (optional related resources a client can ask for).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable


class Transformer(ABC):
    """Abstract transformer with optional includes.

    Implementations:
    - Implement transform() returning the base representation (usually a dict)
    - Declare available_includes and write one ``include_<name>`` hook each
    - List the includes that are always rendered in default_includes

    Example:
        class EntryTransformer(Transformer):
            available_includes = ("author",)

            def transform(self, entry):
                return {"id": entry.id, "title": entry.title}

            def include_author(self, entry):
                return Item(entry.author, AuthorTransformer)
    """

    available_includes: tuple[str, ...] = ()
    default_includes: tuple[str, ...] = ()

    @abstractmethod
    def transform(self, data: Any) -> Any:
        """Return the shaped representation of ``data``."""
        ...

    def __call__(self, data: Any) -> Any:
        return self.transform(data)

    def get_include(self, name: str) -> Callable[[Any], Any] | None:
        """Return the hook rendering include ``name``, if it is available."""
        if name not in self.available_includes and name not in self.default_includes:
            return None
        hook = getattr(self, f"include_{name}", None)
        return hook if callable(hook) else None
