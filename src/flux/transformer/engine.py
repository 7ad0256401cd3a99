# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Transform Engine — renders items and collections with a transformer.

Rendering order for one object:
  transformer(data) → includes → excludes → field selection

Shaping options come from the client (fields / includes / excludes query
parameters). Dotted tokens address nested resources: ``author.name`` in
fields keeps only ``name`` inside ``author``, ``author.company`` in
includes asks the author transformer for its ``company`` include.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterable

import structlog

from ..config import get_settings
from .base import Transformer
from .references import describe
from .registry import GLOBAL_SCOPE
from .resolver import resolve
from .resources import Collection, Item

if TYPE_CHECKING:
    from ..filters.context import RequestContext

logger = structlog.get_logger(__name__)

_TOKEN_SEPARATOR = re.compile(r"\s*,\s*")


def parse_tokens(value: Any) -> tuple[str, ...]:
    """Split a comma separated parameter into tokens.

    ``" a, b ,c"`` gives ``("a", "b", "c")``. Empty tokens are dropped,
    duplicates keep their first position, and non-string values give ``()``.
    """
    if not isinstance(value, str):
        return ()
    tokens = (token.strip() for token in _TOKEN_SEPARATOR.split(value))
    return tuple(dict.fromkeys(token for token in tokens if token))


def _own(tokens: Iterable[str]) -> list[str]:
    """Tokens addressing the current level (no dot)."""
    return [token for token in tokens if "." not in token]


def _nested(tokens: Iterable[str], name: str) -> tuple[str, ...]:
    """Tokens under ``name.``, with the prefix removed."""
    prefix = f"{name}."
    return tuple(token[len(prefix):] for token in tokens if token.startswith(prefix))


@dataclass(frozen=True)
class ShapingOptions:
    """Client shaping instructions for one request. Empty means unrestricted."""

    fields: tuple[str, ...] = ()
    includes: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()

    @classmethod
    def from_request(
        cls,
        request: RequestContext,
        fields_param: str = "fields",
        includes_param: str = "includes",
        excludes_param: str = "excludes",
    ) -> ShapingOptions:
        return cls(
            fields=parse_tokens(request.get(fields_param)),
            includes=parse_tokens(request.get(includes_param)),
            excludes=parse_tokens(request.get(excludes_param)),
        )

    def child(self, name: str) -> ShapingOptions:
        """Options for the nested resource rendered under ``name``."""
        return ShapingOptions(
            fields=_nested(self.fields, name),
            includes=_nested(self.includes, name),
            excludes=_nested(self.excludes, name),
        )

    def as_dict(self) -> dict[str, list[str]]:
        return {
            "includes": list(self.includes),
            "excludes": list(self.excludes),
            "fields": list(self.fields),
        }


class TransformEngine:
    """Renders data through a resolved transformer and applies shaping options."""

    def __init__(
        self,
        options: ShapingOptions | None = None,
        scope: str = GLOBAL_SCOPE,
        max_depth: int | None = None,
    ):
        self.options = options or ShapingOptions()
        self.scope = scope
        self.max_depth = max_depth if max_depth is not None else get_settings().max_include_depth

    def item(self, transformer: Callable[[Any], Any], data: Any) -> Any:
        """Render a single object."""
        return self._render(transformer, data, self.options, 0)

    def collection(self, transformer: Callable[[Any], Any], items: Iterable[Any]) -> list[Any]:
        """Render each object of a sequence with the same transformer."""
        return [self._render(transformer, item, self.options, 0) for item in items]

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _render(
        self,
        transformer: Callable[[Any], Any],
        data: Any,
        options: ShapingOptions,
        depth: int,
    ) -> Any:
        output = transformer(data)
        if not isinstance(output, dict):
            return output

        applied: list[str] = []
        if isinstance(transformer, Transformer) and depth < self.max_depth:
            output = dict(output)
            for name in self._effective_includes(transformer, options):
                hook = transformer.get_include(name)
                if hook is None:
                    continue
                output[name] = self._render_include(hook(data), options.child(name), depth + 1)
                applied.append(name)

        return self._shape(output, options, applied)

    @staticmethod
    def _effective_includes(transformer: Transformer, options: ShapingOptions) -> list[str]:
        excluded = set(_own(options.excludes))
        requested = list(transformer.default_includes) + _own(options.includes)
        # Dotted includes imply their parent ("author.company" renders "author")
        requested += [token.split(".", 1)[0] for token in options.includes if "." in token]
        return [name for name in dict.fromkeys(requested) if name not in excluded]

    def _render_include(self, value: Any, options: ShapingOptions, depth: int) -> Any:
        if isinstance(value, Item):
            transformer = self._resolve_nested(value.transformer)
            if transformer is None:
                return value.data
            return self._render(transformer, value.data, options, depth)

        if isinstance(value, Collection):
            transformer = self._resolve_nested(value.transformer)
            if transformer is None:
                return list(value.items)
            return [self._render(transformer, item, options, depth) for item in value.items]

        return value

    def _resolve_nested(self, reference: Any) -> Callable[[Any], Any] | None:
        transformer = resolve(reference, self.scope)
        if transformer is None:
            logger.warning(
                "Unable to transform include because the transformer could not be resolved",
                transformer=describe(reference),
                scope=self.scope,
            )
        return transformer

    def _shape(self, output: dict[str, Any], options: ShapingOptions, applied: list[str]) -> dict[str, Any]:
        excluded = set(_own(options.excludes))
        if excluded:
            output = {key: value for key, value in output.items() if key not in excluded}

        if options.fields:
            whitelist = list(options.fields) + [name for name in applied if name not in options.fields]
            output = TransformEngine.select_fields(output, whitelist, self.max_depth)

        return output

    @staticmethod
    def select_fields(data: Any, fields: Iterable[str], max_depth: int) -> Any:
        """Keep only the requested fields of ``data``.

        ``fields`` is turned into a field tree first (see ``field_tree``), so
        ``["author", "author.name"]`` keeps the whole author. Lists are pruned
        item by item. Below ``max_depth`` levels of nesting values are kept
        as they are.
        """
        return _prune(data, field_tree(fields), max_depth)


def field_tree(fields: Iterable[str]) -> dict[str, Any]:
    """Build a nested selection from dotted field tokens.

    ``["id", "author.name", "author.company.name"]`` gives
    ``{"id": None, "author": {"name": None, "company": {"name": None}}}``.
    ``None`` selects the whole value under a key.
    """
    children: dict[str, list[str] | None] = {}
    for token in fields:
        head, _, rest = token.partition(".")
        if not rest:
            children[head] = None
        elif children.get(head, []) is not None:
            children.setdefault(head, []).append(rest)
    return {key: None if rest is None else field_tree(rest) for key, rest in children.items()}


def _prune(data: Any, tree: dict[str, Any], levels: int) -> Any:
    if levels <= 0:
        return data
    if isinstance(data, list):
        return [_prune(item, tree, levels) for item in data]
    if not isinstance(data, dict):
        return data
    return {
        key: value if tree[key] is None else _prune(value, tree[key], levels - 1)
        for key, value in data.items()
        if key in tree
    }
