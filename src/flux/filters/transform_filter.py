# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Transform filter — reshapes action results through a transformer.

Per invocation:
  gate (should_transform) → select reference for the action → HEAD check
  → resolve → read shaping options → render item or collection

Every "cannot transform" path returns the original result unchanged. Only
errors raised while rendering (inside a transformer) propagate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Sequence, Union

import structlog

from ..config import get_settings
from ..metrics import record_filter_outcome
from ..transformer.engine import ShapingOptions, TransformEngine
from ..transformer.references import AbsentRef, TransformerReference, describe, to_reference
from ..transformer.resolver import resolve
from .context import RequestContext
from .providers import DataProvider

logger = structlog.get_logger(__name__)

WILDCARD = "*"

MatchCallback = Callable[["TransformFilter", str, Any], bool]


@dataclass(frozen=True)
class SingleItem:
    """Render the result as one object."""

    data: Any


@dataclass(frozen=True)
class CollectionTarget:
    """Render the models of a data provider, optionally under an envelope key."""

    items: Sequence[Any]
    envelope: Optional[str] = None


RenderTarget = Union[SingleItem, CollectionTarget]


def _default(name: str) -> Any:
    return field(default_factory=lambda: getattr(get_settings(), name))


def _is_set(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return value is not None


def _is_empty(data: Any) -> bool:
    if isinstance(data, DataProvider):
        return False
    return not data


@dataclass
class TransformFilter:
    """Action filter transforming results with a per-action transformer.

    Attributes:
        transformer: Default transformer, used when no action mapping matches.
        actions: Transformer per action id. ``"*"`` stands for all actions;
            an explicit action id takes precedence over it, e.g.::

                {
                    "create": EntryTransformer,
                    "update": "entry",
                    "delete": lambda entry: {"id": entry.id},
                    "*": {"class": "entry", "with_body": False},
                }

        fields_param / includes_param / excludes_param: Query parameters
            holding the client's shaping options.
        collection_envelope: Key wrapping rendered collections
            (``{"data": [...]}``). None returns the list directly.
        scope: Registry scope the transformer is resolved in.
        match_callback: ``callback(filter, action_id, data) -> bool`` deciding
            whether the result is transformed at all.
        transform_empty: Whether empty results are transformed too.

    Options left unset default to the corresponding Settings values.
    """

    transformer: Any = None
    actions: Mapping[str, Any] = field(default_factory=dict)
    fields_param: str = _default("fields_param")
    includes_param: str = _default("includes_param")
    excludes_param: str = _default("excludes_param")
    collection_envelope: Optional[str] = _default("collection_envelope")
    scope: str = _default("default_scope")
    match_callback: Optional[MatchCallback] = None
    transform_empty: bool = _default("transform_empty")

    def __post_init__(self):
        self.actions = MappingProxyType(dict(self.actions))

    # -------------------------------------------------------------------------
    # Gate
    # -------------------------------------------------------------------------

    def should_transform(self, action_id: str, data: Any) -> bool:
        """Check whether this filter should transform the action's result."""
        return self._match_data(data) and self._match_custom(action_id, data)

    def _match_data(self, data: Any) -> bool:
        return self.transform_empty or not _is_empty(data)

    def _match_custom(self, action_id: str, data: Any) -> bool:
        return self.match_callback is None or bool(self.match_callback(self, action_id, data))

    # -------------------------------------------------------------------------
    # Entry point
    # -------------------------------------------------------------------------

    def after_action(self, action_id: str, result: Any, request: RequestContext) -> Any:
        """Return the transformed result of action ``action_id``."""
        if not self.should_transform(action_id, result):
            record_filter_outcome(action_id, "skipped")
            return result
        return self.transform(action_id, result, request)

    def transform(self, action_id: str, data: Any, request: RequestContext) -> Any:
        reference = self.select_transformer(action_id)

        if request.is_head():
            record_filter_outcome(action_id, "suppressed")
            return None

        if reference is None:
            record_filter_outcome(action_id, "no_transformer")
            return data

        transformer = self.resolve_transformer(action_id, reference)
        if transformer is None:
            record_filter_outcome(action_id, "unresolved")
            return data

        engine = TransformEngine(self.shaping_options(request), scope=self.scope)
        target = self.render_target(data)

        if isinstance(target, CollectionTarget):
            rendered = engine.collection(transformer, target.items)
            payload: Any = rendered if target.envelope is None else {target.envelope: rendered}
        else:
            payload = engine.item(transformer, target.data)

        record_filter_outcome(action_id, "transformed")
        logger.debug(
            "action_result_transformed",
            action=action_id,
            target=type(target).__name__,
            options=engine.options.as_dict(),
        )
        return payload

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def select_transformer(self, action_id: str) -> TransformerReference | None:
        """Pick the reference for ``action_id``: action, then "*", then default.

        Mapping entries set to None or a blank string count as unset.
        """
        if _is_set(self.actions.get(action_id)):
            raw = self.actions[action_id]
        elif _is_set(self.actions.get(WILDCARD)):
            raw = self.actions[WILDCARD]
        else:
            raw = self.transformer

        reference = to_reference(raw)
        if isinstance(reference, AbsentRef):
            return None
        return reference

    def resolve_transformer(
        self,
        action_id: str,
        reference: TransformerReference,
    ) -> Callable[[Any], Any] | None:
        transformer = resolve(reference, self.scope)
        if transformer is None:
            logger.warning(
                "Unable to transform item because the transformer could not be resolved",
                transformer=describe(reference),
                action=action_id,
                scope=self.scope,
            )
        return transformer

    def shaping_options(self, request: RequestContext) -> ShapingOptions:
        return ShapingOptions.from_request(
            request,
            fields_param=self.fields_param,
            includes_param=self.includes_param,
            excludes_param=self.excludes_param,
        )

    def render_target(self, data: Any) -> RenderTarget:
        if isinstance(data, DataProvider):
            return CollectionTarget(data.get_models(), self.collection_envelope)
        return SingleItem(data)
