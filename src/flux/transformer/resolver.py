# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Transformer resolver.

Turns any TransformerReference into something invokable with the data to
transform, or None. Resolution never raises: invalid descriptors are logged
and reported as unresolved, and callers pass the data through unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

import structlog

from ..errors import InvalidTransformerConfigError
from ..metrics import record_resolution
from .references import CallableRef, ClassRef, ConfigRef, to_reference
from .registry import GLOBAL_SCOPE, construct, get_transformer, transformer_class

logger = structlog.get_logger(__name__)


def is_transformer_class(value: Any, scope: str = GLOBAL_SCOPE) -> bool:
    """Check whether ``value`` is (or names) a Transformer subclass."""
    return transformer_class(value, scope) is not None


def is_transformer_config(value: Any, scope: str = GLOBAL_SCOPE) -> bool:
    """Check whether ``value`` is a constructible transformer descriptor.

    Valid descriptors are mappings with a non-empty ``class`` key naming a
    Transformer subclass. Descriptors without ``class`` are invalid.
    """
    if isinstance(value, ConfigRef):
        value = value.descriptor
    if not isinstance(value, Mapping):
        return False

    identifier = value.get("class")
    if not identifier:
        return False

    return is_transformer_class(identifier, scope)


def resolve(reference: Any, scope: str = GLOBAL_SCOPE) -> Callable[[Any], Any] | None:
    """Resolve a raw value or TransformerReference to an invokable transformer."""
    try:
        transformer = _resolve(to_reference(reference), scope, frozenset())
    except InvalidTransformerConfigError as e:
        logger.warning("Invalid transformer configuration", scope=scope, error=str(e))
        record_resolution(scope, "invalid_config")
        return None

    record_resolution(scope, "resolved" if transformer is not None else "unresolved")
    return transformer


def _resolve(reference: Any, scope: str, seen: frozenset[str]) -> Callable[[Any], Any] | None:
    if isinstance(reference, CallableRef):
        return reference.func

    if isinstance(reference, ConfigRef):
        if not is_transformer_config(reference.descriptor, scope):
            return None
        instance = construct(reference.descriptor, scope)
        return _resolve(to_reference(instance), scope, seen)

    if isinstance(reference, ClassRef):
        return _resolve_class(reference.identifier, scope, seen)

    return None


def _resolve_class(identifier: Any, scope: str, seen: frozenset[str]) -> Callable[[Any], Any] | None:
    if isinstance(identifier, type):
        if not is_transformer_class(identifier, scope):
            return None
        try:
            return identifier()
        except Exception as e:
            raise InvalidTransformerConfigError(
                f"Cannot construct {identifier.__name__}: {e}", identifier
            ) from e

    # Registered handles may alias other handles; stop on cycles
    if identifier in seen:
        return None
    registered = get_transformer(identifier, scope)
    if registered is None:
        return None
    return _resolve(to_reference(registered), scope, seen | {identifier})
