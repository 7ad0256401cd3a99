# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Transformer registry — maps handles to transformer references per scope.

Lookup priority for a handle:
1. The requested scope (e.g. a plugin's own namespace)
2. The global scope
3. None (unknown handle)

The registry also acts as the object constructor for config descriptors:
the descriptor's ``class`` names a Transformer subclass, either directly
or through a registered handle.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..errors import InvalidTransformerConfigError, TransformerRegistrationError
from .base import Transformer
from .references import AbsentRef, to_reference

GLOBAL_SCOPE = "global"

# Registry: scope → handle → raw transformer reference
_transformers: dict[str, dict[str, Any]] = {}


def register_transformer(
    handle: str,
    transformer: Any,
    scope: str = GLOBAL_SCOPE,
) -> None:
    """Register a transformer reference under ``handle`` in ``scope``.

    Registering an existing handle replaces it.
    """
    if not handle:
        raise TransformerRegistrationError("Transformer handle must be a non-empty string")
    if isinstance(to_reference(transformer), AbsentRef):
        raise TransformerRegistrationError(
            f"Cannot register {transformer!r} as transformer '{handle}'"
        )
    _transformers.setdefault(scope, {})[handle] = transformer


def get_transformer(handle: str, scope: str = GLOBAL_SCOPE) -> Any | None:
    """Find the reference registered for ``handle``, falling back to global scope."""
    scoped = _transformers.get(scope, {})
    if handle in scoped:
        return scoped[handle]
    return _transformers.get(GLOBAL_SCOPE, {}).get(handle)


def get_registered_transformers(scope: str | None = None) -> dict[str, Any]:
    """Return registered transformers (for introspection/testing).

    With a scope, only that scope's handles; otherwise every scope.
    """
    if scope is not None:
        return dict(_transformers.get(scope, {}))
    return {name: dict(handles) for name, handles in _transformers.items()}


def clear_registry() -> None:
    """Forget every registered transformer (useful for testing)."""
    _transformers.clear()


def transformer_class(identifier: Any, scope: str = GLOBAL_SCOPE) -> type[Transformer] | None:
    """Return the Transformer subclass named by ``identifier``, if any."""
    if isinstance(identifier, str):
        identifier = get_transformer(identifier, scope)
    if isinstance(identifier, type) and issubclass(identifier, Transformer):
        return identifier
    return None


def construct(descriptor: Mapping[str, Any], scope: str = GLOBAL_SCOPE) -> Transformer:
    """Build a transformer from ``{"class": ..., **params}``.

    Raises:
        InvalidTransformerConfigError: if the descriptor is malformed, names
            no transformer class, or the constructor raises.
    """
    if not isinstance(descriptor, Mapping):
        raise InvalidTransformerConfigError("Transformer config must be a mapping", descriptor)

    params = dict(descriptor)
    identifier = params.pop("class", None)
    if not identifier:
        raise InvalidTransformerConfigError("Transformer config requires a 'class' key", descriptor)

    cls = transformer_class(identifier, scope)
    if cls is None:
        raise InvalidTransformerConfigError(
            f"'{identifier}' is not a transformer class in scope '{scope}'", descriptor
        )

    try:
        return cls(**params)
    except Exception as e:
        raise InvalidTransformerConfigError(
            f"Cannot construct {cls.__name__}: {e}", descriptor
        ) from e
