# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Transformer references.

Configuration may point at a transformer in four ways, and each raw value
is classified into exactly one reference kind before resolution:

    lambda entry: {...}                      -> CallableRef
    EntryTransformer / "entry"               -> ClassRef
    {"class": "entry", "with_body": True}    -> ConfigRef
    None                                     -> AbsentRef
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Union


@dataclass(frozen=True)
class CallableRef:
    """An invokable taking the data to transform."""

    func: Callable[[Any], Any]


@dataclass(frozen=True)
class ClassRef:
    """A transformer class, or the registry handle / class name of one."""

    identifier: Union[str, type]


@dataclass(frozen=True)
class ConfigRef:
    """A construction descriptor: ``class`` plus constructor parameters."""

    descriptor: Mapping[str, Any]


@dataclass(frozen=True)
class AbsentRef:
    """No transformer configured."""


ABSENT = AbsentRef()

TransformerReference = Union[CallableRef, ClassRef, ConfigRef, AbsentRef]

_REFERENCE_TYPES = (CallableRef, ClassRef, ConfigRef, AbsentRef)


def to_reference(value: Any) -> TransformerReference:
    """Classify a raw configuration value as a TransformerReference.

    Classes are callable, so they are recognised before plain callables.
    Values matching no kind are treated as absent.
    """
    if isinstance(value, _REFERENCE_TYPES):
        return value
    if value is None:
        return ABSENT
    if isinstance(value, type):
        return ClassRef(value)
    if isinstance(value, str):
        return ClassRef(value) if value else ABSENT
    if isinstance(value, Mapping):
        return ConfigRef(MappingProxyType(dict(value)))
    if callable(value):
        return CallableRef(value)
    return ABSENT


def reference_value(reference: Any) -> Any:
    """Unwrap a TransformerReference back to its raw configured value."""
    if isinstance(reference, CallableRef):
        return reference.func
    if isinstance(reference, ClassRef):
        return reference.identifier
    if isinstance(reference, ConfigRef):
        return dict(reference.descriptor)
    if isinstance(reference, AbsentRef):
        return None
    return reference


def _encode_default(value: Any) -> str:
    if isinstance(value, type):
        return f"{value.__module__}.{value.__qualname__}"
    if isinstance(value, MappingProxyType):
        return json.dumps(dict(value), default=_encode_default)
    name = getattr(value, "__qualname__", None) or type(value).__qualname__
    return f"<{name}>"


def describe(reference: Any) -> str:
    """JSON-encode a reference for diagnostics."""
    return json.dumps(reference_value(reference), default=_encode_default, sort_keys=True)
