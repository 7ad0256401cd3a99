# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Transformers — resolution and rendering.

Transformers are registered per scope, referenced from filter
configuration, resolved to invokables, and rendered by the engine with the
client's shaping options.
"""

from .base import Transformer
from .engine import ShapingOptions, TransformEngine, parse_tokens
from .references import (
    ABSENT,
    AbsentRef,
    CallableRef,
    ClassRef,
    ConfigRef,
    TransformerReference,
    describe,
    to_reference,
)
from .registry import (
    GLOBAL_SCOPE,
    clear_registry,
    construct,
    get_registered_transformers,
    get_transformer,
    register_transformer,
)
from .resolver import is_transformer_class, is_transformer_config, resolve
from .resources import Collection, Item

__all__ = [
    "Transformer",
    "Item",
    "Collection",
    "ShapingOptions",
    "TransformEngine",
    "parse_tokens",
    "TransformerReference",
    "CallableRef",
    "ClassRef",
    "ConfigRef",
    "AbsentRef",
    "ABSENT",
    "to_reference",
    "describe",
    "GLOBAL_SCOPE",
    "register_transformer",
    "get_transformer",
    "get_registered_transformers",
    "clear_registry",
    "construct",
    "resolve",
    "is_transformer_class",
    "is_transformer_config",
]
