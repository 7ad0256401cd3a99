# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Prometheus metrics for transformer resolution and the transform filter."""

from prometheus_client import Counter

from .config import get_settings

settings = get_settings()
prefix = settings.metrics_prefix


# =============================================================================
# Metrics Definitions
# =============================================================================

TRANSFORM_FILTER_TOTAL = Counter(
    f"{prefix}_transform_filter_total",
    "Action results seen by the transform filter",
    # result: "skipped", "no_transformer", "suppressed", "unresolved", "transformed"
    ["action", "result"],
)

TRANSFORMER_RESOLUTION_TOTAL = Counter(
    f"{prefix}_transformer_resolution_total",
    "Transformer reference resolutions",
    ["scope", "result"],  # result: "resolved", "unresolved", "invalid_config"
)


# =============================================================================
# Helpers
# =============================================================================

def record_filter_outcome(action: str, result: str) -> None:
    """Count one pass of the transform filter."""
    if get_settings().enable_metrics:
        TRANSFORM_FILTER_TOTAL.labels(action=action, result=result).inc()


def record_resolution(scope: str, result: str) -> None:
    """Count one top-level transformer resolution."""
    if get_settings().enable_metrics:
        TRANSFORMER_RESOLUTION_TOTAL.labels(scope=scope, result=result).inc()
