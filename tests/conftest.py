# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Pytest configuration and shared fixtures."""

import pytest
from prometheus_client import REGISTRY

from flux.config import clear_settings_cache
from flux.transformer import clear_registry


@pytest.fixture(autouse=True)
def reset_settings():
    """Reset settings cache before each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_registry():
    """Start every test with an empty transformer registry."""
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def sample_value():
    """Read a Prometheus sample, 0.0 when the series does not exist yet."""

    def _get(name: str, labels: dict[str, str]) -> float:
        return REGISTRY.get_sample_value(name, labels) or 0.0

    return _get
