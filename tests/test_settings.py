# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Tests for settings, references and logging setup."""

import pytest
import structlog
from pydantic import ValidationError

from flux.config import Settings, get_settings
from flux.filters import Pagination
from flux.log import configure_logging
from flux.transformer import ABSENT, CallableRef, ClassRef, ConfigRef, describe, to_reference

from entries import EntryTransformer


class TestSettings:
    def test_defaults(self):
        settings = get_settings()
        assert settings.default_scope == "global"
        assert settings.fields_param == "fields"
        assert settings.includes_param == "includes"
        assert settings.excludes_param == "excludes"
        assert settings.collection_envelope == "data"
        assert settings.transform_empty is False

    def test_log_level_normalised(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    @pytest.mark.parametrize("depth", [0, 33])
    def test_include_depth_range(self, depth):
        with pytest.raises(ValidationError):
            Settings(max_include_depth=depth)

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()

    @pytest.mark.parametrize("log_format", ["json", "text"])
    def test_configure_logging(self, log_format):
        configure_logging(Settings(log_format=log_format))
        try:
            structlog.get_logger("flux.test").info("configured", log_format=log_format)
        finally:
            structlog.reset_defaults()


class TestReferences:
    """Raw configuration values are classified into one reference kind."""

    def test_classification(self):
        def fn(entry):
            return {}

        assert to_reference(None) is ABSENT
        assert to_reference("") is ABSENT
        assert to_reference(3.5) is ABSENT
        assert to_reference("entry") == ClassRef("entry")
        assert to_reference(EntryTransformer) == ClassRef(EntryTransformer)
        assert to_reference(fn) == CallableRef(fn)
        assert isinstance(to_reference({"class": "entry"}), ConfigRef)

    def test_instances_are_callables(self):
        transformer = EntryTransformer()
        assert to_reference(transformer) == CallableRef(transformer)

    def test_reference_is_idempotent(self):
        reference = ClassRef("entry")
        assert to_reference(reference) is reference

    def test_descriptor_is_copied_read_only(self):
        raw = {"class": "entry"}
        reference = to_reference(raw)
        raw["class"] = "other"
        assert reference.descriptor["class"] == "entry"
        with pytest.raises(TypeError):
            reference.descriptor["class"] = "other"

    def test_describe(self):
        assert describe("entry") == '"entry"'
        assert describe(None) == "null"
        assert describe(ClassRef("entry")) == '"entry"'
        assert describe({"class": EntryTransformer}) == '{"class": "entries.EntryTransformer"}'


class TestPagination:
    def test_offset_and_page_count(self):
        pagination = Pagination(page=3, page_size=10)
        assert pagination.offset == 20
        assert pagination.page_count(21) == 3

    @pytest.mark.parametrize("kwargs", [{"page": 0}, {"page_size": 0}])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            Pagination(**kwargs)
