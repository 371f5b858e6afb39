"""Tests for configuration helpers.

WHY: The unit width arrives as a string from the CLI, the API, and the
environment. A bad mapping would silently pick the wrong encoding.
"""

import logging

import pytest

from html_obfuscator.config import (
    DEFAULT_UNIT_WIDTH,
    DOCUMENT_CHARSET,
    DOCUMENT_TITLE,
    UNIT_WIDTH_CHOICES,
    parse_unit_width,
    resolve_default_unit_width,
)


class TestParseUnitWidth:

    @pytest.mark.parametrize("value", [None, "", "auto", "AUTO", " auto "])
    def test_auto_values_map_to_none(self, value):
        assert parse_unit_width(value) is None

    @pytest.mark.parametrize("value, expected", [("2", 2), ("4", 4), (2, 2), (4, 4)])
    def test_explicit_widths(self, value, expected):
        assert parse_unit_width(value) == expected

    @pytest.mark.parametrize("value", ["3", "8", "wide", 0])
    def test_invalid_width_raises(self, value):
        with pytest.raises(ValueError, match="Invalid unit width"):
            parse_unit_width(value)

    def test_every_choice_is_parseable(self):
        for choice in UNIT_WIDTH_CHOICES:
            parse_unit_width(choice)


def test_document_constants():
    assert DOCUMENT_TITLE == "Obfuscated Page"
    assert DOCUMENT_CHARSET == "UTF-8"


class TestResolveDefaultUnitWidth:

    @pytest.mark.parametrize("raw, expected", [
        (None, "auto"),
        ("", "auto"),
        ("AUTO", "auto"),
        (" 2 ", "2"),
        ("4", "4"),
    ])
    def test_valid_settings(self, raw, expected):
        assert resolve_default_unit_width(raw) == expected

    def test_invalid_setting_falls_back_to_auto(self, caplog):
        with caplog.at_level(logging.WARNING, logger="html_obfuscator.config"):
            assert resolve_default_unit_width("8") == "auto"
        assert "OBFUSCATOR_UNIT_WIDTH='8'" in caplog.text

    def test_default_is_always_parseable(self):
        assert DEFAULT_UNIT_WIDTH in UNIT_WIDTH_CHOICES
        parse_unit_width(DEFAULT_UNIT_WIDTH)
