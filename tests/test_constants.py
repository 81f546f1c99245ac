"""Tests for the constants module."""
import sys
import os
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from golor.constants import (
    BACKGROUND_PREFIX,
    DEFAULT_CONFIG_PATH,
    FOREGROUND_PREFIX,
    PACKED32_PROPERTIES_SHIFT,
    PACKED64_BACKGROUND_SHIFT,
    PACKED64_FOREGROUND_SHIFT,
    PACKED64_PROPERTIES_SHIFT,
    PREFIX,
    PROPERTY_CODES,
    SUFFIX,
)


def test_escape_delimiters():
    assert PREFIX == "\x1b["
    assert SUFFIX == "\x1b[0m"


def test_color_prefixes():
    assert FOREGROUND_PREFIX == "38;2"
    assert BACKGROUND_PREFIX == "48;2"


def test_property_codes_are_in_ascending_bit_order():
    bits = [bit for bit, _ in PROPERTY_CODES]
    assert bits == sorted(bits)
    assert [code for _, code in PROPERTY_CODES] == ["1", "2", "3", "4", "5", "6", "9"]


def test_packed_fields_do_not_overlap():
    assert PACKED32_PROPERTIES_SHIFT == 24
    assert PACKED64_FOREGROUND_SHIFT + 24 == PACKED64_BACKGROUND_SHIFT
    assert PACKED64_BACKGROUND_SHIFT + 24 == PACKED64_PROPERTIES_SHIFT


def test_default_config_path():
    assert DEFAULT_CONFIG_PATH == Path("golor_config.toml")
