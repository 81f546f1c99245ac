"""
Escape sequence building blocks and application level constants.
"""

from pathlib import Path

PREFIX            = "\033["
SUFFIX            = "\033[0m"
RESET             = SUFFIX
FOREGROUND_PREFIX = "38;2"
BACKGROUND_PREFIX = "48;2"
SEPARATOR         = ";"
TERMINATOR        = "m"

# SGR code per attribute bit, ascending bit order
PROPERTY_CODES = (
    (1 << 0, "1"),  # bold
    (1 << 1, "2"),  # dim
    (1 << 2, "3"),  # italic
    (1 << 3, "4"),  # underline
    (1 << 4, "5"),  # slow blink
    (1 << 5, "6"),  # rapid blink
    (1 << 6, "9"),  # crossed out
)

# Bit offsets of the packed encodings
PACKED32_PROPERTIES_SHIFT = 24
PACKED64_FOREGROUND_SHIFT = 0
PACKED64_BACKGROUND_SHIFT = 24
PACKED64_PROPERTIES_SHIFT = 48

DEFAULT_CONFIG_PATH = Path("golor_config.toml")
