"""Command-line entry point for golor."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, List, Sequence

from .config import GRADIENT_MODES, ConfigError, load_config
from .constants import DEFAULT_CONFIG_PATH
from .effects import RGB, BgEffect, FgEffect, Property
from .errors import GolorError
from .gradient import fade_background, fade_both, fade_foreground
from .logger import logger, set_level
from .printer import fprintf, sprintf

FADES = {
    "foreground": fade_foreground,
    "background": fade_background,
    "both": fade_both,
}

DEMO_FOREGROUND = RGB(0xFF, 0xAA, 0x00)
DEMO_BACKGROUND = RGB(0x20, 0x00, 0x80)
DIVIDER = "---"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="golor", description="Show text with 24-bit colors and effects.")
    parser.add_argument("--config", default=str(DEFAULT_CONFIG_PATH), help="Path to TOML configuration file")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("demo", help="Show every property and the configured gradient")

    gradient = commands.add_parser("gradient", help="Show a text with a color gradient")
    gradient.add_argument("text", help="Text to show")
    gradient.add_argument("--start", default=None, help="First color as RRGGBB (defaults to the configuration)")
    gradient.add_argument("--end", default=None, help="Last color as RRGGBB (defaults to the configuration)")
    gradient.add_argument("--mode", choices=GRADIENT_MODES, default=None, help="Channel the gradient is applied to")
    return parser


def _fade(text: str, settings: Dict[str, Any]) -> str:
    start = RGB.from_hex(settings.get("start", "000000")).to_int()
    end = RGB.from_hex(settings.get("end", "ff0000")).to_int()
    return FADES[settings.get("mode", "foreground")](text, start, end)


def _demo_lines(text: str, settings: Dict[str, Any]) -> List[str]:
    fg, bg = DEMO_FOREGROUND, DEMO_BACKGROUND
    lines = [text, DIVIDER]
    lines += [sprintf("%C{%s}", FgEffect(fg.red, fg.green, fg.blue, prop), text) for prop in Property]
    lines.append(DIVIDER)
    lines += [sprintf("%C{%s}", BgEffect(bg.red, bg.green, bg.blue, prop), text) for prop in Property]
    lines.append(DIVIDER)
    lines.append(_fade(text, settings))
    return lines


def main(argv: Sequence[str] | None = None, stream=None) -> int:
    """
    Run the CLI.

    Args:
        argv: Optional argument list for testing.
        stream: Optional stream to write output to. Defaults to stdout.

    Returns:
        Exit code.
    """
    stream = stream or sys.stdout
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        set_level(config.get("logging", {}).get("level", "WARNING"))
    except (ConfigError, ValueError) as exc:
        stream.write(f"Failed to load configuration: {exc}\n")
        return 1

    settings = dict(config.get("gradient", {}))
    try:
        if args.command == "demo":
            lines = _demo_lines(config.get("demo", {}).get("text", ""), settings)
        else:
            overrides = {"start": args.start, "end": args.end, "mode": args.mode}
            settings.update({key: value for key, value in overrides.items() if value is not None})
            lines = [_fade(args.text, settings)]
    except (GolorError, ValueError) as exc:
        stream.write(f"Rendering failed: {exc}\n")
        return 1

    logger.debug("writing %d line(s)", len(lines))
    for line in lines:
        fprintf(stream, "%s\n", line)
    return 0
