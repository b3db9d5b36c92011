"""Command line front end that prints the Morse encoding of a message."""

from __future__ import annotations

import argparse
import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .codes import iter_codes
from .encoder import encode
from .elements import Element
from .timing import (
    DEFAULT_DOT_LENGTH_MS,
    dot_length_for_wpm,
    format_pattern,
    render_pulses,
    total_duration,
)

LOGGER = logging.getLogger(__name__)

OUTPUT_FORMATS = ("pattern", "elements", "pulses", "json")
_CONFIG_KEYS = frozenset({"dot_length", "wpm", "format", "log_level"})


@dataclass(frozen=True)
class CliConfig:
    """Defaults read from a JSON configuration file."""

    dot_length: Optional[float] = None
    wpm: Optional[float] = None
    format: Optional[str] = None
    log_level: Optional[str] = None


def _load_config(path: Path) -> CliConfig:
    try:
        contents = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ValueError(f"Cannot read configuration file {path}: {exc.strerror}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Configuration file {path} is not valid JSON: {exc.msg}") from exc

    if not isinstance(contents, dict):
        raise ValueError("Configuration file must contain a JSON object")
    unknown = sorted(set(contents) - _CONFIG_KEYS)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

    dot_length = _coerce_positive(contents, "dot_length")
    wpm = _coerce_positive(contents, "wpm")
    if dot_length is not None and wpm is not None:
        raise ValueError("Configuration cannot define both 'dot_length' and 'wpm'")

    output_format = contents.get("format")
    if output_format is not None and output_format not in OUTPUT_FORMATS:
        raise ValueError(f"'format' must be one of {', '.join(OUTPUT_FORMATS)}")

    log_level = contents.get("log_level")
    if log_level is not None and not isinstance(log_level, str):
        raise ValueError("'log_level' must be a string")

    return CliConfig(dot_length=dot_length, wpm=wpm, format=output_format, log_level=log_level)


def _coerce_positive(contents: Dict[str, object], key: str) -> Optional[float]:
    if key not in contents:
        return None
    value = contents[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number")
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"'{key}' must be a positive finite number")
    return value


def _positive_number(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text!r} is not a number") from None
    if not math.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError("value must be a positive finite number")
    return value


def _resolve_dot_length(args: argparse.Namespace, config: CliConfig) -> float:
    if args.dot_length is not None:
        return args.dot_length
    if args.wpm is not None:
        return dot_length_for_wpm(args.wpm) * 1000.0
    if config.dot_length is not None:
        return config.dot_length
    if config.wpm is not None:
        return dot_length_for_wpm(config.wpm) * 1000.0
    return DEFAULT_DOT_LENGTH_MS


def _format_number(value: float) -> str:
    return f"{value:g}"


def render_output(elements: Sequence[Element], output_format: str, dot_length: float, message: str) -> str:
    """Return the text printed for *elements* in *output_format*."""

    if output_format == "pattern":
        return format_pattern(elements)
    if output_format == "elements":
        return "\n".join(element.label for element in elements)
    if output_format == "pulses":
        lines = []
        for pulse in render_pulses(elements, dot_length):
            state = "on" if pulse.on else "off"
            lines.append(f"{state:<3} {_format_number(pulse.duration)}")
        return "\n".join(lines)
    if output_format == "json":
        payload = {
            "message": message,
            "dot_length_ms": dot_length,
            "total_ms": total_duration(elements, dot_length),
            "elements": [
                {
                    "element": pulse.element.label,
                    "on": pulse.on,
                    "units": pulse.element.units,
                    "duration_ms": pulse.duration,
                }
                for pulse in render_pulses(elements, dot_length)
            ],
        }
        return json.dumps(payload, indent=2, ensure_ascii=False, allow_nan=False)
    raise ValueError(f"Unsupported output format: {output_format}")  # pragma: no cover - argparse guard


def _list_codes() -> str:
    return "\n".join(f"{character} {code}" for character, code in iter_codes())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("message", nargs="*", help="Text to encode. Multiple arguments are joined by spaces.")
    speed = parser.add_mutually_exclusive_group()
    speed.add_argument(
        "--dot-length",
        type=_positive_number,
        help=f"Duration of one dot in milliseconds (default: {DEFAULT_DOT_LENGTH_MS})",
    )
    speed.add_argument("--wpm", type=_positive_number, help="Transmission speed in words per minute")
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: pattern)",
    )
    parser.add_argument("--list", action="store_true", help="Print the Morse code table and exit")
    parser.add_argument("--config", type=Path, help="JSON file providing default options")
    parser.add_argument(
        "--log-level",
        help="Logging verbosity (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = CliConfig()
    if args.config is not None:
        try:
            config = _load_config(args.config)
        except ValueError as exc:
            parser.error(str(exc))

    log_name = args.log_level or config.log_level or "WARNING"
    log_level = getattr(logging, str(log_name).upper(), None)
    if isinstance(log_level, bool) or not isinstance(log_level, int):
        parser.error(f"unknown log level {log_name!r}")
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.list:
        print(_list_codes())
        return 0

    if not args.message:
        parser.error("a message is required unless --list is given")

    message = " ".join(args.message)
    output_format = args.format or config.format or "pattern"
    dot_length = _resolve_dot_length(args, config)
    LOGGER.info("Encoding %d characters with a %s ms dot", len(message), _format_number(dot_length))

    elements: List[Element] = list(encode(message))
    if not elements:
        LOGGER.warning("Message %r contains no encodable characters", message)
    print(render_output(elements, output_format, dot_length, message))
    return 0


__all__ = ["CliConfig", "OUTPUT_FORMATS", "main", "render_output"]


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
