#!/usr/bin/env python3
"""Export the Morse code table in a JSON friendly format."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys
from typing import Iterable, Sequence, Tuple

# Ensure local sources are importable when the package isn't installed.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from morse_beacon import codes


def build_payload(entries: Iterable[Tuple[str, str]]) -> dict:
    """Return a JSON serialisable payload for *entries*."""

    return {
        "codes": [
            {
                "character": character,
                "code": code,
                "units": sum(element.units for element in codes.expand_code(code)),
            }
            for character, code in entries
        ]
    }


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export the Morse code table in JSON format.")
    parser.add_argument(
        "output",
        nargs="?",
        type=Path,
        help="Optional file path to write. Defaults to stdout.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Number of spaces to indent JSON output (default: 2).",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort entries by character instead of keeping the table ordering.",
    )
    args = parser.parse_args(argv)

    entries = sorted(codes.iter_codes()) if args.sort else codes.iter_codes()
    payload = build_payload(entries)
    json_text = json.dumps(payload, indent=args.indent, ensure_ascii=False)

    if args.output is None:
        print(json_text)
    else:
        args.output.write_text(json_text + "\n", encoding="utf-8")

    return 0


if __name__ == "__main__":  # pragma: no cover - manual usage
    raise SystemExit(main())
