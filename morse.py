"""Legacy entry point for the Morse code encoder."""

from morse_beacon.cli import main


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
