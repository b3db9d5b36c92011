"""Morse code encoding for binary-output devices.

Messages are translated into :class:`~morse_beacon.elements.Element`
sequences that any on/off device (a light, a buzzer, a vibration motor) can
render. :func:`~morse_beacon.encoder.encode` is the main entry point::

    from morse_beacon import encode, render_pulses

    for pulse in render_pulses(encode("SOS"), 200):
        ...

The encoder only decides *what* to transmit; how long a unit lasts is left
to the caller.
"""

from __future__ import annotations

from .codes import (
    CHARACTER_CODES,
    CODE_TABLE_SOURCE,
    KNOWN_COLLISIONS,
    CodeTableError,
    build_code_table,
    expand_code,
    iter_codes,
    lookup,
    to_upper,
)
from .elements import RELATIVE_DURATIONS, Element, ElementKind, duration, relative_duration
from .encoder import encode, encoded_units, iter_encode
from .timing import (
    DEFAULT_DOT_LENGTH_MS,
    Pulse,
    dot_length_for_wpm,
    format_pattern,
    render_pulses,
    total_duration,
)

__all__ = [
    "CHARACTER_CODES",
    "CODE_TABLE_SOURCE",
    "KNOWN_COLLISIONS",
    "CodeTableError",
    "build_code_table",
    "expand_code",
    "iter_codes",
    "lookup",
    "to_upper",
    "Element",
    "ElementKind",
    "RELATIVE_DURATIONS",
    "duration",
    "relative_duration",
    "encode",
    "encoded_units",
    "iter_encode",
    "DEFAULT_DOT_LENGTH_MS",
    "Pulse",
    "dot_length_for_wpm",
    "format_pattern",
    "render_pulses",
    "total_duration",
]

__version__ = "0.1.0"
