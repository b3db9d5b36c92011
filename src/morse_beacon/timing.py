"""Turn encoded elements into on/off pulses with real durations.

Nothing here sleeps or talks to hardware. A device driver walks the
:class:`Pulse` sequence, switches its output on or off and holds it for
:attr:`Pulse.duration` before moving on::

    for pulse in render_pulses(encode("SOS"), 200):
        light.set(pulse.on)
        wait_ms(pulse.duration)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Generic, Iterable, List, Tuple

from .elements import BaseUnit, Element, duration

DEFAULT_DOT_LENGTH_MS = 200

# PARIS is 50 units long, so one word per minute lasts 60 / 50 seconds per unit.
_PARIS_SECONDS_PER_UNIT = 1.2

_LETTER_SEPARATOR = " "
_WORD_SEPARATOR = " / "


@dataclass(frozen=True)
class Pulse(Generic[BaseUnit]):
    """One element held on or off for a fixed time."""

    element: Element
    on: bool
    duration: BaseUnit


def _validate_base_unit(base_unit: BaseUnit) -> None:
    zero = timedelta(0) if isinstance(base_unit, timedelta) else 0
    if base_unit < zero:
        raise ValueError("The base unit cannot be negative.")


def render_pulses(elements: Iterable[Element], base_unit: BaseUnit) -> Tuple[Pulse[BaseUnit], ...]:
    """Return a :class:`Pulse` for each of *elements* with a dot lasting *base_unit*."""

    _validate_base_unit(base_unit)
    return tuple(
        Pulse(element=element, on=not element.is_gap, duration=duration(element, base_unit))
        for element in elements
    )


def total_duration(elements: Iterable[Element], base_unit: BaseUnit) -> BaseUnit:
    """Return how long transmitting *elements* takes."""

    _validate_base_unit(base_unit)
    units = sum(element.units for element in elements)
    return units * base_unit


def dot_length_for_wpm(wpm: float) -> float:
    """Return the dot length in seconds for a speed of *wpm* words per minute."""

    if wpm <= 0:
        raise ValueError("Words per minute must be positive.")
    return _PARIS_SECONDS_PER_UNIT / wpm


def format_pattern(elements: Iterable[Element]) -> str:
    """Render *elements* as dots and dashes, e.g. ``"--- -.-"`` for ``OK``."""

    parts: List[str] = []
    for element in elements:
        if element is Element.DOT:
            parts.append(".")
        elif element is Element.DASH:
            parts.append("-")
        elif element is Element.INTER_LETTER_GAP:
            parts.append(_LETTER_SEPARATOR)
        elif element is Element.INTER_WORD_GAP:
            parts.append(_WORD_SEPARATOR)
    return "".join(parts)


__all__ = [
    "DEFAULT_DOT_LENGTH_MS",
    "Pulse",
    "dot_length_for_wpm",
    "format_pattern",
    "render_pulses",
    "total_duration",
]
