"""Morse code elements and their relative durations."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from types import MappingProxyType
from typing import Mapping, TypeVar

BaseUnit = TypeVar("BaseUnit", int, float, timedelta)


class ElementKind(Enum):
    """Whether an element keeps the output switched on or off."""

    SIGNAL = "signal"
    GAP = "gap"


class Element(Enum):
    """On and off elements of various lengths."""

    DOT = ("dot", ElementKind.SIGNAL)
    DASH = ("dash", ElementKind.SIGNAL)
    INTRA_CHARACTER_GAP = ("intra_character_gap", ElementKind.GAP)
    INTER_LETTER_GAP = ("inter_letter_gap", ElementKind.GAP)
    INTER_WORD_GAP = ("inter_word_gap", ElementKind.GAP)

    def __init__(self, label: str, kind: ElementKind) -> None:
        self.label = label
        self.kind = kind

    @property
    def is_gap(self) -> bool:
        return self.kind is ElementKind.GAP

    @property
    def is_signal(self) -> bool:
        return self.kind is ElementKind.SIGNAL

    @property
    def units(self) -> int:
        """Length of the element measured in dot lengths."""

        return RELATIVE_DURATIONS[self]


RELATIVE_DURATIONS: Mapping[Element, int] = MappingProxyType(
    {
        Element.DOT: 1,
        Element.DASH: 3,
        Element.INTRA_CHARACTER_GAP: 1,
        Element.INTER_LETTER_GAP: 3,
        Element.INTER_WORD_GAP: 7,
    }
)


def relative_duration(element: Element) -> int:
    """Return the length of *element* in units of one dot."""

    return RELATIVE_DURATIONS[element]


def duration(element: Element, base_unit: BaseUnit) -> BaseUnit:
    """Return how long *element* lasts when a dot lasts *base_unit*.

    The result has the same type as *base_unit*, so milliseconds stay
    integers and :class:`~datetime.timedelta` values stay timedeltas.
    """

    return RELATIVE_DURATIONS[element] * base_unit


__all__ = [
    "Element",
    "ElementKind",
    "RELATIVE_DURATIONS",
    "relative_duration",
    "duration",
]
