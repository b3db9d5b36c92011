"""Translate text messages into sequences of Morse code elements."""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Tuple

from .codes import CHARACTER_CODES, to_upper
from .elements import Element

LOGGER = logging.getLogger(__name__)

WORD_SEPARATOR = " "


def iter_encode(message: Optional[str]) -> Iterator[Element]:
    """Yield the elements for *message* one at a time.

    A space always produces an inter-word gap, so leading, trailing and
    repeated spaces are transmitted as they appear. Characters without a
    code are skipped and leave the word boundary untouched: ``"A#B"`` is
    sent exactly like ``"AB"``.
    """

    if message is None or not message.strip():
        return

    at_start_of_word = True
    for character in to_upper(message):
        if character == WORD_SEPARATOR:
            yield Element.INTER_WORD_GAP
            at_start_of_word = True
            continue

        code = CHARACTER_CODES.get(character)
        if code is None:
            LOGGER.debug("Skipping character %r without a Morse code", character)
            continue

        if not at_start_of_word:
            yield Element.INTER_LETTER_GAP
        yield from code
        at_start_of_word = False


def encode(message: Optional[str]) -> Tuple[Element, ...]:
    """Translate *message* into a sequence of :class:`Element` values.

    Empty, whitespace-only and ``None`` messages produce an empty tuple.
    """

    elements = tuple(iter_encode(message))
    LOGGER.debug("Encoded %d characters into %d elements", len(message or ""), len(elements))
    return elements


def encoded_units(message: Optional[str]) -> int:
    """Return the length of *message* in dot units once encoded."""

    return sum(element.units for element in iter_encode(message))


__all__ = ["WORD_SEPARATOR", "encode", "encoded_units", "iter_encode"]
