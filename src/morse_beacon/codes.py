"""The Morse code table and the helpers that expand it into elements.

The table is authored as ``.``/``-`` strings because that is easy for humans
to read and review. :data:`CHARACTER_CODES` holds the same table expanded
into :class:`~morse_beacon.elements.Element` sequences, which is what the
encoder works with. The expansion happens once, when this module is
imported; a malformed entry raises :class:`CodeTableError` and the import
fails.
"""

from __future__ import annotations

import string
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from .elements import Element

Code = Tuple[Element, ...]

_SYMBOLS: Mapping[str, Element] = MappingProxyType(
    {
        ".": Element.DOT,
        "-": Element.DASH,
    }
)


class CodeTableError(RuntimeError):
    """Raised when the static code table contains an invalid entry."""


CODE_TABLE_SOURCE: Mapping[str, str] = MappingProxyType(
    {
        "A": ".-",
        "B": "-...",
        "C": "-.-.",
        "D": "-..",
        "E": ".",
        "F": "..-.",
        "G": "--.",
        "H": "....",
        "I": "..",
        "J": ".---",
        "K": "-.-",
        "L": ".-..",
        "M": "--",
        "N": "-.",
        "O": "---",
        "P": ".--.",
        "Q": "--.-",
        "R": ".-.",
        "S": "...",
        "T": "-",
        "U": "..-",
        "V": "...-",
        "W": ".--",
        "X": "-..-",
        "Y": "-.--",
        "Z": "--..",
        "1": ".----",
        "2": "..---",
        "3": "...--",
        "4": "....-",
        "5": ".....",
        "6": "-....",
        "7": "--...",
        "8": "---..",
        "9": "----.",
        "0": "-----",
        ".": ".-.-.-",
        ",": "--..--",
        "?": "..--..",
        "'": ".----.",
        "!": "-.-.--",
        "/": "-..-.",
        "(": "-.--.",
        ")": "-.--.-",
        "&": ".-...",
        ":": "---...",
        ";": "-.-.-.",
        "=": "-...-",
        "+": ".-.-.",
        "-": "-....-",
        "_": "..--.-",
        '"': ".-..-.",
        "$": "...-..-",
        "@": ".--.-.",
        "Ä": ".-.-",
        "Æ": ".-.-",
        "Ą": ".-.-",
        "À": ".--.-",
        "Å": ".--.-",
        "Ç": "-.-..",
        "Ĉ": "-.-..",
        "Ć": "-.-..",
        "Š": "----",
        "Ð": "..--.",
        "Ś": "...-...",
        "È": ".-..-",
        "Ł": ".-..-",
        "É": "..-..",
        "Đ": "..-..",
        "Ę": "..-..",
        "Ĝ": "--.-.",
        "Ĥ": "----",
        "Ĵ": ".---.",
        "Ź": "--..-.",
        "Ñ": "--.--",
        "Ń": "--.--",
        "Ö": "---.",
        "Ø": "---.",
        "Ó": "---.",
        "Ŝ": "...-.",
        "Þ": ".--..",
        "Ü": "..--",
        "Ŭ": "..--",
        "Ż": "--..-",
    }
)

# Letters sharing their code with an entry listed earlier in the table.
KNOWN_COLLISIONS = frozenset("ÆĄÅĈĆŁĐĘĤŃØÓŬ")


def expand_code(code: str) -> Code:
    """Expand a ``.``/``-`` string into signal elements.

    Consecutive symbols are separated by an intra-character gap; the result
    never starts or ends with a gap.
    """

    if not code:
        raise CodeTableError("Morse codes must contain at least one symbol.")
    elements = []
    for index, symbol in enumerate(code):
        try:
            element = _SYMBOLS[symbol]
        except KeyError:
            raise CodeTableError(f"Unknown character {symbol!r} in code {code!r}") from None
        if index > 0:
            elements.append(Element.INTRA_CHARACTER_GAP)
        elements.append(element)
    return tuple(elements)


def build_code_table(source: Mapping[str, str]) -> Mapping[str, Code]:
    """Return a read-only table mapping each character of *source* to its elements."""

    table: Dict[str, Code] = {}
    for character, code in source.items():
        if not isinstance(character, str) or len(character) != 1:
            raise CodeTableError(f"Code table keys must be single characters, got {character!r}")
        if character != character.upper():
            raise CodeTableError(f"Code table key {character!r} must be upper case")
        try:
            table[character] = expand_code(code)
        except CodeTableError as exc:
            raise CodeTableError(f"Invalid code for {character!r}: {exc}") from exc
    return MappingProxyType(table)


def _build_case_mapping(table: Mapping[str, Code]) -> Dict[int, int]:
    mapping = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
    for character in table:
        lower = character.lower()
        if lower != character and len(lower) == 1:
            mapping[ord(lower)] = ord(character)
    return mapping


CHARACTER_CODES: Mapping[str, Code] = build_code_table(CODE_TABLE_SOURCE)
_UPPERCASE = _build_case_mapping(CHARACTER_CODES)


def to_upper(text: str) -> str:
    """Upper-case *text* using a fixed mapping that ignores the current locale.

    Only ASCII letters and the lower case forms of the accented letters in
    the table are converted; everything else passes through unchanged.
    """

    return text.translate(_UPPERCASE)


def lookup(character: str) -> Optional[Code]:
    """Return the elements for *character*, or ``None`` when it has no code."""

    return CHARACTER_CODES.get(to_upper(character))


def iter_codes() -> Iterator[Tuple[str, str]]:
    """Yield ``(character, code)`` pairs in table order."""

    yield from CODE_TABLE_SOURCE.items()


__all__ = [
    "CHARACTER_CODES",
    "CODE_TABLE_SOURCE",
    "Code",
    "CodeTableError",
    "KNOWN_COLLISIONS",
    "build_code_table",
    "expand_code",
    "iter_codes",
    "lookup",
    "to_upper",
]
