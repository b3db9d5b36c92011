from datetime import timedelta

import pytest

from morse_beacon.elements import (
    RELATIVE_DURATIONS,
    Element,
    ElementKind,
    duration,
    relative_duration,
)


def test_relative_durations_are_all_positive() -> None:
    assert all(value > 0 for value in RELATIVE_DURATIONS.values())


def test_every_element_has_a_relative_duration() -> None:
    assert set(RELATIVE_DURATIONS) == set(Element)


@pytest.mark.parametrize(
    ("element", "units"),
    [
        (Element.DOT, 1),
        (Element.DASH, 3),
        (Element.INTRA_CHARACTER_GAP, 1),
        (Element.INTER_LETTER_GAP, 3),
        (Element.INTER_WORD_GAP, 7),
    ],
)
def test_relative_duration_values(element: Element, units: int) -> None:
    assert relative_duration(element) == units
    assert element.units == units


def test_signals_and_gaps_are_classified_per_element() -> None:
    signals = {element for element in Element if not element.is_gap}
    gaps = {element for element in Element if element.is_gap}

    assert signals == {Element.DOT, Element.DASH}
    assert gaps == {
        Element.INTRA_CHARACTER_GAP,
        Element.INTER_LETTER_GAP,
        Element.INTER_WORD_GAP,
    }
    for element in Element:
        assert element.is_signal is not element.is_gap
        assert element.is_gap is (element.kind is ElementKind.GAP)


def test_relative_durations_are_read_only() -> None:
    with pytest.raises(TypeError):
        RELATIVE_DURATIONS[Element.DOT] = 2  # type: ignore[index]


def test_duration_scales_base_unit() -> None:
    assert duration(Element.DASH, 200) == 600
    assert duration(Element.INTER_WORD_GAP, 0.05) == pytest.approx(0.35)


def test_duration_keeps_timedelta_type() -> None:
    result = duration(Element.INTER_LETTER_GAP, timedelta(milliseconds=100))
    assert result == timedelta(milliseconds=300)
