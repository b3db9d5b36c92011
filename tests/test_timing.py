from datetime import timedelta

import pytest

from morse_beacon.elements import Element
from morse_beacon.encoder import encode
from morse_beacon.timing import (
    DEFAULT_DOT_LENGTH_MS,
    Pulse,
    dot_length_for_wpm,
    format_pattern,
    render_pulses,
    total_duration,
)


def test_render_pulses_switches_output_for_signals_only() -> None:
    pulses = render_pulses(encode("ET"), DEFAULT_DOT_LENGTH_MS)
    assert pulses == (
        Pulse(element=Element.DOT, on=True, duration=200),
        Pulse(element=Element.INTER_LETTER_GAP, on=False, duration=600),
        Pulse(element=Element.DASH, on=True, duration=600),
    )


def test_render_pulses_accepts_timedelta() -> None:
    pulses = render_pulses(encode("E E"), timedelta(milliseconds=50))
    assert [pulse.duration for pulse in pulses] == [
        timedelta(milliseconds=50),
        timedelta(milliseconds=350),
        timedelta(milliseconds=50),
    ]
    assert [pulse.on for pulse in pulses] == [True, False, True]


def test_render_pulses_rejects_negative_base_unit() -> None:
    with pytest.raises(ValueError):
        render_pulses(encode("E"), -1)
    with pytest.raises(ValueError):
        render_pulses(encode("E"), timedelta(seconds=-1))


def test_render_pulses_of_empty_message() -> None:
    assert render_pulses(encode(""), 100) == ()


def test_total_duration_sums_elements() -> None:
    assert total_duration(encode("PARIS "), 1) == 50
    assert total_duration(encode("OK"), 10) == 230
    assert total_duration((), 10) == 0


def test_dot_length_for_wpm() -> None:
    assert dot_length_for_wpm(20) == pytest.approx(0.06)
    assert dot_length_for_wpm(5) == pytest.approx(0.24)


@pytest.mark.parametrize("wpm", [0, -5])
def test_dot_length_for_wpm_rejects_non_positive(wpm: float) -> None:
    with pytest.raises(ValueError):
        dot_length_for_wpm(wpm)


def test_format_pattern() -> None:
    assert format_pattern(encode("OK")) == "--- -.-"
    assert format_pattern(encode("YES SIR")) == "-.-- . ... / ... .. .-."
    assert format_pattern(encode(" E")) == " / ."
    assert format_pattern(()) == ""
