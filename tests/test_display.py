"""Tests for amplitude formatting and raw input parsing."""

import math

import numpy as np
import pytest

from qubit_calculator import (
    QubitState,
    amplitude_summary,
    apply_gate,
    coerce_component,
    format_amplitude,
    format_components,
    format_coordinates,
    format_probability,
    format_state,
    to_bloch_coordinates,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (complex(0.00005, 0.00005), "0.000"),
        (complex(0.70710678, 0.0), "0.707"),
        (complex(-1.0, 0.00009), "-1.000"),
        (complex(0.0, -0.5), "-0.500i"),
        (complex(0.00009, 1.0), "1.000i"),
        (complex(0.6, 0.8), "0.600+0.800i"),
        (complex(0.6, -0.8), "0.600-0.800i"),
        (complex(-0.25, 0.0001), "-0.250+0.000i"),
    ],
)
def test_format_amplitude(value, expected):
    assert format_amplitude(value) == expected


def test_format_state():
    assert format_state(QubitState()) == "|ψ⟩ = (1.000)|0⟩ + (0.000)|1⟩"
    assert format_state(QubitState(1, 1j)) == "|ψ⟩ = (0.707)|0⟩ + (0.707i)|1⟩"


def test_format_components_after_gate():
    state = apply_gate(QubitState(), "H")
    assert format_components(state) == ("0.7071", "0.0000", "0.7071", "0.0000")
    assert format_components(state, digits=2) == ("0.71", "0.00", "0.71", "0.00")


def test_format_coordinates():
    coords = to_bloch_coordinates(QubitState())
    assert format_coordinates(coords) == {"x": "0.000", "y": "0.000", "z": "1.000"}


def test_format_probability():
    assert format_probability(0.5) == "50.00%"
    assert format_probability(1.0, digits=1) == "100.0%"


def test_amplitude_summary():
    summary = amplitude_summary(1j)
    assert summary["probability"] == "1.000"
    assert summary["percent"] == "100.0%"
    assert summary["phase_deg"] == "90°"
    assert summary["real"] == "0.000"
    assert summary["imag"] == "1.000"
    assert amplitude_summary(-0.5 + 0j)["phase_deg"] == "180°"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1.0),
        ("0.7071", 0.7071),
        ("  -2e3x", -2000.0),
        ("1.5abc", 1.5),
        (".5", 0.5),
        ("abc", 0.0),
        ("", 0.0),
        (".", 0.0),
        ("inf", 0.0),
        ("1e400", 0.0),
        (None, 0.0),
        (3, 3.0),
        (float("nan"), 0.0),
        (float("inf"), 0.0),
    ],
)
def test_coerce_component(raw, expected):
    assert coerce_component(raw) == expected


def test_coerced_fields_build_a_state():
    fields = ("abc", "", "1", "")
    state = QubitState.from_components(*(coerce_component(f) for f in fields))
    assert state.alpha == 0
    assert abs(state.beta - 1.0) < 1e-12
    assert not math.isnan(to_bloch_coordinates(state).phi)


def test_gate_signed_zeros_print_unsigned():
    z_state = apply_gate(QubitState(), "Z")
    assert z_state.beta.real == 0.0 and math.copysign(1.0, z_state.beta.real) < 0
    assert format_state(z_state) == "|ψ⟩ = (1.000)|0⟩ + (0.000)|1⟩"
    assert format_components(z_state) == ("1.0000", "0.0000", "0.0000", "0.0000")

    y_state = apply_gate(QubitState(), "Y")
    assert format_amplitude(y_state.alpha) == "0.000"
    assert format_amplitude(y_state.beta) == "-1.000i"
    assert format_components(y_state) == ("0.0000", "0.0000", "0.0000", "-1.0000")


def test_signed_zero_coordinates():
    coords = to_bloch_coordinates(apply_gate(QubitState(), "Z"))
    assert format_coordinates(coords) == {"x": "0.000", "y": "0.000", "z": "1.000"}


def test_small_negative_keeps_its_sign():
    assert format_amplitude(complex(-0.0002, 0.0)) == "-0.000"


@pytest.mark.parametrize(
    "p, digits, expected",
    [
        (0.0625, 1, "6.3%"),
        (0.125, 0, "13%"),
    ],
)
def test_probability_ties_round_up(p, digits, expected):
    assert format_probability(p, digits=digits) == expected


def test_amplitude_ties_round_up():
    # 0.0625 and -0.0625 are exact binary ties at 3 decimals
    assert format_amplitude(complex(0.0625, 0.0)) == "0.063"
    assert format_amplitude(complex(-0.0625, 0.0)) == "-0.063"


@pytest.mark.parametrize("raw, expected", [(10 ** 400, 0.0), (-(10 ** 400), 0.0), (np.int64(3), 3.0), (np.float64(-1.25), -1.25)])
def test_coerce_component_other_reals(raw, expected):
    assert coerce_component(raw) == expected
