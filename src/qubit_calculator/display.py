"""
Display strings for the presentation layer, and the permissive input parse
used by the amplitude input fields.

The thresholds and precisions below are part of the public contract.
"""

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from numbers import Real
from typing import Dict, Tuple

from .qubit_state import BlochCoordinate, QubitState

ZERO_THRESHOLD = 1e-4
AMPLITUDE_DIGITS = 3
COMPONENT_DIGITS = 4

_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_FIXED_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def _to_fixed(value: float, digits: int) -> str:
    """
    Fixed-point string with ties rounded away from zero. Signed zero prints
    as "0.000"; a small negative value still prints as "-0.000".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    d = Decimal(value + 0.0).quantize(Decimal(1).scaleb(-digits), context=_FIXED_CONTEXT)
    return format(d, "f")


def format_amplitude(c: complex) -> str:
    """
    '0.707' when the imaginary part is below 1e-4 in magnitude,
    '-0.500i' when only the real part is, '0.600+0.800i' otherwise.
    """
    if abs(c.imag) < ZERO_THRESHOLD:
        return _to_fixed(c.real, AMPLITUDE_DIGITS)
    if abs(c.real) < ZERO_THRESHOLD:
        return f"{_to_fixed(c.imag, AMPLITUDE_DIGITS)}i"
    sign = "+" if c.imag >= 0 else ""
    return f"{_to_fixed(c.real, AMPLITUDE_DIGITS)}{sign}{_to_fixed(c.imag, AMPLITUDE_DIGITS)}i"


def format_state(state: QubitState) -> str:
    return f"|ψ⟩ = ({format_amplitude(state.alpha)})|0⟩ + ({format_amplitude(state.beta)})|1⟩"


def format_components(state: QubitState, digits: int = COMPONENT_DIGITS) -> Tuple[str, str, str, str]:
    """The four components as fixed-point strings, in input-field order."""
    return tuple(_to_fixed(v, digits) for v in state.components())


def format_coordinates(coords: BlochCoordinate) -> Dict[str, str]:
    return {
        "x": _to_fixed(coords.x, 3),
        "y": _to_fixed(coords.y, 3),
        "z": _to_fixed(coords.z, 3),
    }


def format_probability(p: float, digits: int = 2) -> str:
    return f"{_to_fixed(p * 100, digits)}%"


def amplitude_summary(c: complex) -> Dict[str, str]:
    """Probability, phase (degrees) and parts of one amplitude, ready to print."""
    prob = c.real ** 2 + c.imag ** 2
    return {
        "probability": _to_fixed(prob, 3),
        "percent": format_probability(prob, digits=1),
        "phase_deg": f"{_to_fixed(math.degrees(math.atan2(c.imag, c.real)), 0)}°",
        "real": _to_fixed(c.real, 3),
        "imag": _to_fixed(c.imag, 3),
    }


def coerce_component(raw) -> float:
    """
    Best-effort parse of a raw input field: the leading number of a string,
    0.0 for anything unparseable or non-finite. Never raises.
    """
    if isinstance(raw, bool):
        return float(raw)
    if isinstance(raw, Real):
        try:
            value = float(raw)
        except OverflowError:
            return 0.0
    elif isinstance(raw, str):
        match = _NUMBER_PREFIX.match(raw)
        if match is None:
            return 0.0
        value = float(match.group(0))
    else:
        return 0.0
    return value if math.isfinite(value) else 0.0
