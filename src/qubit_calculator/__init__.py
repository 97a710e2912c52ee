"""
Public API for the qubit_calculator package.

This module re-exports the engine and its helpers from:
- qubit_state.py  (state, gates, measurement, Bloch coordinates)
- display.py      (amplitude / state formatting, input parsing)
- waveform.py, trajectory.py

So examples (and users) can simply:
    from qubit_calculator import QubitState, apply_gate, measure, ...

The matplotlib views live in qubit_calculator.viz and are not imported here.
"""

from .errors import QubitError, InvalidGate, InvalidBasis, InvalidAmplitude

from .qubit_state import (
    # state
    QubitState,
    BlochCoordinate,
    MeasurementResult,
    GATES,
    BASES,

    # operations
    apply_gate,
    apply_gates,
    measure,
    to_bloch_coordinates,

    # gates and qiskit interop
    hadamard, pauli_x, pauli_y, pauli_z,
    gate_operator,
    bloch_vector_rho,
)

from .display import (
    format_amplitude,
    format_state,
    format_components,
    format_coordinates,
    format_probability,
    amplitude_summary,
    coerce_component,
)

from .waveform import Waveform, waveform
from .trajectory import continuous_path

__version__ = "0.1.0"

__all__ = [
    "QubitError", "InvalidGate", "InvalidBasis", "InvalidAmplitude",
    "QubitState", "BlochCoordinate", "MeasurementResult", "GATES", "BASES",
    "apply_gate", "apply_gates", "measure", "to_bloch_coordinates",
    "hadamard", "pauli_x", "pauli_y", "pauli_z", "gate_operator", "bloch_vector_rho",
    "format_amplitude", "format_state", "format_components", "format_coordinates",
    "format_probability", "amplitude_summary", "coerce_component",
    "Waveform", "waveform", "continuous_path",
]
