####### Imports #######

import math
import cmath
from numbers import Number, Real
from typing import Iterable, List, NamedTuple, Tuple

import numpy as np
from qiskit.circuit.library import HGate, XGate, YGate, ZGate
from qiskit.quantum_info import DensityMatrix, Operator, Statevector

from .errors import InvalidAmplitude, InvalidBasis, InvalidGate
from .logging import get_logger

logger = get_logger(__name__)

SQRT2 = math.sqrt(2)

GATES = ("H", "X", "Y", "Z")
BASES = ("Z", "X", "Y")

BASIS_OUTCOMES = {
    "Z": ("|0⟩", "|1⟩"),
    "X": ("|+⟩", "|-⟩"),
    "Y": ("|+i⟩", "|-i⟩"),
}


####### Result types #######

class BlochCoordinate(NamedTuple):
    x: float
    y: float
    z: float
    theta: float
    phi: float


class MeasurementResult(NamedTuple):
    basis: str
    outcomes: Tuple[str, str]
    probabilities: Tuple[float, float]


####### Amplitude helpers #######

def _abs2(c: complex) -> float:
    return c.real ** 2 + c.imag ** 2


def _as_amplitude(value, name: str) -> complex:
    """Accepts a complex, a real number or a (re, im) pair."""
    if isinstance(value, tuple) and len(value) == 2:
        return complex(_as_component(value[0], f"{name}.re"), _as_component(value[1], f"{name}.im"))
    if isinstance(value, (str, bytes)) or not isinstance(value, Number):
        raise InvalidAmplitude(name, value)
    try:
        c = complex(value)
    except (TypeError, OverflowError):
        raise InvalidAmplitude(name, value) from None
    if not cmath.isfinite(c):
        raise InvalidAmplitude(name, value)
    return c


def _as_component(value, name: str) -> float:
    if not isinstance(value, Real):
        raise InvalidAmplitude(name, value)
    try:
        value = float(value)
    except OverflowError:
        raise InvalidAmplitude(name, value) from None
    if not math.isfinite(value):
        raise InvalidAmplitude(name, value)
    return value


####### Qubit state #######

class QubitState:
    """
    Immutable single-qubit state  |ψ⟩ = alpha|0⟩ + beta|1⟩.

    The amplitudes are normalized once, at construction. If both are exactly
    zero the state is passed through un-normalized (degenerate state).
    Gates return new states and never touch the one they were applied to.
    """

    __slots__ = ("_alpha", "_beta")

    def __init__(self, alpha=1 + 0j, beta=0j):
        alpha = _as_amplitude(alpha, "alpha")
        beta = _as_amplitude(beta, "beta")

        norm = math.hypot(alpha.real, alpha.imag, beta.real, beta.imag)
        if math.isinf(norm):
            # finite parts whose norm overflows: shrink them first
            peak = max(abs(alpha.real), abs(alpha.imag), abs(beta.real), abs(beta.imag))
            alpha = complex(alpha.real / peak, alpha.imag / peak)
            beta = complex(beta.real / peak, beta.imag / peak)
            norm = math.hypot(alpha.real, alpha.imag, beta.real, beta.imag)
        if norm > 0:
            alpha = complex(alpha.real / norm, alpha.imag / norm)
            beta = complex(beta.real / norm, beta.imag / norm)
        else:
            logger.debug("zero amplitudes: state left un-normalized")

        self._alpha = alpha
        self._beta = beta

    @classmethod
    def from_components(cls, alpha_re: float, alpha_im: float,
                        beta_re: float, beta_im: float) -> "QubitState":
        """Builds a normalized state from four finite real numbers."""
        return cls(
            complex(_as_component(alpha_re, "alpha_re"), _as_component(alpha_im, "alpha_im")),
            complex(_as_component(beta_re, "beta_re"), _as_component(beta_im, "beta_im")),
        )

    @classmethod
    def _unchecked(cls, alpha: complex, beta: complex) -> "QubitState":
        # gate results: already unitary images of a normalized state
        state = cls.__new__(cls)
        state._alpha = alpha
        state._beta = beta
        return state

    @property
    def alpha(self) -> complex:
        return self._alpha

    @property
    def beta(self) -> complex:
        return self._beta

    def components(self) -> Tuple[float, float, float, float]:
        """(alpha.re, alpha.im, beta.re, beta.im)"""
        return (self._alpha.real, self._alpha.imag, self._beta.real, self._beta.imag)

    def norm(self) -> float:
        return math.hypot(self._alpha.real, self._alpha.imag, self._beta.real, self._beta.imag)

    def is_degenerate(self) -> bool:
        return self._alpha == 0 and self._beta == 0

    def clone(self) -> "QubitState":
        return QubitState._unchecked(self._alpha, self._beta)

    # shortcuts onto the module functions
    def apply(self, gate: str) -> "QubitState":
        return apply_gate(self, gate)

    def measure(self, basis: str) -> MeasurementResult:
        return measure(self, basis)

    def to_bloch_coordinates(self) -> BlochCoordinate:
        return to_bloch_coordinates(self)

    ####### qiskit interop #######

    def to_statevector(self) -> Statevector:
        return Statevector(np.array([self._alpha, self._beta], dtype=complex))

    @classmethod
    def from_statevector(cls, sv: Statevector) -> "QubitState":
        data = np.asarray(sv.data, dtype=complex)
        if data.shape != (2,):
            raise ValueError("Only single-qubit statevectors (shape (2,)) are supported.")
        return cls(complex(data[0]), complex(data[1]))

    def __eq__(self, other):
        if not isinstance(other, QubitState):
            return NotImplemented
        return self._alpha == other._alpha and self._beta == other._beta

    def __hash__(self):
        return hash((self._alpha, self._beta))

    def __repr__(self):
        return f"QubitState(alpha={self._alpha!r}, beta={self._beta!r})"


####### Gates definition #######

def hadamard(state: QubitState) -> QubitState:
    a, b = state.alpha, state.beta
    return QubitState._unchecked(
        complex((a.real + b.real) / SQRT2, (a.imag + b.imag) / SQRT2),
        complex((a.real - b.real) / SQRT2, (a.imag - b.imag) / SQRT2),
    )


def pauli_x(state: QubitState) -> QubitState:
    return QubitState._unchecked(state.beta, state.alpha)


def pauli_y(state: QubitState) -> QubitState:
    """alpha' = i·beta, beta' = -i·alpha  (the standard Y up to a global phase of -1)."""
    a, b = state.alpha, state.beta
    return QubitState._unchecked(complex(-b.imag, b.real), complex(a.imag, -a.real))


def pauli_z(state: QubitState) -> QubitState:
    b = state.beta
    return QubitState._unchecked(state.alpha, complex(-b.real, -b.imag))


_GATE_FUNCTIONS = {
    "H": hadamard,
    "X": pauli_x,
    "Y": pauli_y,
    "Z": pauli_z,
}


def gate_operator(gate: str) -> Operator:
    """
    Returns the exact unitary applied by `apply_gate` as a qiskit Operator.
    Y carries the extra global phase -1 of `pauli_y`.
    """
    if gate == "H":
        return Operator(HGate())
    if gate == "X":
        return Operator(XGate())
    if gate == "Y":
        return Operator(-np.asarray(Operator(YGate()).data, dtype=complex))
    if gate == "Z":
        return Operator(ZGate())
    raise InvalidGate(gate)


####### Gates application #######

def _gate_function(gate):
    try:
        return _GATE_FUNCTIONS[gate]
    except (KeyError, TypeError):
        logger.warning("rejected gate %r", gate)
        raise InvalidGate(gate) from None


def apply_gate(state: QubitState, gate: str) -> QubitState:
    """
    Applies one of the gates 'H', 'X', 'Y', 'Z' and returns the new state.
    No renormalization is done: all four gates are exactly unitary.

    Raises:
        InvalidGate: unknown gate identifier (state is left as it was).
    """
    new_state = _gate_function(gate)(state)
    logger.debug("%s: %r -> %r", gate, state, new_state)
    return new_state


def apply_gates(state: QubitState, gates: Iterable[str]) -> List[QubitState]:
    """
    Applies the gates in order and returns every snapshot, initial state first.
    All identifiers are checked before any gate is applied.
    """
    fns = [_gate_function(gate) for gate in gates]

    states = [state]
    for fn in fns:
        states.append(fn(states[-1]))
    return states


####### Measurement #######

def measure(state: QubitState, basis: str) -> MeasurementResult:
    """
    Outcome probabilities of measuring `state` in the Z, X or Y basis.
    Nothing is sampled and the state is not collapsed.

    The Y-basis amplitudes are (alpha + i beta)/√2 and (alpha - i beta)/√2,
    reported under the labels |+i⟩ and |-i⟩ in that order. These are the
    overlaps with (|0⟩ - i|1⟩)/√2 and (|0⟩ + i|1⟩)/√2, so the labels are swapped
    relative to the Bloch y-axis: a state at y = +1 reports P(|+i⟩) = 0.

    Raises:
        InvalidBasis: unknown basis identifier.
    """
    a, b = state.alpha, state.beta

    if basis == "Z":
        probs = (_abs2(a), _abs2(b))
    elif basis == "X":
        # |+⟩ = (|0⟩ + |1⟩)/√2, |-⟩ = (|0⟩ - |1⟩)/√2
        plus = complex((a.real + b.real) / SQRT2, (a.imag + b.imag) / SQRT2)
        minus = complex((a.real - b.real) / SQRT2, (a.imag - b.imag) / SQRT2)
        probs = (_abs2(plus), _abs2(minus))
    elif basis == "Y":
        # alpha + i·beta and alpha - i·beta, over √2
        plus_i = complex((a.real - b.imag) / SQRT2, (a.imag + b.real) / SQRT2)
        minus_i = complex((a.real + b.imag) / SQRT2, (a.imag - b.real) / SQRT2)
        probs = (_abs2(plus_i), _abs2(minus_i))
    else:
        logger.warning("rejected basis %r", basis)
        raise InvalidBasis(basis)

    return MeasurementResult(basis, BASIS_OUTCOMES[basis], probs)


####### Bloch sphere #######

def to_bloch_coordinates(state: QubitState) -> BlochCoordinate:
    """
    Spherical Bloch coordinates of `state`.

    theta = 2 acos(|alpha|) in [0, π]; phi = arg(beta) - arg(alpha) is the raw
    atan2 difference, in (-2π, 2π), and is NOT wrapped. |alpha| is clamped
    to [0, 1] so that round-off cannot leave the acos domain.
    For alpha = 0 the phase of alpha is taken as atan2(0, 0) = 0.
    """
    a, b = state.alpha, state.beta
    alpha_mag = min(1.0, abs(a))
    theta = 2 * math.acos(alpha_mag)
    phi = math.atan2(b.imag, b.real) - math.atan2(a.imag, a.real)

    return BlochCoordinate(
        x=math.sin(theta) * math.cos(phi),
        y=math.sin(theta) * math.sin(phi),
        z=math.cos(theta),
        theta=theta,
        phi=phi,
    )


def bloch_vector_rho(rho: DensityMatrix) -> Tuple[float, float, float]:
    """
    Returns (x, y, z) = (Tr(ρ X), Tr(ρ Y), Tr(ρ Z)).
    """
    M = np.asarray(rho.data, dtype=complex)
    x = np.real(np.trace(M @ Operator(XGate()).data))
    y = np.real(np.trace(M @ Operator(YGate()).data))
    z = np.real(np.trace(M @ Operator(ZGate()).data))
    return float(x), float(y), float(z)
