####### Imports #######

from typing import Iterable, List, Optional, Tuple

import numpy as np
from qiskit.quantum_info import DensityMatrix, Operator, Statevector

from . import config
from .logging import get_logger
from .qubit_state import QubitState, bloch_vector_rho, gate_operator

logger = get_logger(__name__)

_I = np.eye(2, dtype=complex)
_X = np.array([[0, 1], [1, 0]], dtype=complex)
_Y = np.array([[0, -1j], [1j, 0]], dtype=complex)
_Z = np.array([[1, 0], [0, -1]], dtype=complex)


####### Axis-angle decomposition #######

def rm_global_phase(op: Operator) -> Operator:
    """removes the global phase of the gate : returns U / sqrt(det(U)) as an Operator."""
    U = np.asarray(op.data, dtype=complex)
    det = np.linalg.det(U)
    return Operator(U / det**0.5)


def unitary_to_axis_angle(op: Operator) -> Tuple[np.ndarray, float]:
    """
    U ∈ U(2) -> (n, theta) such that U ≈ exp(-i * theta/2 * n·σ) up to a global phase.
    Returns n (np.array shape (3,)) and theta (float).
    """
    U = np.asarray(rm_global_phase(op).data, dtype=complex)

    c = np.clip(np.real(np.trace(U)) / 2.0, -1.0, 1.0)
    theta = 2.0 * np.arccos(c)

    s = np.sin(theta / 2.0)
    if np.isclose(s, 0.0, atol=1e-12):
        return np.array([1.0, 0.0, 0.0]), 0.0

    # off-diagonal: -i s (nx ∓ i ny), diagonal difference: -2 i s nz
    nx = -np.imag(U[0, 1] + U[1, 0]) / (2.0 * s)
    ny = np.real(U[1, 0] - U[0, 1]) / (2.0 * s)
    nz = -np.imag(U[0, 0] - U[1, 1]) / (2.0 * s)

    n = np.array([nx, ny, nz], dtype=float)
    nr = np.linalg.norm(n)
    n = np.array([1.0, 0.0, 0.0]) if nr < 1e-12 else n / nr
    return n, float(theta)


def axis_angle_to_unitary(n, theta: float) -> Operator:
    """
    Builds exp(-i * theta/2 * n·σ) and returns it as an Operator.
    """
    n = np.asarray(n, dtype=float)
    nr = np.linalg.norm(n)
    if nr == 0.0:
        return Operator(_I)
    n = n / nr
    N = n[0] * _X + n[1] * _Y + n[2] * _Z
    return Operator(np.cos(theta / 2.0) * _I - 1j * np.sin(theta / 2.0) * N)


####### Continuous trajectories #######

def continuous_path(
    state: QubitState,
    gates: Iterable[str],
    *,
    steps_per_gate: Optional[int] = None,
) -> List[Tuple[float, float, float]]:
    """
    Bloch points (x, y, z) traced while the gates are applied one after the
    other. Each gate U_k is cut into `steps_per_gate` small rotations about
    its own axis: U_k ≈ [exp(-i dθ/2 n·σ)]^steps_per_gate.

    The first point is the initial state; the last point of each gate segment
    is the Bloch vector of the state after that gate. A zero state yields its
    single point (the centre of the sphere).

    Raises:
        InvalidGate: unknown gate identifier (checked before anything runs).
    """
    ops = [gate_operator(g) for g in gates]
    if steps_per_gate is None:
        steps_per_gate = config.STEPS_PER_GATE
    steps_per_gate = max(1, int(steps_per_gate))

    psi = np.array([state.alpha, state.beta], dtype=complex)
    points = [bloch_vector_rho(DensityMatrix(Statevector(psi)))]
    if state.is_degenerate():
        logger.debug("zero state: trajectory reduced to a single point")
        return points

    for U in ops:
        n, theta = unitary_to_axis_angle(U)
        Uk = np.asarray(axis_angle_to_unitary(n, theta / steps_per_gate).data, dtype=complex)
        for _ in range(steps_per_gate):
            psi = Uk @ psi
            points.append(bloch_vector_rho(DensityMatrix(Statevector(psi))))

    logger.debug("trajectory: %d gates, %d points", len(ops), len(points))
    return points
