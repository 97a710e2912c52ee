import math
from typing import NamedTuple, Optional

import numpy as np

from . import config
from .qubit_state import QubitState


class Waveform(NamedTuple):
    x: np.ndarray
    zero: np.ndarray           # |0⟩ component
    one: np.ndarray            # |1⟩ component
    superposition: np.ndarray  # mean of the two


def waveform(state: QubitState, width: Optional[int] = None, time: float = 0.0,
             spatial_frequency: float = 0.02, height: float = 1.0) -> Waveform:
    """
    Samples the two basis waves of `state` at x = 0 .. width-1:
      w0 = height * sqrt(P0) * sin(k x + t + arg(alpha))
      w1 = height * sqrt(P1) * sin(k x + t + arg(beta))
    and their superposition (w0 + w1) / 2.

    Args:
        state: state to sample.
        width: number of samples (config.WAVE_WIDTH by default).
        time: phase offset, advanced by the caller once per frame.
        spatial_frequency: k.
        height: peak amplitude of a wave carrying probability 1.
    """
    if width is None:
        width = config.WAVE_WIDTH
    if width < 0:
        raise ValueError("width must be >= 0.")

    a, b = state.alpha, state.beta
    prob0 = a.real ** 2 + a.imag ** 2
    prob1 = b.real ** 2 + b.imag ** 2
    phase0 = math.atan2(a.imag, a.real)
    phase1 = math.atan2(b.imag, b.real)

    x = np.arange(width, dtype=float)
    w0 = height * math.sqrt(prob0) * np.sin(x * spatial_frequency + time + phase0)
    w1 = height * math.sqrt(prob1) * np.sin(x * spatial_frequency + time + phase1)
    return Waveform(x, w0, w1, (w0 + w1) / 2)
