"""Pytest configuration and shared fixtures for qubit_calculator tests.

Random states come from a seeded numpy Generator; set TEST_RNG_SEED to
reproduce a failure with another seed.
"""

import os

import numpy as np
import pytest

from qubit_calculator import QubitState


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def random_states(rng):
    """Fifty normalized states with random complex amplitudes."""
    states = []
    for _ in range(50):
        a_re, a_im, b_re, b_im = rng.normal(size=4)
        states.append(QubitState.from_components(a_re, a_im, b_re, b_im))
    return states
