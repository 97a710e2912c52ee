"""
Typed failures raised by the qubit engine.

Every error also derives from ValueError, so callers that only care about
"bad argument" can keep catching ValueError.
"""


class QubitError(ValueError):
    """Base class for qubit_calculator errors."""


class InvalidGate(QubitError):
    def __init__(self, gate):
        self.gate = gate
        super().__init__(f"Unknown gate {gate!r}: expected one of 'H', 'X', 'Y', 'Z'.")


class InvalidBasis(QubitError):
    def __init__(self, basis):
        self.basis = basis
        super().__init__(f"Unknown measurement basis {basis!r}: expected one of 'Z', 'X', 'Y'.")


class InvalidAmplitude(QubitError):
    """Construction input that is not a finite real number."""

    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a finite real number, got {value!r}.")
