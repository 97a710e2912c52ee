"""Runtime settings for qubit_calculator, read from environment variables."""

import os

# Logging settings
LOG_LEVEL = os.getenv("QUBIT_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = os.getenv("QUBIT_LOG_FORMAT", "[%(levelname)s] %(name)s: %(message)s")

# Trajectory settings
STEPS_PER_GATE = int(os.getenv("QUBIT_STEPS_PER_GATE", "60"))

# Rendering settings
ANIMATION_INTERVAL_MS = int(os.getenv("QUBIT_ANIMATION_INTERVAL_MS", "25"))
WAVE_WIDTH = int(os.getenv("QUBIT_WAVE_WIDTH", "600"))

__all__ = [
    "LOG_LEVEL",
    "LOG_FORMAT",
    "STEPS_PER_GATE",
    "ANIMATION_INTERVAL_MS",
    "WAVE_WIDTH",
]
