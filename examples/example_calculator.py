# examples/example_calculator.py
# Minimal usage demo: build a state from raw fields, apply gates, measure, draw.

import matplotlib
import matplotlib.pyplot as plt
from qubit_calculator import (
    QubitState, apply_gates, measure, BASES,
    coerce_component, format_state, format_probability, continuous_path,
)
from qubit_calculator.viz import draw_bloch, plot_waveform, animate_trajectory

matplotlib.use("Qt5Agg")

# --- raw input fields (as typed by a user) ---
fields = ("1", "0", "0.5", "abc")
state = QubitState.from_components(*(coerce_component(f) for f in fields))
print(format_state(state))

# --- gate sequence ---
seq = ["H", "Y", "Z", "X"]
snapshots = apply_gates(state, seq)
for gate, s in zip(seq, snapshots[1:]):
    print(f"after {gate}: {format_state(s)}")

# --- measurement probabilities of the final state ---
final = snapshots[-1]
for basis in BASES:
    result = measure(final, basis)
    probs = ", ".join(f"{o} {format_probability(p)}" for o, p in zip(result.outcomes, result.probabilities))
    print(f"basis {basis}: {probs}")

# --- views ---
draw_bloch(final)
plot_waveform(final)
anim = animate_trajectory(continuous_path(state, seq, steps_per_gate=60), interval_ms=10)
plt.show()
