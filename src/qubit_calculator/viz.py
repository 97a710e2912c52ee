####### Imports #######

from typing import Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from . import config
from .display import format_coordinates, format_state
from .qubit_state import QubitState, to_bloch_coordinates
from .waveform import waveform


####### Bloch sphere #######

def _sphere(ax):
    u = np.linspace(0, 2*np.pi, 60)
    v = np.linspace(0, np.pi, 30)
    xs = np.outer(np.cos(u), np.sin(v))
    ys = np.outer(np.sin(u), np.sin(v))
    zs = np.outer(np.ones_like(u), np.cos(v))
    ax.plot_surface(xs, ys, zs, alpha=0.12, linewidth=0)

    # Axis
    ax.plot([-1,1],[0,0],[0,0]); ax.text(1.1,0,0,"X")
    ax.plot([0,0],[-1,1],[0,0]); ax.text(0,1.1,0,"Y")
    ax.plot([0,0],[0,0],[-1,1]); ax.text(0,0,1.1,"|0⟩"); ax.text(0,0,-1.2,"|1⟩")
    ax.set_xlim([-1,1]); ax.set_ylim([-1,1]); ax.set_zlim([-1,1])
    ax.set_box_aspect([1,1,1])
    ax.set_xlabel("X"); ax.set_ylabel("Y"); ax.set_zlabel("Z")


def draw_bloch(state: QubitState, ax=None, title: Optional[str] = None):
    """Draws the sphere and the state vector of `state`. Returns the 3d axes."""
    if ax is None:
        fig = plt.figure(figsize=(5,5))
        ax = fig.add_subplot(111, projection="3d")
    _sphere(ax)

    coords = to_bloch_coordinates(state)
    ax.quiver(0, 0, 0, coords.x, coords.y, coords.z, color="red", linewidth=2, arrow_length_ratio=0.1)
    ax.scatter([coords.x], [coords.y], [coords.z], s=50, c="red")

    if title is None:
        c = format_coordinates(coords)
        title = f"{format_state(state)}\nx={c['x']}  y={c['y']}  z={c['z']}"
    ax.set_title(title)
    return ax


####### Waveform #######

def plot_waveform(state: QubitState, time: float = 0.0, ax=None):
    """Plots the |0⟩, |1⟩ and superposition waves of `state`."""
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 2))
    w = waveform(state, time=time)

    ax.plot(w.x, w.zero, linewidth=3, color="#a855f7", label="|0⟩")
    ax.plot(w.x, w.one, linewidth=3, color="#06b6d4", label="|1⟩")
    ax.plot(w.x, w.superposition, linewidth=2, linestyle="--", color="#ff00ff", label="Superposition")
    ax.axhline(0.0, color="grey", linewidth=1, alpha=0.3)
    ax.set_ylim(-1.05, 1.05)
    ax.legend(loc="upper left")
    return ax


####### Animation #######

def animate_trajectory(points: Sequence[Tuple[float, float, float]],
                       interval_ms: Optional[int] = None, show_trail: bool = True) -> FuncAnimation:
    if not points:
        raise ValueError("List 'points' is empty.")
    if interval_ms is None:
        interval_ms = config.ANIMATION_INTERVAL_MS
    pts = np.asarray(points, dtype=float)

    fig = plt.figure(figsize=(5,5))
    ax = fig.add_subplot(111, projection="3d")
    _sphere(ax)

    # Animated elements
    scat = ax.scatter([pts[0,0]], [pts[0,1]], [pts[0,2]], s=50, c="red")
    line, = ax.plot([], [], [], linewidth=1.5, alpha=0.7)

    def update(i):
        x,y,z = pts[i]
        scat._offsets3d = ([x], [y], [z])
        if show_trail:
            line.set_data(pts[:i+1,0], pts[:i+1,1]); line.set_3d_properties(pts[:i+1,2])
        ax.set_title(f"Frame {i+1}/{len(pts)}")
        return scat, line

    return FuncAnimation(fig, update, frames=len(pts), interval=interval_ms, blit=False, repeat=True)
