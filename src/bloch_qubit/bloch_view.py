####### Imports #######

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt

from . import config
from .qubit import Qubit, bloch_vector, to_theta_phi
from .session import QubitSession


####### Bloch sphere #######

class BlochSphere:
    """
    Translucent sphere, labelled axes and a state pointer drawn on a 3D Axes.
    The pointer starts on |0⟩ (north pole).
    """

    def __init__(self, ax, radius: float = 1.0, center: Sequence[float] = (0.0, 0.0, 0.0),
                 title: Optional[str] = None):
        self.ax = ax
        self.radius = float(radius)
        self.center = np.asarray(center, dtype=float)
        cx, cy, cz = self.center
        r = self.radius

        # Sphere
        u = np.linspace(0, 2*np.pi, 60)
        v = np.linspace(0, np.pi, 30)
        xs = cx + r*np.outer(np.cos(u), np.sin(v))
        ys = cy + r*np.outer(np.sin(u), np.sin(v))
        zs = cz + r*np.outer(np.ones_like(u), np.cos(v))
        surface = ax.plot_surface(xs, ys, zs, alpha=0.12, linewidth=0, color=config.SPHERE_COLOR)

        # Axis
        L = 1.4*r
        artists = [surface]
        for (dx, dy, dz), name in (((1, 0, 0), "X"), ((0, 1, 0), "Y"), ((0, 0, 1), "Z")):
            line, = ax.plot([cx - L*dx, cx + L*dx], [cy - L*dy, cy + L*dy], [cz - L*dz, cz + L*dz],
                            linewidth=0.8, color="#aab0bf")
            plus = ax.text(cx + 1.1*L*dx, cy + 1.1*L*dy, cz + 1.1*L*dz, f"+{name}")
            minus = ax.text(cx - 1.1*L*dx, cy - 1.1*L*dy, cz - 1.1*L*dz, f"-{name}")
            artists += [line, plus, minus]
        if title:
            artists.append(ax.text(cx, cy, cz + 1.7*r, title, ha="center"))

        # Pointer
        self.pointer, = ax.plot([cx, cx], [cy, cy], [cz, cz + r], linewidth=2.5, color=config.POINTER_COLOR)
        self.tip = ax.scatter([cx], [cy], [cz + r], s=40, c=config.POINTER_COLOR)
        self._tip = (cx, cy, cz + r)
        self.artists = artists + [self.pointer, self.tip]

    def set_state_vector(self, theta: float, phi: float) -> Tuple[float, float, float]:
        """Moves the pointer to the Bloch angles (θ, φ) and returns its tip."""
        x, y, z = bloch_vector(theta, phi)
        cx, cy, cz = self.center
        tip = (cx + self.radius*x, cy + self.radius*y, cz + self.radius*z)
        self.pointer.set_data([cx, tip[0]], [cy, tip[1]])
        self.pointer.set_3d_properties([cz, tip[2]])
        self.tip._offsets3d = ([tip[0]], [tip[1]], [tip[2]])
        self._tip = tip
        return tip

    def show_qubit(self, q: Qubit) -> Tuple[float, float, float]:
        return self.set_state_vector(*to_theta_phi(q))

    def set_visible(self, visible: bool) -> None:
        for artist in self.artists:
            artist.set_visible(visible)

    @property
    def pointer_tip(self) -> Tuple[float, float, float]:
        return self._tip


####### Session figure #######

class SessionFigure:
    """
    One figure for a QubitSession: a single-qubit sphere, and a Bell pair of two smaller
    spheres joined by a link. Only the group matching the session mode is visible.
    """

    def __init__(self, session: QubitSession, figsize=(6, 6)):
        self.session = session
        self.fig = plt.figure(figsize=figsize)
        self.ax = self.fig.add_subplot(111, projection="3d")
        ax = self.ax

        self.single = BlochSphere(ax, radius=0.5)
        self.left = BlochSphere(ax, radius=0.35, center=(-0.6, 0.0, 0.0), title="A")
        self.right = BlochSphere(ax, radius=0.35, center=(0.6, 0.0, 0.0), title="B")
        self.link, = ax.plot([-0.25, 0.25], [0, 0], [0, 0], linestyle="--", linewidth=1.5, color="#c77dff")

        ax.set_xlim([-1, 1]); ax.set_ylim([-1, 1]); ax.set_zlim([-1, 1])
        ax.set_box_aspect([1, 1, 1])
        ax.set_axis_off()

        session.subscribe(
            on_update=self._on_update,
            on_ent_measure=self._on_ent_measure,
            on_mode=self._on_mode,
        )
        self.single.show_qubit(session.qubit)
        self._on_mode(session.mode)

    def _on_update(self, q: Qubit) -> None:
        self.single.show_qubit(q)
        r = self.session.readout()
        self.ax.set_title(f"a = {r.amp_a}   b = {r.amp_b}\np0 = {r.p0}   p1 = {r.p1}   {r.measurement}")
        self.fig.canvas.draw_idle()

    def _on_ent_measure(self, side: str, value: Optional[int]) -> None:
        sphere = self.left if side == "left" else self.right
        # unmeasured sides rest on the north pole, measured ones point to their outcome
        sphere.set_state_vector(math.pi if value == 1 else 0.0, 0.0)
        self.fig.canvas.draw_idle()

    def _on_mode(self, mode: str) -> None:
        single = mode == "single"
        self.single.set_visible(single)
        for sphere in (self.left, self.right):
            sphere.set_visible(not single)
        self.link.set_visible(not single)
        self.fig.canvas.draw_idle()


####### Measurement statistics #######

def plot_counts(counts: Sequence[int], title="Measurement outcomes") -> List[float]:
    """
    Bar chart of outcome frequencies from (n0, n1) counts.

    Returns:
        freqs: [f0, f1] relative frequencies (zeros when no shots were taken).
    """
    n = np.asarray(counts, dtype=float)
    if n.shape != (2,):
        raise ValueError("`counts` must be (n0, n1).")
    total = n.sum()
    freqs = (n / total if total > 0 else np.zeros(2)).tolist()

    plt.figure(figsize=(4, 3.2))
    plt.bar(["|0⟩", "|1⟩"], freqs, color=[config.SPHERE_COLOR, config.POINTER_COLOR])
    plt.ylabel("Frequency")
    plt.title(title)
    plt.ylim(0, 1.05)
    plt.grid(True, axis="y", alpha=0.25)

    return freqs
