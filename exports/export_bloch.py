#Exportation of the Bloch sphere and measurement statistics plots.

import math
import os

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from bloch_qubit import QubitSession, sample_counts
from bloch_qubit.bloch_view import SessionFigure, plot_counts

matplotlib.use("Agg")

rng = np.random.default_rng(2024)

os.makedirs("exports/plots/1_qubit", exist_ok=True)
os.makedirs("exports/plots/bell", exist_ok=True)

# --- single qubit after each gate ---
session = QubitSession(rng=rng)
figure = SessionFigure(session)
session.set_angles(math.pi / 2, 0.0)
figure.fig.savefig("exports/plots/1_qubit/1q_plus.png", dpi=300, bbox_inches="tight")

for name in ["S", "T", "H"]:
    session.apply_gate(name)
    figure.fig.savefig(f"exports/plots/1_qubit/1q_after_{name}.png", dpi=300, bbox_inches="tight")
plt.close(figure.fig)

plot_counts(sample_counts(session.qubit, 5000, rng), "Outcomes over 5000 shots")
plt.gcf().savefig("exports/plots/1_qubit/1q_counts.png", dpi=300, bbox_inches="tight")
plt.close()

# --- Bell pair, before and after measuring ---
bell_session = QubitSession(mode="ent", rng=rng)
bell_figure = SessionFigure(bell_session)
bell_figure.fig.savefig("exports/plots/bell/bell_unmeasured.png", dpi=300, bbox_inches="tight")
bell_session.measure_left()
bell_figure.fig.savefig("exports/plots/bell/bell_measured.png", dpi=300, bbox_inches="tight")
plt.close(bell_figure.fig)
