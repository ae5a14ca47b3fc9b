# examples/example_1qubit.py
# Minimal usage demo for the single-qubit session and its Bloch sphere view.

import math

import matplotlib
import matplotlib.pyplot as plt
from bloch_qubit import QubitSession, sample_counts
from bloch_qubit.bloch_view import SessionFigure, plot_counts

matplotlib.use("Qt5Agg")

# --- session & figure ---
session = QubitSession()
figure = SessionFigure(session)

# --- state preparation from Bloch angles ---
session.set_angles(math.pi / 3, math.pi / 4)
print(session.readout())

# --- gate sequence ---
for name in ["H", "T", "S", "X"]:
    session.apply_gate(name)
    r = session.readout()
    print(f"{name}: a = {r.amp_a}  b = {r.amp_b}  p0 = {r.p0}")

# --- statistics before collapsing ---
counts = sample_counts(session.qubit, 2000)
plot_counts(counts, "Outcomes over 2000 shots")

# --- single-shot measurement ---
session.measure()
print("measured", session.readout().measurement)

plt.show()
