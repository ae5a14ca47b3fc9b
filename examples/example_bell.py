# examples/example_bell.py
# Minimal usage demo for the Bell pair correlation model.

import matplotlib
import matplotlib.pyplot as plt
from bloch_qubit import QubitSession
from bloch_qubit.bloch_view import SessionFigure

matplotlib.use("Qt5Agg")

# --- entanglement mode ---
session = QubitSession(mode="ent")
figure = SessionFigure(session)

# --- repeated pairs: whichever side is measured first fixes the other ---
agree = 0
n_pairs = 200
for k in range(n_pairs):
    session.prepare_bell()
    if k % 2:
        left = session.measure_left()
        right = session.measure_right()
    else:
        right = session.measure_right()
        left = session.measure_left()
    agree += left == right
print(f"agreement: {agree}/{n_pairs}")

# --- last pair stays on screen ---
r = session.readout()
print(f"A: {r.left}   B: {r.right}")
plt.show()
