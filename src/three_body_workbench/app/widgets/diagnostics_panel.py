from __future__ import annotations

import numpy as np
from PySide6 import QtWidgets

from ...core.sim import SimulationSnapshot


class DiagnosticsPanel(QtWidgets.QGroupBox):
    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__("Diagnostics", parent)
        layout = QtWidgets.QFormLayout(self)

        self._time = QtWidgets.QLabel("-")
        self._steps = QtWidgets.QLabel("-")
        self._kinetic = QtWidgets.QLabel("-")
        self._potential = QtWidgets.QLabel("-")
        self._total = QtWidgets.QLabel("-")
        self._drift = QtWidgets.QLabel("-")
        self._momentum = QtWidgets.QLabel("-")
        self._com_drift = QtWidgets.QLabel("-")

        layout.addRow("t", self._time)
        layout.addRow("Steps", self._steps)
        layout.addRow("Kinetic", self._kinetic)
        layout.addRow("Potential", self._potential)
        layout.addRow("Total E", self._total)
        layout.addRow("|dE/E0|", self._drift)
        layout.addRow("||P||", self._momentum)
        layout.addRow("COM drift", self._com_drift)

    def update_values(self, snapshot: SimulationSnapshot | None) -> None:
        labels = (
            self._time,
            self._steps,
            self._kinetic,
            self._potential,
            self._total,
            self._drift,
            self._momentum,
            self._com_drift,
        )
        if snapshot is None:
            for label in labels:
                label.setText("-")
            return
        self._time.setText(f"{snapshot.time:.4f}")
        self._steps.setText(str(snapshot.step_count))
        diagnostics = snapshot.diagnostics
        if diagnostics is None:
            for label in labels[2:]:
                label.setText("-")
            return
        self._kinetic.setText(f"{diagnostics.kinetic_energy:.6f}")
        self._potential.setText(f"{diagnostics.potential_energy:.6f}")
        self._total.setText(f"{diagnostics.total_energy:.6f}")
        self._drift.setText(f"{diagnostics.energy_drift:.3e}")
        self._momentum.setText(f"{float(np.linalg.norm(diagnostics.momentum)):.3e}")
        self._com_drift.setText(f"{diagnostics.center_of_mass_drift:.3e}")
