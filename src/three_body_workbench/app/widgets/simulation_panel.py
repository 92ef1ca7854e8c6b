from __future__ import annotations

from PySide6 import QtCore, QtWidgets

from ...core.config import IntegratorKind, SimulationConfig


class SimulationPanel(QtWidgets.QGroupBox):
    settings_changed = QtCore.Signal(object)

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__("Simulation", parent)
        layout = QtWidgets.QFormLayout(self)

        self._dt_spin = QtWidgets.QDoubleSpinBox()
        self._dt_spin.setRange(1e-6, 1.0)
        self._dt_spin.setDecimals(6)
        self._dt_spin.setSingleStep(0.001)

        self._g_spin = QtWidgets.QDoubleSpinBox()
        self._g_spin.setRange(1e-6, 1e6)
        self._g_spin.setDecimals(6)

        self._softening_spin = QtWidgets.QDoubleSpinBox()
        self._softening_spin.setRange(1e-6, 10.0)
        self._softening_spin.setDecimals(6)
        self._softening_spin.setSingleStep(0.001)

        self._integrator_combo = QtWidgets.QComboBox()
        self._integrator_combo.addItem("Velocity Verlet (symplectic)", IntegratorKind.SYMPLECTIC.value)
        self._integrator_combo.addItem("Runge-Kutta 4", IntegratorKind.RK4.value)
        self._integrator_combo.addItem("Semi-implicit Euler", IntegratorKind.EULER.value)

        layout.addRow("dt", self._dt_spin)
        layout.addRow("G", self._g_spin)
        layout.addRow("Softening", self._softening_spin)
        layout.addRow("Integrator", self._integrator_combo)

        self._base_config = SimulationConfig()
        self.set_config(self._base_config)

        self._dt_spin.editingFinished.connect(self._emit_settings_changed)
        self._g_spin.editingFinished.connect(self._emit_settings_changed)
        self._softening_spin.editingFinished.connect(self._emit_settings_changed)
        self._integrator_combo.currentIndexChanged.connect(self._emit_settings_changed)

    def set_config(self, config: SimulationConfig) -> None:
        self._base_config = config
        widgets = (self._dt_spin, self._g_spin, self._softening_spin, self._integrator_combo)
        for widget in widgets:
            widget.blockSignals(True)
        self._dt_spin.setValue(config.timestep)
        self._g_spin.setValue(config.gravitational_constant)
        self._softening_spin.setValue(config.softening_length)
        idx = self._integrator_combo.findData(config.integrator.value)
        if idx >= 0:
            self._integrator_combo.setCurrentIndex(idx)
        for widget in widgets:
            widget.blockSignals(False)

    def current_config(self) -> SimulationConfig:
        return SimulationConfig(
            gravitational_constant=float(self._g_spin.value()),
            softening_length=float(self._softening_spin.value()),
            timestep=float(self._dt_spin.value()),
            integrator=str(self._integrator_combo.currentData()),
            track_diagnostics=self._base_config.track_diagnostics,
            energy_drift_warning=self._base_config.energy_drift_warning,
        )

    def _emit_settings_changed(self) -> None:
        config = self.current_config()
        if config == self._base_config:
            return
        self._base_config = config
        self.settings_changed.emit(config)
