from __future__ import annotations

import logging
from pathlib import Path

from PySide6 import QtCore, QtGui, QtWidgets

from ..core.config import SimulationConfig
from ..core.physics import FrameChoice, positions_in_frame
from ..core.scenarios import scenario_registry
from .scenario_controller import ScenarioController
from .trails import TrailBuffer
from .widgets import DiagnosticsPanel, SceneView, SimulationPanel

_LOG = logging.getLogger(__name__)

FRAME_INTERVAL_MS = 16
STEPS_PER_FRAME = 4


class MainWindow(QtWidgets.QMainWindow):
    def __init__(
        self,
        scenario_id: str | None = None,
        seed: int | None = None,
        path: Path | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("3 Body Problem")
        self.resize(1100, 700)

        self._controller = ScenarioController()
        self._trails = TrailBuffer()
        self._show_trails = True
        self._frame_choice = FrameChoice.WORLD

        self._scene = SceneView()
        self.setCentralWidget(self._scene)

        self._simulation_panel = SimulationPanel()
        self._simulation_panel.settings_changed.connect(self._on_settings_changed)
        self._diagnostics = DiagnosticsPanel()

        side = QtWidgets.QWidget()
        side_layout = QtWidgets.QVBoxLayout(side)
        side_layout.addWidget(self._simulation_panel)
        side_layout.addWidget(self._diagnostics)
        side_layout.addStretch(1)
        dock = QtWidgets.QDockWidget("Simulation", self)
        dock.setWidget(side)
        dock.setAllowedAreas(QtCore.Qt.LeftDockWidgetArea | QtCore.Qt.RightDockWidgetArea)
        self.addDockWidget(QtCore.Qt.RightDockWidgetArea, dock)

        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(FRAME_INTERVAL_MS)
        self._timer.timeout.connect(self._on_tick)

        self._play_action = QtGui.QAction("Play", self)
        self._play_action.setCheckable(True)
        self._play_action.setShortcut(QtGui.QKeySequence(QtCore.Qt.Key_Space))
        self._play_action.triggered.connect(self._toggle_play)

        self._step_action = QtGui.QAction("Step", self)
        self._step_action.setShortcut(QtGui.QKeySequence(QtCore.Qt.Key_N))
        self._step_action.triggered.connect(self._single_step)

        self._reset_action = QtGui.QAction("Reset", self)
        self._reset_action.setShortcut(QtGui.QKeySequence(QtCore.Qt.Key_R))
        self._reset_action.triggered.connect(self._reset_simulation)

        self._trails_action = QtGui.QAction("Show Trails", self)
        self._trails_action.setCheckable(True)
        self._trails_action.setChecked(True)
        self._trails_action.setShortcut(QtGui.QKeySequence(QtCore.Qt.Key_T))
        self._trails_action.toggled.connect(self._on_trails_toggled)

        self._com_frame_action = QtGui.QAction("Center of Mass Frame", self)
        self._com_frame_action.setCheckable(True)
        self._com_frame_action.toggled.connect(self._on_frame_toggled)

        self._frame_action = QtGui.QAction("Frame Scene", self)
        self._frame_action.triggered.connect(self._scene.frame_scene)

        self._random_action = QtGui.QAction("Random Scenario", self)
        self._random_action.triggered.connect(lambda: self._load_random())

        self._save_action = QtGui.QAction("Save Scenario...", self)
        self._save_action.triggered.connect(self._save_scenario)

        self._load_action = QtGui.QAction("Load Scenario...", self)
        self._load_action.triggered.connect(self._load_scenario)

        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("File")
        scenario_menu = file_menu.addMenu("Scenario")
        for entry in scenario_registry.all():
            action = QtGui.QAction(entry.name, self)
            action.setData(entry.scenario_id)
            action.triggered.connect(self._on_scenario_action)
            scenario_menu.addAction(action)
        scenario_menu.addSeparator()
        scenario_menu.addAction(self._random_action)
        file_menu.addSeparator()
        file_menu.addAction(self._save_action)
        file_menu.addAction(self._load_action)

        sim_menu = menu_bar.addMenu("Simulation")
        sim_menu.addAction(self._play_action)
        sim_menu.addAction(self._step_action)
        sim_menu.addAction(self._reset_action)

        view_menu = menu_bar.addMenu("View")
        view_menu.addAction(self._trails_action)
        view_menu.addAction(self._com_frame_action)
        view_menu.addAction(self._frame_action)

        toolbar = self.addToolBar("Simulation")
        toolbar.addAction(self._play_action)
        toolbar.addAction(self._step_action)
        toolbar.addAction(self._reset_action)

        if path is not None:
            self._open_scenario(path)
        elif seed is not None:
            self._load_random(seed)
        elif scenario_id is not None:
            if scenario_id in scenario_registry:
                self._set_canonical(scenario_id)
            else:
                _LOG.warning("Unknown scenario id %r", scenario_id)
        if self._controller.simulation is None:
            entries = scenario_registry.all()
            if entries:
                self._set_canonical(entries[0].scenario_id)

    def _on_scenario_action(self) -> None:
        action = self.sender()
        if not isinstance(action, QtGui.QAction):
            return
        scenario_id = action.data()
        if scenario_id is None:
            return
        self._set_canonical(str(scenario_id))

    def _set_canonical(self, scenario_id: str) -> None:
        document = self._controller.load_canonical(scenario_id, self._simulation_panel.current_config())
        defaults = scenario_registry.get(scenario_id).ui_defaults()
        self._after_scenario_change(document.simulation)
        if defaults.view_range:
            self._scene.set_view_range(defaults.view_range)

    def _load_random(self, seed: int | None = None) -> None:
        document = self._controller.load_random(seed, config=self._simulation_panel.current_config())
        self._after_scenario_change(document.simulation)
        self._scene.frame_scene()
        self.statusBar().showMessage(f"Random scenario, seed {document.scenario.seed}")

    def _after_scenario_change(self, config: SimulationConfig) -> None:
        self._simulation_panel.set_config(config)
        self._trails.clear()
        self._update_ui()
        document = self._controller.document
        if document is not None:
            self.setWindowTitle(f"3 Body Problem - {document.display_name}")

    def _on_settings_changed(self, config: SimulationConfig) -> None:
        self._controller.update_simulation_settings(config)
        self._trails.clear()
        self._update_ui()

    def _toggle_play(self, checked: bool) -> None:
        if self._controller.simulation is None:
            return
        if checked:
            self._play_action.setText("Pause")
            self._timer.start()
        else:
            self._play_action.setText("Play")
            self._timer.stop()

    def _single_step(self) -> None:
        simulation = self._controller.simulation
        if simulation is None or self._timer.isActive():
            return
        simulation.step()
        self._update_ui()

    def _on_tick(self) -> None:
        simulation = self._controller.simulation
        if simulation is None:
            return
        for _ in range(STEPS_PER_FRAME):
            simulation.step()
        self._update_ui()

    def _reset_simulation(self) -> None:
        self._controller.reset_simulation()
        self._trails.clear()
        self._update_ui()

    def _on_trails_toggled(self, checked: bool) -> None:
        self._show_trails = checked
        self._update_ui()

    def _on_frame_toggled(self, checked: bool) -> None:
        self._frame_choice = FrameChoice.COM if checked else FrameChoice.WORLD
        self._trails.clear()
        self._update_ui()

    def _update_ui(self) -> None:
        simulation = self._controller.simulation
        if simulation is None:
            self._scene.clear()
            self._diagnostics.update_values(None)
            return
        snapshot = simulation.current_state()
        positions = positions_in_frame(snapshot.positions, snapshot.masses, self._frame_choice)
        self._trails.append(positions)
        self._scene.set_bodies(positions, snapshot.masses)
        self._scene.set_trails(
            [self._trails.points(idx) for idx in range(self._trails.body_count)],
            self._show_trails,
        )
        self._diagnostics.update_values(snapshot)

    def _save_scenario(self) -> None:
        if self._controller.document is None:
            return
        file_path, _ = QtWidgets.QFileDialog.getSaveFileName(
            self, "Save Scenario", str(Path.cwd()), "Scenario (*.json)"
        )
        if not file_path:
            return
        try:
            saved = self._controller.save_scenario(Path(file_path))
        except OSError as exc:
            _LOG.warning("Failed to save scenario to %s: %s", file_path, exc)
            QtWidgets.QMessageBox.warning(self, "Save Failed", str(exc))
            return
        self.statusBar().showMessage(f"Saved {saved}")

    def _load_scenario(self) -> None:
        file_path, _ = QtWidgets.QFileDialog.getOpenFileName(
            self, "Load Scenario", str(Path.cwd()), "Scenario (*.json)"
        )
        if file_path:
            self._open_scenario(Path(file_path))

    def _open_scenario(self, path: Path) -> None:
        try:
            document = self._controller.load_scenario(path)
        except (OSError, ValueError) as exc:
            _LOG.warning("Failed to load scenario from %s: %s", path, exc)
            QtWidgets.QMessageBox.warning(self, "Load Failed", str(exc))
            return
        self._after_scenario_change(document.simulation)
        self._scene.frame_scene()
