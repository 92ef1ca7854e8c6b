from .diagnostics_panel import DiagnosticsPanel
from .scene_view import SceneView
from .simulation_panel import SimulationPanel

__all__ = [
    "DiagnosticsPanel",
    "SceneView",
    "SimulationPanel",
]
