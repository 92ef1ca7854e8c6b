from __future__ import annotations

from typing import List, Sequence

import numpy as np
import pyqtgraph as pg
from PySide6 import QtWidgets

BODY_COLORS = ("#e65100", "#2e7d32", "#4527a0")
TRAIL_COLORS = ((230, 81, 0, 110), (46, 125, 50, 110), (69, 39, 160, 110))


class SceneView(QtWidgets.QWidget):
    """2D view of the bodies projected onto the XY plane, with optional trails."""

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self._plot = pg.PlotWidget(background="k")
        self._plot.setAspectLocked(True)
        self._plot.showGrid(x=True, y=True, alpha=0.15)
        self._plot.setLabel("bottom", "X")
        self._plot.setLabel("left", "Y")

        self._trail_items: List[pg.PlotDataItem] = []
        for color in TRAIL_COLORS:
            item = pg.PlotDataItem(pen=pg.mkPen(color, width=1.5))
            self._plot.addItem(item)
            self._trail_items.append(item)
        self._points = pg.ScatterPlotItem()
        self._plot.addItem(self._points)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._plot)

    def set_view_range(self, view_range: tuple[float, float, float, float]) -> None:
        x_min, x_max, y_min, y_max = view_range
        self._plot.setXRange(x_min, x_max, padding=0.0)
        self._plot.setYRange(y_min, y_max, padding=0.0)

    def frame_scene(self) -> None:
        self._plot.autoRange()

    def set_bodies(self, positions: np.ndarray, masses: Sequence[float]) -> None:
        spots = []
        for idx, (pos, mass) in enumerate(zip(positions, masses)):
            color = BODY_COLORS[idx % len(BODY_COLORS)]
            spots.append(
                {
                    "pos": np.asarray(pos[:2], dtype=float),
                    "size": 8.0 + 4.0 * np.sqrt(max(float(mass), 0.0)),
                    "brush": pg.mkBrush(color),
                    "pen": pg.mkPen("w", width=1.0),
                }
            )
        self._points.setData(spots)

    def set_trails(self, trails: Sequence[np.ndarray], visible: bool) -> None:
        for item, points in zip(self._trail_items, trails):
            item.setVisible(visible)
            if not visible or len(points) == 0:
                item.setData([], [])
                continue
            item.setData(points[:, 0], points[:, 1])

    def clear(self) -> None:
        self._points.setData([])
        for item in self._trail_items:
            item.setData([], [])
