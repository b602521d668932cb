import numpy as np
import pyqtgraph as pg
from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QColor, QPolygonF
from PyQt6.QtWidgets import QGraphicsPolygonItem

from hinge.gui.state import AppState
from hinge.gui.theme import Theme
from hinge.physics.engine import SimulationResult

def _qcolor(css: str) -> QColor:
    """Accepts '#RRGGBB' or 'rgba(r, g, b, a)' with a in 0..1."""
    if css.startswith("rgba"):
        r, g, b, a = [float(v) for v in css[css.index("(") + 1:-1].split(",")]
        return QColor(int(r), int(g), int(b), int(a * 255))
    return QColor(css)

class ProfileViewport(pg.PlotWidget):
    """
    2D side view of the hinge.
    - System base (dark, fixed)
    - LCD (red, swung about the pivot)
    - Pivot cross
    - Dashed nose trace
    y is inverted so the profile reads like the drawing (+y down).
    """

    def __init__(self, state: AppState, parent=None):
        super().__init__(parent)
        self.state = state

        self.setBackground(Theme.BG_MAIN)
        self.setAspectLocked(True)
        self.invertY(True)
        self.showGrid(x=True, y=True, alpha=0.3)
        self.setLabel('bottom', "x (mm)")
        self.setLabel('left', "y (mm)")
        self.setXRange(-50, 10)
        self.setYRange(-20, 40)

        # Reference planes
        ref_pen = pg.mkPen(Theme.REFERENCE_LINE, width=2)
        self.addItem(pg.InfiniteLine(pos=0, angle=90, pen=ref_pen, label="Front Plane (X=0)"))
        self.addItem(pg.InfiniteLine(pos=0, angle=0, pen=ref_pen, label="Top Plane (Y=0)"))

        # Bodies
        self.system_item = self._body_item(Theme.SYSTEM_EDGE, Theme.SYSTEM_FILL)
        self.lcd_item = self._body_item(Theme.LCD_EDGE, Theme.LCD_FILL)
        self.trace_curve = pg.PlotDataItem(
            pen=pg.mkPen(_qcolor(Theme.TRACE), width=2, style=Qt.PenStyle.DashLine)
        )
        self.pivot_marker = pg.ScatterPlotItem(
            size=14, symbol='+', pen=pg.mkPen(Theme.PIVOT, width=2), brush=pg.mkBrush(None)
        )

        self.addItem(self.trace_curve)
        self.addItem(self.system_item)
        self.addItem(self.lcd_item)
        self.addItem(self.pivot_marker)

    @staticmethod
    def _body_item(edge: str, fill: str) -> QGraphicsPolygonItem:
        item = QGraphicsPolygonItem()
        # Cosmetic pen keeps a 1px outline whatever the zoom
        pen = pg.mkPen(edge, width=1)
        pen.setCosmetic(True)
        item.setPen(pen)
        item.setBrush(pg.mkBrush(_qcolor(fill)))
        return item

    @staticmethod
    def _polygon(poly: np.ndarray) -> QPolygonF:
        # QPolygonF closes the outline itself
        return QPolygonF([QPointF(float(x), float(y)) for x, y in poly])

    def update_scene(self, result: SimulationResult):
        self.system_item.setPolygon(self._polygon(result.system_poly))
        self.lcd_item.setPolygon(self._polygon(result.lcd_poly))
        self.pivot_marker.setData([result.pivot[0]], [result.pivot[1]])

        pts = self.state.trace.points
        if self.state.params.show_trace and len(pts) > 1:
            self.trace_curve.setData(pts[:, 0], pts[:, 1])
        else:
            self.trace_curve.setData([], [])
