import plotly.graph_objects as go
import numpy as np
import pandas as pd
from typing import List, Optional

from hinge.physics.engine import SimulationResult, SafetyStatus, WARNING_GAP
from hinge.gui.theme import Theme

STATUS_TEXT = {
    SafetyStatus.COLLISION: "Interference detected!",
    SafetyStatus.WARNING: f"Warning: gap < {WARNING_GAP}",
    SafetyStatus.SAFE: "Safe",
}

def gap_label(result: SimulationResult) -> str:
    """Header text for the current gap."""
    if result.min_gap < 0:
        return "COLLISION"
    return f"{result.min_gap:.3f} mm"

def status_label(result: SimulationResult) -> str:
    return STATUS_TEXT[result.status]

def _closed(poly: np.ndarray) -> np.ndarray:
    # Plotly needs the closing vertex repeated
    return np.vstack([poly, poly[:1]])

class HingeVisualizer:
    """
    Plotly side view: System base, swung LCD, pivot and nose trace.
    Coordinates stay in mm; the y axis is flipped so +y points down.
    """

    def _body_trace(self, poly: np.ndarray, name: str, fill: str, edge: str) -> go.Scatter:
        pts = _closed(np.asarray(poly))
        return go.Scatter(
            x=pts[:, 0], y=pts[:, 1],
            mode='lines', fill='toself',
            fillcolor=fill, line=dict(color=edge, width=1),
            name=name, hoverinfo='skip'
        )

    def _pivot_trace(self, pivot: np.ndarray) -> go.Scatter:
        return go.Scatter(
            x=[pivot[0]], y=[pivot[1]],
            mode='markers', name="Pivot",
            marker=dict(symbol='circle-cross-open', size=14, color=Theme.PIVOT, line=dict(width=2))
        )

    def _trace_trace(self, points: np.ndarray) -> Optional[go.Scatter]:
        if points is None or len(points) < 2:
            return None
        return go.Scatter(
            x=points[:, 0], y=points[:, 1],
            mode='lines', name="Nose Trace",
            line=dict(color=Theme.TRACE, dash='dash', width=2),
            hoverinfo='skip'
        )

    def render_scene(self, result: SimulationResult, trace_points: Optional[np.ndarray] = None) -> go.Figure:
        data: List[go.Scatter] = []

        trace = self._trace_trace(trace_points)
        if trace is not None:
            data.append(trace)

        data.append(self._body_trace(result.system_poly, "System", Theme.SYSTEM_FILL, Theme.SYSTEM_EDGE))
        data.append(self._body_trace(result.lcd_poly, "LCD", Theme.LCD_FILL, Theme.LCD_EDGE))
        data.append(self._pivot_trace(result.pivot))

        layout = go.Layout(
            plot_bgcolor=Theme.BG_MAIN,
            margin=dict(l=0, r=0, b=0, t=30),
            xaxis=dict(title="x (mm)", gridcolor=Theme.GRID, zeroline=False, range=[-50, 10]),
            yaxis=dict(title="y (mm)", gridcolor=Theme.GRID, zeroline=False,
                       scaleanchor='x', scaleratio=1, autorange='reversed'),
            legend=dict(orientation='h')
        )
        fig = go.Figure(data=data, layout=layout)

        # Front plane (x=0) and top plane (y=0)
        fig.add_vline(x=0, line=dict(color=Theme.REFERENCE_LINE, width=2))
        fig.add_hline(y=0, line=dict(color=Theme.REFERENCE_LINE, width=2))
        return fig

    def render_sweep(self, df: pd.DataFrame) -> go.Figure:
        """Gap vs angle, one marker color per status."""
        fig = go.Figure()
        fig.add_trace(go.Scatter(
            x=df["angle"], y=df["min_gap"], mode='lines',
            line=dict(color=Theme.TEXT_DIM, width=1), name="Min Gap", hoverinfo='skip'
        ))
        for status in SafetyStatus:
            sub = df[df["status"] == status.value]
            if sub.empty:
                continue
            fig.add_trace(go.Scatter(
                x=sub["angle"], y=sub["min_gap"], mode='markers',
                marker=dict(color=Theme.status_color(status), size=5),
                name=status.value
            ))
        fig.add_hline(y=WARNING_GAP, line=dict(color=Theme.WARNING, dash='dot'))
        fig.update_layout(
            xaxis_title="Angle (deg)", yaxis_title="Min Gap (mm)",
            margin=dict(l=0, r=0, b=0, t=30), plot_bgcolor=Theme.BG_MAIN
        )
        return fig
