from collections import deque
from typing import Optional
import numpy as np

class TraceHistory:
    """
    Rolling window of LCD nose positions for the motion trace overlay.
    Keeps the previous `limit` points plus the newest one.
    """
    def __init__(self, limit: int = 300):
        self.limit = limit
        self._points = deque(maxlen=limit + 1)

    def __len__(self):
        return len(self._points)

    def record(self, point) -> None:
        """Appends a point, or the nose of a SimulationResult."""
        nose = getattr(point, "nose", point)
        self._points.append((float(nose[0]), float(nose[1])))

    def clear(self) -> None:
        self._points.clear()

    def update(self, result, show_trace: bool) -> None:
        # Turning the trace off drops the history
        if show_trace:
            self.record(result)
        else:
            self.clear()

    @property
    def points(self) -> np.ndarray:
        if not self._points:
            return np.empty((0, 2))
        return np.array(self._points, dtype=float)

    @property
    def last(self) -> Optional[np.ndarray]:
        if not self._points:
            return None
        return np.array(self._points[-1], dtype=float)
