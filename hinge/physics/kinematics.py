from typing import Protocol
import numpy as np

class Rig(Protocol):
    def pose(self, poly: np.ndarray, angle_deg: float) -> np.ndarray:
        """
        Returns the polygon placed at the given opening angle.
        """
        ...

def rotation_matrix(angle_deg: float) -> np.ndarray:
    """
    2x2 rotation matrix. Positive angles follow the standard
    x -> y sense of the profile frame (y grows downward).
    """
    a = np.radians(angle_deg)
    c = np.cos(a)
    s = np.sin(a)
    return np.array([[c, -s],
                     [s, c]])

def rotate_polygon(pivot: np.ndarray, poly: np.ndarray, angle_deg: float) -> np.ndarray:
    """
    Rotates every vertex of `poly` (N, 2) about `pivot` by `angle_deg`.
    Returns a new array; neither input is modified.
    """
    pts = np.asarray(poly, dtype=float)
    if angle_deg == 0:
        # Exact identity, avoids (q - p) + p rounding
        return pts.copy()

    p = np.asarray(pivot, dtype=float)
    R = rotation_matrix(angle_deg)
    # Translate to origin, rotate, move back. Row vectors: q' = q @ R.T
    return (pts - p) @ R.T + p

def rotate_point(pivot: np.ndarray, q: np.ndarray, angle_deg: float) -> np.ndarray:
    """Rotates point q about pivot p by angle_deg."""
    return rotate_polygon(pivot, np.atleast_2d(q), angle_deg)[0]

class HingeRig:
    """
    Single-axis hinge: every LCD vertex swings about one fixed pivot.
    The pivot is a fixed point of the rotation and is never transformed.
    """
    def __init__(self, pivot: np.ndarray):
        self.pivot = np.asarray(pivot, dtype=float)

    def pose(self, poly: np.ndarray, angle_deg: float) -> np.ndarray:
        return rotate_polygon(self.pivot, poly, angle_deg)
