import numpy as np
from dataclasses import dataclass
from shapely.geometry import Polygon
from shapely.validation import explain_validity

@dataclass
class ProfileAudit:
    is_simple: bool
    area: float
    reason: str = ""

def audit_profile(poly: np.ndarray) -> ProfileAudit:
    """
    Flags outlines the builder produced from implausible dimensions,
    e.g. a fillet radius larger than the body thickness folding the outline
    over itself. Results are advisory; the engine still evaluates such shapes.
    """
    pts = np.asarray(poly, dtype=float)
    if len(pts) < 3:
        return ProfileAudit(is_simple=False, area=0.0, reason="Degenerate outline (< 3 vertices)")

    shape = Polygon(pts)
    if shape.is_valid:
        return ProfileAudit(is_simple=True, area=float(shape.area))
    return ProfileAudit(is_simple=False, area=float(shape.area), reason=explain_validity(shape))

def exact_gap(lcd_poly: np.ndarray, system_poly: np.ndarray) -> float:
    """
    True edge-to-edge distance between the two outlines (0 when they touch
    or intersect). Cross-check for the engine's vertex-sampled gap, which
    can only be equal or larger when the bodies are apart.
    """
    a = Polygon(np.asarray(lcd_poly, dtype=float))
    b = Polygon(np.asarray(system_poly, dtype=float))
    if not a.is_valid:
        a = a.buffer(0)
    if not b.is_valid:
        b = b.buffer(0)
    return float(a.distance(b))
