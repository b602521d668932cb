import numpy as np

COLLISION_SENTINEL = -1.0

def _edges(poly: np.ndarray):
    """
    Returns (start, end) vertex arrays of every edge of a closed polygon.
    The closing edge (last -> first) is included.
    """
    v = np.asarray(poly, dtype=float)
    return v, np.roll(v, -1, axis=0)

def is_point_in_polygon(p: np.ndarray, poly: np.ndarray) -> bool:
    """
    Crossing-number (ray casting) test with a horizontal ray toward +x.
    Works for any simple polygon, convex or not.

    An edge counts when exactly one end lies above p.y (strict `>`) and the
    crossing lies strictly right of p.x. Points exactly on an edge, or rays
    through a vertex, are classified by these comparisons alone.
    """
    v = np.asarray(poly, dtype=float)
    if len(v) < 3:
        return False

    px, py = float(p[0]), float(p[1])
    xi, yi = v[:, 0], v[:, 1]
    # j is the previous vertex of i (j = i - 1, wrapping)
    xj, yj = np.roll(xi, 1), np.roll(yi, 1)

    straddles = (yi > py) != (yj > py)
    # Horizontal edges never straddle, so their inf/nan is masked out
    with np.errstate(divide='ignore', invalid='ignore'):
        x_cross = (xj - xi) * (py - yi) / (yj - yi) + xi
    crossings = straddles & (px < x_cross)
    return bool(np.count_nonzero(crossings) % 2 == 1)

def dist_to_segment(p: np.ndarray, v: np.ndarray, w: np.ndarray) -> float:
    """
    Euclidean distance from p to segment v-w (clamped projection).
    A zero-length segment is treated as the point v.
    """
    p = np.asarray(p, dtype=float)
    v = np.asarray(v, dtype=float)
    w = np.asarray(w, dtype=float)
    d = w - v
    l2 = float(np.dot(d, d))
    if l2 == 0:
        return float(np.hypot(*(p - v)))
    t = np.clip(np.dot(p - v, d) / l2, 0.0, 1.0)
    proj = v + t * d
    return float(np.hypot(*(p - proj)))

def segment_distances(points: np.ndarray, poly: np.ndarray) -> np.ndarray:
    """
    Vectorized point-to-edge distances.
    points: (M, 2), poly: (N, 2) closed polygon.
    Returns (M, N) where [m, n] is the distance from point m to edge n
    (edge n runs from vertex n to vertex n + 1, wrapping).
    """
    P = np.asarray(points, dtype=float)[:, None, :]   # (M, 1, 2)
    V, W = _edges(poly)
    D = (W - V)[None, :, :]                           # (1, N, 2)
    l2 = np.einsum('...k,...k->...', D, D)            # (1, N)

    rel = P - V[None, :, :]                           # (M, N, 2)
    dots = np.einsum('...k,...k->...', rel, D)        # (M, N)
    safe_l2 = np.where(l2 > 0, l2, 1.0)
    t = np.where(l2 > 0, np.clip(dots / safe_l2, 0.0, 1.0), 0.0)

    proj = V[None, :, :] + t[..., None] * D
    diff = P - proj
    return np.hypot(diff[..., 0], diff[..., 1])

def polygons_overlap(poly_a: np.ndarray, poly_b: np.ndarray) -> bool:
    """True if any vertex of one polygon lies inside the other."""
    for p in poly_a:
        if is_point_in_polygon(p, poly_b):
            return True
    for p in poly_b:
        if is_point_in_polygon(p, poly_a):
            return True
    return False

def get_min_distance(poly_a: np.ndarray, poly_b: np.ndarray) -> float:
    """
    Minimum separation between two polygons.

    1. Overlap check: any vertex contained in the other body returns the
       sentinel -1.0 (a flag, not a penetration depth).
    2. Otherwise the minimum vertex-to-edge distance, both directions.

    Edge-to-edge closest points are not sampled. For the hinge outlines
    (locally convex near the contact zone) the vertex samples are enough,
    but this is not an exact general polygon distance. O(|A| * |B|).
    """
    if polygons_overlap(poly_a, poly_b):
        return COLLISION_SENTINEL

    d_ab = segment_distances(poly_a, poly_b)
    d_ba = segment_distances(poly_b, poly_a)
    return float(min(d_ab.min(), d_ba.min()))

class CollisionDetector:
    """
    Gap / interference check between a moving body and a fixed body.
    Stateless; kept as a class so the kernel can swap detectors.
    """
    def overlaps(self, moving: np.ndarray, fixed: np.ndarray) -> bool:
        return polygons_overlap(moving, fixed)

    def min_gap(self, moving: np.ndarray, fixed: np.ndarray) -> float:
        return get_min_distance(moving, fixed)
