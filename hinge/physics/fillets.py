import numpy as np

def fillet_points(center_x: float, center_y: float, radius: float,
                  start_angle: float, end_angle: float, segments: int = 10) -> np.ndarray:
    """
    Samples a circular fillet arc between two angles (radians).
    Returns (segments + 1, 2) points, both end points included.
    A radius <= 0 collapses the corner to its centre: (1, 2).
    """
    if radius <= 0:
        return np.array([[center_x, center_y]], dtype=float)

    # Linear in the angle, so a reversed range walks the arc backwards
    theta = start_angle + (end_angle - start_angle) * (np.arange(segments + 1) / segments)
    x = center_x + radius * np.cos(theta)
    y = center_y + radius * np.sin(theta)
    return np.stack((x, y), axis=-1)
