import numpy as np
from typing import Optional

from hinge.core.geometry import HingeParameters
from hinge.core.config import ScenarioConfig
from hinge.physics.fillets import fillet_points

HALF_PI = np.pi / 2.0

def pivot_point(params: HingeParameters) -> np.ndarray:
    """Rotation centre of the LCD, (-axis horizontal offset, axis vertical offset)."""
    return params.pivot

def system_profile(params: HingeParameters, cfg: Optional[ScenarioConfig] = None) -> np.ndarray:
    """
    Builds the System base outline (world frame).
    Order: Top-Back, Top-Front fillet, Bottom-Front fillet, Bottom-Back.
    The back corners are sharp.
    """
    cfg = cfg or ScenarioConfig()
    seg = cfg.fillet_segments
    w = cfg.system_width
    z = params.system_thickness
    r_top = params.system_top_fillet
    r_bot = params.system_bottom_fillet

    return np.vstack([
        [[-w, 0.0]],
        # Up -> Right (y points down, so -pi/2 is up)
        fillet_points(-r_top, r_top, r_top, -HALF_PI, 0.0, seg),
        # Right -> Down
        fillet_points(-r_bot, z - r_bot, r_bot, 0.0, HALF_PI, seg),
        [[-w, z]],
    ])

def lcd_reference_profile(params: HingeParameters, cfg: Optional[ScenarioConfig] = None) -> np.ndarray:
    """
    Builds the LCD outline at 0 deg, sitting `initial_gap` above the System top face.
    Vertex 0 is the front-bottom corner (the "nose") used for motion traces.
    Order: Front-Bottom fillet, Back-Bottom, Back-Top, Front-Top.
    """
    cfg = cfg or ScenarioConfig()
    g = params.initial_gap
    t = params.lcd_thickness
    r = params.lcd_fillet
    l = cfg.lcd_length

    return np.vstack([
        fillet_points(-r, -g - r, r, 0.0, HALF_PI, cfg.fillet_segments),
        [[-l, -g],
         [-l, -(g + t)],
         [0.0, -(g + t)]],
    ])
