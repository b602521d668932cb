from dataclasses import dataclass, replace
import numpy as np

@dataclass(frozen=True)
class HingeParameters:
    """
    Defines the dimensional parameters of the hinge side profile (mm).
    Origin is the System front-top corner, x=0 is the front face and
    y grows downward (into the base).
    """
    lcd_thickness: float = 5.5
    system_thickness: float = 18.0
    # Distance from the front face to the pivot centre
    pivot_horizontal_offset: float = 10.0
    # Distance from the top face down to the pivot centre
    pivot_vertical_offset: float = 8.0
    # LCD to System clearance at 0 deg
    initial_gap: float = 0.5
    lcd_fillet: float = 2.0          # LCD front-bottom corner
    system_top_fillet: float = 1.0   # System front-top corner
    system_bottom_fillet: float = 3.0 # System front-bottom corner
    angle: float = 0.0               # Opening angle (deg)
    show_trace: bool = True          # Display only

    @property
    def pivot(self) -> np.ndarray:
        return np.array([-self.pivot_horizontal_offset, self.pivot_vertical_offset], dtype=float)

    def with_angle(self, angle: float) -> 'HingeParameters':
        return replace(self, angle=float(angle))
