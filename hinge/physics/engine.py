import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from hinge.core.geometry import HingeParameters
from hinge.core.config import ScenarioConfig
from hinge.physics.profiles import system_profile, lcd_reference_profile, pivot_point
from hinge.physics.kinematics import HingeRig, Rig
from hinge.physics.collisions import CollisionDetector

# Clearance below this (mm) is flagged but not a clash
WARNING_GAP = 0.8

class SafetyStatus(Enum):
    SAFE = 'SAFE'
    WARNING = 'WARNING'
    COLLISION = 'COLLISION'

def classify_gap(gap: float) -> SafetyStatus:
    if gap < 0:
        return SafetyStatus.COLLISION
    if gap < WARNING_GAP:
        return SafetyStatus.WARNING
    return SafetyStatus.SAFE

def _frozen(arr: np.ndarray) -> np.ndarray:
    arr = np.array(arr, dtype=float)
    arr.flags.writeable = False
    return arr

@dataclass(frozen=True)
class SimulationResult:
    min_gap: float # -1.0 on overlap
    status: SafetyStatus
    system_poly: np.ndarray # (N, 2) world frame, fixed
    lcd_poly: np.ndarray # (M, 2) after rotation
    pivot: np.ndarray # (2,)

    @property
    def nose(self) -> np.ndarray:
        """LCD front-bottom reference vertex (trace point)."""
        return self.lcd_poly[0]

    @property
    def is_collision(self) -> bool:
        return self.status is SafetyStatus.COLLISION

class HingeKernel:
    """
    Builds both outlines, swings the LCD about the pivot and measures the gap.
    Every call recomputes from scratch; nothing is cached between evaluations.
    """
    def __init__(self, cfg: Optional[ScenarioConfig] = None):
        self.cfg = cfg or ScenarioConfig()
        self.collider = CollisionDetector()

    def evaluate(self, params: HingeParameters) -> SimulationResult:
        # 1. Static System body
        system_poly = system_profile(params, self.cfg)

        # 2. LCD at 0 deg, then posed about the pivot
        pivot = pivot_point(params)
        rig: Rig = HingeRig(pivot)
        lcd_poly = rig.pose(lcd_reference_profile(params, self.cfg), params.angle)

        # 3. Gap + status
        min_gap = self.collider.min_gap(lcd_poly, system_poly)

        return SimulationResult(
            min_gap=min_gap,
            status=classify_gap(min_gap),
            system_poly=_frozen(system_poly),
            lcd_poly=_frozen(lcd_poly),
            pivot=_frozen(pivot)
        )

    def solve_sweep(self, params: HingeParameters, angles: Iterable[float]) -> List[SimulationResult]:
        """Evaluates the same design at each angle, in order."""
        return [self.evaluate(params.with_angle(a)) for a in angles]

def evaluate(params: HingeParameters, cfg: Optional[ScenarioConfig] = None) -> SimulationResult:
    """Pure pipeline: builder -> transform -> distance -> classifier."""
    return HingeKernel(cfg).evaluate(params)
