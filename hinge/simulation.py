import numpy as np
import pandas as pd
from typing import Dict, Any, Optional

from hinge.core.geometry import HingeParameters
from hinge.core.config import ScenarioConfig
from hinge.physics.engine import HingeKernel, SafetyStatus

SWEEP_COLUMNS = ["angle", "min_gap", "status", "collision", "nose_x", "nose_y"]

class SimulationRunner:
    """
    Sweeps the opening angle of one hinge design and tabulates the gap.
    """
    def __init__(self, cfg: Optional[ScenarioConfig] = None):
        self.cfg = cfg or ScenarioConfig()
        self.kernel = HingeKernel(self.cfg)

    def sweep_angles(self, start: float = 0.0, stop: Optional[float] = None,
                     step: Optional[float] = None) -> np.ndarray:
        """Sample angles from start to stop, end point included when on the grid."""
        stop = self.cfg.sweep_max_angle if stop is None else stop
        step = self.cfg.sweep_step if step is None else step
        if step <= 0:
            raise ValueError("Sweep step must be positive")
        n = int(np.floor((stop - start) / step + 1e-9)) + 1
        return start + step * np.arange(max(n, 0))

    def run_sweep(self, params: HingeParameters, start: float = 0.0,
                  stop: Optional[float] = None, step: Optional[float] = None) -> pd.DataFrame:
        """
        Evaluates the design at every sample angle.
        Returns one row per angle: angle, min_gap, status, collision, nose_x, nose_y.
        """
        angles = self.sweep_angles(start, stop, step)
        print(f"Starting Sweep for {len(angles)} steps...")

        rows = []
        for res, angle in zip(self.kernel.solve_sweep(params, angles), angles):
            rows.append({
                "angle": float(angle),
                "min_gap": res.min_gap,
                "status": res.status.value,
                "collision": res.is_collision,
                "nose_x": float(res.nose[0]),
                "nose_y": float(res.nose[1])
            })
        return pd.DataFrame(rows, columns=SWEEP_COLUMNS)

    @staticmethod
    def summarize(df: pd.DataFrame) -> Dict[str, Any]:
        """
        Aggregates a sweep table.
        max_step_jump only compares neighbouring samples that are both clear,
        so the -1 sentinel never counts as a jump.
        """
        clear = df[~df["collision"].astype(bool)]
        clashes = df[df["collision"].astype(bool)]

        gaps = df["min_gap"].to_numpy(dtype=float)
        ok = ~df["collision"].astype(bool).to_numpy()
        both_ok = ok[1:] & ok[:-1]
        jumps = np.abs(np.diff(gaps))[both_ok]

        return {
            "min_clearance": float(clear["min_gap"].min()) if not clear.empty else float("nan"),
            "collision_count": int(len(clashes)),
            "warning_count": int((df["status"] == SafetyStatus.WARNING.value).sum()),
            "first_collision_angle": float(clashes["angle"].iloc[0]) if not clashes.empty else None,
            "max_step_jump": float(jumps.max()) if len(jumps) else 0.0
        }
