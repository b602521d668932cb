import os
import json
import dataclasses
import pandas as pd
from typing import Dict, List, Any, Optional
from datetime import datetime

from hinge.core.geometry import HingeParameters
from hinge.physics.engine import SafetyStatus

def status_intervals(df: pd.DataFrame, status: SafetyStatus) -> List[List[float]]:
    """
    Groups consecutive sweep rows with the given status into [start, end]
    angle intervals (sample angles, inclusive).
    """
    intervals = []
    start = None
    prev = None
    for angle, st in zip(df["angle"], df["status"]):
        hit = st == status.value
        if hit and start is None:
            start = float(angle)
        elif not hit and start is not None:
            intervals.append([start, float(prev)])
            start = None
        prev = angle
    if start is not None:
        intervals.append([start, float(prev)])
    return intervals

class EnvelopeMapper:
    """
    Turns an angle sweep into a clash envelope report: the angle ranges in
    which the LCD interferes with the base, and those with a thin gap.
    """

    def __init__(self, output_dir: str = "Clash Envelopes"):
        self.output_dir = output_dir
        if not os.path.exists(self.output_dir):
            os.makedirs(self.output_dir)

    @staticmethod
    def build_envelope(df: pd.DataFrame) -> Dict[str, Any]:
        if df.empty:
            raise ValueError("Empty sweep. Cannot build clash envelope.")

        clear = df[df["status"] != SafetyStatus.COLLISION.value]
        return {
            "collision_intervals": status_intervals(df, SafetyStatus.COLLISION),
            "warning_intervals": status_intervals(df, SafetyStatus.WARNING),
            "min_clearance": float(clear["min_gap"].min()) if not clear.empty else None,
            "samples": int(len(df))
        }

    def generate_report(self, df: pd.DataFrame, name: str,
                        params: Optional[HingeParameters] = None) -> str:
        """
        Writes `<name>_envelope.json` and returns its path.

        Args:
            df: Sweep table from SimulationRunner.run_sweep
            name: Design name used in the header and file name
            params: Design parameters to embed in the header
        """
        envelope = self.build_envelope(df)

        header = {
            "source_design": name,
            "generated_at": datetime.now().isoformat(),
            "parameters": dataclasses.asdict(params) if params is not None else {},
            "angle_range": [float(df["angle"].min()), float(df["angle"].max())]
        }

        output_data = {
            "header": header,
            **envelope
        }

        output_full_path = os.path.join(self.output_dir, f"{name}_envelope.json")
        with open(output_full_path, "w") as f:
            json.dump(output_data, f, indent=2)

        return output_full_path
