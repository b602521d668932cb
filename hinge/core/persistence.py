import json
import dataclasses
import pandas as pd
import os
from typing import Tuple, List, Optional
from datetime import datetime
from hinge.core.geometry import HingeParameters
from hinge.core.config import ScenarioConfig

class PersistenceManager:
    """
    Handles saving and loading of hinge designs and their angle sweeps.
    Stores data in a local directory structure:
    saved_designs/
      {DesignName}/
        config.json
        sweep.csv
    """

    def __init__(self, base_path: str = "saved_designs"):
        self.base_path = base_path
        if not os.path.exists(self.base_path):
            os.makedirs(self.base_path)

    @staticmethod
    def clean_name(name: str) -> str:
        return "".join(c for c in name if c.isalnum() or c in (' ', '_', '-')).strip()

    def list_designs(self) -> List[str]:
        """Returns a list of available design names."""
        if not os.path.exists(self.base_path):
            return []

        designs = []
        for name in os.listdir(self.base_path):
            path = os.path.join(self.base_path, name)
            if os.path.isdir(path) and os.path.exists(os.path.join(path, "config.json")):
                designs.append(name)
        return sorted(designs)

    def save_design(self, name: str, params: HingeParameters, cfg: ScenarioConfig,
                    sweep: Optional[pd.DataFrame] = None) -> str:
        """
        Saves the design (and optionally its sweep table) to a directory.
        Returns the sanitised name actually used.
        """
        clean_name = self.clean_name(name)
        if not clean_name:
            raise ValueError("Invalid design name")

        design_dir = os.path.join(self.base_path, clean_name)
        if not os.path.exists(design_dir):
            os.makedirs(design_dir)

        # 1. Save Configuration
        data = {
            "parameters": dataclasses.asdict(params),
            "config": dataclasses.asdict(cfg),
            "version": "1.0",
            "timestamp": datetime.now().isoformat()
        }

        with open(os.path.join(design_dir, "config.json"), "w") as f:
            json.dump(data, f, indent=4)

        # 2. Save Sweep
        sweep_path = os.path.join(design_dir, "sweep.csv")
        if sweep is not None:
            sweep.to_csv(sweep_path, index=False)
        elif os.path.exists(sweep_path):
            # Stale sweep from a previous save of another design state
            os.remove(sweep_path)

        return clean_name

    def load_design(self, name: str) -> Tuple[HingeParameters, ScenarioConfig, Optional[pd.DataFrame]]:
        """
        Loads a design. Returns (Params, Cfg, Sweep or None).
        """
        design_dir = os.path.join(self.base_path, name)
        config_path = os.path.join(design_dir, "config.json")
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Design {name} not found")

        with open(config_path, "r") as f:
            data = json.load(f)

        # Unknown keys from newer files are ignored
        p_fields = {f.name for f in dataclasses.fields(HingeParameters)}
        c_fields = {f.name for f in dataclasses.fields(ScenarioConfig)}
        params = HingeParameters(**{k: v for k, v in data.get("parameters", {}).items() if k in p_fields})
        cfg = ScenarioConfig(**{k: v for k, v in data.get("config", {}).items() if k in c_fields})

        sweep = None
        sweep_path = os.path.join(design_dir, "sweep.csv")
        if os.path.exists(sweep_path):
            sweep = pd.read_csv(sweep_path)
            sweep["collision"] = sweep["collision"].astype(bool)

        return params, cfg, sweep
