from dataclasses import dataclass, field, replace
from typing import Optional
import pandas as pd

from hinge.core.geometry import HingeParameters
from hinge.core.config import ScenarioConfig
from hinge.core.trace import TraceHistory

@dataclass
class AppState:
    """Holds the runtime state of the Desktop Application"""
    params: HingeParameters = field(default_factory=HingeParameters)
    config: ScenarioConfig = field(default_factory=ScenarioConfig)

    # Nose trace (only state carried across evaluations)
    trace: Optional[TraceHistory] = None

    # Last sweep (for saving)
    sweep: Optional[pd.DataFrame] = None

    # Persistence
    storage_path: str = "saved_designs"

    def __post_init__(self):
        if self.trace is None:
            self.trace = TraceHistory(self.config.trace_limit)

    def update_param(self, attr: str, value) -> None:
        # Parameters are immutable; swap in a new record
        self.params = replace(self.params, **{attr: value})
