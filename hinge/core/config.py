from dataclasses import dataclass

@dataclass
class ScenarioConfig:
    """
    Fixed scene constants shared by the builder, the sweep runner and the views.
    """
    system_width: float = 250.0 # mm
    lcd_length: float = 200.0 # mm
    fillet_segments: int = 10
    scale: float = 10.0 # 1mm = 10px
    trace_limit: int = 300
    sweep_step: float = 1.0 # deg
    sweep_max_angle: float = 180.0 # deg
