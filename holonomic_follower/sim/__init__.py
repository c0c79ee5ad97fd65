from .config import SimulatorConfig
from .simulator import HolonomicSimulator, SimulationStep
from .states import RobotState
from .telemetry import TelemetryLogger

__all__ = [
    "HolonomicSimulator",
    "RobotState",
    "SimulationStep",
    "SimulatorConfig",
    "TelemetryLogger",
]
