from .model import Model
from .utils.params.params import DEFAULT_PARAMETERS, EOL_STRATEGIES, MissionParameters, validate_parameters
from .utils.business.business import BusinessResult, compute_business
from .utils.debris.debris import DebrisResult, DebrisScaling, compute_debris_risk
from .utils.indicators.indicators import SustainabilityResult, compute_sustainability
from .utils.presets.presets import PRESETS, ScenarioPreset, apply_preset
from .utils.simulation.scen_metrics import ScenarioMetrics, recompute

__all__ = [
    "Model",
    "DEFAULT_PARAMETERS",
    "EOL_STRATEGIES",
    "MissionParameters",
    "validate_parameters",
    "BusinessResult",
    "compute_business",
    "DebrisResult",
    "DebrisScaling",
    "compute_debris_risk",
    "SustainabilityResult",
    "compute_sustainability",
    "PRESETS",
    "ScenarioPreset",
    "apply_preset",
    "ScenarioMetrics",
    "recompute",
]
