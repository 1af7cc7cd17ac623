import json
import logging
import math
import os
import warnings
from dataclasses import dataclass, fields, replace

logger = logging.getLogger(__name__)

EOL_STRATEGIES = ("deorbit", "graveyard", "none")

_INTEGER_FIELDS = ("satellite_count", "mission_years", "lifetime_years")
_MONETARY_FIELDS = ("expected_revenue_per_satellite", "cost_per_satellite", "annual_opex_per_satellite")


@dataclass(frozen=True)
class MissionParameters:
    """
    Snapshot of the mission inputs for a constellation.

    Monetary values are in $M. Instances are immutable, a change to any field
    produces a new snapshot (see ``dataclasses.replace``).

    Attributes:
        satellite_count (int): Number of spacecraft in the constellation.
        mission_years (int): Mission duration in years.
        expected_revenue_per_satellite (float): Revenue per satellite over the whole mission.
        cost_per_satellite (float): Capital cost per satellite.
        annual_opex_per_satellite (float): Operating cost per satellite per year.
        lifetime_years (int): Operational lifetime used for debris-risk accrual.
        eol_strategy (str): End-of-life disposal policy, one of EOL_STRATEGIES.
    """
    satellite_count: int
    mission_years: int
    expected_revenue_per_satellite: float
    cost_per_satellite: float
    annual_opex_per_satellite: float
    lifetime_years: int
    eol_strategy: str

    def to_dict(self):
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_PARAMETERS = MissionParameters(
    satellite_count=60,
    mission_years=5,
    expected_revenue_per_satellite=8.0,
    cost_per_satellite=5.0,
    annual_opex_per_satellite=0.8,
    lifetime_years=7,
    eol_strategy="deorbit",
)

PARAMETER_NAMES = tuple(f.name for f in fields(MissionParameters))


def validate_parameters(params):
    """
    Check a parameter snapshot against the input domain of the calculators.

    The calculators themselves never validate. This is the guard for whoever
    accepts user input before handing a snapshot to the engine.

    Args:
        params (MissionParameters): Snapshot to check.

    Returns:
        MissionParameters: The same snapshot, unchanged.

    Raises:
        ValueError: If any field is of incorrect type or outside its domain.
    """
    for name in _INTEGER_FIELDS:
        value = getattr(params, name)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f"{name} must be an integer >= 1, got {value!r}.")

    for name in _MONETARY_FIELDS:
        value = getattr(params, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
            raise ValueError(f"{name} must be a finite non-negative number, got {value!r}.")

    if params.eol_strategy not in EOL_STRATEGIES:
        raise ValueError(f"eol_strategy must be one of {EOL_STRATEGIES}, got {params.eol_strategy!r}.")

    return params


def parameters_from_json(mission_json, base=DEFAULT_PARAMETERS):
    """
    Build a validated snapshot from a JSON mapping of mission parameters.

    Fields missing from the mapping are taken from ``base``. Keys that are not
    mission parameters are ignored with a warning.

    Args:
        mission_json (dict): Mapping of parameter name to value.
        base (MissionParameters, optional): Snapshot providing values for missing fields.

    Returns:
        MissionParameters: The validated snapshot.
    """
    changes = {}
    for key, value in mission_json.items():
        if key in PARAMETER_NAMES:
            changes[key] = value
        else:
            warnings.warn(f"Property {key} is not a mission parameter and was ignored.")

    return validate_parameters(replace(base, **changes))


def load_configuration(path):
    """
    Read a simulation configuration file.

    The expected layout is::

        {
            "simulation_name": "baseline",
            "preset": "research",
            "mission_parameters": {"satellite_count": 60}
        }

    Both ``preset`` and ``mission_parameters`` are optional.

    Raises:
        ValueError: If the file is not valid JSON, does not hold an object, or
            its preset or mission_parameters entries have the wrong type.
    """
    try:
        with open(path, encoding="utf-8") as f:
            configuration = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON format in configuration {path}: {e}") from e

    if not isinstance(configuration, dict):
        raise ValueError(f"Configuration {path} must contain a JSON object.")

    configuration.setdefault("mission_parameters", {})
    if not isinstance(configuration["mission_parameters"], dict):
        raise ValueError(f"mission_parameters in configuration {path} must be a JSON object.")

    preset = configuration.setdefault("preset", None)
    if preset is not None and not isinstance(preset, str):
        raise ValueError(f"preset in configuration {path} must be a string or null, got {preset!r}.")

    configuration.setdefault("simulation_name", os.path.splitext(os.path.basename(path))[0])
    logger.info("Loaded configuration %s from %s", configuration["simulation_name"], path)
    return configuration
