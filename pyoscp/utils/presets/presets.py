import logging
from dataclasses import dataclass

import pandas as pd

from ..params.params import MissionParameters, PARAMETER_NAMES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioPreset:
    name: str
    label: str
    parameters: MissionParameters


PRESETS = {
    "lowcost": ScenarioPreset(
        name="lowcost",
        label="LEO Low-cost",
        parameters=MissionParameters(
            satellite_count=80,
            mission_years=4,
            expected_revenue_per_satellite=6.0,
            cost_per_satellite=3.5,
            annual_opex_per_satellite=0.6,
            lifetime_years=5,
            eol_strategy="deorbit",
        ),
    ),
    "luxury": ScenarioPreset(
        name="luxury",
        label="Luxury Orbit",
        parameters=MissionParameters(
            satellite_count=30,
            mission_years=6,
            expected_revenue_per_satellite=18.0,
            cost_per_satellite=9.0,
            annual_opex_per_satellite=1.5,
            lifetime_years=8,
            eol_strategy="graveyard",
        ),
    ),
    "research": ScenarioPreset(
        name="research",
        label="Research+Tourism",
        parameters=MissionParameters(
            satellite_count=50,
            mission_years=5,
            expected_revenue_per_satellite=10.0,
            cost_per_satellite=6.0,
            annual_opex_per_satellite=1.0,
            lifetime_years=7,
            eol_strategy="deorbit",
        ),
    ),
}


def get_preset(name):
    try:
        return PRESETS[name]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Unknown scenario preset: {name}. Please use values from {list(PRESETS)}.") from exc


def apply_preset(name):
    """
    Parameter snapshot of a named preset.

    The snapshot carries every mission parameter, so installing it replaces the
    previous inputs entirely.

    Args:
        name (str): One of the keys of PRESETS ("lowcost", "luxury", "research").

    Returns:
        MissionParameters: The preset's parameters.

    Raises:
        ValueError: If the preset name is unknown.
    """
    preset = get_preset(name)
    logger.debug("Resolved preset %s (%s)", preset.name, preset.label)
    return preset.parameters


def preset_table():
    """One row per preset, indexed by preset name."""
    rows = [{"name": p.name, "label": p.label, **p.parameters.to_dict()} for p in PRESETS.values()]
    return pd.DataFrame(rows, columns=["name", "label", *PARAMETER_NAMES]).set_index("name")
