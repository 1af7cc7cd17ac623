import math
from dataclasses import dataclass

import numpy as np

# Reference fleet size and lifetime at which each half of the base risk saturates.
RISK_REFERENCE_SATELLITES = 200
RISK_REFERENCE_LIFETIME_YEARS = 15

# Scale of the projected debris index.
INDEX_REFERENCE_SATELLITES = 300
INDEX_REFERENCE_LIFETIME_YEARS = 10

# Multiplier on collision risk per end-of-life strategy, 1.0 = no mitigation.
STRATEGY_FACTORS = {
    "deorbit": 0.4,
    "graveyard": 0.7,
    "none": 1.0,
}

NO_EOL_INDEX_FACTOR = 1.2
EOL_INDEX_FACTOR = 0.7


@dataclass(frozen=True)
class DebrisScaling:
    """
    Scaling factors from an external debris model (ORDEM / DAS).

    Read-only input to the debris calculator. Factors of 1.0 leave the
    projected debris index untouched.
    """
    ordem_factor: float = 1.0
    das_factor: float = 1.0


@dataclass(frozen=True)
class DebrisResult:
    """
    Heuristic debris metrics of a constellation.

    ``collision_risk`` is probability-like and lies in [0, 1].
    ``projected_debris_index`` is a relative severity score for comparing
    scenarios; it is not a percentage even though typical values fall in 0-100.
    """
    collision_risk: float
    projected_debris_index: int


def round_half_up(value):
    # Halves round toward +inf; the fractional part is compared exactly.
    whole = math.floor(value)
    return int(whole + 1 if value - whole >= 0.5 else whole)


def compute_debris_risk(params, scaling=None):
    """
    Collision risk and projected debris index for a constellation.

    Base risk blends fleet size and operational lifetime, each contributing up
    to one half and the sum capped at 1. The end-of-life strategy then scales
    that risk down (deorbit 0.4, graveyard 0.7, none 1.0). The debris index
    grows with fleet size and lifetime, and is penalised when there is no
    end-of-life plan.

    Args:
        params (MissionParameters): Mission snapshot. Reads satellite_count,
            lifetime_years and eol_strategy.
        scaling (DebrisScaling, optional): External model factors applied to the
            debris index. Defaults to no scaling.

    Returns:
        DebrisResult: The derived debris metrics.
    """
    if scaling is None:
        scaling = DebrisScaling()

    base_risk = min(1.0, (params.satellite_count / RISK_REFERENCE_SATELLITES) * 0.5
                    + (params.lifetime_years / RISK_REFERENCE_LIFETIME_YEARS) * 0.5)
    strategy_factor = STRATEGY_FACTORS[params.eol_strategy]
    collision_risk = float(np.clip(min(1.0, base_risk * strategy_factor), 0.0, 1.0))

    eol_factor = NO_EOL_INDEX_FACTOR if params.eol_strategy == "none" else EOL_INDEX_FACTOR
    raw_index = (100 * (params.satellite_count / INDEX_REFERENCE_SATELLITES)
                 * (params.lifetime_years / INDEX_REFERENCE_LIFETIME_YEARS) * eol_factor)
    raw_index *= scaling.ordem_factor * scaling.das_factor
    projected_debris_index = max(0, round_half_up(raw_index))

    return DebrisResult(collision_risk=collision_risk, projected_debris_index=projected_debris_index)
