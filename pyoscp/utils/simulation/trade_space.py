import itertools
import logging
from dataclasses import replace

import numpy as np
import pandas as pd
from tqdm import tqdm

from ..indicators.indicators import BANDS
from ..params.params import EOL_STRATEGIES, PARAMETER_NAMES, validate_parameters
from .scen_metrics import recompute

logger = logging.getLogger(__name__)

RESULT_COLUMNS = [
    "capex", "opex", "tco", "revenue", "roi",
    "collision_risk", "projected_debris_index",
    "score", "band",
]


def _whole_numbers(name, values):
    values = np.atleast_1d(values)
    if not np.all(np.isfinite(values)) or not np.all(np.mod(values, 1) == 0):
        raise ValueError(f"{name} must hold whole numbers, got {values.tolist()}.")
    return [int(n) for n in values]


def sweep_trade_space(base, satellite_counts, lifetimes, eol_strategies=EOL_STRATEGIES,
                      scaling=None, progress=False):
    """
    Evaluate every combination of fleet size, lifetime and end-of-life strategy.

    The remaining mission parameters are held at their values in ``base``.

    Args:
        base (MissionParameters): Snapshot supplying the fixed parameters.
        satellite_counts (iterable of int): Fleet sizes to evaluate.
        lifetimes (iterable of int): Operational lifetimes in years.
        eol_strategies (iterable of str, optional): Strategies to evaluate. Defaults to all.
        scaling (DebrisScaling, optional): External debris model factors.
        progress (bool, optional): Show a tqdm progress bar.

    Returns:
        pandas.DataFrame: One row per combination, holding the inputs and every
        derived metric.
    """
    satellite_counts = _whole_numbers("satellite_counts", satellite_counts)
    lifetimes = _whole_numbers("lifetimes", lifetimes)
    eol_strategies = list(eol_strategies)

    for strategy in eol_strategies:
        if strategy not in EOL_STRATEGIES:
            raise ValueError(f"eol_strategy must be one of {EOL_STRATEGIES}, got {strategy!r}.")

    combinations = list(itertools.product(satellite_counts, lifetimes, eol_strategies))
    logger.info("Sweeping %d trade-space combinations", len(combinations))

    rows = []
    for count, lifetime, strategy in tqdm(combinations, desc="Sweeping trade space", disable=not progress):
        params = validate_parameters(
            replace(base, satellite_count=count, lifetime_years=lifetime, eol_strategy=strategy))
        metrics = recompute(params, scaling)
        rows.append({
            **params.to_dict(),
            "capex": metrics.business.capex,
            "opex": metrics.business.opex,
            "tco": metrics.business.tco,
            "revenue": metrics.business.revenue,
            "roi": metrics.business.roi,
            "collision_risk": metrics.debris.collision_risk,
            "projected_debris_index": metrics.debris.projected_debris_index,
            "score": metrics.sustainability.score,
            "band": metrics.sustainability.band,
        })

    return pd.DataFrame(rows, columns=[*PARAMETER_NAMES, *RESULT_COLUMNS])


def band_summary(frame):
    """Number of swept scenarios per band, red to green, zeros included."""
    return frame["band"].value_counts().reindex(list(BANDS), fill_value=0)
