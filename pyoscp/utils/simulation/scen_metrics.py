import logging
from dataclasses import dataclass

from ..business.business import BusinessResult, compute_business
from ..debris.debris import DebrisResult, compute_debris_risk
from ..indicators.indicators import SustainabilityResult, compute_sustainability
from ..params.params import MissionParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioMetrics:
    """
    Every derived result of one parameter snapshot.

    All three results are computed from ``parameters``; ``version`` identifies
    the session snapshot they belong to.
    """
    version: int
    parameters: MissionParameters
    business: BusinessResult
    debris: DebrisResult
    sustainability: SustainabilityResult


def recompute(params, scaling=None, version=0):
    """
    Run the business, debris and sustainability calculators on one snapshot.

    Pure and idempotent: the same snapshot always yields equal metrics.

    Args:
        params (MissionParameters): Mission snapshot.
        scaling (DebrisScaling, optional): External debris model factors.
        version (int, optional): Snapshot version recorded on the result.

    Returns:
        ScenarioMetrics: The derived results.
    """
    business = compute_business(params)
    debris = compute_debris_risk(params, scaling)
    sustainability = compute_sustainability(debris, business)

    logger.debug("Recomputed metrics for version %d: roi=%.4f risk=%.4f score=%.4f (%s)",
                 version, business.roi, debris.collision_risk, sustainability.score, sustainability.band)

    return ScenarioMetrics(
        version=version,
        parameters=params,
        business=business,
        debris=debris,
        sustainability=sustainability,
    )
