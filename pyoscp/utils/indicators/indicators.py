from dataclasses import dataclass

import numpy as np

# Composite weights, biased toward debris safety over profitability.
ROI_WEIGHT = 0.4
RISK_WEIGHT = 0.6

# Shift mapping roi in [-0.5, 0.5] onto [0, 1].
ROI_OFFSET = 0.5

# Band thresholds. A score equal to a threshold belongs to the higher band.
RED_THRESHOLD = 0.4
YELLOW_THRESHOLD = 0.7

BANDS = ("red", "yellow", "green")


@dataclass(frozen=True)
class SustainabilityResult:
    score: float
    band: str


def _clamp_unit(value):
    return float(np.clip(value, 0.0, 1.0))


def classify_band(score):
    """
    Map a composite score onto its status band.

    :param score: Sustainability score in [0, 1]
    :type score: float
    :return: "red" below 0.4, "yellow" below 0.7, "green" otherwise
    :rtype: str
    """
    if score < RED_THRESHOLD:
        return "red"
    if score < YELLOW_THRESHOLD:
        return "yellow"
    return "green"


def compute_sustainability(debris, business):
    """
    Combine the debris and business results into a bounded composite score.

    The return on investment saturates outside [-0.5, 0.5]; the collision risk
    enters inverted. Depends only on the two results, never on the mission
    parameters directly.

    :param debris: Output of compute_debris_risk
    :type debris: DebrisResult
    :param business: Output of compute_business
    :type business: BusinessResult
    :return: Score in [0, 1] and its band
    :rtype: SustainabilityResult
    """
    roi_score = _clamp_unit(business.roi + ROI_OFFSET)
    risk_score = 1 - debris.collision_risk
    score = _clamp_unit(ROI_WEIGHT * roi_score + RISK_WEIGHT * risk_score)

    return SustainabilityResult(score=score, band=classify_band(score))
