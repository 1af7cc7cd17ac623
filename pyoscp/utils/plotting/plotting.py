"""
Chart-ready views of the derived metrics.

Nothing here draws. The functions turn results into the numbers and pandas
objects a presentation layer feeds into its bar, line, doughnut and progress
widgets. Percentages are integers in 0-100 unless stated otherwise.
"""
import numpy as np
import pandas as pd

from ..business.business import cost_per_trip
from ..debris.debris import round_half_up

# Lowest value shown on the passenger safety gauge.
PASSENGER_SAFETY_FLOOR = 20

TRIP_DAYS_PER_MISSION_YEAR = 3


def roi_percent(business):
    return round_half_up(business.roi * 100)


def roi_gauge(business):
    """ROI percentage shifted by 50 and clamped to a 0-100 progress bar."""
    return int(np.clip(roi_percent(business) + 50, 0, 100))


def trip_duration_days(mission_years):
    # Tourism view: each mission year stands for three days of trip.
    return mission_years * TRIP_DAYS_PER_MISSION_YEAR


def cost_breakdown(business):
    """
    CAPEX, OPEX and revenue in $M for the cost-vs-revenue bar chart.

    :param business: Business result
    :type business: BusinessResult
    :return: Series indexed by CAPEX, OPEX, Revenue
    :rtype: pandas.Series
    """
    return pd.Series(
        [business.capex, business.opex, business.revenue],
        index=["CAPEX", "OPEX", "Revenue"],
        name="$M",
    )


def risk_trend(debris, mission_years):
    """
    Collision risk in percent for each mission year, labelled Y1..Yn.

    The heuristic risk does not evolve over time, so every year carries the
    same value, rounded to two decimals.
    """
    labels = [f"Y{i + 1}" for i in range(mission_years)]
    value = round(debris.collision_risk * 100, 2)
    return pd.Series([value] * mission_years, index=labels, name="Risk", dtype=float)


def sustainability_split(sustainability):
    score_percent = round_half_up(sustainability.score * 100)
    return {"Sustainability": score_percent, "Risk": round_half_up((1 - sustainability.score) * 100)}


def safety_gauges(debris, sustainability):
    """
    Values of the safety and sustainability progress bars.

    :param debris: Debris result
    :type debris: DebrisResult
    :param sustainability: Sustainability result
    :type sustainability: SustainabilityResult
    :return: Gauge name to percentage
    :rtype: dict
    """
    risk_percent = round_half_up(debris.collision_risk * 100)
    return {
        "passenger_safety": max(PASSENGER_SAFETY_FLOOR, 100 - risk_percent),
        "debris_mitigation": round_half_up((1 - debris.collision_risk) * 100),
        "eco_rating": round_half_up(sustainability.score * 100),
    }


def metrics_to_json(metrics):
    """
    Converts a ScenarioMetrics bundle to a JSON-serialisable dictionary.

    :param metrics: Metrics computed from a single parameter snapshot
    :type metrics: ScenarioMetrics
    :return: Dictionary of inputs, results and dashboard views
    :rtype: dict
    """
    business = metrics.business
    debris = metrics.debris
    sustainability = metrics.sustainability

    return {
        "version": metrics.version,
        "parameters": metrics.parameters.to_dict(),
        "business": {
            "capex": business.capex,
            "opex": business.opex,
            "tco": business.tco,
            "revenue": business.revenue,
            "roi": business.roi,
            "roi_percent": roi_percent(business),
        },
        "debris": {
            "collision_risk": debris.collision_risk,
            "projected_debris_index": debris.projected_debris_index,
        },
        "sustainability": {
            "score": sustainability.score,
            "band": sustainability.band,
        },
        "views": {
            "roi_gauge": roi_gauge(business),
            "cost_per_trip": cost_per_trip(business, metrics.parameters.satellite_count),
            "trip_duration_days": trip_duration_days(metrics.parameters.mission_years),
            "cost_breakdown": cost_breakdown(business).to_dict(),
            "risk_trend": risk_trend(debris, metrics.parameters.mission_years).to_dict(),
            "sustainability_split": sustainability_split(sustainability),
            "safety_gauges": safety_gauges(debris, sustainability),
        },
    }
