from dataclasses import dataclass


@dataclass(frozen=True)
class BusinessResult:
    """Constellation economics in $M. ``roi`` is a fraction, not a percentage."""
    capex: float
    opex: float
    tco: float
    revenue: float
    roi: float


def compute_business(params):
    """
    Capital and operating cost, revenue and return on investment of a mission.

    Total over any non-negative input. A zero total cost of ownership (no
    satellites, or free satellites) gives ``roi = 0`` instead of a division error.

    Args:
        params (MissionParameters): Mission snapshot. Only the economic fields are read.

    Returns:
        BusinessResult: The derived economics.
    """
    capex = params.satellite_count * params.cost_per_satellite
    opex = params.satellite_count * params.annual_opex_per_satellite * params.mission_years
    tco = capex + opex
    revenue = params.satellite_count * params.expected_revenue_per_satellite
    roi = 0.0 if tco == 0 else (revenue - tco) / tco

    return BusinessResult(capex=capex, opex=opex, tco=tco, revenue=revenue, roi=roi)


def cost_per_trip(business, satellite_count):
    # Tourism view: one seat per satellite, never divide by less than one.
    return business.tco / max(1, satellite_count)
