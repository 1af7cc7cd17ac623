"""
Placeholder data sources for future NASA / ESA integrations.

Each function returns a fixed canned value and performs no network access.
A real integration must keep the return shapes, and anything it feeds into the
debris calculator stays a read-only input.
"""
import logging

from ..debris.debris import DebrisScaling

logger = logging.getLogger(__name__)


def get_odpo_scaling():
    """NASA ODPO ORDEM/DAS scaling factors for debris projections."""
    logger.debug("Using placeholder ODPO scaling factors")
    return DebrisScaling(ordem_factor=1.0, das_factor=1.0)


def fetch_leo_dataset_summary():
    # NASA Open Data Portal
    return {"name": "LEO Objects Snapshot (placeholder)", "records": 12345}


def fetch_sentinel_imagery_sample():
    # ESA Copernicus
    return {"url": "https://dataspace.copernicus.eu/"}
