"""
state-housing: Zillow average sale prices per state

Loads a wide table of regional price history, reshapes it into one row per
region and snapshot date, keeps a fixed set of states and plots the result
as a dark-themed interactive line chart.
"""

__version__ = "0.1.0"
__author__ = "State Housing Team"

from .config import constants
from .data import schemas, reshape, filters
from .pipeline import run_pipeline, PipelineResult

__all__ = [
    "constants",
    "schemas",
    "reshape",
    "filters",
    "run_pipeline",
    "PipelineResult"
]
