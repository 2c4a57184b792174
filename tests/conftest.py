"""Pytest configuration and shared fixtures."""

import numpy as np
import pandas as pd
import pytest

from fixtures.sample_data_generator import generate_wide_price_data


@pytest.fixture
def scenario_prices():
    """Small wide table in SizeRank/RegionName/StateName-first layout."""
    return pd.DataFrame({
        'SizeRank': [2, 1, 3],
        'RegionName': ['Texas', 'New York', 'California'],
        'StateName': ['TX', 'NY', 'CA'],
        'RegionID': [54, 43, 9],
        'RegionType': ['state', 'state', 'state'],
        '2020-01-31': [250000.0, 500000.0, 700000.0],
        '2020-02-29': [255000.0, np.nan, 710000.0],
        '2020-03-31': [260000.0, 510000.0, np.nan],
    })


@pytest.fixture
def generated_prices():
    """Zillow-layout wide table with some empty cells."""
    return generate_wide_price_data(n_months=12, missing_prob=0.2, seed=7)


@pytest.fixture
def prices_csv(tmp_path, generated_prices):
    """Generated wide table written to CSV."""
    path = tmp_path / 'state_housing_data.csv'
    generated_prices.to_csv(path, index=False)
    return path


@pytest.fixture
def restore_root_logger():
    """Undo handler changes made by configure_logging."""
    import logging
    
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
