"""End-to-end integration tests for the state-housing pipeline."""

import logging

import pytest
import pandas as pd
import plotly.graph_objects as go
from unittest.mock import patch

from state_housing import run_pipeline, PipelineResult
from state_housing.config import constants, Settings
from state_housing.data import load_price_history, melt_price_history


class TestEndToEndPipeline:
    """Test the pipeline from CSV to chart."""
    
    def test_complete_pipeline(self, tmp_path, prices_csv, generated_prices):
        output = tmp_path / 'chart.html'
        settings = Settings(input_path=str(prices_csv), output_path=str(output))
        
        result = run_pipeline(settings)
        
        assert isinstance(result, PipelineResult)
        assert result.output_path == output
        assert output.exists()
        assert result.execution_time_seconds >= 0
        
        points = result.observations
        assert list(points.columns) == constants.OBSERVATION_COLUMNS
        assert set(points['state']) <= set(constants.TRACKED_STATES)
        assert points['price'].notna().all()
        assert points['size'].is_monotonic_increasing
        
        tracked = generated_prices[generated_prices['StateName'].isin(constants.TRACKED_STATES)]
        date_columns = list(generated_prices.columns[5:])
        assert len(points) == int(tracked[date_columns].notna().sum().sum())
        
    def test_one_line_per_tracked_region(self, prices_csv):
        settings = Settings(input_path=str(prices_csv))
        
        result = run_pipeline(settings, show=False)
        
        assert result.output_path is None
        assert len(result.figure.data) == result.observations['region'].nunique()
        assert result.figure.layout.width == 900
        assert result.figure.layout.height == 800
        
    def test_unfiltered_count_bound(self, prices_csv):
        wide = load_price_history(prices_csv)
        n_rows, n_dates = len(wide), len(wide.columns) - 5
        
        long = melt_price_history(wide, drop_empty=False)
        dropped = melt_price_history(wide)
        
        assert len(long) == n_rows * n_dates
        assert len(dropped) == n_rows * n_dates - int(wide.iloc[:, 5:].isna().sum().sum())
        
    def test_show_without_output(self, prices_csv):
        settings = Settings(input_path=str(prices_csv))
        
        with patch.object(go.Figure, 'show') as mock_show:
            result = run_pipeline(settings)
            
        mock_show.assert_called_once()
        assert result.output_path is None
        
    def test_new_york_row_through_csv(self, tmp_path):
        path = tmp_path / 'prices.csv'
        path.write_text(
            "SizeRank,RegionName,StateName,RegionID,RegionType,2020-01-31,2020-02-29\n"
            "2,Texas,TX,54,state,250000,255000\n"
            "1,New York,NY,43,state,500000,\n"
        )
        
        result = run_pipeline(Settings(input_path=str(path)), show=False)
        points = result.observations
        
        assert len(points) == 1
        row = points.iloc[0]
        assert (row['size'], row['region'], row['state']) == (1, 'New York', 'NY')
        assert row['date'] == pd.Timestamp('2020-01-31')
        assert row['price'] == 500000.0
        
    def test_state_summary_logged_at_debug(self, prices_csv, caplog):
        with caplog.at_level(logging.DEBUG, logger='state_housing.pipeline'):
            run_pipeline(Settings(input_path=str(prices_csv)), show=False)
            
        assert any('observations,' in r.getMessage() and r.levelno == logging.DEBUG
                   for r in caplog.records)
        
    def test_state_summary_skipped_above_debug(self, prices_csv, caplog):
        caplog.set_level(logging.INFO, logger='state_housing.pipeline')
        
        with patch('state_housing.pipeline.logger.debug') as mock_debug:
            run_pipeline(Settings(input_path=str(prices_csv)), show=False)
            
        mock_debug.assert_not_called()
        
    def test_invalid_settings_rejected(self, prices_csv):
        settings = Settings(input_path=str(prices_csv), tracked_states=[])
        
        with pytest.raises(ValueError):
            run_pipeline(settings, show=False)
