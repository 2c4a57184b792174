"""Unit tests for the dark chart theme."""

import plotly.graph_objects as go

from state_housing.config import constants, ThemeSettings
from state_housing.plotting.theme import dark_mode_layout


class TestDarkModeLayout:
    """Test layout properties of the dark theme."""
    
    def test_background_and_text(self):
        layout = dark_mode_layout()
        
        assert layout['paper_bgcolor'] == constants.DARCULA
        assert layout['plot_bgcolor'] == constants.DARCULA
        assert layout['font']['color'] == constants.LIGHT_GREY
        assert layout['title']['font']['color'] == constants.LIGHT_GREY
        
    def test_legend_hidden(self):
        assert dark_mode_layout()['showlegend'] is False
        
    def test_axes(self):
        layout = dark_mode_layout()
        
        assert layout['xaxis']['tickfont']['color'] == constants.DARK_GREY
        assert layout['yaxis']['tickfont']['color'] == constants.LIGHT_GREY
        for axis in ('xaxis', 'yaxis'):
            assert layout[axis]['title']['text'] == ''
            assert layout[axis]['linecolor'] == constants.LIGHT_GREY
            assert layout[axis]['gridcolor'] == constants.DARK_GREY
            assert layout[axis]['gridwidth'] == constants.GRID_WIDTH
            assert layout[axis]['tickcolor'] == constants.DARCULA
            
    def test_tooltip_box(self):
        hoverlabel = dark_mode_layout()['hoverlabel']
        
        assert hoverlabel['bgcolor'] == constants.DARCULA
        assert hoverlabel['bordercolor'] == constants.LIGHT_GREY
        assert hoverlabel['font']['color'] == constants.LIGHT_GREY
        
    def test_custom_theme(self):
        theme = ThemeSettings(background='#000000', accent='#222222')
        
        layout = dark_mode_layout(theme)
        
        assert layout['paper_bgcolor'] == '#000000'
        assert layout['xaxis']['gridcolor'] == '#222222'
        
    def test_accepted_by_plotly(self):
        fig = go.Figure()
        fig.update_layout(**dark_mode_layout())
        
        assert fig.layout.plot_bgcolor == constants.DARCULA
        assert fig.layout.xaxis.showline is True
