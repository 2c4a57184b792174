"""Settings configuration for the state housing price chart."""

from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, List
import json

from . import constants


@dataclass
class ThemeSettings:
    """Colours and stroke widths of the dark chart theme."""

    background: str = constants.DARCULA
    foreground: str = constants.LIGHT_GREY
    accent: str = constants.DARK_GREY
    tick_color: str = constants.DARCULA
    grid_width: float = constants.GRID_WIDTH
    tick_width: float = constants.TICK_WIDTH
    axis_line_width: float = constants.AXIS_LINE_WIDTH


@dataclass
class Settings:
    """Configuration settings for a chart run."""

    # Data paths
    input_path: str = constants.DEFAULT_INPUT_PATH
    output_path: Optional[str] = None  # HTML file; None opens a viewer

    # Reshape parameters
    tracked_states: List[str] = field(
        default_factory=lambda: list(constants.TRACKED_STATES)
    )
    date_column_offset: int = constants.DATE_COLUMN_OFFSET

    # Chart parameters
    title: str = constants.CHART_TITLE
    width: int = constants.CHART_WIDTH
    height: int = constants.CHART_HEIGHT
    date_format: str = constants.TOOLTIP_DATE_FORMAT
    price_format: str = constants.TOOLTIP_PRICE_FORMAT
    line_width: float = constants.LINE_WIDTH
    line_opacity: float = constants.LINE_OPACITY
    theme: ThemeSettings = field(default_factory=ThemeSettings)

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_json(cls, json_path: str) -> "Settings":
        """Load settings from JSON file."""
        with open(json_path, 'r') as f:
            config = json.load(f)
        return cls.from_dict(config)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "Settings":
        """Create settings from dictionary."""
        config = dict(config_dict)
        theme = config.pop("theme", None)
        if isinstance(theme, dict):
            config["theme"] = ThemeSettings(**theme)
        elif theme is not None:
            config["theme"] = theme
        if "tracked_states" in config:
            config["tracked_states"] = list(config["tracked_states"])
        return cls(**config)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary form, omitting unset values."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    def to_json(self, json_path: str) -> None:
        """Save settings to JSON file."""
        with open(json_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def validate(self) -> None:
        """Validate settings consistency."""
        if not self.tracked_states:
            raise ValueError("At least one tracked state is required")

        if any(not isinstance(s, str) or not s.strip() for s in self.tracked_states):
            raise ValueError("Tracked states must be non-empty strings")

        if len(set(self.tracked_states)) != len(self.tracked_states):
            raise ValueError("Tracked states must not contain duplicates")

        if self.date_column_offset < len(constants.IDENTIFIER_COLUMNS):
            raise ValueError(
                f"Date column offset must be at least "
                f"{len(constants.IDENTIFIER_COLUMNS)}"
            )

        if self.width <= 0 or self.height <= 0:
            raise ValueError("Chart width and height must be positive")

        if self.line_width <= 0:
            raise ValueError("Line width must be positive")

        if self.line_opacity <= 0 or self.line_opacity > 1:
            raise ValueError("Line opacity must be in (0, 1]")

        if self.log_level.upper() not in constants.LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")


def get_default_settings() -> Settings:
    """Get default settings instance."""
    return Settings()
