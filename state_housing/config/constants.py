"""Constants for the state housing price chart."""

# Wide input layout
SIZE_RANK_COLUMN = "SizeRank"
REGION_NAME_COLUMN = "RegionName"
STATE_NAME_COLUMN = "StateName"
IDENTIFIER_COLUMNS = [SIZE_RANK_COLUMN, REGION_NAME_COLUMN, STATE_NAME_COLUMN]
DATE_COLUMN_OFFSET = 5  # Price history starts at the sixth column
DATE_FORMAT = "%Y-%m-%d"
DATE_COLUMN_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# Tidy output columns
SIZE = "size"
REGION = "region"
STATE = "state"
DATE = "date"
PRICE = "price"
OBSERVATION_COLUMNS = [SIZE, REGION, STATE, DATE, PRICE]

# Renames applied to the identifier block before reshaping
IDENTIFIER_RENAMES = {
    SIZE_RANK_COLUMN: SIZE,
    REGION_NAME_COLUMN: REGION,
    STATE_NAME_COLUMN: STATE,
}

# States plotted by default (exact, case-sensitive codes)
TRACKED_STATES = ("CA", "MA", "RI", "HI", "FL", "NY", "WV", "DC", "WA", "CO")

# Input
DEFAULT_INPUT_PATH = "data/state_housing_data.csv"
SUPPORTED_INPUT_FORMATS = [".csv", ".parquet", ".feather"]

# Chart
CHART_TITLE = "Zillow SFR/Condo Average Sale Price"
CHART_WIDTH = 900
CHART_HEIGHT = 800
TOOLTIP_DATE_FORMAT = "%b %Y"  # Month year, e.g. "Jan 2020"
TOOLTIP_PRICE_FORMAT = "$,"  # d3 currency with thousands separator
LINE_WIDTH = 2
LINE_OPACITY = 0.7

# Dark mode palette
DARCULA = "#393939"
LIGHT_GREY = "lightgray"
DARK_GREY = "#696969"
GRID_WIDTH = 0.3
TICK_WIDTH = 1
AXIS_LINE_WIDTH = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
