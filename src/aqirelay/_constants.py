"""Internal constants shared across the relay."""

WAQI_BASE_URL = "https://api.waqi.info"
OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"
USER_AGENT = "aqirelay/1.0"

# Delhi airport monitoring station and its coordinates.
DEFAULT_STATION_ID = "A567673"
DEFAULT_LATITUDE = 28.5627
DEFAULT_LONGITUDE = 77.1180
DEFAULT_TIME_ZONE = "Asia/Kolkata"

AIR_QUALITY_TTL_SECONDS: float = 15 * 60
WEATHER_TTL_SECONDS: float = 20.0
AIR_QUALITY_TIMEOUT_SECONDS: float = 5.0
WEATHER_TIMEOUT_SECONDS: float = 3.0

DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 3000

DEFAULT_MESSAGE = "Cleans Air Equivalent to 15 Mature Trees - NHAI - CPA"

# Open-Meteo "current" variables requested for the display.
WEATHER_CURRENT_FIELDS: tuple[str, ...] = ("temperature_2m", "relative_humidity_2m")

# ------------------------------------------------------------------
# Display rendering
# ------------------------------------------------------------------

NOT_AVAILABLE_TEXT = "N/A"
DISPLAY_DECIMALS = 2
UNIT_CONCENTRATION = "µg/m³"
UNIT_CELSIUS = "°C"
UNIT_PERCENT = "%"

SYSTEM_FAILURE_TEXT = "System Failure"
