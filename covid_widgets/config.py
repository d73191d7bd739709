# covid_widgets/config.py
import os

from dotenv import load_dotenv

load_dotenv()

API_BASE_URL = os.getenv("COVID_API_BASE_URL", "https://api.covid19api.com").rstrip("/")
WORLD_GEOJSON_URL = os.getenv(
  "WORLD_GEOJSON_URL",
  "https://raw.githubusercontent.com/johan/world.geo.json/master/countries.geo.json",
)
API_TIMEOUT = float(os.getenv("COVID_API_TIMEOUT", "30"))
CACHE_TTL_SECONDS = int(os.getenv("CACHE_TTL_SECONDS", "3600"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CONFIRMED_COLOR = "rgb(54, 6, 212)"
RECOVERED_COLOR = "rgb(3, 143, 31)"
DEATHS_COLOR = "rgb(252, 19, 15)"
ACTIVE_COLOR = "rgb(212, 136, 4)"
MISSING_RGBA = [204, 204, 204, 160]

DEFAULT_FILL_BY = "confirmed_delta"
DEFAULT_COLOR_SCHEME = "yelloworangered"
DEFAULT_MAX_SCALE = 25000

CALENDAR_CELL_SIZE = 17
LINE_CHART_HEIGHT = 300
LINE_CHART_WIDTH = 500
