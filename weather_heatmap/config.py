import os
from dotenv import load_dotenv

load_dotenv()


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    return float(value) if value not in (None, "") else default


def _env_int(name: str, default):
    value = os.getenv(name)
    return int(value) if value not in (None, "") else default


OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY")
OPENWEATHER_BASE_URL = os.getenv(
    "OPENWEATHER_BASE_URL", "https://api.openweathermap.org/data/2.5/weather"
)

MAPBOX_ACCESS_TOKEN = os.getenv("MAPBOX_ACCESS_TOKEN", "")
MAPBOX_STYLE = "mapbox://styles/mapbox/light-v10"

# 기본 격자 범위 (요청 파라미터가 없을 때만 사용)
GRID_START_LAT = _env_float("GRID_START_LAT", -80.0)
GRID_START_LNG = _env_float("GRID_START_LNG", -180.0)
GRID_END_LAT = _env_float("GRID_END_LAT", 80.0)
GRID_END_LNG = _env_float("GRID_END_LNG", 180.0)
GRID_N = _env_int("GRID_N", 10)
GRID_MAX_N = _env_int("GRID_MAX_N", 30)

WEATHER_REQUEST_TIMEOUT = _env_float("WEATHER_REQUEST_TIMEOUT", 10.0)
WEATHER_MAX_RETRIES = _env_int("WEATHER_MAX_RETRIES", 0)
WEATHER_MAX_WORKERS = _env_int("WEATHER_MAX_WORKERS", None)  # None → 포인트당 1개

HEATMAP_LAYER_ID = "temperature"
HEATMAP_BEFORE_LAYER = "road-label"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
