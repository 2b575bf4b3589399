# utils/openweather.py

import numbers
import requests
from requests.adapters import HTTPAdapter

from ..config import OPENWEATHER_BASE_URL, WEATHER_REQUEST_TIMEOUT


class WeatherFetchError(Exception):
    """한 좌표의 날씨 조회 실패. 실패한 좌표를 함께 들고 다닌다."""

    def __init__(self, lat: float, lng: float, reason: str):
        self.lat = lat
        self.lng = lng
        self.reason = reason
        super().__init__(f"날씨 조회 실패 (lat={lat}, lng={lng}): {reason}")


class WeatherTransportError(WeatherFetchError):
    pass


class WeatherStatusError(WeatherFetchError):
    def __init__(self, lat: float, lng: float, status_code: int, body: str = ""):
        self.status_code = status_code
        super().__init__(lat, lng, f"HTTP {status_code} {body[:200]}".strip())


class WeatherParseError(WeatherFetchError):
    pass


class WeatherFieldError(WeatherFetchError):
    pass


def build_weather_url(lat: float, lng: float, api_key: str, base_url: str = OPENWEATHER_BASE_URL) -> str:
    """
    OpenWeatherMap 현재 날씨 URL 생성
    <base>?units=metric&lat=<lat>&lon=<lng>&appid=<key>
    """
    return f"{base_url}?units=metric&lat={lat}&lon={lng}&appid={api_key}"


def create_session(max_retries: int = 0) -> requests.Session:
    """워커들이 같이 쓰는 세션. 재시도는 requests 어댑터에 맡긴다."""
    session = requests.Session()
    if max_retries:
        adapter = HTTPAdapter(max_retries=max_retries)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
    return session


def fetch_temperature(
    session,
    lat: float,
    lng: float,
    api_key: str,
    base_url: str = OPENWEATHER_BASE_URL,
    timeout: float = WEATHER_REQUEST_TIMEOUT,
) -> float:
    """
    한 좌표의 현재 기온(°C)을 반환합니다.
    응답 예시: {"main": {"temp": 18.7, ...}, ...}
    """
    url = build_weather_url(lat, lng, api_key, base_url)

    try:
        res = session.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise WeatherTransportError(lat, lng, str(e)) from e

    if not 200 <= res.status_code < 300:
        raise WeatherStatusError(lat, lng, res.status_code, res.text)

    try:
        data = res.json()
    except ValueError as e:
        raise WeatherParseError(lat, lng, f"JSON 파싱 실패: {e}") from e

    main = data.get("main") if isinstance(data, dict) else None
    temp = main.get("temp") if isinstance(main, dict) else None

    # bool 은 numbers.Number 이지만 기온이 아님
    if isinstance(temp, bool) or not isinstance(temp, numbers.Real):
        raise WeatherFieldError(lat, lng, "main.temp 누락")

    return float(temp)
