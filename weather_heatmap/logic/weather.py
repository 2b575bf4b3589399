# logic/weather.py

import time
from concurrent.futures import ThreadPoolExecutor, wait, FIRST_EXCEPTION
from typing import Callable, List, Optional

from ..config import (
    OPENWEATHER_API_KEY,
    OPENWEATHER_BASE_URL,
    WEATHER_REQUEST_TIMEOUT,
    WEATHER_MAX_RETRIES,
    WEATHER_MAX_WORKERS,
)
from ..utils.logger import log, log_fetch_error
from ..utils.openweather import WeatherFetchError, create_session, fetch_temperature
from .grid import Bounds, SamplePoint, generate_grid_for


def fetch_values(
    points: List[SamplePoint],
    fetch: Callable[[SamplePoint], float],
    max_workers: Optional[int] = None,
) -> List[SamplePoint]:
    """
    포인트마다 fetch(point) 를 동시에 실행하고, 모두 끝난 뒤 i번째 결과를 i번째 포인트에 기록.
    하나라도 실패하면 아직 시작 안 된 요청은 취소하고 예외를 그대로 올린다 (포인트 값은 변경되지 않음).
    """
    if not points:
        return points

    with ThreadPoolExecutor(max_workers=max_workers or len(points)) as executor:
        # futures[i] ↔ points[i]
        futures = [executor.submit(fetch, point) for point in points]
        done, not_done = wait(futures, return_when=FIRST_EXCEPTION)

        for future in not_done:
            future.cancel()

        errors = [f.exception() for f in futures if f in done and f.exception() is not None]
        if errors:
            for error in errors:
                if isinstance(error, WeatherFetchError):
                    log_fetch_error(error)
            raise errors[0]

        results = [future.result() for future in futures]

    for point, value in zip(points, results):
        point.val = value
    return points


def fetch_temperature_grid(
    points: List[SamplePoint],
    api_key: Optional[str] = None,
    base_url: str = OPENWEATHER_BASE_URL,
    timeout: float = WEATHER_REQUEST_TIMEOUT,
    max_retries: int = WEATHER_MAX_RETRIES,
    max_workers: Optional[int] = WEATHER_MAX_WORKERS,
    session=None,
) -> List[SamplePoint]:
    """
    격자 전체의 기온을 OpenWeatherMap 에서 병렬로 받아 val 에 채움
    session 을 넘기면 그 세션을 쓰고 닫지 않음
    """
    api_key = api_key or OPENWEATHER_API_KEY
    if not api_key:
        raise RuntimeError("OPENWEATHER_API_KEY 가 설정되지 않았습니다.")

    own_session = session is None
    if own_session:
        session = create_session(max_retries)

    log(f"🌤 기온 조회 시작: {len(points)}개 포인트")
    started = time.monotonic()
    try:
        fetch_values(
            points,
            lambda p: fetch_temperature(session, p.lat, p.lng, api_key, base_url, timeout),
            max_workers=max_workers,
        )
    finally:
        if own_session:
            session.close()

    log(f"✅ 기온 조회 완료: {len(points)}개, {time.monotonic() - started:.2f}s")
    return points


def build_temperature_grid(bounds: Bounds, n: int, **kwargs) -> List[SamplePoint]:
    """격자 생성 + 기온 조회를 한 번에"""
    points = generate_grid_for(bounds, n)
    return fetch_temperature_grid(points, **kwargs)
