# utils/logger.py

import logging

from ..config import LOG_LEVEL

FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
logging.basicConfig(level=LOG_LEVEL, format=FORMAT)

logger = logging.getLogger("weather_heatmap")

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def log(msg, level="info"):
    """
    사용 예:
    log("격자 생성 완료")
    log("요청 실패", level="error")
    모르는 level 은 info 로 기록
    """
    logger.log(_LEVELS.get(level, logging.INFO), msg)


def log_fetch_error(error):
    """좌표 조회 실패를 좌표 필드와 함께 기록 (WeatherFetchError)"""
    logger.error("❌ %s", error, extra={"lat": error.lat, "lng": error.lng})
