import math
from typing import List, Optional

from ..config import HEATMAP_LAYER_ID
from ..logic.grid import SamplePoint


def _finite(name: str, value: float) -> float:
    # NaN/inf 는 JSON 으로 직렬화되지 않음
    if not math.isfinite(value):
        raise ValueError(f"{name} 는 유한한 숫자여야 합니다: {value}")
    return value


def validate_layer_options(
    layer_id: str = HEATMAP_LAYER_ID,
    opacity: Optional[float] = None,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
    roi: Optional[list] = None,
    framebuffer_factor: Optional[float] = None,
    p: Optional[float] = None,
    average_threshold: Optional[float] = None,
) -> dict:
    """
    표시 옵션 검증 → 라이브러리 키 이름의 dict (points 제외)
    값을 안 준 옵션은 빼서 라이브러리 기본값을 쓰게 한다
    """
    if not layer_id:
        raise ValueError("layer_id 가 비어 있습니다.")

    options = {"layerID": layer_id}

    if opacity is not None:
        if not 0 <= opacity <= 1:
            raise ValueError(f"opacity 는 0~1 사이여야 합니다: {opacity}")
        options["opacity"] = opacity

    if min_value is not None:
        options["minValue"] = _finite("min_value", min_value)
    if max_value is not None:
        options["maxValue"] = _finite("max_value", max_value)
    if min_value is not None and max_value is not None and min_value >= max_value:
        raise ValueError(f"min_value({min_value}) 가 max_value({max_value}) 보다 작아야 합니다.")

    if roi is not None:
        if not isinstance(roi, list):
            raise ValueError(f"roi 는 꼭짓점 목록이어야 합니다: {roi!r}")
        if len(roi) < 3:
            raise ValueError("roi 는 꼭짓점이 3개 이상이어야 합니다.")
        try:
            options["roi"] = [
                {"lat": _finite("roi.lat", float(v["lat"])), "lng": _finite("roi.lng", float(v["lng"]))}
                for v in roi
            ]
        except (KeyError, TypeError) as e:
            raise ValueError(f"roi 꼭짓점 형식 오류: {e}") from e

    if framebuffer_factor is not None:
        if not 0 < framebuffer_factor <= 1:
            raise ValueError(f"framebuffer_factor 는 0 초과 1 이하: {framebuffer_factor}")
        options["framebufferFactor"] = framebuffer_factor

    if p is not None:
        if _finite("p", p) <= 0:
            raise ValueError(f"p 는 양수여야 합니다: {p}")
        options["p"] = p

    if average_threshold is not None:
        if _finite("average_threshold", average_threshold) < 0:
            raise ValueError(f"average_threshold 는 음수일 수 없습니다: {average_threshold}")
        options["averageThreshold"] = average_threshold

    return options


def build_layer_options(points: List[SamplePoint], **display) -> dict:
    """interpolateHeatmapLayer.create() 에 넘길 옵션 조립"""
    options = validate_layer_options(**display)
    return {"points": [point.to_dict() for point in points], **options}
