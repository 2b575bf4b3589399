# logic/grid.py

from dataclasses import dataclass
from typing import List


@dataclass
class SamplePoint:
    lat: float
    lng: float
    val: float = 0.0

    def to_dict(self) -> dict:
        # 히트맵 레이어가 읽는 키 이름 그대로
        return {"lat": self.lat, "lng": self.lng, "val": self.val}


@dataclass(frozen=True)
class Bounds:
    start_lat: float
    start_lng: float
    end_lat: float
    end_lng: float

    def __post_init__(self):
        for name in ("start_lat", "end_lat"):
            if not -90 <= getattr(self, name) <= 90:
                raise ValueError(f"{name} 범위 오류: {getattr(self, name)}")
        for name in ("start_lng", "end_lng"):
            if not -180 <= getattr(self, name) <= 180:
                raise ValueError(f"{name} 범위 오류: {getattr(self, name)}")


def generate_grid(start_lat: float, start_lng: float, end_lat: float, end_lng: float, n: int) -> List[SamplePoint]:
    """
    경계 상자를 n×n 으로 나눈 샘플 포인트 목록 (row-major, i=위도, j=경도)
    끝 경계 자체는 포함되지 않음: 마지막 점은 start + (n-1)/n * (end - start)
    """
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise ValueError(f"n 은 양의 정수여야 합니다: {n!r}")

    points = []
    for i in range(n):
        for j in range(n):
            points.append(SamplePoint(
                lat=start_lat + i * (end_lat - start_lat) / n,
                lng=start_lng + j * (end_lng - start_lng) / n,
            ))
    return points


def generate_grid_for(bounds: Bounds, n: int) -> List[SamplePoint]:
    return generate_grid(bounds.start_lat, bounds.start_lng, bounds.end_lat, bounds.end_lng, n)
