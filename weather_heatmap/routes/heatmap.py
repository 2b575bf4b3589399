import json

from flask import Blueprint, request, jsonify

from ..config import (
    GRID_START_LAT,
    GRID_START_LNG,
    GRID_END_LAT,
    GRID_END_LNG,
    GRID_N,
    GRID_MAX_N,
    HEATMAP_LAYER_ID,
    HEATMAP_BEFORE_LAYER,
)
from ..logic.grid import Bounds
from ..logic.weather import build_temperature_grid
from ..services.heatmap_service import build_layer_options, validate_layer_options
from ..utils.openweather import WeatherFetchError

heatmap_bp = Blueprint("heatmap", __name__, url_prefix="/heatmap")


def _optional_float(args, name):
    value = args.get(name)
    if value in (None, ""):
        return None
    return float(value)


def _grid_from_args(args):
    bounds = Bounds(
        start_lat=float(args.get("start_lat", GRID_START_LAT)),
        start_lng=float(args.get("start_lng", GRID_START_LNG)),
        end_lat=float(args.get("end_lat", GRID_END_LAT)),
        end_lng=float(args.get("end_lng", GRID_END_LNG)),
    )
    n = int(args.get("n", GRID_N))
    if not 0 < n <= GRID_MAX_N:
        raise ValueError(f"n 은 1~{GRID_MAX_N} 사이여야 합니다: {n}")
    return bounds, n


def _fetch_failed(e: WeatherFetchError):
    return jsonify({"error": str(e), "lat": e.lat, "lng": e.lng, "status": "fail"}), 502


@heatmap_bp.route("/points", methods=["GET"])
def heatmap_points():
    try:
        bounds, n = _grid_from_args(request.args)
        points = build_temperature_grid(bounds, n)
        return jsonify({
            "points": [point.to_dict() for point in points],
            "n": n,
            "status": "ok"
        })

    except ValueError as e:
        return jsonify({"error": str(e), "status": "fail"}), 400
    except WeatherFetchError as e:
        return _fetch_failed(e)
    except RuntimeError as e:
        return jsonify({"error": str(e), "status": "fail"}), 500


@heatmap_bp.route("/layer", methods=["GET"])
def heatmap_layer():
    try:
        args = request.args
        bounds, n = _grid_from_args(args)
        roi = json.loads(args["roi"]) if args.get("roi") else None

        # 포인트 조회 전에 옵션부터 검증 (잘못된 요청으로 n² 요청을 보내지 않게)
        display = dict(
            layer_id=args.get("layer_id", HEATMAP_LAYER_ID),
            opacity=_optional_float(args, "opacity"),
            min_value=_optional_float(args, "min_value"),
            max_value=_optional_float(args, "max_value"),
            roi=roi,
            framebuffer_factor=_optional_float(args, "framebuffer_factor"),
            p=_optional_float(args, "p"),
            average_threshold=_optional_float(args, "average_threshold"),
        )
        validate_layer_options(**display)

        points = build_temperature_grid(bounds, n)
        return jsonify({
            "layer": build_layer_options(points, **display),
            "beforeLayer": args.get("before_layer", HEATMAP_BEFORE_LAYER),
            "status": "ok"
        })

    except ValueError as e:
        # json.JSONDecodeError 도 ValueError
        return jsonify({"error": str(e), "status": "fail"}), 400
    except WeatherFetchError as e:
        return _fetch_failed(e)
    except RuntimeError as e:
        return jsonify({"error": str(e), "status": "fail"}), 500
