from flask import Blueprint, render_template

from ..config import MAPBOX_ACCESS_TOKEN, MAPBOX_STYLE

map_bp = Blueprint("map", __name__)


@map_bp.route("/")
def map_page():
    return render_template(
        "map.html",
        mapbox_token=MAPBOX_ACCESS_TOKEN,
        mapbox_style=MAPBOX_STYLE,
    )
