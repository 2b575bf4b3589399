from flask import Flask
from .routes.heatmap import heatmap_bp
from .routes.map_page import map_bp


def create_app() -> Flask:
    app = Flask(__name__)

    app.register_blueprint(map_bp)
    app.register_blueprint(heatmap_bp)

    return app


app = create_app()

if __name__ == "__main__":
    app.run()
