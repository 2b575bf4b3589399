import os

from weather_heatmap.app import app
from weather_heatmap.utils.logger import log

if __name__ == "__main__":
    port = int(os.getenv("PORT", "5000"))
    log(f"🗺 히트맵 서버 시작: http://localhost:{port}/")
    app.run(host="0.0.0.0", port=port)
