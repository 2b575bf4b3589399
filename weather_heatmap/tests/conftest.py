import json
from urllib.parse import urlparse, parse_qs

import pytest

from weather_heatmap.app import create_app


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """
    requests.Session 대역
    respond(lat, lng) → FakeResponse 또는 예외
    """

    def __init__(self, respond):
        self.respond = respond
        self.urls = []
        self.closed = False

    def get(self, url, timeout=None):
        self.urls.append(url)
        query = parse_qs(urlparse(url).query)
        lat = float(query["lat"][0])
        lng = float(query["lon"][0])
        result = self.respond(lat, lng)
        if isinstance(result, Exception):
            raise result
        return result

    def close(self):
        self.closed = True


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c
