import io

import pytest
from PIL import Image

from octave_noise.app import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    body = r.get_json()
    assert body["ok"] is True
    assert body["default_octaves"] == 12
    assert r.headers["Access-Control-Allow-Origin"] == "*"


def test_noise_png(client):
    r = client.get("/noise.png?octaves=3&seed=5")
    assert r.status_code == 200
    assert r.headers["Content-Type"] == "image/png"
    img = Image.open(io.BytesIO(r.data))
    assert img.size == (8, 8)
    assert img.mode == "L"


def test_noise_png_seeded(client):
    a = client.get("/noise.png?octaves=4&size=20&seed=7").data
    b = client.get("/noise.png?octaves=4&size=20&seed=7").data
    assert a == b
    assert Image.open(io.BytesIO(a)).size == (20, 20)


@pytest.mark.parametrize("query", [
    "octaves=abc",
    "seed=x",
    "octaves=0",
    "octaves=3&size=0",
    "size=5000",
    "seed=-1",
    "octaves=40",
])
def test_noise_png_bad_params(client, query):
    r = client.get(f"/noise.png?{query}")
    assert r.status_code == 400
    assert "error" in r.get_json()


def test_noise_png_default_octaves(client):
    from octave_noise.config import DEFAULT_PREVIEW_OCTAVES

    assert client.get("/").get_json()["preview_octaves"] == DEFAULT_PREVIEW_OCTAVES
    r = client.get("/noise.png?seed=1")
    assert r.status_code == 200
    side = 1 << DEFAULT_PREVIEW_OCTAVES
    assert Image.open(io.BytesIO(r.data)).size == (side, side)
