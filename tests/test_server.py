import pytest
from fastapi.testclient import TestClient

from delve import export, procgen
from delve.server import app, SEED_HEADER


@pytest.fixture
def client():
    return TestClient(app)


def test_root(client):
    rv = client.get("/")
    assert rv.status_code == 200
    body = rv.json()
    assert body["status"] == "ok"
    assert body["config"]["min_room_size"] < body["config"]["max_room_size"]


def test_dungeon(client):
    rv = client.get("/dungeon", params={"seed": 7, "width": 40, "height": 30})
    assert rv.status_code == 200
    assert rv.headers["content-type"] == "application/x-msgpack"
    assert rv.headers[SEED_HEADER] == "7"

    grid, start = export.unpack(rv.content)
    assert (grid.width, grid.height) == (40, 30)
    assert not grid.is_blocked(*start)

    again = client.get("/dungeon", params={"seed": 7, "width": 40, "height": 30})
    assert again.content == rv.content


def test_dungeon_random_seed(client):
    rv = client.get("/dungeon")
    assert rv.status_code == 200
    seed = int(rv.headers[SEED_HEADER])
    again = client.get("/dungeon", params={"seed": seed})
    assert again.content == rv.content


def test_dungeon_png(client):
    rv = client.get("/dungeon.png", params={"seed": 1})
    assert rv.status_code == 200
    assert rv.headers["content-type"] == "image/png"
    assert rv.content.startswith(b"\x89PNG")


def test_dungeon_too_small(client):
    rv = client.get("/dungeon", params={"width": 5, "height": 5})
    assert rv.status_code == 400
    assert "do not fit" in rv.text


@pytest.mark.parametrize("params", [
    {"width": 200000, "height": 200000},
    {"width": 40, "height": 200000},
    {"width": 0},
    {"height": 0},
])
def test_dungeon_bad_size(client, monkeypatch, params):
    calls = []
    monkeypatch.setattr(procgen, "generate", lambda *a: calls.append(a))
    rv = client.get("/dungeon", params=params)
    assert rv.status_code == 400
    assert calls == []
