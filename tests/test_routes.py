"""HTTP surface tests."""

import pytest
from fastapi.testclient import TestClient

from main import create_app


@pytest.fixture
def client(bot_manager):
    with TestClient(create_app(bot_manager=bot_manager)) as c:
        yield c


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200 and r.json() == {"message": "Server Running"}


def test_create_list_inspect_delete(client, workspace):
    r = client.post("/create", json={"name": "alpha", "token": "tok"})
    assert r.status_code == 200
    assert r.json()["folder"] == str(workspace.path / "alpha")

    assert client.get("/directories").json() == {"directories": ["alpha"]}

    r = client.get("/app/alpha")
    assert r.status_code == 200
    body = r.json()
    assert body["config"] == {"bot_token": "tok", "prefix": "!"}
    assert body["plugins"] == [] and body["manifest"] is None

    assert client.delete("/delete/alpha").status_code == 200
    assert client.get("/app/alpha").status_code == 404
    r = client.delete("/delete/alpha")
    assert r.status_code == 404
    assert r.json()["detail"]["kind"] == "not_found"


def test_create_requires_name_and_token(client):
    r = client.post("/create", json={"name": "alpha"})
    assert r.status_code == 400
    assert r.json()["detail"]["kind"] == "validation_error"


def test_create_duplicate(client):
    client.post("/create", json={"name": "alpha", "token": "tok"})

    r = client.post("/create", json={"name": "alpha", "token": "tok"})

    assert r.status_code == 409
    assert r.json()["detail"]["kind"] == "already_exists"


def test_add_plugin(client):
    client.post("/create", json={"name": "alpha", "token": "tok"})

    r = client.post("/plugin/add/alpha/welcome")
    assert r.status_code == 200
    assert client.get("/app/alpha").json()["plugins"] == ["welcome"]

    r = client.post("/plugin/add/alpha/welcome")
    assert r.status_code == 409


def test_add_plugin_not_found(client):
    assert client.post("/plugin/add/ghost/welcome").status_code == 404

    client.post("/create", json={"name": "alpha", "token": "tok"})
    r = client.post("/plugin/add/alpha/unknown")
    assert r.status_code == 404
    assert "unknown" in r.json()["detail"]["error"]


def test_update_config(client):
    client.post("/create", json={"name": "alpha", "token": "tok"})

    client.patch("/config/update/alpha", json={"prefix": "?"})
    r = client.patch("/config/update/alpha", json={"extra": "v"})

    assert r.status_code == 200
    assert r.json()["updatedConfig"] == {"bot_token": "tok", "prefix": "?", "extra": "v"}


def test_update_config_unknown_bot(client):
    r = client.patch("/config/update/ghost", json={"prefix": "?"})
    assert r.status_code == 404


def test_module_level_app_serves():
    import main

    with TestClient(main.app) as c:
        assert c.get("/").json() == {"message": "Server Running"}
        assert main.app.state.bot_manager.workspace.path.is_dir()
