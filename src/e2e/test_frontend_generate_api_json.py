import pytest
from babble.engine import Engine
from babble_ui.web import app as flask_app

CORPUS = "the cat sat on the mat the cat ran"


@pytest.fixture
def client(monkeypatch):
    eng = Engine(seed=11); eng.build(CORPUS)

    import babble_ui.web as webmod
    monkeypatch.setattr(webmod, "_engine", eng)

    yield flask_app.test_client()
    eng.shutdown()


@pytest.mark.e2e
def test_generate_api_returns_json(client):
    r = client.get("/api/generate?length=4&k=2")
    assert r.status_code == 200
    data = r.get_json()
    assert set(data) == {"text", "phrases", "fallbacks"}
    assert len(data["phrases"]) == 4
    assert data["text"] == " ".join(data["phrases"])
    assert isinstance(data["fallbacks"], int)


def test_generate_api_defaults(client):
    data = client.get("/api/generate").get_json()
    assert len(data["phrases"]) == 12


def test_seeded_requests_repeat(client):
    a = client.get("/api/generate?length=6&k=1&seed=3").get_json()
    b = client.get("/api/generate?length=6&k=1&seed=3").get_json()
    assert a == b


@pytest.mark.parametrize("query", [
    "length=0", "length=-2", "length=501", "length=abc", "k=0", "k=x", "seed=abc", "seed=",
])
def test_bad_params_are_rejected(client, query):
    r = client.get(f"/api/generate?{query}")
    assert r.status_code == 400
    assert "error" in r.get_json()


def test_generate_without_engine(monkeypatch):
    import babble_ui.web as webmod
    monkeypatch.setattr(webmod, "_engine", None)

    r = flask_app.test_client().get("/api/generate")
    assert r.status_code == 503
