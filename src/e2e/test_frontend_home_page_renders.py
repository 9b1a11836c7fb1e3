import pytest
from babble.engine import Engine
from babble_ui.web import app as flask_app


@pytest.mark.e2e
def test_frontend_home_page_renders(monkeypatch):
    eng = Engine(); eng.build("hello world babble demo line")

    import babble_ui.web as webmod
    monkeypatch.setattr(webmod, "_engine", eng)

    client = flask_app.test_client()
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "babble" in html
    assert "/api/generate" in html

    eng.shutdown()
