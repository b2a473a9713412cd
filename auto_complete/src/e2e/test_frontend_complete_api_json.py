from pathlib import Path
import pytest
from termcomplete.engine import Engine
from frontend.web import app as flask_app
import frontend.web as webmod

def _seed(tmp: Path) -> str:
    p = tmp / "cities.txt"
    p.write_text(
        "3\n"
        "5213000 Toronto, Ontario, Canada\n"
        "136000 Tokushima, Japan\n"
        "13076300 Buenos Aires, Argentina\n",
        encoding="utf-8",
    )
    return str(p)

@pytest.mark.e2e
def test_frontend_complete_api_json(tmp_path: Path, monkeypatch):
    eng = Engine(); eng.load(_seed(tmp_path))
    monkeypatch.setattr(webmod, "_engine", eng)

    client = flask_app.test_client()
    rv = client.get("/api/complete?q=To&k=5")
    assert rv.status_code == 200
    data = rv.get_json()
    assert [r["text"] for r in data] == ["Toronto, Ontario, Canada", "Tokushima, Japan"]
    assert data[0]["weight"] == 5213000

    rv = client.get("/api/complete?q=To&k=1")
    assert len(rv.get_json()) == 1

    assert client.get("/api/complete?q=").get_json() == []
    assert client.get("/api/complete?q=xyz").get_json() == []

    eng.shutdown()

@pytest.mark.e2e
def test_api_without_engine_returns_empty(monkeypatch):
    monkeypatch.setattr(webmod, "_engine", None)
    rv = flask_app.test_client().get("/api/complete?q=a")
    assert rv.status_code == 200 and rv.get_json() == []
