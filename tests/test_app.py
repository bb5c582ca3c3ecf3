# tests/test_app.py
from app import create_app
from config.config import Config


def test_create_app_without_overrides(tmp_path, monkeypatch):
    data_file = tmp_path / "data.json"
    monkeypatch.setattr(Config, "DATA_FILE", str(data_file))

    app = create_app()

    assert app.config["DATA_FILE"] == str(data_file)
    assert data_file.read_text(encoding="utf-8") == "[]"
    assert app.test_client().get("/health/store").get_json() == {"store": "ok", "records": 0}
