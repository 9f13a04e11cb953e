from pathlib import Path

from config import Settings, database_url_for, load_settings


def test_defaults(monkeypatch):
    for name in ("SHARE_DB", "SHARE_BIND", "SHARE_STORE", "SHARE_MAX_FILE_SIZE"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.database_url == "sqlite:///./db.sqlite"
    assert settings.host == "127.0.0.1"
    assert settings.port == 8080
    assert settings.store_dir == Path("./store")
    assert settings.max_upload_bytes == 10 * 1024 * 1024


def test_environment_and_overrides(monkeypatch):
    monkeypatch.setenv("SHARE_DB", "/tmp/share.db")
    monkeypatch.setenv("SHARE_BIND", "0.0.0.0:9000")
    monkeypatch.setenv("SHARE_MAX_FILE_SIZE", "25")

    settings = load_settings(store_dir="/srv/blobs", bind=None)

    assert settings.database_url == "sqlite:////tmp/share.db"
    assert (settings.host, settings.port) == ("0.0.0.0", 9000)
    assert settings.store_dir == Path("/srv/blobs")
    assert settings.max_upload_bytes == 25 * (1 << 20)


def test_database_url_for():
    assert database_url_for("db.sqlite") == "sqlite:///db.sqlite"
    assert database_url_for("postgresql://u@h/db") == "postgresql://u@h/db"


def test_bind_without_port():
    assert Settings(bind="localhost").port == 8080
