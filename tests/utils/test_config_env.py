import importlib
import logging
import os
import sys
import types
from pathlib import Path

import pytest


def _reload_config():
    sys.modules.pop("bookquotes.config", None)
    return importlib.import_module("bookquotes.config")


def test_dotenv_present_but_fails_to_load(monkeypatch, tmp_path):
    tmp_path.joinpath(".env").write_text("SCRAPE_DELAY_MS=10")
    monkeypatch.chdir(tmp_path)

    fake = types.SimpleNamespace(load_dotenv=lambda: False)
    monkeypatch.setitem(sys.modules, "dotenv", fake)
    with pytest.raises(RuntimeError):
        _reload_config()


def test_dotenv_loads_sets_variables(monkeypatch, tmp_path):
    tmp_path.joinpath(".env").write_text("SCRAPE_DELAY_MS=2500\nCORS_ORIGINS=http://a.test, http://b.test\n")
    monkeypatch.chdir(tmp_path)
    # registered so teardown restores whatever the fake loader writes
    monkeypatch.setenv("SCRAPE_DELAY_MS", "")
    monkeypatch.setenv("CORS_ORIGINS", "")

    def fake_load():
        # emulate dotenv behavior: read .env and set os.environ
        for line in Path(".env").read_text().splitlines():
            if "=" in line:
                k, v = line.split("=", 1)
                os.environ[k] = v
        return True

    monkeypatch.setitem(sys.modules, "dotenv", types.SimpleNamespace(load_dotenv=fake_load))
    cfg = _reload_config()
    assert cfg.scrape_delay_ms() == 2500
    assert cfg.cors_origins() == ["http://a.test", "http://b.test"]


def test_defaults_when_unset(monkeypatch):
    cfg = importlib.import_module("bookquotes.config")
    for name in ("DATABASE_URL", "SCRAPE_DELAY_MS", "SERVER_PORT", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    assert cfg.database_url() == "sqlite:///data/quotes.db"
    assert cfg.scrape_delay_ms() == 1500
    assert cfg.server_port() == 3001
    assert cfg.cors_origins() == ["*"]


def test_invalid_int_falls_back_and_logs(monkeypatch, caplog):
    cfg = importlib.import_module("bookquotes.config")
    monkeypatch.setenv("SERVER_PORT", "not-a-port")
    caplog.set_level(logging.ERROR)

    assert cfg.server_port() == 3001
    assert "Invalid SERVER_PORT" in caplog.text
