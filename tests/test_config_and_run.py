"""
Tests for environment-driven settings and the process entry point.
"""

import importlib
import logging
import socket

import pytest

from aws_demo_api import run
from aws_demo_api.app.core import config
from aws_demo_api.app.core.logging_config import setup_logging


@pytest.fixture
def reload_config(monkeypatch):
    """Re-read ``Settings`` defaults from a patched environment."""

    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config, monkeypatch):
    for key in ("DB_URL", "SERVER_PORT", "SERVER_HOST", "SEED_SAMPLE_DATA"):
        monkeypatch.delenv(key, raising=False)

    module = reload_config()
    settings = module.Settings()

    assert settings.server_port == 8080
    assert settings.server_host == "0.0.0.0"
    assert settings.database_url == "sqlite:///aws_demo.db"
    assert settings.seed_sample_data is True


def test_environment_overrides(reload_config):
    module = reload_config(
        DB_URL="sqlite:///tmp/other.db",
        DB_USER="demo",
        DB_PASSWORD="secret",
        SERVER_PORT="9090",
        SEED_SAMPLE_DATA="no",
    )
    settings = module.Settings()

    assert settings.database_url == "sqlite:///tmp/other.db"
    assert settings.database_user == "demo"
    assert settings.database_password == "secret"
    assert settings.server_port == 9090
    assert settings.seed_sample_data is False


def test_parse_args_uses_settings_defaults(monkeypatch):
    monkeypatch.setattr(run.settings, "server_port", 8181)

    args = run.parse_args([])

    assert args.port == 8181
    assert run.parse_args(["--port", "9000", "--host", "127.0.0.1"]).port == 9000


def test_main_exits_with_one_when_store_cannot_open(monkeypatch):
    monkeypatch.setattr(run.settings, "database_url", "postgresql://db.example.com/users")
    monkeypatch.setattr(run.settings, "seed_sample_data", False)

    assert run.main(["--host", "127.0.0.1", "--port", "0"]) == 1


def test_main_exits_with_one_when_port_is_taken(monkeypatch, tmp_path):
    monkeypatch.setattr(run.settings, "database_url", f"sqlite:///{tmp_path / 'users.db'}")
    monkeypatch.setattr(run.settings, "seed_sample_data", False)

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as busy:
        busy.bind(("127.0.0.1", 0))
        busy.listen(1)
        port = busy.getsockname()[1]

        assert run.main(["--host", "127.0.0.1", "--port", str(port)]) == 1


def test_setup_logging_applies_level_on_every_call():
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging("DEBUG")
        assert root.level == logging.DEBUG
        setup_logging("not-a-level")
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)
