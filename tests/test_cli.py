from __future__ import annotations

from typing import Any

import pytest

from aqirelay import cli


def test_parser_accepts_overrides() -> None:
    args = cli.build_parser().parse_args(["--host", "127.0.0.1", "--port", "8080", "--log-level", "DEBUG"])

    assert args.host == "127.0.0.1"
    assert args.port == 8080
    assert args.log_level == "DEBUG"
    assert args.env_file is None


def test_main_runs_app_with_config(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}

    def fake_run_app(app: Any, *, host: str, port: int, print: Any) -> None:  # noqa: A002
        captured.update(app=app, host=host, port=port)

    monkeypatch.setattr(cli, "load_dotenv", lambda *_args, **_kwargs: False)
    monkeypatch.setattr(cli.web, "run_app", fake_run_app)
    monkeypatch.setenv("WAQI_TOKEN", "cli-token")
    monkeypatch.delenv("RELAY_PORT", raising=False)
    monkeypatch.delenv("RELAY_HOST", raising=False)

    assert cli.main(["--port", "8081"]) == 0
    assert captured["port"] == 8081
    assert captured["host"] == "0.0.0.0"


def test_main_rejects_bad_port_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "load_dotenv", lambda *_args, **_kwargs: False)
    monkeypatch.setenv("RELAY_PORT", "eighty")

    assert cli.main([]) == 2
