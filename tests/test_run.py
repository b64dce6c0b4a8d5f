import json
import logging

import pytest

from jsondrop import __version__
from jsondrop import run
from jsondrop.log import JsonFormatter, logging_config


@pytest.fixture
def captured(monkeypatch):
    calls = {}
    monkeypatch.setattr(run, "configure_logging", lambda level: calls.setdefault("level", level))
    monkeypatch.setattr(run.uvicorn, "run", lambda app, **kw: calls.update(app=app, **kw))
    return calls


def test_main_serves_api_with_env_defaults(monkeypatch, captured):
    monkeypatch.setenv("PORT", "9123")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    run.main([])

    assert captured["app"] == "jsondrop.api.run:app"
    assert captured["port"] == 9123
    assert captured["host"] == "0.0.0.0"
    assert captured["reload"] is False
    assert captured["level"] == "DEBUG"
    assert captured["log_config"]["root"]["level"] == logging.DEBUG


def test_flags_override_env(monkeypatch, captured):
    monkeypatch.setenv("PORT", "9123")
    run.main(["--host", "127.0.0.1", "--port", "7000", "--reload"])
    assert (captured["host"], captured["port"], captured["reload"]) == ("127.0.0.1", 7000, True)


def test_version_flag(capsys):
    with pytest.raises(SystemExit):
        run.main(["--version"])
    assert __version__ in capsys.readouterr().out


def test_json_formatter_includes_extras():
    record = logging.LogRecord("jsondrop.test", logging.INFO, __file__, 1, "Record appended", (), None)
    record.count = 3

    line = json.loads(JsonFormatter().format(record))
    assert line["message"] == "Record appended"
    assert line["level"] == "INFO"
    assert line["logger"] == "jsondrop.test"
    assert line["count"] == 3


def test_logging_config_routes_root_through_json_formatter():
    cfg = logging_config("warning")
    assert cfg["root"] == {"level": logging.WARNING, "handlers": ["stdout"]}
    assert cfg["formatters"]["json"]["()"] is JsonFormatter
    assert cfg["handlers"]["stdout"]["stream"] == "ext://sys.stdout"
    assert cfg["disable_existing_loggers"] is False
