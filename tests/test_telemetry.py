from contextlib import contextmanager

import pytest

from notebox.runtime import telemetry


class FakeLogger:
    def __init__(self):
        self.context = {}
        self.records = []
        self.profiled = []
        self.components = []

    def add_context(self, key, value):
        self.context[key] = value

    def remove_context(self, key):
        del self.context[key]

    @contextmanager
    def profile(self, name):
        self.profiled.append(name)
        yield

    @contextmanager
    def track_component(self, name):
        self.components.append(name)
        yield

    def debug_with(self, message, pairs):
        self.records.append(("debug", message, dict(pairs)))

    def info_with(self, message, pairs):
        self.records.append(("info", message, dict(pairs)))

    def error_with(self, message, pairs):
        self.records.append(("error", message, dict(pairs)))


@pytest.fixture
def fake_logger(monkeypatch):
    logger = FakeLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: logger)
    return logger


def test_env_settings_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_CONSOLE", "LOG_JSON", "LOG_FILE", "LOG_BUFFERED"):
        monkeypatch.delenv(f"NOTEBOX_{name}", raising=False)
    settings = telemetry.env_settings()
    assert settings["level"] == "INFO"
    assert settings["console"] is False
    assert "file" not in settings
    assert "buffer_size" not in settings


def test_env_settings_reads_variables(monkeypatch):
    monkeypatch.setenv("NOTEBOX_LOG_LEVEL", "debug")
    monkeypatch.setenv("NOTEBOX_LOG_CONSOLE", "yes")
    monkeypatch.setenv("NOTEBOX_NO_COLOR", "1")
    monkeypatch.setenv("NOTEBOX_LOG_FILE", "out.log")
    monkeypatch.setenv("NOTEBOX_LOG_BUFFERED", "true")
    monkeypatch.setenv("NOTEBOX_LOG_BUFFER_SIZE", "64")
    settings = telemetry.env_settings()
    assert settings["level"] == "DEBUG"
    assert settings["console"] is True
    assert settings["color"] is False
    assert settings["file"] == "out.log"
    assert settings["buffer_size"] == 64


def test_configure_rejects_config_and_preset():
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="production")


def test_configure_rejects_unknown_preset():
    with pytest.raises(ValueError, match="Unknown log preset"):
        telemetry.configure(preset="verbose")


def test_span_sets_and_clears_context(fake_logger):
    with telemetry.span("store::save", component=True, metadata={"count": 3}) as handle:
        assert fake_logger.context == {"count": "3"}
        handle.add_metadata("path", "notes.json")
    assert fake_logger.context == {}
    assert fake_logger.profiled == ["store::save"]
    assert fake_logger.components == ["store::save"]
    level, message, fields = fake_logger.records[-1]
    assert (level, message) == ("debug", "span::done")
    assert fields["path"] == "notes.json"


def test_span_logs_failure_and_reraises(fake_logger):
    with pytest.raises(RuntimeError):
        with telemetry.span("keymaps::bind", metadata={"view": "list"}):
            raise RuntimeError("boom")
    assert fake_logger.context == {}
    level, message, fields = fake_logger.records[-1]
    assert (level, message) == ("error", "span::fail")
    assert fields["reason"] == "boom"
    assert fields["view"] == "list"


def test_record_event_attaches_data(fake_logger):
    telemetry.record_event("view.switch", data={"view": "editor"})
    assert fake_logger.records == [
        ("info", "event::view.switch", {"event": "view.switch", "view": "editor"})
    ]
