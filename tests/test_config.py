import logging

from homebills import config
from homebills.config import Settings, cycle_tracer
from homebills.engine.cycle import TRACE_LOGGER_NAME


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("HOMEBILLS_TRACE_CYCLES", raising=False)
        s = Settings()
        assert s.log_level == "INFO"
        assert s.trace_cycles is False
        assert s.upcoming_window_days == 7

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("HOMEBILLS_UPCOMING_WINDOW_DAYS", "14")
        monkeypatch.setenv("HOMEBILLS_TRACE_CYCLES", "true")
        s = Settings()
        assert s.upcoming_window_days == 14
        assert s.trace_cycles is True


class TestCycleTracer:
    def test_disabled(self, monkeypatch):
        monkeypatch.setattr(config.settings, "trace_cycles", False)
        assert cycle_tracer() is None

    def test_enabled(self, monkeypatch):
        monkeypatch.setattr(config.settings, "trace_cycles", True)
        tracer = cycle_tracer()
        assert isinstance(tracer, logging.Logger)
        assert tracer.name == TRACE_LOGGER_NAME

    def test_matches_resolver_logger(self):
        assert config.CYCLE_TRACE_LOGGER == TRACE_LOGGER_NAME


class TestConfigureLogging:
    def test_uses_settings_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        monkeypatch.setattr(config.settings, "log_level", "warning")
        config.configure_logging()
        assert calls[0]["level"] == "WARNING"

    def test_explicit_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        config.configure_logging("debug")
        assert calls[0]["level"] == "DEBUG"
