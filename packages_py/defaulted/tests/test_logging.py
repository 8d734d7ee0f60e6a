import logging
import pytest
from defaulted import (
    MappingSource,
    UnexpectedKeyError,
    build_config,
    build_secrets,
    get_log_level,
    GuardMode,
    REDACTED,
    is_credential_key,
    redact,
    set_log_level,
    set_log_mask,
)
from defaulted.logger import TRACE


@pytest.fixture
def trace_logs(caplog):
    previous = get_log_level()
    set_log_level("trace")
    caplog.set_level(TRACE, logger="defaulted")
    yield caplog
    set_log_level(previous)


@pytest.fixture
def mask_enabled():
    yield
    set_log_mask(True)


class TestRedact:
    def test_credential_keys(self):
        assert redact("API_KEY", "abc") == REDACTED
        assert redact("db_password", "abc") == REDACTED
        assert is_credential_key("AUTH_HEADER")
        assert not is_credential_key("HOST")

    def test_plain_values(self):
        assert redact("HOST", "example.com") == "example.com"
        assert redact("PORT", 8080) == "8080"
        assert redact("API_KEY", "") == ""

    def test_secrets_mode_always_redacts(self):
        assert redact("HOST", "example.com", GuardMode.SECRETS) == REDACTED
        assert redact("HOST", "", GuardMode.SECRETS) == REDACTED

    def test_mask_switch_only_affects_config(self, mask_enabled):
        set_log_mask(False)
        assert redact("API_KEY", "abc") == "abc"
        assert redact("API_KEY", "abc", GuardMode.SECRETS) == REDACTED


class TestLogLevel:
    def test_set_and_get(self):
        previous = get_log_level()
        set_log_level("debug")
        assert get_log_level() == "debug"
        set_log_level("bogus")
        assert get_log_level() == "debug"
        set_log_level(previous)

    def test_silent_by_default_for_debug(self, caplog):
        previous = get_log_level()
        set_log_level("warn")
        caplog.set_level(logging.DEBUG, logger="defaulted")
        build_config({"HOST": "x"}, source=MappingSource({"HOST": "y"}))
        assert "ENV SET" not in caplog.text
        set_log_level(previous)


class TestResolutionLogs:
    def test_env_values_logged(self, trace_logs):
        build_config({"HOST": "x", "PORT": 1}, source=MappingSource({"HOST": "example.com"}))
        assert "[defaulted] ENV SET: HOST = example.com" in trace_logs.text
        assert "ENV SKIP: PORT" in trace_logs.text

    def test_credential_config_values_redacted(self, trace_logs):
        build_config({"API_TOKEN": "dev"}, source=MappingSource({"API_TOKEN": "supersecret"}))
        assert "supersecret" not in trace_logs.text
        assert "ENV SET: API_TOKEN = [REDACTED]" in trace_logs.text

    def test_secret_values_never_logged(self, trace_logs, mask_enabled):
        set_log_mask(False)
        build_secrets(["PLAIN"], source=MappingSource({"PLAIN": "hunter2"}))
        assert "hunter2" not in trace_logs.text
        assert "ENV SET: PLAIN = [REDACTED]" in trace_logs.text

    def test_failures_logged(self, trace_logs):
        with pytest.raises(UnexpectedKeyError):
            build_config({"A": "a"}, {"x": {"B": "b"}}, source=MappingSource())
        assert any(r.levelno == logging.ERROR for r in trace_logs.records)
