import io
import logging
import os

import pytest

from deepcli.core.config import Settings, load_settings, require_api_key
from deepcli.core.errors import ConfigurationError
from deepcli.core.logging import configure_logging


def test_env_file_provides_api_key(env_file):
    settings = load_settings(env_file)
    assert settings.deepseek_api_key == "sk-test"


def test_process_environment_wins_over_env_file(env_file, monkeypatch):
    monkeypatch.setenv("DEEPSEEK_API_KEY", "sk-from-env")
    assert load_settings(env_file).deepseek_api_key == "sk-from-env"


def test_missing_env_file_falls_back_to_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("DEEPSEEK_API_KEY", "sk-from-env")
    settings = load_settings(tmp_path / "does-not-exist.env")
    assert settings.deepseek_api_key == "sk-from-env"


def test_unrelated_keys_in_env_file_are_ignored(tmp_path, monkeypatch):
    monkeypatch.delenv("DEEPSEEK_API_KEY", raising=False)
    path = tmp_path / ".env"
    path.write_text("OTHER_TOOL_TOKEN=abc\nDEEPSEEK_API_KEY=sk-test\n", encoding="utf-8")

    assert load_settings(path).deepseek_api_key == "sk-test"


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root can read any file")
def test_unreadable_env_file_logs_warning(tmp_path, monkeypatch):
    monkeypatch.setenv("DEEPSEEK_API_KEY", "sk-from-env")
    path = tmp_path / ".env"
    path.write_text("DEEPSEEK_API_KEY=sk-test\n", encoding="utf-8")
    path.chmod(0)
    stream = io.StringIO()
    configure_logging(verbose=False, stream=stream)

    try:
        settings = load_settings(path)
    finally:
        path.chmod(0o600)

    assert settings.deepseek_api_key == "sk-from-env"
    assert "Warning: error loading" in stream.getvalue()


def test_empty_api_key_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="DEEPSEEK_API_KEY"):
        require_api_key(Settings(_env_file=None, deepseek_api_key=""))


def test_request_timeout(monkeypatch):
    monkeypatch.delenv("DEEPCLI_TIMEOUT", raising=False)
    assert Settings(_env_file=None).request_timeout() == 300.0

    monkeypatch.setenv("DEEPCLI_TIMEOUT", "0")
    assert Settings(_env_file=None).request_timeout() is None

    monkeypatch.setenv("DEEPCLI_TIMEOUT", "12.5")
    assert Settings(_env_file=None).request_timeout() == 12.5


class TestConfigureLogging:
    def test_verbose_emits_debug_messages(self):
        stream = io.StringIO()
        configure_logging(verbose=True, stream=stream)

        logging.getLogger("deepcli.services.input_service").debug("reading stdin")

        assert "Verbose mode enabled" in stream.getvalue()
        assert "reading stdin" in stream.getvalue()

    def test_quiet_mode_hides_debug_but_keeps_warnings(self):
        stream = io.StringIO()
        configure_logging(verbose=False, stream=stream)

        logging.getLogger("deepcli.core.config").debug("hidden")
        logging.getLogger("deepcli.core.config").warning("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_reconfiguring_replaces_the_handler(self):
        first, second = io.StringIO(), io.StringIO()
        configure_logging(verbose=True, stream=first)
        configure_logging(verbose=True, stream=second)

        logging.getLogger("deepcli").debug("once")

        assert "once" not in first.getvalue()
        assert second.getvalue().count("once") == 1


def test_invalid_timeout_in_env_file_is_a_configuration_error(tmp_path, monkeypatch):
    monkeypatch.delenv("DEEPCLI_TIMEOUT", raising=False)
    path = tmp_path / ".env"
    path.write_text("DEEPSEEK_API_KEY=sk-test\nDEEPCLI_TIMEOUT=soon\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="DEEPCLI_TIMEOUT"):
        load_settings(path)


def test_invalid_timeout_in_environment_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("DEEPCLI_TIMEOUT", "soon")

    with pytest.raises(ConfigurationError, match="DEEPCLI_TIMEOUT"):
        load_settings(None)
