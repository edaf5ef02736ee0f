# ==============================================
# Tests for Configuration
# ==============================================

import pytest

from roster.config import AppConfig, get_config


@pytest.mark.usefixtures("fresh_config")
class TestGetConfig:

    def test_defaults(self):
        assert get_config() == AppConfig()

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("ROSTER_DATA_FILE", "/srv/staff.csv")
        monkeypatch.setenv("ROSTER_ATOMIC_SAVE", "no")
        monkeypatch.setenv("ROSTER_PROMPT_ATTEMPTS", "3")
        monkeypatch.setenv("ROSTER_LOG_LEVEL", "debug")
        config = get_config()
        assert config.data_file == "/srv/staff.csv"
        assert config.atomic_save is False
        assert config.prompt_max_attempts == 3
        assert config.log_level == "DEBUG"

    def test_unbounded_prompts(self, monkeypatch):
        monkeypatch.setenv("ROSTER_PROMPT_ATTEMPTS", "0")
        assert get_config().prompt_max_attempts == 0

    def test_non_numeric_attempts_rejected(self, monkeypatch):
        monkeypatch.setenv("ROSTER_PROMPT_ATTEMPTS", "ten")
        with pytest.raises(ValueError, match="ROSTER_PROMPT_ATTEMPTS"):
            get_config()

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("ROSTER_LOG_LEVEL", "loud")
        with pytest.raises(ValueError, match="ROSTER_LOG_LEVEL"):
            get_config()

    def test_log_level_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("ROSTER_LOG_LEVEL", " info ")
        assert get_config().log_level == "INFO"

    def test_negative_attempts_rejected(self, monkeypatch):
        monkeypatch.setenv("ROSTER_PROMPT_ATTEMPTS", "-1")
        with pytest.raises(ValueError):
            get_config()

    def test_singleton(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("ROSTER_DATA_FILE", "elsewhere.csv")
        assert get_config() is first
