"""
Tests for configuration system
"""

import pytest
from pathlib import Path
from config.app_config import (
    AppConfig, ContentConfig, ChatConfig, ValidationConfig, UIConfig,
    DEFAULT_DATA_DIR, get_config, reload_config
)
from config.environments import get_environment_config


class TestContentConfig:
    """Test content configuration"""

    def test_default_values(self):
        config = ContentConfig()

        assert config.data_dir == DEFAULT_DATA_DIR
        assert config.limits() == {"goals": 3, "certifications": 5, "projects": 6, "gallery": 8}

    def test_from_secrets_fallback_to_env(self, monkeypatch, tmp_path):
        """Test environment variables are used under pytest"""
        monkeypatch.setenv("PORTFOLIO_DATA_DIR", str(tmp_path))

        config = ContentConfig.from_secrets()

        assert config.data_dir == str(tmp_path)

    def test_from_secrets_default(self, monkeypatch):
        monkeypatch.delenv("PORTFOLIO_DATA_DIR", raising=False)

        assert ContentConfig.from_secrets().data_dir == DEFAULT_DATA_DIR

    def test_default_data_dir_ships_content(self):
        assert (Path(DEFAULT_DATA_DIR) / "profile.json").is_file()


class TestChatAndValidationConfig:
    """Test chat and validation defaults"""

    def test_chat_defaults(self):
        config = ChatConfig()

        assert config.reply_delay_seconds == 1.0
        assert config.tooltip == "Any questions?"

    def test_validation_defaults(self):
        config = ValidationConfig()

        assert (config.name_min_length, config.name_max_length) == (2, 100)
        assert (config.message_min_length, config.message_max_length) == (10, 1000)


class TestAppConfig:
    """Test main application configuration"""

    def test_default_sections(self):
        config = AppConfig()

        assert isinstance(config.content, ContentConfig)
        assert isinstance(config.chat, ChatConfig)
        assert isinstance(config.ui, UIConfig)

    def test_load_reads_content_location(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PORTFOLIO_DATA_DIR", str(tmp_path))

        config = AppConfig.load()

        assert config.content.data_dir == str(tmp_path)
        assert config.logging.level == "INFO"

    def test_validate_defaults_clean(self):
        assert AppConfig().validate() == []

    def test_validate_reports_problems(self, tmp_path):
        config = AppConfig()
        config.content.data_dir = str(tmp_path / "missing")
        config.content.max_projects = -1
        config.chat.reply_delay_seconds = -0.5
        config.validation.name_min_length = 200

        errors = config.validate()

        assert any("Content directory not found" in e for e in errors)
        assert any("'projects'" in e for e in errors)
        assert any("reply delay" in e for e in errors)
        assert any("Name length" in e for e in errors)


class TestGlobalConfig:
    """Test the process-wide instance"""

    def test_get_config_is_cached(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        assert get_config() is get_config()

    def test_reload_config_replaces_instance(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        first = get_config()
        second = reload_config()

        assert second is not first
        assert get_config() is second

    @pytest.mark.parametrize("env", ["development", "production"])
    def test_get_config_uses_environment_class(self, monkeypatch, tmp_path, env):
        """The app-wide config carries the environment class's overrides"""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("APP_ENV", env)

        config = reload_config()
        expected = get_environment_config()

        assert type(config) is type(expected)
        assert config.environment == env
        assert config.debug is expected.debug
        assert config.logging.level == expected.logging.level
        assert config.logging.enable_file_logging is expected.logging.enable_file_logging
        assert config.chat.reply_delay_seconds == expected.chat.reply_delay_seconds
        assert config.ui.app_title == expected.ui.app_title

    def test_development_overrides_reach_app(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("APP_ENV", "development")

        config = reload_config()

        assert config.logging.level == "DEBUG"
        assert config.chat.reply_delay_seconds == 0.5

    def test_production_overrides_reach_app(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("APP_ENV", "production")

        config = reload_config()

        assert config.debug is False
        assert config.logging.level == "INFO"
        assert config.chat.reply_delay_seconds == 1.0
