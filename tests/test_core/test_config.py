"""Tests for application configuration settings."""

import os
from unittest.mock import patch

import pytest

from geodoc.core.config import Settings
from geodoc.models import ProjectionConfig


class TestProjectionSettings:
    """Test language and extra-tag settings."""

    def test_should_have_default_languages(self):
        """Test LANGUAGES has the expected default value."""
        # Arrange & Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.LANGUAGES == ["en", "de", "fr", "it"]
        assert settings.EXTRA_TAGS == []

    def test_should_parse_comma_separated_languages(self):
        """Test LANGUAGES accepts a comma-separated environment value."""
        # Arrange & Act
        with patch.dict(os.environ, {"LANGUAGES": "en, de ,,nl"}):
            settings = Settings(_env_file=None)

        # Assert
        assert settings.LANGUAGES == ["en", "de", "nl"]

    def test_should_parse_json_extra_tags(self):
        """Test EXTRA_TAGS accepts a JSON list environment value."""
        # Arrange & Act
        with patch.dict(os.environ, {"EXTRA_TAGS": '["wikidata", "website"]'}):
            settings = Settings(_env_file=None)

        # Assert
        assert settings.EXTRA_TAGS == ["wikidata", "website"]

    def test_should_accept_empty_extra_tags(self):
        """Test an empty EXTRA_TAGS value yields no keys."""
        # Arrange & Act
        with patch.dict(os.environ, {"EXTRA_TAGS": ""}):
            settings = Settings(_env_file=None)

        # Assert
        assert settings.EXTRA_TAGS == []

    def test_should_raise_validation_error_for_malformed_json(self):
        """Test a broken JSON list is rejected."""
        # Arrange & Act & Assert
        with patch.dict(os.environ, {"LANGUAGES": '["en",'}):
            with pytest.raises(ValueError):
                Settings(_env_file=None)


class TestProjectionConfigSnapshot:
    """Test conversion of settings into a projection configuration."""

    def test_should_snapshot_settings(self):
        """Test projection_config copies languages and extra tags."""
        # Arrange
        settings = Settings(_env_file=None, LANGUAGES=["en", "fr"], EXTRA_TAGS=["wikidata"])

        # Act
        config = settings.projection_config()

        # Assert
        assert isinstance(config, ProjectionConfig)
        assert config.languages == ("en", "fr")
        assert config.extra_tags == ("wikidata",)

    def test_should_drop_duplicate_languages(self):
        """Test duplicate language codes are collapsed in the snapshot."""
        # Arrange
        settings = Settings(_env_file=None, LANGUAGES=["en", "fr", "en"])

        # Act
        config = settings.projection_config()

        # Assert
        assert config.languages == ("en", "fr")

    def test_snapshot_is_independent_of_settings(self):
        """Test later settings changes do not leak into a snapshot."""
        # Arrange
        settings = Settings(_env_file=None, LANGUAGES=["en"])
        config = settings.projection_config()

        # Act
        settings.LANGUAGES.append("de")

        # Assert
        assert config.languages == ("en",)


class TestSettingsGeneralBehavior:
    """Test general Settings class behavior."""

    def test_should_have_logging_defaults(self):
        """Test logging settings defaults."""
        # Arrange & Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.app_name == "geodoc"
        assert settings.LOG_LEVEL == "INFO"
        assert settings.JSON_LOGS is True

    def test_should_override_json_logs_via_environment(self):
        """Test JSON_LOGS can be disabled via environment."""
        # Arrange & Act
        with patch.dict(os.environ, {"JSON_LOGS": "false"}):
            settings = Settings(_env_file=None)

        # Assert
        assert settings.JSON_LOGS is False


class TestConfigModuleImport:
    """Test importing the configuration module."""

    def test_import_does_not_read_environment(self):
        """Test a malformed environment only fails when Settings is built."""
        # Arrange
        import importlib

        import geodoc.core.config as config_module

        # Act
        with patch.dict(os.environ, {"LANGUAGES": '["en",'}):
            reloaded = importlib.reload(config_module)

            # Assert
            assert not hasattr(reloaded, "settings")
            with pytest.raises(ValueError):
                reloaded.Settings(_env_file=None)
