"""
Unit tests for corpus configuration.

Tests pydantic-settings environment support and YAML loading.
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from gf_metadata.core.config import CorpusConfig
from gf_metadata.core.exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidYamlError,
)


class TestCorpusConfig:
    """Test defaults and validation."""

    def test_defaults(self, monkeypatch, temp_dir):
        monkeypatch.chdir(temp_dir)

        config = CorpusConfig()

        assert config.family_filter is None
        assert config.family_filter_pattern() is None
        assert config.languages_subpath == "gflanguages/data/languages"
        assert config.tags_subpath == "tags/all"
        assert config.fallback_language == "en_Latn"
        assert config.allow_unknown_fields is False

    def test_family_filter_compiled(self):
        config = CorpusConfig(family_filter=r"ofl/robo.*")

        assert config.family_filter_pattern().search("/fonts/ofl/roboto/METADATA.pb")

    def test_invalid_family_filter(self):
        with pytest.raises(ValidationError, match="Invalid family filter"):
            CorpusConfig(family_filter="(unclosed")

    def test_log_level_normalized(self):
        assert CorpusConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            CorpusConfig(log_level="chatty")


class TestEnvironmentVariableSupport:
    """Test environment variable support."""

    def test_config_from_env_vars(self, monkeypatch):
        monkeypatch.setenv("GF_REPO_DIR", "/data/fonts")
        monkeypatch.setenv("GF_FAMILY_FILTER", "ofl/")
        monkeypatch.setenv("GF_FALLBACK_LANGUAGE", "fr_Latn")
        monkeypatch.setenv("GF_ALLOW_UNKNOWN_FIELDS", "true")

        config = CorpusConfig()

        assert config.repo_dir == Path("/data/fonts")
        assert config.family_filter == "ofl/"
        assert config.fallback_language == "fr_Latn"
        assert config.allow_unknown_fields is True

    def test_config_from_env_file(self, temp_dir):
        env_file = temp_dir / ".env"
        env_file.write_text("GF_TAGS_SUBPATH=annotations\nGF_LOG_LEVEL=warning\n")

        config = CorpusConfig.from_env_and_yaml(env_file=str(env_file))

        assert config.tags_subpath == "annotations"
        assert config.log_level == "WARNING"


class TestYamlLoading:
    """Test YAML configuration files."""

    def test_from_yaml(self, temp_dir):
        config_path = temp_dir / "corpus.yaml"
        with config_path.open("w") as f:
            yaml.dump({"repo_dir": str(temp_dir), "family_filter": "kosugi"}, f)

        config = CorpusConfig.from_yaml(config_path)

        assert config.repo_dir == temp_dir
        assert config.family_filter == "kosugi"

    def test_yaml_wins_over_env_and_yaml_helper(self, temp_dir, monkeypatch):
        monkeypatch.setenv("GF_FALLBACK_LANGUAGE", "de_Latn")
        config_path = temp_dir / "corpus.yaml"
        config_path.write_text("fallback_language: ja_Jpan\n")

        config = CorpusConfig.from_env_and_yaml(yaml_path=config_path)

        assert config.fallback_language == "ja_Jpan"

    def test_missing_file(self, temp_dir):
        with pytest.raises(ConfigFileNotFoundError):
            CorpusConfig.from_yaml(temp_dir / "nope.yaml")

    def test_empty_file(self, temp_dir):
        config_path = temp_dir / "empty.yaml"
        config_path.write_text("")

        with pytest.raises(EmptyConfigFileError):
            CorpusConfig.from_yaml(config_path)

    def test_invalid_yaml(self, temp_dir):
        config_path = temp_dir / "bad.yaml"
        config_path.write_text("repo_dir: [unclosed\n")

        with pytest.raises(InvalidYamlError):
            CorpusConfig.from_yaml(config_path)

    def test_invalid_values(self, temp_dir):
        config_path = temp_dir / "bad_values.yaml"
        config_path.write_text("family_filter: '(unclosed'\n")

        with pytest.raises(ConfigLoadError):
            CorpusConfig.from_yaml(config_path)

    def test_errors_are_configuration_errors(self, temp_dir):
        with pytest.raises(ConfigurationError):
            CorpusConfig.from_yaml(temp_dir / "nope.yaml")
