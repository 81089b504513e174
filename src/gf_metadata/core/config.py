"""Configuration management for the font metadata system."""

import re
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidFamilyFilterError,
    InvalidYamlError,
)

FAMILY_METADATA_FILENAME = "METADATA.pb"
LANGUAGE_FILE_SUFFIX = ".textproto"
TAG_FILE_SUFFIX = ".csv"


class CorpusConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Location and layout of a Google Fonts checkout."""

    repo_dir: Path = Field(
        Path.home() / "oss" / "fonts", description="Root of the Google Fonts checkout"
    )
    family_filter: str | None = Field(
        None, description="Regular expression a METADATA.pb path must match"
    )
    languages_subpath: str = Field(
        "gflanguages/data/languages", description="Path fragment identifying language files"
    )
    tags_subpath: str = Field("tags/all", description="Tag directory relative to repo_dir")
    fallback_language: str = Field("en_Latn", description="Last resort primary language")
    allow_unknown_fields: bool = Field(
        False, description="Skip descriptor fields the schema does not model"
    )
    log_level: str = Field("INFO", description="Log level")

    @field_validator("family_filter")
    @classmethod
    def validate_family_filter(cls, v):
        if v is None:
            return v
        try:
            re.compile(v)
        except re.error as e:
            raise InvalidFamilyFilterError(v, str(e)) from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    def family_filter_pattern(self) -> re.Pattern | None:
        """Compile the family filter, if any."""
        return re.compile(self.family_filter) if self.family_filter else None

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "CorpusConfig":
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str = ".env"
    ) -> "CorpusConfig":
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        return cls(_env_file=env_file if Path(env_file).exists() else None)


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            raise EmptyConfigFileError(str(config_path))

        if issubclass(config_class, BaseSettings):
            # YAML values win; skip the .env file for this instance
            class TempConfig(config_class):
                model_config = SettingsConfigDict(
                    env_prefix="GF_",
                    env_file=None,
                    case_sensitive=False,
                    extra="ignore",
                )

            return TempConfig(**config_data)
        return config_class(**config_data)

    except ConfigurationError:
        raise
    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e
    except Exception as e:
        raise ConfigLoadError(str(e)) from e
