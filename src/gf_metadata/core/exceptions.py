"""Custom exceptions for the font metadata system."""

from pathlib import Path
from typing import Any


class GFMetadataError(Exception):
    """Base exception for all metadata errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(GFMetadataError):
    """Exception raised for configuration errors."""


class CorpusError(GFMetadataError):
    """Exception raised while reading the corpus."""


class ResolutionError(GFMetadataError):
    """Exception raised when a derived query cannot be answered."""


class MetadataParseError(CorpusError):
    """A single family or language descriptor could not be read or parsed.

    These are collected next to their source path rather than raised, so a
    bad descriptor never aborts a corpus scan.
    """

    def __init__(self, path: str | Path, error: str):
        super().__init__(f"Failed to parse {path}: {error}", details={"path": str(path)})
        self.path = Path(path)
        self.error = error


class TagParseError(CorpusError):
    """Exception raised for a malformed tag line."""

    def __init__(self, message: str, line: str):
        super().__init__(f"{message}: {line!r}", details={"line": line})
        self.line = line


class TagFieldCountError(TagParseError):
    """Exception raised when a tag line has neither 3 nor 4 fields."""

    def __init__(self, line: str, count: int):
        super().__init__(f"Unparseable tag, expected 3 or 4 fields but found {count}", line)
        self.count = count


class TagValueError(TagParseError):
    """Exception raised when a tag value is not a number."""

    def __init__(self, line: str, value: str):
        super().__init__(f"Invalid tag value {value!r}", line)
        self.value = value


class TagQuoteError(TagParseError):
    """Exception raised when a quoted tag field is never closed."""

    def __init__(self, line: str):
        super().__init__("Unterminated quote in tag", line)


class TagLoadError(CorpusError):
    """Exception raised when the tag directory cannot be loaded."""

    def __init__(self, path: str | Path, error: str, line_number: int | None = None):
        location = f"{path}:{line_number}" if line_number is not None else str(path)
        super().__init__(
            f"Failed to load tags from {location}: {error}",
            details={"path": str(path), "line_number": line_number},
        )
        self.path = Path(path)
        self.line_number = line_number


class PrimaryLanguageUnresolvableError(ResolutionError):
    """Exception raised when not even the fallback language exists in the corpus."""

    def __init__(self, family_name: str, fallback: str):
        super().__init__(
            f"Not even our final fallback {fallback} worked for {family_name}",
            details={"family": family_name, "fallback": fallback},
        )


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML content."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")


class InvalidFamilyFilterError(ValueError):
    """Exception raised for a family filter that is not a valid regular expression."""

    def __init__(self, pattern: str, error: str):
        super().__init__(f"Invalid family filter {pattern!r}: {error}")
