"""
Configuration management for the homophone scraper.
Builds the run configuration and loads optional YAML fetch settings.
"""

import os
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Dict, Any, List, Optional

import soupsieve
import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

load_dotenv()

DEFAULT_BASE_URL = "https://en.wiktionary.org/wiki/"
DEFAULT_BACKOFF_SECONDS = 20.0
DEFAULT_TIMEOUT = 30.0
DEFAULT_SELECTOR = "span.homophones span a"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


@dataclass
class RunConfig:
    """Output destinations and inputs for one run, built once at startup."""

    inputs: List[Path] = field(default_factory=list)
    pairs_path: Optional[Path] = None
    singles_path: Optional[Path] = None
    force: bool = False

    def output_paths(self) -> List[Path]:
        return [p for p in (self.pairs_path, self.singles_path) if p is not None]

    def validate(self):
        """Reject unusable runs before any network activity happens."""
        if not self.inputs:
            raise ConfigurationError("At least one input word list is required")

        if not self.output_paths():
            raise ConfigurationError(
                "Nothing to do: request a pairs output, a singles output, or both"
            )

        if not self.force:
            for path in self.output_paths():
                if Path(path).exists():
                    raise ConfigurationError(
                        f"Output file already exists: {path} (use --force to overwrite)"
                    )


@dataclass
class FetchSettings:
    """Lookup settings for the reference site."""

    base_url: str = DEFAULT_BASE_URL
    backoff_seconds: float = DEFAULT_BACKOFF_SECONDS
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    selector: str = DEFAULT_SELECTOR


class ConfigManager:
    """Loads fetch settings from an optional YAML file and the environment."""

    ENV_OVERRIDES = {
        'HOMOPHONE_BASE_URL': ('base_url', str),
        'HOMOPHONE_BACKOFF_SECONDS': ('backoff_seconds', float),
    }

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self.logger = logging.getLogger(__name__)
        self.config = {}
        self._load_configuration()

    def _load_configuration(self):
        """Load the configuration file (if any) and validate its schema."""
        if self.config_path is not None:
            self.config = self._load_yaml_file(self.config_path)
        self._validate_config()

    def _load_yaml_file(self, file_path: str) -> Dict[str, Any]:
        """Load and parse a YAML file."""
        if not os.path.exists(file_path):
            raise ConfigurationError(f"Configuration file not found: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as file:
                data = yaml.safe_load(file) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error reading {file_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Top level of {file_path} must be a mapping")
        return data

    def _validate_config(self):
        fetch = self.config.get('fetch', {})
        if not isinstance(fetch, dict):
            raise ConfigurationError("'fetch' section must be a mapping")

        known = {f.name for f in fields(FetchSettings)}
        for key in fetch:
            if key not in known:
                raise ConfigurationError(f"Unknown fetch setting: {key}")

        for key, value in fetch.items():
            self._validate_fetch_value(key, value)

    def _validate_fetch_value(self, key: str, value: Any):
        """Reject a fetch setting that would fail later, during the lookups."""
        if key in ('backoff_seconds', 'timeout'):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"Fetch setting '{key}' must be a number")
            if key == 'timeout' and value <= 0:
                raise ConfigurationError("Fetch setting 'timeout' must be greater than zero")
            if value < 0:
                raise ConfigurationError(f"Fetch setting '{key}' must be a non-negative number")
            return

        if not isinstance(value, str):
            raise ConfigurationError(f"Fetch setting '{key}' must be a string")

        if key == 'selector':
            try:
                soupsieve.compile(value)
            except soupsieve.SelectorSyntaxError as e:
                raise ConfigurationError(f"Invalid CSS selector {value!r}: {e}")

    def get_fetch_settings(self) -> FetchSettings:
        """Build fetch settings: defaults, then the YAML file, then the environment."""
        settings = replace(FetchSettings(), **self.config.get('fetch', {}))

        for env_name, (attr, convert) in self.ENV_OVERRIDES.items():
            raw = os.getenv(env_name)
            if raw is None or raw == "":
                continue
            try:
                value = convert(raw)
            except ValueError:
                raise ConfigurationError(f"Invalid value for {env_name}: {raw!r}")
            self._validate_fetch_value(attr, value)
            self.logger.debug(f"Using {env_name}={raw} from environment")
            settings = replace(settings, **{attr: value})

        return settings
