"""
Configuration management for orgsize.

Handles loading, merging, and discovery of configuration files, then
layers environment variables and CLI options on top.
"""
import importlib.resources as importlib_resources
import os
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import yaml

from orgsize.models import RegistryConfig
from orgsize.utils.exceptions import ConfigurationError


USER_CONFIG_FILENAME = "orgsize.config.yaml"

ENVIRONMENT_OVERRIDES = {
    "ORGSIZE_REGISTRY": ("registry", "url"),
    "ORGSIZE_CONCURRENCY": ("fetch", "concurrency"),
}


class ConfigManager:
    """Manages orgsize configuration loading and merging operations."""

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        return data

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config from package."""
        default_config_path = importlib_resources.files("orgsize.config") / "default.yaml"
        with default_config_path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                return self.load_and_merge_config(config_arg)
            raise ConfigurationError(f"Config file not found: {config_arg}")

        # Priority 2: orgsize.config.yaml in current directory
        if os.path.exists(USER_CONFIG_FILENAME):
            return self.load_and_merge_config(USER_CONFIG_FILENAME)

        # Priority 3: Package default config
        return self.load_package_default_config()

    def apply_environment(self, config: dict, environ: Optional[Dict[str, str]] = None) -> dict:
        """Apply ORGSIZE_* environment variable overrides."""
        environ = os.environ if environ is None else environ
        for variable, (section, key) in ENVIRONMENT_OVERRIDES.items():
            value = environ.get(variable)
            if value:
                self._section(config, section)[key] = value
        return config

    def merge_config_and_args(
        self,
        config: dict,
        output: Optional[str] = None,
        npmrc_path: Optional[str] = None,
        registry: Optional[str] = None,
        concurrency: Optional[int] = None,
        progress: Optional[bool] = None,
    ) -> dict:
        """Merge configuration with CLI arguments."""
        overrides = {
            ("output", "csv_file"): output,
            ("credentials", "npmrc_path"): npmrc_path,
            ("registry", "url"): registry,
            ("fetch", "concurrency"): concurrency,
            ("output", "progress"): progress,
        }
        for (section, key), value in overrides.items():
            if value is not None:
                self._section(config, section)[key] = value
        return config

    def validate(self, config: dict) -> dict:
        """Coerce and check values, raising ConfigurationError on bad input."""
        registry = self._section(config, "registry")
        fetch = self._section(config, "fetch")
        output = self._section(config, "output")
        self._section(config, "credentials")

        url = str(registry.get("url") or "")
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(f"Invalid registry URL: {url!r}")
        registry["url"] = url

        registry["timeout"] = self._coerce_number(registry.get("timeout", 30), "registry.timeout", float)
        if registry["timeout"] <= 0:
            raise ConfigurationError("registry.timeout must be greater than zero")

        fetch["concurrency"] = self._coerce_number(fetch.get("concurrency", 0), "fetch.concurrency", int)
        if fetch["concurrency"] < 0:
            raise ConfigurationError("fetch.concurrency must be zero or a positive integer")

        if not output.get("csv_file"):
            raise ConfigurationError("output.csv_file must not be empty")

        return config

    def load(self, config_path: Optional[str] = None, **cli_args: Any) -> dict:
        """Discover, merge, override and validate configuration in one step."""
        config = self.discover_and_load_config(config_path)
        config = self.apply_environment(config)
        config = self.merge_config_and_args(config, **cli_args)
        return self.validate(config)

    def build_registry_config(self, config: dict, token: str) -> RegistryConfig:
        registry = config["registry"]
        return RegistryConfig(
            token=token,
            registry_url=registry["url"],
            timeout=registry["timeout"],
            concurrency=config["fetch"]["concurrency"],
            user_agent=registry.get("user_agent") or "orgsize",
        )

    @staticmethod
    def _section(config: dict, name: str) -> dict:
        """Return a config section, creating it when absent."""
        section = config.setdefault(name, {})
        if not isinstance(section, dict):
            raise ConfigurationError(f"{name} must be a mapping")
        return section

    @staticmethod
    def _coerce_number(value: Any, name: str, kind: type):
        if isinstance(value, bool):
            raise ConfigurationError(f"{name} must be a number, got {value!r}")
        try:
            return kind(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"{name} must be a number, got {value!r}") from e
