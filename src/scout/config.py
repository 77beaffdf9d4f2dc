# src/scout/config.py
"""Configuration loading utilities for Project Scout.

This module provides configuration loading that can be used by:
- CLI commands
- TUI screens
- External applications using Scout as a library

It handles:
- Finding and loading scout.yaml config files
- Loading .env files for API keys
- Building Settings objects from multiple sources
- Creating Scout instances from configuration
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

if TYPE_CHECKING:
    from scout.scout import Scout
    from scout.settings import Settings
    from scout.stores import SQLiteProjectStore

logger = logging.getLogger(__name__)

# Default paths
DEFAULT_DATA_DIR = "./scout_data"
DB_FILENAME = "projects.db"
CONFIG_FILES = ["scout.yaml", "scout.yml", ".scoutrc"]
ENV_FILE = ".env"
MAX_CONFIG_SEARCH_DEPTH = 10

# Credential lookup order for the AI recommender
API_KEY_ENV_VARS = ("SCOUT_LLM_API_KEY", "GEMINI_API_KEY")


@dataclass
class ConfigError:
    """Error during configuration loading."""

    message: str
    suggestion: str | None = None


def _parse_env_line(line: str) -> tuple[str, str] | None:
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, _, value = line.removeprefix("export ").partition("=")
    return key.strip(), value.strip().strip("\"'")


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Load KEY=value pairs from a .env file into the environment.

    Existing environment variables are never overridden, so a key exported in
    the shell beats the one saved in the file. Blank lines, comments and lines
    without ``=`` are skipped.
    """
    path = Path(env_path)
    if not path.is_file():
        return

    for line in path.read_text(encoding="utf-8").splitlines():
        parsed = _parse_env_line(line)
        if parsed is not None:
            os.environ.setdefault(*parsed)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the nearest scout config file at or above ``start_dir`` (default: cwd)."""
    start = start_dir or Path.cwd()
    for directory in [start, *start.parents][:MAX_CONFIG_SEARCH_DEPTH]:
        for name in CONFIG_FILES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


VALID_ROOT_KEYS = frozenset({"data_dir", "llm_model", "settings"})

VALID_SETTINGS_KEYS = frozenset(
    {
        "top_n",
        "use_ai",
        "llm_model",
        "ai_timeout",
        "ai_temperature",
        "recommend_prompt",
        "num_retries",
    }
)


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Return one warning per group of unknown keys (root first, then settings)."""
    warnings = []
    where = str(config_path) if config_path else "config"

    if unknown := sorted(set(config) - VALID_ROOT_KEYS):
        warnings.append(f"Unknown config keys in {where}: {', '.join(unknown)}")

    settings = config.get("settings")
    if isinstance(settings, dict) and (unknown := sorted(set(settings) - VALID_SETTINGS_KEYS)):
        warnings.append(f"Unknown settings keys: {', '.join(unknown)}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Read the YAML config, searching upward when no path is given.

    A missing file yields ``{}``; unknown keys are logged as warnings.
    ``yaml.YAMLError`` propagates to the caller.
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None or not path.exists():
        return {}

    with open(path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    for warning in validate_config(config, path):
        logger.warning(warning)

    return config


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _safe_float(value: str | None) -> float | None:
    """Parse float from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from SCOUT_* environment variables.

    Only explicitly set variables are returned, so YAML values survive unless
    overridden.
    """
    result: dict[str, Any] = {}

    if (val := _safe_int(os.environ.get("SCOUT_TOP_N"))) is not None:
        result["top_n"] = val
    if "SCOUT_USE_AI" in os.environ:
        result["use_ai"] = os.environ["SCOUT_USE_AI"].lower() in ("true", "1", "yes")
    if os.environ.get("SCOUT_LLM_MODEL"):
        result["llm_model"] = os.environ["SCOUT_LLM_MODEL"]
    if "SCOUT_AI_TIMEOUT" in os.environ:
        # Empty string disables the timeout
        raw = os.environ["SCOUT_AI_TIMEOUT"]
        if raw == "":
            result["ai_timeout"] = None
        elif (timeout := _safe_float(raw)) is not None:
            result["ai_timeout"] = timeout
    if (val := _safe_int(os.environ.get("SCOUT_NUM_RETRIES"))) is not None:
        result["num_retries"] = val
    if "SCOUT_RECOMMEND_PROMPT" in os.environ:
        result["recommend_prompt"] = os.environ["SCOUT_RECOMMEND_PROMPT"] or None

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract settings from YAML config.

    ``llm_model`` may sit at the root or inside the ``settings:`` section.
    """
    result: dict[str, Any] = {}

    if config.get("llm_model"):
        result["llm_model"] = config["llm_model"]

    yaml_settings = config.get("settings", {}) or {}
    for key in VALID_SETTINGS_KEYS:
        if key in yaml_settings:
            result[key] = yaml_settings[key]

    return result


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build Settings from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML config
    3. Settings class defaults

    Raises:
        pydantic.ValidationError: If a merged value is invalid.
    """
    from scout.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    return Settings(**{**yaml_settings, **env_settings})


def resolve_api_key() -> str | None:
    """Return the first configured LLM credential, or None."""
    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return None


def get_store(data_dir: str | Path) -> SQLiteProjectStore:
    """Get the project store in a data directory."""
    from scout.stores import SQLiteProjectStore

    return SQLiteProjectStore(os.path.join(str(data_dir), DB_FILENAME))


def resolve_data_dir(data_dir: str | None, config: dict[str, Any]) -> str:
    """Pick the data directory: explicit override, then config, then default."""
    return data_dir or config.get("data_dir") or DEFAULT_DATA_DIR


@dataclass
class ScoutConfig:
    """Configuration for creating a Scout instance."""

    data_dir: str
    settings: Settings
    api_key: str | None = None
    config_path: str | None = None

    @property
    def ai_enabled(self) -> bool:
        """True when the AI recommender will be attempted."""
        return self.settings.use_ai and self.api_key is not None


def read_config(config_path: Path | None) -> dict[str, Any] | ConfigError:
    """load_config() with parse failures returned as a ConfigError."""
    try:
        return load_config(config_path)
    except yaml.YAMLError as e:
        return ConfigError(
            message=f"Could not parse {config_path}: {e}",
            suggestion="Check the YAML syntax of your config file",
        )


def get_data_dir(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> str | ConfigError:
    """Resolve the data directory for commands that only need the store."""
    resolved_path = Path(config_path) if config_path is not None else find_config_file()
    config = read_config(resolved_path)
    if isinstance(config, ConfigError):
        return config
    return resolve_data_dir(data_dir, config)


def get_scout_config(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ScoutConfig | ConfigError:
    """Get configuration for creating a Scout instance.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        ScoutConfig, or ConfigError if the configuration is invalid
    """
    resolved_path = Path(config_path) if config_path is not None else find_config_file()
    config = read_config(resolved_path)
    if isinstance(config, ConfigError):
        return config

    try:
        settings = build_settings(config)
    except ValidationError as e:
        return ConfigError(
            message=f"Invalid settings: {e}",
            suggestion="Check the settings section of scout.yaml and SCOUT_* variables",
        )

    return ScoutConfig(
        data_dir=resolve_data_dir(data_dir, config),
        settings=settings,
        api_key=resolve_api_key(),
        config_path=str(resolved_path) if resolved_path else None,
    )


def create_scout(config: ScoutConfig) -> Scout:
    """Create a Scout instance from configuration.

    The LLM client is only built when AI is enabled and a credential exists;
    otherwise searches use keyword ranking alone.
    """
    from scout.scout import Scout

    llm_client = None
    if config.ai_enabled:
        from scout.providers.litellm import LiteLLMClient

        llm_client = LiteLLMClient(
            model=config.settings.llm_model,
            api_key=config.api_key,
            num_retries=config.settings.num_retries,
            timeout=config.settings.ai_timeout,
        )

    return Scout(
        store=get_store(config.data_dir),
        llm_client=llm_client,
        settings=config.settings,
    )


def get_scout(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> Scout | ConfigError:
    """Create a Scout instance based on configuration."""
    config = get_scout_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return config
    return create_scout(config)
