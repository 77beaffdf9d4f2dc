# src/scout/commands/config_cmd.py
"""Config command - display current configuration."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import ValidationError

from scout.commands.base import ConfigResult, SettingInfo
from scout.config import (
    API_KEY_ENV_VARS,
    ConfigError,
    build_settings,
    find_config_file,
    get_settings_from_env,
    get_settings_from_yaml,
    read_config,
    resolve_data_dir,
    validate_config,
)


def _get_setting_source(
    key: str,
    yaml_settings: dict,
    env_settings: dict,
) -> str:
    """Determine the source of a setting value."""
    if key in env_settings:
        return "env var"
    if key in yaml_settings:
        return "yaml"
    return "default"


def config(
    config_path: str | Path | None = None,
) -> ConfigResult:
    """Get current configuration settings.

    Args:
        config_path: Override config file path

    Returns:
        ConfigResult with all settings and their sources
    """
    found_config_path = Path(config_path) if config_path is not None else find_config_file()
    file_config = read_config(found_config_path)
    if isinstance(file_config, ConfigError):
        return ConfigResult(success=False, error=file_config.message)
    env_settings = get_settings_from_env()
    yaml_settings = get_settings_from_yaml(file_config)

    try:
        settings = build_settings(file_config, env_settings)
    except ValidationError as e:
        return ConfigResult(success=False, error=f"Invalid settings: {e}")

    api_key_source = next((name for name in API_KEY_ENV_VARS if os.environ.get(name)), None)

    result = ConfigResult(
        success=True,
        data_dir=resolve_data_dir(None, file_config),
        llm_model=settings.llm_model,
        ai_enabled=settings.use_ai and api_key_source is not None,
        api_key_source=api_key_source,
        config_path=str(found_config_path) if found_config_path else None,
        warnings=validate_config(file_config, found_config_path),
    )

    setting_values = [
        ("top_n", str(settings.top_n)),
        ("use_ai", str(settings.use_ai)),
        ("llm_model", settings.llm_model),
        (
            "ai_timeout",
            f"{settings.ai_timeout}s" if settings.ai_timeout is not None else "disabled",
        ),
        (
            "ai_temperature",
            (
                str(settings.ai_temperature)
                if settings.ai_temperature is not None
                else "model default"
            ),
        ),
        ("num_retries", str(settings.num_retries)),
        ("recommend_prompt", "custom" if settings.recommend_prompt else "built-in"),
    ]

    for key, value in setting_values:
        result.settings.append(
            SettingInfo(
                name=key,
                value=value,
                source=_get_setting_source(key, yaml_settings, env_settings),
            )
        )

    return result
