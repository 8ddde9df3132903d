import copy
import logging
import pathlib
from typing import Any, cast

import pydantic
import ruamel.yaml

from dualgraph import exceptions
from dualgraph.config import models

logger = logging.getLogger(__name__)

# Module-level cache for merged config to avoid repeated disk I/O
_merged_config_cache: models.DualgraphConfig | None = None


def get_global_config_path() -> pathlib.Path:
    """Get user-level config path (~/.config/dualgraph/config.yaml)."""
    return pathlib.Path.home() / ".config" / "dualgraph" / "config.yaml"


def get_local_config_path() -> pathlib.Path:
    """Get directory-level config path (./.dualgraph/config.yaml)."""
    return pathlib.Path.cwd() / ".dualgraph" / "config.yaml"


def load_config_file(path: pathlib.Path) -> dict[str, Any]:
    """Load YAML config as a plain dict, returns empty dict if missing."""
    if not path.exists():
        return {}

    try:
        yaml = ruamel.yaml.YAML(typ="rt")
        with path.open() as f:
            data = yaml.load(f)
    except ruamel.yaml.YAMLError as e:
        raise exceptions.ConfigError(f"Invalid YAML in {path}: {e}") from e
    except PermissionError:
        raise exceptions.ConfigError(f"Permission denied reading {path}") from None
    except OSError as e:
        raise exceptions.ConfigError(f"Error reading {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise exceptions.ConfigError(
            f"Config file {path} must be a mapping, got {type(data).__name__}"
        )
    return dict(cast("dict[str, Any]", data))


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base, recursively for nested dicts."""
    result = copy.deepcopy(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            nested_override = cast("dict[str, Any]", val)
            result[key] = deep_merge(result[key], nested_override)
        else:
            result[key] = copy.deepcopy(val)
    return result


def get_merged_config() -> models.DualgraphConfig:
    """Load and merge configs: defaults < global < local.

    Results are cached to avoid repeated disk I/O within a single command.
    Call clear_config_cache() to reset (e.g., in tests).
    """
    global _merged_config_cache
    if _merged_config_cache is not None:
        return _merged_config_cache

    merged = models.DualgraphConfig.get_default().model_dump()
    for path in (get_global_config_path(), get_local_config_path()):
        data = load_config_file(path)
        if data:
            logger.debug(f"Loaded config from {path}")
        merged = deep_merge(merged, data)

    try:
        _merged_config_cache = models.DualgraphConfig.model_validate(merged)
    except pydantic.ValidationError as e:
        raise exceptions.ConfigError(f"Invalid configuration: {e}") from e
    return _merged_config_cache


def clear_config_cache() -> None:
    """Clear the merged config cache. Call this when config files change."""
    global _merged_config_cache
    _merged_config_cache = None
