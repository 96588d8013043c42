from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic_settings import BaseSettings

from hbs_loader.exceptions import InvalidArgumentError
from hbs_loader.loader.resolver import DEFAULT_PREFIX, DEFAULT_SUFFIX, PathResolver

logger = logging.getLogger(__name__)

_RESOLVER_KEYS = ("prefix", "partials_prefix", "suffix")


class LoaderSettings(BaseSettings):
    model_config = {
        "env_prefix": "HBS_LOADER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    prefix: str = DEFAULT_PREFIX
    # None means the partials prefix keeps its own default, not the prefix above
    partials_prefix: str | None = None
    suffix: str | None = DEFAULT_SUFFIX


_loader_config_cache: dict[str, dict] = {}


def _load_loader_yaml(config_path: str | Path | None = None) -> dict:
    if config_path is None:
        config_path = os.environ.get("LOADER_CONFIG_PATH", "loader.yaml")
    key = str(config_path)
    if key in _loader_config_cache:
        return _loader_config_cache[key]

    path = Path(config_path)
    if not path.is_file():
        _loader_config_cache[key] = {}
        return _loader_config_cache[key]

    import yaml

    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise InvalidArgumentError(f"malformed loader config {path}: {e}") from e
    if not isinstance(data, dict):
        raise InvalidArgumentError(
            f"loader config {path} must be a mapping, got {type(data).__name__}"
        )
    _loader_config_cache[key] = data
    logger.debug("Loaded loader config from %s", path)
    return _loader_config_cache[key]


def get_loader_settings(config_path: str | Path | None = None) -> LoaderSettings:
    """Get loader settings, with YAML values taking precedence over env variables.

    Falls back to plain env-based settings if the YAML file doesn't exist.
    """
    data = _load_loader_yaml(config_path)
    overrides = {key: data[key] for key in _RESOLVER_KEYS if key in data}
    return LoaderSettings(**overrides)


def build_resolver(settings: LoaderSettings | None = None) -> PathResolver:
    """Create a PathResolver configured from settings."""
    if settings is None:
        settings = get_loader_settings()
    resolver = PathResolver(
        prefix=settings.prefix,
        partials_prefix=settings.partials_prefix if settings.partials_prefix is not None else DEFAULT_PREFIX,
        suffix=settings.suffix,
    )
    logger.debug("Built %r", resolver)
    return resolver
