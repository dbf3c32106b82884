"""Provider configuration."""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict

import voluptuous as vol

from .errors import ConfigError

_LOGGER = logging.getLogger(__name__)

CONF_USERINFO_URL = "userinfo_url"
CONF_TIMEOUT = "timeout"
CONF_MAX_RETRIES = "max_retries"
CONF_BACKOFF = "backoff"
CONF_FIELD_MAPPING = "field_mapping"


def _mapping_value(v):
    # null in the config file means the same as "" (not configured)
    return "" if v is None else v


def _retry_count(v):
    # bool is an int subclass; `true` is not a retry count
    if isinstance(v, bool) or not isinstance(v, int):
        raise vol.Invalid(f"expected an integer, got {v!r}")
    return v


PROVIDER_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_USERINFO_URL): str,
        vol.Optional(CONF_TIMEOUT, default=10): vol.Coerce(float),
        vol.Optional(CONF_MAX_RETRIES, default=3): vol.All(_retry_count, vol.Range(min=0)),
        vol.Optional(CONF_BACKOFF, default=0.5): vol.Coerce(float),
        vol.Optional(CONF_FIELD_MAPPING, default=dict): {
            str: vol.All(vol.Any(str, None), _mapping_value)
        },
    }
)


@dataclass
class ProviderConfig:
    userinfo_url: str
    timeout: float = 10
    max_retries: int = 3
    backoff: float = 0.5
    field_mapping: Dict[str, str] = field(default_factory=dict)


def load_config(data: Dict[str, Any]) -> ProviderConfig:
    try:
        conf = PROVIDER_SCHEMA(data)
    except vol.Invalid as e:
        raise ConfigError(f"invalid provider config: {e}") from e
    _LOGGER.debug(
        "Loaded provider config for %s (%d mapped fields)",
        conf[CONF_USERINFO_URL],
        len(conf[CONF_FIELD_MAPPING]),
    )
    return ProviderConfig(**conf)


def load_config_file(path: str) -> ProviderConfig:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"config {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must contain a JSON object")
    return load_config(data)
