"""
Configuration loading for VolumeCtl.

Settings come from, in increasing precedence: built-in defaults, a YAML
config file, and environment variables (a ``.env`` file in the working
directory is loaded first).
"""
import os
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError
from .utils import DEFAULT_LOG_DIR

logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = ('docker', 'podman')
DEFAULT_CONFIG_PATH = Path.home() / '.volumectl' / 'config.yaml'

ENV_PREFIX = 'VOLUMECTL_'
ENV_KEYS = {
    'BACKEND': 'backend',
    'TIMEOUT': 'command_timeout',
    'LOG_DIR': 'log_dir',
    'DEBUG': 'debug',
}

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off', ''}


@dataclass
class VolumeCtlConfig:
    """
    Runtime settings.

    Attributes:
        backend: Container runtime executable used for volume commands
        command_timeout: Seconds before an external command is abandoned
        log_dir: Directory holding volumectl.log
        debug: Mirror log output to stderr at debug level
    """
    backend: str = 'docker'
    command_timeout: Optional[float] = 60.0
    log_dir: Path = field(default_factory=lambda: DEFAULT_LOG_DIR)
    debug: bool = False

    def __post_init__(self):
        self.backend = str(self.backend).strip()
        if self.backend not in SUPPORTED_BACKENDS:
            raise ConfigurationError(
                f"Unsupported backend: {self.backend} "
                f"(expected one of: {', '.join(SUPPORTED_BACKENDS)})"
            )

        if self.command_timeout is not None:
            try:
                self.command_timeout = float(self.command_timeout)
            except (TypeError, ValueError):
                raise ConfigurationError(f"Invalid command_timeout: {self.command_timeout!r}")
            if self.command_timeout <= 0:
                raise ConfigurationError("command_timeout must be positive")

        self.log_dir = Path(self.log_dir).expanduser()
        self.debug = _to_bool(self.debug, 'debug')


def _to_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {key}: {value!r}")


def _read_config_file(path: Path) -> Dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing config file {path}: {e}")
    except OSError as e:
        raise ConfigurationError(f"Error reading config file {path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(VolumeCtlConfig)}
    for key in list(data):
        if key not in known:
            logger.warning(f"Ignoring unknown config key: {key}")
            del data[key]
    return data


def _env_overrides() -> Dict[str, str]:
    overrides = {}
    for suffix, key in ENV_KEYS.items():
        value = os.environ.get(ENV_PREFIX + suffix)
        if value is not None:
            overrides[key] = value
    return overrides


def load_config(path: Optional[Union[str, Path]] = None, load_env_file: bool = True) -> VolumeCtlConfig:
    """
    Build the effective configuration.

    Args:
        path: Explicit config file; must exist when given
        load_env_file: Load a ``.env`` file before reading the environment

    Returns:
        The merged VolumeCtlConfig

    Raises:
        ConfigurationError: If the file or any value is invalid
    """
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True))

    values: Dict[str, Any] = {}

    if path is None and os.environ.get(ENV_PREFIX + 'CONFIG'):
        path = os.environ[ENV_PREFIX + 'CONFIG']

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")
        values.update(_read_config_file(config_path))
    elif DEFAULT_CONFIG_PATH.exists():
        values.update(_read_config_file(DEFAULT_CONFIG_PATH))

    values.update(_env_overrides())
    return VolumeCtlConfig(**values)
