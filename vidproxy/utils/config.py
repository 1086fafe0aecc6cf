"""Utility functions for application configuration management.

Configuration is read from a YAML document, one per application
environment (`APP_ENV`), and overlaid on built-in defaults:

    config/
    ├── local.yml
    ├── dev.yml
    └── prod.yml

The document follows this structure (every section and key is optional):

    redis:
        host: localhost
        port: 6379
        db: 0
        username: null
        password: null
    upstream:
        connect_timeout: 10
        read_timeout: 60
        chunk_size: 65536
    identifiers:
        token_length: 16
        shortcode_length: 8
        max_attempts: 5

`VIDPROXY_CONFIG` names an explicit YAML file instead. `REDIS_*`
environment variables override the `redis` section, so secrets don't have
to live in the YAML file.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return Redis key prefix for DAOs, or None if `APP_NAME` is not set.

    project_root() -> Path
        Return the absolute path to the project root directory, using
        `PROJECT_ROOT` when available.

    load_config(path: str | PathLike | None = None) -> dict
        Load the application configuration and return it as a Python dictionary.

Example:
    >>> from vidproxy.utils.config import load_config
    >>> config = load_config()
    >>> print(config['redis']['host'])
    localhost
"""

import os
import copy
import logging
from pathlib import Path

import yaml

from vidproxy.constants import ENV, Defaults
from vidproxy.exceptions import ConfigurationError
from vidproxy.types import AppConfig
from vidproxy.utils.shortener import MAX_TOKEN_LENGTH


logger = logging.getLogger(__name__)


DEFAULT_CONFIG: AppConfig = {
    'redis': {
        'host': 'localhost',
        'port': 6379,
        'db': 0,
        'username': None,
        'password': None,
    },
    'upstream': {
        'connect_timeout': Defaults.CONNECT_TIMEOUT,
        'read_timeout': Defaults.READ_TIMEOUT,
        'chunk_size': Defaults.CHUNK_SIZE,
    },
    'identifiers': {
        'token_length': Defaults.TOKEN_LENGTH,
        'shortcode_length': Defaults.SHORTCODE_LENGTH,
        'max_attempts': Defaults.MAX_ATTEMPTS,
    },
}

_REDIS_ENV_OVERRIDES = {
    'host': ENV.Redis.HOST,
    'port': ENV.Redis.PORT,
    'db': ENV.Redis.DB,
    'username': ENV.Redis.USERNAME,
    'password': ENV.Redis.PASSWORD,
}


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'

    Returns:
        str:
            Value of `APP_NAME` environment variable.
            None if variable is not set.
    """
    return os.environ.get(ENV.App.APP_NAME)


def project_root() -> Path:
    """Return the absolute path to the project root directory

    Reads the PROJECT_ROOT environment variable.
    Falls back to the directory holding the `vidproxy` package.
    """
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, Path(__file__).resolve().parents[2]))


def app_prefix() -> str | None:
    """Return Redis key prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'vidproxy'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'vidproxy:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _read_document(path: Path, explicit: bool) -> dict:
    if not path.is_file():
        if explicit:
            raise ConfigurationError(f'Configuration file {path} does not exist.')
        logger.debug('No configuration file found. Using defaults.', extra={'configPath': str(path)})
        return {}

    try:
        with path.open(encoding='utf-8') as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f'Configuration file {path} is not valid YAML.') from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigurationError(f'Configuration file {path} must contain a mapping (given type: {type(document)}).')
    return document


def _coerce(config: AppConfig, section: str, key: str, kind: type, minimum: float, maximum: float | None = None) -> None:
    value = config[section][key]
    try:
        value = kind(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid '{section}.{key}': expected {kind.__name__} (given value: {value!r}).") from e
    if value < minimum or (maximum is not None and value > maximum):
        raise ConfigurationError(f"Invalid '{section}.{key}': out of range (given value: {value!r}).")
    config[section][key] = value


def load_config(path: str | os.PathLike | None = None) -> AppConfig:
    """Load the application configuration

    Precedence (highest first): REDIS_* environment variables, the YAML
    document, built-in defaults.

    Args:
        path (str | PathLike | None):
            Explicit YAML file. Defaults to `$VIDPROXY_CONFIG`, then
            `<project root>/config/<app env>.yml`.

    Returns:
        dict: configuration with 'redis', 'upstream' and 'identifiers' sections.

    Raises:
        ConfigurationError:
            If an explicitly requested file is missing, the document is not a
            valid YAML mapping, or a value has the wrong type or range.

    Example:
        >>> load_config()['identifiers']['shortcode_length']
        8
    """
    explicit = path or os.environ.get(ENV.App.CONFIG_PATH)
    config_path = Path(explicit) if explicit else project_root() / 'config' / f'{app_env()}.yml'
    document = _read_document(config_path, explicit=bool(explicit))

    config = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in document.items():
        if section not in config:
            raise ConfigurationError(f"Unknown configuration section '{section}'.")
        if not isinstance(values, dict):
            raise ConfigurationError(f"Configuration section '{section}' must be a mapping.")
        unknown = set(values) - set(config[section])
        if unknown:
            raise ConfigurationError(f"Unknown keys in configuration section '{section}': {', '.join(sorted(unknown))}.")
        config[section].update(values)

    for key, env_name in _REDIS_ENV_OVERRIDES.items():
        if os.environ.get(env_name):
            config['redis'][key] = os.environ[env_name]

    # fmt: off
    _coerce(config, 'redis',       'port',             int,   1, 65_535)
    _coerce(config, 'redis',       'db',               int,   0)
    _coerce(config, 'upstream',    'connect_timeout',  float, 0.001)
    _coerce(config, 'upstream',    'read_timeout',     float, 0.001)
    _coerce(config, 'upstream',    'chunk_size',       int,   1)
    _coerce(config, 'identifiers', 'token_length',     int,   1, MAX_TOKEN_LENGTH)
    _coerce(config, 'identifiers', 'shortcode_length', int,   1, 64)
    _coerce(config, 'identifiers', 'max_attempts',     int,   1)
    # fmt: on

    logger.debug('Loaded configuration.', extra={'configPath': str(config_path), 'appEnv': app_env()})
    return config
