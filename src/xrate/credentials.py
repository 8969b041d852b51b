"""Access key providers.

A provider is a zero-argument callable returning the access key. RateClient
calls it once at construction; every failure is a ConfigurationError.
"""

import logging
import os
from pathlib import Path

from dotenv import dotenv_values

from xrate.errors import ConfigurationError
from xrate.types import KeyProvider

logger = logging.getLogger(__name__)

DEFAULT_KEYS_FILE = "etc/access_keys.properties"
DEFAULT_KEY_NAME = "fixer_io"
DEFAULT_KEY_ENV = "FIXER_IO_ACCESS_KEY"


def properties_file_key(
    path: str | Path = DEFAULT_KEYS_FILE, key: str = DEFAULT_KEY_NAME
) -> KeyProvider:
    """Read ``key`` from a ``key=value`` properties file.

    Only the ``key=value`` subset of the Java properties format is read:
    ``#`` comments and blank lines are skipped and ``${VAR}`` in values is
    left unexpanded. ``key: value``, ``key value``, ``!`` comments
    and line continuations are not supported.

    The file is gitignored; copy ``etc/access_keys.properties.sample`` and
    fill in the real key.
    """
    path = Path(path)

    def load() -> str:
        if not path.is_file():
            logger.error("Couldn't open %s; have you renamed the sample file?", path)
            raise ConfigurationError(
                f"Couldn't open {path}; have you renamed the sample file?"
            )
        try:
            values = dotenv_values(path, interpolate=False)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Couldn't read {path}: {e}") from e

        value = values.get(key)
        if not value:
            raise ConfigurationError(f"Key {key!r} missing from {path}")
        return value

    return load


def env_key(var: str = DEFAULT_KEY_ENV) -> KeyProvider:
    """Read the access key from an environment variable."""

    def load() -> str:
        value = os.environ.get(var)
        if not value:
            raise ConfigurationError(f"{var} not set")
        return value

    return load


def static_key(value: str) -> KeyProvider:
    def load() -> str:
        if not value:
            raise ConfigurationError("Empty access key")
        return value

    return load
