"""xrate — historical exchange rates from a fixer.io-style service."""

from xrate.client import MockRateClient, RateClient, format_date_part
from xrate.credentials import env_key, properties_file_key, static_key
from xrate.errors import (
    ConfigurationError,
    CurrencyNotFoundError,
    NetworkError,
    RateError,
    ZeroRateError,
)
from xrate.types import KeyProvider, RateTable

__all__ = [
    "RateClient",
    "MockRateClient",
    "create_client",
    "format_date_part",
    "properties_file_key",
    "env_key",
    "static_key",
    "RateError",
    "ConfigurationError",
    "NetworkError",
    "CurrencyNotFoundError",
    "ZeroRateError",
    "RateTable",
    "KeyProvider",
]


def create_client(
    base_url: str,
    keys_file: str | None = None,
    key_env: str | None = None,
    mock: bool = False,
) -> RateClient:
    """Create a RateClient with the requested credential source.

    Precedence: ``mock`` (no key needed), then ``key_env``, then
    ``keys_file``, then the default ``etc/access_keys.properties``.
    """
    if mock:
        return MockRateClient(base_url)
    if key_env:
        return RateClient(base_url, key_provider=env_key(key_env))
    if keys_file:
        return RateClient(base_url, key_provider=properties_file_key(keys_file))
    return RateClient(base_url)
