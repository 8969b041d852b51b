"""Exchange rate client for fixer.io-style JSON services."""

import logging
import re

import requests

from xrate.credentials import properties_file_key, static_key
from xrate.errors import (
    ConfigurationError,
    CurrencyNotFoundError,
    NetworkError,
    ZeroRateError,
)
from xrate.types import KeyProvider, RateTable

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

_ACCESS_KEY_RE = re.compile(r"(access_key=)[^&\s]*")


def format_date_part(n: int) -> str:
    """Left-pad a month or day with a single zero when below 10."""
    if n < 10:
        return f"0{n}"
    return str(n)


class RateClient:
    """Fetch rates against the service's base currency (the Euro for fixer.io).

    Requests take the form ``<base_url>YYYY-MM-DD?access_key=<key>`` and the
    response body must be a JSON object with a ``rates`` object inside. Each
    call performs exactly one GET; nothing is cached between calls.

    The access key is loaded once here. If ``key_provider`` fails the
    constructor raises ConfigurationError and no client is created.
    Without an injected ``session`` each call goes through ``requests.get``.
    """

    def __init__(
        self,
        base_url: str,
        key_provider: KeyProvider | None = None,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        if key_provider is None:
            key_provider = properties_file_key()
        try:
            access_key = key_provider()
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Could not load access key: {e}") from e
        if not access_key:
            raise ConfigurationError("Empty access key")

        self._base_url = base_url
        self._access_key = access_key
        self._session = session
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def access_key(self) -> str:
        return self._access_key

    format_date_part = staticmethod(format_date_part)

    def build_url(self, year: int, month: int, day: int) -> str:
        return (
            f"{self._base_url}{year}-{format_date_part(month)}-{format_date_part(day)}"
            f"?access_key={self._access_key}"
        )

    def _redact(self, text: str) -> str:
        text = _ACCESS_KEY_RE.sub(r"\1***", text)
        return text.replace(self._access_key, "***")

    def fetch_rates(self, url: str) -> RateTable:
        """GET ``url`` and return its ``rates`` object.

        Raises NetworkError on connection failures, HTTP error statuses and
        bodies that are not a JSON object with a ``rates`` object.
        """
        safe_url = self._redact(url)
        get = self._session.get if self._session is not None else requests.get
        try:
            resp = get(url, timeout=self._timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            message = f"Request to {safe_url} failed: {self._redact(str(e))}"
            logger.error(
                "There was a problem opening the URL. Check if you have the right one. %s",
                message,
            )
            raise NetworkError(message, safe_url) from e

        # fixer.io reports bad keys, quota and date errors as 200 + success=false
        if isinstance(data, dict) and data.get("success") is False:
            error = data.get("error")
            if not isinstance(error, dict):
                error = {}
            message = self._redact(
                f"Rate service error {error.get('code')} from {safe_url}: {error.get('info')}"
            )
            logger.error("%s", message)
            raise NetworkError(message, safe_url)

        rates = data.get("rates") if isinstance(data, dict) else None
        if not isinstance(rates, dict):
            message = f"Response from {safe_url} has no 'rates' object"
            logger.error("%s", message)
            raise NetworkError(message, safe_url)

        logger.debug("Fetched %d rates from %s", len(rates), safe_url)
        return rates

    def _lookup(self, rates: RateTable, currency_code: str) -> float:
        if currency_code not in rates:
            raise CurrencyNotFoundError(currency_code)
        value = rates[currency_code]
        # bool is an int subclass, but true/false is not a rate
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise NetworkError(f"Rate for {currency_code!r} is not a number: {value!r}")
        return float(value)

    def rate_against_base(self, currency_code: str, year: int, month: int, day: int) -> float:
        """Rate of ``currency_code`` per one unit of the base currency on the given date."""
        rates = self.fetch_rates(self.build_url(year, month, day))
        return self._lookup(rates, currency_code)

    def rate_between(
        self, from_currency: str, to_currency: str, year: int, month: int, day: int
    ) -> float:
        """Rate of ``from_currency`` against ``to_currency``, from a single response.

        Computed as ``rate(from_currency) / rate(to_currency)``. Raises
        ZeroRateError if ``to_currency`` is quoted at zero.
        """
        rates = self.fetch_rates(self.build_url(year, month, day))
        from_rate = self._lookup(rates, from_currency)
        to_rate = self._lookup(rates, to_currency)
        if to_rate == 0:
            raise ZeroRateError(to_currency)
        return from_rate / to_rate


class MockRateClient(RateClient):
    """Offline client returning a fixed Euro-based table for every date."""

    MOCK_RATES = {
        "EUR": 1.0,
        "USD": 1.2,
        "GBP": 0.86,
        "ILS": 3.9,
        "JPY": 130.0,
    }

    def __init__(self, base_url: str = "mock://rates/"):
        super().__init__(base_url, key_provider=static_key("mock"))

    def fetch_rates(self, url: str) -> RateTable:
        logger.debug("Returning %d mock rates", len(self.MOCK_RATES))
        return dict(self.MOCK_RATES)
