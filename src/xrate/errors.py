"""Exceptions raised by the exchange rate client."""


class RateError(Exception):
    """Base class for every failure surfaced by xrate."""


class ConfigurationError(RateError):
    """The access key could not be loaded."""


class NetworkError(RateError):
    """The rate service could not be reached or returned an unexpected body."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class CurrencyNotFoundError(RateError, KeyError):
    """The requested currency code is absent from the response's rates."""

    def __init__(self, currency_code: str):
        super().__init__(currency_code)
        self.currency_code = currency_code

    def __str__(self) -> str:
        return f"Currency {self.currency_code!r} not found in rates"


class ZeroRateError(RateError, ZeroDivisionError):
    """The target currency of a cross rate is quoted at exactly zero."""

    def __init__(self, currency_code: str):
        super().__init__(f"Rate for {currency_code!r} is zero; cannot compute cross rate")
        self.currency_code = currency_code
