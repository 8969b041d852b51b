"""Shared types for the xrate package."""

from typing import Callable

RateTable = dict[str, float]
KeyProvider = Callable[[], str]
