"""Enumerations accepted by the API as query parameter values."""

from enum import Enum


class Accuracy(str, Enum):
    DAY = "day"
    HOUR = "hour"
    QUARTER_HOUR = "quarter_hour"
    MINUTE = "minute"


class CurrencyType(str, Enum):
    FIAT = "fiat"
    METAL = "metal"
    CRYPTO = "crypto"
