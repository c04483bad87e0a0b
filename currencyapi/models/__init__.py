from .constants import Accuracy, CurrencyType
from .currencies import CurrenciesResponse, CurrencyInfo
from .rates import CurrencyValue, Meta, RangeEntry, RangeResponse, RatesResponse
from .status import ErrorResponse, Quota, Quotas, StatusResponse

__all__ = [
    "Accuracy",
    "CurrencyType",
    "CurrencyInfo",
    "CurrenciesResponse",
    "CurrencyValue",
    "Meta",
    "RatesResponse",
    "RangeEntry",
    "RangeResponse",
    "Quota",
    "Quotas",
    "StatusResponse",
    "ErrorResponse",
]
