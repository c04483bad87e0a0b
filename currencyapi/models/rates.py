from __future__ import annotations
import datetime as dt
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, field_validator


class CurrencyValue(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: str
    value: float

    @field_validator("code")
    @classmethod
    def upper_code(cls, v: str) -> str:
        return v.upper()


class Meta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    last_updated_at: dt.datetime


class RatesResponse(BaseModel):
    """Body of /latest, /historical and /convert."""

    model_config = ConfigDict(extra="ignore")

    meta: Meta
    data: Dict[str, CurrencyValue]

    def rate(self, code: str) -> float:
        try:
            return self.data[code.upper()].value
        except KeyError:
            raise KeyError(f"currency '{code}' not in response") from None


class RangeEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    datetime: dt.datetime
    currencies: Dict[str, CurrencyValue]


class RangeResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: List[RangeEntry]
