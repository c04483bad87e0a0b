from __future__ import annotations
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import CurrencyType


class CurrencyInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: str
    name: str
    symbol: str
    symbol_native: Optional[str] = None
    decimal_digits: int = Field(0, ge=0)
    rounding: float = 0
    name_plural: Optional[str] = None
    type: Optional[CurrencyType] = None
    countries: List[str] = Field(default_factory=list)


class CurrenciesResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: Dict[str, CurrencyInfo]

    def codes(self) -> List[str]:
        return sorted(self.data)
