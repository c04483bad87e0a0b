from __future__ import annotations
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Quota(BaseModel):
    model_config = ConfigDict(extra="ignore")

    total: int = Field(..., ge=0)
    used: int = Field(..., ge=0)
    remaining: int

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0


class Quotas(BaseModel):
    model_config = ConfigDict(extra="ignore")

    month: Quota
    grace: Optional[Quota] = None


class StatusResponse(BaseModel):
    """Account quota information returned by /status."""

    model_config = ConfigDict(extra="ignore")

    account_id: Union[int, str]
    quotas: Quotas


class ErrorResponse(BaseModel):
    """Shape of error bodies, e.g. {"message": "...", "errors": {"date": [...]}}."""

    model_config = ConfigDict(extra="ignore")

    message: str = "Unknown error"
    errors: Dict[str, Any] = Field(default_factory=dict)
