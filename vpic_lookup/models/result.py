"""
Tagged lookup results.

Every pipeline step reports one of four outcomes. Callers that only care
about the value use `unwrap()`, which collapses all failures to None.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class LookupStatus(str, Enum):
    OK = "ok"
    INPUT_INVALID = "input_invalid"
    NO_DATA = "no_data"
    TRANSPORT_FAILURE = "transport_failure"


class LookupResult(BaseModel):
    status: LookupStatus
    data: Optional[Any] = None
    error: Optional[str] = None

    class Config:
        frozen = True

    @property
    def success(self) -> bool:
        return self.status == LookupStatus.OK

    def unwrap(self) -> Optional[Any]:
        return self.data if self.success else None

    @classmethod
    def ok(cls, data: Any) -> "LookupResult":
        return cls(status=LookupStatus.OK, data=data)

    @classmethod
    def invalid(cls, error: str) -> "LookupResult":
        return cls(status=LookupStatus.INPUT_INVALID, error=error)

    @classmethod
    def no_data(cls, error: str = "No results found") -> "LookupResult":
        return cls(status=LookupStatus.NO_DATA, error=error)

    @classmethod
    def failure(cls, error: str) -> "LookupResult":
        return cls(status=LookupStatus.TRANSPORT_FAILURE, error=error)
