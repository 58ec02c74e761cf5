"""
Explicit result type returned by the store layer.

Handlers branch on `Success` / `Failure` instead of catching exceptions from
boto3 themselves.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class FailureKind(str, Enum):
    STORE_ACCESS = "store_access"


@dataclass(frozen=True)
class Success:
    value: Any = None


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    error: str

    @classmethod
    def from_exception(cls, kind: FailureKind, exc: BaseException) -> "Failure":
        # empty messages fall back to the exception type name
        return cls(kind=kind, error=str(exc) or type(exc).__name__)


Result = Union[Success, Failure]
