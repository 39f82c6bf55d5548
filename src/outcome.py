from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class FunctionVariant(str, Enum):
    GET_API_SESSION = "getapisession"
    READ_BY_NAME = "readbyname"
    CREATE = "create"


@dataclass(frozen=True)
class Error:
    message: str

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class Success:
    function_variant: FunctionVariant
    control_id: str
    payload: Any = None

    @property
    def ok(self) -> bool:
        return True


ValidationOutcome = Union[Error, Success]
