from enum import Enum
from typing import Literal, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict


'''Gateway call outcome models (Pydantic)'''


class ErrorCategory(str, Enum):
    TIMEOUT = "timeout"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    SERVER_ERROR = "server_error"
    OTHER_BAD_RESPONSE = "other_bad_response"
    CANCELLED = "cancelled"
    NO_CONNECTIVITY = "no_connectivity"
    UNKNOWN = "unknown"


class GatewayError(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: ErrorCategory
    message: str
    status_code: Optional[int] = None


class SuccessOutcome(BaseModel):
    """Transport response handed back exactly as received."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["success"] = "success"
    response: httpx.Response

    @property
    def is_success(self) -> bool:
        return True

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def body(self) -> bytes:
        return self.response.content


class FailureOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    error: GatewayError

    @property
    def is_success(self) -> bool:
        return False


Outcome = Union[SuccessOutcome, FailureOutcome]
