"""
Failure classification for the remote users service.

Every exception raised on the remote path maps to exactly one category.
The category drives the user-facing message; the detail is for logs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from data.connection import HttpStatusError, MalformedResponseError, TransportError


class ErrorCategory(str, Enum):
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    MALFORMED_RESPONSE = "malformed_response"
    UNKNOWN = "unknown"


MESSAGES = {
    ErrorCategory.NOT_FOUND: "resource not found",
    ErrorCategory.SERVER_ERROR: "server error",
    ErrorCategory.MALFORMED_RESPONSE: "an error occurred",
    ErrorCategory.UNKNOWN: "an error occurred",
}


@dataclass(frozen=True)
class ClassifiedError:
    category: ErrorCategory
    detail: str

    @property
    def message(self) -> str:
        return MESSAGES[self.category]


def classify(error: BaseException) -> ClassifiedError:
    if isinstance(error, HttpStatusError):
        if error.status == 404:
            return ClassifiedError(ErrorCategory.NOT_FOUND, f"HTTP {error.status}")
        if error.status >= 500:
            return ClassifiedError(ErrorCategory.SERVER_ERROR, f"HTTP {error.status}")
        return ClassifiedError(ErrorCategory.UNKNOWN, f"HTTP {error.status}")
    if isinstance(error, MalformedResponseError):
        return ClassifiedError(ErrorCategory.MALFORMED_RESPONSE, error.detail)
    if isinstance(error, TransportError):
        return ClassifiedError(ErrorCategory.UNKNOWN, str(error))
    return ClassifiedError(ErrorCategory.UNKNOWN, f"{type(error).__name__}: {error}")
