"""
API Error Module

Failure kinds the client reports. Errors are delivered to callers inside
a Failure result rather than raised.
"""

from enum import Enum
from typing import Optional


class APIErrorKind(Enum):
    """Closed set of failure kinds."""
    NO_RESPONSE = "no_response"
    INVALID_REQUEST = "invalid_request"
    JSON_DECODING_ERROR = "json_decoding_error"
    NETWORK_ERROR = "network_error"


class APIError(Exception):
    """
    A client failure with its kind and an optional cause message.

    The cause is always a plain string so results stay comparable and
    printable regardless of which library produced the underlying error.
    """

    def __init__(self, kind: APIErrorKind, cause: Optional[str] = None):
        self.kind = kind
        self.cause = cause
        super().__init__(self.__str__())

    @classmethod
    def no_response(cls, cause: Optional[str] = None) -> "APIError":
        return cls(APIErrorKind.NO_RESPONSE, cause)

    @classmethod
    def invalid_request(cls, cause: Optional[str] = None) -> "APIError":
        return cls(APIErrorKind.INVALID_REQUEST, cause)

    @classmethod
    def json_decoding_error(cls, cause: str) -> "APIError":
        return cls(APIErrorKind.JSON_DECODING_ERROR, cause)

    @classmethod
    def network_error(cls, cause: str) -> "APIError":
        return cls(APIErrorKind.NETWORK_ERROR, cause)

    def __eq__(self, other) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        return self.kind == other.kind and self.cause == other.cause

    def __hash__(self) -> int:
        return hash((self.kind, self.cause))

    def __repr__(self) -> str:
        return f"APIError({self.kind.name}, cause={self.cause!r})"

    def __str__(self) -> str:
        if self.cause:
            return f"{self.kind.value}: {self.cause}"
        return self.kind.value
