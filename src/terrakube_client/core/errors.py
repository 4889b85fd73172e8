from __future__ import annotations

import json
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class TerrakubeClientError(Exception):
    """Base error for client failures."""


class TerrakubeValidationError(TerrakubeClientError, ValueError):
    """A required identifier was empty; raised before any request is built."""

    def __init__(self, field: str, message: str = "must not be empty"):
        super().__init__(f"validation error: {field} {message}")
        self.field = field
        self.message = message


class TerrakubeRequestError(TerrakubeClientError):
    """The outgoing request could not be built (bad URL, unencodable body)."""


class TerrakubeTransportError(TerrakubeClientError):
    """Network or timeout failure while talking to the server."""


class TerrakubeDecodeError(TerrakubeClientError):
    """The server answered 2xx but the payload could not be decoded."""


class ErrorDetail(BaseModel):
    detail: Optional[str] = None
    title: Optional[str] = None
    status: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class _ErrorDocument(BaseModel):
    errors: List[ErrorDetail] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


def parse_error_details(body: bytes) -> List[ErrorDetail]:
    """
    Best-effort parse of a JSON:API error document.
    Returns [] for anything that is not {"errors": [...]}.
    """
    if not body:
        return []
    try:
        return _ErrorDocument.model_validate_json(body).errors
    except (ValidationError, ValueError):
        return []


class TerrakubeAPIError(TerrakubeClientError):
    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        path: str,
        body: bytes = b"",
        errors: Optional[List[ErrorDetail]] = None,
    ):
        self.status_code = status_code
        self.method = method
        self.path = path
        self.body = body
        self.errors = list(errors or [])
        super().__init__(self._message())

    def _message(self) -> str:
        if self.errors and self.errors[0].detail:
            return (
                f"{self.method} {self.path}: {self.status_code} "
                f"{self.errors[0].detail}"
            )
        return f"{self.method} {self.path}: {self.status_code}"

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401

    @property
    def is_conflict(self) -> bool:
        return self.status_code == 409

    def json(self) -> Any:
        """Raw body decoded as JSON, or None when it is not JSON."""
        try:
            return json.loads(self.body) if self.body else None
        except ValueError:
            return None


def is_not_found(exc: BaseException) -> bool:
    return isinstance(exc, TerrakubeAPIError) and exc.is_not_found


def is_unauthorized(exc: BaseException) -> bool:
    return isinstance(exc, TerrakubeAPIError) and exc.is_unauthorized


def is_conflict(exc: BaseException) -> bool:
    return isinstance(exc, TerrakubeAPIError) and exc.is_conflict


__all__ = [
    "TerrakubeClientError",
    "TerrakubeValidationError",
    "TerrakubeRequestError",
    "TerrakubeTransportError",
    "TerrakubeDecodeError",
    "TerrakubeAPIError",
    "ErrorDetail",
    "parse_error_details",
    "is_not_found",
    "is_unauthorized",
    "is_conflict",
]
