from typing import Optional

from .errors import TerrakubeValidationError


def validate_id(field: str, value: Optional[str]) -> str:
    """
    Reject an empty path-segment identifier before any path is built.
    Returns the value unchanged so callers can validate inline.
    """
    if value is None or value == "":
        raise TerrakubeValidationError(field, "must not be empty")
    return value


__all__ = ["validate_id"]
