"""Core request pipeline for terrakube-client (resource-agnostic)."""

from .client import API_BASE_PATH, APIClient, BodyMode
from .config import (
    ClientConfig,
    MissingEndpointError,
    MissingTokenError,
    load_env_config,
)
from .crud import CrudService, ListOptions
from .errors import (
    ErrorDetail,
    TerrakubeAPIError,
    TerrakubeClientError,
    TerrakubeDecodeError,
    TerrakubeRequestError,
    TerrakubeTransportError,
    TerrakubeValidationError,
    is_conflict,
    is_not_found,
    is_unauthorized,
)
from .jsonapi import Resource, decode_many, decode_one, encode_resource
from .validation import validate_id

__all__ = [
    # Client
    "APIClient",
    "BodyMode",
    "API_BASE_PATH",
    # Config
    "ClientConfig",
    "MissingEndpointError",
    "MissingTokenError",
    "load_env_config",
    # CRUD
    "CrudService",
    "ListOptions",
    "validate_id",
    # JSON:API
    "Resource",
    "encode_resource",
    "decode_one",
    "decode_many",
    # Exceptions
    "TerrakubeClientError",
    "TerrakubeValidationError",
    "TerrakubeRequestError",
    "TerrakubeTransportError",
    "TerrakubeAPIError",
    "TerrakubeDecodeError",
    "ErrorDetail",
    "is_not_found",
    "is_unauthorized",
    "is_conflict",
]
