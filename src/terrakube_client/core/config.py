from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import httpx
from dotenv import find_dotenv, load_dotenv

from .._version import __version__

DEFAULT_USER_AGENT = f"terrakube-client/{__version__}"
DEFAULT_TIMEOUT_SECONDS = 30.0

ENDPOINT_ENV = "TERRAKUBE_ENDPOINT"
TOKEN_ENV = "TERRAKUBE_TOKEN"
INSECURE_TLS_ENV = "TERRAKUBE_INSECURE_TLS"
USER_AGENT_ENV = "TERRAKUBE_USER_AGENT"

_TRUTHY = {"1", "true", "yes", "on"}


class MissingEndpointError(ValueError):
    """Raised when the server endpoint is required but missing."""


class MissingTokenError(ValueError):
    """Raised when the bearer token is required but missing."""


def normalize_endpoint(endpoint: str) -> str:
    """Default the scheme to https and reject URLs without a host."""
    endpoint = endpoint.strip()
    if not endpoint.startswith(("http://", "https://")):
        endpoint = "https://" + endpoint
    try:
        url = httpx.URL(endpoint)
    except httpx.InvalidURL as exc:
        raise ValueError(f"invalid endpoint URL {endpoint!r}: {exc}") from exc
    if not url.host:
        raise ValueError(f"invalid endpoint URL {endpoint!r}: missing host")
    return str(url)


@dataclass(frozen=True)
class ClientConfig:
    endpoint: str
    token: str
    user_agent: str = DEFAULT_USER_AGENT
    insecure_tls: bool = False
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def build(
        cls,
        *,
        endpoint: Optional[str],
        token: Optional[str],
        user_agent: Optional[str] = None,
        insecure_tls: bool = False,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> "ClientConfig":
        if not endpoint or not endpoint.strip():
            raise MissingEndpointError("endpoint must be provided.")
        if not token:
            raise MissingTokenError("token must be provided.")
        return cls(
            endpoint=normalize_endpoint(endpoint),
            token=token,
            user_agent=user_agent or DEFAULT_USER_AGENT,
            insecure_tls=insecure_tls,
            timeout_seconds=timeout_seconds,
        )

    def __repr__(self) -> str:
        return (
            f"ClientConfig(endpoint={self.endpoint!r}, token='***', "
            f"user_agent={self.user_agent!r}, insecure_tls={self.insecure_tls}, "
            f"timeout_seconds={self.timeout_seconds})"
        )


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, str]:
    """Load the Terrakube endpoint and token from environment (optional .env)."""
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    endpoint = os.getenv(ENDPOINT_ENV, "").strip()
    token = os.getenv(TOKEN_ENV, "").strip()
    return endpoint, token


def env_client_kwargs(*, use_dotenv: bool = True, **overrides: Any) -> Dict[str, Any]:
    """
    Client keyword arguments taken from the environment.
    Explicit overrides win over environment values.
    """
    endpoint, token = load_env_config(use_dotenv=use_dotenv)
    if not endpoint and not overrides.get("endpoint"):
        raise MissingEndpointError(f"{ENDPOINT_ENV} not set")
    if not token and not overrides.get("token"):
        raise MissingTokenError(f"{TOKEN_ENV} not set")

    kwargs: Dict[str, Any] = {"endpoint": endpoint, "token": token}
    insecure = os.getenv(INSECURE_TLS_ENV, "").strip().lower()
    if insecure:
        kwargs["insecure_tls"] = insecure in _TRUTHY
    user_agent = os.getenv(USER_AGENT_ENV, "").strip()
    if user_agent:
        kwargs["user_agent"] = user_agent
    kwargs.update({k: v for k, v in overrides.items() if v is not None})
    return kwargs


__all__ = [
    "ClientConfig",
    "DEFAULT_USER_AGENT",
    "DEFAULT_TIMEOUT_SECONDS",
    "MissingEndpointError",
    "MissingTokenError",
    "normalize_endpoint",
    "load_env_config",
    "env_client_kwargs",
]
