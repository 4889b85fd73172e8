from __future__ import annotations

import enum
import json
import logging
import time
import typing
from functools import lru_cache
from typing import Any, Dict, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import DEFAULT_TIMEOUT_SECONDS, ClientConfig, env_client_kwargs
from .errors import (
    TerrakubeAPIError,
    TerrakubeDecodeError,
    TerrakubeRequestError,
    TerrakubeTransportError,
    parse_error_details,
)
from .jsonapi import MEDIA_TYPE, Resource, decode_many, decode_one, encode_resource

API_BASE_PATH = "/api/v1/"
JSON_MEDIA_TYPE = "application/json"

C = TypeVar("C", bound="APIClient")


class BodyMode(enum.Enum):
    """How request bodies are encoded and responses decoded."""

    JSONAPI = MEDIA_TYPE
    JSON = JSON_MEDIA_TYPE

    @property
    def media_type(self) -> str:
        return self.value


@lru_cache(maxsize=None)
def _adapter(into: Any) -> TypeAdapter:
    return TypeAdapter(into)


def _collection_model(into: Any) -> Optional[Type[Resource]]:
    """Return the item model when ``into`` is ``list[Model]``."""
    if typing.get_origin(into) in (list, typing.List):
        args = typing.get_args(into)
        if args:
            return args[0]
    return None


class APIClient:
    """
    Shared HTTP client for the Terrakube API.
    - Builds authenticated requests (bearer token, user agent, media types)
    - Classifies responses by status before decoding anything
    - Decodes JSON:API single/collection documents or plain JSON bodies
    - No retries; one request per call
    """

    def __init__(
        self,
        *,
        endpoint: Optional[str],
        token: Optional[str],
        http: Optional[httpx.AsyncClient] = None,
        insecure_tls: bool = False,
        user_agent: Optional[str] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = ClientConfig.build(
            endpoint=endpoint,
            token=token,
            user_agent=user_agent,
            insecure_tls=insecure_tls,
            timeout_seconds=timeout_seconds,
        )
        self.log = logger or logging.getLogger("terrakube_client.client")
        self._base_url = httpx.URL(self.config.endpoint)

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            verify=not self.config.insecure_tls,
            timeout=self.config.timeout_seconds,
            follow_redirects=True,
        )

    @classmethod
    def from_env(cls: Type[C], **kwargs: Any) -> C:
        return cls(**env_client_kwargs(**kwargs))

    @property
    def base_url(self) -> str:
        return self.config.endpoint

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self: C) -> C:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @staticmethod
    def api_path(*segments: str) -> str:
        """Join path segments under /api/v1/, escaping each segment."""
        if not segments:
            return API_BASE_PATH
        return API_BASE_PATH + "/".join(quote(s, safe="") for s in segments)

    # ------------------------------------------------------------------
    # Request building
    # ------------------------------------------------------------------

    def _encode_body(self, body: Any, mode: BodyMode) -> bytes:
        try:
            if mode is BodyMode.JSONAPI:
                if not isinstance(body, Resource):
                    raise TypeError(
                        f"JSON:API bodies must be Resource models, "
                        f"got {type(body).__name__}"
                    )
                payload: Any = encode_resource(body)
            elif isinstance(body, BaseModel):
                # plain JSON bodies leave unset optional fields out
                payload = body.model_dump(
                    mode="json", by_alias=True, exclude_none=True
                )
            else:
                payload = body
            return json.dumps(payload).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise TerrakubeRequestError(f"marshaling request body: {exc}") from exc

    def build_request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Any = None,
        mode: BodyMode = BodyMode.JSONAPI,
    ) -> httpx.Request:
        """Build the outgoing request. No network I/O happens here."""
        headers = {
            "Authorization": f"Bearer {self.config.token}",
            "User-Agent": self.config.user_agent,
            "Accept": mode.media_type,
        }
        content: Optional[bytes] = None
        if body is not None:
            content = self._encode_body(body, mode)
            headers["Content-Type"] = mode.media_type

        try:
            url = self._base_url.join(path)
            return self.http.build_request(
                method.upper(), url, params=params, content=content, headers=headers
            )
        except httpx.InvalidURL as exc:
            raise TerrakubeRequestError(f"invalid request URL for {path!r}: {exc}") from exc

    # ------------------------------------------------------------------
    # Response pipeline
    # ------------------------------------------------------------------

    async def send(
        self,
        request: httpx.Request,
        into: Any = None,
        *,
        mode: BodyMode = BodyMode.JSONAPI,
        resource: Optional[str] = None,
    ) -> Any:
        """
        Execute a built request and map the response.
        - Raises TerrakubeTransportError on network/timeout errors
        - Raises TerrakubeAPIError on non-2xx responses (body always kept)
        - Raises TerrakubeDecodeError if a 2xx payload can't be decoded
        - Returns None when ``into`` is None or the body is empty
        """
        start = time.perf_counter()
        try:
            resp = await self.http.send(request)
        except httpx.HTTPError as exc:
            raise TerrakubeTransportError(
                f"Network/timeout error calling {request.method} "
                f"{request.url.path}: {exc}"
            ) from exc

        body = resp.content
        duration_ms = int((time.perf_counter() - start) * 1000)
        self.log.debug(
            "terrakube.request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": resp.status_code,
                "duration_ms": duration_ms,
                "resource": resource,
            },
        )

        if resp.status_code < 200 or resp.status_code >= 300:
            raise TerrakubeAPIError(
                status_code=resp.status_code,
                method=request.method,
                path=request.url.path,
                body=body,
                errors=parse_error_details(body),
            )

        if into is None or not body:
            return None

        if mode is BodyMode.JSON:
            try:
                return _adapter(into).validate_json(body)
            except ValidationError as exc:
                raise TerrakubeDecodeError(
                    f"decoding JSON response from {request.method} "
                    f"{request.url.path}: {exc}"
                ) from exc

        try:
            document = json.loads(body)
        except ValueError as exc:
            snippet = body[:500].decode("utf-8", errors="replace")
            raise TerrakubeDecodeError(
                f"Expected JSON:API document from {request.method} "
                f"{request.url.path}, got non-JSON body snippet: {snippet!r}"
            ) from exc

        item_model = _collection_model(into)
        if item_model is not None:
            return decode_many(item_model, document)
        return decode_one(into, document)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Any = None,
        into: Any = None,
        mode: BodyMode = BodyMode.JSONAPI,
        resource: Optional[str] = None,
    ) -> Any:
        req = self.build_request(method, path, params=params, body=body, mode=mode)
        return await self.send(req, into, mode=mode, resource=resource)


__all__ = ["APIClient", "BodyMode", "API_BASE_PATH", "JSON_MEDIA_TYPE"]
