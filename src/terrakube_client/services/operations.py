from __future__ import annotations

from terrakube_client.core.client import APIClient, BodyMode
from terrakube_client.models import AtomicRequest, AtomicResponse


class OperationsService:
    """
    JSON:API atomic operations: several add/update/remove operations applied
    by the server in one transaction, sent as a single plain-JSON request to
    /api/v1/operations.
    """

    def __init__(self, client: APIClient):
        self.client = client

    async def submit(self, request: AtomicRequest) -> AtomicResponse:
        response = await self.client.request(
            "POST",
            self.client.api_path("operations"),
            body=request,
            into=AtomicResponse,
            mode=BodyMode.JSON,
            resource="operations",
        )
        return response if response is not None else AtomicResponse()


__all__ = ["OperationsService"]
