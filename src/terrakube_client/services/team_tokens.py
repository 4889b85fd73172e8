from __future__ import annotations

from typing import List
from urllib.parse import quote

from terrakube_client.core.client import APIClient, BodyMode
from terrakube_client.core.validation import validate_id
from terrakube_client.models import TeamToken

TEAM_TOKEN_BASE_PATH = "/access-token/v1/teams"


class TeamTokenService:
    """
    Team access tokens. This endpoint family is not JSON:API: bodies are
    plain JSON objects and media types are application/json.
    """

    def __init__(self, client: APIClient):
        self.client = client

    async def list(self) -> List[TeamToken]:
        tokens = await self.client.request(
            "GET",
            TEAM_TOKEN_BASE_PATH,
            into=List[TeamToken],
            mode=BodyMode.JSON,
            resource="team_token",
        )
        return tokens or []

    async def create(self, token: TeamToken) -> TeamToken:
        created = await self.client.request(
            "POST",
            TEAM_TOKEN_BASE_PATH,
            body=token,
            into=TeamToken,
            mode=BodyMode.JSON,
            resource="team_token",
        )
        return created if created is not None else TeamToken()

    async def delete(self, id: str) -> None:
        validate_id("id", id)
        await self.client.request(
            "DELETE",
            f"{TEAM_TOKEN_BASE_PATH}/{quote(id, safe='')}",
            mode=BodyMode.JSON,
            resource="team_token",
        )


__all__ = ["TeamTokenService", "TEAM_TOKEN_BASE_PATH"]
