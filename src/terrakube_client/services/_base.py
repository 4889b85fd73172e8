"""
Service bases for the three common path shapes:
  /api/v1/<segment>
  /api/v1/organization/{organization_id}/<segment>
  /api/v1/organization/{organization_id}/workspace/{workspace_id}/<segment>

Identifiers are validated before any path is built.
"""

from __future__ import annotations

from typing import List, Optional

from terrakube_client.core.crud import CrudService, ListOptions, T, resolve_list_options
from terrakube_client.core.validation import validate_id


class RootService(CrudService[T]):
    segment: str

    async def list(
        self, options: Optional[ListOptions] = None, *, filter: Optional[str] = None
    ) -> List[T]:
        path = self.client.api_path(self.segment)
        return await self._list(path, resolve_list_options(options, filter))

    async def get(self, id: str) -> T:
        validate_id("id", id)
        return await self._get(self.client.api_path(self.segment, id))

    async def create(self, entity: T) -> T:
        return await self._create(self.client.api_path(self.segment), entity)

    async def update(self, entity: T) -> T:
        validate_id("id", entity.id)
        return await self._update(self.client.api_path(self.segment, entity.id), entity)

    async def delete(self, id: str) -> None:
        validate_id("id", id)
        await self._delete(self.client.api_path(self.segment, id))


class OrganizationScopedService(CrudService[T]):
    segment: str

    def _collection_path(self, organization_id: str) -> str:
        validate_id("organization_id", organization_id)
        return self.client.api_path("organization", organization_id, self.segment)

    def _item_path(self, organization_id: str, id: str) -> str:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        return self.client.api_path("organization", organization_id, self.segment, id)

    async def list(
        self,
        organization_id: str,
        options: Optional[ListOptions] = None,
        *,
        filter: Optional[str] = None,
    ) -> List[T]:
        path = self._collection_path(organization_id)
        return await self._list(path, resolve_list_options(options, filter))

    async def get(self, organization_id: str, id: str) -> T:
        return await self._get(self._item_path(organization_id, id))

    async def create(self, organization_id: str, entity: T) -> T:
        return await self._create(self._collection_path(organization_id), entity)

    async def update(self, organization_id: str, entity: T) -> T:
        return await self._update(self._item_path(organization_id, entity.id), entity)

    async def delete(self, organization_id: str, id: str) -> None:
        await self._delete(self._item_path(organization_id, id))


class WorkspaceScopedService(CrudService[T]):
    segment: str

    def _collection_path(self, organization_id: str, workspace_id: str) -> str:
        validate_id("organization_id", organization_id)
        validate_id("workspace_id", workspace_id)
        return self.client.api_path(
            "organization", organization_id, "workspace", workspace_id, self.segment
        )

    def _item_path(self, organization_id: str, workspace_id: str, id: str) -> str:
        validate_id("organization_id", organization_id)
        validate_id("workspace_id", workspace_id)
        validate_id("id", id)
        return self.client.api_path(
            "organization",
            organization_id,
            "workspace",
            workspace_id,
            self.segment,
            id,
        )

    async def list(
        self,
        organization_id: str,
        workspace_id: str,
        options: Optional[ListOptions] = None,
        *,
        filter: Optional[str] = None,
    ) -> List[T]:
        path = self._collection_path(organization_id, workspace_id)
        return await self._list(path, resolve_list_options(options, filter))

    async def get(self, organization_id: str, workspace_id: str, id: str) -> T:
        return await self._get(self._item_path(organization_id, workspace_id, id))

    async def create(self, organization_id: str, workspace_id: str, entity: T) -> T:
        return await self._create(
            self._collection_path(organization_id, workspace_id), entity
        )

    async def update(self, organization_id: str, workspace_id: str, entity: T) -> T:
        return await self._update(
            self._item_path(organization_id, workspace_id, entity.id), entity
        )

    async def delete(self, organization_id: str, workspace_id: str, id: str) -> None:
        await self._delete(self._item_path(organization_id, workspace_id, id))


class OrganizationChildService(CrudService[T]):
    """
    Path helpers for resources nested under one organization-level parent,
    e.g. /api/v1/organization/{org}/job/{job_id}/step. Subclasses expose
    the public methods with their parent id named after the parent.
    """

    parent_segment: str
    parent_field: str
    segment: str

    def _collection_path(self, organization_id: str, parent_id: str) -> str:
        validate_id("organization_id", organization_id)
        validate_id(self.parent_field, parent_id)
        return self.client.api_path(
            "organization",
            organization_id,
            self.parent_segment,
            parent_id,
            self.segment,
        )

    def _item_path(self, organization_id: str, parent_id: str, id: str) -> str:
        validate_id("organization_id", organization_id)
        validate_id(self.parent_field, parent_id)
        validate_id("id", id)
        return self.client.api_path(
            "organization",
            organization_id,
            self.parent_segment,
            parent_id,
            self.segment,
            id,
        )


__all__ = [
    "RootService",
    "OrganizationScopedService",
    "WorkspaceScopedService",
    "OrganizationChildService",
]
