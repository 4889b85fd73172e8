from __future__ import annotations

from typing import List, Optional

from terrakube_client.core.crud import CrudService, ListOptions, resolve_list_options
from terrakube_client.core.validation import validate_id
from terrakube_client.models import Collection, CollectionItem, CollectionReference

from ._base import OrganizationChildService, OrganizationScopedService


class CollectionService(OrganizationScopedService[Collection]):
    """Variable collections that can be attached to many workspaces."""

    model = Collection
    segment = "collection"
    filter_key = "filter[collection]"


class CollectionItemService(OrganizationChildService[CollectionItem]):
    model = CollectionItem
    parent_segment = "collection"
    parent_field = "collection_id"
    segment = "item"
    filter_key = "filter[item]"

    async def list(
        self,
        organization_id: str,
        collection_id: str,
        options: Optional[ListOptions] = None,
        *,
        filter: Optional[str] = None,
    ) -> List[CollectionItem]:
        path = self._collection_path(organization_id, collection_id)
        return await self._list(path, resolve_list_options(options, filter))

    async def get(
        self, organization_id: str, collection_id: str, id: str
    ) -> CollectionItem:
        return await self._get(self._item_path(organization_id, collection_id, id))

    async def create(
        self, organization_id: str, collection_id: str, item: CollectionItem
    ) -> CollectionItem:
        path = self._collection_path(organization_id, collection_id)
        return await self._create(path, item)

    async def update(
        self, organization_id: str, collection_id: str, item: CollectionItem
    ) -> CollectionItem:
        path = self._item_path(organization_id, collection_id, item.id)
        return await self._update(path, item)

    async def delete(self, organization_id: str, collection_id: str, id: str) -> None:
        await self._delete(self._item_path(organization_id, collection_id, id))


class CollectionReferenceService(CrudService[CollectionReference]):
    """
    Links between a collection and a workspace.

    References are listed and created under their collection, but read,
    updated and deleted through the top-level /api/v1/reference/{id} path.
    """

    model = CollectionReference
    filter_key = "filter[reference]"

    def _collection_path(self, organization_id: str, collection_id: str) -> str:
        validate_id("organization_id", organization_id)
        validate_id("collection_id", collection_id)
        return self.client.api_path(
            "organization", organization_id, "collection", collection_id, "reference"
        )

    def _item_path(self, id: str) -> str:
        validate_id("id", id)
        return self.client.api_path("reference", id)

    async def list(
        self,
        organization_id: str,
        collection_id: str,
        options: Optional[ListOptions] = None,
        *,
        filter: Optional[str] = None,
    ) -> List[CollectionReference]:
        path = self._collection_path(organization_id, collection_id)
        return await self._list(path, resolve_list_options(options, filter))

    async def get(self, id: str) -> CollectionReference:
        return await self._get(self._item_path(id))

    async def create(
        self,
        organization_id: str,
        collection_id: str,
        reference: CollectionReference,
    ) -> CollectionReference:
        path = self._collection_path(organization_id, collection_id)
        return await self._create(path, reference)

    async def update(self, reference: CollectionReference) -> CollectionReference:
        return await self._update(self._item_path(reference.id), reference)

    async def delete(self, id: str) -> None:
        await self._delete(self._item_path(id))


__all__ = ["CollectionService", "CollectionItemService", "CollectionReferenceService"]
