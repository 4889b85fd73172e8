"""Private module and provider registry resources."""

from __future__ import annotations

from typing import List, Optional

from terrakube_client.core.crud import CrudService, ListOptions, resolve_list_options
from terrakube_client.core.validation import validate_id
from terrakube_client.models import (
    Implementation,
    Module,
    ModuleVersion,
    Provider,
    ProviderVersion,
)

from ._base import OrganizationChildService, OrganizationScopedService


class ModuleService(OrganizationScopedService[Module]):
    model = Module
    segment = "module"
    filter_key = "filter[module]"


class ModuleVersionService(OrganizationChildService[ModuleVersion]):
    model = ModuleVersion
    parent_segment = "module"
    parent_field = "module_id"
    segment = "version"
    filter_key = "filter[version]"

    async def list(
        self,
        organization_id: str,
        module_id: str,
        options: Optional[ListOptions] = None,
        *,
        filter: Optional[str] = None,
    ) -> List[ModuleVersion]:
        path = self._collection_path(organization_id, module_id)
        return await self._list(path, resolve_list_options(options, filter))

    async def get(self, organization_id: str, module_id: str, id: str) -> ModuleVersion:
        return await self._get(self._item_path(organization_id, module_id, id))

    async def create(
        self, organization_id: str, module_id: str, version: ModuleVersion
    ) -> ModuleVersion:
        path = self._collection_path(organization_id, module_id)
        return await self._create(path, version)

    async def update(
        self, organization_id: str, module_id: str, version: ModuleVersion
    ) -> ModuleVersion:
        path = self._item_path(organization_id, module_id, version.id)
        return await self._update(path, version)

    async def delete(self, organization_id: str, module_id: str, id: str) -> None:
        await self._delete(self._item_path(organization_id, module_id, id))


class ProviderService(OrganizationScopedService[Provider]):
    model = Provider
    segment = "provider"
    filter_key = "filter[provider]"


class ProviderVersionService(OrganizationChildService[ProviderVersion]):
    model = ProviderVersion
    parent_segment = "provider"
    parent_field = "provider_id"
    segment = "version"
    filter_key = "filter[version]"

    async def list(
        self,
        organization_id: str,
        provider_id: str,
        options: Optional[ListOptions] = None,
        *,
        filter: Optional[str] = None,
    ) -> List[ProviderVersion]:
        path = self._collection_path(organization_id, provider_id)
        return await self._list(path, resolve_list_options(options, filter))

    async def get(
        self, organization_id: str, provider_id: str, id: str
    ) -> ProviderVersion:
        return await self._get(self._item_path(organization_id, provider_id, id))

    async def create(
        self, organization_id: str, provider_id: str, version: ProviderVersion
    ) -> ProviderVersion:
        path = self._collection_path(organization_id, provider_id)
        return await self._create(path, version)

    async def update(
        self, organization_id: str, provider_id: str, version: ProviderVersion
    ) -> ProviderVersion:
        path = self._item_path(organization_id, provider_id, version.id)
        return await self._update(path, version)

    async def delete(self, organization_id: str, provider_id: str, id: str) -> None:
        await self._delete(self._item_path(organization_id, provider_id, id))


class ImplementationService(CrudService[Implementation]):
    """
    Platform builds (os/arch) of one provider version:
    /api/v1/organization/{org}/provider/{provider}/version/{version}/implementation
    """

    model = Implementation
    filter_key = "filter[implementation]"

    def _version_segments(
        self, organization_id: str, provider_id: str, version_id: str
    ) -> tuple:
        validate_id("organization_id", organization_id)
        validate_id("provider_id", provider_id)
        validate_id("version_id", version_id)
        return (
            "organization",
            organization_id,
            "provider",
            provider_id,
            "version",
            version_id,
            "implementation",
        )

    def _item_path(
        self, organization_id: str, provider_id: str, version_id: str, id: str
    ) -> str:
        segments = self._version_segments(organization_id, provider_id, version_id)
        validate_id("id", id)
        return self.client.api_path(*segments, id)

    async def list(
        self,
        organization_id: str,
        provider_id: str,
        version_id: str,
        options: Optional[ListOptions] = None,
        *,
        filter: Optional[str] = None,
    ) -> List[Implementation]:
        segments = self._version_segments(organization_id, provider_id, version_id)
        return await self._list(
            self.client.api_path(*segments), resolve_list_options(options, filter)
        )

    async def get(
        self, organization_id: str, provider_id: str, version_id: str, id: str
    ) -> Implementation:
        return await self._get(
            self._item_path(organization_id, provider_id, version_id, id)
        )

    async def create(
        self,
        organization_id: str,
        provider_id: str,
        version_id: str,
        implementation: Implementation,
    ) -> Implementation:
        segments = self._version_segments(organization_id, provider_id, version_id)
        return await self._create(self.client.api_path(*segments), implementation)

    async def update(
        self,
        organization_id: str,
        provider_id: str,
        version_id: str,
        implementation: Implementation,
    ) -> Implementation:
        path = self._item_path(
            organization_id, provider_id, version_id, implementation.id
        )
        return await self._update(path, implementation)

    async def delete(
        self, organization_id: str, provider_id: str, version_id: str, id: str
    ) -> None:
        await self._delete(
            self._item_path(organization_id, provider_id, version_id, id)
        )


__all__ = [
    "ModuleService",
    "ModuleVersionService",
    "ProviderService",
    "ProviderVersionService",
    "ImplementationService",
]
