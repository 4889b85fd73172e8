from __future__ import annotations

from typing import List, Optional

from terrakube_client.core.crud import ListOptions, resolve_list_options
from terrakube_client.models import Action, Address, Job, Step

from ._base import OrganizationChildService, OrganizationScopedService, RootService


class JobService(OrganizationScopedService[Job]):
    """
    Jobs run a template (plan, apply, destroy, ...) against a workspace.

    Create a job with ``workspace=Workspace(id=...)`` and either
    ``template_reference`` or an inline ``tcl`` body.
    """

    model = Job
    segment = "job"
    filter_key = "filter[job]"


class StepService(OrganizationChildService[Step]):
    model = Step
    parent_segment = "job"
    parent_field = "job_id"
    segment = "step"
    filter_key = "filter[step]"

    async def list(
        self,
        organization_id: str,
        job_id: str,
        options: Optional[ListOptions] = None,
        *,
        filter: Optional[str] = None,
    ) -> List[Step]:
        path = self._collection_path(organization_id, job_id)
        return await self._list(path, resolve_list_options(options, filter))

    async def get(self, organization_id: str, job_id: str, id: str) -> Step:
        return await self._get(self._item_path(organization_id, job_id, id))

    async def create(self, organization_id: str, job_id: str, step: Step) -> Step:
        return await self._create(self._collection_path(organization_id, job_id), step)

    async def update(self, organization_id: str, job_id: str, step: Step) -> Step:
        return await self._update(
            self._item_path(organization_id, job_id, step.id), step
        )

    async def delete(self, organization_id: str, job_id: str, id: str) -> None:
        await self._delete(self._item_path(organization_id, job_id, id))


class AddressService(OrganizationChildService[Address]):
    """State resource addresses touched by a job."""

    model = Address
    parent_segment = "job"
    parent_field = "job_id"
    segment = "address"
    filter_key = "filter[address]"

    async def list(
        self,
        organization_id: str,
        job_id: str,
        options: Optional[ListOptions] = None,
        *,
        filter: Optional[str] = None,
    ) -> List[Address]:
        path = self._collection_path(organization_id, job_id)
        return await self._list(path, resolve_list_options(options, filter))

    async def get(self, organization_id: str, job_id: str, id: str) -> Address:
        return await self._get(self._item_path(organization_id, job_id, id))

    async def create(
        self, organization_id: str, job_id: str, address: Address
    ) -> Address:
        path = self._collection_path(organization_id, job_id)
        return await self._create(path, address)

    async def update(
        self, organization_id: str, job_id: str, address: Address
    ) -> Address:
        path = self._item_path(organization_id, job_id, address.id)
        return await self._update(path, address)

    async def delete(self, organization_id: str, job_id: str, id: str) -> None:
        await self._delete(self._item_path(organization_id, job_id, id))


class ActionService(RootService[Action]):
    """UI actions (buttons and panels) available on workspace pages."""

    model = Action
    segment = "action"


__all__ = ["JobService", "StepService", "AddressService", "ActionService"]
