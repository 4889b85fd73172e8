from __future__ import annotations

from typing import List, Optional

from terrakube_client.core.crud import CrudService, ListOptions, resolve_list_options
from terrakube_client.core.validation import validate_id
from terrakube_client.models import (
    History,
    Variable,
    Webhook,
    WebhookEvent,
    Workspace,
    WorkspaceAccess,
    WorkspaceSchedule,
    WorkspaceTag,
)

from ._base import OrganizationScopedService, WorkspaceScopedService


class WorkspaceService(OrganizationScopedService[Workspace]):
    model = Workspace
    segment = "workspace"
    filter_key = "filter[workspace]"


class VariableService(WorkspaceScopedService[Variable]):
    """Terraform and environment variables attached to one workspace."""

    model = Variable
    segment = "variable"
    filter_key = "filter[variable]"


class WorkspaceTagService(WorkspaceScopedService[WorkspaceTag]):
    model = WorkspaceTag
    segment = "workspaceTag"
    filter_key = "filter[workspacetag]"


class WorkspaceAccessService(WorkspaceScopedService[WorkspaceAccess]):
    """Per-team permissions on a single workspace."""

    model = WorkspaceAccess
    segment = "access"
    filter_key = "filter[access]"


class HistoryService(WorkspaceScopedService[History]):
    """State history entries (one per state serial) of a workspace."""

    model = History
    segment = "history"
    filter_key = "filter[history]"


class WebhookService(WorkspaceScopedService[Webhook]):
    model = Webhook
    segment = "webhook"
    filter_key = "filter[webhook]"


class WorkspaceScheduleService(CrudService[WorkspaceSchedule]):
    """
    Cron schedules that run a template against a workspace.
    Schedules are addressed by workspace only: /api/v1/workspace/{id}/schedule.
    """

    model = WorkspaceSchedule
    filter_key = "filter[schedule]"

    def _collection_path(self, workspace_id: str) -> str:
        validate_id("workspace_id", workspace_id)
        return self.client.api_path("workspace", workspace_id, "schedule")

    def _item_path(self, workspace_id: str, id: str) -> str:
        validate_id("workspace_id", workspace_id)
        validate_id("id", id)
        return self.client.api_path("workspace", workspace_id, "schedule", id)

    async def list(
        self,
        workspace_id: str,
        options: Optional[ListOptions] = None,
        *,
        filter: Optional[str] = None,
    ) -> List[WorkspaceSchedule]:
        path = self._collection_path(workspace_id)
        return await self._list(path, resolve_list_options(options, filter))

    async def get(self, workspace_id: str, id: str) -> WorkspaceSchedule:
        return await self._get(self._item_path(workspace_id, id))

    async def create(
        self, workspace_id: str, schedule: WorkspaceSchedule
    ) -> WorkspaceSchedule:
        return await self._create(self._collection_path(workspace_id), schedule)

    async def update(
        self, workspace_id: str, schedule: WorkspaceSchedule
    ) -> WorkspaceSchedule:
        return await self._update(self._item_path(workspace_id, schedule.id), schedule)

    async def delete(self, workspace_id: str, id: str) -> None:
        await self._delete(self._item_path(workspace_id, id))


class WebhookEventService(CrudService[WebhookEvent]):
    """
    Events (push, pull request, ...) a webhook reacts to.
    The collection is read from ``.../webhook/{id}/events`` while single
    events are created and addressed under ``.../webhook/{id}/event``.
    """

    model = WebhookEvent
    filter_key = "filter[webhook_event]"

    def _webhook_segments(
        self, organization_id: str, workspace_id: str, webhook_id: str
    ) -> tuple:
        validate_id("organization_id", organization_id)
        validate_id("workspace_id", workspace_id)
        validate_id("webhook_id", webhook_id)
        return (
            "organization",
            organization_id,
            "workspace",
            workspace_id,
            "webhook",
            webhook_id,
        )

    def _item_path(
        self, organization_id: str, workspace_id: str, webhook_id: str, id: str
    ) -> str:
        segments = self._webhook_segments(organization_id, workspace_id, webhook_id)
        validate_id("id", id)
        return self.client.api_path(*segments, "event", id)

    async def list(
        self,
        organization_id: str,
        workspace_id: str,
        webhook_id: str,
        options: Optional[ListOptions] = None,
        *,
        filter: Optional[str] = None,
    ) -> List[WebhookEvent]:
        segments = self._webhook_segments(organization_id, workspace_id, webhook_id)
        path = self.client.api_path(*segments, "events")
        return await self._list(path, resolve_list_options(options, filter))

    async def get(
        self, organization_id: str, workspace_id: str, webhook_id: str, id: str
    ) -> WebhookEvent:
        return await self._get(
            self._item_path(organization_id, workspace_id, webhook_id, id)
        )

    async def create(
        self,
        organization_id: str,
        workspace_id: str,
        webhook_id: str,
        event: WebhookEvent,
    ) -> WebhookEvent:
        segments = self._webhook_segments(organization_id, workspace_id, webhook_id)
        return await self._create(self.client.api_path(*segments, "event"), event)

    async def update(
        self,
        organization_id: str,
        workspace_id: str,
        webhook_id: str,
        event: WebhookEvent,
    ) -> WebhookEvent:
        path = self._item_path(organization_id, workspace_id, webhook_id, event.id)
        return await self._update(path, event)

    async def delete(
        self, organization_id: str, workspace_id: str, webhook_id: str, id: str
    ) -> None:
        await self._delete(
            self._item_path(organization_id, workspace_id, webhook_id, id)
        )


__all__ = [
    "WorkspaceService",
    "VariableService",
    "WorkspaceTagService",
    "WorkspaceAccessService",
    "HistoryService",
    "WebhookService",
    "WorkspaceScheduleService",
    "WebhookEventService",
]
