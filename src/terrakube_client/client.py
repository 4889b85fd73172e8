from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from .core.client import APIClient
from .core.config import DEFAULT_TIMEOUT_SECONDS
from .services import (
    ActionService,
    AddressService,
    AgentService,
    CollectionItemService,
    CollectionReferenceService,
    CollectionService,
    GithubAppTokenService,
    HistoryService,
    ImplementationService,
    JobService,
    ModuleService,
    ModuleVersionService,
    OperationsService,
    OrganizationService,
    OrganizationVariableService,
    ProviderService,
    ProviderVersionService,
    SSHService,
    StepService,
    TagService,
    TeamService,
    TeamTokenService,
    TemplateService,
    VariableService,
    VCSService,
    WebhookEventService,
    WebhookService,
    WorkspaceAccessService,
    WorkspaceScheduleService,
    WorkspaceService,
    WorkspaceTagService,
)


class TerrakubeClient(APIClient):
    """
    Terrakube API client with one service attribute per resource kind.

        async with TerrakubeClient(endpoint="terrakube.example.com", token=t) as tk:
            job = await tk.jobs.get("org-1", "job-1")
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
        super().__init__(
            endpoint=endpoint,
            token=token,
            http=http,
            insecure_tls=insecure_tls,
            user_agent=user_agent,
            timeout_seconds=timeout_seconds,
            logger=logger,
        )

        self.organizations = OrganizationService(self)
        self.organization_variables = OrganizationVariableService(self)
        self.tags = TagService(self)
        self.templates = TemplateService(self)
        self.teams = TeamService(self)
        self.team_tokens = TeamTokenService(self)

        self.workspaces = WorkspaceService(self)
        self.variables = VariableService(self)
        self.workspace_tags = WorkspaceTagService(self)
        self.workspace_access = WorkspaceAccessService(self)
        self.workspace_schedules = WorkspaceScheduleService(self)
        self.history = HistoryService(self)
        self.webhooks = WebhookService(self)
        self.webhook_events = WebhookEventService(self)

        self.collections = CollectionService(self)
        self.collection_items = CollectionItemService(self)
        self.collection_references = CollectionReferenceService(self)

        self.jobs = JobService(self)
        self.steps = StepService(self)
        self.addresses = AddressService(self)
        self.actions = ActionService(self)

        self.modules = ModuleService(self)
        self.module_versions = ModuleVersionService(self)
        self.providers = ProviderService(self)
        self.provider_versions = ProviderVersionService(self)
        self.implementations = ImplementationService(self)

        self.vcs = VCSService(self)
        self.ssh = SSHService(self)
        self.agents = AgentService(self)
        self.github_app_tokens = GithubAppTokenService(self)

        self.operations = OperationsService(self)


def create_client_from_env(**kwargs: Any) -> TerrakubeClient:
    """Create a TerrakubeClient from TERRAKUBE_* environment variables."""
    return TerrakubeClient.from_env(**kwargs)


__all__ = ["TerrakubeClient", "create_client_from_env"]
