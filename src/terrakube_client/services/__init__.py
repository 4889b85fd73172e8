"""Resource services: id validation and path building over the CRUD core."""

from .collections import (
    CollectionItemService,
    CollectionReferenceService,
    CollectionService,
)
from .jobs import ActionService, AddressService, JobService, StepService
from .operations import OperationsService
from .organizations import (
    OrganizationService,
    OrganizationVariableService,
    TagService,
    TeamService,
    TemplateService,
)
from .registry import (
    ImplementationService,
    ModuleService,
    ModuleVersionService,
    ProviderService,
    ProviderVersionService,
)
from .team_tokens import TeamTokenService
from .vcs import AgentService, GithubAppTokenService, SSHService, VCSService
from .workspaces import (
    HistoryService,
    VariableService,
    WebhookEventService,
    WebhookService,
    WorkspaceAccessService,
    WorkspaceScheduleService,
    WorkspaceService,
    WorkspaceTagService,
)

__all__ = [
    "OrganizationService",
    "OrganizationVariableService",
    "TagService",
    "TemplateService",
    "TeamService",
    "TeamTokenService",
    "WorkspaceService",
    "VariableService",
    "WorkspaceTagService",
    "WorkspaceAccessService",
    "WorkspaceScheduleService",
    "HistoryService",
    "WebhookService",
    "WebhookEventService",
    "CollectionService",
    "CollectionItemService",
    "CollectionReferenceService",
    "JobService",
    "StepService",
    "AddressService",
    "ActionService",
    "ModuleService",
    "ModuleVersionService",
    "ProviderService",
    "ProviderVersionService",
    "ImplementationService",
    "VCSService",
    "SSHService",
    "AgentService",
    "GithubAppTokenService",
    "OperationsService",
]
