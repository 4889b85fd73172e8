"""terrakube_client package exports."""

from ._version import __version__
from .client import TerrakubeClient, create_client_from_env
from .core import (
    ErrorDetail,
    ListOptions,
    MissingEndpointError,
    MissingTokenError,
    Resource,
    TerrakubeAPIError,
    TerrakubeClientError,
    TerrakubeDecodeError,
    TerrakubeRequestError,
    TerrakubeTransportError,
    TerrakubeValidationError,
    is_conflict,
    is_not_found,
    is_unauthorized,
)
from .core.logging import setup_logging
from .models import (
    SSH,
    VCS,
    Action,
    Address,
    Agent,
    AtomicRequest,
    AtomicResponse,
    AtomicResult,
    Collection,
    CollectionItem,
    CollectionReference,
    GithubAppToken,
    History,
    Implementation,
    Job,
    Module,
    ModuleVersion,
    Operation,
    OperationAction,
    OperationRef,
    Organization,
    OrganizationVariable,
    Provider,
    ProviderVersion,
    Step,
    Tag,
    Team,
    TeamToken,
    Template,
    Variable,
    Webhook,
    WebhookEvent,
    Workspace,
    WorkspaceAccess,
    WorkspaceSchedule,
    WorkspaceTag,
)

__all__ = [
    "__version__",
    # Client
    "TerrakubeClient",
    "create_client_from_env",
    "ListOptions",
    "setup_logging",
    # Exceptions
    "TerrakubeClientError",
    "TerrakubeValidationError",
    "TerrakubeRequestError",
    "TerrakubeTransportError",
    "TerrakubeAPIError",
    "TerrakubeDecodeError",
    "ErrorDetail",
    "MissingEndpointError",
    "MissingTokenError",
    "is_not_found",
    "is_unauthorized",
    "is_conflict",
    # Entities
    "Resource",
    "Organization",
    "OrganizationVariable",
    "Tag",
    "Team",
    "TeamToken",
    "Template",
    "VCS",
    "SSH",
    "Agent",
    "Workspace",
    "Variable",
    "WorkspaceTag",
    "WorkspaceAccess",
    "WorkspaceSchedule",
    "History",
    "Webhook",
    "WebhookEvent",
    "Collection",
    "CollectionItem",
    "CollectionReference",
    "Job",
    "Step",
    "Address",
    "Action",
    "Module",
    "ModuleVersion",
    "Provider",
    "ProviderVersion",
    "Implementation",
    "GithubAppToken",
    # Atomic operations
    "AtomicRequest",
    "AtomicResponse",
    "AtomicResult",
    "Operation",
    "OperationAction",
    "OperationRef",
]
