from __future__ import annotations

import enum
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .core.jsonapi import Resource


class AuditedResource(Resource):
    """Resource carrying the server-managed audit attributes."""

    created_by: Optional[str] = Field(default=None, alias="createdBy")
    created_date: Optional[str] = Field(default=None, alias="createdDate")
    updated_by: Optional[str] = Field(default=None, alias="updatedBy")
    updated_date: Optional[str] = Field(default=None, alias="updatedDate")


# --- Organization scope ---


class Organization(AuditedResource):
    resource_type: ClassVar[str] = "organization"

    name: str = ""
    description: Optional[str] = None
    execution_mode: str = Field(default="", alias="executionMode")
    disabled: bool = False
    icon: Optional[str] = None


class OrganizationVariable(AuditedResource):
    resource_type: ClassVar[str] = "globalvar"
    omit_empty: ClassVar[FrozenSet[str]] = frozenset({"sensitive"})

    key: str = ""
    value: str = ""
    description: str = ""
    category: str = ""
    # None leaves the server-side value untouched
    sensitive: Optional[bool] = None
    hcl: bool = False


class Tag(AuditedResource):
    resource_type: ClassVar[str] = "tag"

    name: str = ""


class Team(AuditedResource):
    resource_type: ClassVar[str] = "team"

    name: str = ""
    manage_state: bool = Field(default=False, alias="manageState")
    manage_workspace: bool = Field(default=False, alias="manageWorkspace")
    manage_module: bool = Field(default=False, alias="manageModule")
    manage_provider: bool = Field(default=False, alias="manageProvider")
    manage_vcs: bool = Field(default=False, alias="manageVcs")
    manage_template: bool = Field(default=False, alias="manageTemplate")
    manage_job: bool = Field(default=False, alias="manageJob")
    manage_collection: bool = Field(default=False, alias="manageCollection")


class Template(AuditedResource):
    resource_type: ClassVar[str] = "template"

    name: str = ""
    description: Optional[str] = None
    version: Optional[str] = None
    # Template body in Terrakube configuration language
    content: str = Field(default="", alias="tcl")


class VCS(AuditedResource):
    resource_type: ClassVar[str] = "vcs"

    name: str = ""
    description: str = ""
    vcs_type: str = Field(default="", alias="vcsType")
    connection_type: str = Field(default="", alias="connectionType")
    client_id: str = Field(default="", alias="clientId")
    client_secret: str = Field(default="", alias="clientSecret")
    private_key: str = Field(default="", alias="privateKey")
    endpoint: str = ""
    api_url: str = Field(default="", alias="apiUrl")
    status: str = ""
    callback: Optional[str] = None
    access_token: Optional[str] = Field(default=None, alias="accessToken")
    redirect_url: Optional[str] = Field(default=None, alias="redirectUrl")


class SSH(AuditedResource):
    resource_type: ClassVar[str] = "ssh"

    name: str = ""
    description: Optional[str] = None
    private_key: str = Field(default="", alias="privateKey")
    ssh_type: str = Field(default="", alias="sshType")


class Agent(AuditedResource):
    resource_type: ClassVar[str] = "agent"

    name: str = ""
    description: str = ""
    url: str = ""


# --- Workspaces ---


class Workspace(AuditedResource):
    resource_type: ClassVar[str] = "workspace"

    name: str = ""
    description: Optional[str] = None
    source: str = ""
    branch: str = ""
    folder: str = ""
    template_id: str = Field(default="", alias="defaultTemplate")
    iac_type: str = Field(default="", alias="iacType")
    iac_version: str = Field(default="", alias="terraformVersion")
    execution_mode: str = Field(default="", alias="executionMode")
    deleted: bool = False
    locked: bool = False
    allow_remote_apply: bool = Field(default=False, alias="allowRemoteApply")
    lock_description: Optional[str] = Field(default=None, alias="lockDescription")
    module_ssh_key: Optional[str] = Field(default=None, alias="moduleSshKey")
    last_job_status: Optional[str] = Field(default=None, alias="lastJobStatus")
    last_job_date: Optional[str] = Field(default=None, alias="lastJobDate")

    vcs: Optional[VCS] = None


class Variable(AuditedResource):
    resource_type: ClassVar[str] = "variable"

    key: str = ""
    value: str = ""
    description: str = ""
    category: str = ""
    sensitive: bool = False
    hcl: bool = False


class WorkspaceTag(AuditedResource):
    resource_type: ClassVar[str] = "workspacetag"

    tag_id: str = Field(default="", alias="tagId")


class WorkspaceAccess(AuditedResource):
    resource_type: ClassVar[str] = "access"

    manage_state: bool = Field(default=False, alias="manageState")
    manage_workspace: bool = Field(default=False, alias="manageWorkspace")
    manage_job: bool = Field(default=False, alias="manageJob")
    name: str = ""


class WorkspaceSchedule(AuditedResource):
    resource_type: ClassVar[str] = "schedule"

    schedule: str = Field(default="", alias="cron")
    template_id: str = Field(default="", alias="templateReference")


class History(AuditedResource):
    resource_type: ClassVar[str] = "history"
    omit_empty: ClassVar[FrozenSet[str]] = frozenset({"jobReference", "output"})

    job_reference: str = Field(default="", alias="jobReference")
    output: str = ""
    serial: int = 0
    md5: Optional[str] = None
    lineage: Optional[str] = None


class Webhook(AuditedResource):
    resource_type: ClassVar[str] = "webhook"

    path: str = ""
    branch: str = ""
    template_id: str = Field(default="", alias="templateId")
    remote_hook_id: str = Field(default="", alias="remoteHookId")
    event: str = ""


class WebhookEvent(Resource):
    resource_type: ClassVar[str] = "webhook_event"

    branch: str = ""
    created_by: str = Field(default="", alias="createdBy")
    created_date: str = Field(default="", alias="createdDate")
    event: str = ""
    path: str = ""
    priority: int = 0
    template_id: str = Field(default="", alias="templateId")
    updated_by: str = Field(default="", alias="updatedBy")
    updated_date: str = Field(default="", alias="updatedDate")

    webhook: Optional[Webhook] = None


# --- Collections ---


class Collection(AuditedResource):
    resource_type: ClassVar[str] = "collection"

    name: str = ""
    description: Optional[str] = None
    priority: int = 0


class CollectionItem(AuditedResource):
    resource_type: ClassVar[str] = "item"

    key: str = ""
    value: str = ""
    description: Optional[str] = None
    category: str = ""
    sensitive: bool = False
    hcl: bool = False


class CollectionReference(AuditedResource):
    resource_type: ClassVar[str] = "reference"

    description: Optional[str] = None

    workspace: Optional[Workspace] = None
    collection: Optional[Collection] = None


# --- Jobs ---


class Job(AuditedResource):
    resource_type: ClassVar[str] = "job"

    command: str = ""
    output: str = ""
    status: str = ""
    approval_team: Optional[str] = Field(default=None, alias="approvalTeam")
    comments: Optional[str] = None
    commit_id: Optional[str] = Field(default=None, alias="commitId")
    override_branch: Optional[str] = Field(default=None, alias="overrideBranch")
    plan_changes: bool = Field(default=False, alias="planChanges")
    refresh: bool = False
    refresh_only: bool = Field(default=False, alias="refreshOnly")
    # Inline template body; overrides template_reference when set
    tcl: Optional[str] = None
    template_reference: Optional[str] = Field(default=None, alias="templateReference")
    terraform_plan: Optional[str] = Field(default=None, alias="terraformPlan")
    via: Optional[str] = None

    workspace: Optional[Workspace] = None


class Step(AuditedResource):
    resource_type: ClassVar[str] = "step"

    name: str = ""
    output: Optional[str] = None
    status: str = ""
    step_number: int = Field(default=0, alias="stepNumber")

    job: Optional[Job] = None


class Address(AuditedResource):
    resource_type: ClassVar[str] = "address"

    name: str = ""
    type: str = ""

    job: Optional[Job] = None


class Action(AuditedResource):
    resource_type: ClassVar[str] = "action"

    action: str = ""
    active: bool = False
    category: str = ""
    description: Optional[str] = None
    display_criteria: Optional[str] = Field(default=None, alias="displayCriteria")
    label: str = ""
    name: str = ""
    type: str = ""
    version: Optional[str] = None


# --- Registry ---


class Module(AuditedResource):
    resource_type: ClassVar[str] = "module"

    name: str = ""
    description: str = ""
    provider: str = ""
    source: str = ""
    folder: Optional[str] = None
    tag_prefix: Optional[str] = Field(default=None, alias="tagPrefix")
    download_quantity: int = Field(default=0, alias="downloadQuantity")
    latest_version: Optional[str] = Field(default=None, alias="latestVersion")
    registry_path: Optional[str] = Field(default=None, alias="registryPath")

    vcs: Optional[VCS] = None
    ssh: Optional[SSH] = None


class ModuleVersion(AuditedResource):
    resource_type: ClassVar[str] = "version"

    version: str = ""
    commit: Optional[str] = None


class Provider(AuditedResource):
    resource_type: ClassVar[str] = "provider"

    name: str = ""
    description: Optional[str] = None


class ProviderVersion(AuditedResource):
    resource_type: ClassVar[str] = "version"

    version_number: str = Field(default="", alias="versionNumber")
    protocols: Optional[str] = None


class Implementation(AuditedResource):
    resource_type: ClassVar[str] = "implementation"

    os: str = ""
    arch: str = ""
    filename: str = ""
    download_url: Optional[str] = Field(default=None, alias="downloadUrl")
    shasums_url: Optional[str] = Field(default=None, alias="shasumsUrl")
    shasums_signature_url: Optional[str] = Field(
        default=None, alias="shasumsSignatureUrl"
    )
    shasum: Optional[str] = None
    key_id: Optional[str] = Field(default=None, alias="keyId")
    ascii_armor: Optional[str] = Field(default=None, alias="asciiArmor")
    trust_signature: Optional[str] = Field(default=None, alias="trustSignature")
    source: Optional[str] = None
    source_url: Optional[str] = Field(default=None, alias="sourceUrl")


class GithubAppToken(AuditedResource):
    resource_type: ClassVar[str] = "github_app_token"

    app_id: str = Field(default="", alias="appId")
    installation_id: str = Field(default="", alias="installationId")
    owner: str = ""
    token: Optional[str] = None


# --- Plain JSON (non JSON:API) ---


class TeamToken(BaseModel):
    """Team access token; served as plain JSON under /access-token/v1/teams."""

    id: str = ""
    description: str = ""
    days: int = 0
    hours: int = 0
    minutes: int = 0
    group: str = ""
    # Only returned once, on creation
    value: str = Field(default="", alias="token")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# --- Atomic operations (plain JSON) ---


class OperationAction(str, enum.Enum):
    ADD = "add"
    UPDATE = "update"
    REMOVE = "remove"


class OperationRef(BaseModel):
    type: str
    id: Optional[str] = None
    # local id, links resources created earlier in the same batch
    lid: Optional[str] = None
    relationship: Optional[str] = None


class Operation(BaseModel):
    op: OperationAction
    ref: Optional[OperationRef] = None
    href: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    meta: Optional[Dict[str, Any]] = None


class AtomicRequest(BaseModel):
    operations: List[Operation] = Field(
        default_factory=list, alias="atomic:operations"
    )

    model_config = ConfigDict(populate_by_name=True)


class AtomicResult(BaseModel):
    data: Optional[Dict[str, Any]] = None
    meta: Optional[Dict[str, Any]] = None


class AtomicResponse(BaseModel):
    results: List[AtomicResult] = Field(default_factory=list, alias="atomic:results")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


__all__ = [
    "AuditedResource",
    "Organization",
    "OrganizationVariable",
    "Tag",
    "Team",
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
    "TeamToken",
    "OperationAction",
    "OperationRef",
    "Operation",
    "AtomicRequest",
    "AtomicResult",
    "AtomicResponse",
]
