from __future__ import annotations

from terrakube_client.models import SSH, VCS, Agent, GithubAppToken

from ._base import OrganizationScopedService, RootService


class VCSService(OrganizationScopedService[VCS]):
    """Version control connections (GitHub, GitLab, Bitbucket, Azure DevOps)."""

    model = VCS
    segment = "vcs"
    filter_key = "filter[vcs]"


class SSHService(OrganizationScopedService[SSH]):
    model = SSH
    segment = "ssh"
    filter_key = "filter[ssh]"


class AgentService(OrganizationScopedService[Agent]):
    """Self-hosted executor agents registered for an organization."""

    model = Agent
    segment = "agent"
    filter_key = "filter[agent]"


class GithubAppTokenService(RootService[GithubAppToken]):
    model = GithubAppToken
    segment = "github_app_token"


__all__ = ["VCSService", "SSHService", "AgentService", "GithubAppTokenService"]
