from __future__ import annotations

from terrakube_client.models import (
    Organization,
    OrganizationVariable,
    Tag,
    Team,
    Template,
)

from ._base import OrganizationScopedService, RootService


class OrganizationService(RootService[Organization]):
    """Organizations live at the API root: /api/v1/organization."""

    model = Organization
    segment = "organization"


class OrganizationVariableService(OrganizationScopedService[OrganizationVariable]):
    """
    Global variables shared by every workspace of an organization.
    Leave ``sensitive`` as None on update to keep the stored flag.
    """

    model = OrganizationVariable
    segment = "globalvar"
    filter_key = "filter[globalvar]"


class TagService(OrganizationScopedService[Tag]):
    model = Tag
    segment = "tag"
    filter_key = "filter[tag]"


class TemplateService(OrganizationScopedService[Template]):
    model = Template
    segment = "template"
    filter_key = "filter[template]"


class TeamService(OrganizationScopedService[Team]):
    model = Team
    segment = "team"
    filter_key = "filter[team]"


__all__ = [
    "OrganizationService",
    "OrganizationVariableService",
    "TagService",
    "TemplateService",
    "TeamService",
]
