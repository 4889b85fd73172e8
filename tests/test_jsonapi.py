import pytest
from terrakube_client import TerrakubeDecodeError
from terrakube_client.core.jsonapi import (
    Resource,
    decode_many,
    decode_one,
    encode_resource,
    relationship_fields,
)
from terrakube_client.models import (
    History,
    Job,
    Organization,
    OrganizationVariable,
    Team,
    Variable,
    Workspace,
)


def test_false_booleans_are_serialized():
    doc = encode_resource(Variable(key="region", value="eu", sensitive=False, hcl=False))
    attrs = doc["data"]["attributes"]
    assert attrs["sensitive"] is False
    assert attrs["hcl"] is False


@pytest.mark.parametrize("flag", [True, False])
def test_team_booleans_survive_round_trip(flag):
    team = Team(id="team-1", name="ops", manage_state=flag, manage_job=flag)
    doc = encode_resource(team)

    assert doc["data"]["attributes"]["manageState"] is flag
    assert doc["data"]["attributes"]["manageJob"] is flag

    decoded = decode_one(Team, doc)
    assert decoded.manage_state is flag
    assert decoded.manage_job is flag
    assert decoded == team


@pytest.mark.parametrize("flag", [True, False])
def test_variable_booleans_survive_round_trip(flag):
    variable = Variable(id="var-1", key="region", sensitive=flag, hcl=flag)
    doc = encode_resource(variable)

    assert doc["data"]["attributes"]["sensitive"] is flag
    assert doc["data"]["attributes"]["hcl"] is flag
    assert decode_one(Variable, doc) == variable


@pytest.mark.parametrize("sensitive", [True, False, None])
def test_organization_variable_sensitive_round_trip(sensitive):
    variable = OrganizationVariable(id="gv-1", key="k", sensitive=sensitive)
    doc = encode_resource(variable)

    attrs = doc["data"]["attributes"]
    if sensitive is None:
        assert "sensitive" not in attrs
    else:
        assert attrs["sensitive"] is sensitive
    assert decode_one(OrganizationVariable, doc).sensitive is sensitive


def test_unset_optional_is_written_as_null():
    doc = encode_resource(Organization(name="acme"))
    attrs = doc["data"]["attributes"]
    assert attrs["name"] == "acme"
    assert attrs["description"] is None
    assert attrs["executionMode"] == ""
    assert attrs["disabled"] is False


def test_omit_empty_attributes_dropped():
    doc = encode_resource(OrganizationVariable(key="k", value="v"))
    assert "sensitive" not in doc["data"]["attributes"]

    doc = encode_resource(OrganizationVariable(key="k", value="v", sensitive=False))
    assert doc["data"]["attributes"]["sensitive"] is False

    doc = encode_resource(History(serial=3))
    attrs = doc["data"]["attributes"]
    assert "jobReference" not in attrs
    assert "output" not in attrs
    assert attrs["serial"] == 3


def test_empty_id_is_omitted_and_set_id_is_written():
    assert "id" not in encode_resource(Organization(name="a"))["data"]
    assert encode_resource(Organization(id="org-1"))["data"]["id"] == "org-1"


def test_relationships_encoded_as_identifiers():
    job = Job(command="plan", workspace=Workspace(id="ws-1", name="ignored"))
    data = encode_resource(job)["data"]

    assert data["type"] == "job"
    assert "workspace" not in data["attributes"]
    assert data["relationships"] == {
        "workspace": {"data": {"type": "workspace", "id": "ws-1"}}
    }


def test_unset_relationships_left_out():
    data = encode_resource(Job(command="plan"))["data"]
    assert "relationships" not in data


def test_relationship_fields_detected_from_annotations():
    assert relationship_fields(Job) == {"workspace": ("workspace", Workspace)}
    assert relationship_fields(Organization) == {}


def test_resource_without_type_cannot_be_encoded():
    with pytest.raises(TypeError):
        encode_resource(Resource(id="x"))


def test_decode_one_maps_wire_names():
    doc = {
        "data": {
            "type": "workspace",
            "id": "ws-1",
            "attributes": {
                "name": "prod",
                "iacType": "terraform",
                "terraformVersion": "1.7.0",
                "defaultTemplate": "tpl-1",
                "allowRemoteApply": True,
            },
        }
    }
    ws = decode_one(Workspace, doc)
    assert ws.id == "ws-1"
    assert ws.iac_type == "terraform"
    assert ws.iac_version == "1.7.0"
    assert ws.template_id == "tpl-1"
    assert ws.allow_remote_apply is True


def test_null_attributes_fall_back_to_defaults():
    doc = {
        "data": {
            "type": "organization",
            "id": "org-1",
            "attributes": {"name": None, "description": None, "disabled": None},
        }
    }
    org = decode_one(Organization, doc)
    assert org.name == ""
    assert org.description is None
    assert org.disabled is False


def test_numeric_id_becomes_string():
    org = decode_one(Organization, {"data": {"type": "organization", "id": 7}})
    assert org.id == "7"


def test_relationship_resolved_from_included():
    doc = {
        "data": {
            "type": "job",
            "id": "job-1",
            "attributes": {"command": "apply"},
            "relationships": {
                "workspace": {"data": {"type": "workspace", "id": "ws-1"}}
            },
        },
        "included": [
            {"type": "workspace", "id": "ws-1", "attributes": {"name": "prod"}}
        ],
    }
    job = decode_one(Job, doc)
    assert job.workspace is not None
    assert job.workspace.id == "ws-1"
    assert job.workspace.name == "prod"


def test_relationship_without_included_keeps_identifier():
    doc = {
        "data": {
            "type": "job",
            "id": "job-1",
            "relationships": {
                "workspace": {"data": {"type": "workspace", "id": "ws-1"}}
            },
        }
    }
    job = decode_one(Job, doc)
    assert job.workspace == Workspace(id="ws-1")


def test_null_relationship_left_unset():
    doc = {
        "data": {
            "type": "job",
            "id": "job-1",
            "relationships": {"workspace": {"data": None}},
        }
    }
    assert decode_one(Job, doc).workspace is None


def test_decode_many():
    doc = {
        "data": [
            {"type": "organization", "id": "1", "attributes": {"name": "a"}},
            {"type": "organization", "id": "2", "attributes": {"name": "b"}},
        ]
    }
    orgs = decode_many(Organization, doc)
    assert [o.name for o in orgs] == ["a", "b"]


def test_type_mismatch_rejected():
    with pytest.raises(TerrakubeDecodeError):
        decode_one(Job, {"data": {"type": "workspace", "id": "1"}})


def test_shape_mismatch_rejected():
    with pytest.raises(TerrakubeDecodeError):
        decode_one(Organization, {"data": []})
    with pytest.raises(TerrakubeDecodeError):
        decode_many(Organization, {"data": {"type": "organization", "id": "1"}})
    with pytest.raises(TerrakubeDecodeError):
        decode_one(Organization, ["not", "a", "document"])


def test_attribute_type_mismatch_rejected():
    doc = {
        "data": {
            "type": "history",
            "id": "h-1",
            "attributes": {"serial": "not-a-number"},
        }
    }
    with pytest.raises(TerrakubeDecodeError):
        decode_one(History, doc)


def test_to_document_matches_encode():
    org = Organization(id="org-1", name="acme")
    assert org.to_document() == encode_resource(org)
