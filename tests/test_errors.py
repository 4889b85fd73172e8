from terrakube_client import (
    ErrorDetail,
    TerrakubeAPIError,
    TerrakubeClientError,
    TerrakubeValidationError,
    is_conflict,
    is_not_found,
    is_unauthorized,
)
from terrakube_client.core.errors import parse_error_details


def test_api_error_message_without_details():
    err = TerrakubeAPIError(status_code=502, method="GET", path="/api/v1/organization")
    assert str(err) == "GET /api/v1/organization: 502"


def test_api_error_uses_first_detail():
    err = TerrakubeAPIError(
        status_code=400,
        method="POST",
        path="/api/v1/organization",
        errors=[ErrorDetail(detail="name is required"), ErrorDetail(detail="other")],
    )
    assert str(err).endswith("400 name is required")


def test_api_error_json_body():
    err = TerrakubeAPIError(
        status_code=400, method="GET", path="/x", body=b'{"errors": []}'
    )
    assert err.json() == {"errors": []}


def test_helpers_ignore_other_exceptions():
    assert not is_not_found(ValueError("boom"))
    assert not is_unauthorized(RuntimeError("boom"))
    assert not is_conflict(KeyError("boom"))


def test_parse_error_details():
    body = b'{"errors": [{"detail": "bad filter", "title": "Bad Request", "status": "400"}]}'
    details = parse_error_details(body)
    assert details == [
        ErrorDetail(detail="bad filter", title="Bad Request", status="400")
    ]


def test_parse_error_details_tolerates_garbage():
    assert parse_error_details(b"") == []
    assert parse_error_details(b"not json") == []
    assert parse_error_details(b'{"errors": "nope"}') == []


def test_parse_error_details_null_detail():
    details = parse_error_details(b'{"errors": [{"detail": null, "title": "Oops"}]}')
    assert details[0].detail is None
    assert details[0].title == "Oops"


def test_validation_error_message():
    err = TerrakubeValidationError("organization_id")
    assert str(err) == "validation error: organization_id must not be empty"
    assert err.field == "organization_id"
    assert isinstance(err, ValueError)
    assert isinstance(err, TerrakubeClientError)
