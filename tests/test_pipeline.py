import httpx
import pytest
import respx
from httpx import Response
from terrakube_client import (
    TerrakubeAPIError,
    TerrakubeClient,
    TerrakubeDecodeError,
    TerrakubeTransportError,
    is_not_found,
    is_unauthorized,
)

BASE = "https://terrakube.test"
JOB_URL = f"{BASE}/api/v1/organization/org-1/job/job-1"


@pytest.fixture
def client():
    return TerrakubeClient(endpoint=BASE, token="tk-token")


@pytest.mark.asyncio
@respx.mock
async def test_get_job_decodes_attributes(client):
    respx.get(JOB_URL).mock(
        return_value=Response(
            200,
            json={
                "data": {
                    "type": "job",
                    "id": "job-1",
                    "attributes": {
                        "command": "terraform apply",
                        "status": "completed",
                    },
                }
            },
        )
    )

    async with client:
        job = await client.jobs.get("org-1", "job-1")

    assert job.id == "job-1"
    assert job.command == "terraform apply"
    assert job.status == "completed"


@pytest.mark.asyncio
@respx.mock
async def test_delete_job_accepts_204(client):
    route = respx.delete(JOB_URL).mock(return_value=Response(204))

    async with client:
        result = await client.jobs.delete("org-1", "job-1")

    assert result is None
    assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_404_raises_api_error_with_details(client):
    respx.get(JOB_URL).mock(
        return_value=Response(
            404,
            json={"errors": [{"detail": "job not found", "status": "404"}]},
        )
    )

    async with client:
        with pytest.raises(TerrakubeAPIError) as exc:
            await client.jobs.get("org-1", "job-1")

    err = exc.value
    assert err.status_code == 404
    assert err.is_not_found
    assert not err.is_unauthorized
    assert is_not_found(err)
    assert err.errors[0].detail == "job not found"
    assert str(err) == "GET /api/v1/organization/org-1/job/job-1: 404 job not found"


@pytest.mark.asyncio
@respx.mock
async def test_401_is_unauthorized(client):
    respx.get(JOB_URL).mock(return_value=Response(401))

    async with client:
        with pytest.raises(TerrakubeAPIError) as exc:
            await client.jobs.get("org-1", "job-1")

    assert is_unauthorized(exc.value)
    assert not is_not_found(exc.value)
    assert exc.value.errors == []


@pytest.mark.asyncio
@respx.mock
async def test_500_with_non_json_body_keeps_raw_body(client):
    respx.get(JOB_URL).mock(return_value=Response(500, text="upstream exploded"))

    async with client:
        with pytest.raises(TerrakubeAPIError) as exc:
            await client.jobs.get("org-1", "job-1")

    assert exc.value.status_code == 500
    assert exc.value.body == b"upstream exploded"
    assert exc.value.errors == []
    assert exc.value.json() is None


@pytest.mark.asyncio
@respx.mock
async def test_error_status_checked_before_decoding(client):
    # a 4xx whose body looks like a valid resource is still an error
    respx.get(JOB_URL).mock(
        return_value=Response(
            409, json={"data": {"type": "job", "id": "job-1", "attributes": {}}}
        )
    )

    async with client:
        with pytest.raises(TerrakubeAPIError) as exc:
            await client.jobs.get("org-1", "job-1")

    assert exc.value.is_conflict


@pytest.mark.asyncio
@respx.mock
async def test_non_json_success_body_raises_decode_error(client):
    respx.get(JOB_URL).mock(return_value=Response(200, text="<html>login</html>"))

    async with client:
        with pytest.raises(TerrakubeDecodeError) as exc:
            await client.jobs.get("org-1", "job-1")

    assert "<html>login</html>" in str(exc.value)


@pytest.mark.asyncio
@respx.mock
async def test_wrong_resource_type_raises_decode_error(client):
    respx.get(JOB_URL).mock(
        return_value=Response(
            200, json={"data": {"type": "workspace", "id": "job-1", "attributes": {}}}
        )
    )

    async with client:
        with pytest.raises(TerrakubeDecodeError):
            await client.jobs.get("org-1", "job-1")


@pytest.mark.asyncio
@respx.mock
async def test_empty_success_body_returns_empty_entity(client):
    respx.get(JOB_URL).mock(return_value=Response(200))

    async with client:
        job = await client.jobs.get("org-1", "job-1")

    assert job.id == ""
    assert job.command == ""


@pytest.mark.asyncio
@respx.mock
async def test_empty_list_body_returns_empty_list(client):
    respx.get(f"{BASE}/api/v1/organization/org-1/job").mock(
        return_value=Response(200)
    )

    async with client:
        jobs = await client.jobs.list("org-1")

    assert jobs == []


@pytest.mark.asyncio
@respx.mock
async def test_transport_error_is_wrapped(client):
    respx.get(JOB_URL).mock(side_effect=httpx.ConnectError)

    async with client:
        with pytest.raises(TerrakubeTransportError) as exc:
            await client.jobs.get("org-1", "job-1")

    assert isinstance(exc.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
@respx.mock
async def test_timeout_is_wrapped(client):
    respx.get(JOB_URL).mock(side_effect=httpx.ReadTimeout)

    async with client:
        with pytest.raises(TerrakubeTransportError):
            await client.jobs.get("org-1", "job-1")
