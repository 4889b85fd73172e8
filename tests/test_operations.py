import json

import pytest
import respx
from httpx import Response
from terrakube_client import (
    AtomicRequest,
    AtomicResponse,
    Operation,
    OperationAction,
    OperationRef,
    TerrakubeAPIError,
    TerrakubeClient,
)

BASE = "https://terrakube.test"
OPERATIONS_URL = f"{BASE}/api/v1/operations"


@pytest.fixture
def client():
    return TerrakubeClient(endpoint=BASE, token="tk-token")


@pytest.mark.asyncio
@respx.mock
async def test_submit_sends_one_plain_json_request(client):
    route = respx.post(OPERATIONS_URL).mock(
        return_value=Response(
            200,
            json={
                "atomic:results": [
                    {"data": {"type": "workspace", "id": "ws-1"}},
                    {"data": {"type": "variable", "id": "var-1"}},
                ]
            },
        )
    )

    async with client:
        response = await client.operations.submit(
            AtomicRequest(
                operations=[
                    Operation(
                        op=OperationAction.ADD,
                        ref=OperationRef(type="workspace"),
                        data={"attributes": {"name": "ws-new"}},
                    ),
                    Operation(
                        op=OperationAction.UPDATE,
                        ref=OperationRef(type="variable", id="var-1"),
                        data={"attributes": {"value": "updated"}},
                    ),
                ]
            )
        )

    assert [r.data["id"] for r in response.results] == ["ws-1", "var-1"]
    assert route.call_count == 1

    request = route.calls[0].request
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Accept"] == "application/json"
    body = json.loads(request.content)
    assert body == {
        "atomic:operations": [
            {
                "op": "add",
                "ref": {"type": "workspace"},
                "data": {"attributes": {"name": "ws-new"}},
            },
            {
                "op": "update",
                "ref": {"type": "variable", "id": "var-1"},
                "data": {"attributes": {"value": "updated"}},
            },
        ]
    }


@pytest.mark.asyncio
@respx.mock
async def test_submit_empty_response_body(client):
    respx.post(OPERATIONS_URL).mock(return_value=Response(204))

    async with client:
        response = await client.operations.submit(
            AtomicRequest(
                operations=[
                    Operation(
                        op=OperationAction.REMOVE,
                        ref=OperationRef(type="tag", id="t-1"),
                    )
                ]
            )
        )

    assert response == AtomicResponse()


@pytest.mark.asyncio
@respx.mock
async def test_submit_failure_is_api_error(client):
    respx.post(OPERATIONS_URL).mock(
        return_value=Response(
            400, json={"errors": [{"detail": "operation 1 failed"}]}
        )
    )

    async with client:
        with pytest.raises(TerrakubeAPIError) as exc:
            await client.operations.submit(AtomicRequest())

    assert exc.value.status_code == 400
    assert str(exc.value) == "POST /api/v1/operations: 400 operation 1 failed"
