import logging

import pytest
import respx
from httpx import Response
from terrakube_client import TerrakubeAPIError, TerrakubeClient
from terrakube_client.core.logging import LogfmtFormatter, setup_logging

BASE = "https://terrakube.test"


def _record(msg, **extra):
    record = logging.LogRecord(
        name="terrakube_client.client",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_logfmt_includes_request_fields():
    line = LogfmtFormatter().format(
        _record(
            "terrakube.request",
            method="GET",
            path="/api/v1/organization",
            status=200,
            duration_ms=12,
            resource="organization",
        )
    )
    assert line == (
        "level=debug logger=terrakube_client.client event=terrakube.request "
        "method=GET path=/api/v1/organization status=200 status_class=2xx "
        "duration_ms=12 resource=organization"
    )


def test_logfmt_quotes_values_with_spaces():
    line = LogfmtFormatter().format(_record("request failed", path="/a b"))
    assert 'event="request failed"' in line
    assert 'path="/a b"' in line
    assert "status=" not in line
    assert "status_class=" not in line


def test_logfmt_buckets_status_class():
    line = LogfmtFormatter().format(_record("terrakube.request", status=404))
    assert line.endswith("status=404 status_class=4xx")


def test_setup_logging_installs_single_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("debug")
        setup_logging("debug")
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, LogfmtFormatter)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


@pytest.mark.asyncio
@respx.mock
async def test_request_logged_at_debug(caplog):
    respx.get(f"{BASE}/api/v1/organization/o/job/j").mock(
        return_value=Response(404)
    )
    caplog.set_level(logging.DEBUG, logger="terrakube_client.client")

    client = TerrakubeClient(endpoint=BASE, token="tk-token")
    async with client:
        with pytest.raises(TerrakubeAPIError):
            await client.jobs.get("o", "j")

    records = [r for r in caplog.records if r.getMessage() == "terrakube.request"]
    assert len(records) == 1
    record = records[0]
    assert record.method == "GET"
    assert record.path == "/api/v1/organization/o/job/j"
    assert record.status == 404
    assert record.resource == "job"
    assert "tk-token" not in caplog.text
