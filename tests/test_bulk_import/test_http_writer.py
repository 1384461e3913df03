import json

import httpx
import pytest

from app.bulk_import.executor import ImportExecutor
from app.bulk_import.parser import parse_table
from app.bulk_import.schemas import ImportPolicy
from app.bulk_import.suggester import suggest_mappings
from app.bulk_import.writers import HttpRecordWriter
from app.exceptions import ImportFailedError

WRITER_URL = "http://writer.test/api/bulk-import/comprehensive-paste"


@pytest.fixture
def request_payload():
    table = parse_table("Client Name\tContact Email\nAcme Corp\tjohn@acme.com")
    return ImportExecutor.build_request(table, suggest_mappings(table.headers), ImportPolicy())


def _writer(handler, api_key: str = "") -> HttpRecordWriter:
    return HttpRecordWriter(WRITER_URL, api_key=api_key, transport=httpx.MockTransport(handler))


class TestHttpRecordWriter:
    @pytest.mark.asyncio
    async def test_posts_camel_case_json(self, request_payload):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"recordsProcessed": 1, "recordsSuccessful": 1,
                                             "recordsFailed": 0, "recordsSkipped": 0})

        body = await _writer(handler, api_key="secret").write(request_payload)

        assert body["recordsSuccessful"] == 1
        sent = json.loads(seen[0].content)
        assert str(seen[0].url) == WRITER_URL
        assert seen[0].headers["Authorization"] == "Bearer secret"
        assert sent["headers"] == ["Client Name", "Contact Email"]
        assert sent["rows"] == [["Acme Corp", "john@acme.com"]]
        assert sent["duplicateHandling"] == "update"
        assert sent["clientMatchStrategy"] == "name_only"
        assert sent["mappings"][1]["targetField"] == "email"

    @pytest.mark.asyncio
    async def test_no_auth_header_without_key(self, request_payload):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={})

        await _writer(handler).write(request_payload)

        assert "Authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_unreachable_writer(self, request_payload):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ImportFailedError, match="unreachable"):
            await _writer(handler).write(request_payload)

    @pytest.mark.asyncio
    async def test_error_status(self, request_payload):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="boom")

        with pytest.raises(ImportFailedError, match="HTTP 500"):
            await _writer(handler).write(request_payload)

    @pytest.mark.asyncio
    async def test_accepted_status_is_success(self, request_payload):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(202, json={"recordsProcessed": 1, "recordsSuccessful": 1,
                                             "recordsFailed": 0, "recordsSkipped": 0})

        body = await _writer(handler).write(request_payload)

        assert body["recordsProcessed"] == 1

    @pytest.mark.asyncio
    async def test_non_json_body(self, request_payload):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>login</html>")

        with pytest.raises(ImportFailedError, match="not JSON"):
            await _writer(handler).write(request_payload)

    @pytest.mark.asyncio
    async def test_non_object_body(self, request_payload):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[1, 2, 3])

        with pytest.raises(ImportFailedError):
            await _writer(handler).write(request_payload)
