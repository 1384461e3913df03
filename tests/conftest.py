import asyncio
from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.bulk_import.repository import import_sessions
from app.bulk_import.schemas import ImportRequest
from app.bulk_import.writers.base import RecordWriter
from app.dependencies import get_record_writer
from app.main import app


class FakeRecordWriter(RecordWriter):
    """In-process writer that records requests and answers with a canned body.

    Without an explicit response every forwarded row is reported as created.
    """

    def __init__(
        self,
        response: dict[str, Any] | None = None,
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.response = response
        self.error = error
        self.gate = gate
        self.requests: list[ImportRequest] = []

    async def write(self, request: ImportRequest) -> dict[str, Any]:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response
        count = len(request.rows)
        return {
            "recordsProcessed": count,
            "recordsSuccessful": count,
            "recordsFailed": 0,
            "recordsSkipped": 0,
            "errors": [],
            "warnings": [],
            "details": {"clients": {"created": count, "updated": 0, "skipped": 0}},
        }


@pytest.fixture(autouse=True)
def clear_sessions():
    import_sessions.clear()
    yield
    import_sessions.clear()


@pytest.fixture
def writer() -> FakeRecordWriter:
    return FakeRecordWriter()


@pytest.fixture
def make_writer():
    return FakeRecordWriter


@pytest.fixture
def client(writer):
    app.dependency_overrides[get_record_writer] = lambda: writer
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
