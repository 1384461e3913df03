"""Tests for handing an import to the record writer and normalizing its answer."""

import pytest

from app.bulk_import.executor import ImportExecutor
from app.bulk_import.models import ClientMatchStrategy, DuplicateHandling
from app.bulk_import.parser import parse_table
from app.bulk_import.schemas import ImportPolicy, ImportResult
from app.bulk_import.suggester import suggest_mappings
from app.exceptions import ImportFailedError


@pytest.fixture
def table():
    return parse_table("Client Name\tContact Email\tFavourite Colour\nAcme Corp\tjohn@acme.com\tblue\nGlobex")


class TestBuildRequest:
    def test_only_mapped_columns_forwarded(self, table):
        mappings = suggest_mappings(table.headers)

        request = ImportExecutor.build_request(table, mappings, ImportPolicy())

        assert [m.source_column for m in request.mappings] == ["Client Name", "Contact Email"]
        assert request.headers == ["Client Name", "Contact Email", "Favourite Colour"]

    def test_short_rows_padded(self, table):
        request = ImportExecutor.build_request(table, suggest_mappings(table.headers), ImportPolicy())

        assert request.rows == [["Acme Corp", "john@acme.com", "blue"], ["Globex", "", ""]]

    def test_policy_passed_unchanged(self, table):
        policy = ImportPolicy(
            duplicate_handling=DuplicateHandling.skip,
            client_match_strategy=ClientMatchStrategy.name_and_domain,
        )

        request = ImportExecutor.build_request(table, suggest_mappings(table.headers), policy)
        payload = request.model_dump(mode="json", by_alias=True)

        assert payload["duplicateHandling"] == "skip"
        assert payload["clientMatchStrategy"] == "name_and_domain"
        assert payload["mappings"][0] == {
            "sourceColumn": "Client Name",
            "targetField": "name",
            "entityType": "clients",
            "required": True,
            "dataType": "text",
        }


class TestExecute:
    @pytest.mark.asyncio
    async def test_successful_import(self, make_writer):
        table = parse_table("Client Name\tContact Email\nAcme Corp\tjohn@acme.com")
        writer = make_writer(
            response={
                "recordsProcessed": 1,
                "recordsSuccessful": 1,
                "recordsFailed": 0,
                "recordsSkipped": 0,
            }
        )

        result = await ImportExecutor(writer).execute(
            table, suggest_mappings(table.headers), ImportPolicy()
        )

        assert result.success is True
        assert result.records_successful == 1
        assert result.message == "Successfully imported 1 records"
        assert writer.requests[0].rows == [["Acme Corp", "john@acme.com"]]
        assert len(writer.requests[0].mappings) == 2

    @pytest.mark.asyncio
    async def test_row_errors_surfaced_verbatim(self, make_writer, table):
        writer = make_writer(
            response={
                "success": True,
                "recordsProcessed": 3,
                "recordsSuccessful": 1,
                "recordsFailed": 1,
                "recordsSkipped": 1,
                "errors": ["Row 2: invalid email ''"],
                "warnings": ["Row 3: duplicate client skipped"],
                "details": {
                    "clients": {"created": 1, "updated": 0, "skipped": 1},
                    "contacts": {"created": 1, "updated": 0},
                    "serviceScopes": {"created": 0, "updated": 0},
                },
            }
        )

        result = await ImportExecutor(writer).execute(
            table, suggest_mappings(table.headers), ImportPolicy()
        )

        assert result.success is False
        assert result.errors == ["Row 2: invalid email ''"]
        assert result.warnings == ["Row 3: duplicate client skipped"]
        assert result.details["contacts"].skipped == 0
        assert "serviceScopes" in result.details
        assert result.message == "1 successful, 1 failed"

    @pytest.mark.asyncio
    async def test_writer_message_kept(self, make_writer, table):
        writer = make_writer(
            response={
                "message": "Imported with custom note",
                "recordsProcessed": 0,
                "recordsSuccessful": 0,
                "recordsFailed": 0,
            }
        )

        result = await ImportExecutor(writer).execute(
            table, suggest_mappings(table.headers), ImportPolicy()
        )

        assert result.message == "Imported with custom note"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            {"recordsProcessed": 5, "recordsSuccessful": 1, "recordsFailed": 0, "recordsSkipped": 0},
            {"recordsSuccessful": 1, "recordsFailed": 0},
            {"recordsProcessed": -1, "recordsSuccessful": -1, "recordsFailed": 0},
            {"recordsProcessed": "many", "recordsSuccessful": 1, "recordsFailed": 0},
        ],
    )
    async def test_malformed_response_is_import_failure(self, make_writer, table, response):
        writer = make_writer(response=response)

        with pytest.raises(ImportFailedError) as exc_info:
            await ImportExecutor(writer).execute(
                table, suggest_mappings(table.headers), ImportPolicy()
            )

        assert exc_info.value.code == "IMPORT_FAILED"

    @pytest.mark.asyncio
    async def test_transport_failure_propagates(self, make_writer, table):
        writer = make_writer(error=ImportFailedError("Record writer is unreachable"))

        with pytest.raises(ImportFailedError, match="unreachable"):
            await ImportExecutor(writer).execute(
                table, suggest_mappings(table.headers), ImportPolicy()
            )


class TestImportResult:
    def test_accounting_identity_enforced(self):
        with pytest.raises(ValueError, match="recordsProcessed"):
            ImportResult(
                records_processed=3, records_successful=1, records_failed=1, records_skipped=0
            )

    def test_success_follows_failed_count(self):
        ok = ImportResult(records_processed=2, records_successful=1, records_failed=0,
                          records_skipped=1)
        failed = ImportResult(records_processed=2, records_successful=1, records_failed=1)

        assert ok.success is True
        assert failed.success is False
        assert ok.model_dump(by_alias=True)["success"] is True
