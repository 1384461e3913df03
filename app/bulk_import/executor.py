import pydantic
import structlog

from app.bulk_import.schemas import (
    ColumnMapping,
    ImportPolicy,
    ImportRequest,
    ImportResult,
    ParsedTable,
)
from app.bulk_import.writers.base import RecordWriter
from app.exceptions import ImportFailedError

logger = structlog.get_logger()


class ImportExecutor:
    def __init__(self, writer: RecordWriter) -> None:
        self._writer = writer

    @staticmethod
    def build_request(
        table: ParsedTable, mappings: list[ColumnMapping], policy: ImportPolicy
    ) -> ImportRequest:
        """Assemble the writer request; unmapped columns are left out and short rows padded."""
        width = len(table.headers)
        rows = [
            [table.cell(index, column) for column in range(width)]
            for index in range(len(table.rows))
        ]
        return ImportRequest(
            headers=list(table.headers),
            rows=rows,
            mappings=[m.model_copy() for m in mappings if m.is_mapped],
            duplicate_handling=policy.duplicate_handling,
            client_match_strategy=policy.client_match_strategy,
        )

    async def execute(
        self, table: ParsedTable, mappings: list[ColumnMapping], policy: ImportPolicy
    ) -> ImportResult:
        request = self.build_request(table, mappings, policy)
        logger.info(
            "bulk_import_submitted",
            rows=len(request.rows),
            mapped_columns=len(request.mappings),
            duplicate_handling=policy.duplicate_handling,
            client_match_strategy=policy.client_match_strategy,
        )

        body = await self._writer.write(request)

        try:
            result = ImportResult.model_validate(body)
        except pydantic.ValidationError as exc:
            logger.error("writer_response_malformed", errors=exc.errors(include_url=False))
            raise ImportFailedError(f"Record writer returned a malformed result: {exc}") from exc

        logger.info(
            "bulk_import_completed",
            processed=result.records_processed,
            successful=result.records_successful,
            failed=result.records_failed,
            skipped=result.records_skipped,
            errors=len(result.errors),
            warnings=len(result.warnings),
        )
        return result
