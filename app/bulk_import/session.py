from datetime import UTC, datetime, timedelta
from uuid import uuid4

from app.bulk_import.editor import MappingEditor
from app.bulk_import.executor import ImportExecutor
from app.bulk_import.models import ImportStep
from app.bulk_import.parser import parse_summary, parse_table
from app.bulk_import.samples import sample_text
from app.bulk_import.schemas import (
    ImportPolicy,
    ImportResult,
    ParsedTable,
    SessionState,
)
from app.bulk_import.suggester import suggest_mappings
from app.bulk_import.validator import validate_mappings, validation_result
from app.exceptions import ConflictError, InvalidInputError, MappingValidationError

BACK_TRANSITIONS = {
    ImportStep.mapping: ImportStep.input,
    ImportStep.preview: ImportStep.mapping,
    ImportStep.results: ImportStep.mapping,
}


class ImportSession:
    """Per-user wizard state: input -> mapping -> preview -> results."""

    def __init__(self, ttl: timedelta, session_id: str | None = None) -> None:
        self.id = session_id or str(uuid4())
        self.expires_at = datetime.now(UTC) + ttl
        self.step = ImportStep.input
        self.text = ""
        self.table: ParsedTable | None = None
        self.editor = MappingEditor([])
        self.policy = ImportPolicy()
        self.result: ImportResult | None = None
        self.is_processing = False
        self.message = ""

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(UTC)) >= self.expires_at

    def load_sample(self) -> None:
        self.text = sample_text()
        self.message = "Sample data has been loaded. Parse it to continue."

    def parse(self, text: str) -> ParsedTable:
        self._ensure_idle()
        table = parse_table(text)

        self.text = text
        self.table = table
        self.editor = MappingEditor(suggest_mappings(table.headers))
        self.result = None
        self.step = ImportStep.mapping
        self.message = parse_summary(table)
        return table

    def set_mapping(self, index: int, field: str, value: str | bool) -> None:
        self._ensure_idle()
        if self.step != ImportStep.mapping:
            raise ConflictError("Column mappings can only be changed in the mapping step")
        self.editor.set_mapping(index, field, value)

    def set_policy(self, policy: ImportPolicy) -> None:
        self._ensure_idle()
        self.policy = policy

    def validate(self) -> list[str]:
        return validate_mappings(self.editor.mappings)

    async def run_import(self, executor: ImportExecutor) -> ImportResult:
        self._ensure_idle()
        if self.step != ImportStep.mapping:
            raise ConflictError("Imports can only be started from the mapping step")
        if self.table is None or len(self.editor) == 0:
            raise InvalidInputError("Please parse data and configure mappings first")

        messages = self.validate()
        if messages:
            raise MappingValidationError(messages)
        if not self.table.rows:
            raise InvalidInputError("There are no data rows to import")
        if not self.editor.mapped():
            raise InvalidInputError("No columns are mapped to import fields")

        self.is_processing = True
        self.step = ImportStep.preview
        try:
            result = await executor.execute(self.table, self.editor.mappings, self.policy)
        except Exception:
            self.step = ImportStep.mapping
            raise
        finally:
            self.is_processing = False

        self.result = result
        self.step = ImportStep.results
        self.message = result.message
        return result

    def go_back(self) -> ImportStep:
        self._ensure_idle()
        self.step = BACK_TRANSITIONS.get(self.step, self.step)
        return self.step

    def can_navigate(self, step: ImportStep) -> bool:
        match step:
            case ImportStep.input:
                return True
            case ImportStep.mapping:
                return self.table is not None
            case ImportStep.preview | ImportStep.results:
                return self.result is not None
        return False

    def go_to(self, step: ImportStep) -> ImportStep:
        self._ensure_idle()
        if not self.can_navigate(step):
            raise ConflictError(f"Cannot navigate to the '{step}' step yet")
        self.step = step
        return self.step

    def reset(self) -> None:
        self._ensure_idle()
        self.step = ImportStep.input
        self.text = ""
        self.table = None
        self.editor = MappingEditor([])
        self.result = None
        self.message = ""

    def state(self) -> SessionState:
        return SessionState(
            id=self.id,
            step=self.step,
            text=self.text,
            table=self.table,
            mappings=self.editor.mappings,
            policy=self.policy,
            validation=validation_result(self.editor.mappings),
            result=self.result,
            is_processing=self.is_processing,
            message=self.message,
            available_steps=[step for step in ImportStep if self.can_navigate(step)],
            expires_at=self.expires_at,
        )

    def _ensure_idle(self) -> None:
        if self.is_processing:
            raise ConflictError("An import is already in progress for this session")
