import structlog

from app.bulk_import.catalog import (
    CLIENT_MATCH_DESCRIPTIONS,
    DUPLICATE_HANDLING_DESCRIPTIONS,
    FieldCatalog,
    catalog,
)
from app.bulk_import.executor import ImportExecutor
from app.bulk_import.models import ImportStep
from app.bulk_import.repository import SessionRepository
from app.bulk_import.schemas import (
    CatalogResponse,
    ColumnMapping,
    EntityCatalog,
    ImportPolicy,
    ImportResult,
    PolicyDescriptions,
    SessionState,
    ValidationResult,
)
from app.bulk_import.session import ImportSession
from app.bulk_import.suggester import suggest_mappings
from app.bulk_import.validator import validation_result
from app.exceptions import ImportFailedError, NotFoundError

logger = structlog.get_logger()


class BulkImportService:
    def __init__(
        self,
        repo: SessionRepository,
        executor: ImportExecutor,
        field_catalog: FieldCatalog = catalog,
    ) -> None:
        self._repo = repo
        self._executor = executor
        self._catalog = field_catalog

    def get_catalog(self) -> CatalogResponse:
        entities = [
            EntityCatalog(
                entity_type=entity_type,
                natural_key=self._catalog.natural_key(entity_type).field_name,
                fields=self._catalog.fields_for(entity_type),
            )
            for entity_type in self._catalog.entity_types()
        ]
        return CatalogResponse(
            entities=entities,
            options=self._catalog.options(),
            policies=PolicyDescriptions(
                duplicate_handling=DUPLICATE_HANDLING_DESCRIPTIONS,
                client_match_strategy=CLIENT_MATCH_DESCRIPTIONS,
            ),
        )

    def suggest(self, headers: list[str]) -> list[ColumnMapping]:
        return suggest_mappings(headers, self._catalog)

    def create_session(self) -> SessionState:
        session = self._repo.create()
        logger.info("bulk_import_session_created", session_id=session.id)
        return session.state()

    def get_session(self, session_id: str) -> SessionState:
        return self._get(session_id).state()

    def delete_session(self, session_id: str) -> None:
        if not self._repo.delete(session_id):
            raise NotFoundError("Import session", session_id)
        logger.info("bulk_import_session_deleted", session_id=session_id)

    def load_sample(self, session_id: str) -> SessionState:
        session = self._get(session_id)
        session.load_sample()
        return session.state()

    def parse(self, session_id: str, text: str) -> SessionState:
        session = self._get(session_id)
        table = session.parse(text)
        logger.info(
            "bulk_import_session_parsed",
            session_id=session_id,
            columns=len(table.headers),
            total_rows=table.total_rows,
            mapped=len(session.editor.mapped()),
        )
        return session.state()

    def update_mapping(
        self, session_id: str, index: int, field: str, value: str | bool
    ) -> SessionState:
        session = self._get(session_id)
        session.set_mapping(index, field, value)
        return session.state()

    def validate(self, session_id: str) -> ValidationResult:
        return validation_result(self._get(session_id).editor.mappings)

    def set_policy(self, session_id: str, policy: ImportPolicy) -> SessionState:
        session = self._get(session_id)
        session.set_policy(policy)
        logger.info(
            "bulk_import_policy_set",
            session_id=session_id,
            duplicate_handling=policy.duplicate_handling,
            client_match_strategy=policy.client_match_strategy,
        )
        return session.state()

    async def run_import(self, session_id: str) -> ImportResult:
        session = self._get(session_id)
        try:
            result = await session.run_import(self._executor)
        except ImportFailedError as exc:
            logger.warning("bulk_import_failed", session_id=session_id, error=exc.message)
            raise
        if not result.success:
            logger.warning(
                "bulk_import_partial",
                session_id=session_id,
                failed=result.records_failed,
                errors=result.errors,
            )
        return result

    def go_back(self, session_id: str) -> SessionState:
        session = self._get(session_id)
        session.go_back()
        return session.state()

    def navigate(self, session_id: str, step: ImportStep) -> SessionState:
        session = self._get(session_id)
        session.go_to(step)
        return session.state()

    def reset(self, session_id: str) -> SessionState:
        session = self._get(session_id)
        session.reset()
        logger.info("bulk_import_session_reset", session_id=session_id)
        return session.state()

    def _get(self, session_id: str) -> ImportSession:
        session = self._repo.get(session_id)
        if session is None:
            raise NotFoundError("Import session", session_id)
        return session
