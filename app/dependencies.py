from datetime import timedelta
from typing import Annotated

from fastapi import Depends

from app.bulk_import.executor import ImportExecutor
from app.bulk_import.repository import SessionRepository, import_sessions
from app.bulk_import.service import BulkImportService
from app.bulk_import.writers import HttpRecordWriter, RecordWriter
from app.config import settings


def get_record_writer() -> RecordWriter:
    return HttpRecordWriter(
        settings.writer_url,
        api_key=settings.writer_api_key,
        timeout=settings.writer_timeout,
    )


def get_session_repo() -> SessionRepository:
    return SessionRepository(import_sessions, timedelta(minutes=settings.session_ttl_minutes))


RecordWriterDep = Annotated[RecordWriter, Depends(get_record_writer)]
SessionRepoDep = Annotated[SessionRepository, Depends(get_session_repo)]


def get_bulk_import_service(writer: RecordWriterDep, repo: SessionRepoDep) -> BulkImportService:
    return BulkImportService(repo, ImportExecutor(writer))


BulkImportServiceDep = Annotated[BulkImportService, Depends(get_bulk_import_service)]
