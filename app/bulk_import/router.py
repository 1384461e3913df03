from fastapi import APIRouter

from app.bulk_import.schemas import (
    CatalogResponse,
    ColumnMapping,
    ImportPolicy,
    ImportResult,
    MappingUpdate,
    NavigateRequest,
    ParseRequest,
    SessionState,
    SuggestRequest,
    ValidationResult,
)
from app.dependencies import BulkImportServiceDep

router = APIRouter()


@router.get("/catalog", response_model=CatalogResponse)
async def get_catalog(service: BulkImportServiceDep) -> CatalogResponse:
    return service.get_catalog()


@router.post("/suggest", response_model=list[ColumnMapping])
async def suggest_mappings(data: SuggestRequest, service: BulkImportServiceDep) -> list[ColumnMapping]:
    return service.suggest(data.headers)


@router.post("/sessions", status_code=201, response_model=SessionState)
async def create_session(service: BulkImportServiceDep) -> SessionState:
    return service.create_session()


@router.get("/sessions/{session_id}", response_model=SessionState)
async def get_session(session_id: str, service: BulkImportServiceDep) -> SessionState:
    return service.get_session(session_id)


@router.delete("/sessions/{session_id}", status_code=204)
async def delete_session(session_id: str, service: BulkImportServiceDep) -> None:
    service.delete_session(session_id)


@router.post("/sessions/{session_id}/sample", response_model=SessionState)
async def load_sample(session_id: str, service: BulkImportServiceDep) -> SessionState:
    return service.load_sample(session_id)


@router.post("/sessions/{session_id}/parse", response_model=SessionState)
async def parse_data(
    session_id: str, data: ParseRequest, service: BulkImportServiceDep
) -> SessionState:
    return service.parse(session_id, data.text)


@router.patch("/sessions/{session_id}/mappings/{index}", response_model=SessionState)
async def update_mapping(
    session_id: str,
    index: int,
    data: MappingUpdate,
    service: BulkImportServiceDep,
) -> SessionState:
    return service.update_mapping(session_id, index, data.field, data.value)


@router.get("/sessions/{session_id}/validation", response_model=ValidationResult)
async def validate_mappings(session_id: str, service: BulkImportServiceDep) -> ValidationResult:
    return service.validate(session_id)


@router.put("/sessions/{session_id}/policy", response_model=SessionState)
async def set_policy(
    session_id: str, data: ImportPolicy, service: BulkImportServiceDep
) -> SessionState:
    return service.set_policy(session_id, data)


@router.post("/sessions/{session_id}/import", response_model=ImportResult)
async def run_import(session_id: str, service: BulkImportServiceDep) -> ImportResult:
    return await service.run_import(session_id)


@router.post("/sessions/{session_id}/back", response_model=SessionState)
async def go_back(session_id: str, service: BulkImportServiceDep) -> SessionState:
    return service.go_back(session_id)


@router.post("/sessions/{session_id}/navigate", response_model=SessionState)
async def navigate(
    session_id: str, data: NavigateRequest, service: BulkImportServiceDep
) -> SessionState:
    return service.navigate(session_id, data.step)


@router.post("/sessions/{session_id}/reset", response_model=SessionState)
async def reset_session(session_id: str, service: BulkImportServiceDep) -> SessionState:
    return service.reset(session_id)
