from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from app.bulk_import.models import (
    ClientMatchStrategy,
    DataType,
    DuplicateHandling,
    EntityType,
    ImportStep,
)


class CamelModel(BaseModel):
    """Base for models exchanged with the browser and the record writer (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ParsedTable(CamelModel):
    """Result of parsing one paste.

    ``total_rows`` counts every data line seen after the header, including blank
    ones, while ``rows`` only keeps lines with at least one non-empty cell. The two
    are deliberately not reconciled: one reports what was pasted, the other what
    can be imported.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    headers: list[str]
    rows: list[list[str]]
    total_rows: int = Field(ge=0)

    def cell(self, row: int, column: int) -> str:
        values = self.rows[row]
        return values[column] if column < len(values) else ""


class FieldDefinition(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    entity_type: EntityType
    field_name: str
    description: str
    data_type: DataType = DataType.text
    required: bool = False
    example: str = ""

    @property
    def key(self) -> str:
        return f"{self.entity_type}.{self.field_name}"


class FieldOption(CamelModel):
    """One entry of the flattened ``entityType.fieldName`` picklist."""

    value: str
    entity_type: EntityType
    field_name: str
    description: str
    data_type: DataType
    required: bool


class ColumnMapping(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, validate_assignment=True
    )

    source_column: str
    target_field: str = ""
    entity_type: str = ""
    required: bool = False
    data_type: DataType = DataType.text

    @field_validator("entity_type")
    @classmethod
    def check_entity_type(cls, value: str) -> str:
        if value and value not in {e.value for e in EntityType}:
            raise ValueError(f"Unknown entity type '{value}'")
        return value

    @property
    def is_mapped(self) -> bool:
        return bool(self.target_field)


class ImportPolicy(CamelModel):
    duplicate_handling: DuplicateHandling = DuplicateHandling.update
    client_match_strategy: ClientMatchStrategy = ClientMatchStrategy.name_only


class ImportRequest(CamelModel):
    headers: list[str]
    rows: list[list[str]]
    mappings: list[ColumnMapping]
    duplicate_handling: DuplicateHandling
    client_match_strategy: ClientMatchStrategy


class EntityCounts(CamelModel):
    created: int = Field(default=0, ge=0)
    updated: int = Field(default=0, ge=0)
    skipped: int = Field(default=0, ge=0)


class ImportResult(CamelModel):
    message: str = ""
    records_processed: int = Field(ge=0)
    records_successful: int = Field(ge=0)
    records_failed: int = Field(ge=0)
    records_skipped: int = Field(default=0, ge=0)
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    details: dict[str, EntityCounts] = Field(default_factory=dict)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def success(self) -> bool:
        return self.records_failed == 0

    @model_validator(mode="after")
    def check_accounting(self) -> "ImportResult":
        accounted = self.records_successful + self.records_failed + self.records_skipped
        if self.records_processed != accounted:
            raise ValueError(
                f"recordsProcessed ({self.records_processed}) does not equal "
                f"successful + failed + skipped ({accounted})"
            )
        if not self.message:
            if self.success:
                self.message = f"Successfully imported {self.records_successful} records"
            else:
                self.message = (
                    f"{self.records_successful} successful, {self.records_failed} failed"
                )
        return self


class ParseRequest(BaseModel):
    text: str


class SuggestRequest(BaseModel):
    headers: list[str]


class MappingUpdate(BaseModel):
    field: str
    value: str | bool


class NavigateRequest(BaseModel):
    step: ImportStep


class ValidationResult(CamelModel):
    valid: bool
    messages: list[str]


class SessionState(CamelModel):
    id: str
    step: ImportStep
    text: str
    table: ParsedTable | None
    mappings: list[ColumnMapping]
    policy: ImportPolicy
    validation: ValidationResult
    result: ImportResult | None
    is_processing: bool
    message: str
    available_steps: list[ImportStep]
    expires_at: datetime


class EntityCatalog(CamelModel):
    entity_type: EntityType
    natural_key: str
    fields: list[FieldDefinition]


class PolicyDescriptions(CamelModel):
    duplicate_handling: dict[DuplicateHandling, str]
    client_match_strategy: dict[ClientMatchStrategy, str]


class CatalogResponse(CamelModel):
    entities: list[EntityCatalog]
    options: list[FieldOption]
    policies: PolicyDescriptions
