from app.bulk_import.catalog import FieldCatalog, catalog
from app.bulk_import.schemas import ColumnMapping, ValidationResult


def validate_mappings(
    mappings: list[ColumnMapping], field_catalog: FieldCatalog = catalog
) -> list[str]:
    """Return one message per problem that must be fixed before importing; empty means pass."""
    messages: list[str] = []

    for mapping in mappings:
        if mapping.required and not mapping.target_field:
            messages.append(f"Column '{mapping.source_column}' is required but not mapped to a field")

    # Every entity a column feeds needs its key field, or the writer cannot match rows.
    fed_entities: list[str] = []
    for mapping in mappings:
        if mapping.entity_type and mapping.entity_type not in fed_entities:
            fed_entities.append(mapping.entity_type)

    mapped_keys = {(m.entity_type, m.target_field) for m in mappings if m.target_field}
    for entity_type in fed_entities:
        key = field_catalog.natural_key(entity_type)
        if (entity_type, key.field_name) not in mapped_keys:
            messages.append(
                f"Required field '{key.key}' is not mapped; "
                f"map a column to it to import {entity_type}"
            )

    return messages


def validation_result(mappings: list[ColumnMapping]) -> ValidationResult:
    messages = validate_mappings(mappings)
    return ValidationResult(valid=not messages, messages=messages)
