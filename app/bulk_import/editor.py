import pydantic
import structlog

from app.bulk_import.catalog import FieldCatalog, catalog
from app.bulk_import.models import SKIP_COLUMN, DataType
from app.bulk_import.schemas import ColumnMapping, FieldDefinition
from app.exceptions import NotFoundError, ValidationError

logger = structlog.get_logger()

DIRECT_FIELDS = {
    "sourceColumn": "source_column",
    "required": "required",
    "dataType": "data_type",
}


class MappingEditor:
    """Live, user-editable column mappings for one parsed paste.

    A mapping with a ``target_field`` always points at a real catalog field of its
    ``entity_type``. Choosing an entity type on its own leaves the field empty until
    one is picked.
    """

    def __init__(self, mappings: list[ColumnMapping], field_catalog: FieldCatalog = catalog) -> None:
        self._mappings = mappings
        self._catalog = field_catalog

    def __len__(self) -> int:
        return len(self._mappings)

    @property
    def mappings(self) -> list[ColumnMapping]:
        return self._mappings

    def mapped(self) -> list[ColumnMapping]:
        return [m for m in self._mappings if m.is_mapped]

    def set_mapping(self, index: int, field: str, value: str | bool) -> ColumnMapping:
        if not 0 <= index < len(self._mappings):
            raise NotFoundError("Column mapping", str(index))
        mapping = self._mappings[index]

        if field == "entityType":
            self._set_entity_type(mapping, str(value))
        elif field == "targetField":
            self._set_target_field(mapping, str(value))
        elif field in DIRECT_FIELDS:
            try:
                setattr(mapping, DIRECT_FIELDS[field], value)
            except pydantic.ValidationError as exc:
                raise ValidationError(f"Invalid value for '{field}': {value!r}") from exc
        else:
            raise ValidationError(f"Unknown mapping field '{field}'")

        logger.debug(
            "column_mapping_updated",
            index=index,
            field=field,
            entity_type=mapping.entity_type,
            target_field=mapping.target_field,
        )
        return mapping

    def _set_entity_type(self, mapping: ColumnMapping, entity_type: str) -> None:
        try:
            mapping.entity_type = entity_type
        except pydantic.ValidationError as exc:
            raise ValidationError(f"Unknown entity type '{entity_type}'") from exc
        # a field name from the previous entity type means nothing in the new one
        mapping.target_field = ""
        mapping.required = False
        mapping.data_type = DataType.text

    def _set_target_field(self, mapping: ColumnMapping, value: str) -> None:
        if value in ("", SKIP_COLUMN):
            mapping.target_field = ""
            mapping.entity_type = ""
            mapping.required = False
            mapping.data_type = DataType.text
            return

        if "." in value:
            entity_type, field_name = value.split(".", 1)
        else:
            entity_type, field_name = mapping.entity_type, value

        definition = self._catalog.definition(entity_type, field_name)
        if definition is None:
            if not entity_type:
                raise ValidationError(
                    f"Choose an entity type for column '{mapping.source_column}' before '{field_name}'"
                )
            raise ValidationError(f"Unknown field '{entity_type}.{field_name}'")
        self._apply(mapping, definition)

    @staticmethod
    def _apply(mapping: ColumnMapping, definition: FieldDefinition) -> None:
        mapping.entity_type = definition.entity_type.value
        mapping.target_field = definition.field_name
        mapping.required = definition.required
        mapping.data_type = definition.data_type
