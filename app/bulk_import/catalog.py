"""Static registry of importable entity types and their fields."""

from app.bulk_import.models import ClientMatchStrategy, DataType, DuplicateHandling, EntityType
from app.bulk_import.schemas import FieldDefinition, FieldOption

_FIELDS: dict[EntityType, list[tuple[str, str, DataType, bool, str]]] = {
    EntityType.clients: [
        ("name", "Client company name (Required)", DataType.text, True, "Acme Corporation"),
        ("shortName", "Client abbreviated name", DataType.text, False, "ACME"),
        ("domain", "Company domain", DataType.text, False, "acme.com"),
        ("industry", "Industry sector", DataType.text, False, "Technology"),
        ("companySize", "Company size category", DataType.text, False,
         "Mid-market (100-999 employees)"),
        ("status", "Client status", DataType.text, False, "active, prospect, inactive"),
        ("source", "How they found us", DataType.text, False, "Referral, Website, Cold Call"),
        ("address", "Company address", DataType.text, False,
         "123 Business St, City, State 12345"),
        ("website", "Company website URL", DataType.text, False, "https://www.acme.com"),
        ("notes", "Additional notes", DataType.text, False,
         "Important client requirements or notes"),
    ],
    EntityType.contacts: [
        ("name", "Contact full name (Required)", DataType.text, True, "John Smith"),
        ("email", "Contact email address (Required)", DataType.email, True,
         "john.smith@acme.com"),
        ("phone", "Contact phone number", DataType.text, False, "+1-555-123-4567"),
        ("title", "Job title", DataType.text, False, "IT Director"),
        ("isPrimary", "Is primary contact", DataType.boolean, False, "true, false"),
        ("isActive", "Is active contact", DataType.boolean, False, "true, false"),
    ],
    EntityType.contracts: [
        ("name", "Contract name/title (Required)", DataType.text, True,
         "Annual Security Services Agreement"),
        ("startDate", "Contract start date (Required)", DataType.date, True, "2024-01-01"),
        ("endDate", "Contract end date (Required)", DataType.date, True, "2024-12-31"),
        ("autoRenewal", "Auto-renewal enabled", DataType.boolean, False, "true, false"),
        ("renewalTerms", "Renewal terms", DataType.text, False, "Annual automatic renewal"),
        ("totalValue", "Total contract value", DataType.number, False, "120000.00"),
        ("status", "Contract status", DataType.text, False, "draft, active, expired"),
        ("documentUrl", "Contract document URL", DataType.text, False,
         "https://docs.company.com/contract123.pdf"),
        ("notes", "Contract notes", DataType.text, False, "Special terms and conditions"),
    ],
    EntityType.licenses: [
        ("assignedLicenses", "Number of assigned licenses (Required)", DataType.integer, True,
         "25"),
        ("notes", "License assignment notes", DataType.text, False,
         "SIEM EPS allocation for Q1"),
    ],
    EntityType.hardware: [
        ("name", "Hardware asset name (Required)", DataType.text, True, "Firewall Device #1"),
        ("serialNumber", "Hardware serial number (Required)", DataType.text, True,
         "FW-2024-001-ABC123"),
        ("manufacturer", "Hardware manufacturer", DataType.text, False,
         "Cisco, Fortinet, Palo Alto"),
        ("model", "Hardware model", DataType.text, False, "ASA-5516-X"),
        ("category", "Hardware category", DataType.text, False,
         "Firewall, Server, Network Equipment"),
        ("purchaseDate", "Purchase date", DataType.date, False, "2024-01-15"),
        ("warrantyExpiryDate", "Warranty expiry date", DataType.date, False, "2027-01-15"),
        ("status", "Hardware status", DataType.text, False, "active, maintenance, retired"),
        ("installationLocation", "Installation location", DataType.text, False,
         "Data Center Rack A1"),
        ("location", "General location (alias for installationLocation)", DataType.text, False,
         "Main Office"),
        ("notes", "Hardware notes", DataType.text, False,
         "Configured for client network segmentation"),
    ],
}

# Field the writer keys each entity on; it must be mapped whenever the entity is imported.
_NATURAL_KEYS: dict[EntityType, str] = {
    EntityType.clients: "name",
    EntityType.contacts: "email",
    EntityType.contracts: "name",
    EntityType.licenses: "assignedLicenses",
    EntityType.hardware: "serialNumber",
}

DUPLICATE_HANDLING_DESCRIPTIONS: dict[DuplicateHandling, str] = {
    DuplicateHandling.update: "Existing client records will be updated with new data from your import.",
    DuplicateHandling.skip: "Duplicate clients will be skipped, keeping existing data unchanged.",
    DuplicateHandling.create_new: (
        "New client records will be created with modified names to avoid conflicts."
    ),
}

CLIENT_MATCH_DESCRIPTIONS: dict[ClientMatchStrategy, str] = {
    ClientMatchStrategy.name_only: "Clients are considered duplicates if they have the same name.",
    ClientMatchStrategy.name_and_domain: (
        "Clients are considered duplicates if they have the same name AND domain ID."
    ),
    ClientMatchStrategy.email: (
        "Clients are considered duplicates if they have contacts with matching email addresses."
    ),
    ClientMatchStrategy.custom: "Duplicate detection is delegated to the writer's custom rules.",
}


class FieldCatalog:
    """Read-only lookup over the field definitions of every entity type."""

    def __init__(
        self,
        fields: dict[EntityType, list[tuple[str, str, DataType, bool, str]]],
        natural_keys: dict[EntityType, str],
    ) -> None:
        self._fields: dict[EntityType, dict[str, FieldDefinition]] = {}
        for entity_type, rows in fields.items():
            definitions: dict[str, FieldDefinition] = {}
            for field_name, description, data_type, required, example in rows:
                if field_name in definitions:
                    raise ValueError(f"Duplicate field '{entity_type}.{field_name}'")
                definitions[field_name] = FieldDefinition(
                    entity_type=entity_type,
                    field_name=field_name,
                    description=description,
                    data_type=data_type,
                    required=required,
                    example=example,
                )
            self._fields[entity_type] = definitions

        for entity_type, field_name in natural_keys.items():
            definition = self._fields.get(entity_type, {}).get(field_name)
            if definition is None or not definition.required:
                raise ValueError(f"Natural key '{entity_type}.{field_name}' must be a required field")
        self._natural_keys = dict(natural_keys)

    def entity_types(self) -> list[EntityType]:
        return list(self._fields)

    def fields_for(self, entity_type: str) -> list[FieldDefinition]:
        return list(self._fields.get(entity_type, {}).values())  # type: ignore[call-overload]

    def definition(self, entity_type: str, field_name: str) -> FieldDefinition | None:
        return self._fields.get(entity_type, {}).get(field_name)  # type: ignore[call-overload]

    def natural_key(self, entity_type: str) -> FieldDefinition:
        field_name = self._natural_keys[EntityType(entity_type)]
        return self._fields[EntityType(entity_type)][field_name]

    def options(self) -> list[FieldOption]:
        """Flatten the catalog into ``entityType.fieldName`` picklist entries, grouped by entity."""
        return [
            FieldOption(
                value=definition.key,
                entity_type=definition.entity_type,
                field_name=definition.field_name,
                description=definition.description,
                data_type=definition.data_type,
                required=definition.required,
            )
            for definitions in self._fields.values()
            for definition in definitions.values()
        ]


catalog = FieldCatalog(_FIELDS, _NATURAL_KEYS)
