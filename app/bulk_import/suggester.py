"""Keyword heuristics that propose a target field for each pasted column header.

Rules are evaluated top to bottom and the first match wins, so the order of every
table below is significant.
"""

from dataclasses import dataclass

from app.bulk_import.catalog import FieldCatalog, catalog
from app.bulk_import.models import DataType, EntityType
from app.bulk_import.schemas import ColumnMapping


@dataclass(frozen=True)
class KeywordRule:
    """Matches when the header contains any of ``any_of`` and all of ``all_of``.

    With ``exact`` set, the header must equal one of ``any_of`` instead.
    """

    any_of: tuple[str, ...]
    field_name: str
    all_of: tuple[str, ...] = ()
    exact: bool = False

    def matches(self, header: str) -> bool:
        if self.exact:
            hit = header in self.any_of
        else:
            hit = not self.any_of or any(keyword in header for keyword in self.any_of)
        return hit and all(keyword in header for keyword in self.all_of)


@dataclass(frozen=True)
class FallbackRule:
    rule: KeywordRule
    entity_type: EntityType


ENTITY_RULES: list[tuple[tuple[str, ...], EntityType]] = [
    (("client", "company"), EntityType.clients),
    (("contact", "person"), EntityType.contacts),
    (("contract",), EntityType.contracts),
    (("license",), EntityType.licenses),
    (("hardware", "asset", "device"), EntityType.hardware),
]

FIELD_RULES: dict[EntityType, list[KeywordRule]] = {
    EntityType.clients: [
        # identity
        KeywordRule(("name",), "name"),
        KeywordRule(("short",), "shortName"),
        KeywordRule(("domain",), "domain"),
        # classification
        KeywordRule(("industry",), "industry"),
        KeywordRule(("size",), "companySize"),
        KeywordRule(("status",), "status"),
        KeywordRule(("source",), "source"),
        # contact details
        KeywordRule(("address",), "address"),
        KeywordRule(("website",), "website"),
        KeywordRule(("note",), "notes"),
    ],
    EntityType.contacts: [
        KeywordRule(("name",), "name"),
        KeywordRule(("email",), "email"),
        KeywordRule(("phone",), "phone"),
        KeywordRule(("title", "position"), "title"),
        KeywordRule(("primary",), "isPrimary"),
        KeywordRule(("active",), "isActive"),
    ],
    EntityType.contracts: [
        KeywordRule(("name", "title"), "name"),
        KeywordRule(("start",), "startDate"),
        KeywordRule(("end",), "endDate"),
        KeywordRule(("value", "amount"), "totalValue"),
        KeywordRule(("status",), "status"),
        KeywordRule(("renewal",), "autoRenewal", all_of=("auto",)),
        KeywordRule(("renewal",), "renewalTerms"),
        KeywordRule(("document", "url"), "documentUrl"),
        KeywordRule(("note",), "notes"),
    ],
    EntityType.licenses: [
        KeywordRule(("quantity", "count", "assigned"), "assignedLicenses"),
        KeywordRule(("note",), "notes"),
    ],
    EntityType.hardware: [
        KeywordRule(("name",), "name"),
        KeywordRule(("serial",), "serialNumber"),
        KeywordRule(("manufacturer", "vendor"), "manufacturer"),
        KeywordRule(("model",), "model"),
        KeywordRule(("category", "type"), "category"),
        KeywordRule(("purchase",), "purchaseDate", all_of=("date",)),
        KeywordRule(("warranty",), "warrantyExpiryDate"),
        KeywordRule(("status",), "status"),
        KeywordRule(("location", "install"), "installationLocation"),
        KeywordRule(("note",), "notes"),
    ],
}

# Bare column names seen in real spreadsheets. Fixed whitelist; do not generalize.
FALLBACK_RULES: list[FallbackRule] = [
    FallbackRule(KeywordRule(("name",), "name", exact=True), EntityType.clients),
    FallbackRule(KeywordRule(("email",), "email", exact=True), EntityType.contacts),
    FallbackRule(KeywordRule((), "startDate", all_of=("start", "date")), EntityType.contracts),
    FallbackRule(KeywordRule((), "endDate", all_of=("end", "date")), EntityType.contracts),
]


def detect_entity_type(header: str) -> EntityType | None:
    for keywords, entity_type in ENTITY_RULES:
        if any(keyword in header for keyword in keywords):
            return entity_type
    return None


def match_target(header: str) -> tuple[EntityType, str] | None:
    """Return the ``(entity_type, field_name)`` a normalized header points at, if any."""
    entity_type = detect_entity_type(header)
    if entity_type is not None:
        for rule in FIELD_RULES[entity_type]:
            if rule.matches(header):
                return entity_type, rule.field_name
        return None

    for fallback in FALLBACK_RULES:
        if fallback.rule.matches(header):
            return fallback.entity_type, fallback.rule.field_name
    return None


def suggest_mapping(header: str, field_catalog: FieldCatalog = catalog) -> ColumnMapping:
    target = match_target(header.lower().strip())
    if target is not None:
        definition = field_catalog.definition(*target)
        if definition is not None:
            return ColumnMapping(
                source_column=header,
                target_field=definition.field_name,
                entity_type=definition.entity_type.value,
                required=definition.required,
                data_type=definition.data_type,
            )
    return ColumnMapping(source_column=header, data_type=DataType.text)


def suggest_mappings(headers: list[str], field_catalog: FieldCatalog = catalog) -> list[ColumnMapping]:
    return [suggest_mapping(header, field_catalog) for header in headers]
