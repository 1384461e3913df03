from enum import StrEnum


class EntityType(StrEnum):
    clients = "clients"
    contacts = "contacts"
    contracts = "contracts"
    licenses = "licenses"
    hardware = "hardware"


class DataType(StrEnum):
    text = "text"
    email = "email"
    boolean = "boolean"
    integer = "integer"
    number = "number"
    date = "date"


class DuplicateHandling(StrEnum):
    update = "update"
    skip = "skip"
    create_new = "create_new"


class ClientMatchStrategy(StrEnum):
    name_only = "name_only"
    name_and_domain = "name_and_domain"
    email = "email"
    custom = "custom"


class ImportStep(StrEnum):
    input = "input"
    mapping = "mapping"
    preview = "preview"
    results = "results"


SKIP_COLUMN = "skip-column"
