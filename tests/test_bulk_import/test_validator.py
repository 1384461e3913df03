from app.bulk_import.editor import MappingEditor
from app.bulk_import.parser import parse_table
from app.bulk_import.samples import sample_text
from app.bulk_import.schemas import ColumnMapping
from app.bulk_import.suggester import suggest_mappings
from app.bulk_import.validator import validate_mappings, validation_result


class TestValidateMappings:
    def test_client_name_and_contact_email_pass(self):
        assert validate_mappings(suggest_mappings(["Client Name", "Contact Email"])) == []

    def test_contacts_without_email_fails(self):
        """A contacts column exists but nothing feeds contacts.email."""
        messages = validate_mappings(suggest_mappings(["Client Name", "Contact Name"]))

        assert len(messages) == 1
        assert "contacts.email" in messages[0]

    def test_required_mapping_without_target_named_by_column(self):
        mappings = [
            ColumnMapping(source_column="Client Name", target_field="name", entity_type="clients",
                          required=True),
            ColumnMapping(source_column="Serial", required=True),
        ]

        messages = validate_mappings(mappings)

        assert any("'Serial'" in m for m in messages)

    def test_entity_chosen_without_field(self):
        """A column moved to an entity without a field still demands that entity's key."""
        editor = MappingEditor(suggest_mappings(["Client Name", "Agreement"]))
        editor.set_mapping(1, "entityType", "contracts")

        messages = validate_mappings(editor.mappings)

        assert len(messages) == 1
        assert "contracts.name" in messages[0]

    def test_nothing_mapped_nothing_required(self):
        """Unrecognized headers carry no required flag, so there is nothing to report."""
        assert validate_mappings(suggest_mappings(["Favourite Colour", "Shoe Size"])) == []

    def test_every_problem_reported(self):
        mappings = suggest_mappings(["Contact Name", "Hardware Name"])

        messages = validate_mappings(mappings)

        assert len(messages) == 2
        assert "contacts.email" in messages[0]
        assert "hardware.serialNumber" in messages[1]

    def test_sample_data_is_importable(self):
        table = parse_table(sample_text())

        assert validate_mappings(suggest_mappings(table.headers)) == []


def test_validation_result_flag():
    assert validation_result(suggest_mappings(["Client Name"])).valid is True

    result = validation_result(suggest_mappings(["Contact Name"]))
    assert result.valid is False
    assert result.messages
