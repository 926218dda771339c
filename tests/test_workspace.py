import pytest

from schemaglance.groups.domain.model import GroupsConfig, TableGroup, TableGroupItem
from schemaglance.search.domain.enums import SearchResultType
from schemaglance.workspace import SchemaWorkspace
from tests.helpers.builders import person_schema


@pytest.fixture
def workspace():
    schema_workspace = SchemaWorkspace()
    schema_workspace.load_schema(person_schema())
    return schema_workspace


class TestSchemaWorkspace:
    def test_preview_of_column_result_describes_owner_table(self, workspace):
        # GIVEN
        workspace.search_session.search(":col city")
        result = workspace.search_session.selected_result

        # WHEN
        preview = workspace.preview(result)

        # THEN
        assert result.type == SearchResultType.COLUMN
        assert preview.table_name == "PERSON_ADDRESS"
        assert [column_preview.column.name for column_preview in preview.columns] == [
            "id",
            "person_id",
            "address_type_id",
            "city",
        ]
        assert [fk.referenced_table for fk in preview.outgoing_foreign_keys] == ["PERSON", "ADDRESS_TYPE"]
        assert preview.incoming_foreign_keys == []
        assert preview.sql == "SELECT city, * FROM PERSON_ADDRESS"
        assert preview.in_join is False

    def test_preview_flags_key_columns(self):
        # GIVEN
        schema = person_schema()
        schema.columns = [column.model_copy(update={"is_primary_key": False}) for column in schema.columns]
        workspace = SchemaWorkspace()
        workspace.load_schema(schema)
        workspace.search_session.search(":table person_address")

        # WHEN
        preview = workspace.preview(workspace.search_session.selected_result)

        # THEN
        assert [
            (
                column_preview.column.name,
                column_preview.is_primary_key,
                column_preview.foreign_key.referenced_table if column_preview.foreign_key else None,
            )
            for column_preview in preview.columns
        ] == [
            ("id", True, None),
            ("person_id", False, "PERSON"),
            ("address_type_id", False, "ADDRESS_TYPE"),
            ("city", False, None),
        ]

    def test_relationship_starts_join_from_current_table(self, workspace):
        # GIVEN
        foreign_key = workspace.schema.foreign_keys[0]

        # WHEN
        workspace.add_relationship_to_join("PERSON", "PERSON_ADDRESS", foreign_key)

        # THEN
        assert [(table.name, table.alias) for table in workspace.join_builder.tables] == [
            ("PERSON", "p"),
            ("PERSON_ADDRESS", "pe"),
        ]
        assert workspace.join_builder.get_generated_sql().endswith("JOIN PERSON_ADDRESS pe ON pe.person_id = p.id")

    def test_added_tables_are_linked_through_known_foreign_keys(self, workspace):
        # WHEN
        workspace.add_table_to_join("ADDRESS_TYPE")
        workspace.add_table_to_join("PERSON_ADDRESS")
        workspace.add_table_to_join("PERSON")

        # THEN
        assert workspace.join_builder.get_generated_sql().splitlines()[-3:] == [
            "FROM ADDRESS_TYPE a",
            "JOIN PERSON_ADDRESS p ON p.address_type_id = a.id",
            "JOIN PERSON pe ON pe.id = p.person_id",
        ]

    def test_preview_column_toggles_start_a_join(self, workspace):
        # WHEN
        workspace.toggle_preview_column("PERSON", "birth_date")

        # THEN
        person = workspace.join_builder.get_table("PERSON")
        assert person.selected_columns == ["id", "first_name", "last_name", "birth_date"]
        assert workspace.join_builder.is_building

    def test_groups_annotate_loaded_schema(self, workspace):
        # GIVEN
        groups_config = GroupsConfig(
            version="1.0",
            groups=[
                TableGroup(
                    id="people",
                    name="People",
                    tables=[TableGroupItem(name="ADDRESS_TYPE", description="Home, postal or billing")],
                )
            ],
        )

        # WHEN
        workspace.load_groups(groups_config)
        workspace.search_session.search(":table billing")

        # THEN
        assert workspace.search_session.results[0].display_name == "ADDRESS_TYPE"

    def test_clear_schema_resets_state(self, workspace):
        # GIVEN
        workspace.add_table_to_join("PERSON")
        workspace.search_session.search("person")

        # WHEN
        workspace.clear_schema()

        # THEN
        assert workspace.schema.tables == []
        assert workspace.search_session.results == []
        assert workspace.join_builder.is_building is False

    @pytest.mark.parametrize("sql, expected_copied", [("SELECT * FROM PERSON", True), ("", False)], ids=["SQL", "Empty"])
    def test_copy_sql(self, sql, expected_copied):
        # GIVEN
        clipboard = []

        # WHEN
        copied = SchemaWorkspace.copy_sql(sql, clipboard.append)

        # THEN
        assert copied == expected_copied
        assert clipboard == ([sql] if expected_copied else [])
