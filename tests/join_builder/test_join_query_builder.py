import pytest

from schemaglance.join_builder.domain.model import JoinCondition
from schemaglance.join_builder.join_query_builder import JoinQueryBuilder
from schemaglance.schema.domain.model import Column
from tests.helpers.builders import person_schema


@pytest.fixture
def schema():
    return person_schema()


@pytest.fixture
def builder(schema):
    join_query_builder = JoinQueryBuilder()
    join_query_builder.add_table("PERSON", all_columns=schema.columns)
    join_query_builder.add_table("PERSON_ADDRESS", foreign_key=schema.foreign_keys[0], all_columns=schema.columns)
    return join_query_builder


class TestJoinQueryBuilder:
    def test_new_builder_is_empty(self):
        # WHEN
        builder = JoinQueryBuilder()

        # THEN
        assert builder.is_building is False
        assert builder.tables == []
        assert builder.get_generated_sql() == ""

    def test_added_tables_get_defaults(self, builder):
        # WHEN
        anchor_table, joined_table = builder.tables

        # THEN
        assert builder.is_building
        assert (anchor_table.name, anchor_table.alias, anchor_table.join_condition) == ("PERSON", "p", None)
        assert anchor_table.selected_columns == ["id", "first_name", "last_name"]
        assert anchor_table.use_star is False
        assert joined_table.alias == "pe"
        assert joined_table.join_condition == JoinCondition(
            from_table="PERSON_ADDRESS", from_column="person_id", to_table="PERSON", to_column="id"
        )

    def test_default_columns_follow_ordinal_position(self):
        # GIVEN
        columns = [
            Column(table_name="EVENT", name=name, ordinal_position=position)
            for name, position in [("happened_at", 4), ("id", 1), ("payload", 3), ("kind", 2)]
        ]
        builder = JoinQueryBuilder(default_column_count=2)

        # WHEN
        builder.add_table("EVENT", all_columns=columns)

        # THEN
        assert builder.get_table("event").selected_columns == ["id", "kind"]

    def test_table_without_column_metadata_selects_nothing(self):
        # GIVEN
        builder = JoinQueryBuilder()

        # WHEN
        builder.add_table("PERSON")

        # THEN
        assert builder.get_table("PERSON").selected_columns == []

    def test_adding_present_table_is_ignored(self, builder, schema):
        # WHEN
        builder.add_table("person", all_columns=schema.columns)

        # THEN
        assert [table.name for table in builder.tables] == ["PERSON", "PERSON_ADDRESS"]

    def test_star_and_columns_are_exclusive(self, builder):
        # WHEN
        builder.toggle_star("PERSON")

        # THEN
        assert builder.get_table("PERSON").use_star is True
        assert builder.get_table("PERSON").selected_columns == []

        # WHEN
        builder.toggle_column("PERSON", "birth_date")

        # THEN
        assert builder.get_table("PERSON").use_star is False
        assert builder.get_table("PERSON").selected_columns == ["birth_date"]

    def test_toggle_column_flips_membership(self, builder):
        # WHEN
        builder.toggle_column("PERSON", "first_name")
        builder.toggle_column("PERSON", "birth_date")

        # THEN
        assert builder.get_table("PERSON").selected_columns == ["id", "last_name", "birth_date"]

    def test_select_and_clear_all_columns_keep_star_flag(self, builder, schema):
        # GIVEN
        builder.toggle_star("PERSON_ADDRESS")

        # WHEN
        builder.select_all_columns("PERSON_ADDRESS", schema.columns)

        # THEN
        table = builder.get_table("PERSON_ADDRESS")
        assert table.selected_columns == ["id", "person_id", "address_type_id", "city"]
        assert table.use_star is True

        # WHEN
        builder.clear_all_columns("PERSON_ADDRESS")

        # THEN
        table = builder.get_table("PERSON_ADDRESS")
        assert table.selected_columns == []
        assert table.use_star is True

    def test_operations_on_unknown_table_are_ignored(self, builder, schema):
        # GIVEN
        tables_before = [(table.name, list(table.selected_columns), table.use_star) for table in builder.tables]

        # WHEN
        builder.remove_table("ADDRESS_TYPE")
        builder.toggle_column("ADDRESS_TYPE", "label")
        builder.toggle_star("ADDRESS_TYPE")
        builder.select_all_columns("ADDRESS_TYPE", schema.columns)
        builder.clear_all_columns("ADDRESS_TYPE")

        # THEN
        assert [(table.name, table.selected_columns, table.use_star) for table in builder.tables] == tables_before

    def test_removing_last_table_stops_building(self, builder):
        # WHEN
        builder.remove_table("person_address")
        builder.remove_table("PERSON")

        # THEN
        assert builder.is_building is False

    def test_clear_stops_building(self, builder):
        # WHEN
        builder.clear()

        # THEN
        assert builder.is_building is False
        assert builder.get_generated_sql() == ""

    def test_returned_tables_are_snapshots(self, builder):
        # WHEN
        builder.tables.clear()
        builder.tables[0].selected_columns.append("birth_date")
        builder.get_table("PERSON").use_star = True

        # THEN
        assert len(builder.tables) == 2
        assert builder.get_table("PERSON").selected_columns == ["id", "first_name", "last_name"]
        assert builder.get_table("PERSON").use_star is False
