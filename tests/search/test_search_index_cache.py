from schemaglance.search.configuration import SearchConfiguration
from schemaglance.search.domain.enums import IndexInvalidationStrategy, SearchResultType
from schemaglance.search.repository.index_builder import build_searchable_items
from schemaglance.search.repository.index_cache import SearchIndexCache
from tests.helpers.builders import SchemaDataBuilder


def test_searchable_items_list_tables_before_columns():
    # GIVEN
    schema = SchemaDataBuilder("dbo").with_table("LAC_LEGAL_STATUS", ["status_id"]).build()

    # WHEN
    items = build_searchable_items(schema.tables, schema.columns)

    # THEN
    assert [(item.type, item.search_name, item.display_name) for item in items] == [
        (SearchResultType.TABLE, "lac legal status", "dbo.LAC_LEGAL_STATUS"),
        (SearchResultType.COLUMN, "status id", "LAC_LEGAL_STATUS.status_id"),
    ]
    assert items[1].table == "LAC_LEGAL_STATUS"


class TestSearchIndexCache:
    def test_index_is_reused_while_counts_are_unchanged(self):
        # GIVEN
        cache = SearchIndexCache(SearchConfiguration())
        schema = SchemaDataBuilder.default().with_table("PERSON", ["id"]).build()
        same_size_schema = SchemaDataBuilder.default().with_table("ANIMAL", ["species"]).build()

        # WHEN
        first_index = cache.get_index(schema.tables, schema.columns)
        second_index = cache.get_index(same_size_schema.tables, same_size_schema.columns)

        # THEN
        assert second_index is first_index
        assert [item.name for item in second_index.items] == ["PERSON", "id"]

    def test_index_is_rebuilt_when_counts_change(self):
        # GIVEN
        cache = SearchIndexCache(SearchConfiguration())
        schema = SchemaDataBuilder.default().with_table("PERSON", ["id"]).build()
        bigger_schema = SchemaDataBuilder.default().with_table("PERSON", ["id", "name"]).build()

        # WHEN
        first_index = cache.get_index(schema.tables, schema.columns)
        second_index = cache.get_index(bigger_schema.tables, bigger_schema.columns)

        # THEN
        assert second_index is not first_index
        assert len(second_index) == 3

    def test_content_hash_detects_same_size_changes(self):
        # GIVEN
        cache = SearchIndexCache(
            SearchConfiguration(index_invalidation_strategy=IndexInvalidationStrategy.CONTENT_HASH)
        )
        schema = SchemaDataBuilder.default().with_table("PERSON", ["id"]).build()
        same_size_schema = SchemaDataBuilder.default().with_table("ANIMAL", ["species"]).build()

        # WHEN
        first_index = cache.get_index(schema.tables, schema.columns)
        reused_index = cache.get_index(schema.tables, schema.columns)
        second_index = cache.get_index(same_size_schema.tables, same_size_schema.columns)

        # THEN
        assert reused_index is first_index
        assert [item.name for item in second_index.items] == ["ANIMAL", "species"]

    def test_invalidate_forces_rebuild(self):
        # GIVEN
        cache = SearchIndexCache(SearchConfiguration())
        schema = SchemaDataBuilder.default().with_table("PERSON", ["id"]).build()
        first_index = cache.get_index(schema.tables, schema.columns)

        # WHEN
        cache.invalidate()

        # THEN
        assert cache.get_index(schema.tables, schema.columns) is not first_index
