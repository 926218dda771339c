from collections.abc import Callable
from dataclasses import dataclass

from schemaglance.commons.logging_utils import get_logger
from schemaglance.configuration import SchemaGlanceConfiguration
from schemaglance.groups.domain.model import GroupsConfig
from schemaglance.groups.groups_parser import get_default_groups_config
from schemaglance.join_builder.join_query_builder import JoinQueryBuilder
from schemaglance.schema.domain.model import Column, ForeignKey, SchemaData
from schemaglance.schema.relationships import (
    apply_group_annotations,
    find_column_foreign_key,
    find_join_foreign_key,
    get_incoming_foreign_keys,
    get_outgoing_foreign_keys,
    get_table_columns,
    is_primary_key,
)
from schemaglance.search.domain.model import SearchResult
from schemaglance.search.ranking import SchemaSearchEngine
from schemaglance.search.recent_items import RecentItemsStore
from schemaglance.search.search_session import SearchSession
from schemaglance.sql.sql_generator import generate_sql_from_result

logger = get_logger(__name__)


@dataclass
class ColumnPreview:
    column: Column
    is_primary_key: bool
    foreign_key: ForeignKey | None


@dataclass
class TablePreview:
    table_name: str
    columns: list[ColumnPreview]
    outgoing_foreign_keys: list[ForeignKey]
    incoming_foreign_keys: list[ForeignKey]
    sql: str
    in_join: bool


class SchemaWorkspace:
    """
    State owned by the application shell: schema snapshot, group annotations, search session, recent items
    and the join builder. The shell renders it and forwards user actions to it.
    """

    def __init__(
        self,
        configuration: SchemaGlanceConfiguration | None = None,
        recent_items_store: RecentItemsStore | None = None,
    ) -> None:
        self._configuration = configuration or SchemaGlanceConfiguration()

        self.recent_items = recent_items_store or RecentItemsStore(
            max_items=self._configuration.recent_items.max_items,
            storage_path=self._configuration.recent_items.storage_path,
        )
        self.search_session = SearchSession(
            engine=SchemaSearchEngine(self._configuration.search),
            recent_items_store=self.recent_items,
            debounce_seconds=self._configuration.debounce_ms / 1000,
        )
        self.join_builder = JoinQueryBuilder(default_column_count=self._configuration.default_join_column_count)

        self.groups: GroupsConfig = get_default_groups_config()
        self._raw_schema = SchemaData()
        self.schema = SchemaData()

    def load_schema(self, schema: SchemaData) -> None:
        self._raw_schema = schema
        self.schema = apply_group_annotations(schema, self.groups)
        self.search_session.set_schema(self.schema.tables, self.schema.columns)

        logger.info(f"Workspace loaded schema with {len(schema.tables)} tables and {len(schema.columns)} columns")

    def load_groups(self, groups: GroupsConfig) -> None:
        self.groups = groups
        self.load_schema(self._raw_schema)

    def clear_schema(self) -> None:
        self.search_session.clear()
        self.join_builder.clear()
        self.load_schema(SchemaData())

    def _preview_column(self, column: Column) -> ColumnPreview:
        return ColumnPreview(
            column=column,
            is_primary_key=column.is_primary_key
            or is_primary_key(column.table_name, column.name, self.schema.primary_keys),
            foreign_key=find_column_foreign_key(column.table_name, column.name, self.schema.foreign_keys),
        )

    def preview(self, result: SearchResult) -> TablePreview:
        table_name = result.owner_table_name

        return TablePreview(
            table_name=table_name,
            columns=[self._preview_column(column) for column in get_table_columns(table_name, self.schema.columns)],
            outgoing_foreign_keys=get_outgoing_foreign_keys(table_name, self.schema.foreign_keys),
            incoming_foreign_keys=get_incoming_foreign_keys(table_name, self.schema.foreign_keys),
            sql=generate_sql_from_result(result, self.schema.primary_keys),
            in_join=self.join_builder.contains(table_name),
        )

    def start_column_selection(self, table_name: str) -> None:
        self.join_builder.add_table(table_name, all_columns=self.schema.columns)

    def toggle_preview_column(self, table_name: str, column_name: str) -> None:
        self.start_column_selection(table_name)
        self.join_builder.toggle_column(table_name, column_name)

    def toggle_preview_star(self, table_name: str) -> None:
        self.start_column_selection(table_name)
        self.join_builder.toggle_star(table_name)

    def add_relationship_to_join(self, current_table_name: str, target_table_name: str, foreign_key: ForeignKey) -> None:
        if not self.join_builder.is_building:
            self.join_builder.add_table(current_table_name, all_columns=self.schema.columns)

        self.join_builder.add_table(target_table_name, foreign_key=foreign_key, all_columns=self.schema.columns)

    def add_table_to_join(self, table_name: str) -> None:
        joined_table_names = [table.name for table in self.join_builder.tables]
        foreign_key = find_join_foreign_key(table_name, joined_table_names, self.schema.foreign_keys)

        if self.join_builder.is_building and foreign_key is None:
            logger.info(f"No foreign key links {table_name} to the current join, it will be cross joined")

        self.join_builder.add_table(table_name, foreign_key=foreign_key, all_columns=self.schema.columns)

    @staticmethod
    def copy_sql(sql: str, clipboard_sink: Callable[[str], None]) -> bool:
        if not sql:
            return False

        clipboard_sink(sql)
        return True
