from dataclasses import replace

from schemaglance.commons.logging_utils import get_logger
from schemaglance.join_builder.alias_allocator import allocate_alias
from schemaglance.join_builder.domain.model import JoinCondition, JoinTable
from schemaglance.schema.domain.model import Column, ForeignKey
from schemaglance.schema.relationships import get_table_columns
from schemaglance.sql.sql_generator import compile_join_query

logger = get_logger(__name__)

DEFAULT_JOIN_COLUMN_COUNT = 3


class JoinQueryBuilder:
    """
    Ordered set of tables taking part in one multi-table query.

    The first table is the FROM anchor; every later table carries the join condition it was added with.
    Operations on a table that is not part of the graph are no-ops.
    """

    def __init__(self, default_column_count: int = DEFAULT_JOIN_COLUMN_COUNT) -> None:
        self._default_column_count = default_column_count
        self._tables: list[JoinTable] = []

    @staticmethod
    def _copy_table(table: JoinTable) -> JoinTable:
        return replace(table, selected_columns=list(table.selected_columns))

    @property
    def tables(self) -> list[JoinTable]:
        """Snapshots of the join tables; changing them does not affect the builder."""
        return [self._copy_table(table) for table in self._tables]

    @property
    def is_building(self) -> bool:
        return len(self._tables) > 0

    def _find_table(self, table_name: str) -> JoinTable | None:
        return next((table for table in self._tables if table.has_name(table_name)), None)

    def get_table(self, table_name: str) -> JoinTable | None:
        table = self._find_table(table_name)
        return self._copy_table(table) if table is not None else None

    def contains(self, table_name: str) -> bool:
        return self._find_table(table_name) is not None

    def _default_columns(self, table_name: str, all_columns: list[Column] | None) -> list[str]:
        if not all_columns:
            return []
        table_columns = get_table_columns(table_name, all_columns)
        return [column.name for column in table_columns[: self._default_column_count]]

    def add_table(
        self,
        table_name: str,
        foreign_key: ForeignKey | None = None,
        all_columns: list[Column] | None = None,
    ) -> None:
        if self.contains(table_name):
            logger.debug(f"Table {table_name} is already part of the join")
            return

        alias = allocate_alias(table_name, [table.alias for table in self._tables])
        self._tables.append(
            JoinTable(
                name=table_name,
                alias=alias,
                selected_columns=self._default_columns(table_name, all_columns),
                use_star=False,
                join_condition=JoinCondition.from_foreign_key(foreign_key) if foreign_key else None,
            )
        )

    def remove_table(self, table_name: str) -> None:
        # join conditions of the remaining tables are left untouched, even if they point at the removed table
        self._tables = [table for table in self._tables if not table.has_name(table_name)]

    def _find_or_log(self, table_name: str) -> JoinTable | None:
        table = self._find_table(table_name)
        if table is None:
            logger.debug(f"Table {table_name} is not part of the join, ignoring")
        return table

    def toggle_column(self, table_name: str, column_name: str) -> None:
        table = self._find_or_log(table_name)
        if table is None:
            return

        table.use_star = False
        if column_name in table.selected_columns:
            table.selected_columns.remove(column_name)
        else:
            table.selected_columns.append(column_name)

    def toggle_star(self, table_name: str) -> None:
        table = self._find_or_log(table_name)
        if table is None:
            return

        table.use_star = not table.use_star
        table.selected_columns = []

    def select_all_columns(self, table_name: str, columns: list[Column]) -> None:
        table = self._find_or_log(table_name)
        if table is None:
            return

        table.selected_columns = [column.name for column in get_table_columns(table_name, columns)]

    def clear_all_columns(self, table_name: str) -> None:
        table = self._find_or_log(table_name)
        if table is None:
            return

        table.selected_columns = []

    def clear(self) -> None:
        self._tables = []

    def get_generated_sql(self) -> str:
        return compile_join_query(self._tables)
