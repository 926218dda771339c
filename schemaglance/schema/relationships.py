from pydash import chain

from schemaglance.groups.domain.model import GroupsConfig, TableGroupItem
from schemaglance.schema.domain.model import Column, ForeignKey, PrimaryKey, SchemaData, Table


def _same_name(first: str, second: str) -> bool:
    return first.lower() == second.lower()


def get_table_columns(table_name: str, columns: list[Column]) -> list[Column]:
    return (
        chain(columns)
        .filter(lambda column: _same_name(column.table_name, table_name))
        .sort_by(lambda column: column.ordinal_position)
        .value()
    )


def get_outgoing_foreign_keys(table_name: str, foreign_keys: list[ForeignKey]) -> list[ForeignKey]:
    return [foreign_key for foreign_key in foreign_keys if _same_name(foreign_key.parent_table, table_name)]


def get_incoming_foreign_keys(table_name: str, foreign_keys: list[ForeignKey]) -> list[ForeignKey]:
    return [foreign_key for foreign_key in foreign_keys if _same_name(foreign_key.referenced_table, table_name)]


def is_primary_key(table_name: str, column_name: str, primary_keys: list[PrimaryKey]) -> bool:
    return any(
        _same_name(primary_key.table_name, table_name) and _same_name(primary_key.column_name, column_name)
        for primary_key in primary_keys
    )


def find_column_foreign_key(table_name: str, column_name: str, foreign_keys: list[ForeignKey]) -> ForeignKey | None:
    return next(
        (
            foreign_key
            for foreign_key in foreign_keys
            if _same_name(foreign_key.parent_table, table_name) and _same_name(foreign_key.parent_column, column_name)
        ),
        None,
    )


def _links_tables(foreign_key: ForeignKey, first_table: str, second_table: str) -> bool:
    return (
        _same_name(foreign_key.parent_table, first_table) and _same_name(foreign_key.referenced_table, second_table)
    ) or (_same_name(foreign_key.parent_table, second_table) and _same_name(foreign_key.referenced_table, first_table))


def find_join_foreign_key(
    table_name: str, joined_table_names: list[str], foreign_keys: list[ForeignKey]
) -> ForeignKey | None:
    """
    Finds a foreign key connecting `table_name` to a table already present in the join graph.
    Tables joined most recently are tried first; either direction of the edge is accepted.
    """
    for joined_table_name in reversed(joined_table_names):
        if _same_name(joined_table_name, table_name):
            continue

        foreign_key = next(
            (fk for fk in foreign_keys if _links_tables(fk, table_name, joined_table_name)),
            None,
        )
        if foreign_key is not None:
            return foreign_key

    return None


def _annotate_table(table: Table, group_item: TableGroupItem | None) -> Table:
    if group_item is None:
        return table

    return table.model_copy(
        update={
            "description": table.description or group_item.description,
            "tips": table.tips or group_item.tips,
        }
    )


def _annotate_column(column: Column, group_item: TableGroupItem | None) -> Column:
    if group_item is None or not group_item.columns or column.description:
        return column

    annotation = next(
        (annotation for name, annotation in group_item.columns.items() if _same_name(name, column.name)),
        None,
    )
    if annotation is None:
        return column

    return column.model_copy(update={"description": annotation.description})


def apply_group_annotations(schema: SchemaData, groups_config: GroupsConfig) -> SchemaData:
    # first group mentioning a table wins
    group_items: dict[str, TableGroupItem] = {}
    for group in groups_config.groups:
        for group_item in group.tables:
            group_items.setdefault(group_item.name.lower(), group_item)

    return schema.model_copy(
        update={
            "tables": [_annotate_table(table, group_items.get(table.name.lower())) for table in schema.tables],
            "columns": [
                _annotate_column(column, group_items.get(column.table_name.lower())) for column in schema.columns
            ],
        }
    )
