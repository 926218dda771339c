from collections.abc import Sequence

from schemaglance.commons.logging_utils import get_logger
from schemaglance.join_builder.domain.model import JoinCondition, JoinTable
from schemaglance.schema.domain.model import PrimaryKey
from schemaglance.search.domain.model import ColumnSearchableItem, SearchResult, TableSearchableItem

logger = get_logger(__name__)

SELECT_ITEM_SEPARATOR = ",\n    "


def generate_table_select(table_name: str) -> str:
    return f"SELECT * FROM {table_name}"


def generate_column_select(table_name: str, column_name: str) -> str:
    return f"SELECT {column_name}, * FROM {table_name}"


def generate_sql_from_result(result: SearchResult, primary_keys: Sequence[PrimaryKey] = ()) -> str:
    # primary keys are accepted for primary-key-aware projections but do not change the output yet
    match result.item:
        case TableSearchableItem():
            return generate_table_select(result.item.display_name)
        case ColumnSearchableItem():
            return generate_column_select(result.owner_table_name, result.item.name)
        case _:
            raise ValueError(f"Unsupported search result type: {result.item.type}")


def _find_alias(tables: Sequence[JoinTable], table_name: str) -> str:
    table = next((table for table in tables if table.has_name(table_name)), None)
    if table is None:
        logger.warning(f"Join condition references table {table_name} which is not part of the query")
        return table_name
    return table.alias


def _compile_join_clause(table: JoinTable, tables: Sequence[JoinTable]) -> str:
    condition: JoinCondition | None = table.join_condition
    if condition is None:
        return f"CROSS JOIN {table.name} {table.alias}"

    if table.has_name(condition.to_table):
        from_alias = _find_alias(tables, condition.from_table)
        on_clause = f"{table.alias}.{condition.to_column} = {from_alias}.{condition.from_column}"
    else:
        to_alias = _find_alias(tables, condition.to_table)
        on_clause = f"{table.alias}.{condition.from_column} = {to_alias}.{condition.to_column}"

    return f"JOIN {table.name} {table.alias} ON {on_clause}"


def _compile_select_items(tables: Sequence[JoinTable]) -> list[str]:
    select_items = []
    for table in tables:
        if table.use_star:
            select_items.append(f"{table.alias}.*")
        else:
            select_items.extend(f"{table.alias}.{column}" for column in table.selected_columns)

    return select_items or [f"{tables[0].alias}.*"]


def compile_join_query(tables: Sequence[JoinTable]) -> str:
    """
    Compiles the join graph into SQL text:

        SELECT
            p.id,
            pa.city
        FROM PERSON p
        JOIN PERSON_ADDRESS pa ON pa.person_id = p.id

    Never fails: a table without a join condition becomes a CROSS JOIN and a condition pointing at a table
    that is no longer in the graph uses the raw table name instead of an alias.
    """
    if len(tables) == 0:
        return ""

    anchor_table = tables[0]
    lines = [
        "SELECT",
        "    " + SELECT_ITEM_SEPARATOR.join(_compile_select_items(tables)),
        f"FROM {anchor_table.name} {anchor_table.alias}",
    ]
    lines.extend(_compile_join_clause(table, tables) for table in tables[1:])

    return "\n".join(lines)
