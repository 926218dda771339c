from __future__ import annotations

import math
from dataclasses import dataclass

from schemaglance.schema.domain.model import Column, Table
from schemaglance.search.configuration import SearchConfiguration
from schemaglance.search.domain.model import (
    ColumnSearchableItem,
    IndexedField,
    IndexedItem,
    SearchableItem,
    TableSearchableItem,
)


def create_searchable_name(name: str) -> str:
    return name.replace("_", " ").lower()


def build_searchable_items(tables: list[Table], columns: list[Column]) -> list[SearchableItem]:
    table_items = [
        TableSearchableItem(
            name=table.name,
            search_name=create_searchable_name(table.name),
            display_name=table.display_name,
            description=table.description,
        )
        for table in tables
    ]
    column_items = [
        ColumnSearchableItem(
            name=column.name,
            search_name=create_searchable_name(column.name),
            display_name=column.display_name,
            description=column.description,
            table=column.table_name,
        )
        for column in columns
    ]

    return table_items + column_items


def _field_norm(text: str) -> float:
    # shorter fields weigh more, as in Fuse.js field-length normalisation
    return round(1 / math.sqrt(max(len(text.split()), 1)), 3)


@dataclass(frozen=True)
class SearchIndex:
    indexed_items: tuple[IndexedItem, ...]

    @property
    def items(self) -> list[SearchableItem]:
        return [indexed_item.item for indexed_item in self.indexed_items]

    def __len__(self) -> int:
        return len(self.indexed_items)


class IndexBuilder:
    def __init__(self, configuration: SearchConfiguration) -> None:
        total_weight = 2 * configuration.name_weight + configuration.description_weight
        self._name_weight = configuration.name_weight / total_weight
        self._description_weight = configuration.description_weight / total_weight
        self._indexed_items: list[IndexedItem] = []

    def _index_field(self, text: str | None, weight: float) -> IndexedField | None:
        if not text:
            return None

        lowered_text = text.lower()
        return IndexedField(text=lowered_text, weight=weight, norm=_field_norm(lowered_text))

    def add_items(self, items: list[SearchableItem]) -> IndexBuilder:
        for item in items:
            fields = (
                self._index_field(item.name, self._name_weight),
                self._index_field(item.search_name, self._name_weight),
                self._index_field(item.description, self._description_weight),
            )
            self._indexed_items.append(
                IndexedItem(item=item, fields=tuple(field for field in fields if field is not None))
            )

        return self

    def build(self) -> SearchIndex:
        return SearchIndex(indexed_items=tuple(self._indexed_items))
