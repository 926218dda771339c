from dataclasses import dataclass
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from schemaglance.search.domain.enums import SearchResultType, SearchScope


class SearchableItemBase(BaseModel):
    name: str
    search_name: str
    display_name: str
    description: str | None = None


class TableSearchableItem(SearchableItemBase):
    type: Literal[SearchResultType.TABLE] = SearchResultType.TABLE


class ColumnSearchableItem(SearchableItemBase):
    type: Literal[SearchResultType.COLUMN] = SearchResultType.COLUMN
    table: str


SearchableItem = Annotated[Union[TableSearchableItem, ColumnSearchableItem], Field(discriminator="type")]


class SearchResult(BaseModel):
    item: SearchableItem
    score: float

    @property
    def type(self) -> SearchResultType:
        return self.item.type

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def display_name(self) -> str:
        return self.item.display_name

    @property
    def owner_table_name(self) -> str:
        match self.item:
            case TableSearchableItem():
                return self.item.name
            case ColumnSearchableItem():
                return self.item.table or self.item.display_name.split(".")[0]
            case _:
                raise ValueError(f"Unsupported search result type: {self.item.type}")


@dataclass(frozen=True)
class ParsedQuery:
    scope: SearchScope | None
    term: str


@dataclass(frozen=True)
class IndexedField:
    text: str
    weight: float
    norm: float


@dataclass(frozen=True)
class IndexedItem:
    item: SearchableItemBase
    fields: tuple[IndexedField, ...]
