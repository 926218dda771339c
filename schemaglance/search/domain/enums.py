from enum import StrEnum

from schemaglance.commons.list_enum import ListConvertableEnum


class SearchResultType(StrEnum, ListConvertableEnum):
    TABLE = "table"
    COLUMN = "column"


class SearchScope(StrEnum, ListConvertableEnum):
    TABLE = "table"
    COLUMN = "column"


class IndexInvalidationStrategy(StrEnum, ListConvertableEnum):
    ITEM_COUNTS = "ITEM_COUNTS"
    CONTENT_HASH = "CONTENT_HASH"
