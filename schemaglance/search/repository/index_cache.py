import hashlib

from schemaglance.commons.logging_utils import get_logger
from schemaglance.schema.domain.model import Column, Table
from schemaglance.search.configuration import SearchConfiguration
from schemaglance.search.domain.enums import IndexInvalidationStrategy
from schemaglance.search.repository.index_builder import IndexBuilder, SearchIndex, build_searchable_items

logger = get_logger(__name__)


class SearchIndexCache:
    """
    Keeps the last built search index together with a signature of the corpus it was built from.

    With `ITEM_COUNTS` the signature is only `(len(tables), len(columns))`: a re-indexed schema with the same
    number of tables and columns but different content keeps serving the stale index. Table and column sets are
    replaced wholesale on re-index, which makes the heuristic acceptable; `CONTENT_HASH` trades a full pass over
    the names for exact invalidation.
    """

    def __init__(self, configuration: SearchConfiguration) -> None:
        self._configuration = configuration
        self._cached_index: SearchIndex | None = None
        self._cache_key: str | None = None

    def _compute_cache_key(self, tables: list[Table], columns: list[Column]) -> str:
        match self._configuration.index_invalidation_strategy:
            case IndexInvalidationStrategy.ITEM_COUNTS:
                return f"{len(tables)}-{len(columns)}"
            case IndexInvalidationStrategy.CONTENT_HASH:
                content_hash = hashlib.sha1()
                for name in sorted(table.display_name for table in tables):
                    content_hash.update(f"t:{name}\n".encode("utf-8"))
                for name in sorted(column.display_name for column in columns):
                    content_hash.update(f"c:{name}\n".encode("utf-8"))
                return content_hash.hexdigest()
            case _:
                raise ValueError(
                    f"No cache key defined for {self._configuration.index_invalidation_strategy}"
                )

    def get_index(self, tables: list[Table], columns: list[Column]) -> SearchIndex:
        cache_key = self._compute_cache_key(tables, columns)

        if self._cached_index is not None and cache_key == self._cache_key:
            return self._cached_index

        logger.info(f"Building search index for {len(tables)} tables and {len(columns)} columns")

        self._cached_index = (
            IndexBuilder(configuration=self._configuration)
            .add_items(build_searchable_items(tables, columns))
            .build()
        )
        self._cache_key = cache_key

        return self._cached_index

    def invalidate(self) -> None:
        self._cached_index = None
        self._cache_key = None
