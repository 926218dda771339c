from collections.abc import Sequence

from pydash import chain

from schemaglance.commons.logging_utils import get_logger
from schemaglance.schema.domain.model import Column, Table
from schemaglance.search.configuration import SearchConfiguration
from schemaglance.search.domain.enums import SearchResultType, SearchScope
from schemaglance.search.domain.model import SearchableItem, SearchResult
from schemaglance.search.matchers.approximate_matcher import ApproximateMatcher
from schemaglance.search.query_parser import parse_search_query
from schemaglance.search.repository.index_cache import SearchIndexCache
from schemaglance.search.repository.index_repository import IndexSearchRepository

logger = get_logger(__name__)


class SchemaSearchEngine:
    def __init__(self, configuration: SearchConfiguration | None = None) -> None:
        self._configuration = configuration or SearchConfiguration()
        self._matcher = ApproximateMatcher(
            threshold=self._configuration.threshold,
            min_match_char_length=self._configuration.min_match_char_length,
        )
        self._index_cache = SearchIndexCache(self._configuration)

    @property
    def configuration(self) -> SearchConfiguration:
        return self._configuration

    def invalidate_index(self) -> None:
        self._index_cache.invalidate()

    @staticmethod
    def _is_in_scope(item: SearchableItem, scope: SearchScope | None) -> bool:
        match scope:
            case SearchScope.COLUMN:
                return item.type == SearchResultType.COLUMN
            case SearchScope.TABLE:
                return item.type == SearchResultType.TABLE
            case _:
                return True

    @staticmethod
    def _matches_all_words(name: str, search_words: list[str]) -> bool:
        searchable_name = name.lower().replace("_", " ")
        return all(word in searchable_name for word in search_words)

    def _recency_multiplier(self, recent_index: int) -> float:
        # most recent item gets the full boost, which fades linearly towards 1.0 over the recency window
        base_multiplier = self._configuration.recency_base_multiplier
        fade = min(recent_index, self._configuration.recency_window - 1) / self._configuration.recency_window
        return base_multiplier + (1 - base_multiplier) * fade

    def _apply_recency_boost(self, item: SearchableItem, score: float, recent_items: Sequence[str]) -> float:
        if item.display_name not in recent_items:
            return score
        return score * self._recency_multiplier(recent_items.index(item.display_name))

    def _apply_name_boosts(self, item: SearchableItem, score: float, term: str) -> float:
        item_name = item.name.lower()
        if item_name == term:
            score *= self._configuration.exact_match_multiplier
        if item_name.startswith(term):
            score *= self._configuration.prefix_match_multiplier
        return score

    def _search_multiple_words(
        self, items: list[SearchableItem], search_words: list[str]
    ) -> list[tuple[SearchableItem, float]]:
        return [
            (item, self._configuration.multi_word_base_score)
            for item in items
            if self._matches_all_words(item.name, search_words)
        ]

    def _search_single_word(
        self, tables: list[Table], columns: list[Column], term: str
    ) -> list[tuple[SearchableItem, float]]:
        search_index = self._index_cache.get_index(tables, columns)
        matches = IndexSearchRepository(search_index=search_index, matcher=self._matcher).search_single(term)
        return [(item, self._apply_name_boosts(item, score, term)) for item, score in matches]

    def search(
        self,
        query: str,
        tables: list[Table],
        columns: list[Column],
        recent_items: Sequence[str] = (),
    ) -> list[SearchResult]:
        parsed_query = parse_search_query(query)
        if len(parsed_query.term) < 1:
            return []

        lowered_term = parsed_query.term.lower()
        search_words = lowered_term.split()

        if len(search_words) > 1:
            all_items = self._index_cache.get_index(tables, columns).items
            matches = self._search_multiple_words(all_items, search_words)
        else:
            matches = self._search_single_word(tables, columns, lowered_term)

        results = (
            chain(matches)
            .filter(lambda item_and_score: self._is_in_scope(item_and_score[0], parsed_query.scope))
            .map(
                lambda item_and_score: SearchResult(
                    item=item_and_score[0],
                    score=self._apply_recency_boost(item_and_score[0], item_and_score[1], recent_items),
                )
            )
            .sort_by(lambda result: result.score)
            .take(self._configuration.max_results)
            .value()
        )

        logger.debug(f"Query '{query}' (scope: {parsed_query.scope}) returned {len(results)} results")

        return results
