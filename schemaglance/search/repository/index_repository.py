import sys

from schemaglance.search.domain.model import IndexedItem, SearchableItem
from schemaglance.search.matchers.approximate_matcher import ApproximateMatcher
from schemaglance.search.repository.index_builder import SearchIndex

PERFECT_FIELD_SCORE = sys.float_info.epsilon


class IndexSearchRepository:
    def __init__(self, search_index: SearchIndex, matcher: ApproximateMatcher) -> None:
        self._search_index = search_index
        self._matcher = matcher

    def _score_item(self, term: str, indexed_item: IndexedItem) -> float | None:
        total_score = 1.0
        has_match = False

        for field in indexed_item.fields:
            field_score = self._matcher.score(term, field.text)
            if field_score is None:
                continue

            has_match = True
            total_score *= (field_score or PERFECT_FIELD_SCORE) ** (field.weight * field.norm)

        return total_score if has_match else None

    def search_single(self, term: str) -> list[tuple[SearchableItem, float]]:
        """Returns every matching item with its raw score (0 - perfect, 1 - worst), in index order."""
        lowered_term = term.lower()
        matches = []

        for indexed_item in self._search_index.indexed_items:
            score = self._score_item(lowered_term, indexed_item)
            if score is not None:
                matches.append((indexed_item.item, score))

        return matches
