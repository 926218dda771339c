from __future__ import annotations

from dataclasses import dataclass

from upath import UPath

from schemaglance.search.domain.enums import IndexInvalidationStrategy


@dataclass
class SearchConfiguration:
    threshold: float = 0.5
    min_match_char_length: int = 2
    max_results: int = 30

    name_weight: float = 2.0
    description_weight: float = 1.0

    multi_word_base_score: float = 0.5
    exact_match_multiplier: float = 0.1
    prefix_match_multiplier: float = 0.5

    recency_base_multiplier: float = 0.7
    recency_window: int = 20

    index_invalidation_strategy: IndexInvalidationStrategy = IndexInvalidationStrategy.ITEM_COUNTS


@dataclass
class SearchConfigurationDto:
    threshold: float = 0.5
    min_match_char_length: int = 2
    max_results: int = 30
    name_weight: float = 2.0
    description_weight: float = 1.0
    multi_word_base_score: float = 0.5
    exact_match_multiplier: float = 0.1
    prefix_match_multiplier: float = 0.5
    recency_base_multiplier: float = 0.7
    recency_window: int = 20
    index_invalidation_strategy: str = IndexInvalidationStrategy.ITEM_COUNTS.value

    def to_domain(self) -> SearchConfiguration:
        if not 0 < self.threshold <= 1:
            raise ValueError(f"Search threshold must be in (0, 1], got {self.threshold}")
        if not 0 < self.recency_base_multiplier < 1:
            raise ValueError(f"Recency multiplier must be in (0, 1), got {self.recency_base_multiplier}")
        if self.recency_window < 1:
            raise ValueError("Recency window must hold at least one item")

        return SearchConfiguration(
            threshold=self.threshold,
            min_match_char_length=self.min_match_char_length,
            max_results=self.max_results,
            name_weight=self.name_weight,
            description_weight=self.description_weight,
            multi_word_base_score=self.multi_word_base_score,
            exact_match_multiplier=self.exact_match_multiplier,
            prefix_match_multiplier=self.prefix_match_multiplier,
            recency_base_multiplier=self.recency_base_multiplier,
            recency_window=self.recency_window,
            index_invalidation_strategy=IndexInvalidationStrategy.from_value(self.index_invalidation_strategy),
        )


@dataclass
class RecentItemsConfiguration:
    max_items: int = 20
    storage_path: UPath | None = None


@dataclass
class RecentItemsConfigurationDto:
    max_items: int = 20
    storage_path: str | None = None

    def to_domain(self) -> RecentItemsConfiguration:
        return RecentItemsConfiguration(
            max_items=self.max_items,
            storage_path=UPath(self.storage_path) if self.storage_path else None,
        )

