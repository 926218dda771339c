from __future__ import annotations

from dataclasses import dataclass, field

from upath import UPath

from schemaglance.search.configuration import (
    RecentItemsConfiguration,
    RecentItemsConfigurationDto,
    SearchConfiguration,
    SearchConfigurationDto,
)


@dataclass
class SchemaGlanceConfiguration:
    search: SearchConfiguration = field(default_factory=SearchConfiguration)
    recent_items: RecentItemsConfiguration = field(default_factory=RecentItemsConfiguration)
    debounce_ms: int = 50
    default_join_column_count: int = 3
    groups_file_path: UPath | None = None


@dataclass
class SchemaGlanceConfigurationDto:
    search: SearchConfigurationDto = field(default_factory=SearchConfigurationDto)
    recent_items: RecentItemsConfigurationDto = field(default_factory=RecentItemsConfigurationDto)
    debounce_ms: int = 50
    default_join_column_count: int = 3
    groups_file_path: str | None = None

    def to_domain(self) -> SchemaGlanceConfiguration:
        return SchemaGlanceConfiguration(
            search=self.search.to_domain(),
            recent_items=self.recent_items.to_domain(),
            debounce_ms=self.debounce_ms,
            default_join_column_count=self.default_join_column_count,
            groups_file_path=UPath(self.groups_file_path) if self.groups_file_path else None,
        )
