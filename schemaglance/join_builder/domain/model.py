from __future__ import annotations

from dataclasses import dataclass, field

from schemaglance.schema.domain.model import ForeignKey


@dataclass(frozen=True)
class JoinCondition:
    from_table: str
    from_column: str
    to_table: str
    to_column: str

    @classmethod
    def from_foreign_key(cls, foreign_key: ForeignKey) -> JoinCondition:
        return cls(
            from_table=foreign_key.parent_table,
            from_column=foreign_key.parent_column,
            to_table=foreign_key.referenced_table,
            to_column=foreign_key.referenced_column,
        )


@dataclass
class JoinTable:
    name: str
    alias: str
    selected_columns: list[str] = field(default_factory=list)
    use_star: bool = False
    join_condition: JoinCondition | None = None

    def has_name(self, table_name: str) -> bool:
        return self.name.lower() == table_name.lower()
