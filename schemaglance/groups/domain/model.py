from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ColumnAnnotation(BaseModel):
    description: str


class TableGroupItem(BaseModel):
    name: StrictStr = Field(min_length=1)
    description: str | None = None
    tips: str | None = None
    columns: dict[str, ColumnAnnotation] | None = None


class TableGroup(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: StrictStr = Field(min_length=1)
    name: StrictStr = Field(min_length=1)
    description: str | None = None
    icon: str | None = None
    entry_point: str | None = Field(default=None, alias="entryPoint")
    tables: list[TableGroupItem]


class GroupsConfig(BaseModel):
    version: StrictStr
    database: str | None = None
    groups: list[TableGroup]
