from pydantic import BaseModel, ConfigDict, Field


class SchemaBaseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Table(SchemaBaseModel):
    schema_name: str = Field(default="", alias="schema")
    name: str
    description: str | None = None
    tips: str | None = None

    @property
    def display_name(self) -> str:
        return f"{self.schema_name}.{self.name}" if self.schema_name else self.name


class Column(SchemaBaseModel):
    table_schema: str = Field(default="", alias="tableSchema")
    table_name: str = Field(alias="tableName")
    name: str
    data_type: str = Field(default="", alias="dataType")
    is_nullable: bool = Field(default=True, alias="isNullable")
    is_primary_key: bool = Field(default=False, alias="isPrimaryKey")
    is_foreign_key: bool = Field(default=False, alias="isForeignKey")
    ordinal_position: int = Field(default=0, alias="ordinalPosition")
    description: str | None = None

    @property
    def display_name(self) -> str:
        return f"{self.table_name}.{self.name}"


class ForeignKey(SchemaBaseModel):
    constraint_name: str = Field(alias="constraintName")
    parent_table: str = Field(alias="parentTable")
    parent_column: str = Field(alias="parentColumn")
    referenced_table: str = Field(alias="referencedTable")
    referenced_column: str = Field(alias="referencedColumn")


class PrimaryKey(SchemaBaseModel):
    table_name: str = Field(alias="tableName")
    column_name: str = Field(alias="columnName")


class SchemaData(SchemaBaseModel):
    tables: list[Table] = Field(default_factory=list)
    columns: list[Column] = Field(default_factory=list)
    foreign_keys: list[ForeignKey] = Field(default_factory=list, alias="foreignKeys")
    primary_keys: list[PrimaryKey] = Field(default_factory=list, alias="primaryKeys")
