import json

import pytest
from upath import UPath

from schemaglance.schema.schema_loader import load_schema_snapshot, save_schema_snapshot
from tests.helpers.builders import person_schema

SCHEMA_SNAPSHOT = {
    "tables": [{"schema": "dbo", "name": "PERSON", "description": "Core client record"}],
    "columns": [
        {
            "tableSchema": "dbo",
            "tableName": "PERSON",
            "name": "id",
            "dataType": "int",
            "isNullable": False,
            "isPrimaryKey": True,
            "isForeignKey": False,
            "ordinalPosition": 1,
        }
    ],
    "foreignKeys": [],
    "primaryKeys": [{"tableName": "PERSON", "columnName": "id"}],
}


def test_schema_snapshot_is_loaded_from_camel_case_json(tmp_path):
    # GIVEN
    path = UPath(tmp_path).joinpath("schema_snapshot.json")
    path.write_text(json.dumps(SCHEMA_SNAPSHOT), encoding="utf-8")

    # WHEN
    schema = load_schema_snapshot(path)

    # THEN
    assert schema.tables[0].display_name == "dbo.PERSON"
    assert schema.columns[0].is_primary_key
    assert schema.columns[0].display_name == "PERSON.id"
    assert schema.primary_keys[0].column_name == "id"


def test_saved_schema_snapshot_can_be_loaded(tmp_path):
    # GIVEN
    path = UPath(tmp_path).joinpath("cache", "schema_snapshot.json")
    schema = person_schema()

    # WHEN
    save_schema_snapshot(schema, path)

    # THEN
    assert "foreignKeys" in json.loads(path.read_text(encoding="utf-8"))
    assert load_schema_snapshot(path) == schema


@pytest.mark.parametrize(
    "content",
    ["{not json", json.dumps({"tables": [{"schema": "dbo"}]})],
    ids=["Malformed JSON", "Table without name"],
)
def test_invalid_schema_snapshot_is_rejected(tmp_path, content):
    # GIVEN
    path = UPath(tmp_path).joinpath("schema_snapshot.json")
    path.write_text(content, encoding="utf-8")

    # WHEN / THEN
    with pytest.raises(ValueError):
        load_schema_snapshot(path)
