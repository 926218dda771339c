from upath import UPath

from schemaglance.commons.io_utils import parse_json_obj, read_json, save_json
from schemaglance.commons.logging_utils import get_logger
from schemaglance.schema.domain.model import SchemaData

logger = get_logger(__name__)


def load_schema_snapshot(path: UPath) -> SchemaData:
    schema = parse_json_obj(read_json(path), SchemaData)

    logger.info(
        f"Loaded schema snapshot with {len(schema.tables)} tables, {len(schema.columns)} columns, "
        f"{len(schema.foreign_keys)} foreign keys and {len(schema.primary_keys)} primary keys"
    )

    return schema


def save_schema_snapshot(schema: SchemaData, path: UPath) -> None:
    save_json(schema.model_dump(by_alias=True), path)
