import argparse

from upath import UPath

from schemaglance.commons.io_utils import load_configuration_to_target_dataclass
from schemaglance.commons.logging_utils import get_logger
from schemaglance.configuration import SchemaGlanceConfigurationDto
from schemaglance.schema.schema_loader import load_schema_snapshot
from schemaglance.settings import DEFAULT_CONFIG_PATH, SCHEMA_SNAPSHOT_PATH
from schemaglance.workspace import SchemaWorkspace

logger = get_logger(__name__)


if __name__ == "__main__":
    argument_parser = argparse.ArgumentParser()
    argument_parser.add_argument(
        "--schema-path",
        type=UPath,
        help="Path to the JSON schema snapshot with tables, columns, foreignKeys and primaryKeys",
        default=SCHEMA_SNAPSHOT_PATH,
    )
    argument_parser.add_argument(
        "--tables",
        nargs="+",
        help="Tables to join, the first one is used in the FROM clause",
        required=True,
    )
    argument_parser.add_argument(
        "--star",
        nargs="*",
        default=[],
        help="Tables projected with <alias>.* instead of their default columns",
    )
    argument_parser.add_argument(
        "--path-to-config-yaml",
        type=UPath,
        help="Path to the configuration YAML file",
        default=DEFAULT_CONFIG_PATH,
    )
    args = argument_parser.parse_args()

    configuration_dto: SchemaGlanceConfigurationDto = load_configuration_to_target_dataclass(
        args.path_to_config_yaml, target_dataclass=SchemaGlanceConfigurationDto
    )

    workspace = SchemaWorkspace(configuration_dto.to_domain())
    workspace.load_schema(load_schema_snapshot(args.schema_path))

    for table_name in args.tables:
        workspace.add_table_to_join(table_name)
    for table_name in args.star:
        workspace.toggle_preview_star(table_name)

    for join_table in workspace.join_builder.tables:
        logger.info(f"{join_table.name} AS {join_table.alias}: {join_table.join_condition}")

    print(workspace.join_builder.get_generated_sql())
