import argparse

from upath import UPath

from schemaglance.commons.io_utils import load_configuration_to_target_dataclass
from schemaglance.commons.logging_utils import get_logger
from schemaglance.configuration import SchemaGlanceConfigurationDto
from schemaglance.groups.groups_parser import load_groups_config
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
        "--query",
        type=str,
        help="Search query, optionally prefixed with ':col ' or ':table '",
        required=True,
    )
    argument_parser.add_argument(
        "--path-to-config-yaml",
        type=UPath,
        help="Path to the configuration YAML file",
        default=DEFAULT_CONFIG_PATH,
    )
    argument_parser.add_argument(
        "--select",
        action=argparse.BooleanOptionalAction,
        help="If set, the top result is recorded in the recent items",
    )
    args = argument_parser.parse_args()

    configuration_dto: SchemaGlanceConfigurationDto = load_configuration_to_target_dataclass(
        args.path_to_config_yaml, target_dataclass=SchemaGlanceConfigurationDto
    )
    configuration = configuration_dto.to_domain()

    workspace = SchemaWorkspace(configuration)
    workspace.recent_items.load()
    if configuration.groups_file_path is not None:
        workspace.load_groups(load_groups_config(configuration.groups_file_path))
    workspace.load_schema(load_schema_snapshot(args.schema_path))

    workspace.search_session.search(args.query)
    results = workspace.search_session.results

    if len(results) == 0:
        logger.info(f"No results for '{args.query}'")
    for position, result in enumerate(results, start=1):
        logger.info(f"{position:>2}. [{result.type}] {result.display_name} (score: {result.score:.6f})")

    if len(results) > 0:
        top_result = workspace.search_session.confirm_selection() if args.select else results[0]
        print(workspace.preview(top_result).sql)
