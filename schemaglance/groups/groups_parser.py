import json
from typing import Any

from pydantic import ValidationError
from upath import UPath

from schemaglance.commons.io_utils import save_json
from schemaglance.commons.logging_utils import get_logger
from schemaglance.groups.domain.model import GroupsConfig, TableGroup, TableGroupItem

logger = get_logger(__name__)

DEFAULT_GROUPS_CONFIG_VERSION = "1.0"


class GroupsConfigError(ValueError):
    pass


def _describe_validation_error(error: ValidationError) -> str:
    first_error = error.errors()[0]
    location = ".".join(str(part) for part in first_error["loc"]) or "<root>"
    return f"Invalid groups config at '{location}': {first_error['msg']}"


def validate_groups_config(raw_config: Any) -> GroupsConfig:
    try:
        return GroupsConfig.model_validate(raw_config)
    except ValidationError as error:
        logger.error(error)
        raise GroupsConfigError(_describe_validation_error(error)) from error


def parse_groups_config(json_text: str) -> GroupsConfig:
    """
    Parses the groups sidecar file. Rejects configs whose `version` is not a string, whose `groups` is not a list,
    groups without `id`/`name`/`tables`, and table entries without `name`.
    """
    try:
        raw_config = json.loads(json_text)
    except json.JSONDecodeError as error:
        raise GroupsConfigError(f"Invalid JSON format: {error.msg}") from error

    return validate_groups_config(raw_config)


def get_default_groups_config() -> GroupsConfig:
    return GroupsConfig(version=DEFAULT_GROUPS_CONFIG_VERSION, groups=[])


def load_groups_config(path: UPath) -> GroupsConfig:
    if not path.exists():
        logger.info(f"No groups config found at {path}, using the default one")
        return get_default_groups_config()

    logger.info(f"Reading groups config from {path}")
    return parse_groups_config(path.read_text(encoding="utf-8"))


def save_groups_config(config: GroupsConfig, path: UPath) -> None:
    save_json(config.model_dump(by_alias=True, exclude_none=True), path)


def get_example_groups_config() -> GroupsConfig:
    return GroupsConfig(
        version=DEFAULT_GROUPS_CONFIG_VERSION,
        database="Example",
        groups=[
            TableGroup(
                id="person-management",
                name="Person Management",
                description="Core person/client records and related data",
                icon="👤",
                entry_point="PERSON",
                tables=[
                    TableGroupItem(
                        name="PERSON",
                        description="Core client record - one row per person",
                        tips="Always check status_id before assuming active",
                    ),
                    TableGroupItem(name="PERSON_ADDRESS", description="Address history for persons"),
                    TableGroupItem(name="PERSON_CONTACT", description="Phone numbers, emails, etc."),
                ],
            ),
            TableGroup(
                id="care-packages",
                name="Care Packages",
                description="Service packages and allocations",
                icon="📦",
                entry_point="CARE_PACKAGE",
                tables=[
                    TableGroupItem(name="CARE_PACKAGE", description="Main care package record"),
                    TableGroupItem(name="CARE_PACKAGE_ITEM", description="Individual services in a package"),
                ],
            ),
        ],
    )
