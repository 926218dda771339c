import json
from typing import Any, Type, TypeVar

import marshmallow_dataclass
import yaml
from pydantic import BaseModel, ValidationError
from upath import UPath

from schemaglance.commons.list_enum import ListConvertableEnum
from schemaglance.commons.logging_utils import get_logger

logger = get_logger(__name__)

TBaseModel = TypeVar("TBaseModel", bound=BaseModel)
TDataclass = TypeVar("TDataclass")


def read_yaml(filepath: UPath) -> dict:
    logger.info(f"Reading YAML file from {filepath}")

    with filepath.open(mode="r") as f:
        yaml_data = yaml.safe_load(f)

    return yaml_data


def save_configuration_to_yaml(filepath: UPath, config_dict: dict) -> None:
    def _serialize_data_for_yaml(data: Any) -> dict | str:
        if isinstance(data, dict):
            return {k: _serialize_data_for_yaml(v) for k, v in data.items()}
        elif isinstance(data, UPath):
            return str(data)
        elif isinstance(data, ListConvertableEnum):
            return data.value
        else:
            return data

    logger.info(f"Writing configuration file to {filepath}")

    serializable_data = _serialize_data_for_yaml(config_dict)

    filepath.parent.mkdir(parents=True, exist_ok=True)
    with filepath.open(mode="w") as f:
        yaml.safe_dump(serializable_data, f, default_flow_style=False, sort_keys=False)


def load_configuration_to_target_dataclass(
    path_to_config_yaml_file: UPath, target_dataclass: Type[TDataclass]
) -> TDataclass:
    config_yml = read_yaml(path_to_config_yaml_file)
    return marshmallow_dataclass.class_schema(target_dataclass)().load(config_yml)


def read_json(path: UPath) -> Any:
    logger.info(f"Reading JSON file from {path}")

    with path.open(mode="r", encoding="utf-8") as f:
        try:
            json_data = json.load(f)
        except json.JSONDecodeError as error:
            logger.error(f"Error parsing JSON file {path}: {error}")
            raise ValueError(f"JSON reading error in file: {path}") from error

    return json_data


def parse_json_obj(json_obj: Any, class_schema: Type[TBaseModel]) -> TBaseModel:
    try:
        parsed_obj = class_schema.model_validate(json_obj)
    except ValidationError as parsing_error:
        logger.error(parsing_error)
        raise ValueError(f"Error parsing json data into {class_schema.__name__}") from parsing_error

    return parsed_obj


def save_json(obj: Any, file_path: UPath) -> None:
    logger.info(f"Saving JSON to: {file_path}")

    file_path.parent.mkdir(parents=True, exist_ok=True)

    with file_path.open(mode="w", encoding="utf-8") as output_file:
        json.dump(obj, output_file, ensure_ascii=False, indent=2)
