# config/utils.py
import os
import re
from pathlib import Path
from typing import Any

import chardet
import yaml
from loguru import logger
from pydantic import ValidationError

from .models import StoreConfig

CONFIG_SECTION = "profile_store"

_ENV_REFERENCE = re.compile(r"\$\{(\w+)\}")


def _expand_env(content: str) -> str:
    """Replace ``${VAR}`` with its environment value; unknown names stay as-is."""
    return _ENV_REFERENCE.sub(lambda m: os.getenv(m.group(1), m.group(0)), content)


def _decode_config(raw: bytes, config_path: str) -> str:
    """
    Decode config file bytes.

    Plugin configs are written as UTF-8 (a BOM is tolerated). Anything else is
    handed to chardet, which covers files saved by legacy editors.

    Raises:
        IOError: If no encoding could be determined.
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    encoding = chardet.detect(raw)["encoding"]
    if encoding:
        try:
            text = raw.decode(encoding)
            logger.warning(f"Config file {config_path} is not UTF-8, read it as {encoding}")
            return text
        except (LookupError, UnicodeDecodeError) as e:
            logger.debug(f"chardet guess {encoding} failed for {config_path}: {e}")

    raise IOError(f"Cannot determine the text encoding of {config_path}")


def read_yaml(config_path: str) -> Any:
    """
    Load a YAML config file after ``${ENV_VAR}`` expansion.

    Returns:
        The parsed document; an empty file gives ``{}``.

    Raises:
        FileNotFoundError: If the file does not exist.
        IOError: If its encoding cannot be determined.
        yaml.YAMLError: If it is not valid YAML.
    """
    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    content = _expand_env(_decode_config(path.read_bytes(), config_path))

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        logger.critical(f"Error parsing YAML file {config_path}: {e}")
        raise
    return {} if data is None else data


def _format_validation_error(error: ValidationError) -> str:
    """
    Format a ValidationError as one readable line per failing field.
    """
    error_messages = []

    for err in error.errors():
        location = " -> ".join(str(loc) for loc in err["loc"]) or CONFIG_SECTION
        error_type = err["type"]
        msg = err["msg"]
        input_value = err.get("input", "N/A")

        if error_type == "int_type" or error_type == "int_parsing":
            error_messages.append(
                f"  - '{location}': an integer is required. Current value: {input_value}"
            )
        elif error_type == "bool_type" or error_type == "bool_parsing":
            error_messages.append(
                f"  - '{location}': a boolean (true/false) is required. "
                f"Current value: {input_value}"
            )
        elif "greater_than" in error_type or "less_than" in error_type:
            error_messages.append(f"  - '{location}': value out of range. {msg}")
        else:
            error_messages.append(f"  - '{location}': {msg} (type: {error_type})")

    return "\n".join(error_messages)


def validate_config(config_data: Any) -> StoreConfig:
    """
    Validate settings against the StoreConfig model.

    The settings may sit at the top level or under a ``profile_store`` key.

    Raises:
        ValidationError: If validation fails. A readable report is logged first.
    """
    if isinstance(config_data, dict) and isinstance(config_data.get(CONFIG_SECTION), dict):
        config_data = config_data[CONFIG_SECTION]

    try:
        return StoreConfig.model_validate(config_data)
    except ValidationError as e:
        formatted_errors = _format_validation_error(e)
        logger.critical(
            "\n"
            + "=" * 60
            + "\nProfile store configuration is invalid\n"
            + "=" * 60
            + f"\n{formatted_errors}\n"
            + "=" * 60
        )
        if isinstance(config_data, dict):
            logger.debug(f"Configuration data keys: {list(config_data.keys())}")
        else:
            logger.debug(f"Configuration data is a {type(config_data).__name__}, not a mapping")
        raise e


def load_config(config_path: str) -> StoreConfig:
    """Read and validate a YAML configuration file."""
    return validate_config(read_yaml(config_path))
