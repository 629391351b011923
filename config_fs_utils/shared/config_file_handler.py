"""
config_file_handler.py - Read the mapping files the CLI takes as input.

Two formats, picked by extension:
  - JSON: .json
  - YAML: .yaml / .yml (PyYAML safe_load)

Both must hold a top-level mapping of string -> string, e.g. a paths object
({"configDir": "~/.config/mutt"}) or a file manifest ({"~/.muttrc": "set realname=..."}).
"""
import json
import os

import yaml

from config_fs_utils.shared.configuration_paths import expand_home

YAML_EXTENSIONS = (".yaml", ".yml")


def _load(file_path):
    lowered = file_path.lower()
    if lowered.endswith(YAML_EXTENSIONS):
        with open(file_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    if lowered.endswith(".json"):
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    raise ValueError(f"Unsupported file type (expected .json, .yaml or .yml): {file_path}")


def read_mapping(file_path):
    """
    Read a JSON or YAML file holding a {str: str} mapping.
    Missing files raise FileNotFoundError; anything that isn't a flat string mapping raises ValueError.
    """
    file_path = expand_home(file_path)
    try:
        data = _load(file_path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Could not parse {file_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {file_path}, got {type(data).__name__}")
    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValueError(f"Entry {key!r} in {os.path.basename(file_path)} must map a string to a string")
    return data
