import json
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TreeConfig:
    values: list[int]
    search: int | None = None


def _is_int(value: object) -> bool:
    # json booleans come back as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def get_tree_config(json_data_from_file: dict) -> TreeConfig:
    if "values" not in json_data_from_file:
        raise ValueError("Tree config is missing `values`")

    values = json_data_from_file["values"]
    if not isinstance(values, list) or not all(_is_int(v) for v in values):
        raise ValueError(f"`values` must be a list of integers, got {values!r}")

    search = json_data_from_file.get("search")
    if search is not None and not _is_int(search):
        raise ValueError(f"`search` must be an integer, got {search!r}")

    return TreeConfig(values=values, search=search)


TREE_CONFIG_FILE = "tree_config.json"


def get_tree_config_from_file(config_path: Path | None = None) -> TreeConfig:
    if config_path is None:
        config_path = Path(__file__).parent / ".." / ".." / TREE_CONFIG_FILE
    with open(config_path, "r") as file:
        json_data_from_file = json.load(file)
    return get_tree_config(json_data_from_file)
