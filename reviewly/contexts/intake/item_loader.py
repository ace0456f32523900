"""
Load SummaryItems from YAML or JSON files.

Accepted layouts:

    # bare list
    - id: item-1
      content: Completed the migration.
      source: self-entered
      timestamp: "2024-12-15"

    # or a mapping with an items list
    items:
      - id: item-1
        ...

Quote timestamps in YAML so they stay strings. Text such as "${spend}" is
kept literally; it is never treated as an interpolation.
"""

from pathlib import Path
from typing import Any, List, Union

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from reviewly.contexts.intake.exceptions import InvalidItemError
from reviewly.contexts.intake.item_data_structure import SummaryItem
from reviewly.contexts.intake.logger import _log_debug, _log_info


def items_from_data(data: Any) -> List[SummaryItem]:
    """
    Build SummaryItems from already-parsed data.

    Args:
        data: A list of item mappings, or a mapping with an "items" list

    Returns:
        Items in document order

    Raises:
        InvalidItemError: If the layout is wrong or any item is invalid
    """
    if isinstance(data, dict):
        if "items" not in data:
            raise InvalidItemError("Item document must contain an 'items' list at root level")
        data = data["items"]

    if not isinstance(data, list):
        raise InvalidItemError(f"Expected a list of items, got {type(data).__name__}")

    items = []
    for index, raw in enumerate(data):
        try:
            items.append(SummaryItem.from_dict(raw))
        except InvalidItemError as e:
            if e.item_id is not None:
                raise
            raise InvalidItemError(
                f"{e.message} (entry {index})", item_id=None, field=e.field
            ) from e
    return items


def load_items(path: Union[str, Path]) -> List[SummaryItem]:
    """
    Load SummaryItems from a YAML or JSON file.

    Args:
        path: Path to the item document

    Returns:
        Items in document order

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidItemError: If the document is malformed or any item is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Item file not found: {path}")

    try:
        data = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise InvalidItemError(f"Could not read item file {path}: {e}") from e

    items = items_from_data(data)
    _log_info(f"Loaded {len(items)} items from {path.name}")
    _log_debug(f"  Source: {path}")
    return items
