"""Loading official month-length tables from JSON files.

The expected format maps Hijri years (as strings, since JSON keys must be)
to arrays of month lengths:

    {"1446": [30, 30, 30, 29, 30, 30, 29, 30, 29, 29, 29, 30],
     "1447": [29, 30, 30]}
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..errors import TableFormatError
from ..logging import get_logger
from .data import OFFICIAL_MONTH_LENGTHS
from .resolver import OfficialTable

logger = get_logger(__name__)

TABLE_ENV_VAR = "IRAN_HIJRI_TABLE"


def parse_table(raw: object) -> Dict[int, List[int]]:
    """Turn decoded JSON into a year -> month lengths mapping.

    Raises:
        TableFormatError: If the document is not an object of arrays keyed
            by integer years
    """
    if not isinstance(raw, dict):
        raise TableFormatError("Official table must be a JSON object")

    parsed: Dict[int, List[int]] = {}
    for key, months in raw.items():
        try:
            year = int(key)
        except ValueError as e:
            raise TableFormatError(f"Invalid Hijri year key: {key!r}") from e
        if not isinstance(months, list):
            raise TableFormatError(f"Months of Hijri year {year} must be an array")
        parsed[year] = months
    return parsed


def load_table(path: Union[str, Path]) -> OfficialTable:
    """Load an official table from a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        The loaded table

    Raises:
        TableFormatError: If the file is not valid JSON or the table is malformed
        OSError: If the file cannot be read
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise TableFormatError(f"Could not parse {path}: {e}") from e

    table = OfficialTable(parse_table(raw))
    logger.info(f"Loaded official table from {path}: {table.range()}")
    return table


def bundled_table() -> OfficialTable:
    """Return a table over the month lengths shipped with the package."""
    return OfficialTable(OFFICIAL_MONTH_LENGTHS)


def table_from_environment() -> Optional[OfficialTable]:
    """Load the table named by IRAN_HIJRI_TABLE, if the variable is set."""
    path = os.environ.get(TABLE_ENV_VAR)
    if not path:
        return None
    logger.debug(f"{TABLE_ENV_VAR} set, loading {path}")
    return load_table(path)
