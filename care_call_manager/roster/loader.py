"""
Roster CSV loading.

Reads the monthly roster export into plain dict records and drops rows that
should never be distributed: blank lines and the staff/coach accounts on
the exclusion list.
"""

import io
import logging
from pathlib import Path
from typing import Any, BinaryIO, Dict, Iterable, List, Mapping, Optional, Sequence, TextIO, Union

import pandas as pd

from ..config import DEFAULT_EXCLUDED_NAMES
from .fields import display_name

logger = logging.getLogger(__name__)

RosterSource = Union[str, Path, bytes, BinaryIO, TextIO]


class RosterError(ValueError):
    """Raised when a roster file cannot be used."""


def _has_data(row: Mapping[str, Any]) -> bool:
    return any(isinstance(value, str) and value.strip() != '' for value in row.values())


def is_excluded(row: Mapping[str, Any], excluded_names: Sequence[str]) -> bool:
    """Check whether the row's name overlaps any excluded name in either direction."""
    name = display_name(row).lower()
    return any(excluded in name or name in excluded for excluded in excluded_names)


def clean_roster(rows: Iterable[Mapping[str, Any]],
                 excluded_names: Optional[Sequence[str]] = None) -> List[Dict[str, str]]:
    """
    Filter parsed rows down to the records that get distributed.

    Args:
        rows: Parsed rows keyed by column name
        excluded_names: Lower-case names to leave out (defaults to the built-in list)

    Returns:
        List of records, in input order

    Raises:
        RosterError: if no rows survive the filtering
    """
    if excluded_names is None:
        excluded_names = DEFAULT_EXCLUDED_NAMES
    excluded_names = [name.lower() for name in excluded_names]

    records = []
    blank = 0
    excluded = 0
    for row in rows:
        if not _has_data(row):
            blank += 1
            continue
        if is_excluded(row, excluded_names):
            excluded += 1
            continue
        records.append(dict(row))

    logger.info("Roster cleaned: %d kept, %d blank, %d excluded", len(records), blank, excluded)

    if not records:
        raise RosterError("No valid data found in CSV. Please check your file format.")
    return records


def read_roster_csv(source: RosterSource) -> pd.DataFrame:
    """Parse a roster CSV with every cell kept as a string."""
    if isinstance(source, bytes):
        source = io.BytesIO(source)
    try:
        return pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding='utf-8'
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise RosterError(f"Error parsing CSV file: {e}") from e


def load_roster(source: RosterSource,
                filename: Optional[str] = None,
                excluded_names: Optional[Sequence[str]] = None) -> List[Dict[str, str]]:
    """
    Load and clean a roster CSV.

    Args:
        source: Path to the file, raw bytes, or an open stream
        filename: Original file name, checked for a ``.csv`` extension when
            ``source`` is not a path
        excluded_names: Names to leave out (defaults to the built-in list)

    Returns:
        List of records ready for distribution

    Raises:
        RosterError: on a non-CSV file name, a parse failure, or an empty result
    """
    if filename is None and isinstance(source, (str, Path)):
        filename = str(source)
    if filename is not None and not filename.lower().endswith('.csv'):
        raise RosterError("Please select a CSV file (.csv extension required)")

    df = read_roster_csv(source)
    logger.info("Parsed %d rows with columns %s", len(df), list(df.columns))

    return clean_roster(df.to_dict(orient='records'), excluded_names)
