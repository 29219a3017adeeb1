"""
Runtime configuration for the care call manager.

Values come from environment variables (optionally loaded from a ``.env``
file). Everything has a default so the package works unconfigured.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from dotenv import load_dotenv


MONTHS: Tuple[str, ...] = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
)

DEFAULT_STAFF: Tuple[str, ...] = ('Sara', 'Melissa', 'Sky', 'TK', 'Becci', 'Allison', 'Eliza')

# Staff members and coaches who appear in the monthly export but are never called
DEFAULT_EXCLUDED_NAMES: Tuple[str, ...] = (
    'adam whitt',
    'leah rice',
    'melissa espinoza',
    'pro coach b',
    'coach b'
)

LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


@dataclass(frozen=True)
class AppConfig:
    """Settings shared by the API server and the command-line demo."""

    staff_names: Tuple[str, ...] = DEFAULT_STAFF
    excluded_names: Tuple[str, ...] = DEFAULT_EXCLUDED_NAMES
    default_month: str = 'January'
    host: str = '0.0.0.0'
    port: int = 8000
    log_level: str = 'INFO'


def load_env(dotenv_path: Optional[Union[str, Path]] = None) -> None:
    """Load a ``.env`` file into the process environment if one exists."""
    path = Path(dotenv_path) if dotenv_path else None
    if path and path.exists():
        load_dotenv(path)
        return
    load_dotenv()


def _split_list(value: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in value.split(',') if part.strip())


def load_config() -> AppConfig:
    """
    Build an AppConfig from the environment.

    Recognised variables: CARE_CALL_STAFF, CARE_CALL_EXCLUDED_NAMES,
    CARE_CALL_DEFAULT_MONTH, CARE_CALL_HOST, CARE_CALL_PORT and
    CARE_CALL_LOG_LEVEL.

    Raises:
        ValueError: if a variable holds an unusable value
    """
    staff_env = os.getenv('CARE_CALL_STAFF')
    excluded_env = os.getenv('CARE_CALL_EXCLUDED_NAMES')

    staff_names = _split_list(staff_env) if staff_env is not None else DEFAULT_STAFF
    if len(set(staff_names)) != len(staff_names):
        raise ValueError(f"CARE_CALL_STAFF contains duplicate names: {list(staff_names)}")

    excluded_names = (
        tuple(name.lower() for name in _split_list(excluded_env))
        if excluded_env is not None else DEFAULT_EXCLUDED_NAMES
    )

    default_month = os.getenv('CARE_CALL_DEFAULT_MONTH', 'January').strip()
    if default_month not in MONTHS:
        raise ValueError(f"CARE_CALL_DEFAULT_MONTH must be one of {list(MONTHS)}")

    port_raw = os.getenv('CARE_CALL_PORT', '8000').strip()
    try:
        port = int(port_raw)
    except ValueError:
        raise ValueError(f"CARE_CALL_PORT must be an integer, got {port_raw!r}")

    log_level = os.getenv('CARE_CALL_LOG_LEVEL', 'INFO').strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"CARE_CALL_LOG_LEVEL must be one of {list(LOG_LEVELS)}")

    return AppConfig(
        staff_names=staff_names,
        excluded_names=excluded_names,
        default_month=default_month,
        host=os.getenv('CARE_CALL_HOST', '0.0.0.0').strip(),
        port=port,
        log_level=log_level
    )


def default_staff_list() -> List[str]:
    """Staff list a fresh session starts with."""
    return list(load_config().staff_names)
