"""Runtime configuration for whatnow.

Values come from the environment (a local `.env` file is honoured).
"""

import logging
import os
from datetime import tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MAX_TREE_DEPTH = 64
DEFAULT_SUGGESTION_LIMIT = 5
DEFAULT_MAX_TREE_NODES = 10000


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}; using {default}")
        return default
    if value < 1:
        logger.warning(f"Ignoring non-positive {name}={value}; using {default}")
        return default
    return value


# IANA zone used to decide what "today" means; empty = system local time
TIMEZONE = os.getenv("WHATNOW_TIMEZONE", "").strip()
MAX_TREE_DEPTH = _int_from_env("WHATNOW_MAX_TREE_DEPTH", DEFAULT_MAX_TREE_DEPTH)
MAX_TREE_NODES = _int_from_env("WHATNOW_MAX_TREE_NODES", DEFAULT_MAX_TREE_NODES)
SUGGESTION_LIMIT = _int_from_env("WHATNOW_SUGGESTION_LIMIT", DEFAULT_SUGGESTION_LIMIT)


def get_time_zone(name: Optional[str] = None) -> Optional[tzinfo]:
    """Resolve an IANA time zone name.

    Args:
        name: Zone name such as "Europe/Berlin". Falls back to WHATNOW_TIMEZONE.

    Returns:
        The zone, or None when neither is set (meaning system local time).

    Raises:
        ValueError: If the name is not a known zone.
    """
    zone_name = name if name is not None else TIMEZONE
    if not zone_name:
        return None
    try:
        return ZoneInfo(zone_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown time zone: {zone_name}") from e
