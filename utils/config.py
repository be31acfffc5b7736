"""Runtime configuration dataclasses for the table and the display.

Each dataclass reads its defaults through :data:`utils.settings.cfg`
(``EQUITY_*`` environment variables first, then ``config.yaml``) at
construction time. Override individual fields when constructing from
code (e.g. in tests).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from utils.settings import cfg

MAX_FRIEND_SEATS = 7
"""Nine-handed table minus hero and one villain."""

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _friend_seats() -> int:
    return min(max(cfg.get_int("table.friend_seats", 3), 0), MAX_FRIEND_SEATS)


def _log_level() -> str:
    level = cfg.get_str("logging.level", "WARNING").strip().upper()
    return level if level in LOG_LEVELS else "WARNING"


@dataclass(slots=True)
class TableConfig:
    """Seat layout of the selection state."""

    friend_seats: int = field(default_factory=_friend_seats)
    strict_assign: bool = field(default_factory=lambda: cfg.get_bool("table.strict_assign", True))


@dataclass(slots=True)
class DisplayConfig:
    """Terminal rendering and logging options."""

    color: bool = field(default_factory=lambda: cfg.get_bool("display.color", True))
    ten_as_digits: bool = field(default_factory=lambda: cfg.get_bool("display.ten_as_digits", True))
    log_level: str = field(default_factory=_log_level)
