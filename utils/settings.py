"""Centralised loader for ``config.yaml``.

Reads the ``config.yaml`` file at the project root and exposes every
setting through typed getters keyed by dotted paths. Environment
variables ``EQUITY_*`` **always take precedence** over the YAML; the file
is the friendly fallback.

Usage::

    from utils.settings import cfg

    print(cfg.get_int("table.friend_seats"))   # 3
    print(cfg.get_bool("display.color"))       # True

Equivalent environment variable: ``EQUITY_TABLE_FRIEND_SEATS``
  → the YAML key ``table.friend_seats`` becomes ``EQUITY_TABLE_FRIEND_SEATS``.

Loading is lazy (on first access) and lock-guarded.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any

import yaml

_log = logging.getLogger("equity.settings")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _find_config_path() -> Path:
    """Resolve the path of config.yaml by walking up to the project root."""
    env_path = os.getenv("EQUITY_CONFIG_FILE", "").strip()
    if env_path:
        return Path(env_path)

    start = Path(__file__).resolve().parent
    for ancestor in [start, start.parent, start.parent.parent]:
        candidate = ancestor / "config.yaml"
        if candidate.exists():
            return candidate

    return start.parent / "config.yaml"


class EquitySettings:
    """Settings access with ``env > yaml > default`` priority.

    Attributes:
        _data: Raw dictionary loaded from the YAML.
        _loaded: Whether the YAML has been read yet.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._data: dict[str, Any] = {}
        self._loaded: bool = False
        self._lock = threading.Lock()

    # ── Lazy loading ──────────────────────────────────────────────

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            self._load()
            self._loaded = True

    def _load(self) -> None:
        config_path = self._path or _find_config_path()
        if not config_path.exists():
            self._data = {}
            return
        try:
            with open(config_path, "r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh)
        except (OSError, yaml.YAMLError) as exc:
            _log.warning("could not read %s (%s), using defaults", config_path, exc)
            self._data = {}
            return
        self._data = raw if isinstance(raw, dict) else {}

    # ── Dotted-key access ─────────────────────────────────────────

    def _resolve(self, dotted_key: str) -> Any:
        """Resolve ``table.friend_seats`` → data[table][friend_seats]."""
        self._ensure_loaded()
        node: Any = self._data
        for part in dotted_key.split("."):
            if isinstance(node, dict):
                node = node.get(part)
            else:
                return None
        return node

    @staticmethod
    def _env_key(dotted_key: str) -> str:
        """Convert ``table.friend_seats`` → ``EQUITY_TABLE_FRIEND_SEATS``."""
        return "EQUITY_" + dotted_key.upper().replace(".", "_")

    # ── Typed getters ─────────────────────────────────────────────

    def get_str(self, key: str, default: str = "") -> str:
        env_val = os.getenv(self._env_key(key), "").strip()
        if env_val:
            return env_val
        yaml_val = self._resolve(key)
        if yaml_val is not None:
            return str(yaml_val)
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        env_val = os.getenv(self._env_key(key), "").strip()
        if env_val:
            try:
                return int(env_val)
            except ValueError:
                pass
        yaml_val = self._resolve(key)
        if yaml_val is not None:
            try:
                return int(yaml_val)
            except (ValueError, TypeError):
                pass
        return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        env_val = os.getenv(self._env_key(key), "").strip().lower()
        if env_val in _TRUE_VALUES:
            return True
        if env_val in _FALSE_VALUES:
            return False
        yaml_val = self._resolve(key)
        if isinstance(yaml_val, bool):
            return yaml_val
        if yaml_val is not None:
            raw = str(yaml_val).strip().lower()
            if raw in _TRUE_VALUES:
                return True
            if raw in _FALSE_VALUES:
                return False
        return default

    def __repr__(self) -> str:
        self._ensure_loaded()
        return f"<EquitySettings sections={list(self._data.keys())}>"


# ── Global singleton ─────────────────────────────────────────────
cfg = EquitySettings()
