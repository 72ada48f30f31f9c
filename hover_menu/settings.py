"""Settings loader for the hover-intent menu."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

from hover_menu.menu_timing import MenuTiming, MenuTimingProfile

SETTINGS_FILENAME = "menu_settings.json"
SETTINGS_PATH_ENV_VAR = "HOVER_MENU_SETTINGS_PATH"
DEBUG_ENV_VAR = "HOVER_MENU_DEBUG"
LOG_RETENTION_MIN = 1
LOG_RETENTION_MAX = 20
DEFAULT_LOG_RETENTION = 5

_TIMING_ENV_VARS = {
    "open_delay_ms": "HOVER_MENU_OPEN_DELAY_MS",
    "close_delay_ms": "HOVER_MENU_CLOSE_DELAY_MS",
    "close_cooldown_ms": "HOVER_MENU_CLOSE_COOLDOWN_MS",
}


@dataclass(frozen=True)
class MenuSettings:
    timing: MenuTiming = field(default_factory=MenuTiming)
    check_invariants: bool = False
    log_transitions: bool = False
    logs_to_keep: int = DEFAULT_LOG_RETENTION


def env_flag(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    token = value.strip().lower()
    if token in {"1", "true", "yes", "on"}:
        return True
    if token in {"0", "false", "no", "off"}:
        return False
    return None


def resolve_settings_path(root: Path, env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    override = env.get(SETTINGS_PATH_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return root / SETTINGS_FILENAME


def _coerce_log_retention(value: Any) -> int:
    if value is None:
        return DEFAULT_LOG_RETENTION
    try:
        numeric = int(value)
    except (TypeError, ValueError):
        return DEFAULT_LOG_RETENTION
    if numeric < LOG_RETENTION_MIN:
        return LOG_RETENTION_MIN
    if numeric > LOG_RETENTION_MAX:
        return LOG_RETENTION_MAX
    return numeric


def _read_json_object(path: Path) -> dict[str, Any]:
    try:
        raw_text = path.read_text(encoding="utf-8")
        data = json.loads(raw_text)
    except (FileNotFoundError, OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_menu_settings(path: Path, *, env: Optional[Mapping[str, str]] = None) -> MenuSettings:
    """Read menu settings from ``path``; environment variables win over file values.

    A missing or broken file is not an error: every key falls back to its default.
    """

    env = os.environ if env is None else env
    data = _read_json_object(path)

    timing_overrides: dict[str, object] = {key: data.get(key) for key in _TIMING_ENV_VARS}
    for key, env_name in _TIMING_ENV_VARS.items():
        raw = env.get(env_name)
        if raw is not None and raw.strip():
            timing_overrides[key] = raw.strip()
    timing = MenuTimingProfile().resolve(timing_overrides)

    check_invariants = bool(data.get("check_invariants", False))
    log_transitions = bool(data.get("log_transitions", False))
    if env_flag(env.get(DEBUG_ENV_VAR)):
        check_invariants = True
        log_transitions = True

    return MenuSettings(
        timing=timing,
        check_invariants=check_invariants,
        log_transitions=log_transitions,
        logs_to_keep=_coerce_log_retention(data.get("logs_to_keep")),
    )
