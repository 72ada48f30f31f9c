from __future__ import annotations

import logging
import os
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Mapping, Optional

from hover_menu.settings import MenuSettings, env_flag

LOGGER_NAME = "HoverMenu"
LOG_FILENAME = "hover_menu.log"
LOG_DIR_ENV_VAR = "HOVER_MENU_LOG_DIR"
PROPAGATE_ENV_VAR = "HOVER_MENU_PROPAGATE_LOGS"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def resolve_logs_dir(log_dir_name: str = "HoverMenu", env: Optional[Mapping[str, str]] = None) -> Path:
    """
    Resolve the directory to store menu logs.

    Strategy:
    - Use HOVER_MENU_LOG_DIR if set.
    - Fall back to XDG state/cache locations, then `cwd/logs/<log_dir_name>`.
    - Final fallback: tempdir/<log_dir_name>.
    """
    env = os.environ if env is None else env
    candidates = []

    env_override = env.get(LOG_DIR_ENV_VAR)
    if env_override:
        candidates.append(Path(env_override).expanduser())

    state_home = Path(env.get("XDG_STATE_HOME") or Path.home() / ".local" / "state")
    cache_home = Path(env.get("XDG_CACHE_HOME") or Path.home() / ".cache")
    candidates.append(state_home / "logs")
    candidates.append(cache_home / "logs")
    candidates.append(Path.cwd() / "logs")

    for base in candidates:
        try:
            target = base / log_dir_name
            target.mkdir(parents=True, exist_ok=True)
            return target
        except OSError:
            continue

    temp_fallback = Path(tempfile.gettempdir()) / log_dir_name
    temp_fallback.mkdir(parents=True, exist_ok=True)
    return temp_fallback


def build_rotating_file_handler(
    log_dir: Path,
    filename: str,
    *,
    retention: int = 5,
    max_bytes: int = 512 * 1024,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Handler:
    """Construct a rotating file handler with sane defaults."""
    retention = max(1, retention)
    backup_count = max(0, retention - 1)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / filename,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    if formatter is not None:
        handler.setFormatter(formatter)
    return handler


def resolve_log_level(debug_enabled: bool) -> int:
    return logging.DEBUG if debug_enabled else logging.INFO


def configure_menu_logger(
    settings: MenuSettings,
    *,
    log_dir: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> logging.Logger:
    """Attach a rotating file handler to the ``HoverMenu`` logger tree."""
    env = os.environ if env is None else env
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_log_level(settings.log_transitions))
    # Opt-in propagation for environments/tests that want menu logs upstream.
    logger.propagate = bool(env_flag(env.get(PROPAGATE_ENV_VAR)))

    target_dir = log_dir if log_dir is not None else resolve_logs_dir(env=env)
    for existing in list(logger.handlers):
        if isinstance(existing, RotatingFileHandler):
            logger.removeHandler(existing)
            existing.close()
    handler = build_rotating_file_handler(
        target_dir,
        LOG_FILENAME,
        retention=settings.logs_to_keep,
        formatter=logging.Formatter(LOG_FORMAT),
    )
    logger.addHandler(handler)
    return logger
