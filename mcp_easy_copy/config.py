"""Settings and config-file lookup for the Claude Desktop configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Tuple

import aiofiles.os

from .common.progress import log

CONFIG_ENV_VAR = "MCP_EASY_COPY_CONFIG"
DEBUG_ENV_VAR = "MCP_EASY_COPY_DEBUG"

CONFIG_FILENAME = "claude_desktop_config.json"

# macOS, Linux, Windows (%APPDATA%), in that order.
CONFIG_SUBDIRS: Tuple[str, ...] = (
    "Library/Application Support/Claude",
    ".config/Claude",
    "AppData/Roaming/Claude",
)

_TRUTHY = {"1", "true", "yes", "on"}


def default_config_paths(home: Path | None = None) -> Tuple[Path, ...]:
    base = home if home is not None else Path.home()
    return tuple(base / subdir / CONFIG_FILENAME for subdir in CONFIG_SUBDIRS)


@dataclass(frozen=True)
class Settings:
    candidate_paths: Tuple[Path, ...] = field(default_factory=default_config_paths)
    debug: bool = False


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def load_settings(
    config_path: str | os.PathLike | None = None,
    debug: bool | None = None,
    home: Path | None = None,
) -> Settings:
    """
    Build the process-wide settings once at startup.

    Explicit arguments (from the command line) win over the environment. An
    explicit config path is tried before the default per-OS locations.
    """
    explicit = config_path or os.getenv(CONFIG_ENV_VAR) or None
    candidates: list[Path] = []
    if explicit:
        candidates.append(Path(explicit).expanduser())
    candidates.extend(default_config_paths(home))
    return Settings(
        candidate_paths=tuple(candidates),
        debug=_env_flag(DEBUG_ENV_VAR) if debug is None else debug,
    )


async def locate(candidates: Iterable[Path], verbose: bool = False) -> Path | None:
    """Return the first candidate that exists, or None when none does."""
    for path in candidates:
        try:
            found = await aiofiles.os.path.exists(path)
        except OSError as exc:
            log(f"Could not check {path}: {exc}", verbose)
            continue
        if found:
            log(f"Found config file at: {path}", verbose)
            return path
        log(f"Config file not found at: {path}", verbose)
    return None
