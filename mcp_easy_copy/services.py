from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Tuple

import aiofiles

from .common.progress import log
from .config import locate

SERVERS_KEY = "mcpServers"


class LookupStatus(str, Enum):
    NOT_FOUND = "not_found"
    UNREADABLE = "unreadable"
    OK = "ok"


@dataclass(frozen=True)
class ServiceLookup:
    """Outcome of one locate-and-read pass over the Claude Desktop config."""

    status: LookupStatus
    path: Path | None = None
    services: Tuple[str, ...] = field(default_factory=tuple)
    error: str | None = None


def extract_service_names(document: object) -> Tuple[str, ...]:
    """Keys of the top-level ``mcpServers`` object, in document order."""
    if not isinstance(document, dict):
        return ()
    servers = document.get(SERVERS_KEY)
    if not isinstance(servers, dict):
        return ()
    return tuple(servers.keys())


async def load_services(candidates: Iterable[Path], verbose: bool = False) -> ServiceLookup:
    path = await locate(candidates, verbose=verbose)
    if path is None:
        return ServiceLookup(status=LookupStatus.NOT_FOUND)

    try:
        async with aiofiles.open(path, "r", encoding="utf-8") as handle:
            content = await handle.read()
        document = json.loads(content)
    except (OSError, ValueError) as exc:
        log(f"Error getting MCP services from {path}: {exc}", verbose)
        return ServiceLookup(status=LookupStatus.UNREADABLE, path=path, error=str(exc))

    return ServiceLookup(
        status=LookupStatus.OK,
        path=path,
        services=extract_service_names(document),
    )


async def list_services(candidates: Iterable[Path], verbose: bool = False) -> List[str]:
    """Service names from the first config found; empty on any failure."""
    lookup = await load_services(candidates, verbose=verbose)
    return list(lookup.services)
