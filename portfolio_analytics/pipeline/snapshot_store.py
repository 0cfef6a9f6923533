from __future__ import annotations

import asyncio
import json
from pathlib import Path

import structlog

from ..config import SnapshotPaths

log = structlog.get_logger()

HOLDINGS = "holdings"
TIMELINE = "timeline"


class SnapshotError(Exception):
    """A snapshot could not be read or is not shaped like a snapshot."""


class SnapshotStore:
    """Whole-file, read-only access to the JSON snapshots."""

    def __init__(self, paths: SnapshotPaths):
        self.paths = paths

    def path_for(self, name: str) -> Path:
        if name == HOLDINGS:
            return Path(self.paths.holdings)
        if name == TIMELINE:
            return Path(self.paths.timeline)
        raise SnapshotError(f"unknown snapshot {name}")

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def read(self, name: str) -> list:
        path = self.path_for(name)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SnapshotError(f"{name} snapshot unreadable: {e}") from e
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SnapshotError(f"{name} snapshot is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise SnapshotError(f"{name} snapshot must be a JSON array")
        log.debug("snapshot_loaded", snapshot=name, path=str(path), records=len(data))
        return data

    async def load(self, name: str) -> list:
        return await asyncio.to_thread(self.read, name)
