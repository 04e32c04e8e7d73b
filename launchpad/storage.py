#===============================================================================
#  Launchpad | storage.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Durable storage adapters for the preference record (JSON file, QSettings,
#  in-memory). Each adapter owns exactly one namespace key.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from PySide6.QtCore import QSettings

from .constants import APP_TITLE, STORE_NAME

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class StorageUnavailable(Exception):
    """Durable write failed. The caller keeps working from memory."""


class JsonFileStorage:
    """A JSON file holding namespace -> record, like browser local storage.

    Other namespaces found in the file are left alone on write.
    """

    def __init__(self, path: Path, name: str = STORE_NAME):
        self.path = Path(path)
        self.name = name

    def _read_all(self, for_write: bool = False) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            data, problem = None, e
        else:
            problem = "not a JSON object"
        if isinstance(data, dict):
            return data
        if for_write:
            logger.warning(
                "Replacing unreadable store file %s (%s); its previous contents are lost",
                self.path,
                problem,
            )
        else:
            logger.warning("Ignoring unreadable store file %s: %s", self.path, problem)
        return {}

    def _write_all(self, data: Dict[str, Any]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except (OSError, TypeError, ValueError) as e:
            raise StorageUnavailable(f"Could not write {self.path}: {e}") from e

    def load(self) -> Optional[Record]:
        record = self._read_all().get(self.name)
        return record if isinstance(record, dict) else None

    def save(self, record: Record) -> None:
        data = self._read_all(for_write=True)
        data[self.name] = record
        self._write_all(data)

    def clear(self) -> None:
        data = self._read_all()
        if data.pop(self.name, None) is not None:
            self._write_all(data)


class QSettingsStorage:
    """Record kept as a JSON string in Qt's per-user settings."""

    def __init__(self, settings: Optional[QSettings] = None, name: str = STORE_NAME):
        self.settings = settings if settings is not None else QSettings(APP_TITLE, APP_TITLE)
        self.name = name

    def _sync(self) -> None:
        self.settings.sync()
        status = self.settings.status()
        if status != QSettings.Status.NoError:
            raise StorageUnavailable(f"QSettings write failed ({status})")

    def load(self) -> Optional[Record]:
        raw = self.settings.value(self.name)
        if not raw:
            return None
        try:
            record = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning("Ignoring unreadable settings value %r: %s", self.name, e)
            return None
        return record if isinstance(record, dict) else None

    def save(self, record: Record) -> None:
        try:
            raw = json.dumps(record)
        except (TypeError, ValueError) as e:
            raise StorageUnavailable(f"Record is not serializable: {e}") from e
        self.settings.setValue(self.name, raw)
        self._sync()

    def clear(self) -> None:
        self.settings.remove(self.name)
        self._sync()


class MemoryStorage:
    """Process-local storage. fail_writes simulates a full or disabled store."""

    def __init__(self, name: str = STORE_NAME, record: Optional[Record] = None):
        self.name = name
        self.record = copy.deepcopy(record)
        self.fail_writes = False
        self.writes = 0

    def load(self) -> Optional[Record]:
        return copy.deepcopy(self.record)

    def save(self, record: Record) -> None:
        if self.fail_writes:
            raise StorageUnavailable("storage disabled")
        # Round-trip through JSON so tests see exactly what a real store keeps.
        try:
            self.record = json.loads(json.dumps(record))
        except (TypeError, ValueError) as e:
            raise StorageUnavailable(f"Record is not serializable: {e}") from e
        self.writes += 1

    def clear(self) -> None:
        if self.fail_writes:
            raise StorageUnavailable("storage disabled")
        self.record = None
