#===============================================================================
#  Launchpad | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Shared data models: app snapshots, launch listing rows, action states.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


def _text(value: Any) -> Optional[str]:
    # non-strings (lists, dicts, numbers) count as missing
    return value if isinstance(value, str) and value else None


class ActionState(str, Enum):
    LAUNCH = "launch"
    UPDATE = "update"
    DOWNLOAD = "download"
    INSTALL = "install"
    UP_TO_DATE = "up_to_date"


class WidgetSize(str, Enum):
    SMALL = "small"
    LARGE = "large"


@dataclass(frozen=True)
class AppSnapshot:
    """What the app store knows about one package at render time."""
    package_id: str
    installed: bool = False
    state: Optional[Dict[str, Any]] = None      # present => downloaded
    metadata: Optional[Dict[str, Any]] = None   # {"properties": {...}}
    publisher: str = ""

    @property
    def downloaded(self) -> bool:
        return self.state is not None

    @property
    def our_version(self) -> Optional[str]:
        if not isinstance(self.state, dict):
            return None
        return _text(self.state.get("our_version"))

    @property
    def properties(self) -> Dict[str, Any]:
        meta = self.metadata if isinstance(self.metadata, dict) else {}
        props = meta.get("properties")
        return props if isinstance(props, dict) else {}

    @property
    def current_version(self) -> Optional[str]:
        return _text(self.properties.get("current_version"))

    @property
    def code_hashes(self) -> Dict[str, str]:
        hashes = self.properties.get("code_hashes")
        return hashes if isinstance(hashes, dict) else {}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "AppSnapshot":
        """Build from the app store JSON shape. Only the fields we read are looked at."""
        state = d.get("state")
        metadata = d.get("metadata")
        return AppSnapshot(
            package_id=str(d.get("package") or d.get("package_id") or ""),
            installed=bool(d.get("installed")),
            state=state if isinstance(state, dict) else ({} if state else None),
            metadata=metadata if isinstance(metadata, dict) else None,
            publisher=str(d.get("publisher") or ""),
        )


@dataclass(frozen=True)
class LaunchEntry:
    """One row of the /apps listing: where an installed app can be opened."""
    package_name: str
    path: str
