#===============================================================================
#  Launchpad | launch_paths.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Fetches the /apps listing (package_name -> path) and caches it per refresh,
#  so tiles of installed apps can offer "Launch".
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Dict, List, Optional

import requests

from .constants import LISTING_ROUTE, LISTING_TIMEOUT
from .models import LaunchEntry

# NOTE:
# - This module only does the listing I/O and lookup.
# - Deciding what a tile shows lives in actions.py.

logger = logging.getLogger(__name__)


def listing_url(base_url: str) -> str:
    return base_url.rstrip("/") + LISTING_ROUTE


def parse_launch_listing(data) -> List[LaunchEntry]:
    """Turn the listing payload into entries. Anything but a JSON array is empty."""
    if not isinstance(data, list):
        return []
    out: List[LaunchEntry] = []
    for row in data:
        if not isinstance(row, dict):
            continue
        name, path = row.get("package_name"), row.get("path")
        if isinstance(name, str) and isinstance(path, str):
            out.append(LaunchEntry(package_name=name, path=path))
    return out


def fetch_launch_listing(
    base_url: str,
    session: Optional[requests.Session] = None,
    timeout: float = LISTING_TIMEOUT,
) -> List[LaunchEntry]:
    """GET <base_url>/apps. Raises requests.RequestException on network/HTTP errors."""
    http = session or requests
    r = http.get(listing_url(base_url), timeout=timeout, headers={"Accept": "application/json"})
    r.raise_for_status()
    return parse_launch_listing(r.json())


class LaunchPathCache:
    """Launch paths by package, replaced wholesale on every refresh."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url
        self.session = session
        self._paths: Dict[str, str] = {}

    def refresh(self) -> bool:
        """Fetch once. On failure the previous (stale) paths stay in place."""
        try:
            entries = fetch_launch_listing(self.base_url, self.session)
        except (requests.RequestException, ValueError) as e:
            logger.warning("Launch listing refresh failed for %s: %s", self.base_url, e)
            return False

        paths: Dict[str, str] = {}
        for entry in entries:
            # first row wins for a package, like a find() over the listing
            paths.setdefault(entry.package_name, entry.path)
        self._paths = paths
        return True

    def get(self, package_name: str) -> Optional[str]:
        return self._paths.get(package_name)

    @property
    def paths(self) -> Dict[str, str]:
        return dict(self._paths)
