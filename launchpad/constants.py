#===============================================================================
#  Launchpad | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for store naming, the state file and the launch listing route.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path

APP_TITLE = "Launchpad"

# --- Preference store ---
STORE_NAME = "homepage_persistent_store"   # namespace key of the persisted record
STORE_VERSION = 0
STATE_FILE_NAME = "launchpad_state.json"

# --- Launch listing (package_name -> path) ---
LISTING_ROUTE = "/apps"
LISTING_TIMEOUT = 20


def default_state_path(base_dir: Path) -> Path:
    """Preferences file location for an app installed under base_dir."""
    return base_dir / STATE_FILE_NAME
