#===============================================================================
#  Launchpad | actions.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Decides which single action (launch/update/download/install/none) an app
#  tile offers, from the app's install/download/version metadata.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import NamedTuple, Optional

from .models import ActionState, AppSnapshot


class AppFlags(NamedTuple):
    installed: bool
    downloaded: bool
    updatable: bool


def latest_hash(app: AppSnapshot) -> Optional[str]:
    """Hash the publisher advertises for current_version, if any."""
    current = app.current_version
    if current is None:
        return None
    return app.code_hashes.get(current) or None


def app_flags(app: AppSnapshot, local_node: str) -> AppFlags:
    """Derive installed/downloaded/updatable for one app.

    Versions are only ever compared by hash. our_version may be a version
    label (looked up in code_hashes) or already a hash.
    """
    ours = app.our_version
    latest = latest_hash(app)
    updatable = False
    if ours and latest:
        local_hash = app.code_hashes.get(ours) or ours
        updatable = local_hash != latest and app.publisher != local_node
    return AppFlags(installed=bool(app.installed), downloaded=app.downloaded, updatable=updatable)


def resolve_action_state(
    app: AppSnapshot,
    local_node: str,
    launch_path: Optional[str] = None,
) -> ActionState:
    """Pick the one action a tile should offer.

    Order matters; each rule assumes the ones above it did not match:
      1) installed + known launch path -> LAUNCH
      2) installed + updatable         -> UPDATE
      3) not downloaded                -> DOWNLOAD
      4) downloaded, not installed     -> INSTALL
      5) otherwise                     -> UP_TO_DATE
    """
    flags = app_flags(app, local_node)

    if flags.installed and isinstance(launch_path, str) and launch_path:
        return ActionState.LAUNCH
    if flags.installed and flags.updatable:
        return ActionState.UPDATE
    if not flags.downloaded:
        return ActionState.DOWNLOAD
    if not flags.installed:
        return ActionState.INSTALL
    return ActionState.UP_TO_DATE
