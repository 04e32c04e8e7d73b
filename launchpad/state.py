#===============================================================================
#  Launchpad | state.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Persistent homepage preferences (widget visibility/size, favorite apps)
#  with write-through to a storage adapter.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Dict, List, Optional, Union

from .constants import STORE_VERSION
from .models import WidgetSize
from .storage import StorageUnavailable

logger = logging.getLogger(__name__)

Document = Dict[str, Any]
Partial = Union[Document, Callable[[Document], Document]]
Listener = Callable[[Document, Document], None]


def default_preferences() -> Document:
    return {
        "widgetSettings": {},   # package -> {"hide": bool, "size": "small" | "large"}
        "favoriteApps": {},     # package -> bool
    }


def merge_preferences(persisted: Any) -> Document:
    """Shallow-merge a loaded document over the defaults.

    Unknown top-level keys are kept so newer documents survive a round trip.
    """
    d = default_preferences()
    if persisted is None:
        return d
    if not isinstance(persisted, dict):
        logger.warning("Discarding persisted preferences of type %s", type(persisted).__name__)
        return d
    merged = {**d, **persisted}
    for k in d:
        if not isinstance(merged[k], dict):
            logger.warning("Resetting malformed %r in persisted preferences", k)
            merged[k] = d[k]
    return merged


def _entry(widget_settings: Dict[str, Any], package_name: str) -> Dict[str, Any]:
    entry = widget_settings.get(package_name)
    return entry if isinstance(entry, dict) else {}


class PreferenceStore:
    """Owns the preference document and keeps storage in sync with it.

    Every change goes through set(), which reads the current document, applies
    the change and writes the result before returning. A failed write leaves
    the new document in memory and raises StorageUnavailable; the session keeps
    working, it just won't survive a restart.
    """

    def __init__(
        self,
        storage,
        version: int = STORE_VERSION,
        migrate: Optional[Callable[[Any, int], Any]] = None,
    ):
        self.storage = storage
        self.version = version
        self.migrate = migrate
        self.persistent = True
        self._document: Document = default_preferences()
        self._listeners: List[Listener] = []
        self.rehydrate()

    # ----------------------------
    # Load / persist
    # ----------------------------
    def _record(self) -> Dict[str, Any]:
        return {"state": self._document, "version": self.version}

    def rehydrate(self) -> Document:
        """(Re)load the document from storage."""
        record = self.storage.load()
        state = None
        migrated = False
        if record is not None:
            state = record.get("state")
            stored_version = record.get("version", 0)
            if stored_version != self.version:
                if self.migrate is None:
                    logger.error(
                        "Stored preferences are version %s (expected %s) and no migrate "
                        "function was given; starting from defaults",
                        stored_version,
                        self.version,
                    )
                    state = None
                else:
                    state = self.migrate(state, stored_version)
                    migrated = True

        old = self._document
        self._document = merge_preferences(state)
        if migrated:
            try:
                self.storage.save(self._record())
                self.persistent = True
            except StorageUnavailable:
                self.persistent = False
                logger.warning("Migrated preferences could not be written back", exc_info=True)
        if self._document != old:
            self._notify(self._document, old)
        return self.get()

    def clear_storage(self) -> None:
        """Drop the persisted record. The in-memory document is left as is."""
        self.storage.clear()

    # ----------------------------
    # Core API
    # ----------------------------
    def get(self) -> Document:
        return copy.deepcopy(self._document)

    def set(self, partial: Partial) -> None:
        """Shallow-merge top-level keys into the document and persist.

        partial may be a callable taking the current document; the read and
        the write then happen as one step.
        """
        old = self._document
        if callable(partial):
            partial = partial(copy.deepcopy(old))
        new = {**old, **copy.deepcopy(partial)}
        self._document = new
        try:
            self.storage.save(self._record())
        except StorageUnavailable:
            self.persistent = False
            logger.warning("Preferences kept in memory only; durable write failed", exc_info=True)
            raise
        else:
            self.persistent = True
        finally:
            self._notify(new, old)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener(new, old) after each change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, new: Document, old: Document) -> None:
        # A failing listener must not hide a StorageUnavailable or starve the others.
        for listener in list(self._listeners):
            try:
                listener(copy.deepcopy(new), copy.deepcopy(old))
            except Exception:
                logger.exception("Preference listener %r failed", listener)

    # ----------------------------
    # Widget settings
    # ----------------------------
    def set_widget_settings(self, widget_settings: Dict[str, Dict[str, Any]]) -> None:
        self.set({"widgetSettings": dict(widget_settings)})

    def toggle_widget_visibility(self, package_name: str) -> None:
        def toggle(doc: Document) -> Document:
            settings = doc["widgetSettings"]
            entry = _entry(settings, package_name)
            return {
                "widgetSettings": {
                    **settings,
                    package_name: {**entry, "hide": not entry.get("hide", False)},
                }
            }

        self.set(toggle)

    def set_widget_size(self, package_name: str, size: Union[str, WidgetSize]) -> None:
        size_value = WidgetSize(size).value  # ValueError for anything but small/large

        def resize(doc: Document) -> Document:
            settings = doc["widgetSettings"]
            return {
                "widgetSettings": {
                    **settings,
                    package_name: {**_entry(settings, package_name), "size": size_value},
                }
            }

        self.set(resize)

    def widget_settings_for(self, package_name: str) -> Dict[str, Any]:
        """Settings for one widget with defaults filled in (size may be absent)."""
        return {"hide": False, **_entry(self._document["widgetSettings"], package_name)}

    # ----------------------------
    # Favorites
    # ----------------------------
    def favorite_app(self, package_name: str) -> None:
        def flip(doc: Document) -> Document:
            favorites = doc["favoriteApps"]
            return {"favoriteApps": {**favorites, package_name: not favorites.get(package_name, False)}}

        self.set(flip)

    def is_favorite(self, package_name: str) -> bool:
        # An explicit False and a missing entry both mean "not favorited".
        return bool(self._document["favoriteApps"].get(package_name, False))
