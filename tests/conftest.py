"""Shared test fixtures."""

import pytest

from launchpad.constants import default_state_path
from launchpad.models import AppSnapshot
from launchpad.state import PreferenceStore
from launchpad.storage import JsonFileStorage, MemoryStorage


@pytest.fixture
def memory_storage():
    """Empty in-memory storage."""
    return MemoryStorage()


@pytest.fixture
def store(memory_storage):
    """Preference store over empty in-memory storage."""
    return PreferenceStore(memory_storage)


@pytest.fixture
def state_file(tmp_path):
    """Path for a JSON store file that does not exist yet."""
    return default_state_path(tmp_path)


@pytest.fixture
def file_storage(state_file):
    return JsonFileStorage(state_file)


@pytest.fixture
def persisted_record():
    """A record as written by an earlier session, with a field we don't know about."""
    return {
        "state": {
            "widgetSettings": {
                "chess:chess:sys": {"hide": True, "size": "large"},
                "settings:settings:sys": {"size": "small"},
            },
            "favoriteApps": {"chess:chess:sys": True, "kino:kino:sys": False},
            "dockOrder": ["chess:chess:sys"],
        },
        "version": 0,
    }


@pytest.fixture
def make_app():
    """Factory for app snapshots in the app store JSON shape."""
    def _make(**overrides):
        data = {
            "package": "chess:chess:sys",
            "installed": True,
            "state": {"our_version": "v1"},
            "metadata": {
                "properties": {
                    "current_version": "v2",
                    "code_hashes": {"v1": "h1", "v2": "h2"},
                }
            },
            "publisher": "node-x",
        }
        data.update(overrides)
        return AppSnapshot.from_dict(data)
    return _make


@pytest.fixture
def sample_listing():
    """Payload of the /apps listing."""
    return [
        {"package_name": "chess:chess:sys", "path": "/chess:chess:sys/"},
        {"package_name": "kino:kino:sys", "path": "/kino:kino:sys/"},
        {"package_name": "chess:chess:sys", "path": "/shadowed/"},
    ]
