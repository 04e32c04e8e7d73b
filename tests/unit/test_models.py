"""Tests for shared data models."""

from launchpad.models import ActionState, AppSnapshot, WidgetSize


class TestAppSnapshotFromDict:
    """Tests for building snapshots from app store JSON."""

    def test_full(self, make_app):
        app = make_app()
        assert app.package_id == "chess:chess:sys"
        assert app.installed is True
        assert app.downloaded is True
        assert app.our_version == "v1"
        assert app.current_version == "v2"
        assert app.code_hashes == {"v1": "h1", "v2": "h2"}
        assert app.publisher == "node-x"

    def test_empty_state_still_downloaded(self):
        assert AppSnapshot.from_dict({"package": "a", "state": {}}).downloaded is True

    def test_truthy_non_dict_state_counts_as_downloaded(self):
        app = AppSnapshot.from_dict({"package": "a", "state": "yes"})
        assert app.downloaded is True
        assert app.our_version is None

    def test_missing_everything(self):
        app = AppSnapshot.from_dict({})
        assert app.package_id == ""
        assert app.installed is False
        assert app.downloaded is False
        assert app.current_version is None
        assert app.code_hashes == {}


class TestEnums:

    def test_values(self):
        assert ActionState("launch") is ActionState.LAUNCH
        assert WidgetSize("large") is WidgetSize.LARGE
        assert [s.value for s in WidgetSize] == ["small", "large"]
