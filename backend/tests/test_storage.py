"""Tests for the JSON state store and collection seeding."""

import json
import os

import pytest

from timetable_portal import mock_api, notifications, state, storage
from timetable_portal.storage import (
    MISSING,
    StateReadError,
    read_json_file,
    resolve_data_dir,
    state_key_for_path,
    write_json_file,
)


class FailingCollection:
    def __init__(self):
        self.writes = []

    def find_one(self, query):
        raise ConnectionError("server selection timeout")

    def replace_one(self, query, doc, upsert=False):
        self.writes.append(doc)


class TestJsonFiles:
    def test_missing_file_returns_copy_of_default(self, data_dir):
        default = {"items": []}
        value = read_json_file(str(data_dir / "missing.json"), default)
        assert value == default
        assert value is not default

    def test_round_trip(self, data_dir):
        path = str(data_dir / "things.json")
        write_json_file(path, [{"id": "1"}])
        assert read_json_file(path, []) == [{"id": "1"}]

    def test_corrupt_file_falls_back(self, data_dir):
        path = data_dir / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert read_json_file(str(path), []) == []

    def test_state_key_is_file_stem(self):
        assert state_key_for_path("/srv/data/faculty_requests.json") == "faculty_requests"

    def test_resolve_data_dir_falls_back(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        fallback = str(tmp_path / "fallback")
        assert resolve_data_dir(str(blocker / "sub"), fallback) == fallback
        assert os.path.isdir(fallback)


class TestSeeding:
    def test_collections_seeded_on_first_load(self, data_dir):
        for name in ("users", "faculty_requests", "subjects", "faculty", "timetables"):
            assert (data_dir / f"{name}.json").exists(), name
        users = json.loads((data_dir / "users.json").read_text(encoding="utf-8"))
        assert set(users) == {"1", "2", "3"}

    def test_per_user_collections_not_seeded(self, data_dir):
        assert state.get_latest_generated_timetables() == {}
        assert state.get_latest_notifications() == {}
        assert not (data_dir / "generated_timetables.json").exists()
        assert not (data_dir / "notifications.json").exists()

    def test_emptied_collection_stays_empty(self):
        """Deleting every timetable must not bring the fixtures back."""
        timetables = state.get_latest_timetables()
        timetables.clear()
        state.save_timetables()
        assert state.get_latest_timetables() == []

    def test_malformed_collection_replaced_by_default(self, data_dir):
        (data_dir / "subjects.json").write_text(json.dumps({"oops": True}), encoding="utf-8")
        assert state.get_latest_subjects() == []

    def test_reads_refresh_from_disk(self, data_dir):
        requests = json.loads((data_dir / "faculty_requests.json").read_text(encoding="utf-8"))
        requests[0]["status"] = "approved"
        (data_dir / "faculty_requests.json").write_text(json.dumps(requests), encoding="utf-8")
        assert state.get_latest_faculty_requests()[0]["status"] == "approved"


class TestHelpers:
    def test_find_by_id_compares_as_string(self):
        assert state.find_by_id([{"id": 1}], "1") == {"id": 1}
        assert state.find_by_id([{"id": "1"}], "2") is None

    def test_remove_by_id_in_place(self):
        items = [{"id": "1"}, {"id": "2"}]
        assert state.remove_by_id(items, "1") is True
        assert items == [{"id": "2"}]
        assert state.remove_by_id(items, "9") is False


class TestNotifications:
    def test_seeded_newest_first(self):
        notices = notifications.list_notifications("1")
        assert [n["id"] for n in notices] == ["1", "2"]
        assert notices[0]["timestamp"] > notices[1]["timestamp"]

    def test_add_prepends(self):
        entry = notifications.add_notification("1", "Saved", "Changes saved", "success")
        assert len(entry["id"]) == 9
        assert notifications.list_notifications("1")[0] == entry

    def test_capped_at_ten(self):
        for i in range(12):
            notifications.add_notification("1", f"N{i}", "msg")
        notices = notifications.list_notifications("1")
        assert len(notices) == 10
        assert notices[0]["title"] == "N11"

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError, match="fatal"):
            notifications.add_notification("1", "Bad", "msg", "fatal")

    def test_remove(self):
        assert notifications.remove_notification("1", "1") is True
        assert notifications.remove_notification("1", "1") is False
        assert [n["id"] for n in notifications.list_notifications("1")] == ["2"]

    def test_feeds_are_separate(self):
        entry = notifications.add_notification("3", "Request Approved", "Approved", "success")
        assert entry not in notifications.list_notifications("1")
        assert notifications.remove_notification("1", entry["id"]) is False
        assert notifications.list_notifications("3")[0] == entry

    def test_emptied_feed_stays_empty(self):
        notifications.remove_notification("2", "1")
        notifications.remove_notification("2", "2")
        assert notifications.list_notifications("2") == []


class TestFailedReads:
    def test_truncated_file_keeps_stored_data(self, data_dir):
        """A half-written file must not be replaced by the demo seed."""
        mock_api.resolve_faculty_request("1", "approved", "3")
        new_request = mock_api.submit_faculty_request({"teacherId": "TCH2024001", "reason": "Seminar in Delhi"})
        path = data_dir / "faculty_requests.json"
        content = path.read_text(encoding="utf-8")
        path.write_text(content[: len(content) // 2], encoding="utf-8")

        requests = state.get_latest_faculty_requests()
        assert len(requests) == 4
        assert state.find_by_id(requests, "1")["status"] == "approved"
        assert state.find_by_id(requests, new_request["id"])
        assert path.read_text(encoding="utf-8") == content[: len(content) // 2]

        path.write_text(content, encoding="utf-8")
        assert state.find_by_id(state.get_latest_faculty_requests(), "1")["status"] == "approved"

    def test_failed_mongo_read_writes_nothing(self, monkeypatch):
        cached = state.get_latest_subjects()
        collection = FailingCollection()
        monkeypatch.setattr(storage, "MONGO_STATE_COLLECTION", collection)
        assert state.get_latest_subjects() is cached
        assert collection.writes == []

    def test_strict_read_raises(self, data_dir):
        path = data_dir / "broken.json"
        path.write_text("[1, 2", encoding="utf-8")
        with pytest.raises(StateReadError):
            read_json_file(str(path), [], strict=True)

    def test_missing_file_returns_sentinel(self, data_dir):
        assert read_json_file(str(data_dir / "absent.json"), MISSING) is MISSING

    def test_write_leaves_no_temp_files(self, data_dir):
        write_json_file(str(data_dir / "things.json"), {"a": 1})
        assert sorted(p.name for p in data_dir.iterdir() if p.name.endswith(".tmp")) == []



def test_storage_uses_files_without_mongo():
    assert storage.MONGO_STATE_COLLECTION is None
