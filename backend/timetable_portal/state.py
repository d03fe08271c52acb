import copy
import logging
from datetime import datetime, timedelta

from timetable_portal import fixtures
from timetable_portal.storage import MISSING, StateReadError, collection_path, read_json_file, write_json_file

logger = logging.getLogger(__name__)

USERS = {}
FACULTY_REQUESTS = []
SUBJECTS = []
FACULTY = []
TIMETABLES = []
GENERATED_TIMETABLES = {}
NOTIFICATIONS = {}


def seeded_users():
    return {user["id"]: copy.deepcopy(user) for user in fixtures.MOCK_USERS.values()}


def seeded_notifications():
    now = datetime.utcnow()
    notices = []
    for offset, notice in enumerate(fixtures.DEFAULT_NOTIFICATIONS):
        entry = dict(notice)
        entry["timestamp"] = (now - timedelta(hours=offset)).isoformat() + "Z"
        notices.append(entry)
    return notices


def load_collection(name, default_value, seed=None, cached=None):
    """
    Read a collection; the seed is written only when nothing was ever stored.
    An unreadable store keeps ``cached`` and writes nothing.
    """
    path = collection_path(name)
    try:
        value = read_json_file(path, MISSING, strict=True)
    except StateReadError:
        logger.warning("[state] Keeping cached %s collection after a failed read", name)
        return cached if cached is not None else copy.deepcopy(default_value)
    if value is MISSING:
        if seed is None:
            return copy.deepcopy(default_value)
        value = copy.deepcopy(seed)
        write_json_file(path, value)
        return value
    if not isinstance(value, type(default_value)):
        logger.warning("[state] Discarding malformed %s collection", name)
        return copy.deepcopy(default_value)
    return value


def save_users():
    write_json_file(collection_path("users"), USERS)


def get_latest_users():
    """Always refresh from disk so multiple server workers stay consistent."""
    global USERS
    USERS = load_collection("users", {}, seeded_users(), USERS)
    return USERS


def save_faculty_requests():
    write_json_file(collection_path("faculty_requests"), FACULTY_REQUESTS)


def get_latest_faculty_requests():
    global FACULTY_REQUESTS
    FACULTY_REQUESTS = load_collection("faculty_requests", [], fixtures.MOCK_FACULTY_REQUESTS, FACULTY_REQUESTS)
    return FACULTY_REQUESTS


def save_subjects():
    write_json_file(collection_path("subjects"), SUBJECTS)


def get_latest_subjects():
    global SUBJECTS
    SUBJECTS = load_collection("subjects", [], fixtures.MOCK_SUBJECTS, SUBJECTS)
    return SUBJECTS


def save_faculty():
    write_json_file(collection_path("faculty"), FACULTY)


def get_latest_faculty():
    global FACULTY
    FACULTY = load_collection("faculty", [], fixtures.MOCK_FACULTY, FACULTY)
    return FACULTY


def save_timetables():
    write_json_file(collection_path("timetables"), TIMETABLES)


def get_latest_timetables():
    global TIMETABLES
    TIMETABLES = load_collection("timetables", [], fixtures.MOCK_TIMETABLES, TIMETABLES)
    return TIMETABLES


def save_generated_timetables():
    write_json_file(collection_path("generated_timetables"), GENERATED_TIMETABLES)


def get_latest_generated_timetables():
    global GENERATED_TIMETABLES
    GENERATED_TIMETABLES = load_collection("generated_timetables", {}, cached=GENERATED_TIMETABLES)
    return GENERATED_TIMETABLES


def save_notifications():
    write_json_file(collection_path("notifications"), NOTIFICATIONS)


def get_latest_notifications():
    global NOTIFICATIONS
    NOTIFICATIONS = load_collection("notifications", {}, cached=NOTIFICATIONS)
    return NOTIFICATIONS


def find_by_id(items, item_id):
    return next((item for item in items if str(item.get("id")) == str(item_id)), None)


def remove_by_id(items, item_id):
    kept = [item for item in items if str(item.get("id")) != str(item_id)]
    removed = len(kept) != len(items)
    items[:] = kept
    return removed


def load_all():
    get_latest_users()
    get_latest_faculty_requests()
    get_latest_subjects()
    get_latest_faculty()
    get_latest_timetables()
    get_latest_generated_timetables()
    get_latest_notifications()
