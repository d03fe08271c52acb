"""JSON-file state storage with an optional MongoDB backing collection."""

import copy
import json
import logging
import os
import tempfile

from pymongo import MongoClient

from timetable_portal import config

logger = logging.getLogger(__name__)

DATA_DIR = None
MONGO_CLIENT = None
MONGO_STATE_COLLECTION = None


def resolve_data_dir(configured_dir, fallback_dir):
    try:
        os.makedirs(configured_dir, exist_ok=True)
        return configured_dir
    except OSError:
        os.makedirs(fallback_dir, exist_ok=True)
        return fallback_dir


def init_storage(data_dir=None, mongo_uri=None, db_name=None):
    global DATA_DIR
    DATA_DIR = resolve_data_dir(data_dir or config.DATA_DIR, config.FALLBACK_DATA_DIR)
    init_mongo(config.MONGO_URI if mongo_uri is None else mongo_uri, db_name or config.MONGO_DB_NAME)
    return DATA_DIR


def init_mongo(mongo_uri, db_name):
    global MONGO_CLIENT, MONGO_STATE_COLLECTION
    MONGO_CLIENT = None
    MONGO_STATE_COLLECTION = None
    if not mongo_uri:
        return
    try:
        MONGO_CLIENT = MongoClient(mongo_uri, serverSelectionTimeoutMS=5000)
        MONGO_CLIENT.admin.command("ping")
        MONGO_STATE_COLLECTION = MONGO_CLIENT[db_name]["app_state"]
        logger.info("[storage] Using MongoDB database '%s'", db_name)
    except Exception as exc:
        MONGO_CLIENT = None
        MONGO_STATE_COLLECTION = None
        logger.warning("[storage] MongoDB unavailable, falling back to JSON files: %s", exc)


def collection_path(name):
    if DATA_DIR is None:
        init_storage()
    return os.path.join(DATA_DIR, f"{name}.json")


def state_key_for_path(path):
    return os.path.splitext(os.path.basename(path))[0]
class StateReadError(Exception):
    pass


# Returned by read_json_file when a collection was never stored.
MISSING = object()


def fallback_value(default_value):
    if default_value is MISSING:
        return MISSING
    return copy.deepcopy(default_value)


def read_json_file(path, default_value, strict=False):
    """
    Read a stored collection. ``default_value`` is returned when nothing is
    stored. A failed read also returns it unless ``strict`` is set, in which
    case ``StateReadError`` is raised so the caller can keep what it has.
    """
    if MONGO_STATE_COLLECTION is not None:
        try:
            doc = MONGO_STATE_COLLECTION.find_one({"_id": state_key_for_path(path)})
        except Exception as exc:
            logger.warning("[storage] Mongo read failed for %s: %s", state_key_for_path(path), exc)
            if strict:
                raise StateReadError(state_key_for_path(path)) from exc
            return fallback_value(default_value)
        if doc is None or "value" not in doc:
            return fallback_value(default_value)
        return doc["value"]
    if not os.path.exists(path):
        return fallback_value(default_value)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("[storage] Unreadable state file %s: %s", path, exc)
        if strict:
            raise StateReadError(path) from exc
        return fallback_value(default_value)


def write_json_file(path, data):
    if MONGO_STATE_COLLECTION is not None:
        MONGO_STATE_COLLECTION.replace_one(
            {"_id": state_key_for_path(path)},
            {"_id": state_key_for_path(path), "value": data},
            upsert=True
        )
        return
    # Readers in other workers must never see a half-written file.
    fd, tmp_path = tempfile.mkstemp(dir=os.path.dirname(path), prefix=".", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
