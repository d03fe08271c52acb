"""Per-user notification feeds, newest first, capped at ``MAX_NOTIFICATIONS``."""

import random
import string
from datetime import datetime

from timetable_portal import config, state

NOTIFICATION_TYPES = ("info", "success", "warning", "error")


def random_id(length=9):
    alphabet = string.ascii_lowercase + string.digits
    return "".join(random.choice(alphabet) for _ in range(length))


def feed_for(user_id):
    """Return the stored feed of ``user_id``, seeding it on first use."""
    feeds = state.get_latest_notifications()
    key = str(user_id)
    if key not in feeds:
        feeds[key] = state.seeded_notifications()
        state.save_notifications()
    return feeds[key]


def list_notifications(user_id):
    return feed_for(user_id)


def add_notification(user_id, title, message, notice_type="info"):
    if notice_type not in NOTIFICATION_TYPES:
        raise ValueError(f"Unknown notification type: {notice_type}")
    notices = feed_for(user_id)
    entry = {
        "id": random_id(),
        "title": title,
        "message": message,
        "type": notice_type,
        "timestamp": datetime.utcnow().isoformat() + "Z"
    }
    notices[:] = ([entry] + notices)[:config.MAX_NOTIFICATIONS]
    state.save_notifications()
    return entry


def remove_notification(user_id, notification_id):
    notices = feed_for(user_id)
    removed = state.remove_by_id(notices, notification_id)
    if removed:
        state.save_notifications()
    return removed
