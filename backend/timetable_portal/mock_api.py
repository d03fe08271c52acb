"""
In-process API simulating the backend calls of the dashboard.

Every call waits for an artificial delay (scaled by ``SIMULATED_LATENCY``,
zero by default) and returns fixture data or data derived trivially from it.
Failures raise ``MockApiError`` subclasses; callers decide how to report them.
"""

import copy
import logging
import time
from datetime import datetime

from timetable_portal import config, fixtures, generator, state
from timetable_portal.notifications import random_id

logger = logging.getLogger(__name__)

REQUEST_STATUSES = ("pending", "approved", "rejected")


class MockApiError(Exception):
    pass


class InvalidCredentials(MockApiError):
    pass


class RegistrationBlocked(MockApiError):
    def __init__(self, message, redirect_to):
        super().__init__(message)
        self.redirect_to = redirect_to


class EmailAlreadyRegistered(MockApiError):
    pass


class RequestNotFound(MockApiError):
    pass


class RequestAlreadyResolved(MockApiError):
    pass


def simulate_latency(ms):
    if config.SIMULATED_LATENCY > 0:
        time.sleep(ms / 1000.0 * config.SIMULATED_LATENCY)


def get_dashboard_stats(role):
    simulate_latency(800)
    if role not in fixtures.MOCK_DASHBOARD_STATS:
        raise MockApiError(f"Unknown role: {role}")
    return copy.deepcopy(fixtures.MOCK_DASHBOARD_STATS[role])


def get_faculty_requests():
    simulate_latency(600)
    return copy.deepcopy(state.get_latest_faculty_requests())


def get_timetables(branch=None, semester=None):
    simulate_latency(700)
    filtered = state.get_latest_timetables()
    if branch:
        filtered = [t for t in filtered if t.get("branch") == branch]
    if semester:
        filtered = [t for t in filtered if str(t.get("semester")) == str(semester)]
    return copy.deepcopy(filtered)


def get_subjects():
    simulate_latency(500)
    return copy.deepcopy(state.get_latest_subjects())


def get_teachers():
    simulate_latency(400)
    return copy.deepcopy(fixtures.MOCK_TEACHERS)


def get_exams():
    simulate_latency(300)
    return copy.deepcopy(fixtures.MOCK_EXAMS)


def login(email, password, role):
    simulate_latency(1000)
    if role not in fixtures.MOCK_USERS:
        raise InvalidCredentials("Invalid credentials")
    if password != config.DEMO_PASSWORD:
        raise InvalidCredentials("Invalid credentials")
    demo_user = fixtures.MOCK_USERS[role]
    # The stored copy carries any profile edits.
    user = state.get_latest_users().get(demo_user["id"], demo_user)
    return copy.deepcopy(user)


def is_email_taken(email):
    normalized = (email or "").strip().lower()
    if not normalized:
        return False
    return any(
        (user.get("email") or "").strip().lower() == normalized
        for user in state.get_latest_users().values()
    )


def register(user_data, role):
    simulate_latency(1200)
    if role == "admin":
        raise RegistrationBlocked(
            "Admin registration is not available. Admin credentials are pre-configured for security.",
            config.ADMIN_LOGIN_PATH
        )
    if role not in ("student", "teacher"):
        raise MockApiError("Role must be student or teacher")
    if is_email_taken(user_data.get("email")):
        raise EmailAlreadyRegistered("Email already exists")

    new_user = {"id": random_id()}
    new_user.update({
        key: value for key, value in user_data.items()
        if key not in ("password", "confirmPassword")
    })
    new_user["role"] = role
    new_user["avatar"] = fixtures.DEFAULT_AVATAR

    users = state.get_latest_users()
    users[new_user["id"]] = new_user
    state.save_users()
    logger.info("Registered %s account %s", role, new_user["id"])
    return copy.deepcopy(new_user)


def update_user(user_id, changes):
    users = state.get_latest_users()
    user = users.get(user_id)
    if not user:
        raise MockApiError("User not found")
    user.update(changes)
    state.save_users()
    return copy.deepcopy(user)


def submit_faculty_request(request):
    simulate_latency(800)
    new_request = dict(request)
    new_request.update({
        "id": random_id(),
        "status": "pending",
        "submittedAt": datetime.utcnow().isoformat() + "Z"
    })
    requests = state.get_latest_faculty_requests()
    requests.append(new_request)
    state.save_faculty_requests()
    return copy.deepcopy(new_request)


def resolve_faculty_request(request_id, status, resolved_by, note=None):
    """Move a pending request to ``approved`` or ``rejected``; both are terminal."""
    if status not in ("approved", "rejected"):
        raise ValueError(f"Cannot resolve a request to {status}")
    requests = state.get_latest_faculty_requests()
    req = state.find_by_id(requests, request_id)
    if not req:
        raise RequestNotFound("Request not found")
    if req.get("status") != "pending":
        raise RequestAlreadyResolved(f"Request already {req.get('status')}")

    req["status"] = status
    req["resolvedAt"] = datetime.utcnow().isoformat() + "Z"
    req["resolvedBy"] = resolved_by
    if note:
        req["adminNote"] = note
    state.save_faculty_requests()
    return copy.deepcopy(req)


def generate_timetable(form_data):
    simulate_latency(3000)
    return generator.build_timetable_options(form_data)


def check_for_clashes(time_slot, current_timetable, rng=None):
    simulate_latency(200)
    return generator.check_for_clashes(time_slot, current_timetable, rng=rng)
