import os
import tempfile

# Point the store at a throwaway directory before the app module is imported.
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="timetable-portal-tests-"))
os.environ["MONGO_URI"] = ""
os.environ["SIMULATED_LATENCY"] = "0"

import pytest

from timetable_portal import config, state, storage
from timetable_portal.app import app as flask_app


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Every test starts from freshly seeded fixture data."""
    monkeypatch.setattr(config, "SIMULATED_LATENCY", 0)
    storage.init_storage(str(tmp_path), mongo_uri="")
    state.load_all()
    return tmp_path


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


def _login(app, role):
    client = app.test_client()
    resp = client.post("/auth/login", json={
        "email": f"{role}@college.edu",
        "password": config.DEMO_PASSWORD,
        "role": role,
    })
    assert resp.status_code == 200
    return client


@pytest.fixture
def student_client(app):
    return _login(app, "student")


@pytest.fixture
def teacher_client(app):
    return _login(app, "teacher")


@pytest.fixture
def admin_client(app):
    return _login(app, "admin")
