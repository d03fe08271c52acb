import os
from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), ".env"))
load_dotenv()


BASE_DIR = os.path.dirname(os.path.abspath(__file__))

SECRET_KEY = os.environ.get("FLASK_SECRET_KEY", "change-this-secret")
RUNNING_ON_RENDER = bool(os.environ.get("RENDER"))

configured_origins = os.environ.get(
    "FRONTEND_ORIGIN",
    "http://localhost:3000,http://127.0.0.1:3000"
).split(",")
ALLOWED_ORIGINS = [o.strip() for o in configured_origins if o.strip()]
ALLOWED_ORIGINS.extend([r"http://localhost:\d+", r"http://127\.0\.0\.1:\d+"])

DATA_DIR = os.environ.get("DATA_DIR", os.path.join(BASE_DIR, "data"))
FALLBACK_DATA_DIR = os.path.join("/tmp", "timetable-portal-data")

MONGO_URI = os.environ.get("MONGO_URI", "").strip()
MONGO_DB_NAME = os.environ.get("MONGO_DB_NAME", "timetable_portal").strip() or "timetable_portal"

# Multiplier applied to the artificial delays of the mock API (0 disables them).
try:
    SIMULATED_LATENCY = float(os.environ.get("SIMULATED_LATENCY", "0"))
except ValueError:
    SIMULATED_LATENCY = 0.0

DEMO_PASSWORD = "password123"
ADMIN_LOGIN_PATH = "/login?role=admin"
MAX_NOTIFICATIONS = 10

PORT = int(os.environ.get("PORT", 5000))
DEBUG_MODE = os.environ.get("FLASK_ENV") != "production"
