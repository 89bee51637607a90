import os

SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://api.test/api"),
    "token": "test-token",
    "timeout": 1,
    "session_time_in": "09:00:00",
    "session_time_out": "15:30:00",
}

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
