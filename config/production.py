import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://localhost:5000/api"),
    "token": os.getenv("API_TOKEN"),
    "timeout": float(os.getenv("REQUEST_TIMEOUT", "10")),
    "session_time_in": os.getenv("SESSION_TIME_IN", "09:00:00"),
    "session_time_out": os.getenv("SESSION_TIME_OUT", "15:30:00"),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
