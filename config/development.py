import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Routes are mounted under this prefix (/api/absence, /api/attendance/...)
API_PREFIX = os.getenv("API_PREFIX", "/api")

# Body of GET {API_PREFIX}/ping
PING_MESSAGE = os.getenv("PING_MESSAGE", "ping")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
