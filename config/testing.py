import os

SECRET_KEY = "test-secret"

API_PREFIX = "/api"

PING_MESSAGE = os.getenv("PING_MESSAGE", "ping")

DEBUG = False
TESTING = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
