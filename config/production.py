import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_PREFIX = os.getenv("API_PREFIX", "/api")

PING_MESSAGE = os.getenv("PING_MESSAGE", "ping")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
