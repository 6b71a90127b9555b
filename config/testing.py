import os

SECRET_KEY = "test-secret"

DATA_DIR = os.getenv("DATA_DIR", "data-test")
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory")

PUBLIC_BASE_URL = "http://cards.test"

MAX_PHOTO_BYTES = 64 * 1024

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
