import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_DIR = os.getenv("DATA_DIR", "/var/lib/employee-vcard")
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")

PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "")

MAX_PHOTO_BYTES = int(os.getenv("MAX_PHOTO_BYTES", str(2 * 1024 * 1024)))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
