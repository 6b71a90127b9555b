import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# One JSON document per employee is written under this directory
DATA_DIR = os.getenv("DATA_DIR", "data")
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")

# Base URL encoded in QR codes; empty means "use the request host"
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "")

MAX_PHOTO_BYTES = int(os.getenv("MAX_PHOTO_BYTES", str(2 * 1024 * 1024)))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
