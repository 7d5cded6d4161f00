import os

DATA_FILE = os.getenv("DATA_FILE", "data/empresa.txt")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FILE = os.getenv("LOG_FILE") or None

USE_COLOR = bool(int(os.getenv("USE_COLOR", "1")))
