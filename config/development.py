import os

# Flat text file holding every employee(...) and department(...) line
DATA_FILE = os.getenv("DATA_FILE", "data/empresa.txt")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None

USE_COLOR = bool(int(os.getenv("USE_COLOR", "1")))
