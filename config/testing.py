import os

DATA_FILE = os.getenv("DATA_FILE", "tests/data/empresa.txt")

DEBUG = False
TESTING = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = None

USE_COLOR = False
