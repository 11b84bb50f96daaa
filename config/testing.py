import os
import tempfile
from pathlib import Path

SECRET_KEY = "test-secret"

DATA_DIR = Path(os.getenv("WORKTIME_DATA_DIR", Path(tempfile.gettempdir()) / "worktime-test"))

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
