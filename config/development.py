import os
from pathlib import Path

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Event log, templates and account log JSON files live here
DATA_DIR = Path(os.getenv("WORKTIME_DATA_DIR", Path.cwd() / "data"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
