import os
from pathlib import Path

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_DIR = Path(os.getenv("WORKTIME_DATA_DIR", Path.home() / ".worktime"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
