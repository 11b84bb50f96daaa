"""Local entry point: ``python app.py`` serves the JSON API on 127.0.0.1:5000."""

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src" / "worktime"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from worktime.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
