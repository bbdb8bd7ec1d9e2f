import sys
from pathlib import Path

import pytest
from PySide6.QtCore import QCoreApplication

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(scope="session", autouse=True)
def qapp():
    # Timers and queued signals need an application object; no display is required.
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app
