import os
import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Give every test settings built from a clean ``LZH_*`` environment."""
    from lzh.configs import reset_settings

    for key in list(os.environ):
        if key.upper().startswith('LZH_'):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()
