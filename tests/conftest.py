from __future__ import annotations

import sys
from pathlib import Path


def pytest_configure():
    # Make `summary_assistant` importable from a plain checkout without installing it.
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))
