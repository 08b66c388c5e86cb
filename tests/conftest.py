"""Global pytest configuration.

`scripts/` and `flows/` are plain directories rather than installed packages;
tests run from the project root, so put it on `sys.path`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def pytest_configure() -> None:
    root_dir = Path(__file__).resolve().parents[1]

    raw = str(root_dir)
    if raw not in sys.path:
        sys.path.insert(0, raw)
