"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import numlib...' works without
installing the package, and resets the cached settings and default random
source around every test so environment tweaks never leak between tests.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from numlib.config.settings import reset_settings  # noqa: E402
from numlib.utils.randomness import reset_random_source  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_numlib_state():
    reset_settings()
    reset_random_source()
    yield
    reset_settings()
    reset_random_source()
