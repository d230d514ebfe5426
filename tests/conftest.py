import sys
from pathlib import Path

import pytest

# Ensure the repository root (which contains the `venue_finder` package) is importable in tests.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from venue_finder.ingest.sample_catalog import sample_ratings, sample_venues  # noqa: E402
from venue_finder.query.engine import QueryEngine  # noqa: E402


@pytest.fixture(scope="session")
def sample_engine():
    return QueryEngine(sample_venues(), sample_ratings())
