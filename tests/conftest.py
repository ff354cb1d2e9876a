from __future__ import annotations

import sys
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from daylight import Location  # noqa: E402


@pytest.fixture(scope="session")
def new_york() -> Location:
    return Location(tz=ZoneInfo("America/New_York"), latitude=40.642, longitude=-74.017)


@pytest.fixture(scope="session")
def sydney() -> Location:
    return Location(tz="Australia/Sydney", latitude=-33.86, longitude=151.20)


@pytest.fixture(scope="session")
def stockholm() -> Location:
    return Location(tz="Europe/Stockholm", latitude=59.33, longitude=18.067)
