"""
Point the app at a throwaway SQLite database and build the schema before
any test module imports app.main.
"""
import os
import tempfile
from pathlib import Path

_db_file = Path(tempfile.gettempdir()) / "progression_api_tests.sqlite3"
os.environ.setdefault("DB_URL", f"sqlite:///{_db_file}")

import pytest  # noqa: E402

from app.db import Base, engine  # noqa: E402
from app import models  # noqa: F401,E402

Base.metadata.drop_all(engine)
Base.metadata.create_all(engine)


@pytest.fixture
def fresh_state():
    """Empty every table; for tests that assert on global counts or sync timestamps."""
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
    yield


MUSCLES = ("chest", "back", "quads", "hamstrings", "shoulders", "biceps", "triceps", "core")


@pytest.fixture
def single_catalog():
    """One Primary and one Secondary per muscle, so exercise choice is fully determined."""
    from app.schemas.catalog import ExerciseRecord

    out = []
    for m in MUSCLES:
        out.append(ExerciseRecord(name=f"{m.title()} Main", muscle=m, type="Primary",
                                  equipment=["barbell"], alternatives=[f"{m.title()} Swap"]))
        out.append(ExerciseRecord(name=f"{m.title()} Accessory", muscle=m, type="Secondary",
                                  equipment=["cable"]))
        # equipment outside every style filter: swappable, never generated
        out.append(ExerciseRecord(name=f"{m.title()} Swap", muscle=m, type="Secondary",
                                  equipment=["rings"]))
    return out


@pytest.fixture
def pinned_engine(single_catalog):
    """Route the API at single_catalog with a seeded rng."""
    from random import Random
    from app.main import app
    from app.deps.engine import get_catalog, get_rng

    app.dependency_overrides[get_catalog] = lambda: single_catalog
    app.dependency_overrides[get_rng] = lambda: Random(0)
    yield single_catalog
    app.dependency_overrides.clear()
