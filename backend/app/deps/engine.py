# app/deps/engine.py
from functools import lru_cache
from random import Random

from app.engine.catalog import load_catalog
from app.schemas.catalog import ExerciseRecord
from app.settings import get_settings

@lru_cache
def _bundled_catalog() -> tuple[ExerciseRecord, ...]:
    return tuple(load_catalog(get_settings().CATALOG_PATH))

def get_catalog() -> list[ExerciseRecord]:
    """Exercise catalog; override in tests to pin the candidates per muscle."""
    return list(_bundled_catalog())

def get_rng() -> Random:
    """Randomness for exercise selection; override with a seeded Random to make plans reproducible."""
    return Random()
