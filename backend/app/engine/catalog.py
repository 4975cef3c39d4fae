import json
import logging
import re
from pathlib import Path
from random import Random
from typing import Iterable, Sequence

from pydantic import TypeAdapter

from app.schemas.catalog import ExerciseRecord

log = logging.getLogger(__name__)

GYM_EQUIPMENT = frozenset({"barbell", "dumbbell", "machine", "cable", "rack", "bench", "bodyweight", "pullup-bar"})
HOME_EQUIPMENT = frozenset({"bodyweight", "dumbbell", "pullup-bar"})
EQUIPMENT_BY_STYLE = {"gym": GYM_EQUIPMENT, "home": HOME_EQUIPMENT}

_catalog_adapter = TypeAdapter(list[ExerciseRecord])
_whitespace = re.compile(r"\s+")

def exercise_id(name: str) -> str:
    """Stable id used to pair plan entries, history and records: 'Bench Press' -> 'ex_bench_press'."""
    return "ex_" + _whitespace.sub("_", name.strip()).lower()

def load_catalog(path: str | Path) -> list[ExerciseRecord]:
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    catalog = _catalog_adapter.validate_python(raw)
    seen: dict[str, str] = {}
    for ex in catalog:
        key = exercise_id(ex.name)
        if key in seen and seen[key] != ex.name:
            raise ValueError(f"exercise ids collide: {seen[key]!r} and {ex.name!r}")
        seen[key] = ex.name
    log.info("loaded %d catalog exercises from %s", len(catalog), path)
    return catalog

def equipment_for_style(style: str) -> frozenset[str]:
    return EQUIPMENT_BY_STYLE.get(style, GYM_EQUIPMENT)

def is_eligible(ex: ExerciseRecord, allowed: frozenset[str]) -> bool:
    # bodyweight work is always available, whatever the style
    return "bodyweight" in ex.equipment or any(e in allowed for e in ex.equipment)

def eligible_pool(
    catalog: Iterable[ExerciseRecord],
    muscle: str,
    kind: str,
    allowed: frozenset[str],
    exclude: Iterable[str] = (),
) -> list[ExerciseRecord]:
    skip = set(exclude)
    return [
        ex for ex in catalog
        if ex.muscle.lower() == muscle.lower()
        and ex.type == kind
        and is_eligible(ex, allowed)
        and exercise_id(ex.name) not in skip
    ]

def pick(pool: Sequence[ExerciseRecord], rng: Random) -> ExerciseRecord | None:
    if not pool:
        return None
    return rng.choice(pool)

def find_by_name(catalog: Iterable[ExerciseRecord], name: str) -> ExerciseRecord | None:
    return next((ex for ex in catalog if ex.name == name), None)

def find_by_id(catalog: Iterable[ExerciseRecord], ex_id: str) -> ExerciseRecord | None:
    return next((ex for ex in catalog if exercise_id(ex.name) == ex_id), None)
