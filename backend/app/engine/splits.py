"""Day-split templates keyed off weekly training frequency."""

from dataclasses import dataclass, field

ALL_MUSCLES = ("chest", "back", "quads", "hamstrings", "shoulders", "biceps", "triceps", "core")

@dataclass(frozen=True)
class SplitTemplate:
    name: str
    days: dict[str, list[str]]
    muscles: frozenset[str] = field(default_factory=lambda: frozenset(ALL_MUSCLES))

FULL_BODY = SplitTemplate(
    name="Full Body",
    days={
        "Full Body A": ["quads", "chest", "back", "shoulders"],
        "Full Body B": ["hamstrings", "back", "chest", "biceps", "triceps"],
        "Full Body C": ["quads", "shoulders", "back", "core"],
    },
)

UPPER_LOWER = SplitTemplate(
    name="Upper/Lower",
    days={
        "Upper A": ["chest", "back", "shoulders", "biceps", "triceps"],
        "Lower A": ["quads", "hamstrings", "core"],
        "Upper B": ["back", "chest", "shoulders", "triceps", "biceps"],
        "Lower B": ["hamstrings", "quads", "core"],
    },
)

PUSH_PULL_LEGS = SplitTemplate(
    name="Push/Pull/Legs",
    days={
        "Push": ["chest", "shoulders", "triceps"],
        "Pull": ["back", "biceps"],
        "Legs": ["quads", "hamstrings", "core"],
    },
)

def select_split(days_per_week: int) -> SplitTemplate:
    """<=3 days: full body, 4: upper/lower, 5+: push/pull/legs (the generator repeats it)."""
    if days_per_week <= 3:
        return FULL_BODY
    if days_per_week == 4:
        return UPPER_LOWER
    return PUSH_PULL_LEGS
