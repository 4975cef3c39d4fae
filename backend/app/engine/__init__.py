"""
Training engine: the pure core behind the API.

Turns a user profile into a multi-week mesocycle and auto-regulates it
from logged performance (reps, load, RIR) and daily readiness. Nothing in
this package touches the database; callers pass plans, days and settings
in explicitly and persist whatever comes back.
"""

from .splits import select_split, SplitTemplate
from .policy import volume_landmarks, initial_weekly_volume, target_rir_for_week
from .catalog import exercise_id, load_catalog
from .generator import generate
from .progression import advance, progression_suggestions
from .recovery import adjust
from .advisor import recommend, parse_rep_input
from .records import estimate_1rm, detect_personal_records

__all__ = [
    "select_split",
    "SplitTemplate",
    "volume_landmarks",
    "initial_weekly_volume",
    "target_rir_for_week",
    "exercise_id",
    "load_catalog",
    "generate",
    "advance",
    "progression_suggestions",
    "adjust",
    "recommend",
    "parse_rep_input",
    "estimate_1rm",
    "detect_personal_records",
]
