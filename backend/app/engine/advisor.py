import re

from app.schemas.plan import ExercisePlanEntry, LoggedSet
from app.schemas.profile import TrainingSettings

DEFAULT_TARGET_RIR = 3
INCOMPLETE_PROMPT = "Enter weight, reps, and RIR to get a recommendation."

_reps = re.compile(r"^(\d+)")
_rir_short = re.compile(r"r(\d+)")          # "8 r2"
_rir_long = re.compile(r"(\d+)\s*rir")      # "8 @ 2 rir"

def parse_rep_input(raw: str) -> tuple[int | None, int | None]:
    """Split a free-text rep entry into (reps, rir); either may be None."""
    value = raw.strip().lower()
    rep_match = _reps.match(value)
    rir_match = _rir_short.search(value) or _rir_long.search(value)
    reps = int(rep_match.group(1)) if rep_match else None
    rir = int(rir_match.group(1)) if rir_match else None
    return reps, rir

def _fmt(weight: float) -> str:
    return f"{weight:g}"

def recommend(logged: LoggedSet, exercise: ExercisePlanEntry, settings: TrainingSettings | None = None) -> str:
    """Advice for the next set in this session, from the set just logged."""
    settings = settings or TrainingSettings()
    if logged.weight is None or logged.reps is None or logged.rir is None:
        return INCOMPLETE_PROMPT

    target = exercise.target_rir if exercise.target_rir is not None else DEFAULT_TARGET_RIR
    diff = logged.rir - target
    units = settings.units
    step = settings.weight_increment

    if diff > 1:
        return f"You were a bit light. Try increasing to {_fmt(logged.weight + step)} {units}"
    if diff < -1:
        lighter = max(0.0, logged.weight - step)
        if lighter == 0:
            return "Drop weight significantly to focus on form."
        return f"That was very hard. Try decreasing to {_fmt(lighter)} {units}"
    return f"Perfect! Stay at {_fmt(logged.weight)} {units} for the next set."
