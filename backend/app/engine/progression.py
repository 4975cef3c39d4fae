"""
Week-over-week progression.

Auto-regulates the next occurrence of a workout from how the last one
went. With RIR logged, the mean RIR is compared to the target:

    mean - target > 1   too easy   -> add load, clear stall
    mean - target < -1  too hard   -> hold load, count a stall
    otherwise           on target  -> add a rep (or reset reps and add load at 12)

Without RIR it falls back to "did every set hit the rep target".
"""

import logging

from app.schemas.plan import DayWorkout, ExercisePlanEntry, LoggedSet
from app.schemas.profile import TrainingSettings

log = logging.getLogger(__name__)

DEFAULT_TARGET_RIR = 3
REP_CEILING = 12
REP_RESET = 8
STALL_THRESHOLD = 2
RIR_TOLERANCE = 1

def top_set_weight(sets: list[LoggedSet]) -> float:
    return max((s.weight or 0 for s in sets), default=0)

def mean_rir(sets: list[LoggedSet]) -> float | None:
    rated = [s.rir for s in sets if s.rir is not None and s.rir >= 0 and (s.weight or 0) > 0]
    if not rated:
        return None
    return sum(rated) / len(rated)

def progress_exercise(done: ExercisePlanEntry, nxt: ExercisePlanEntry, increment: float) -> None:
    if not done.sets:
        # skipped: carry the targets forward untouched
        nxt.target_load = done.target_load
        nxt.target_reps = done.target_reps
        nxt.stall_count = done.stall_count
        return

    top = top_set_weight(done.sets)
    avg = mean_rir(done.sets)

    if avg is None:
        hit_all = all((s.reps or 0) >= done.target_reps for s in done.sets)
        nxt.target_load = top + increment if hit_all else top
        nxt.target_reps = done.target_reps
        nxt.stall_count = done.stall_count
        log.debug("%s: no RIR logged, reps %s -> load %s",
                  nxt.name, "met" if hit_all else "missed", nxt.target_load)
        return

    target = done.target_rir if done.target_rir is not None else DEFAULT_TARGET_RIR
    diff = avg - target

    if diff > RIR_TOLERANCE:
        nxt.target_load = top + increment
        nxt.stall_count = 0
        log.debug("%s: too easy (RIR %.1f vs %d), load -> %s", nxt.name, avg, target, nxt.target_load)
    elif diff < -RIR_TOLERANCE:
        nxt.target_load = top
        nxt.stall_count = done.stall_count + 1
        log.debug("%s: too hard (RIR %.1f vs %d), holding %s", nxt.name, avg, target, top)
        if nxt.stall_count >= STALL_THRESHOLD:
            log.warning("stall detected for %s (%d cycles)", nxt.name, nxt.stall_count)
    else:
        if done.target_reps < REP_CEILING:
            nxt.target_reps = done.target_reps + 1
            nxt.target_load = top
        else:
            nxt.target_reps = REP_RESET
            nxt.target_load = top + increment
        nxt.stall_count = 0
        log.debug("%s: on target, %s reps @ %s", nxt.name, nxt.target_reps, nxt.target_load)

def advance(completed_day: DayWorkout, next_day: DayWorkout, settings: TrainingSettings | None = None) -> None:
    """Mutate next_day's targets in place from completed_day's logged sets, pairing by exercise id."""
    settings = settings or TrainingSettings()
    if settings.progression_model == "linear":
        log.info("linear progression is not implemented; applying RIR-based progression")
    upcoming = {ex.exercise_id: ex for ex in next_day.exercises}
    for done in completed_day.exercises:
        nxt = upcoming.get(done.exercise_id)
        if nxt is None:
            log.info("%s not in %s any more; skipping progression", done.exercise_id, next_day.name)
            continue
        progress_exercise(done, nxt, settings.weight_increment)

def _fmt(weight: float | None) -> str:
    if weight is None:
        return "current"
    return f"{weight:g}"

def progression_suggestions(
    completed_day: DayWorkout,
    next_day: DayWorkout,
    units: str = "lbs",
) -> list[tuple[str, str]]:
    """(exercise name, advice) pairs describing what advance() decided."""
    upcoming = {ex.exercise_id: ex for ex in next_day.exercises}
    out = []
    for done in completed_day.exercises:
        nxt = upcoming.get(done.exercise_id)
        if nxt is None:
            continue
        if nxt.stalled:
            out.append((nxt.name, "You've stalled on this lift. Consider swapping it for an "
                                  "alternative to break through the plateau."))
            continue
        top = top_set_weight(done.sets)
        if (nxt.target_load or 0) > top:
            text = f"Increase to {_fmt(nxt.target_load)} {units} for {nxt.target_reps} reps."
        elif nxt.target_reps > done.target_reps:
            text = f"Aim for {nxt.target_reps} reps with {_fmt(top or None)} {units}."
        else:
            text = f"Maintain {_fmt(nxt.target_load or top or None)} {units} for {nxt.target_reps} reps."
        out.append((done.name, text))
    return out
