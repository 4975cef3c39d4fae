import logging

from app.schemas.plan import DayWorkout

log = logging.getLogger(__name__)

SLEEP_THRESHOLD = 6     # hours; less than this is poor sleep
STRESS_THRESHOLD = 7    # 1-10; this or higher is high stress
MIN_SETS = 2

def poor_recovery(sleep_hours: float, stress: int) -> bool:
    return sleep_hours < SLEEP_THRESHOLD or stress >= STRESS_THRESHOLD

def adjust(sleep_hours: float, stress: int, day: DayWorkout) -> bool:
    """
    Trim one set from every exercise in day when readiness is poor, never
    below MIN_SETS. Returns whether anything changed. Not idempotent: call
    once per session.
    """
    if not poor_recovery(sleep_hours, stress):
        return False
    changed = False
    for ex in day.exercises:
        if ex.target_sets > MIN_SETS:
            ex.target_sets -= 1
            changed = True
    if changed:
        log.info("recovery adjustment on %s (sleep=%s, stress=%s): sets now %s",
                 day.name, sleep_hours, stress, [ex.target_sets for ex in day.exercises])
    return changed
