"""
Mesocycle generator.

Builds one week of training from the split template and the per-muscle
weekly volume targets, then replicates it across the block with the RIR
curve applied and the final week deloaded.
"""

import logging
import math
from random import Random
from typing import Sequence

from app.schemas.catalog import ExerciseRecord
from app.schemas.plan import DayWorkout, ExercisePlanEntry, Mesocycle
from app.schemas.profile import UserProfile
from .catalog import eligible_pool, equipment_for_style, exercise_id, pick
from .policy import initial_weekly_volume, target_rir_for_week, volume_landmarks
from .splits import SplitTemplate, select_split

log = logging.getLogger(__name__)

SETS_PER_EXERCISE = 3
DEFAULT_TARGET_REPS = 8
PLACEHOLDER_RIR = 3

def plan_entry(ex: ExerciseRecord) -> ExercisePlanEntry:
    return ExercisePlanEntry(
        exercise_id=exercise_id(ex.name),
        name=ex.name,
        muscle=ex.muscle,
        type=ex.type,
        target_sets=SETS_PER_EXERCISE,
        target_reps=DEFAULT_TARGET_REPS,
        target_rir=PLACEHOLDER_RIR,
        target_load=None,
    )

def build_week_template(
    split: SplitTemplate,
    weekly_volume: dict[str, int],
    catalog: Sequence[ExerciseRecord],
    style: str,
    rng: Random,
) -> list[DayWorkout]:
    allowed = equipment_for_style(style)
    remaining = dict(weekly_volume)
    week: list[DayWorkout] = []

    for label, muscles in split.days.items():
        day = DayWorkout(name=label)
        chosen: list[str] = []

        def take(muscle: str, kind: str) -> bool:
            ex = pick(eligible_pool(catalog, muscle, kind, allowed, exclude=chosen), rng)
            if ex is None:
                return False
            entry = plan_entry(ex)
            day.exercises.append(entry)
            chosen.append(entry.exercise_id)
            remaining[muscle] -= SETS_PER_EXERCISE
            return True

        # one primary lift per muscle first, then fill with secondaries
        for muscle in muscles:
            if remaining.get(muscle, 0) > 0 and not take(muscle, "Primary"):
                log.info("no primary exercise for %s on %s", muscle, label)
        for muscle in muscles:
            while remaining.get(muscle, 0) > 0:
                if not take(muscle, "Secondary"):
                    log.info("catalog exhausted for %s on %s; %d sets unfilled",
                             muscle, label, remaining[muscle])
                    break

        week.append(day)
    return week

def fill_week(template: list[DayWorkout], days_per_week: int) -> list[DayWorkout]:
    """Repeat template days, in order, until the week has days_per_week days."""
    days = list(template)
    i = 0
    while len(days) < days_per_week and template:
        src = template[i % len(template)]
        repeat = i // len(template) + 2
        days.append(src.model_copy(update={"name": f"{src.name} {repeat}"}, deep=True))
        i += 1
    return days

def build_mesocycle(template: list[DayWorkout], duration_weeks: int) -> Mesocycle:
    meso = Mesocycle()
    for week in range(1, duration_weeks + 1):
        deload = week == duration_weeks
        rir = target_rir_for_week(week, duration_weeks)
        meso.weeks[week] = {}
        for day_index, day_template in enumerate(template, start=1):
            day = day_template.model_copy(deep=True)
            day.completed = False
            for ex in day.exercises:
                ex.target_rir = rir
                if deload:
                    ex.target_sets = max(1, math.ceil(ex.target_sets / 2))
            meso.weeks[week][day_index] = day
    return meso

def generate(
    profile: UserProfile,
    catalog: Sequence[ExerciseRecord],
    duration_weeks: int,
    rng: Random | None = None,
) -> Mesocycle:
    """
    Generate a full mesocycle for profile.

    Exercise choice is random (unweighted) among eligible candidates; pass a
    seeded rng to pin it. Structure (split, muscle coverage, targets) is
    deterministic.
    """
    if duration_weeks < 1:
        raise ValueError("duration_weeks must be >= 1")
    rng = rng or Random()
    split = select_split(profile.days_per_week)
    landmarks = volume_landmarks(profile.training_age)
    volume = initial_weekly_volume(split.muscles, landmarks.mev)
    template = build_week_template(split, volume, catalog, profile.style, rng)
    template = fill_week(template, profile.days_per_week)
    log.info("generated %s mesocycle: %d weeks x %d days",
             split.name, duration_weeks, len(template))
    meso = build_mesocycle(template, duration_weeks)
    meso.split_name = split.name
    return meso
