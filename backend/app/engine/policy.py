"""
Volume and intensity policy.

Volume landmarks are weekly hard sets per muscle:
MV (maintenance), MEV (minimum effective), MAV (maximum adaptive),
MRV (maximum recoverable).
"""

import math
from typing import Iterable, NamedTuple

class VolumeLandmarks(NamedTuple):
    mv: int
    mev: int
    mav: int
    mrv: int

VOLUME_LANDMARKS = {
    "novice":       VolumeLandmarks(mv=4,  mev=6,  mav=10, mrv=12),
    "beginner":     VolumeLandmarks(mv=6,  mev=8,  mav=12, mrv=15),
    "intermediate": VolumeLandmarks(mv=8,  mev=10, mav=16, mrv=20),
    "advanced":     VolumeLandmarks(mv=10, mev=12, mav=18, mrv=22),
}

DEFAULT_TRAINING_AGE = "beginner"

# compound lifts already hit these, so they get a reduced direct target
INDIRECT_MUSCLES = frozenset({"biceps", "triceps", "core"})
INDIRECT_FACTOR = 0.75

DELOAD_RIR = 4

def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))

def volume_landmarks(training_age: str) -> VolumeLandmarks:
    return VOLUME_LANDMARKS.get(training_age, VOLUME_LANDMARKS[DEFAULT_TRAINING_AGE])

def initial_weekly_volume(muscles: Iterable[str], target_sets: int) -> dict[str, int]:
    volume = {}
    for muscle in muscles:
        if muscle in INDIRECT_MUSCLES:
            volume[muscle] = round_half_up(target_sets * INDIRECT_FACTOR)
        else:
            volume[muscle] = target_sets
    return volume

def target_rir_for_week(week: int, total_weeks: int) -> int:
    """
    RIR target for a 1-indexed week. Intensity climbs (RIR falls) across the
    block, and the final week is always the deload at RIR 4.
    """
    if week >= total_weeks:
        return DELOAD_RIR
    progress = (week - 1) / (total_weeks - 1)
    if progress < 0.25:
        return 3
    if progress < 0.5:
        return 2
    if progress < 0.75:
        return 1
    return 0
