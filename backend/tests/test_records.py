from datetime import datetime, timedelta, timezone

import pytest

from app.engine.records import (
    best_set,
    detect_personal_records,
    estimate_1rm,
    last_performance,
    mesocycle_stats,
    next_incomplete,
    progress_series,
    total_sets,
    total_volume,
)
from app.schemas.history import HistoryEntry, PersonalRecord
from app.schemas.plan import DayRef, DayWorkout, ExercisePlanEntry, LoggedSet, Mesocycle

NOW = datetime(2026, 3, 2, 18, 0, tzinfo=timezone.utc)


def ex(ex_id, *pairs, name=None):
    return ExercisePlanEntry(
        exercise_id=ex_id, name=name or ex_id, muscle="chest", type="Primary",
        sets=[LoggedSet(weight=w, reps=r) for w, r in pairs],
    )


def entry(when, *exercises, name="Upper A"):
    return HistoryEntry(id=f"h_{when:%d}", plan_id="meso_1", plan_name="Block", workout_name=name,
                        completed_date=when, exercises=list(exercises))


@pytest.mark.parametrize("weight,reps,expected", [
    (100, 1, 100),
    (100, 8, 127),       # 126.67
    (135, 3, 149),       # 148.5 rounds up
    (100, 0, 0),
    (None, 5, 0),
    (0, 5, 0),
    (60, None, 0),
])
def test_estimate_1rm(weight, reps, expected):
    assert estimate_1rm(weight, reps) == expected


def test_best_set_by_e1rm_not_weight():
    heavy, light = LoggedSet(weight=100, reps=2), LoggedSet(weight=90, reps=10)
    top, e1rm = best_set([heavy, light])
    assert top is light
    assert e1rm == 120


def test_best_set_empty():
    assert best_set([]) == (None, 0)
    assert best_set([LoggedSet()]) == (None, 0)


def test_first_session_sets_records():
    day = DayWorkout(name="Upper A", exercises=[ex("ex_bench", (100, 8), (105, 5), name="Bench"), ex("ex_fly")])
    prs = detect_personal_records(day, {}, "kg", NOW)
    assert len(prs) == 1
    pr = prs[0]
    assert (pr.exercise_id, pr.exercise_name, pr.weight, pr.reps, pr.e1rm, pr.units) == (
        "ex_bench", "Bench", 100, 8, 127, "kg")
    assert pr.id.startswith("pr_ex_bench_")


def test_records_must_beat_prior_strictly():
    prior = PersonalRecord(id="pr_old", exercise_id="ex_bench", exercise_name="Bench",
                           date=NOW - timedelta(days=7), weight=100, reps=8, e1rm=127)
    same = DayWorkout(name="A", exercises=[ex("ex_bench", (100, 8))])
    better = DayWorkout(name="A", exercises=[ex("ex_bench", (100, 9))])
    assert detect_personal_records(same, {"ex_bench": prior}, "lbs", NOW) == []
    assert [p.e1rm for p in detect_personal_records(better, {"ex_bench": prior}, "lbs", NOW)] == [130]


def test_totals():
    day = DayWorkout(name="A", exercises=[ex("a", (100, 8), (100, 6)), ex("b", (20, 10)), ex("c")])
    assert total_volume(day) == 1600
    assert total_sets(day) == 3


def test_stats_and_next_incomplete():
    meso = Mesocycle(weeks={
        1: {1: DayWorkout(name="A", exercises=[ex("a")], completed=True),
            2: DayWorkout(name="B", exercises=[ex("b")])},
        2: {1: DayWorkout(name="A", exercises=[ex("a")]),
            2: DayWorkout(name="B")},
    })
    assert mesocycle_stats(meso) == (3, 1)
    assert next_incomplete(meso) == DayRef(week=1, day=2)
    for days in meso.weeks.values():
        for d in days.values():
            d.completed = True
    assert next_incomplete(meso) is None


def test_last_performance_takes_newest_heaviest():
    history = [
        entry(NOW, ex("ex_row")),
        entry(NOW - timedelta(days=3), ex("ex_bench", (95, 8), (100, 6))),
        entry(NOW - timedelta(days=7), ex("ex_bench", (110, 3))),
    ]
    top = last_performance(history, "ex_bench")
    assert (top.weight, top.reps) == (100, 6)
    assert last_performance(history, "ex_squat") is None


def test_progress_series_chronological():
    history = [
        entry(NOW, ex("ex_bench", (100, 8))),
        entry(NOW - timedelta(days=7), ex("ex_bench", (95, 8))),
        entry(NOW - timedelta(days=3), ex("ex_row", (80, 8))),
    ]
    labels, data = progress_series(history, "ex_bench", "weight")
    assert labels == ["2026-02-23", "2026-03-02"]
    assert data == [95, 100]
    _, e1rms = progress_series(history, "ex_bench", "e1rm")
    assert e1rms == [120, 127]


def test_repeated_exercise_in_a_day_yields_one_record():
    prior = PersonalRecord(id="pr_old", exercise_id="ex_bench", exercise_name="Bench",
                           date=NOW - timedelta(days=7), weight=100, reps=5, e1rm=117)
    day = DayWorkout(name="A", exercises=[ex("ex_bench", (200, 5)), ex("ex_bench", (120, 5))])
    prs = detect_personal_records(day, {"ex_bench": prior}, "lbs", NOW)
    assert [(p.exercise_id, p.e1rm) for p in prs] == [("ex_bench", 233)]


def test_repeated_exercise_keeps_the_later_higher_set():
    day = DayWorkout(name="A", exercises=[ex("ex_bench", (100, 5)), ex("ex_bench", (110, 5))])
    [pr] = detect_personal_records(day, {}, "lbs", NOW)
    assert (pr.weight, pr.e1rm) == (110, 128)
