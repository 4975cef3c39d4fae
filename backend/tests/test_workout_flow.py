from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)

PROFILE = {"trainingAge": "beginner", "daysPerWeek": 4, "style": "gym"}

def new_plan(weeks=2):
    client.put("/profile", json=PROFILE)
    r = client.post("/plans", json={"durationWeeks": weeks})
    assert r.status_code == 201
    return r.json()["id"]

def day_url(plan_id, week=1, day=1):
    return f"/plans/{plan_id}/weeks/{week}/days/{day}"

def test_checkin_trims_sets_on_poor_sleep(fresh_state, pinned_engine):
    pid = new_plan()
    r = client.post(f"{day_url(pid)}/checkin", json={"sleep": 5, "stress": 3})
    assert r.status_code == 201
    assert r.json()["adjusted"] is True
    assert {ex["targetSets"] for ex in client.get(day_url(pid)).json()["exercises"]} == {2}
    # other days are untouched
    assert {ex["targetSets"] for ex in client.get(day_url(pid, week=1, day=2)).json()["exercises"]} == {3}

    state = client.get("/state").json()
    assert len(state["dailyCheckinHistory"]) == 1
    assert state["currentView"] == {"week": 1, "day": 1}

def test_checkin_good_readiness_no_change(fresh_state, pinned_engine):
    pid = new_plan()
    r = client.post(f"{day_url(pid)}/checkin", json={"sleep": 8, "stress": 2})
    assert r.json()["adjusted"] is False
    assert {ex["targetSets"] for ex in client.get(day_url(pid)).json()["exercises"]} == {3}

def test_log_complete_and_progress(fresh_state, pinned_engine):
    pid = new_plan()
    base = day_url(pid)

    r = client.post(f"{base}/exercises/0/sets")
    assert r.status_code == 201
    assert r.json()["weight"] is None

    r = client.put(f"{base}/exercises/0/sets/0", json={"weight": 100, "rawInput": "8 r5"})
    assert r.status_code == 200
    body = r.json()
    assert body["set"] == {"weight": 100, "reps": 8, "rir": 5, "rawInput": "8 r5"}
    assert body["recommendation"] == "You were a bit light. Try increasing to 105 lbs"

    # the next set starts from the last load
    assert client.post(f"{base}/exercises/0/sets").json()["weight"] == 100
    r = client.put(f"{base}/exercises/0/sets/1", json={"rawInput": "8"})
    assert r.json()["recommendation"] == "Enter weight, reps, and RIR to get a recommendation."

    r = client.put(f"{base}/exercises/0/note", json={"note": "<b>felt strong</b>"})
    assert r.json()["note"] == "felt strong"

    r = client.post(f"{base}/complete", json={"duration": 1800})
    assert r.status_code == 200
    summary = r.json()
    assert summary["day"]["completed"] is True
    assert summary["totalVolume"] == 1600
    assert summary["totalSets"] == 2
    assert summary["newPRs"] == 1
    assert summary["volumeChange"] is None
    assert summary["mesocycleStats"] == {"total": 8, "completed": 1, "incomplete": 7}
    assert summary["nextView"] == {"week": 1, "day": 2}
    by_name = {s["exerciseName"]: s["suggestion"] for s in summary["suggestions"]}
    assert by_name["Chest Main"] == "Increase to 105 lbs for 8 reps."

    nxt = client.get(day_url(pid, week=2)).json()["exercises"][0]
    assert nxt["exerciseId"] == "ex_chest_main"
    assert nxt["targetLoad"] == 105
    assert nxt["sets"] == []

    [pr] = client.get("/records").json()
    assert (pr["exerciseId"], pr["weight"], pr["reps"], pr["e1rm"]) == ("ex_chest_main", 100, 8, 127)

    [entry] = client.get("/history").json()
    assert entry["workoutName"] == "Upper A" and entry["duration"] == 1800 and entry["planId"] == pid

    [session] = client.get("/history/exercises/ex_chest_main").json()
    assert session["note"] == "felt strong"
    assert session["sets"] == [[100, 8], [100, 8]]

    assert client.get("/progress/ex_chest_main").json()["data"] == [100]
    assert client.get("/progress/ex_chest_main", params={"metric": "e1rm"}).json()["data"] == [127]

    # a completed workout is read-only
    assert client.post(f"{base}/exercises/0/sets").status_code == 400
    assert client.post(f"{base}/complete").status_code == 400
    assert client.post(f"{base}/checkin", json={"sleep": 8, "stress": 1}).status_code == 400

def test_second_session_reports_changes(fresh_state, pinned_engine):
    pid = new_plan()
    client.post(f"{day_url(pid)}/exercises/0/sets")
    client.put(f"{day_url(pid)}/exercises/0/sets/0", json={"weight": 100, "rawInput": "8 r3"})
    client.post(f"{day_url(pid)}/complete", json={"duration": 1800})

    r = client.post(f"{day_url(pid, week=2)}/complete", json={"duration": 1200})
    summary = r.json()
    assert summary["volumeChange"] == -800
    assert summary["setsChange"] == -1
    assert summary["durationChange"] == -600
    # the deload week has nothing after it
    assert summary["suggestions"] == []
    assert len(client.get("/history").json()) == 2

def test_alternatives_and_swap(fresh_state, pinned_engine):
    pid = new_plan()
    base = day_url(pid)
    [alt] = client.get(f"{base}/exercises/0/alternatives").json()
    assert alt == {"name": "Chest Swap", "exerciseId": "ex_chest_swap", "lastWeight": None, "lastReps": None}

    r = client.post(f"{base}/exercises/0/swap", json={"alternative": "Chest Swap"})
    assert r.status_code == 200
    swapped = r.json()
    assert swapped["name"] == "Chest Swap"
    assert swapped["exerciseId"] == "ex_chest_swap"
    assert swapped["note"] == "Swapped from Chest Main."
    assert client.get(base).json()["exercises"][0]["exerciseId"] == "ex_chest_swap"

    # index 5 is Chest Accessory, which lists no alternatives
    assert client.get(f"{base}/exercises/5/alternatives").json() == []
    assert client.post(f"{base}/exercises/5/swap", json={"alternative": "Chest Swap"}).status_code == 400
    assert client.post(f"{base}/exercises/1/swap", json={"alternative": "Chest Swap"}).status_code == 400

def test_alternative_shows_last_performance(fresh_state, pinned_engine):
    pid = new_plan()
    base = day_url(pid)
    client.post(f"{base}/exercises/0/swap", json={"alternative": "Chest Swap"})
    client.post(f"{base}/exercises/0/sets")
    client.put(f"{base}/exercises/0/sets/0", json={"weight": 60, "rawInput": "10 r2"})
    client.post(f"{base}/complete")

    # week 2 still has Chest Main; its alternative now has history
    [alt] = client.get(f"{day_url(pid, week=2)}/exercises/0/alternatives").json()
    assert alt["lastWeight"] == 60 and alt["lastReps"] == 10

def test_completed_next_week_keeps_its_targets(fresh_state, pinned_engine):
    pid = new_plan()
    client.post(f"{day_url(pid, week=2)}/complete", json={"duration": 900})

    base = day_url(pid)
    client.post(f"{base}/exercises/0/sets")
    client.put(f"{base}/exercises/0/sets/0", json={"weight": 100, "rawInput": "8 r5"})
    summary = client.post(f"{base}/complete", json={"duration": 1800}).json()
    assert summary["suggestions"] == []

    nxt = client.get(day_url(pid, week=2)).json()["exercises"][0]
    assert nxt["targetLoad"] is None
    assert nxt["targetReps"] == 8
