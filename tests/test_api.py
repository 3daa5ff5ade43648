import pytest

from app.core.config import get_settings
from app.services.events import event_bus

from helpers import BACKSQUAT, BENCH, DEADLIFT, program_payload

API = "/api/v1"


async def _create_active_program(client, name="PPL", days=None):
    days = days or {1: [BENCH], 2: [DEADLIFT], 3: [BACKSQUAT]}
    response = await client.post(f"{API}/programs", json=program_payload(name, days))
    assert response.status_code == 201
    program = response.json()
    response = await client.post(f"{API}/programs/{program['id']}/activate")
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get(f"{API}/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"

    response = await client.get(f"{API}/health/ready")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "database": get_settings().database_backend,
        "exercises": 20,
        "catalog_seeded": True,
    }


@pytest.mark.asyncio
async def test_readiness_reports_empty_catalog(client):
    await client.post(f"{API}/data/import", json={"version": 1, "data": {}})
    response = await client.get(f"{API}/health/ready")
    assert response.status_code == 503
    assert response.json()["catalog_seeded"] is False
    assert response.json()["exercises"] == 0


@pytest.mark.asyncio
async def test_exercise_catalog_endpoints(client):
    response = await client.get(f"{API}/exercises")
    assert response.status_code == 200
    assert len(response.json()) == 20

    response = await client.get(f"{API}/exercises", params={"muscle_group": "chest"})
    assert {e["muscle_group"] for e in response.json()} == {"chest"}

    grouped = (await client.get(f"{API}/exercises/grouped")).json()
    assert set(grouped) == {"legs", "chest", "back", "shoulders", "arms"}

    response = await client.post(f"{API}/exercises", json={"name": "Sled Push", "muscle_group": "legs"})
    assert response.status_code == 201
    created = response.json()
    assert created["is_custom"] is True

    response = await client.post(f"{API}/exercises", json={"name": "sled push", "muscle_group": "legs"})
    assert response.status_code == 422
    assert response.json()["detail"] == "An exercise with this name already exists"

    response = await client.patch(f"{API}/exercises/{created['id']}/notes", json={"notes": "Low handles"})
    assert response.json()["notes"] == "Low handles"

    assert (await client.delete(f"{API}/exercises/{created['id']}")).status_code == 204
    assert (await client.get(f"{API}/exercises/{created['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_ppl_rotation_through_the_api(client):
    program = await _create_active_program(client)
    assert program["is_active"] is True
    assert program["current_workout"] == 1

    seen = []
    for exercise_id in [BENCH, DEADLIFT, BACKSQUAT]:
        preview = (await client.get(f"{API}/sessions/preview")).json()
        seen.append(preview["workout_number"])
        assert preview["workout"]["exercises"][0]["exercise_id"] == exercise_id

        response = await client.post(f"{API}/sessions", json={"program_id": program["id"]})
        assert response.status_code == 201
        session = response.json()
        response = await client.post(
            f"{API}/sessions/{session['id']}/sets",
            json={"exercise_id": exercise_id, "weight": 100, "reps": 5},
        )
        assert response.status_code == 201
        response = await client.post(f"{API}/sessions/{session['id']}/finish")
        assert response.json()["is_complete"] is True

    assert seen == [1, 2, 3]
    active = (await client.get(f"{API}/programs/active")).json()
    assert active["current_workout"] == 1


@pytest.mark.asyncio
async def test_session_errors_map_to_status_codes(client):
    program = await _create_active_program(client)
    session = (await client.post(f"{API}/sessions", json={"program_id": program["id"]})).json()

    response = await client.post(f"{API}/sessions", json={"program_id": program["id"]})
    assert response.status_code == 409
    assert response.json()["error"] == "ConstraintError"

    response = await client.post(
        f"{API}/sessions/{session['id']}/sets",
        json={"exercise_id": BENCH, "weight": 0, "reps": 8},
    )
    assert response.status_code == 422
    assert response.json()["detail"] == "Please enter valid weight and reps"
    assert (await client.get(f"{API}/sessions/{session['id']}/sets")).json() == []

    assert (await client.get(f"{API}/sessions/999")).status_code == 404
    assert (await client.post(f"{API}/programs/999/activate")).status_code == 404


@pytest.mark.asyncio
async def test_empty_workout_slot_returns_conflict(client):
    program = await _create_active_program(client, "Gap", {2: [BENCH]})
    response = await client.post(f"{API}/sessions", json={"program_id": program["id"]})
    assert response.status_code == 409
    assert response.json()["error"] == "EmptyWorkoutError"
    assert (await client.get(f"{API}/sessions/active")).json() is None


@pytest.mark.asyncio
async def test_edit_delete_and_cancel(client):
    program = await _create_active_program(client)
    session = (await client.post(f"{API}/sessions", json={"program_id": program["id"]})).json()
    url = f"{API}/sessions/{session['id']}/sets"
    first = (await client.post(url, json={"exercise_id": BENCH, "weight": 60, "reps": 8})).json()
    second = (await client.post(url, json={"exercise_id": BENCH, "weight": 60, "reps": 6})).json()

    response = await client.patch(f"{API}/sets/{first['id']}", json={"exercise_id": BENCH, "weight": 65, "reps": 7})
    assert response.status_code == 200
    assert response.json()["timestamp"] == first["timestamp"]

    assert (await client.delete(f"{API}/sets/{second['id']}")).status_code == 204
    sets = (await client.get(url)).json()
    assert [(s["id"], s["weight"], s["reps"]) for s in sets] == [(first["id"], 65.0, 7)]

    assert (await client.delete(f"{API}/sessions/{session['id']}")).status_code == 204
    assert (await client.get(f"{API}/sessions/active")).json() is None
    assert (await client.get(f"{API}/sessions/{session['id']}")).status_code == 404
    assert (await client.get(f"{API}/programs/{program['id']}")).json()["current_workout"] == 1


@pytest.mark.asyncio
async def test_history_and_last_time(client):
    program = await _create_active_program(client, "Bench", {1: [BENCH]})
    session = (await client.post(f"{API}/sessions", json={"program_id": program["id"]})).json()
    for weight, reps in [(60, 8), (60, 6), (70, 4)]:
        await client.post(
            f"{API}/sessions/{session['id']}/sets",
            json={"exercise_id": BENCH, "weight": weight, "reps": reps},
        )
    await client.post(f"{API}/sessions/{session['id']}/finish")

    history = (await client.get(f"{API}/exercises/{BENCH}/history")).json()
    assert history["exercise"] == {"id": BENCH, "name": "Flat Bench Press"}
    [group] = history["sessions"]
    assert group["program_name"] == "Bench"
    assert group["summary"] == "70kg × 4 reps and 60kg × 8, 6 reps"
    assert group["weight_groups"] == [{"weight": 70.0, "reps": [4]}, {"weight": 60.0, "reps": [8, 6]}]

    params = {"program_id": program["id"], "workout_number": 1, "exercise_id": BENCH}
    last = (await client.get(f"{API}/sessions/last-time", params=params)).json()
    assert last["session_id"] == session["id"]
    assert last["summary"] == group["summary"]

    params = {"program_id": program["id"], "workout_number": 1}
    last_completed = (await client.get(f"{API}/sessions/last-completed", params=params)).json()
    assert len(last_completed["sets"]) == 3

    response = await client.delete(f"{API}/exercises/{BENCH}")
    assert response.status_code == 409
    assert response.json()["detail"] == "This exercise has workout history and cannot be deleted"


@pytest.mark.asyncio
async def test_export_import_round_trip(client):
    program = await _create_active_program(client)
    session = (await client.post(f"{API}/sessions", json={"program_id": program["id"]})).json()
    await client.post(
        f"{API}/sessions/{session['id']}/sets",
        json={"exercise_id": BENCH, "weight": 80, "reps": 5},
    )

    exported = (await client.get(f"{API}/data/export")).json()
    assert exported["version"] == 1
    assert set(exported["data"]) == {"exercises", "programs", "workoutSessions", "sets"}
    assert exported["data"]["workoutSessions"][0]["isComplete"] is False

    await client.delete(f"{API}/sessions/{session['id']}")
    await client.delete(f"{API}/programs/{program['id']}")

    preview = (await client.post(f"{API}/data/import/preview", json=exported)).json()
    assert preview == {"exercises": 20, "programs": 1, "workoutSessions": 1, "sets": 1}

    response = await client.post(f"{API}/data/import", json=exported)
    assert response.status_code == 200

    active_session = (await client.get(f"{API}/sessions/active")).json()
    assert active_session["id"] == session["id"]
    sets = (await client.get(f"{API}/sessions/{session['id']}/sets")).json()
    assert [(s["exercise_id"], s["weight"], s["reps"]) for s in sets] == [(BENCH, 80.0, 5)]
    assert (await client.get(f"{API}/programs/active")).json()["id"] == program["id"]


@pytest.mark.asyncio
async def test_bad_import_is_rejected_and_changes_nothing(client):
    await _create_active_program(client)
    response = await client.post(f"{API}/data/import", json={"data": {"exercises": []}})
    assert response.status_code == 400
    assert response.json()["error"] == "FormatError"
    assert len((await client.get(f"{API}/exercises")).json()) == 20
    assert len((await client.get(f"{API}/programs")).json()) == 1


@pytest.mark.asyncio
async def test_state_snapshot_revision_moves_after_mutations(client):
    before = (await client.get(f"{API}/state")).json()
    assert before["active_program"] is None
    assert before["active_workout"] is None
    assert len(before["exercises"]) == 20

    received = []
    unsubscribe = event_bus.subscribe(received.append)
    try:
        program = await _create_active_program(client)
        await client.post(f"{API}/sessions", json={"program_id": program["id"]})
    finally:
        unsubscribe()

    after = (await client.get(f"{API}/state")).json()
    assert after["revision"] == before["revision"] + 3
    assert after["active_program"]["id"] == program["id"]
    assert after["active_workout"]["workout_number"] == 1
    assert [e.kind.value for e in received] == ["programs", "programs", "session"]


@pytest.mark.asyncio
async def test_import_with_out_of_range_workout_day_is_refused(client):
    await _create_active_program(client)
    document = {
        "version": 1,
        "data": {
            "exercises": [{"id": BENCH, "name": "Flat Bench Press", "muscleGroup": "chest"}],
            "programs": [
                {
                    "id": 1,
                    "name": "Broken",
                    "workouts": [{"workoutNumber": 9, "exercises": [{"exerciseId": BENCH, "targetSets": 3}]}],
                }
            ],
        },
    }
    response = await client.post(f"{API}/data/import", json=document)
    assert response.status_code == 400

    assert (await client.get(f"{API}/state")).status_code == 200
    programs = await client.get(f"{API}/programs")
    assert programs.status_code == 200
    assert [p["name"] for p in programs.json()] == ["PPL"]
