import pytest

from models.grades import Grade
from services.advice_service import FALLBACK_MESSAGE


def put_grade(client, headers, subject_id, value, mode="simulation"):
    return client.put(f"/v1/grades/{subject_id}", params={"mode": mode}, json={"value": value}, headers=headers)


def put_completed(client, headers, subject_id, completed, mode="simulation"):
    return client.put(
        f"/v1/grades/{subject_id}/completed", params={"mode": mode}, json={"completed": completed}, headers=headers
    )


# ==========================================================
# auth / profile gate
# ==========================================================

def test_missing_token_is_rejected(client):
    assert client.get("/v1/grades/").status_code == 401


def test_unknown_token_is_rejected(client):
    r = client.get("/v1/grades/", headers={"Authorization": "Bearer nope"})
    assert r.status_code == 401


def test_bad_scheme_is_rejected(client):
    r = client.get("/v1/grades/", headers={"Authorization": "Basic abc"})
    assert r.status_code == 401


def test_incomplete_profile_is_forbidden(client, new_user_headers):
    assert client.get("/v1/grades/", headers=new_user_headers).status_code == 403


def test_me(client, auth_headers, new_user_headers):
    me = client.get("/v1/auth/me", headers=auth_headers).json()["data"]
    assert me["user_id"] == "u-1"
    assert me["profile_complete"] is True
    assert client.get("/v1/auth/me", headers=new_user_headers).json()["data"]["profile_complete"] is False


# ==========================================================
# grades
# ==========================================================

def test_empty_stats(client, auth_headers):
    body = client.get("/v1/grades/", headers=auth_headers).json()
    assert body["success"] is True
    stats = body["data"]["stats"]
    assert stats["current_average"] == 0
    assert stats["auto_average"] == 0
    assert stats["remaining_credits"] == 60
    assert stats["total_possible_credits"] == 14
    assert body["data"]["entries"] == {}


def test_simulated_grade_flow(client, auth_headers):
    r = put_grade(client, auth_headers, 1, "8").json()
    assert r["data"]["applied"] is True
    assert r["data"]["entries"]["1"] == {"grade": 8.0, "completed": False}
    assert r["data"]["stats"]["auto_average"] == pytest.approx(8.0)

    r = put_completed(client, auth_headers, 1, True).json()
    stats = r["data"]["stats"]
    assert stats["completed_credits"] == 5
    assert stats["current_average"] == pytest.approx(40 / 14)
    assert stats["projected_average"] == pytest.approx(40 / 60)

    # persisted in the simulation store between requests
    stats = client.get("/v1/grades/", headers=auth_headers).json()["data"]["stats"]
    assert stats["remaining_credits"] == 55


def test_out_of_range_grade_is_ignored(client, auth_headers):
    put_grade(client, auth_headers, 2, "7")
    for raw in ("11", "-1", "seven"):
        r = put_grade(client, auth_headers, 2, raw).json()
        assert r["success"] is True
        assert r["data"]["applied"] is False
        assert r["data"]["entries"]["2"]["grade"] == 7.0


def test_clearing_resets_completed(client, auth_headers):
    put_grade(client, auth_headers, 2, "9")
    put_completed(client, auth_headers, 2, True)
    r = put_grade(client, auth_headers, 2, "").json()
    assert r["data"]["entries"]["2"] == {"grade": 0.0, "completed": False}


def test_subject_outside_cycle(client, auth_headers):
    r = put_grade(client, auth_headers, 10, "9").json()
    assert r["success"] is False
    assert r["error"]["code"] == 404


def test_real_mode_persists_rows(client, auth_headers, db_session):
    put_grade(client, auth_headers, 3, "6.5", mode="real")
    put_completed(client, auth_headers, 3, True, mode="real")

    row = db_session.query(Grade).filter(Grade.user_id == "u-1", Grade.subject_id == 3).one()
    assert row.grade == 6.5
    assert row.completed is True

    # real and simulated grades are separate
    assert client.get("/v1/grades/", headers=auth_headers).json()["data"]["entries"] == {}
    real = client.get("/v1/grades/", params={"mode": "real"}, headers=auth_headers).json()
    assert real["data"]["entries"]["3"] == {"grade": 6.5, "completed": True}


def test_invalid_real_grade_writes_nothing(client, auth_headers, db_session):
    put_grade(client, auth_headers, 1, "42", mode="real")
    assert db_session.query(Grade).count() == 0


def test_reset_simulation(client, auth_headers):
    put_grade(client, auth_headers, 1, "8")
    assert client.delete("/v1/grades/", headers=auth_headers).json()["success"] is True
    assert client.get("/v1/grades/", headers=auth_headers).json()["data"]["entries"] == {}

    r = client.delete("/v1/grades/", params={"mode": "real"}, headers=auth_headers).json()
    assert r["success"] is False


# ==========================================================
# target comparison / advice
# ==========================================================

def test_compare_custom_target(client, auth_headers):
    put_grade(client, auth_headers, 1, "8")
    data = client.get("/v1/grades/compare", params={"target": 9}, headers=auth_headers).json()["data"]
    assert data["target"] == 9
    assert data["delta"] == pytest.approx(-1.0)
    assert data["reached"] is False


def test_compare_cohort_target_uses_latest_year(client, auth_headers):
    put_grade(client, auth_headers, 1, "10")
    params = {"grade_type": "budget", "transition": "year_I_to_II"}
    data = client.get("/v1/grades/compare", params=params, headers=auth_headers).json()["data"]
    assert data["target"] == pytest.approx(9.25)
    assert data["reached"] is True


def test_compare_rejects_out_of_range_target(client, auth_headers):
    assert client.get("/v1/grades/compare", params={"target": 12}, headers=auth_headers).status_code == 422


def test_advice(client, auth_headers, advisor):
    put_grade(client, auth_headers, 1, "9")
    put_completed(client, auth_headers, 1, True)
    put_grade(client, auth_headers, 2, "6")

    r = client.post("/v1/advice/", json={"target": 9.5}, headers=auth_headers).json()
    data = r["data"]
    assert data["advice"] == "1. Anatomy: review weekly\n2. Physiology: practice tests"
    assert data["comparison"]["target"] == 9.5
    assert data["comparison"]["auto_average"] == pytest.approx(7.5)
    # ungraded Biochemistry first, then Physiology; completed Anatomy left out
    assert [c["name"] for c in data["candidates"]] == ["Biochemistry", "Physiology"]
    assert "Target Average: 9.50" in advisor.prompts[0]


def test_advice_failure_returns_fallback(client, auth_headers, advisor):
    advisor.fail = True
    r = client.post("/v1/advice/", json={}, headers=auth_headers).json()
    assert r["success"] is True
    assert r["data"]["advice"] == FALLBACK_MESSAGE


def test_out_of_range_stored_grade_is_skipped(client, auth_headers, db_session):
    db_session.add_all([
        Grade(user_id="u-1", subject_id=1, grade=12, completed=True),
        Grade(user_id="u-1", subject_id=2, grade=8, completed=False),
    ])
    db_session.commit()

    r = client.get("/v1/grades/", params={"mode": "real"}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["data"]["entries"] == {"2": {"grade": 8.0, "completed": False}}
