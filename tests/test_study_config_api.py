from models.study import UserStudyConfig


def test_options(client):
    data = client.get("/v1/study-config/options").json()["data"]
    assert len(data["academic_years"]) == 5
    assert [s["semester_name"] for s in data["semesters"]] == ["Semester 1", "Semester 2"]
    assert len(data["study_cycles"]) == 4


def test_read_config(client, auth_headers, new_user_headers):
    assert client.get("/v1/study-config/", headers=auth_headers).json()["data"]["study_cycle_id"] == 1
    r = client.get("/v1/study-config/", headers=new_user_headers).json()
    assert r["success"] is False


def test_pick_semester_cycle(client, new_user_headers, db_session):
    r = client.put("/v1/study-config/", json={"year": 1, "semester": 2}, headers=new_user_headers).json()
    assert r["success"] is True
    assert r["data"]["study_cycle_id"] == 2

    assert db_session.query(UserStudyConfig).filter(UserStudyConfig.user_id == "u-2").one().study_cycle_id == 2
    assert client.get("/v1/auth/me", headers=new_user_headers).json()["data"]["profile_complete"] is True


def test_rotation_years_ignore_semester(client, new_user_headers):
    r = client.put("/v1/study-config/", json={"year": 4, "semester": 2}, headers=new_user_headers).json()
    assert r["data"]["study_cycle_id"] == 3
    assert r["data"]["rotation"] is None

    subjects = client.get("/v1/subjects/", headers=new_user_headers).json()["data"]
    assert [s["subject_name"] for s in subjects] == ["Surgery"]


def test_rotation_picks_matching_cycle(client, new_user_headers):
    r = client.put("/v1/study-config/", json={"year": 4, "rotation": "B"}, headers=new_user_headers).json()
    assert r["data"]["study_cycle_id"] == 4
    assert r["data"]["rotation"] == "B"

    r = client.put("/v1/study-config/", json={"year": 4, "rotation": "Z"}, headers=new_user_headers).json()
    assert r["data"]["study_cycle_id"] == 3


def test_semester_required_for_early_years(client, new_user_headers):
    r = client.put("/v1/study-config/", json={"year": 1}, headers=new_user_headers).json()
    assert r["success"] is False
    assert r["error"]["code"] == 400


def test_unknown_selection(client, new_user_headers):
    r = client.put("/v1/study-config/", json={"year": 2, "semester": 1}, headers=new_user_headers).json()
    assert r["error"]["message"] == "Invalid academic selection"

    r = client.put("/v1/study-config/", json={"year": 5}, headers=new_user_headers).json()
    assert r["error"]["message"] == "No study cycle found for selected year"


def test_switching_cycle_updates_existing_config(client, auth_headers, db_session):
    client.put("/v1/study-config/", json={"year": 1, "semester": 2}, headers=auth_headers)
    rows = db_session.query(UserStudyConfig).filter(UserStudyConfig.user_id == "u-1").all()
    assert len(rows) == 1
    assert rows[0].study_cycle_id == 2
