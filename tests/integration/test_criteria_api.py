import pytest


@pytest.fixture
def competition(client):
    r = client.post("/api/competitions", json={"name": "Battle of the Bands", "description": "Annual"})
    assert r.status_code == 200, r.text
    return "Battle of the Bands"


def test_criteria_create_with_defaults(client, competition):
    r = client.post("/api/criteria", json={"name": " Creativity ", "competition": competition})
    assert r.status_code == 200, r.text
    assert r.json()["msg"] == "Successfully created criteria: Creativity"
    row = client.get("/api/criteria").json()[0]
    assert row["name"] == "Creativity"
    assert row["description"] is None
    assert row["max_score"] == 100
    assert row["weight"] == pytest.approx(1.0)
    assert row["competition"] == competition


def test_criteria_requires_competition(client):
    r = client.post("/api/criteria", json={"name": "Creativity"})
    assert r.status_code == 400
    assert r.json() == {"msg": "Competition is required"}
    assert client.get("/api/criteria").json() == []


def test_criteria_unknown_competition_rejected(client, competition):
    r = client.post("/api/criteria", json={"name": "Creativity", "competition": "Open Mic"})
    assert r.status_code == 400
    assert r.json() == {"msg": "Competition 'Open Mic' does not exist"}
    assert client.get("/api/criteria").json() == []


@pytest.mark.parametrize("score", [0, 101, -1])
def test_criteria_max_score_out_of_range(client, competition, score):
    r = client.post("/api/criteria", json={"name": "Creativity", "max_score": score, "competition": competition})
    assert r.status_code == 400
    assert r.json() == {"msg": "Max score must be between 1 and 100"}


@pytest.mark.parametrize("score", [1, 100])
def test_criteria_max_score_bounds_accepted(client, competition, score):
    r = client.post("/api/criteria", json={"name": "Creativity", "max_score": score, "competition": competition})
    assert r.status_code == 200
    assert client.get("/api/criteria").json()[0]["max_score"] == score


def test_criteria_name_checked_before_score(client):
    r = client.post("/api/criteria", json={"max_score": 500})
    assert r.status_code == 400
    assert r.json() == {"msg": "Name is required"}


def test_criteria_update(client, competition):
    cid = client.post(
        "/api/criteria", json={"name": "Creativity", "max_score": 40, "weight": 0.4, "competition": competition}
    ).json()["id"]
    r = client.put(
        f"/api/criteria/{cid}",
        json={"name": "Originality", "description": "Fresh ideas", "max_score": 30, "weight": 0.3, "competition": competition},
    )
    assert r.status_code == 200
    assert r.json() == {"msg": "Successfully updated criteria: Originality"}
    row = client.get("/api/criteria").json()[0]
    assert row["name"] == "Originality"
    assert row["description"] == "Fresh ideas"
    assert row["max_score"] == 30
    assert row["weight"] == pytest.approx(0.3)


def test_criteria_update_requires_competition(client, competition):
    cid = client.post("/api/criteria", json={"name": "Creativity", "competition": competition}).json()["id"]
    r = client.put(f"/api/criteria/{cid}", json={"name": "Creativity"})
    assert r.status_code == 400
    assert r.json() == {"msg": "Competition is required"}


def test_criteria_update_missing(client, competition):
    r = client.put("/api/criteria/999", json={"name": "Creativity", "competition": competition})
    assert r.status_code == 404
    assert r.json() == {"msg": "Criteria not found"}


def test_deleting_competition_removes_its_criteria(client, competition):
    client.post("/api/criteria", json={"name": "Creativity", "competition": competition})
    comp_id = client.get("/api/competitions").json()[0]["id"]
    assert client.delete(f"/api/competitions/{comp_id}").status_code == 200
    assert client.get("/api/criteria").json() == []


def test_criteria_delete(client, competition):
    cid = client.post("/api/criteria", json={"name": "Creativity", "competition": competition}).json()["id"]
    r = client.delete(f"/api/criteria/{cid}")
    assert r.status_code == 200
    assert r.json() == {"msg": "Criteria deleted successfully"}
    assert client.delete(f"/api/criteria/{cid}").status_code == 404


def test_criteria_update_keeps_score_and_weight_when_omitted(client, competition):
    cid = client.post(
        "/api/criteria", json={"name": "Creativity", "max_score": 40, "weight": 0.4, "competition": competition}
    ).json()["id"]
    r = client.put(f"/api/criteria/{cid}", json={"name": "Originality", "competition": competition})
    assert r.status_code == 200
    row = client.get("/api/criteria").json()[0]
    assert row["max_score"] == 40
    assert row["weight"] == pytest.approx(0.4)


@pytest.mark.parametrize("field", ["max_score", "weight"])
def test_criteria_rejects_boolean_numbers(client, competition, field):
    r = client.post("/api/criteria", json={"name": "Creativity", field: True, "competition": competition})
    assert r.status_code == 400
    assert r.json()["msg"].startswith(f"Invalid value for {field}")
    assert client.get("/api/criteria").json() == []
