"""Weight Range Route — verifies POST /weight-range end to end.

Invariants:
    - Valid adult input → 200, valid=true, usage_count incremented
    - Out-of-domain numbers → 200, valid=false, counter untouched
    - Malformed bodies → 400 VALIDATION_ERROR
"""

import pytest


def _body(**overrides):
    body = {
        "sex": "male",
        "age_years": 25,
        "height_feet": 5,
        "height_inches": 7,
        "bone_structure": "medium",
    }
    body.update(overrides)
    return body


async def test_valid_adult_request_returns_result_and_counts(client, memory_store):
    res = await client.post("/weight-range", json=_body())
    assert res.status_code == 200
    data = res.json()
    assert data["valid"] is True
    assert data["usage_count"] == 1
    assert data["invalid_field"] is None
    result = data["result"]
    assert result["base_hamwi_weight_lbs"] == 148
    assert result["min_healthy_weight_lbs"] == pytest.approx(136.16)
    assert result["max_healthy_weight_lbs"] == pytest.approx(159.84)
    assert result["health_status"] == "partially_outside"
    assert result["health_status_label"] == "Partially Outside Standard BMI Range"
    assert result["bmi_classification"] == "Normal"
    assert memory_store.count == 1


async def test_minor_request_returns_result_without_counting(client, memory_store):
    res = await client.post("/weight-range", json=_body(age_years=16))
    data = res.json()
    assert data["valid"] is True
    assert data["usage_count"] is None
    assert memory_store.count is None


async def test_out_of_domain_input_is_valid_false_not_error(client, memory_store):
    res = await client.post("/weight-range", json=_body(height_inches=12))
    assert res.status_code == 200
    data = res.json()
    assert data["valid"] is False
    assert data["result"] is None
    assert data["invalid_field"] == "height_inches"
    assert memory_store.writes == 0


async def test_api_prefix_route(client):
    res = await client.post("/api/weight-range", json=_body(sex="female"))
    assert res.status_code == 200
    assert res.json()["result"]["base_hamwi_weight_lbs"] == 135


async def test_bone_structure_defaults_to_medium(client):
    body = _body()
    del body["bone_structure"]
    res = await client.post("/weight-range", json=body)
    result = res.json()["result"]
    assert result["adjusted_frame_weight_lbs"] == result["base_hamwi_weight_lbs"]


async def test_unknown_sex_is_validation_error(client):
    res = await client.post("/weight-range", json=_body(sex="other"))
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"] == "body.sex" for d in error["details"])


async def test_non_numeric_height_is_validation_error(client):
    res = await client.post("/weight-range", json=_body(height_feet="tall"))
    assert res.status_code == 400
