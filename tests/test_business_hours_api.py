from app.services.business import WEEKDAYS


def _uniform_payload():
    return {
        day: {"is_closed": False, "time_slots": [{"open_time": "11:00", "close_time": "22:00", "last_order_time": "21:30"}]}
        for day in WEEKDAYS
    }


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_defaults(client):
    response = client.get("/api/v1/business-hours/defaults")
    assert response.status_code == 200
    body = response.json()
    assert set(body) == set(WEEKDAYS)
    assert body["monday"] == {"is_closed": False, "time_slots": []}


def test_time_options(client):
    response = client.get("/api/v1/business-hours/time-options")
    assert response.status_code == 200
    assert len(response.json()) == 48


def test_sanitize_partial_payload(client):
    response = client.post("/api/v1/business-hours/sanitize", json={
        "business_hours": {"monday": {"is_closed": True, "time_slots": None}},
    })
    assert response.status_code == 200
    body = response.json()
    assert body["business_hours"]["monday"] == {"is_closed": True, "time_slots": []}
    assert body["business_hours"]["sunday"] == {"is_closed": False, "time_slots": []}
    assert body["common_hours"]["closed_days"] == ["monday"]


def test_sanitize_missing_body_field(client):
    response = client.post("/api/v1/business-hours/sanitize", json={})
    assert response.status_code == 200
    assert len(response.json()["business_hours"]) == 7


def test_toggle_then_apply(client):
    response = client.post("/api/v1/business-hours/closed-days/sunday/toggle", json={"business_hours": _uniform_payload()})
    assert response.status_code == 200
    hours = response.json()["business_hours"]

    response = client.post("/api/v1/business-hours/common-hours/apply", json={
        "business_hours": hours, "field": "open_time", "value": "10:00",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["business_hours"]["sunday"] == {"is_closed": True, "time_slots": []}
    assert body["business_hours"]["monday"]["time_slots"][0]["open_time"] == "10:00"
    assert body["common_hours"] == {
        "open_time": "10:00", "close_time": "22:00", "last_order_time": "21:30", "closed_days": ["sunday"],
    }


def test_apply_rejects_bad_time(client):
    response = client.post("/api/v1/business-hours/common-hours/apply", json={
        "business_hours": _uniform_payload(), "field": "open_time", "value": "25:00",
    })
    assert response.status_code == 422


def test_unknown_day_path(client):
    response = client.post("/api/v1/business-hours/closed-days/someday/toggle", json={})
    assert response.status_code == 422


def test_slot_endpoints(client):
    url = "/api/v1/business-hours/days/saturday/slots"
    hours = _uniform_payload()
    for _ in range(4):
        response = client.post(url, json={"business_hours": hours})
        assert response.status_code == 200
        hours = response.json()["business_hours"]
    assert len(hours["saturday"]["time_slots"]) == 3

    response = client.put(f"{url}/2", json={"business_hours": hours, "field": "close_time", "value": "23:30"})
    assert response.status_code == 200
    hours = response.json()["business_hours"]
    assert hours["saturday"]["time_slots"][2]["close_time"] == "23:30"

    response = client.request("DELETE", f"{url}/0", json={"business_hours": hours})
    assert response.status_code == 200
    hours = response.json()["business_hours"]
    assert len(hours["saturday"]["time_slots"]) == 2
    assert hours["saturday"]["time_slots"][1]["close_time"] == "23:30"

    response = client.request("DELETE", url, json={"business_hours": hours})
    assert response.status_code == 200
    assert response.json()["business_hours"]["saturday"] == {"is_closed": False, "time_slots": []}


def test_slot_index_out_of_range(client):
    response = client.put(
        "/api/v1/business-hours/days/monday/slots/3",
        json={"business_hours": _uniform_payload(), "field": "open_time", "value": "10:00"},
    )
    assert response.status_code == 400

    response = client.request("DELETE", "/api/v1/business-hours/days/monday/slots/1", json={"business_hours": _uniform_payload()})
    assert response.status_code == 400


def test_legacy_parse_and_generate(client):
    response = client.post("/api/v1/business-hours/legacy/parse", json={"text": "定休日：月曜日、火曜日\n11:00～22:00\nL.O. 21:30"})
    assert response.status_code == 200
    body = response.json()
    assert body["common_hours"]["closed_days"] == ["monday", "tuesday"]
    assert body["business_hours"]["friday"]["time_slots"] == [
        {"open_time": "11:00", "close_time": "22:00", "last_order_time": "21:30"},
    ]

    response = client.post("/api/v1/business-hours/legacy/generate", json={"business_hours": body["business_hours"]})
    assert response.status_code == 200
    assert response.json()["text"] == "営業時間: 11:00-22:00\nラストオーダー: 21:30\n定休日: 月曜日、火曜日"


def test_display(client):
    response = client.post("/api/v1/business-hours/display", json={"business_hours": _uniform_payload()})
    assert response.status_code == 200
    assert response.json()["lines"][0] == "月曜日: 11:00-22:00(L.O.21:30)"


def test_open_check(client):
    url = "/api/v1/business-hours/open-check"
    payload = _uniform_payload()
    assert client.post(url, json={"business_hours": payload, "day": "monday", "time": "21:00"}).json()["is_open"] is True
    assert client.post(url, json={"business_hours": payload, "day": "monday", "time": "21:45"}).json()["is_open"] is False
    assert client.post(url, json={"business_hours": payload, "day": "monday"}).json()["is_open"] is True


def test_sanitize_non_mapping_payload(client):
    response = client.post("/api/v1/business-hours/sanitize", json={"business_hours": "11:00-22:00"})
    assert response.status_code == 200
    assert all(d == {"is_closed": False, "time_slots": []} for d in response.json()["business_hours"].values())


def test_clear_last_order_time(client):
    response = client.put(
        "/api/v1/business-hours/days/monday/slots/0",
        json={"business_hours": _uniform_payload(), "field": "last_order_time", "value": ""},
    )
    assert response.status_code == 200
    assert response.json()["business_hours"]["monday"]["time_slots"][0]["last_order_time"] == ""

    response = client.post("/api/v1/business-hours/display", json={"business_hours": response.json()["business_hours"]})
    assert response.json()["lines"][0] == "月曜日: 11:00-22:00"


def test_only_last_order_time_can_be_cleared(client):
    response = client.post("/api/v1/business-hours/common-hours/apply", json={
        "business_hours": _uniform_payload(), "field": "open_time", "value": "",
    })
    assert response.status_code == 422


def test_schedule_with_bad_slot_time_is_rejected(client):
    payload = _uniform_payload()
    payload["tuesday"]["time_slots"][0]["close_time"] = "24:30"
    response = client.post("/api/v1/business-hours/sanitize", json={"business_hours": payload})
    assert response.status_code == 422


def test_open_check_with_single_digit_hour(client):
    payload = _uniform_payload()
    payload["monday"]["time_slots"][0]["open_time"] = "9:00"
    response = client.post("/api/v1/business-hours/open-check", json={"business_hours": payload, "day": "monday", "time": "10:00"})
    assert response.status_code == 200
    assert response.json()["is_open"] is True
