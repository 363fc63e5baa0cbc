from __future__ import annotations

import pytest


def _submit(client, **body):
    payload = {"childId": "child-1", "dates": ["2024-02-05"], "isRecurring": False}
    payload.update(body)
    return client.post("/api/absence", json=payload)


def test_ping(client):
    resp = client.get("/api/ping")
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "ping"}


def test_create_absence_returns_first_record_and_batch(client):
    resp = _submit(client, dates=["2024-03-01", "2024-03-02"], reason="trip", isRecurring=True)

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["success"] is True
    assert data["absenceRecord"]["date"] == "2024-03-01"
    assert data["absenceRecord"]["childName"] == "Emma Johnson"
    assert data["absenceRecord"]["parentName"] == "Sarah Johnson"
    assert [r["date"] for r in data["absenceRecords"]] == ["2024-03-01", "2024-03-02"]
    for r in data["absenceRecords"]:
        assert r["reason"] == "trip"
        assert r["recurringDates"] == ["2024-03-01", "2024-03-02"]
        assert r["createdAt"].endswith("Z")


def test_create_absence_validation_error(client):
    resp = _submit(client, dates=[])

    assert resp.status_code == 400
    data = resp.get_json()
    assert data["success"] is False
    assert "error" in data


def test_create_absence_without_body(client):
    resp = client.post("/api/absence", data="not json", content_type="text/plain")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_create_absence_unknown_child(client, container):
    resp = _submit(client, childId="child-99")

    assert resp.status_code == 404
    assert resp.get_json() == {"success": False, "error": "Child not found"}
    assert container.absences_repo.count() == 0


def test_unexpected_failure_returns_generic_500(client, container, monkeypatch):
    def boom(**kwargs):
        raise RuntimeError("db exploded")

    monkeypatch.setattr(container.absence_service, "submit", boom)

    resp = _submit(client)

    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "error": "Internal server error"}


def test_child_absences_round_trip(client):
    created = _submit(client, dates=["2024-02-05", "2024-02-12"]).get_json()["absenceRecords"]

    resp = client.get("/api/absence/child/child-1")

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["success"] is True
    assert [a["id"] for a in data["absences"]] == [r["id"] for r in created]

    empty = client.get("/api/absence/child/child-2").get_json()
    assert empty == {"success": True, "absences": []}


def test_notifications_and_mark_read(client):
    _submit(client, dates=["2024-02-05", "2024-02-06"])

    data = client.get("/api/absence/notifications").get_json()
    assert data["success"] is True
    assert data["unreadCount"] == 2
    assert all(n["isRead"] is False for n in data["notifications"])

    target = data["notifications"][0]["id"]
    first = client.put(f"/api/absence/notifications/{target}/read")
    second = client.put(f"/api/absence/notifications/{target}/read")

    assert first.status_code == second.status_code == 200
    assert first.get_json() == second.get_json()
    marked = [n for n in second.get_json()["notifications"] if n["id"] == target]
    assert marked[0]["isRead"] is True
    assert client.get("/api/absence/notifications").get_json()["unreadCount"] == 1


def test_mark_read_unknown_notification(client):
    resp = client.put("/api/absence/notifications/notif-nope/read")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_attendance_reflects_new_absences_immediately(client):
    # month is zero-based on the wire: 1 == February
    before = client.get("/api/attendance/child/child-1?month=1&year=2024").get_json()["stats"]
    assert before["attendancePercentage"] == 100
    assert before["presentDays"] == before["totalDays"] == 21

    _submit(client, dates=["2024-02-05", "2024-02-12"])

    resp = client.get("/api/attendance/child/child-1?month=1&year=2024")
    assert resp.status_code == 200
    stats = resp.get_json()["stats"]
    assert stats == {
        "childId": "child-1",
        "childName": "Emma Johnson",
        "month": 1,
        "year": 2024,
        "totalDays": 21,
        "presentDays": 19,
        "absentDays": 2,
        "lateDays": 0,
        "attendancePercentage": 90,
        "absenceDates": ["2024-02-05", "2024-02-12"],
    }


def test_attendance_unknown_child_uses_placeholder_name(client):
    stats = client.get("/api/attendance/child/child-404?month=1&year=2024").get_json()["stats"]
    assert stats["childName"] == "Unknown Child"


def test_attendance_bad_query_values(client):
    assert client.get("/api/attendance/child/child-1?month=feb").status_code == 400
    assert client.get("/api/attendance/child/child-1?month=12&year=2024").status_code == 400


@pytest.mark.parametrize("body", [["child-1", "2024-02-05"], "child-1", 42])
def test_create_absence_non_object_body(client, container, body):
    resp = client.post("/api/absence", json=body)

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "error": "Request body must be a JSON object"}
    assert container.absences_repo.count() == 0


def test_create_absence_rejects_unpadded_date(client, container):
    resp = _submit(client, dates=["2024-2-5"])

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert container.absences_repo.count() == 0


def test_create_absence_null_recurring_flag(client):
    resp = _submit(client, isRecurring=None)

    assert resp.status_code == 200
    assert resp.get_json()["absenceRecord"]["isRecurring"] is False
