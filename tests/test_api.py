from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.attendance_tracker.attendance_tracker.core.exceptions import StorageError
from src.attendance_tracker.attendance_tracker.main import create_app

HEADERS = {"X-Student-Id": "stu-1"}


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    return app.test_client()


@pytest.fixture
def subject_id(client):
    resp = client.post("/api/subjects", json={"name": "Mathematics", "code": "MATH101"}, headers=HEADERS)
    assert resp.status_code == 201
    return resp.get_json()["subject"]["subject_id"]


def test_identity_header_is_required(client):
    resp = client.get("/api/attendance/summary")
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_list_subjects(client, subject_id):
    resp = client.get("/api/subjects", headers=HEADERS)
    assert resp.get_json()["subjects"] == [{"subject_id": subject_id, "name": "Mathematics", "code": "MATH101"}]


def test_record_conflict_then_overwrite_flow(client, subject_id):
    payload = {"subject_id": subject_id, "date": "2024-01-10", "status": "present"}

    resp = client.post("/api/attendance", json=payload, headers=HEADERS)
    assert resp.status_code == 201
    assert resp.get_json()["outcome"] == "created"

    resp = client.get(f"/api/attendance/conflict?subject_id={subject_id}&date=2024-01-10", headers=HEADERS)
    assert resp.get_json()["exists"] is True

    resp = client.post("/api/attendance", json={**payload, "status": "absent"}, headers=HEADERS)
    assert resp.status_code == 409
    assert resp.get_json()["existing"]["status"] == "present"

    resp = client.post("/api/attendance", json={**payload, "status": "absent", "overwrite": False}, headers=HEADERS)
    assert resp.status_code == 200
    assert resp.get_json()["outcome"] == "unchanged"

    resp = client.post("/api/attendance", json={**payload, "status": "absent", "overwrite": True}, headers=HEADERS)
    assert resp.get_json()["outcome"] == "updated"

    (item,) = client.get("/api/attendance/summary", headers=HEADERS).get_json()["summary"]
    assert item["classes_attended"] == 0
    assert item["total_classes"] == 1
    assert item["risk_tier"] == "Critical"


def test_record_rejects_missing_subject_and_future_date(client, subject_id):
    resp = client.post("/api/attendance", json={"date": "2024-01-10", "status": "present"}, headers=HEADERS)
    assert resp.status_code == 400

    future = (date.today() + timedelta(days=30)).strftime("%Y-%m-%d")
    resp = client.post(
        "/api/attendance", json={"subject_id": subject_id, "date": future, "status": "present"}, headers=HEADERS
    )
    assert resp.status_code == 400


def test_summary_and_trend(client, subject_id):
    for day, status in [("2024-01-01", "present"), ("2024-01-02", "absent"), ("2024-01-03", "present")]:
        client.post("/api/attendance", json={"subject_id": subject_id, "date": day, "status": status}, headers=HEADERS)

    (item,) = client.get("/api/attendance/summary", headers=HEADERS).get_json()["summary"]
    assert item["attendance_percentage"] == 66.67
    assert item["risk_tier"] == "Warning"

    body = client.get(f"/api/attendance/trend/{subject_id}", headers=HEADERS).get_json()
    assert [p["daily_percentage"] for p in body["points"]] == [100.0, 0.0, 100.0]
    assert body["chart"]["labels"] == ["2024-01-01", "2024-01-02", "2024-01-03"]


def test_trend_for_unenrolled_subject_is_bad_request(client, subject_id):
    resp = client.get(f"/api/attendance/trend/{subject_id}", headers={"X-Student-Id": "stu-2"})
    assert resp.status_code == 400


def test_remove_subject(client, subject_id):
    assert client.delete(f"/api/subjects/{subject_id}", headers=HEADERS).status_code == 200
    assert client.delete(f"/api/subjects/{subject_id}", headers=HEADERS).status_code == 404


def test_storage_error_maps_to_service_unavailable(client, subject_id, attendance_repo):
    def broken(student_id):
        raise StorageError("Record store is unreachable")

    attendance_repo.query_by_student = broken

    resp = client.get("/api/attendance/summary", headers=HEADERS)
    assert resp.status_code == 503


def test_record_requires_status(client, subject_id, attendance_repo):
    resp = client.post("/api/attendance", json={"subject_id": subject_id, "date": "2024-01-10"}, headers=HEADERS)

    assert resp.status_code == 400
    assert attendance_repo.query_by_student("stu-1") == []


@pytest.mark.parametrize("bad_id", [1.9, True, "1.0", "abc", [1]])
def test_record_rejects_malformed_subject_id(client, subject_id, attendance_repo, bad_id):
    resp = client.post(
        "/api/attendance",
        json={"subject_id": bad_id, "date": "2024-01-10", "status": "absent"},
        headers=HEADERS,
    )

    assert resp.status_code == 400
    assert attendance_repo.query_by_student("stu-1") == []


def test_record_accepts_digit_string_subject_id(client, subject_id):
    resp = client.post(
        "/api/attendance",
        json={"subject_id": str(subject_id), "date": "2024-01-10", "status": "absent"},
        headers=HEADERS,
    )
    assert resp.status_code == 201


def test_conflict_check_rejects_non_numeric_subject(client, subject_id):
    resp = client.get("/api/attendance/conflict?subject_id=1.5&date=2024-01-10", headers=HEADERS)
    assert resp.status_code == 400
