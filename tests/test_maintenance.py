from datetime import datetime, timedelta

from facility_service.app.schemas.maintenance_assets.maintenance_schedule_schemas import (
    MaintenanceScheduleComplete, MaintenanceScheduleCreate)
from facility_service.app.services.maintenance_assets import maintenance_schedule_service
from facility_service.app.services.scheduler.maintenance_scheduler import mark_overdue_schedules
from shared.helpers.date_helper import add_interval, utc_now


def make_schedule(db, asset, scheduled_date, **fields):
    return maintenance_schedule_service.create_schedule(db, MaintenanceScheduleCreate(
        asset_id=asset.id, title="Quarterly service", scheduled_date=scheduled_date, **fields))


def test_add_interval_clamps_to_month_end():
    assert add_interval(datetime(2024, 1, 1), 1, "months") == datetime(2024, 2, 1)
    assert add_interval(datetime(2024, 1, 31), 1, "months") == datetime(2024, 2, 29)
    assert add_interval(datetime(2024, 1, 1), 2, "weeks") == datetime(2024, 1, 15)


def test_create_schedule_defaults(client, asset):
    response = client.post("/api/maintenance-schedules/", json={
        "asset_id": str(asset.id), "title": "Inspect", "scheduled_date": "2030-06-01T10:00:00"})

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "scheduled"
    assert data["priority"] == "medium"


def test_frequency_requires_unit(client, asset):
    response = client.post("/api/maintenance-schedules/", json={
        "asset_id": str(asset.id), "title": "Inspect", "scheduled_date": "2030-06-01T10:00:00", "frequency": 2})

    assert response.status_code == 422
    assert "frequency_unit" in response.json()["data"]


def test_completing_recurring_schedule_books_next_one(client, admin, db, asset):
    schedule = make_schedule(db, asset, datetime(2024, 1, 1), frequency=1, frequency_unit="months")

    response = client.post(f"/api/maintenance-schedules/{schedule.id}/complete", json={
        "completion_date": "2024-01-15T12:00:00",
        "completion_notes": "Replaced filters",
        "completed_by": str(admin.id),
    })

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["completed"]["status"] == "completed"
    assert data["completed"]["completion_notes"] == "Replaced filters"
    assert data["completed"]["completed_by"] == str(admin.id)
    assert data["next_schedule"]["status"] == "scheduled"
    assert data["next_schedule"]["scheduled_date"] == "2024-02-01T00:00:00"
    assert data["next_schedule"]["completion_date"] is None
    assert data["next_schedule"]["frequency"] == 1

    schedules = client.get(f"/api/maintenance-schedules/asset/{asset.id}").json()["data"]
    assert len(schedules) == 2


def test_completing_twice_is_a_conflict(client, admin, db, asset):
    schedule = make_schedule(db, asset, datetime(2024, 1, 1), frequency=1, frequency_unit="months")
    payload = {"completion_date": "2024-01-15T12:00:00", "completed_by": str(admin.id)}

    first = client.post(f"/api/maintenance-schedules/{schedule.id}/complete", json=payload)
    second = client.post(f"/api/maintenance-schedules/{schedule.id}/complete", json=payload)

    assert first.status_code == 200
    assert second.status_code == 409
    schedules = client.get(f"/api/maintenance-schedules/asset/{asset.id}").json()["data"]
    assert len(schedules) == 2


def test_completing_one_off_schedule_has_no_successor(db, admin, asset):
    schedule = make_schedule(db, asset, datetime(2024, 1, 1))

    result = maintenance_schedule_service.complete_schedule(db, schedule.id, MaintenanceScheduleComplete(
        completion_date=datetime(2024, 1, 2), completed_by=admin.id))

    assert result["completed"].status == "completed"
    assert result["next_schedule"] is None


def test_completion_requires_existing_user(client, db, asset):
    schedule = make_schedule(db, asset, datetime(2024, 1, 1), frequency=1, frequency_unit="months")

    response = client.post(f"/api/maintenance-schedules/{schedule.id}/complete", json={
        "completion_date": "2024-01-15T12:00:00",
        "completed_by": "00000000-0000-0000-0000-000000000001",
    })

    assert response.status_code == 422
    assert "completed_by" in response.json()["data"]
    db.expire_all()
    assert schedule.status == "scheduled"


def test_reschedule_requires_future_date(client, db, asset):
    schedule = make_schedule(db, asset, datetime(2024, 1, 1))
    past = client.patch(f"/api/maintenance-schedules/{schedule.id}/reschedule",
                        json={"scheduled_date": "2020-01-01T00:00:00"})
    future_date = (utc_now() + timedelta(days=10)).replace(microsecond=0)
    future = client.patch(f"/api/maintenance-schedules/{schedule.id}/reschedule",
                          json={"scheduled_date": future_date.isoformat()})

    assert past.status_code == 422
    assert future.status_code == 200
    assert future.json()["data"]["scheduled_date"] == future_date.isoformat()
    assert future.json()["data"]["status"] == "scheduled"


def test_upcoming_and_overdue_schedules(client, db, asset):
    soon = make_schedule(db, asset, utc_now() + timedelta(days=2))
    make_schedule(db, asset, utc_now() + timedelta(days=30))
    late = make_schedule(db, asset, utc_now() - timedelta(days=2))

    upcoming = client.get("/api/maintenance-schedules/upcoming", params={"days": 7}).json()["data"]
    overdue = client.get("/api/maintenance-schedules/overdue").json()["data"]

    assert [s["id"] for s in upcoming] == [str(soon.id)]
    assert [s["id"] for s in overdue] == [str(late.id)]


def test_schedules_by_date_range(client, db, asset):
    inside = make_schedule(db, asset, datetime(2024, 3, 15, 18, 30))
    make_schedule(db, asset, datetime(2024, 4, 1))

    data = client.get("/api/maintenance-schedules/date-range",
                      params={"start_date": "2024-03-01", "end_date": "2024-03-15"}).json()["data"]
    reversed_range = client.get("/api/maintenance-schedules/date-range",
                                params={"start_date": "2024-03-15", "end_date": "2024-03-01"})

    assert [s["id"] for s in data] == [str(inside.id)]
    assert reversed_range.status_code == 422


def test_schedules_by_status_validates_value(client, db, asset):
    make_schedule(db, asset, datetime(2024, 1, 1))

    found = client.get("/api/maintenance-schedules/status/scheduled").json()["data"]
    invalid = client.get("/api/maintenance-schedules/status/someday")

    assert len(found) == 1
    assert invalid.status_code == 422


def test_mark_overdue_schedules(db, asset):
    late = make_schedule(db, asset, utc_now() - timedelta(days=1))
    make_schedule(db, asset, utc_now() + timedelta(days=1))

    assert mark_overdue_schedules(db) == 1
    db.refresh(late)
    assert late.status == "overdue"
    assert mark_overdue_schedules(db) == 0


# ---------------- maintenance logs ----------------
def test_log_defaults_to_current_user_and_now(client, admin, asset):
    response = client.post("/api/maintenance-logs/", json={
        "asset_id": str(asset.id), "type": "corrective", "title": "Belt replaced"})

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["performed_by"] == str(admin.id)
    assert data["status"] == "completed"
    assert data["performed_at"] is not None


def test_log_schedule_must_belong_to_asset(client, db, asset):
    from facility_service.app.schemas.maintenance_assets.assets_schemas import AssetCreate
    from facility_service.app.services.maintenance_assets import asset_service

    other = asset_service.create_asset(db, AssetCreate(name="Boiler"))
    schedule = make_schedule(db, other, datetime(2024, 1, 1))

    response = client.post("/api/maintenance-logs/", json={
        "asset_id": str(asset.id), "schedule_id": str(schedule.id), "type": "preventive", "title": "Check"})

    assert response.status_code == 422
    assert "schedule_id" in response.json()["data"]


def test_log_statistics(client, asset):
    for log_type, cost in (("preventive", 100), ("corrective", 300)):
        client.post("/api/maintenance-logs/", json={
            "asset_id": str(asset.id), "type": log_type, "title": "Work", "cost": cost})

    stats = client.get("/api/maintenance-logs/statistics").json()["data"]

    assert stats["total"] == 2
    assert stats["total_cost"] == 400.0
    assert stats["average_cost"] == 200.0
    assert stats["by_type"] == {"preventive": 1, "corrective": 1, "emergency": 0}
    assert stats["by_status"]["completed"] == 2
    assert stats["by_status"]["pending"] == 0


def test_logs_by_type_and_technician(client, admin, asset):
    client.post("/api/maintenance-logs/", json={"asset_id": str(asset.id), "type": "emergency", "title": "Fire"})

    by_type = client.get("/api/maintenance-logs/type/emergency").json()["data"]
    by_technician = client.get(f"/api/maintenance-logs/technician/{admin.id}").json()["data"]
    bad_type = client.get("/api/maintenance-logs/type/routine")

    assert len(by_type) == 1
    assert len(by_technician) == 1
    assert bad_type.status_code == 422


def test_swept_schedules_stay_in_overdue_list(client, db, asset):
    late = make_schedule(db, asset, utc_now() - timedelta(days=3))

    before = client.get("/api/maintenance-schedules/overdue").json()["data"]
    assert mark_overdue_schedules(db) == 1
    after = client.get("/api/maintenance-schedules/overdue").json()["data"]

    assert [s["id"] for s in before] == [str(late.id)]
    assert [s["id"] for s in after] == [str(late.id)]
    assert after[0]["status"] == "overdue"


def test_schedule_and_log_status_reject_unknown_values(client, db, asset):
    schedule = make_schedule(db, asset, datetime(2024, 1, 1))
    log = client.post("/api/maintenance-logs/", json={
        "asset_id": str(asset.id), "type": "preventive", "title": "Check"}).json()["data"]

    bad_schedule = client.patch(f"/api/maintenance-schedules/{schedule.id}/status", json={"status": "someday"})
    bad_log = client.patch(f"/api/maintenance-logs/{log['id']}/status", json={"status": "archived"})
    good_log = client.patch(f"/api/maintenance-logs/{log['id']}/status", json={"status": "cancelled"})

    assert bad_schedule.status_code == 422
    assert "status" in bad_schedule.json()["data"]
    assert bad_log.status_code == 422
    assert "status" in bad_log.json()["data"]
    assert good_log.json()["data"]["status"] == "cancelled"
