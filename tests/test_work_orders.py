from datetime import timedelta

from conftest import make_user
from facility_service.app.schemas.maintenance_assets.work_order_schemas import WorkOrderCreate
from facility_service.app.services.maintenance_assets import work_order_service
from shared.helpers.date_helper import utc_now
from shared.utils.enums import UserRole


def make_work_order(db, admin_token, title="Broken light", **fields):
    return work_order_service.create_work_order(
        db, WorkOrderCreate(title=title, description="Needs attention", **fields), admin_token)


def test_work_order_numbers_count_per_day(db, admin_token):
    first = make_work_order(db, admin_token)
    second = make_work_order(db, admin_token)

    prefix = f"WO-{utc_now():%Y%m%d}-"
    assert first.number == f"{prefix}0001"
    assert second.number == f"{prefix}0002"


def test_create_work_order_defaults(client, admin):
    response = client.post("/api/work-orders/", json={"title": "Leaking tap", "description": "Kitchen tap"})

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "pending"
    assert data["priority"] == "medium"
    assert data["type"] == "corrective"
    assert data["requested_by"] == str(admin.id)
    assert data["started_at"] is None


def test_work_order_rejects_unknown_space(client):
    response = client.post("/api/work-orders/", json={
        "title": "Ghost", "description": "Nowhere", "space_id": "00000000-0000-0000-0000-000000000001"})

    assert response.status_code == 422
    assert "space_id" in response.json()["data"]


def test_status_changes_stamp_start_and_completion(client, db, admin_token):
    work_order = make_work_order(db, admin_token)

    started = client.patch(f"/api/work-orders/{work_order.id}/status", json={"status": "in_progress"}).json()["data"]
    finished = client.patch(f"/api/work-orders/{work_order.id}/status", json={"status": "completed"}).json()["data"]

    assert started["started_at"] is not None
    assert finished["status"] == "completed"
    assert finished["completed_at"] is not None
    assert finished["started_at"] == started["started_at"]


def test_invalid_work_order_status(client, db, admin_token):
    work_order = make_work_order(db, admin_token)

    response = client.patch(f"/api/work-orders/{work_order.id}/status", json={"status": "done"})

    assert response.status_code == 422


def test_assign_work_order(client, db, admin_token):
    technician = make_user(db, UserRole.MAINTENANCE_TECHNICIAN)
    work_order = make_work_order(db, admin_token)

    response = client.patch(f"/api/work-orders/{work_order.id}/assign", json={"assignee_id": str(technician.id)})
    assigned = client.get(f"/api/work-orders/assignee/{technician.id}").json()["data"]

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "assigned"
    assert response.json()["data"]["assigned_to"] == str(technician.id)
    assert [w["id"] for w in assigned] == [str(work_order.id)]


def test_assign_to_unknown_user(client, db, admin_token):
    work_order = make_work_order(db, admin_token)

    response = client.patch(f"/api/work-orders/{work_order.id}/assign",
                            json={"assignee_id": "00000000-0000-0000-0000-000000000001"})

    assert response.status_code == 422
    assert "assignee_id" in response.json()["data"]


def test_work_orders_by_requester(client, db, admin, admin_token):
    make_work_order(db, admin_token)
    make_work_order(db, admin_token, title="Door stuck")

    requested = client.get(f"/api/work-orders/requester/{admin.id}").json()["data"]
    unknown = client.get("/api/work-orders/requester/00000000-0000-0000-0000-000000000001")

    assert len(requested) == 2
    assert unknown.status_code == 404


def test_work_order_statistics(client, db, admin_token):
    make_work_order(db, admin_token, priority="high", type="emergency", status="completed")
    make_work_order(db, admin_token, priority="high")
    make_work_order(db, admin_token, status="in_progress")
    make_work_order(db, admin_token, due_date=utc_now() - timedelta(days=1))

    stats = client.get("/api/work-orders/statistics").json()["data"]

    assert stats["total"] == 4
    assert stats["completed"] == 1
    assert stats["pending"] == 2
    assert stats["in_progress"] == 1
    assert stats["overdue"] == 1
    assert stats["completion_rate"] == 25.0
    assert stats["by_priority"] == {"low": 0, "medium": 2, "high": 2, "critical": 0}
    assert stats["by_type"] == {"corrective": 3, "preventive": 0, "emergency": 1, "inspection": 0}


def test_empty_statistics(client):
    stats = client.get("/api/work-orders/statistics").json()["data"]

    assert stats["total"] == 0
    assert stats["completion_rate"] == 0.0


def test_overdue_and_due_work_orders(client, db, admin_token):
    late = make_work_order(db, admin_token, due_date=utc_now() - timedelta(days=2))
    soon = make_work_order(db, admin_token, due_date=utc_now() + timedelta(days=3))
    make_work_order(db, admin_token, due_date=utc_now() - timedelta(days=2), status="completed")

    overdue = client.get("/api/work-orders/overdue").json()["data"]
    due = client.get("/api/work-orders/due", params={"days": 7}).json()["data"]

    assert [w["id"] for w in overdue] == [str(late.id)]
    assert [w["id"] for w in due] == [str(soon.id)]


def test_comments_lifecycle(client, db, admin, admin_token):
    work_order = make_work_order(db, admin_token)
    other = make_work_order(db, admin_token, title="Other")

    created = client.post(f"/api/work-orders/{work_order.id}/comments", json={"comment": "On my way"})
    comment_id = created.json()["data"]["id"]
    listed = client.get(f"/api/work-orders/{work_order.id}/comments").json()["data"]
    foreign = client.delete(f"/api/work-orders/{other.id}/comments/{comment_id}")
    removed = client.delete(f"/api/work-orders/{work_order.id}/comments/{comment_id}")

    assert created.status_code == 201
    assert created.json()["data"]["user_id"] == str(admin.id)
    assert [c["comment"] for c in listed] == ["On my way"]
    assert foreign.status_code == 404
    assert removed.status_code == 200
    assert client.get(f"/api/work-orders/{work_order.id}/comments").json()["data"] == []


def test_attachments_lifecycle(client, db, admin_token):
    work_order = make_work_order(db, admin_token)

    created = client.post(f"/api/work-orders/{work_order.id}/attachments", json={
        "file_name": "photo.jpg", "file_path": "/uploads/photo.jpg", "file_type": "image/jpeg", "file_size": 2048})
    attachment_id = created.json()["data"]["id"]
    listed = client.get(f"/api/work-orders/{work_order.id}/attachments").json()["data"]
    removed = client.delete(f"/api/work-orders/{work_order.id}/attachments/{attachment_id}")
    missing = client.delete(f"/api/work-orders/{work_order.id}/attachments/{attachment_id}")

    assert created.status_code == 201
    assert [a["file_name"] for a in listed] == ["photo.jpg"]
    assert removed.status_code == 200
    assert missing.status_code == 404


def test_delete_work_order(client, db, admin_token):
    work_order = make_work_order(db, admin_token)

    response = client.delete(f"/api/work-orders/{work_order.id}")

    assert response.status_code == 200
    assert client.get(f"/api/work-orders/{work_order.id}").status_code == 404
