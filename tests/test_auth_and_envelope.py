import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from conftest import auth_headers, make_user
from facility_service.app.main import app
from facility_service.app.router.maintenance_assets.work_order_router import _check_close_permission
from facility_service.app.schemas.maintenance_assets.work_order_schemas import WorkOrderCreate
from facility_service.app.services.maintenance_assets import work_order_service
from shared.core.auth import create_access_token
from shared.core.schemas import UserToken
from shared.utils.enums import UserRole


def client_for(user):
    test_client = TestClient(app)
    test_client.headers.update(auth_headers(user))
    return test_client


def test_health_is_public(anonymous_client):
    response = anonymous_client.get("/health")

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "ok"


def test_missing_token_is_unauthorized(anonymous_client):
    response = anonymous_client.get("/api/buildings/")

    assert response.status_code == 401
    assert response.json()["success"] is False


def test_invalid_token_is_unauthorized(anonymous_client):
    response = anonymous_client.get("/api/buildings/", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


def test_token_for_unknown_user_is_unauthorized(anonymous_client):
    token = create_access_token({"user_id": "00000000-0000-0000-0000-000000000001", "role": "super_admin"})

    response = anonymous_client.get("/api/buildings/", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_inactive_user_is_forbidden(db):
    user = make_user(db, status="inactive")

    response = client_for(user).get("/api/buildings/")

    assert response.status_code == 403


def test_employee_can_read_but_not_create_buildings(db):
    employee = make_user(db, UserRole.EMPLOYEE)
    employee_client = client_for(employee)

    assert employee_client.get("/api/buildings/").status_code == 200
    denied = employee_client.post("/api/buildings/", json={"name": "Shed"})
    assert denied.status_code == 403
    assert denied.json()["success"] is False


def test_role_permissions_come_from_the_database(db):
    technician = make_user(db, UserRole.MAINTENANCE_TECHNICIAN)
    # a forged role claim in the token is replaced by the stored role
    token = create_access_token({"user_id": str(technician.id), "role": "super_admin"})

    response = TestClient(app).post(
        "/api/buildings/", json={"name": "Shed"}, headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 403


def test_employee_can_raise_work_orders(db):
    employee = make_user(db, UserRole.EMPLOYEE)

    response = client_for(employee).post("/api/work-orders/", json={"title": "Heating", "description": "Too cold"})

    assert response.status_code == 201
    assert response.json()["data"]["requested_by"] == str(employee.id)


def test_response_envelope_and_request_id(client):
    response = client.get("/api/buildings/", headers={"X-Request-ID": "req-42"})

    assert set(response.json()) >= {"success", "message", "data"}
    assert response.headers["X-Request-ID"] == "req-42"


def test_request_validation_errors_use_envelope(client):
    response = client.post("/api/buildings/", json={})

    body = response.json()
    assert response.status_code == 422
    assert body["success"] is False
    assert "name" in body["data"]


def test_reads_require_view_permission(db, asset):
    employee_client = client_for(make_user(db, UserRole.EMPLOYEE))
    technician_client = client_for(make_user(db, UserRole.MAINTENANCE_TECHNICIAN))

    assert employee_client.get("/api/assets/").status_code == 200
    assert employee_client.get("/api/maintenance-schedules/").status_code == 403
    assert employee_client.get("/api/maintenance-logs/").status_code == 403
    assert technician_client.get("/api/maintenance-schedules/").status_code == 200


def test_closing_a_work_order_needs_close_permission():
    editor = UserToken(user_id="00000000-0000-0000-0000-000000000001", role="custom",
                       permissions=["view work orders", "edit work orders"])

    for status in ("completed", "cancelled"):
        with pytest.raises(HTTPException) as error:
            _check_close_permission(editor, status)
        assert error.value.status_code == 403

    _check_close_permission(editor, "in_progress")


def test_technician_can_close_work_orders(db, admin_token):
    technician = make_user(db, UserRole.MAINTENANCE_TECHNICIAN)
    work_order = work_order_service.create_work_order(
        db, WorkOrderCreate(title="Fan noise", description="Rattling"), admin_token)

    response = client_for(technician).patch(
        f"/api/work-orders/{work_order.id}/status", json={"status": "completed"})

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "completed"
