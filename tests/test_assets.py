from datetime import date, timedelta

from facility_service.app.schemas.maintenance_assets.assets_schemas import AssetCreate, AssetUpdate
from facility_service.app.schemas.space_sites.building_schemas import BuildingCreate
from facility_service.app.schemas.space_sites.floor_schemas import FloorCreate
from facility_service.app.schemas.space_sites.spaces_schemas import SpaceCreate
from facility_service.app.services.maintenance_assets import asset_service, maintenance_schedule_service
from facility_service.app.services.space_sites import building_service, floor_service, space_service


def test_asset_code_combines_category_space_and_name(asset):
    assert asset.code == "HVA-HQ1-CHI"
    assert asset.status == "active"


def test_asset_code_suffix_on_collision(db, category, space):
    twin = asset_service.create_asset(db, AssetCreate(name="Chiller B", category_id=category.id, space_id=space.id))
    other = asset_service.create_asset(db, AssetCreate(name="Chiller C", category_id=category.id, space_id=space.id))

    assert twin.code == "HVA-HQ1-CHI"
    assert other.code == "HVA-HQ1-CHI001"


def test_asset_code_defaults_without_category_or_space(db):
    asset = asset_service.create_asset(db, AssetCreate(name="Ladder"))

    assert asset.code == "AST-SP-LAD"


def test_warranty_before_purchase_is_rejected(client):
    response = client.post("/api/assets/", json={
        "name": "Pump",
        "purchase_date": "2024-05-01",
        "warranty_expiry": "2024-04-01",
    })

    assert response.status_code == 422


def test_warranty_cross_check_on_update_uses_stored_values(client, db):
    asset = asset_service.create_asset(db, AssetCreate(name="Pump", purchase_date=date(2024, 5, 1)))

    response = client.put(f"/api/assets/{asset.id}", json={"warranty_expiry": "2024-01-01"})

    assert response.status_code == 422
    assert "warranty_expiry" in response.json()["data"]


def test_duplicate_serial_number_is_rejected(client, asset, db):
    asset_service.update_asset(db, asset.id, AssetUpdate(serial_number="SN-1"))

    response = client.post("/api/assets/", json={"name": "Second", "serial_number": "SN-1"})

    assert response.status_code == 422
    assert "serial_number" in response.json()["data"]


def test_assets_resolve_through_space_floor_and_building(client, db, category):
    hq = building_service.create_building(db, BuildingCreate(name="Alpha"))
    annex = building_service.create_building(db, BuildingCreate(name="Beta"))
    ground = floor_service.create_floor(db, FloorCreate(building_id=hq.id, name="Ground", level=0))
    upper = floor_service.create_floor(db, FloorCreate(building_id=hq.id, name="Upper", level=1))
    annex_floor = floor_service.create_floor(db, FloorCreate(building_id=annex.id, name="Ground", level=0))
    lobby = space_service.create_space(db, SpaceCreate(floor_id=ground.id, name="Lobby", type="common"))
    office = space_service.create_space(db, SpaceCreate(floor_id=upper.id, name="Office", type="office"))
    store = space_service.create_space(db, SpaceCreate(floor_id=annex_floor.id, name="Store", type="storage"))

    lobby_asset = asset_service.create_asset(db, AssetCreate(name="Kiosk", space_id=lobby.id))
    office_asset = asset_service.create_asset(db, AssetCreate(name="Printer", space_id=office.id))
    asset_service.create_asset(db, AssetCreate(name="Shelf", space_id=store.id))

    def ids(url):
        return {item["id"] for item in client.get(url).json()["data"]}

    assert ids(f"/api/assets/space/{lobby.id}") == {str(lobby_asset.id)}
    assert ids(f"/api/assets/floor/{ground.id}") == {str(lobby_asset.id)}
    assert ids(f"/api/assets/building/{hq.id}") == {str(lobby_asset.id), str(office_asset.id)}


def test_asset_filters_on_list(client, db, asset, category):
    asset_service.create_asset(db, AssetCreate(name="Loose item", condition="poor"))

    by_category = client.get("/api/assets/", params={"category_id": str(category.id)}).json()["data"]
    by_condition = client.get("/api/assets/", params={"condition": "poor"}).json()["data"]

    assert [a["id"] for a in by_category["items"]] == [str(asset.id)]
    assert by_condition["total"] == 1


def test_maintenance_status_books_next_maintenance(client, db, space):
    generator = asset_service.create_asset(db, AssetCreate(
        name="Generator", space_id=space.id, maintenance_frequency=30, maintenance_unit="days"))
    # creating an asset with a frequency books the first maintenance
    assert len(maintenance_schedule_service.get_asset_schedules(db, generator.id)) == 1

    response = client.patch(f"/api/assets/{generator.id}/status", json={"status": "maintenance"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "maintenance"
    expected = date.today() + timedelta(days=30)
    next_date = date.fromisoformat(data["next_maintenance_date"])
    assert abs((next_date - expected).days) <= 1

    schedules = client.get(f"/api/assets/{generator.id}/maintenance-schedule").json()["data"]
    assert len(schedules) == 2
    assert all(s["status"] == "scheduled" for s in schedules)
    assert schedules[0]["title"] == "Scheduled maintenance: Generator"


def test_schedule_maintenance_without_frequency_returns_null(client, asset):
    response = client.post(f"/api/assets/{asset.id}/schedule-maintenance")

    assert response.status_code == 200
    assert response.json()["data"] is None


def test_schedule_maintenance_uses_latest_log(client, db, asset):
    asset_service.update_asset(db, asset.id, AssetUpdate(
        maintenance_frequency=1, maintenance_unit="months"))
    client.post("/api/maintenance-logs/", json={
        "asset_id": str(asset.id),
        "type": "preventive",
        "title": "Filter change",
        "performed_at": "2024-03-10T09:00:00",
    })

    response = client.post(f"/api/assets/{asset.id}/schedule-maintenance")

    assert response.json()["data"]["next_maintenance_date"] == "2024-04-10"


def test_assign_asset_to_space(client, db, floor):
    asset = asset_service.create_asset(db, AssetCreate(name="Projector"))
    room = space_service.create_space(db, SpaceCreate(floor_id=floor.id, name="Room", type="meeting"))

    response = client.patch(f"/api/assets/{asset.id}/assign", json={"space_id": str(room.id)})

    assert response.status_code == 200
    assert response.json()["data"]["space_id"] == str(room.id)


def test_warranty_expiring_assets(client, db):
    soon = asset_service.create_asset(db, AssetCreate(
        name="Soon", warranty_expiry=date.today() + timedelta(days=10)))
    asset_service.create_asset(db, AssetCreate(name="Later", warranty_expiry=date.today() + timedelta(days=90)))

    data = client.get("/api/assets/warranty-expiring", params={"days": 30}).json()["data"]

    assert [a["id"] for a in data] == [str(soon.id)]


def test_asset_statistics(client, asset):
    client.post("/api/maintenance-logs/", json={
        "asset_id": str(asset.id), "type": "corrective", "title": "Fix", "cost": 100, "duration": 2,
        "duration_unit": "hours"})
    client.post("/api/maintenance-logs/", json={
        "asset_id": str(asset.id), "type": "preventive", "title": "Check", "cost": 300, "duration": 4,
        "duration_unit": "hours"})
    client.post("/api/work-orders/", json={
        "title": "Leak", "description": "Water leak", "asset_id": str(asset.id), "priority": "high"})

    stats = client.get(f"/api/assets/{asset.id}/statistics").json()["data"]

    assert stats["maintenance_stats"]["total_maintenance"] == 2
    assert stats["maintenance_stats"]["total_cost"] == 400.0
    assert stats["maintenance_stats"]["average_cost"] == 200.0
    assert stats["maintenance_stats"]["average_duration"] == 3.0
    assert stats["work_order_stats"] == {"total": 1, "completed": 0, "high_priority": 1}
    assert stats["utilization_rate"] <= 100.0


def test_asset_status_rejects_unknown_value(client, asset):
    response = client.patch(f"/api/assets/{asset.id}/status", json={"status": "broken"})

    assert response.status_code == 422
    assert "status" in response.json()["data"]
