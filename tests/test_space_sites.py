from facility_service.app.schemas.space_sites.building_schemas import BuildingCreate
from facility_service.app.schemas.space_sites.floor_schemas import FloorCreate
from facility_service.app.schemas.space_sites.spaces_schemas import SpaceCreate
from facility_service.app.services.space_sites import building_service, floor_service, space_service


def test_create_building_generates_code(client):
    response = client.post("/api/buildings/", json={"name": "Main Tower", "city": "Pune"})

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["code"] == "MAI"
    assert body["data"]["status"] == "active"


def test_generated_codes_get_incrementing_suffix(db):
    first = building_service.create_building(db, BuildingCreate(name="Annex"))
    second = building_service.create_building(db, BuildingCreate(name="Annex"))
    third = building_service.create_building(db, BuildingCreate(name="annex west"))

    assert [first.code, second.code, third.code] == ["ANN", "ANN001", "ANN002"]


def test_building_name_without_letters_falls_back(db):
    building = building_service.create_building(db, BuildingCreate(name="***"))

    assert building.code == "BLD"


def test_duplicate_building_code_is_rejected(client, building):
    response = client.post("/api/buildings/", json={"name": "Other", "code": "HQ1"})

    assert response.status_code == 422
    assert "code" in response.json()["data"]


def test_floor_and_space_codes(db, building):
    floor = floor_service.create_floor(db, FloorCreate(building_id=building.id, name="First", level=1))
    same_level = floor_service.create_floor(db, FloorCreate(building_id=building.id, name="Mezzanine", level=1))
    space = space_service.create_space(db, SpaceCreate(floor_id=floor.id, name="Board room", type="meeting"))
    twin = space_service.create_space(db, SpaceCreate(floor_id=floor.id, name="Board room", type="meeting"))

    assert floor.code == "HQ1F1"
    assert same_level.code == "HQ1F101"
    assert space.code == "HQ1F1-BOA"
    assert twin.code == "HQ1F1-BOA01"
    assert space.status == "vacant"


def test_floor_requires_existing_building(client):
    response = client.post("/api/floors/", json={
        "building_id": "00000000-0000-0000-0000-000000000001", "name": "Ghost", "level": 2})

    assert response.status_code == 422
    assert "building_id" in response.json()["data"]


def test_get_missing_building_returns_404(client):
    response = client.get("/api/buildings/00000000-0000-0000-0000-000000000001")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_get_building_by_code(client, building):
    response = client.get("/api/buildings/code/HQ1")

    assert response.status_code == 200
    assert response.json()["data"]["id"] == str(building.id)


def test_pagination_limits_page_size(client, db):
    for index in range(5):
        building_service.create_building(db, BuildingCreate(name=f"Block {index}"))

    response = client.get("/api/buildings/", params={"page": 1, "per_page": 2})

    data = response.json()["data"]
    assert response.status_code == 200
    assert len(data["items"]) == 2
    assert data["total"] == 5
    assert data["pages"] == 3

    last_page = client.get("/api/buildings/", params={"page": 3, "per_page": 2}).json()["data"]
    assert len(last_page["items"]) == 1


def test_per_page_above_maximum_is_rejected(client):
    response = client.get("/api/buildings/", params={"per_page": 500})

    assert response.status_code == 422


def test_search_filters_buildings(client, db):
    building_service.create_building(db, BuildingCreate(name="North Wing"))
    building_service.create_building(db, BuildingCreate(name="South Wing"))

    data = client.get("/api/buildings/", params={"search": "north"}).json()["data"]

    assert data["total"] == 1
    assert data["items"][0]["name"] == "North Wing"


def test_update_building_status(client, building):
    response = client.patch(f"/api/buildings/{building.id}/status", json={"status": "maintenance"})

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "maintenance"


def test_invalid_status_is_rejected(client, building, floor, space):
    for url in (f"/api/buildings/{building.id}/status",
                f"/api/floors/{floor.id}/status",
                f"/api/spaces/{space.id}/status"):
        response = client.patch(url, json={"status": "demolished"})

        assert response.status_code == 422
        assert "status" in response.json()["data"]


def test_delete_building_is_soft(client, db, building):
    response = client.delete(f"/api/buildings/{building.id}")

    assert response.status_code == 200
    assert response.json()["data"] is None
    assert client.get(f"/api/buildings/{building.id}").status_code == 404

    db.expire_all()
    assert building.is_deleted is True


def test_building_floors_and_spaces(client, building, floor, space):
    floors = client.get(f"/api/buildings/{building.id}/floors").json()["data"]
    spaces = client.get(f"/api/buildings/{building.id}/spaces").json()["data"]
    by_floor = client.get(f"/api/spaces/floor/{floor.id}").json()["data"]

    assert [f["id"] for f in floors] == [str(floor.id)]
    assert [s["id"] for s in spaces] == [str(space.id)]
    assert [s["id"] for s in by_floor] == [str(space.id)]


def test_building_statistics(client, db, building, floor, space):
    space_service.create_space(db, SpaceCreate(floor_id=floor.id, name="Lab", type="facility", status="occupied"))

    stats = client.get(f"/api/buildings/{building.id}/statistics").json()["data"]

    assert stats["spaces_count"] == 2
    assert stats["occupancy_rate"] == 50.0
    assert stats["assets_count"] == 0
    assert stats["active_work_orders"] == 0
    assert stats["maintenance_statistics"]["total_maintenance"] == 0


def test_space_statistics_utilization(client, asset, space):
    stats = client.get(f"/api/spaces/{space.id}/statistics").json()["data"]

    assert stats["assets_count"] == 1
    # one asset in a space with capacity 4
    assert stats["utilization_rate"] == 25.0
    assert stats["open_work_orders"] == 0


def test_floor_statistics(client, asset, floor):
    client.post("/api/maintenance-logs/", json={
        "asset_id": str(asset.id), "type": "preventive", "title": "Service", "cost": 150})

    stats = client.get(f"/api/floors/{floor.id}/statistics").json()["data"]

    assert stats["spaces_count"] == 1
    assert stats["assets_count"] == 1
    assert stats["occupancy_rate"] == 0.0
    assert stats["maintenance_statistics"]["total_maintenance"] == 1
    assert stats["maintenance_statistics"]["total_cost"] == 150.0


def test_walking_pages_returns_every_building_once(client, db):
    # created back to back, so most rows share a created_at timestamp
    created = {str(building_service.create_building(db, BuildingCreate(name=f"Tower {index}")).id)
               for index in range(7)}

    seen = []
    for page in range(1, 4):
        data = client.get("/api/buildings/", params={"page": page, "per_page": 3}).json()["data"]
        seen.extend(item["id"] for item in data["items"])

    assert len(seen) == 7
    assert set(seen) == created
