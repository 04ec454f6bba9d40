from facility_service.app.schemas.maintenance_assets.asset_category_schemas import AssetCategoryCreate
from facility_service.app.services.maintenance_assets import asset_category_service


def make_category(db, name, parent=None, **fields):
    return asset_category_service.create_category(
        db, AssetCategoryCreate(name=name, parent_id=parent.id if parent else None, **fields))


def test_create_category_defaults_to_active(client):
    response = client.post("/api/asset-categories/", json={"name": "Electrical", "code": "ELE"})

    assert response.status_code == 201
    assert response.json()["data"]["status"] == "active"


def test_unknown_parent_is_rejected(client):
    response = client.post("/api/asset-categories/", json={
        "name": "Orphan", "parent_id": "00000000-0000-0000-0000-000000000001"})

    assert response.status_code == 422
    assert "parent_id" in response.json()["data"]


def test_tree_nests_children(client, db):
    root = make_category(db, "Mechanical")
    child = make_category(db, "Pumps", parent=root)
    make_category(db, "Booster pumps", parent=child)

    tree = client.get("/api/asset-categories/tree").json()["data"]

    assert [node["name"] for node in tree] == ["Mechanical"]
    assert tree[0]["children"][0]["name"] == "Pumps"
    assert tree[0]["children"][0]["children"][0]["name"] == "Booster pumps"


def test_children_endpoint(client, db):
    root = make_category(db, "Safety")
    make_category(db, "Alarms", parent=root)
    make_category(db, "Extinguishers", parent=root)

    children = client.get(f"/api/asset-categories/{root.id}/children").json()["data"]

    assert sorted(c["name"] for c in children) == ["Alarms", "Extinguishers"]


def test_move_rejects_self_and_descendants(client, db):
    root = make_category(db, "Mechanical")
    child = make_category(db, "Pumps", parent=root)
    grandchild = make_category(db, "Booster pumps", parent=child)

    to_self = client.patch(f"/api/asset-categories/{root.id}/move", json={"parent_id": str(root.id)})
    to_grandchild = client.patch(f"/api/asset-categories/{root.id}/move", json={"parent_id": str(grandchild.id)})

    assert to_self.status_code == 422
    assert to_grandchild.status_code == 422
    assert "parent_id" in to_grandchild.json()["data"]


def test_move_to_root(client, db):
    root = make_category(db, "Mechanical")
    child = make_category(db, "Pumps", parent=root)

    response = client.patch(f"/api/asset-categories/{child.id}/move", json={"parent_id": None})

    assert response.status_code == 200
    assert response.json()["data"]["parent_id"] is None


def test_delete_refused_while_children_exist(client, db):
    root = make_category(db, "Mechanical")
    make_category(db, "Pumps", parent=root)

    response = client.delete(f"/api/asset-categories/{root.id}")

    assert response.status_code == 409


def test_delete_refused_while_assets_exist(client, asset, category):
    response = client.delete(f"/api/asset-categories/{category.id}")

    assert response.status_code == 409


def test_delete_empty_category(client, db):
    leaf = make_category(db, "Temporary")

    response = client.delete(f"/api/asset-categories/{leaf.id}")

    assert response.status_code == 200
    assert client.get(f"/api/asset-categories/{leaf.id}").status_code == 404


def test_search_requires_term(client, db):
    make_category(db, "Lighting", description="Lamps and fixtures")

    found = client.get("/api/asset-categories/search", params={"term": "lamps"}).json()["data"]
    missing_term = client.get("/api/asset-categories/search")

    assert [c["name"] for c in found] == ["Lighting"]
    assert missing_term.status_code == 422


def test_category_status_update(client, db):
    category = make_category(db, "Lifts")

    ok = client.patch(f"/api/asset-categories/{category.id}/status", json={"status": "inactive"})
    bad = client.patch(f"/api/asset-categories/{category.id}/status", json={"status": "archived"})
    active = client.get("/api/asset-categories/active").json()["data"]

    assert ok.json()["data"]["status"] == "inactive"
    assert bad.status_code == 422
    assert active == []
