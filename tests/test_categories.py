"""Category hierarchy: levels, parent checks, delete guard, tree and vendor counts."""
from lowespro_service.app.crud.catalog.categories_crud import build_category_tree
from lowespro_service.app.schemas.catalog.categories_schemas import CategoryOut


def test_levels_follow_parent(make_category):
    root = make_category("Building Materials")
    child = make_category("Lumber", parentId=root["id"])
    grandchild = make_category("Treated Lumber", parentId=child["id"])

    assert root["level"] == "1"
    assert child["level"] == "2"
    assert grandchild["level"] == "3"


def test_unknown_parent_rejected(client):
    resp = client.post("/api/categories", json={"name": "Lumber", "parentId": "missing"})
    assert resp.status_code == 400


def test_cannot_parent_itself(client, make_category):
    cat = make_category("Lumber")
    resp = client.patch(f"/api/categories/{cat['id']}", json={"parentId": cat["id"]})
    assert resp.status_code == 400


def test_cannot_move_under_descendant(client, make_category):
    root = make_category("Building Materials")
    child = make_category("Lumber", parentId=root["id"])

    resp = client.patch(f"/api/categories/{root['id']}", json={"parentId": child["id"]})
    assert resp.status_code == 400
    assert "descendants" in resp.json()["error"]


def test_move_to_root_resets_level(client, make_category):
    root = make_category("Building Materials")
    child = make_category("Lumber", parentId=root["id"])

    moved = client.patch(f"/api/categories/{child['id']}", json={"parentId": None}).json()
    assert moved["parentId"] is None
    assert moved["level"] == "1"


def test_delete_with_children_blocked(client, make_category):
    root = make_category("Building Materials")
    make_category("Lumber", parentId=root["id"])
    make_category("Drywall", parentId=root["id"])

    resp = client.delete(f"/api/categories/{root['id']}")
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Cannot delete category with 2 subcategories")
    assert client.get(f"/api/categories/{root['id']}").status_code == 200


def test_delete_leaf(client, make_category):
    cat = make_category("Lumber")
    assert client.delete(f"/api/categories/{cat['id']}").json() == {"success": True}
    assert client.get(f"/api/categories/{cat['id']}").json() == {"error": "Category not found"}


def test_root_filter_and_parent_filter(client, make_category):
    root = make_category("Building Materials")
    make_category("Lumber", parentId=root["id"])

    roots = client.get("/api/categories", params={"parentId": "root"}).json()
    assert [c["name"] for c in roots] == ["Building Materials"]

    children = client.get("/api/categories", params={"parentId": root["id"]}).json()
    assert [c["name"] for c in children] == ["Lumber"]


def test_search_matches_description(client, make_category):
    make_category("Lumber", description="Dimensional boards")
    make_category("Roofing")

    found = client.get("/api/categories", params={"search": "boards"}).json()
    assert [c["name"] for c in found] == ["Lumber"]


def test_tree_nests_and_sorts(client, make_category):
    root = make_category("Building Materials")
    make_category("plywood", parentId=root["id"])
    make_category("Lumber", parentId=root["id"])
    make_category("Appliances")

    tree = client.get("/api/categories/tree").json()
    assert [n["name"] for n in tree] == ["Appliances", "Building Materials"]
    assert [n["name"] for n in tree[1]["children"]] == ["Lumber", "plywood"]
    assert tree[0]["children"] == []


def test_tree_treats_orphans_as_roots():
    orphan = CategoryOut(id="b", name="Orphan", parent_id="gone")
    root = CategoryOut(id="a", name="Root")

    tree = build_category_tree([orphan, root])
    assert [n.name for n in tree] == ["Orphan", "Root"]


def test_vendor_count_is_derived(client, make_category, make_vendor):
    roofing = make_category("Roofing")
    make_vendor("Acme Supply", categories=["Roofing", "Roofing"])
    bolt = make_vendor("Bolt Hardware", categories=["Roofing"])

    assert client.get(f"/api/categories/{roofing['id']}").json()["vendorCount"] == 2

    client.patch(f"/api/vendors/{bolt['id']}", json={"categories": []})
    assert client.get(f"/api/categories/{roofing['id']}").json()["vendorCount"] == 1


def test_move_relevels_subtree(client, make_category):
    materials = make_category("Building Materials")
    outdoor = make_category("Outdoor")
    lumber = make_category("Lumber", parentId=materials["id"])
    treated = make_category("Treated Lumber", parentId=lumber["id"])
    ground = make_category("Ground Contact", parentId=treated["id"])

    client.patch(f"/api/categories/{lumber['id']}", json={"parentId": None})
    assert client.get(f"/api/categories/{treated['id']}").json()["level"] == "2"
    assert client.get(f"/api/categories/{ground['id']}").json()["level"] == "3"

    decking = make_category("Decking", parentId=outdoor["id"])
    client.put(f"/api/categories/{lumber['id']}", json={"name": "Lumber", "parentId": decking["id"]})
    assert client.get(f"/api/categories/{lumber['id']}").json()["level"] == "3"
    assert client.get(f"/api/categories/{treated['id']}").json()["level"] == "4"
    assert client.get(f"/api/categories/{ground['id']}").json()["level"] == "5"
