"""Brand template endpoints."""
from lowespro_service.app.crud.catalog.brand_templates_crud import template_category_paths


def test_template_crud(client):
    created = client.post("/api/brand-templates", json={
        "name": "Decking Line",
        "template": {"categories": [{"name": "Boards"}]},
    })
    assert created.status_code == 201
    template = created.json()
    assert template["template"]["categories"][0]["name"] == "Boards"

    renamed = client.patch(f"/api/brand-templates/{template['id']}", json={"name": "Composite Decking"}).json()
    assert renamed["name"] == "Composite Decking"
    assert renamed["template"]["categories"][0]["name"] == "Boards"

    listed = client.get("/api/brand-templates", params={"search": "composite"}).json()
    assert [t["id"] for t in listed] == [template["id"]]

    assert client.delete(f"/api/brand-templates/{template['id']}").json() == {"success": True}
    assert client.get(f"/api/brand-templates/{template['id']}").json() == {"error": "Brand template not found"}


def test_template_in_use_cannot_be_deleted(client):
    template = client.post("/api/brand-templates", json={"name": "Decking Line"}).json()
    client.post("/api/brands", json={"name": "Trex", "templateId": template["id"]})

    resp = client.delete(f"/api/brand-templates/{template['id']}")
    assert resp.status_code == 400
    assert "used by 1 brands" in resp.json()["error"]


def test_category_paths_skip_unnamed_entries():
    categories = [
        {"name": "Boards", "subcategories": [{"name": None}, {"name": "Grooved"}]},
        {"description": "no name"},
    ]
    assert template_category_paths("Trex", categories) == ["Trex > Boards", "Trex > Boards > Grooved"]
