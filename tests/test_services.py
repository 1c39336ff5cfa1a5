"""Service catalog endpoints."""
import time
from datetime import datetime


def test_service_crud(client):
    created = client.post("/api/services", json={"name": "Delivery", "description": "Job site drop"})
    assert created.status_code == 201
    service = created.json()
    assert service["vendorCount"] == 0

    patched = client.patch(f"/api/services/{service['id']}", json={"description": "Curbside"}).json()
    assert patched["name"] == "Delivery"
    assert patched["description"] == "Curbside"

    replaced = client.put(f"/api/services/{service['id']}", json={"name": "Delivery Plus"}).json()
    assert replaced["description"] is None

    assert client.delete(f"/api/services/{service['id']}").json() == {"success": True}
    missing = client.get(f"/api/services/{service['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Service not found"}


def test_service_vendor_count(client, make_vendor):
    service = client.post("/api/services", json={"name": "Installation"}).json()
    make_vendor("Acme Supply", services=["Installation"])
    make_vendor("Bolt Hardware", services=["Delivery"])

    listed = client.get("/api/services", params={"search": "install"}).json()
    assert len(listed) == 1
    assert listed[0]["id"] == service["id"]
    assert listed[0]["vendorCount"] == 1


def test_service_name_required(client):
    resp = client.post("/api/services", json={"description": "No name"})
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("name")


def test_updates_refresh_updated_at(client):
    service = client.post("/api/services", json={"name": "Delivery"}).json()
    time.sleep(0.01)

    patched = client.patch(f"/api/services/{service['id']}", json={"description": "Curbside"}).json()
    assert patched["createdAt"] == service["createdAt"]
    assert datetime.fromisoformat(patched["updatedAt"]) > datetime.fromisoformat(service["updatedAt"])
    time.sleep(0.01)

    replaced = client.put(f"/api/services/{service['id']}", json={"name": "Delivery Plus"}).json()
    assert replaced["createdAt"] == service["createdAt"]
    assert datetime.fromisoformat(replaced["updatedAt"]) > datetime.fromisoformat(patched["updatedAt"])
