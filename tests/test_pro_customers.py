"""Pro customer endpoints."""
import time
from datetime import datetime


def make_customer(client, business_name, **fields):
    resp = client.post("/api/pro-customers", json={"businessName": business_name, **fields})
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_and_defaults(client):
    customer = make_customer(client, "Reyes Remodeling", contactName="Dana Reyes", trades=["remodeler"])
    assert customer["mvpRewardsProgram"] is False
    assert customer["trades"] == ["remodeler"]
    assert client.get("/api/pro-customers", params={"id": customer["id"]}).json() == customer


def test_search_and_trade_filter(client):
    make_customer(client, "Reyes Remodeling", contactName="Dana Reyes", trades=["remodeler"])
    make_customer(client, "Ortiz Electric", contactName="Sam Ortiz", trades=["electrician", "hvac"])

    by_contact = client.get("/api/pro-customers", params={"search": "dana"}).json()
    assert [c["businessName"] for c in by_contact] == ["Reyes Remodeling"]

    by_trade = client.get("/api/pro-customers", params={"trade": "hvac"}).json()
    assert [c["businessName"] for c in by_trade] == ["Ortiz Electric"]


def test_patch_put_delete(client):
    customer = make_customer(client, "Reyes Remodeling", city="Austin", mvpRewardsProgram=True)

    patched = client.patch(f"/api/pro-customers/{customer['id']}", json={"state": "TX"}).json()
    assert patched["city"] == "Austin"
    assert patched["mvpRewardsProgram"] is True

    replaced = client.put(f"/api/pro-customers/{customer['id']}", json={"businessName": "Reyes & Sons"}).json()
    assert replaced["city"] is None
    assert replaced["mvpRewardsProgram"] is False

    assert client.delete(f"/api/pro-customers/{customer['id']}").json() == {"success": True}
    resp = client.get(f"/api/pro-customers/{customer['id']}")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Pro customer not found"}


def test_business_name_required(client):
    assert client.post("/api/pro-customers", json={"contactName": "Dana"}).status_code == 400


def test_payment_preference_lookup(client):
    lookup = client.get("/api/pro-customers/payment-preference-lookup").json()
    ids = [item["id"] for item in lookup]
    assert "lowes-pro-rewards" in ids
    assert "cash" in ids


def test_updates_refresh_updated_at(client):
    customer = make_customer(client, "Reyes Remodeling")
    time.sleep(0.01)

    patched = client.patch(f"/api/pro-customers/{customer['id']}", json={"city": "Austin"}).json()
    assert datetime.fromisoformat(patched["updatedAt"]) > datetime.fromisoformat(customer["updatedAt"])
    time.sleep(0.01)

    replaced = client.put(f"/api/pro-customers/{customer['id']}", json={"businessName": "Reyes & Sons"}).json()
    assert replaced["createdAt"] == customer["createdAt"]
    assert datetime.fromisoformat(replaced["updatedAt"]) > datetime.fromisoformat(patched["updatedAt"])


def test_rewards_flag_never_null(client):
    assert client.post("/api/pro-customers", json={
        "businessName": "Reyes Remodeling", "mvpRewardsProgram": None}).status_code == 400

    customer = make_customer(client, "Reyes Remodeling", mvpRewardsProgram=True)
    blank = client.put(f"/api/pro-customers/{customer['id']}", json={
        "businessName": "Reyes Remodeling", "mvpRewardsProgram": ""})
    assert blank.status_code == 400
    assert client.get(f"/api/pro-customers/{customer['id']}").json()["mvpRewardsProgram"] is True
