"""Vendor endpoints: numbering, search, merge vs replace updates, contacts."""
import time
from datetime import datetime

from lowespro_service.app.crud.procurement.vendors_crud import (
    format_vendor_number, parse_vendor_number)
from lowespro_service.app.models.procurement.vendors import Vendor


def test_vendor_numbers_are_sequential(make_vendor):
    first = make_vendor("Acme Supply")
    second = make_vendor("Bolt Hardware")
    assert first["vendorNumber"] == "V#00001"
    assert second["vendorNumber"] == "V#00002"
    assert first["id"] != second["id"]


def test_vendor_numbers_not_reused_after_delete(client, make_vendor):
    make_vendor("Acme Supply")
    second = make_vendor("Bolt Hardware")
    assert client.delete(f"/api/vendors/{second['id']}").json() == {"success": True}

    third = make_vendor("Cedar Lumber")
    assert third["vendorNumber"] == "V#00003"


def test_counter_seeded_from_existing_numbers(db, make_vendor):
    db.add(Vendor(company_name="Legacy Co", vendor_number="V#00041"))
    db.commit()

    assert make_vendor("New Co")["vendorNumber"] == "V#00042"


def test_vendor_number_helpers():
    assert format_vendor_number(7) == "V#00007"
    assert format_vendor_number(123456) == "V#123456"
    assert parse_vendor_number("V#00012") == 12
    assert parse_vendor_number("legacy-12") is None
    assert parse_vendor_number(None) is None


def test_create_requires_company_name(client):
    resp = client.post("/api/vendors", json={"phone": "555-0100"})
    assert resp.status_code == 400
    assert "companyName" in resp.json()["error"]


def test_blank_company_name_rejected(client):
    resp = client.post("/api/vendors", json={"companyName": "   "})
    assert resp.status_code == 400


def test_client_cannot_choose_vendor_number(make_vendor):
    vendor = make_vendor("Acme Supply", vendorNumber="V#99999")
    assert vendor["vendorNumber"] == "V#00001"


def test_list_and_search(client, make_vendor):
    make_vendor("Acme Supply")
    make_vendor("Bolt Hardware")

    all_vendors = client.get("/api/vendors").json()
    assert len(all_vendors) == 2

    found = client.get("/api/vendors", params={"search": "bolt"}).json()
    assert [v["companyName"] for v in found] == ["Bolt Hardware"]

    by_number = client.get("/api/vendors", params={"search": "V#00001"}).json()
    assert [v["companyName"] for v in by_number] == ["Acme Supply"]


def test_filter_by_category_and_service(client, make_vendor):
    make_vendor("Acme Supply", categories=["Roofing", "Lumber"], services=["Delivery"])
    make_vendor("Bolt Hardware", categories=["Hardware"])

    roofing = client.get("/api/vendors", params={"category": "Roofing"}).json()
    assert [v["companyName"] for v in roofing] == ["Acme Supply"]

    delivery = client.get("/api/vendors", params={"service": "Delivery"}).json()
    assert [v["companyName"] for v in delivery] == ["Acme Supply"]

    assert client.get("/api/vendors", params={"category": "Roof"}).json() == []


def test_get_by_path_and_query_id(client, make_vendor):
    vendor = make_vendor("Acme Supply")

    by_path = client.get(f"/api/vendors/{vendor['id']}")
    by_query = client.get("/api/vendors", params={"id": vendor["id"]})
    assert by_path.status_code == 200
    assert by_query.json() == by_path.json()


def test_get_unknown_vendor(client):
    resp = client.get("/api/vendors/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Vendor not found"}


def test_patch_merges_fields(client, make_vendor):
    vendor = make_vendor("Acme Supply", phone="555-0100", notes="net 30")
    time.sleep(0.01)

    resp = client.patch(f"/api/vendors/{vendor['id']}", json={"phone": "555-0199"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["phone"] == "555-0199"
    assert body["notes"] == "net 30"
    assert body["companyName"] == "Acme Supply"
    assert body["vendorNumber"] == vendor["vendorNumber"]
    assert body["createdAt"] == vendor["createdAt"]
    assert datetime.fromisoformat(body["updatedAt"]) > datetime.fromisoformat(vendor["updatedAt"])


def test_patch_cannot_null_company_name(client, make_vendor):
    vendor = make_vendor("Acme Supply")
    resp = client.patch(f"/api/vendors/{vendor['id']}", json={"companyName": None})
    assert resp.status_code == 400
    assert "companyName" in resp.json()["error"]


def test_put_replaces_fields(client, make_vendor):
    vendor = make_vendor("Acme Supply", phone="555-0100", notes="net 30")
    time.sleep(0.01)

    resp = client.put(f"/api/vendors/{vendor['id']}", json={"companyName": "Acme Building Supply"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["companyName"] == "Acme Building Supply"
    assert body["phone"] is None
    assert body["notes"] is None
    assert body["vendorNumber"] == vendor["vendorNumber"]
    assert body["createdAt"] == vendor["createdAt"]
    assert datetime.fromisoformat(body["updatedAt"]) > datetime.fromisoformat(vendor["updatedAt"])


def test_put_requires_company_name(client, make_vendor):
    vendor = make_vendor("Acme Supply")
    resp = client.put(f"/api/vendors/{vendor['id']}", json={"phone": "555-0100"})
    assert resp.status_code == 400


def test_update_and_delete_by_query_id(client, make_vendor):
    vendor = make_vendor("Acme Supply")

    resp = client.patch("/api/vendors", params={"id": vendor["id"]}, json={"fax": "555-0111"})
    assert resp.json()["fax"] == "555-0111"

    assert client.delete("/api/vendors", params={"id": vendor["id"]}).json() == {"success": True}
    assert client.get(f"/api/vendors/{vendor['id']}").status_code == 404


def test_update_without_id_is_rejected(client):
    resp = client.patch("/api/vendors", json={"fax": "555-0111"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid vendor ID"}

    assert client.delete("/api/vendors").status_code == 400


def test_delete_unknown_vendor(client):
    resp = client.delete("/api/vendors/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Vendor not found"}


def test_contact_lists_round_trip(client, make_vendor):
    phones = [
        {"number": "555-0100", "label": "Main"},
        {"number": "555-0101", "label": "Orders", "extension": "12"},
    ]
    emails = [{"address": "orders@acme.test", "label": "Orders"}]
    vendor = make_vendor("Acme Supply", phones=phones, emails=emails)

    fetched = client.get(f"/api/vendors/{vendor['id']}").json()
    assert fetched["phones"] == phones
    assert fetched["emails"] == emails


def test_blank_strings_are_cleaned(make_vendor):
    vendor = make_vendor("  Acme Supply  ", phone="", categories=["Roofing", " ", ""])
    assert vendor["companyName"] == "Acme Supply"
    assert vendor["phone"] is None
    assert vendor["categories"] == ["Roofing"]


def test_delete_detaches_representatives(client, make_vendor):
    vendor = make_vendor("Acme Supply")
    rep = client.post("/api/representatives", json={"name": "Dana Reyes", "vendorId": vendor["id"]}).json()

    client.delete(f"/api/vendors/{vendor['id']}")

    kept = client.get(f"/api/representatives/{rep['id']}").json()
    assert kept["vendorId"] is None
    assert kept["vendorName"] == "Acme Supply"


def test_unsupported_method(client):
    resp = client.post("/api/vendors/some-id", json={"companyName": "x"})
    assert resp.status_code == 405
    assert resp.json() == {"error": "Method not allowed"}


def test_create_recovers_from_taken_number(client, db, make_vendor):
    make_vendor("Acme Supply")
    # row imported behind the counter's back
    db.add(Vendor(company_name="Imported Co", vendor_number="V#00002"))
    db.commit()

    third = client.post("/api/vendors", json={"companyName": "Bolt Hardware"})
    assert third.status_code == 201
    assert third.json()["vendorNumber"] == "V#00003"

    fourth = client.post("/api/vendors", json={"companyName": "Cedar Lumber"})
    assert fourth.status_code == 201
    assert fourth.json()["vendorNumber"] == "V#00004"
