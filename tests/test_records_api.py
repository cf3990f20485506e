"""Tests for the record CRUD endpoints (app/api/v1/endpoints/records.py)."""

import uuid


def test_create_record_derives_remaining(create_record):
    record = create_record(number="1", fullName="Amina", fileAmount=1000, payment1=400, payment2=100)

    assert record["remaining"] == 500
    assert record["number"] == "1"
    assert record["fullName"] == "Amina"
    assert record["rowColor"] == ""
    assert record["columnColors"] == {}
    uuid.UUID(record["id"])
    assert record["createdAt"]


def test_create_record_defaults_missing_fields(create_record):
    record = create_record()

    assert record["number"] == ""
    assert record["fullName"] == ""
    assert record["paymentDate1"] == ""
    assert record["fileAmount"] == 0
    assert record["payment1"] == 0
    assert record["payment2"] == 0
    assert record["remaining"] == 0


def test_create_record_coerces_non_numeric_amounts(create_record):
    record = create_record(fileAmount="1200", payment1="abc", payment2=None)

    assert record["fileAmount"] == 1200
    assert record["payment1"] == 0
    assert record["payment2"] == 0
    assert record["remaining"] == 1200


def test_create_record_with_huge_amount_coerces_to_zero(client):
    resp = client.post(
        "/records",
        content='{"number": "1", "fileAmount": 1' + "0" * 400 + "}",
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 201
    assert resp.json()["fileAmount"] == 0
    assert resp.json()["remaining"] == 0


def test_create_record_ignores_client_remaining(create_record):
    record = create_record(fileAmount=300, payment1=100, remaining=9999)

    assert record["remaining"] == 200


def test_update_recomputes_remaining(client, create_record):
    record = create_record(fileAmount=1000, payment1=400, payment2=100)

    resp = client.put(f"/records/{record['id']}", json={"payment2": 600})
    assert resp.status_code == 200
    assert resp.json()["remaining"] == 0

    resp = client.put(f"/records/{record['id']}", json={"payment1": 1200})
    assert resp.json()["remaining"] == -600


def test_update_only_touches_given_fields(client, create_record):
    record = create_record(number="7", fullName="Karim", note="first", fileAmount=500)

    resp = client.put(f"/records/{record['id']}", json={"note": "second"})
    body = resp.json()

    assert body["note"] == "second"
    assert body["number"] == "7"
    assert body["fullName"] == "Karim"
    assert body["fileAmount"] == 500


def test_update_can_set_amount_back_to_zero(client, create_record):
    record = create_record(fileAmount=500, payment1=200)

    body = client.put(f"/records/{record['id']}", json={"payment1": 0}).json()

    assert body["payment1"] == 0
    assert body["remaining"] == 500


def test_update_with_full_record_body_keeps_identity(client, create_record):
    record = create_record(number="3", fileAmount=100)
    sent = {**record, "id": str(uuid.uuid4()), "remaining": 12345, "createdAt": "2000-01-01T00:00:00"}
    sent["payment1"] = 40

    body = client.put(f"/records/{record['id']}", json=sent).json()

    assert body["id"] == record["id"]
    assert body["createdAt"] == record["createdAt"]
    assert body["remaining"] == 60


def test_update_is_idempotent(client, create_record):
    record = create_record(fileAmount=1000)
    payload = {"payment1": 250, "note": "paid"}

    first = client.put(f"/records/{record['id']}", json=payload).json()
    second = client.put(f"/records/{record['id']}", json=payload).json()

    first.pop("updatedAt")
    second.pop("updatedAt")
    assert first == second


def test_update_refreshes_updated_at(client, create_record):
    record = create_record(fileAmount=1000)

    body = client.put(f"/records/{record['id']}", json={"payment1": 1}).json()

    assert body["updatedAt"] >= record["updatedAt"]


def test_update_unknown_record_returns_404(client):
    resp = client.put(f"/records/{uuid.uuid4()}", json={"payment1": 1})

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Record not found"


def test_delete_record(client, create_record):
    record = create_record(number="1")

    resp = client.delete(f"/records/{record['id']}")

    assert resp.status_code == 200
    assert client.get("/records").json() == []


def test_delete_unknown_record_returns_404(client):
    resp = client.delete(f"/records/{uuid.uuid4()}")

    assert resp.status_code == 404


def test_list_records_oldest_first(client, create_record):
    ids = [create_record(number=str(n))["id"] for n in range(3)]

    listed = client.get("/records").json()

    assert [r["id"] for r in listed] == ids


def test_listed_records_include_every_attribute(client, create_record):
    create_record(number="1")

    record = client.get("/records").json()[0]

    assert set(record) == {
        "id", "number", "fullName", "birthInfo", "specialization", "cycle", "group",
        "intermediary", "diploma", "note", "fileAmount", "payment1", "paymentDate1",
        "payment2", "paymentDate2", "remaining", "rowColor", "columnColors",
        "createdAt", "updatedAt",
    }


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
