from fastapi.testclient import TestClient


NEW_CUSTOMER = {
    "name": "Northwind Traders",
    "email": "ap@northwind.com",
    "phone": "555-0300",
    "address": "9 Dock Street, Port Town",
}


def test_list_customers_returns_seed_data(client: TestClient) -> None:
    response = client.get("/api/customers")

    assert response.status_code == 200
    names = [customer["name"] for customer in response.json()]
    assert names == ["Acme Corp", "Global Services Inc"]


def test_get_unknown_customer_returns_404(client: TestClient) -> None:
    response = client.get("/api/customers/999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Customer not found"


def test_create_customer_round_trip(client: TestClient) -> None:
    response = client.post("/api/customers", json=NEW_CUSTOMER)

    assert response.status_code == 201
    created = response.json()
    assert created == {**NEW_CUSTOMER, "id": 3}

    fetched = client.get(f"/api/customers/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created


def test_create_customer_with_bad_email_names_field(client: TestClient) -> None:
    response = client.post("/api/customers", json={**NEW_CUSTOMER, "email": "not-an-email"})

    assert response.status_code == 400
    body = response.json()
    assert body["field"] == "email"
    assert body["message"]


def test_create_customer_with_empty_name_is_rejected(client: TestClient) -> None:
    response = client.post("/api/customers", json={**NEW_CUSTOMER, "name": ""})

    assert response.status_code == 400
    assert response.json()["field"] == "name"


def test_malformed_json_body_has_no_field(client: TestClient) -> None:
    response = client.post(
        "/api/customers",
        content='{"name": ',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["field"] is None
    assert body["message"]


def test_partial_update(client: TestClient) -> None:
    response = client.put("/api/customers/1", json={"phone": "555-7777"})

    assert response.status_code == 200
    body = response.json()
    assert body["phone"] == "555-7777"
    assert body["name"] == "Acme Corp"
    assert body["email"] == "contact@acme.com"


def test_update_validation_and_missing_record(client: TestClient) -> None:
    assert client.put("/api/customers/1", json={"email": "nope"}).json()["field"] == "email"
    assert client.put("/api/customers/1", json={"name": None}).status_code == 400
    assert client.put("/api/customers/999", json={"name": "Ghost"}).status_code == 404


def test_delete_customer_is_idempotent_and_keeps_invoices(client: TestClient) -> None:
    first = client.delete("/api/customers/1")
    second = client.delete("/api/customers/1")

    assert first.status_code == 204
    assert first.content == b""
    assert second.status_code == 204
    assert client.get("/api/customers/1").status_code == 404

    invoices = client.get("/api/invoices", params={"customerId": 1}).json()
    assert len(invoices) == 1


def test_new_customer_id_not_reused_after_delete(client: TestClient) -> None:
    client.delete("/api/customers/2")

    response = client.post("/api/customers", json=NEW_CUSTOMER)

    assert response.json()["id"] == 3

