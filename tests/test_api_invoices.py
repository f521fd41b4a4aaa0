from datetime import date, timedelta

from fastapi.testclient import TestClient


def _strip_id(record: dict) -> dict:
    return {key: value for key, value in record.items() if key != "id"}


def test_seeded_invoices_listed(client: TestClient) -> None:
    response = client.get("/api/invoices")

    assert response.status_code == 200
    numbers = sorted(invoice["invoiceNumber"] for invoice in response.json())
    assert numbers == ["INV-001", "INV-002"]


def test_create_invoice_round_trip(client: TestClient, invoice_payload) -> None:
    payload = invoice_payload()

    response = client.post("/api/invoices", json=payload)

    assert response.status_code == 201
    created = response.json()
    assert created["id"] == 3
    assert _strip_id(created) == payload

    fetched = client.get(f"/api/invoices/{created['id']}").json()
    assert fetched == created


def test_create_invoice_without_totals_computes_them(client: TestClient, invoice_payload) -> None:
    payload = invoice_payload()
    for field in ("subtotal", "tax", "total"):
        payload.pop(field)

    created = client.post("/api/invoices", json=payload).json()

    assert (created["subtotal"], created["tax"], created["total"]) == (200.0, 20.0, 220.0)


def test_numeric_strings_are_coerced(client: TestClient, invoice_payload) -> None:
    payload = invoice_payload(
        customerId="2",
        items=[{"description": "Hosting", "quantity": "3", "unitPrice": "10.5"}],
        subtotal="31.5",
        tax="0",
        total="31.5",
    )

    response = client.post("/api/invoices", json=payload)

    assert response.status_code == 201
    body = response.json()
    assert body["customerId"] == 2
    assert body["items"] == [{"description": "Hosting", "quantity": 3, "unitPrice": 10.5, "taxRate": 0}]


def test_empty_items_rejected(client: TestClient, invoice_payload) -> None:
    response = client.post("/api/invoices", json=invoice_payload(items=[]))

    assert response.status_code == 400
    assert response.json()["field"] == "items"


def test_invalid_line_item_reports_path(client: TestClient, invoice_payload) -> None:
    payload = invoice_payload(items=[{"description": "Bad", "quantity": 0, "unitPrice": 10}])

    response = client.post("/api/invoices", json=payload)

    assert response.status_code == 400
    assert response.json()["field"] == "items.0.quantity"


def test_totals_mismatch_rejected(client: TestClient, invoice_payload) -> None:
    response = client.post("/api/invoices", json=invoice_payload(total=500))

    assert response.status_code == 400
    assert response.json()["field"] == "total"
    assert len(client.get("/api/invoices").json()) == 2


def test_non_finite_total_rejected(client: TestClient, invoice_payload) -> None:
    response = client.post("/api/invoices", json=invoice_payload(total="NaN"))

    assert response.status_code == 400
    assert response.json()["field"] == "total"
    assert len(client.get("/api/invoices").json()) == 2


def test_non_finite_unit_price_rejected(client: TestClient, invoice_payload) -> None:
    payload = invoice_payload(
        subtotal=None,
        tax=None,
        total=None,
        items=[{"description": "X", "quantity": 1, "unitPrice": "Infinity", "taxRate": 10}],
    )

    response = client.post("/api/invoices", json=payload)

    assert response.status_code == 400
    assert response.json()["field"] == "items.0.unitPrice"


def test_overdue_cannot_be_stored(client: TestClient, invoice_payload) -> None:
    response = client.post("/api/invoices", json=invoice_payload(status="overdue"))

    assert response.status_code == 400
    assert response.json()["field"] == "status"


def test_bad_date_rejected(client: TestClient, invoice_payload) -> None:
    response = client.post("/api/invoices", json=invoice_payload(dueDate="next week"))

    assert response.status_code == 400
    assert response.json()["field"] == "dueDate"


def test_status_update_leaves_other_fields_identical(client: TestClient) -> None:
    before = client.get("/api/invoices/2").json()

    response = client.put("/api/invoices/2", json={"status": "paid"})

    assert response.status_code == 200
    after = response.json()
    assert after["status"] == "paid"
    assert {**after, "status": before["status"]} == before


def test_update_replacing_items_recomputes_totals(client: TestClient) -> None:
    response = client.put(
        "/api/invoices/1",
        json={"items": [{"description": "Audit", "quantity": 1, "unitPrice": 300, "taxRate": 5}]},
    )

    assert response.status_code == 200
    body = response.json()
    assert len(body["items"]) == 1
    assert (body["subtotal"], body["tax"], body["total"]) == (300.0, 15.0, 315.0)


def test_update_errors(client: TestClient) -> None:
    assert client.put("/api/invoices/999", json={"status": "paid"}).status_code == 404
    assert client.put("/api/invoices/1", json={"items": []}).json()["field"] == "items"
    assert client.put("/api/invoices/1", json={"total": 1}).json()["field"] == "total"


def test_delete_invoice_is_idempotent(client: TestClient) -> None:
    assert client.delete("/api/invoices/1").status_code == 204
    assert client.delete("/api/invoices/1").status_code == 204
    assert client.get("/api/invoices/1").status_code == 404


def test_list_filters(empty_client: TestClient, invoice_payload) -> None:
    first = empty_client.post(
        "/api/invoices",
        json=invoice_payload(customerId=1, date="2024-01-01", status="paid", invoiceNumber="INV-001"),
    ).json()
    second = empty_client.post(
        "/api/invoices",
        json=invoice_payload(customerId=2, date="2024-02-01", status="pending", invoiceNumber="INV-002"),
    ).json()

    def ids(**params):
        response = empty_client.get("/api/invoices", params=params)
        assert response.status_code == 200
        return [invoice["id"] for invoice in response.json()]

    assert ids() == [second["id"], first["id"]]
    assert ids(status="paid") == [first["id"]]
    assert ids(customerId=2) == [second["id"]]
    assert ids(startDate="2024-01-15") == [second["id"]]
    assert ids(endDate="2024-01-31") == [first["id"]]
    assert ids(status="draft") == []


def test_invalid_filter_rejected(client: TestClient) -> None:
    response = client.get("/api/invoices", params={"customerId": "abc"})

    assert response.status_code == 400
    assert response.json()["field"] == "customerId"


def test_next_invoice_number(client: TestClient) -> None:
    assert client.get("/api/invoices/next-number").json() == {"invoiceNumber": "INV-003"}


def test_next_invoice_number_on_empty_database(empty_client: TestClient) -> None:
    assert empty_client.get("/api/invoices/next-number").json() == {"invoiceNumber": "INV-001"}


def test_print_invoice(client: TestClient) -> None:
    response = client.get("/api/invoices/1/print")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    body = response.text
    assert "#INV-001" in body
    assert "My Billing Company" in body
    assert "Acme Corp" in body
    assert "Strategy Session" in body
    assert "₹1,100.00" in body
    assert "Consulting services for Q1" in body


def test_print_invoice_for_deleted_customer(client: TestClient) -> None:
    client.delete("/api/customers/2")

    response = client.get("/api/invoices/2/print")

    assert response.status_code == 200
    assert "Unknown customer" in response.text


def test_print_shows_overdue_status(client: TestClient, invoice_payload) -> None:
    past = date.today() - timedelta(days=30)
    created = client.post(
        "/api/invoices",
        json=invoice_payload(date=past.isoformat(), dueDate=(past + timedelta(days=1)).isoformat()),
    ).json()

    body = client.get(f"/api/invoices/{created['id']}/print").text

    assert '<p class="status">overdue</p>' in body
    assert client.get(f"/api/invoices/{created['id']}").json()["status"] == "pending"


def test_print_unknown_invoice(client: TestClient) -> None:
    assert client.get("/api/invoices/999/print").status_code == 404
