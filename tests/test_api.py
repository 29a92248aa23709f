"""End-to-end API tests through the FastAPI app with an in-memory database."""
from datetime import date, datetime, timedelta, timezone

import pytest


def seed_march(client, headers):
    client.post("/income", json={"amount": 5000, "currency": "USD"}, headers=headers)
    for category, amount, day in [
        ("Food", 800, "2024-03-02"),
        ("Rent", 1500, "2024-03-01"),
        ("Food", 200, "2024-03-20"),
        ("Shopping", 300, "2024-02-14"),
    ]:
        response = client.post(
            "/expenses",
            json={"amount": amount, "category": category, "date": day, "currency": "USD"},
            headers=headers,
        )
        assert response.status_code == 201, response.text


class TestAuth:

    def test_register_login_me(self, client, auth_headers):
        headers = auth_headers()
        me = client.get("/auth/me", headers=headers).json()

        assert me["email"] == "ana@example.com"
        assert me["currency"] == "USD"
        assert me["is_premium"] is False
        assert "hashed_password" not in me

    def test_duplicate_email(self, client, auth_headers):
        auth_headers()
        response = client.post("/auth/register", json={"email": "ana@example.com", "password": "another-pass"})
        assert response.status_code == 400

    def test_wrong_password(self, client, auth_headers):
        auth_headers()
        response = client.post("/auth/login", data={"username": "ana@example.com", "password": "nope-nope"})
        assert response.status_code == 401

    def test_short_password_rejected(self, client):
        response = client.post("/auth/register", json={"email": "x@example.com", "password": "short"})
        assert response.status_code == 400
        assert "password" in response.json()["detail"]

    def test_requires_token(self, client):
        assert client.get("/dashboard").status_code == 401
        assert client.get("/dashboard", headers={"Authorization": "Bearer garbage"}).status_code == 401

    def test_update_currency(self, client, auth_headers):
        headers = auth_headers()
        response = client.put("/auth/currency", json={"currency": "LKR"}, headers=headers)
        assert response.json()["currency"] == "LKR"


class TestRecords:

    def test_income_roundtrip(self, client, auth_headers):
        headers = auth_headers()
        assert client.get("/income", headers=headers).json() is None

        client.post("/income", json={"amount": 4200, "currency": "EUR"}, headers=headers)
        income = client.get("/income", headers=headers).json()
        assert income["amount"] == 4200
        assert income["currency"] == "EUR"

    def test_expense_validation(self, client, auth_headers):
        headers = auth_headers()
        bad = [
            {"amount": -5, "category": "Food", "date": "2024-03-01"},
            {"amount": 0, "category": "Food", "date": "2024-03-01"},
            {"amount": 5, "category": "Pets", "date": "2024-03-01"},
            {"amount": 5, "category": "Food", "date": "not-a-date"},
            {"amount": 5, "category": "Food", "date": "2024-03-01", "currency": "GBP"},
        ]
        for payload in bad:
            response = client.post("/expenses", json=payload, headers=headers)
            assert response.status_code == 400, payload
            assert response.json()["detail"]

    def test_list_expenses_by_month(self, client, auth_headers):
        headers = auth_headers()
        seed_march(client, headers)

        march = client.get("/expenses", params={"month": "2024-03"}, headers=headers).json()
        assert sorted(e["amount"] for e in march) == [200, 800, 1500]
        assert len(client.get("/expenses", headers=headers).json()) == 4
        assert client.get("/expenses", params={"month": "03-2024"}, headers=headers).status_code == 400

    def test_update_and_delete_expense(self, client, auth_headers):
        headers = auth_headers()
        created = client.post(
            "/expenses",
            json={"amount": 40, "category": "Health", "date": "2024-03-03", "note": "pharmacy"},
            headers=headers,
        ).json()

        updated = client.put(
            f"/expenses/{created['id']}",
            json={"amount": 45, "category": "Health", "date": "2024-03-03"},
            headers=headers,
        )
        assert updated.status_code == 200
        assert updated.json()["amount"] == 45

        assert client.delete(f"/expenses/{created['id']}", headers=headers).status_code == 204
        assert client.get("/expenses", headers=headers).json() == []

    def test_cannot_touch_other_users_expense(self, client, auth_headers):
        owner = auth_headers("owner@example.com")
        intruder = auth_headers("intruder@example.com")
        created = client.post(
            "/expenses", json={"amount": 10, "category": "Food", "date": "2024-03-03"}, headers=owner
        ).json()

        payload = {"amount": 1, "category": "Food", "date": "2024-03-03"}
        assert client.put(f"/expenses/{created['id']}", json=payload, headers=intruder).status_code == 404
        assert client.delete(f"/expenses/{created['id']}", headers=intruder).status_code == 404
        assert client.delete("/expenses/9999", headers=owner).status_code == 404

    def test_savings_goal_upsert(self, client, auth_headers):
        headers = auth_headers()
        assert client.get("/savings-goal", headers=headers).json() is None

        client.post("/savings-goal", json={"target_amount": 1000, "deadline": "2030-01-01"}, headers=headers)
        client.post("/savings-goal", json={"name": "Bike", "target_amount": 800, "deadline": "2030-06-01"}, headers=headers)
        goal = client.get("/savings-goal", headers=headers).json()
        assert goal["name"] == "Bike"
        assert goal["target_amount"] == 800

        bad = client.post("/savings-goal", json={"target_amount": 0, "deadline": "2030-06-01"}, headers=headers)
        assert bad.status_code == 400


class TestDashboard:

    def test_monthly_dashboard(self, client, auth_headers):
        headers = auth_headers()
        seed_march(client, headers)

        data = client.get("/dashboard", params={"month": "2024-03"}, headers=headers).json()

        assert data["month"] == "March 2024"
        assert data["income"]["amount"] == 5000
        assert data["expenses"]["total"] == 2500
        assert data["expenses"]["percent_of_income"] == 50
        assert data["expenses"]["by_category"] == {"Rent": 1500, "Food": 1000}
        assert data["expenses"]["categories_count"] == 2
        assert data["expenses"]["highest"] == {"category": "Rent", "amount": 1500}
        assert data["savings"]["amount"] == 2500
        assert data["savings"]["percent_of_income"] == 50
        # February spent 300: (5000 - 2500) - (5000 - 300)
        assert data["savings"]["trend"] == -2200
        assert data["goal"] is None
        assert data["formatted"]["total_expenses"] == "$2,500.00"

    def test_empty_month(self, client, auth_headers):
        headers = auth_headers()
        data = client.get("/dashboard", params={"month": "2021-07"}, headers=headers).json()

        assert data["expenses"]["by_category"] == {}
        assert data["expenses"]["highest"] == {"category": "", "amount": 0}
        assert data["expenses"]["percent_of_income"] == 0
        assert data["savings"]["percent_of_income"] == 0

    def test_display_currency_conversion(self, client, auth_headers):
        headers = auth_headers()
        seed_march(client, headers)

        data = client.get("/dashboard", params={"month": "2024-03", "currency": "EUR"}, headers=headers).json()

        assert data["working_currency"] == "USD"
        assert data["currency"] == "EUR"
        assert data["income"]["amount"] == 4750
        assert data["expenses"]["by_category"] == {"Rent": 1425, "Food": 950}
        assert data["expenses"]["percent_of_income"] == 50
        assert data["formatted"]["income"] == "€4,750.00"

    def test_goal_progress(self, client, auth_headers):
        headers = auth_headers()
        seed_march(client, headers)
        deadline = date.today() + timedelta(days=400)
        client.post(
            "/savings-goal",
            json={"name": "House", "target_amount": 1000, "deadline": deadline.isoformat()},
            headers=headers,
        )

        goal = client.get("/dashboard", params={"month": "2024-03"}, headers=headers).json()["goal"]

        assert goal["saved_amount"] == 2500
        assert goal["percent_complete"] == 100
        assert goal["months_left"] >= 1
        assert goal["on_track"] is True
        assert goal["description"].startswith("House by ")

    @pytest.mark.parametrize("month", ["2024-13", "2024/03", "abc"])
    def test_rejects_malformed_month(self, client, auth_headers, month):
        headers = auth_headers()
        response = client.get("/dashboard", params={"month": month}, headers=headers)
        assert response.status_code == 400

    def test_defaults_to_current_month(self, client, auth_headers):
        headers = auth_headers()
        data = client.get("/dashboard", headers=headers).json()
        assert data["month"] == datetime.now(timezone.utc).strftime("%B %Y")


class TestExport:

    def test_requires_premium(self, client, auth_headers):
        headers = auth_headers()
        assert client.get("/export/report", headers=headers).status_code == 403

    def test_html_report(self, client, auth_headers):
        headers = auth_headers()
        seed_march(client, headers)
        assert client.post("/auth/subscribe", headers=headers).json()["is_premium"] is True

        response = client.get("/export/report", params={"month": "2024-03"}, headers=headers)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Monthly Finance Report - March 2024" in response.text
        assert "Rent: $1,500.00 (60%)" in response.text
        assert "Mar 20, 2024" in response.text


class TestFx:

    def test_rate(self, client):
        data = client.get("/fx/rate", params={"from": "USD", "to": "LKR"}).json()
        assert data["rate"] == 300
        assert client.get("/fx/rate", params={"from": "USD", "to": "USD"}).json()["source"] == "identity"
        assert client.get("/fx/rate", params={"from": "USD", "to": "GBP"}).status_code == 400

    def test_currencies(self, client):
        codes = [c["value"] for c in client.get("/fx/currencies").json()]
        assert codes == ["USD", "EUR", "LKR"]


def test_register_and_income_update_store_timestamps(client, auth_headers):
    headers = auth_headers("stamp@example.com")

    first = client.post("/income", json={"amount": 100, "currency": "USD"}, headers=headers)
    second = client.post("/income", json={"amount": 150, "currency": "USD"}, headers=headers)

    assert first.status_code == 200, first.text
    assert second.status_code == 200, second.text
    assert second.json()["amount"] == 150
    assert second.json()["updated_at"]
