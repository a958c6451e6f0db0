"""HTTP tests for /api/income."""

import pytest


def post_income(client, year=2025, month=1, day=1, total=100):
    return client.post("/api/income", json={"year": year, "month": month, "day": day, "totalIncome": total})


class TestCreateIncomeApi:
    def test_create_with_month_name(self, client):
        resp = post_income(client, month="January", day=15, total=150)
        assert resp.status_code == 201
        body = resp.json()
        assert body["month"] == 1
        assert body["day"] == 15
        assert body["totalIncome"] == 150.0

    def test_duplicate_date(self, client):
        assert post_income(client, month=3, day=8).status_code == 201
        resp = post_income(client, month="march", day=8)
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "DUPLICATE_DATE"
        assert resp.json()["message"].startswith("Income exists for this date")

    @pytest.mark.parametrize("missing", ["year", "month", "day", "totalIncome"])
    def test_missing_field(self, client, missing):
        payload = {"year": 2025, "month": 1, "day": 1, "totalIncome": 10}
        del payload[missing]
        resp = client.post("/api/income", json=payload)
        assert resp.status_code == 400
        assert missing in resp.json()["message"]

    def test_invalid_month(self, client):
        resp = post_income(client, month="Brumaire")
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "INVALID_MONTH"

    def test_boolean_month_rejected(self, client):
        resp = post_income(client, month=True)
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "INVALID_MONTH"
        assert client.get("/api/income").json() == []

    @pytest.mark.parametrize("day", [0, 32])
    def test_day_out_of_range(self, client, day):
        assert post_income(client, day=day).status_code == 400


class TestQueryIncomeApi:
    def test_year(self, client):
        post_income(client, month=2, day=1, total=20)
        post_income(client, month=1, day=2, total=10)
        body = client.get("/api/income/2025").json()
        assert list(body) == ["January", "February"]

    def test_year_not_found(self, client):
        assert client.get("/api/income/2030").status_code == 404

    def test_month_aggregate(self, client):
        post_income(client, month=5, day=2, total=200)
        post_income(client, month=5, day=1, total=100.25)

        for month in ("5", "may", "MAY", "05"):
            resp = client.get(f"/api/income/2025/{month}")
            assert resp.status_code == 200
            body = resp.json()
            assert body["totalMonthlyIncome"] == pytest.approx(300.25)
            assert [d["day"] for d in body["dailyIncomes"]] == [1, 2]

    def test_month_not_found_and_invalid(self, client):
        assert client.get("/api/income/2025/june").status_code == 404
        assert client.get("/api/income/2025/juney").status_code == 400

    def test_day(self, client):
        post_income(client, month=12, day=31, total=5)
        assert client.get("/api/income/2025/december/31").json()["totalIncome"] == 5.0
        assert client.get("/api/income/2025/12/30").status_code == 404
        assert client.get("/api/income/2025/12/32").status_code == 400

    def test_list_all_in_date_order(self, client):
        post_income(client, year=2025, month=1, day=1)
        post_income(client, year=2024, month=6, day=1)
        dates = [(i["year"], i["month"], i["day"]) for i in client.get("/api/income").json()]
        assert dates == [(2024, 6, 1), (2025, 1, 1)]


class TestUpdateDeleteIncomeApi:
    def test_update(self, client):
        created = post_income(client).json()
        resp = client.put(f"/api/income/{created['id']}", json={"totalIncome": 42, "month": "February"})
        assert resp.status_code == 200
        assert resp.json()["month"] == 2
        assert resp.json()["totalIncome"] == 42.0

    def test_update_to_taken_date(self, client):
        post_income(client, day=1)
        other = post_income(client, day=2).json()
        resp = client.put(f"/api/income/{other['id']}", json={"day": 1})
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "DUPLICATE_DATE"

    def test_update_invalid_month(self, client):
        created = post_income(client).json()
        assert client.put(f"/api/income/{created['id']}", json={"month": 13}).status_code == 400

    def test_update_boolean_month_rejected(self, client):
        created = post_income(client, month=5).json()
        resp = client.put(f"/api/income/{created['id']}", json={"month": True})
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "INVALID_MONTH"
        assert client.get("/api/income/2025/5/1").status_code == 200

    def test_delete(self, client):
        created = post_income(client).json()
        assert client.delete(f"/api/income/{created['id']}").status_code == 200
        assert client.delete(f"/api/income/{created['id']}").status_code == 404
        assert client.put(f"/api/income/{created['id']}", json={"day": 3}).status_code == 404
