"""HTTP tests for /api/comments."""


def post_comment(client, car_id, name="Ali", text="Clean and fast"):
    return client.post("/api/comments", json={"carId": car_id, "name": name, "text": text})


class TestComments:
    def test_create_and_list_for_car(self, client, car):
        first = post_comment(client, car["id"], text="first")
        second = post_comment(client, car["id"], text="second")
        assert first.status_code == second.status_code == 201

        listed = client.get(f"/api/comments/{car['id']}").json()
        assert [c["text"] for c in listed] == ["second", "first"]
        assert all(c["carId"] == car["id"] for c in listed)

    def test_author_alias(self, client, car):
        resp = client.post("/api/comments", json={"carId": car["id"], "author": "Guest", "text": "ok"})
        assert resp.status_code == 201
        assert resp.json()["name"] == "Guest"

    def test_unknown_car(self, client):
        resp = post_comment(client, 9999)
        assert resp.status_code == 404
        assert resp.json()["message"] == "Car not found"

    def test_missing_text(self, client, car):
        resp = client.post("/api/comments", json={"carId": car["id"], "name": "Ali"})
        assert resp.status_code == 400

    def test_list_filter_and_get(self, client, car):
        other = client.post("/api/cars", json={
            "name": "Tahoe", "brand": "Chevrolet", "category": "SUV", "pricePerDay": 200,
            "gallery": ["1", "2", "3", "4"],
        }).json()
        mine = post_comment(client, car["id"]).json()
        post_comment(client, other["id"])

        assert len(client.get("/api/comments").json()) == 2
        assert [c["id"] for c in client.get("/api/comments", params={"carId": car["id"]}).json()] == [mine["id"]]
        assert client.get(f"/api/comments/{car['id']}/{mine['id']}").json() == mine
        assert client.get(f"/api/comments/{other['id']}/{mine['id']}").status_code == 404

    def test_update_and_delete(self, client, car):
        comment = post_comment(client, car["id"]).json()

        resp = client.put(f"/api/comments/{comment['id']}", json={"text": "Edited"})
        assert resp.status_code == 200
        assert resp.json()["text"] == "Edited"
        assert resp.json()["name"] == "Ali"

        assert client.delete(f"/api/comments/{comment['id']}").json()["message"] == "Comment deleted successfully"
        assert client.put(f"/api/comments/{comment['id']}", json={"text": "x"}).status_code == 404
        assert client.delete(f"/api/comments/{comment['id']}").status_code == 404
