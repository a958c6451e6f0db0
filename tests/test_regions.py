"""Region CRUD and startup seeding."""

from collections import Counter
from unittest.mock import patch

import pytest
from sqlalchemy.exc import IntegrityError

from app.main import bootstrap
from app.models.region import Region
from app.services.region_service import DEFAULT_REGIONS, RegionService, region_service


class TestSeeding:
    def test_startup_seeds_all_regions(self, client):
        names = [r["name"] for r in client.get("/api/regions").json()]
        assert sorted(names) == sorted(DEFAULT_REGIONS)
        assert len(DEFAULT_REGIONS) == 12

    def test_seed_twice_never_duplicates(self, db):
        assert region_service.seed_defaults(db) == 12
        assert region_service.seed_defaults(db) == 0
        counts = Counter(name for (name,) in db.query(Region.name).all())
        assert all(counts[name] == 1 for name in DEFAULT_REGIONS)
        assert db.query(Region).count() == 12

    def test_bootstrap_is_idempotent(self, db):
        bootstrap()
        bootstrap()
        assert db.query(Region).count() == len(DEFAULT_REGIONS)

    def test_seed_keeps_custom_regions(self, db):
        db.add(Region(name="Qoraqalpog'iston"))
        db.add(Region(name="Toshkent"))
        db.commit()
        assert region_service.seed_defaults(db) == 11
        assert db.query(Region).count() == 13

    def test_seed_retries_after_concurrent_insert(self, db):
        db.add(Region(name="Toshkent"))
        db.commit()
        real = RegionService._missing_defaults
        # First pass sees a stale view, as if another worker inserted Toshkent meanwhile
        stale = [list(DEFAULT_REGIONS), None]

        def missing(self, session):
            first = stale.pop(0)
            return first if first is not None else real(self, session)

        with patch.object(RegionService, "_missing_defaults", missing):
            added = region_service.seed_defaults(db)
        assert added == 11
        assert db.query(Region).count() == 12

    def test_seed_gives_up_after_second_clash(self, db):
        region_service.seed_defaults(db)
        with patch.object(RegionService, "_missing_defaults", lambda self, session: list(DEFAULT_REGIONS)):
            with pytest.raises(IntegrityError):
                region_service.seed_defaults(db)
        assert db.query(Region).count() == 12


class TestRegionApi:
    def test_create_and_get(self, client):
        resp = client.post("/api/regions", json={"name": "Nukus"})
        assert resp.status_code == 201
        region = resp.json()
        assert client.get(f"/api/regions/{region['id']}").json() == region

    def test_duplicate_name(self, client):
        resp = client.post("/api/regions", json={"name": "Toshkent"})
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "DUPLICATE_NAME"

    def test_blank_name(self, client):
        assert client.post("/api/regions", json={"name": "   "}).status_code == 400

    def test_rename(self, client):
        region = client.post("/api/regions", json={"name": "Nukus"}).json()
        resp = client.put(f"/api/regions/{region['id']}", json={"name": "Termiz"})
        assert resp.status_code == 200
        assert resp.json()["name"] == "Termiz"

    def test_rename_to_taken_name(self, client):
        region = client.post("/api/regions", json={"name": "Nukus"}).json()
        resp = client.put(f"/api/regions/{region['id']}", json={"name": "Buxoro"})
        assert resp.status_code == 400

    def test_rename_to_same_name(self, client):
        region = client.post("/api/regions", json={"name": "Nukus"}).json()
        assert client.put(f"/api/regions/{region['id']}", json={"name": "Nukus"}).status_code == 200

    def test_missing(self, client):
        assert client.get("/api/regions/9999").status_code == 404
        assert client.put("/api/regions/9999", json={"name": "X"}).status_code == 404
        assert client.delete("/api/regions/9999").status_code == 404

    def test_delete(self, client):
        region = client.post("/api/regions", json={"name": "Nukus"}).json()
        resp = client.delete(f"/api/regions/{region['id']}")
        assert resp.json() == {"success": True, "message": "Region deleted successfully"}
