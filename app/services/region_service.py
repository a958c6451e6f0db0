import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.region import Region
from app.schemas.region import RegionRequest
from app.utils.exceptions import NotFoundException, DuplicateNameException

logger = logging.getLogger(__name__)


DEFAULT_REGIONS = [
    "Toshkent", "Samarqand", "Buxoro", "Farg'ona", "Andijon", "Namangan",
    "Xorazm", "Qashqadaryo", "Surxondaryo", "Jizzax", "Navoiy", "Sirdaryo",
]


def _serialize(r: Region) -> dict:
    return {"id": r.id, "name": r.name}


class RegionService:

    def _get_or_404(self, db: Session, region_id: int) -> Region:
        r = db.query(Region).filter(Region.id == region_id).first()
        if not r:
            raise NotFoundException("Region")
        return r

    def _ensure_unique(self, db: Session, name: str, exclude_id: int | None = None) -> None:
        q = db.query(Region).filter(Region.name == name)
        if exclude_id:
            q = q.filter(Region.id != exclude_id)
        if q.first():
            raise DuplicateNameException(name)

    def list_regions(self, db: Session) -> list[dict]:
        return [_serialize(r) for r in db.query(Region).order_by(Region.id).all()]

    def get_region(self, db: Session, region_id: int) -> dict:
        return _serialize(self._get_or_404(db, region_id))

    def create_region(self, db: Session, data: RegionRequest) -> dict:
        self._ensure_unique(db, data.name)
        region = Region(name=data.name)
        db.add(region)
        db.commit()
        db.refresh(region)
        return _serialize(region)

    def update_region(self, db: Session, region_id: int, data: RegionRequest) -> dict:
        r = self._get_or_404(db, region_id)
        self._ensure_unique(db, data.name, exclude_id=region_id)
        r.name = data.name
        db.commit()
        db.refresh(r)
        return _serialize(r)

    def delete_region(self, db: Session, region_id: int) -> None:
        r = self._get_or_404(db, region_id)
        db.delete(r)
        db.commit()

    def _missing_defaults(self, db: Session) -> list[str]:
        existing = {name for (name,) in db.query(Region.name).all()}
        return [name for name in DEFAULT_REGIONS if name not in existing]

    def seed_defaults(self, db: Session) -> int:
        """
        Insert default regions not already present. Returns how many were added.
        A unique-name clash means another worker seeded concurrently; the
        missing names are recomputed once and inserted again.
        """
        for attempt in (1, 2):
            missing = self._missing_defaults(db)
            for name in missing:
                db.add(Region(name=name))
            try:
                db.commit()
                return len(missing)
            except IntegrityError as e:
                db.rollback()
                if attempt == 2:
                    raise
                logger.warning(f"Region seeding raced with another worker, retrying: {e.orig}")
        return 0


region_service = RegionService()
