import logging
from sqlalchemy.orm import Session

from app.models.car import Car
from app.models.comment import Comment
from app.schemas.comment import CommentCreateRequest, CommentUpdateRequest
from app.utils.exceptions import NotFoundException

logger = logging.getLogger(__name__)


def _serialize(c: Comment) -> dict:
    return {
        "id":        c.id,
        "carId":     c.carId,
        "name":      c.name,
        "text":      c.text,
        "createdAt": c.createdAt.isoformat(),
    }


class CommentService:

    def _get_or_404(self, db: Session, comment_id: int) -> Comment:
        c = db.query(Comment).filter(Comment.id == comment_id).first()
        if not c:
            raise NotFoundException("Comment")
        return c

    def list_comments(self, db: Session, car_id: int | None = None) -> list[dict]:
        q = db.query(Comment)
        if car_id is not None:
            q = q.filter(Comment.carId == car_id)
        items = q.order_by(Comment.createdAt.desc(), Comment.id.desc()).all()
        return [_serialize(c) for c in items]

    def get_comment(self, db: Session, car_id: int, comment_id: int) -> dict:
        c = self._get_or_404(db, comment_id)
        if c.carId != car_id:
            raise NotFoundException("Comment")
        return _serialize(c)

    def create_comment(self, db: Session, data: CommentCreateRequest) -> dict:
        if not db.query(Car).filter(Car.id == data.carId).first():
            raise NotFoundException("Car")

        comment = Comment(carId=data.carId, name=data.name, text=data.text)
        db.add(comment)
        db.commit()
        db.refresh(comment)
        return _serialize(comment)

    def update_comment(self, db: Session, comment_id: int, data: CommentUpdateRequest) -> dict:
        c = self._get_or_404(db, comment_id)

        if data.name: c.name = data.name
        if data.text: c.text = data.text

        db.commit()
        db.refresh(c)
        return _serialize(c)

    def delete_comment(self, db: Session, comment_id: int) -> None:
        c = self._get_or_404(db, comment_id)
        db.delete(c)
        db.commit()


comment_service = CommentService()
