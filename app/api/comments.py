from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from app.database import get_db
from app.schemas.comment import CommentCreateRequest, CommentUpdateRequest
from app.schemas.common import ERROR_RESPONSES, MessageResponse, message_response
from app.services.comment_service import comment_service

router = APIRouter(prefix="/comments", responses=ERROR_RESPONSES)


@router.get("", summary="List comments")
def list_comments(
    carId: Optional[int] = Query(None),
    db:    Session       = Depends(get_db),
):
    return comment_service.list_comments(db, carId)


@router.get("/{car_id}", summary="List comments for a car (newest first)")
def list_car_comments(car_id: int, db: Session = Depends(get_db)):
    return comment_service.list_comments(db, car_id)


@router.get("/{car_id}/{comment_id}", summary="Get a comment of a car")
def get_comment(car_id: int, comment_id: int, db: Session = Depends(get_db)):
    return comment_service.get_comment(db, car_id, comment_id)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Add comment to a car")
def create_comment(body: CommentCreateRequest, db: Session = Depends(get_db)):
    return comment_service.create_comment(db, body)


@router.put("/{comment_id}", summary="Update comment")
def update_comment(comment_id: int, body: CommentUpdateRequest, db: Session = Depends(get_db)):
    return comment_service.update_comment(db, comment_id, body)


@router.delete("/{comment_id}", response_model=MessageResponse, summary="Delete comment")
def delete_comment(comment_id: int, db: Session = Depends(get_db)):
    comment_service.delete_comment(db, comment_id)
    return message_response("Comment deleted successfully")
