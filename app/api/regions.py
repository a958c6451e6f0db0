from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.region import RegionRequest
from app.schemas.common import ERROR_RESPONSES, MessageResponse, message_response
from app.services.region_service import region_service

router = APIRouter(prefix="/regions", responses=ERROR_RESPONSES)


@router.get("", summary="List regions")
def list_regions(db: Session = Depends(get_db)):
    return region_service.list_regions(db)


@router.get("/{region_id}", summary="Get region by ID")
def get_region(region_id: int, db: Session = Depends(get_db)):
    return region_service.get_region(db, region_id)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create region")
def create_region(body: RegionRequest, db: Session = Depends(get_db)):
    return region_service.create_region(db, body)


@router.put("/{region_id}", summary="Rename region")
def update_region(region_id: int, body: RegionRequest, db: Session = Depends(get_db)):
    return region_service.update_region(db, region_id, body)


@router.delete("/{region_id}", response_model=MessageResponse, summary="Delete region")
def delete_region(region_id: int, db: Session = Depends(get_db)):
    region_service.delete_region(db, region_id)
    return message_response("Region deleted successfully")
