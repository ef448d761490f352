# backend/app/api/trash.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import require_admin
from app.db.db_connection import get_db
from app.schemas.property import PropertyOut
from app.services import property_service

# 휴지통은 전부 관리자 전용
router = APIRouter(prefix="/api/trash", tags=["trash"], dependencies=[Depends(require_admin)])


@router.get("", response_model=List[PropertyOut])
def list_trash(db: Session = Depends(get_db)):
    return property_service.list_trash(db)


@router.post("/{property_id}/restore", response_model=PropertyOut)
def restore(property_id: int, db: Session = Depends(get_db)):
    prop = property_service.restore_property(db, property_id)
    if prop is None:
        raise HTTPException(status_code=404, detail="Property not found in trash")
    return prop


@router.delete("/{property_id}")
def purge(property_id: int, db: Session = Depends(get_db)):
    """영구 삭제. 되돌릴 수 없음."""
    if not property_service.purge_property(db, property_id):
        raise HTTPException(status_code=404, detail="Property not found in trash")
    return {"message": "Property permanently deleted", "id": property_id}
