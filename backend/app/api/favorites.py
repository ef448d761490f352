# backend/app/api/favorites.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import require_user
from app.db.db_connection import get_db
from app.models import User
from app.schemas.property import PropertyOut
from app.services import favorite_service, property_service

router = APIRouter(prefix="/api/favorites", tags=["favorites"])


@router.get("", response_model=List[PropertyOut])
def list_favorites(user: User = Depends(require_user), db: Session = Depends(get_db)):
    return favorite_service.list_favorites(db, user.id)


@router.get("/{property_id}/status")
def favorite_status(property_id: int, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return {"property_id": property_id, "is_favorite": favorite_service.is_favorite(db, user.id, property_id)}


@router.post("/{property_id}", status_code=201)
def add_favorite(property_id: int, user: User = Depends(require_user), db: Session = Depends(get_db)):
    if property_service.get_property(db, property_id) is None:
        raise HTTPException(status_code=404, detail="Property not found")
    if not favorite_service.add_favorite(db, user.id, property_id):
        raise HTTPException(status_code=409, detail="Property already in favorites")
    return {"property_id": property_id, "is_favorite": True}


@router.delete("/{property_id}")
def remove_favorite(property_id: int, user: User = Depends(require_user), db: Session = Depends(get_db)):
    if not favorite_service.remove_favorite(db, user.id, property_id):
        raise HTTPException(status_code=404, detail="Favorite not found")
    return {"property_id": property_id, "is_favorite": False}
