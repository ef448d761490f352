# backend/app/api/properties.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.deps import CurrentSession, get_current_session, require_admin
from app.db.db_connection import get_db
from app.schemas.property import PropertyCreate, PropertyOut, PropertyUpdate
from app.services import property_service
from app.utils.normalize import thumbnail_photos

router = APIRouter(prefix="/api", tags=["properties"])


@router.get("/properties", response_model=List[PropertyOut])
def list_properties(
    search: Optional[str] = Query(None, description="제목/주소/설명 검색어"),
    category: Optional[str] = Query(None),
    max_rent_manwon: Optional[float] = Query(None, ge=0, description="월세 상한 (만원)"),
    include_maintenance: bool = Query(False, description="관리비 포함하여 계산"),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    """
    휴지통에 없는 매물 목록 (최신순).
    - 목록 응답의 photos 는 썸네일 한 장(호스팅 URL)만 포함
    """
    rows = property_service.list_properties(
        db,
        search=search,
        category=category,
        max_rent_manwon=max_rent_manwon,
        include_maintenance=include_maintenance,
        limit=limit,
        offset=offset,
    )
    out = []
    for p in rows:
        item = PropertyOut.model_validate(p)
        out.append(item.model_copy(update={"photos": thumbnail_photos(p.photos)}))
    return out


@router.get("/properties/{property_id}", response_model=PropertyOut)
def get_property(
    property_id: int,
    current: CurrentSession = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    # 휴지통 매물은 관리자만 상세 조회 가능
    prop = property_service.get_property(db, property_id, include_deleted=current.is_admin)
    if prop is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


@router.post("/properties", response_model=PropertyOut, status_code=201)
def create_property(
    body: PropertyCreate,
    _: CurrentSession = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return property_service.create_property(db, body.model_dump())


@router.put("/properties/{property_id}", response_model=PropertyOut)
def update_property(
    property_id: int,
    body: PropertyUpdate,
    _: CurrentSession = Depends(require_admin),
    db: Session = Depends(get_db),
):
    changes = body.model_dump(exclude_unset=True)
    # 필수 컬럼을 null 로 덮어쓰는 건 막음 (maintenance_fee 는 null 허용)
    for field in ("title", "address", "deposit", "monthly_rent", "description", "photos"):
        if field in changes and changes[field] is None:
            raise HTTPException(status_code=400, detail=f"{field} cannot be null")
    prop = property_service.update_property(db, property_id, changes)
    if prop is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


@router.delete("/properties/{property_id}")
def delete_property(
    property_id: int,
    _: CurrentSession = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """소프트 삭제 (휴지통으로 이동)."""
    prop = property_service.soft_delete_property(db, property_id)
    if prop is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return {"message": "Property moved to trash", "id": prop.id, "deleted_at": prop.deleted_at}


@router.get("/categories", response_model=List[str])
def list_categories(db: Session = Depends(get_db)):
    return property_service.list_categories(db)
