"""Property CRUD + soft-delete lifecycle (Active → Deleted → Restored | Purged)."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.models import Comment, Favorite, Property
from app.utils.normalize import clean_text, manwon_to_won, norm_text, unique_categories

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _category_key(column):
    """SQL 쪽 norm_text."""
    for ch in (" ", "\t", "\n", "\r"):
        column = func.replace(column, ch, "")
    return func.lower(column)


def list_properties(
    db: Session,
    *,
    search: Optional[str] = None,
    category: Optional[str] = None,
    max_rent_manwon: Optional[float] = None,
    include_maintenance: bool = False,
    limit: int = 50,
    offset: int = 0,
) -> List[Property]:
    # 일반 목록은 항상 is_deleted = 0
    q = db.query(Property).filter(Property.is_deleted == 0)

    term = clean_text(search)
    if term:
        like = f"%{term}%"
        q = q.filter(or_(
            Property.title.ilike(like),
            Property.address.ilike(like),
            Property.description.ilike(like),
        ))

    category_key = norm_text(category)
    if category_key:
        # /api/categories 와 같은 기준: 공백/대소문자 무시
        q = q.filter(_category_key(Property.category) == category_key)

    max_won = manwon_to_won(max_rent_manwon)
    if max_won is not None:
        if include_maintenance:
            # 관리비 미상(NULL)은 0으로 보고 계산
            total = Property.monthly_rent + Property.maintenance_fee
            q = q.filter(or_(
                (Property.maintenance_fee.is_(None)) & (Property.monthly_rent <= max_won),
                total <= max_won,
            ))
        else:
            q = q.filter(Property.monthly_rent <= max_won)

    return (
        q.order_by(Property.created_at.desc(), Property.id.desc())
        .limit(limit)
        .offset(offset)
        .all()
    )


def get_property(db: Session, property_id: int, *, include_deleted: bool = False) -> Optional[Property]:
    prop = db.get(Property, property_id)
    if prop is None:
        return None
    if prop.is_deleted and not include_deleted:
        return None
    return prop


def create_property(db: Session, data: dict) -> Property:
    prop = Property(**data, is_active=1, is_deleted=0, deleted_at=None)
    db.add(prop)
    db.commit()
    db.refresh(prop)
    logger.info("property created id=%s title=%r", prop.id, prop.title)
    return prop


def update_property(db: Session, property_id: int, changes: dict) -> Optional[Property]:
    prop = get_property(db, property_id)
    if prop is None:
        return None
    for field, value in changes.items():
        setattr(prop, field, value)
    db.commit()
    db.refresh(prop)
    return prop


def list_categories(db: Session) -> List[str]:
    rows = (
        db.query(Property.category)
        .filter(Property.is_deleted == 0, Property.category.isnot(None))
        .order_by(Property.category)
        .all()
    )
    return unique_categories(r[0] for r in rows)


# ───── 휴지통 ─────

def soft_delete_property(db: Session, property_id: int) -> Optional[Property]:
    """Active → Deleted. 없거나 이미 휴지통이면 None."""
    prop = get_property(db, property_id)
    if prop is None:
        return None
    prop.is_deleted = 1
    prop.is_active = 0
    prop.deleted_at = _now()
    db.commit()
    db.refresh(prop)
    logger.info("property moved to trash id=%s", property_id)
    return prop


def list_trash(db: Session) -> List[Property]:
    return (
        db.query(Property)
        .filter(Property.is_deleted == 1)
        .order_by(Property.deleted_at.desc(), Property.id.desc())
        .all()
    )


def _get_trashed(db: Session, property_id: int) -> Optional[Property]:
    prop = db.get(Property, property_id)
    if prop is None or not prop.is_deleted:
        return None
    return prop


def restore_property(db: Session, property_id: int) -> Optional[Property]:
    """Deleted → Active. 휴지통에 없으면 None."""
    prop = _get_trashed(db, property_id)
    if prop is None:
        return None
    prop.is_deleted = 0
    prop.is_active = 1
    prop.deleted_at = None
    db.commit()
    db.refresh(prop)
    logger.info("property restored id=%s", property_id)
    return prop


def purge_property(db: Session, property_id: int) -> bool:
    """Deleted → 영구 삭제. 되돌릴 수 없음."""
    prop = _get_trashed(db, property_id)
    if prop is None:
        return False
    # sqlite는 FK cascade가 꺼져 있을 수 있어 명시적으로 정리
    db.query(Comment).filter(Comment.property_id == property_id).delete(synchronize_session=False)
    db.query(Favorite).filter(Favorite.property_id == property_id).delete(synchronize_session=False)
    db.delete(prop)
    db.commit()
    logger.info("property purged id=%s", property_id)
    return True
