from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import Favorite, Property


def list_favorites(db: Session, user_id: int) -> List[Property]:
    # 휴지통으로 간 매물은 관심 목록에서도 숨김
    return (
        db.query(Property)
        .join(Favorite, Favorite.property_id == Property.id)
        .filter(Favorite.user_id == user_id, Property.is_deleted == 0)
        .order_by(Favorite.created_at.desc(), Favorite.id.desc())
        .all()
    )


def is_favorite(db: Session, user_id: int, property_id: int) -> bool:
    return (
        db.query(Favorite.id)
        .filter(Favorite.user_id == user_id, Favorite.property_id == property_id)
        .first()
        is not None
    )


def add_favorite(db: Session, user_id: int, property_id: int) -> bool:
    """새로 추가했으면 True, 이미 있으면 False."""
    if is_favorite(db, user_id, property_id):
        return False
    db.add(Favorite(user_id=user_id, property_id=property_id))
    try:
        db.commit()
    except IntegrityError:
        # 동시 요청으로 유니크 제약에 걸린 경우
        db.rollback()
        return False
    return True


def remove_favorite(db: Session, user_id: int, property_id: int) -> bool:
    n = (
        db.query(Favorite)
        .filter(Favorite.user_id == user_id, Favorite.property_id == property_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return n > 0
