"""Inquiries (comments): visibility rules, edit/delete permissions."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import Comment, Property

logger = logging.getLogger(__name__)

AUTHOR_EDITABLE = ("content", "author_contact", "is_admin_only")
ADMIN_EDITABLE = AUTHOR_EDITABLE + ("admin_memo", "admin_reply")


@dataclass(frozen=True)
class Viewer:
    user_id: Optional[int] = None
    is_admin: bool = False

    def is_author(self, comment: Comment) -> bool:
        return self.user_id is not None and comment.user_id == self.user_id


def present(comment: Comment, viewer: Viewer) -> dict:
    """보는 사람 기준으로 필드를 걸러서 dict 로.

    - 관리자: 전부
    - 작성자 본인: admin_memo 제외 전부
    - 그 외: author_contact/admin_memo 항상 제외,
      관리자 전용 문의면 content/admin_reply 도 제외하고 is_hidden=True
    """
    out = {
        "id": comment.id,
        "property_id": comment.property_id,
        "user_id": comment.user_id,
        "author_name": comment.author_name,
        "content": comment.content,
        "author_contact": comment.author_contact,
        "is_admin_only": comment.is_admin_only,
        "admin_memo": comment.admin_memo,
        "admin_reply": comment.admin_reply,
        "admin_reply_at": comment.admin_reply_at,
        "is_hidden": False,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }
    if viewer.is_admin:
        return out

    out["admin_memo"] = None
    if viewer.is_author(comment):
        return out

    out["author_contact"] = None
    if comment.is_admin_only:
        out["content"] = None
        out["admin_reply"] = None
        out["admin_reply_at"] = None
        out["is_hidden"] = True
    return out


def list_for_property(db: Session, property_id: int) -> List[Comment]:
    return (
        db.query(Comment)
        .filter(Comment.property_id == property_id, Comment.is_deleted == 0)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .all()
    )


def list_all(db: Session) -> List[Comment]:
    return (
        db.query(Comment)
        .filter(Comment.is_deleted == 0)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .all()
    )


def list_for_user(db: Session, user_id: int) -> List[Comment]:
    return (
        db.query(Comment)
        .filter(Comment.user_id == user_id, Comment.is_deleted == 0)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .all()
    )


def get_comment(db: Session, comment_id: int) -> Optional[Comment]:
    c = db.get(Comment, comment_id)
    if c is None or c.is_deleted:
        return None
    return c


def create_comment(db: Session, prop: Property, *, user_id: Optional[int], author_name: str,
                   content: str, author_contact: Optional[str], is_admin_only: bool) -> Comment:
    c = Comment(
        property_id=prop.id,
        user_id=user_id,
        author_name=author_name,
        content=content,
        author_contact=author_contact,
        is_admin_only=1 if is_admin_only else 0,
        is_deleted=0,
    )
    db.add(c)
    db.commit()
    db.refresh(c)
    logger.info("comment created id=%s property_id=%s admin_only=%s", c.id, prop.id, c.is_admin_only)
    return c


def can_modify(comment: Comment, viewer: Viewer) -> bool:
    return viewer.is_admin or viewer.is_author(comment)


def update_comment(db: Session, comment: Comment, changes: dict, viewer: Viewer) -> Comment:
    allowed = ADMIN_EDITABLE if viewer.is_admin else AUTHOR_EDITABLE
    for field, value in changes.items():
        if field not in allowed:
            continue
        if field == "is_admin_only":
            value = 1 if value else 0
        setattr(comment, field, value)
        if field == "admin_reply":
            comment.admin_reply_at = datetime.now(timezone.utc) if value else None
    db.commit()
    db.refresh(comment)
    return comment


def delete_comment(db: Session, comment: Comment, *, permanent: bool = False) -> None:
    if permanent:
        db.delete(comment)
        logger.info("comment purged id=%s", comment.id)
    else:
        comment.is_deleted = 1
        logger.info("comment soft-deleted id=%s", comment.id)
    db.commit()
