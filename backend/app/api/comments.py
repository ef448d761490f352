# backend/app/api/comments.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.deps import (
    CurrentSession,
    get_current_session,
    require_admin,
    require_user,
    require_user_or_admin,
)
from app.db.db_connection import get_db
from app.models import User
from app.schemas.comment import CommentCreate, CommentOut, CommentUpdate, InquiryOut
from app.services import comment_service, property_service
from app.services.comment_service import Viewer, present

router = APIRouter(prefix="/api", tags=["comments"])


def _with_property(comment, viewer: Viewer) -> dict:
    data = present(comment, viewer)
    prop = comment.listing
    data["property"] = {"id": prop.id, "title": prop.title} if prop is not None else None
    return data


@router.get("/properties/{property_id}/comments", response_model=List[CommentOut])
def list_comments(
    property_id: int,
    current: CurrentSession = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    if property_service.get_property(db, property_id, include_deleted=current.is_admin) is None:
        raise HTTPException(status_code=404, detail="Property not found")
    viewer = current.viewer
    return [present(c, viewer) for c in comment_service.list_for_property(db, property_id)]


@router.post("/properties/{property_id}/comments", response_model=CommentOut, status_code=201)
def create_comment(
    property_id: int,
    body: CommentCreate,
    current: CurrentSession = Depends(require_user_or_admin),
    db: Session = Depends(get_db),
):
    prop = property_service.get_property(db, property_id)
    if prop is None:
        raise HTTPException(status_code=404, detail="Property not found")

    author_name = body.author_name or (current.user.name if current.user else "관리자")
    comment = comment_service.create_comment(
        db,
        prop,
        user_id=current.user.id if current.user else None,
        author_name=author_name,
        content=body.content,
        author_contact=body.author_contact,
        is_admin_only=body.is_admin_only,
    )
    return present(comment, current.viewer)


@router.put("/comments/{comment_id}", response_model=CommentOut)
def update_comment(
    comment_id: int,
    body: CommentUpdate,
    current: CurrentSession = Depends(require_user_or_admin),
    db: Session = Depends(get_db),
):
    comment = comment_service.get_comment(db, comment_id)
    if comment is None:
        raise HTTPException(status_code=404, detail="Comment not found")
    viewer = current.viewer
    if not comment_service.can_modify(comment, viewer):
        raise HTTPException(status_code=403, detail="Not allowed to edit this comment")

    changes = body.model_dump(exclude_unset=True)
    if not viewer.is_admin and ({"admin_memo", "admin_reply"} & changes.keys()):
        raise HTTPException(status_code=403, detail="Admin only fields")
    if "content" in changes and changes["content"] is None:
        raise HTTPException(status_code=400, detail="content cannot be null")

    comment = comment_service.update_comment(db, comment, changes, viewer)
    return present(comment, viewer)


@router.delete("/comments/{comment_id}")
def delete_comment(
    comment_id: int,
    permanent: bool = Query(False, description="true 면 영구 삭제"),
    current: CurrentSession = Depends(require_user_or_admin),
    db: Session = Depends(get_db),
):
    comment = comment_service.get_comment(db, comment_id)
    if comment is None:
        raise HTTPException(status_code=404, detail="Comment not found")
    if not comment_service.can_modify(comment, current.viewer):
        raise HTTPException(status_code=403, detail="Not allowed to delete this comment")
    comment_service.delete_comment(db, comment, permanent=permanent)
    return {"message": "Comment deleted", "id": comment_id, "permanent": permanent}


@router.get("/admin/comments", response_model=List[InquiryOut])
def list_all_comments(
    current: CurrentSession = Depends(require_admin),
    db: Session = Depends(get_db),
):
    viewer = current.viewer
    return [_with_property(c, viewer) for c in comment_service.list_all(db)]


@router.get("/my-inquiries", response_model=List[InquiryOut])
def my_inquiries(
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    viewer = Viewer(user_id=user.id, is_admin=False)
    return [_with_property(c, viewer) for c in comment_service.list_for_user(db, user.id)]
