# backend/app/api/deps.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session

from app.core.settings import settings
from app.db.db_connection import get_db
from app.models import User
from app.services import auth_service
from app.services.comment_service import Viewer


@dataclass
class CurrentSession:
    token: Optional[str] = None
    user: Optional[User] = None
    is_admin: bool = False

    @property
    def viewer(self) -> Viewer:
        return Viewer(user_id=self.user.id if self.user else None, is_admin=self.is_admin)


def get_current_session(
    request: Request,
    x_admin: Optional[str] = Header(None, alias="x-admin"),
    db: Session = Depends(get_db),
) -> CurrentSession:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    sess, user = auth_service.resolve_session(db, token)
    is_admin = bool(sess and sess.is_admin)
    # 툴링용: x-admin 헤더에 관리자 비밀번호
    if not is_admin and x_admin and auth_service.check_admin_password(x_admin):
        is_admin = True
    return CurrentSession(token=sess.token if sess else None, user=user, is_admin=is_admin)


def require_user(current: CurrentSession = Depends(get_current_session)) -> User:
    if current.user is None:
        raise HTTPException(status_code=401, detail="Login required")
    return current.user


def require_admin(current: CurrentSession = Depends(get_current_session)) -> CurrentSession:
    if not current.is_admin:
        raise HTTPException(status_code=403, detail="Admin only")
    return current


def require_user_or_admin(current: CurrentSession = Depends(get_current_session)) -> CurrentSession:
    if current.user is None and not current.is_admin:
        raise HTTPException(status_code=401, detail="Login required")
    return current
