# backend/app/api/auth.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from app.api.deps import CurrentSession, get_current_session, require_user
from app.core.settings import settings
from app.db.db_connection import get_db
from app.models import User
from app.schemas.auth import (
    AdminLoginIn,
    AdminStatus,
    LoginIn,
    RegisterIn,
    RegisterOut,
    ResendIn,
    UserOut,
    VerifyEmailIn,
)
from app.services import auth_service
from app.services.auth_service import AuthError
from app.services.email import send_email_verification

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])
admin_router = APIRouter(prefix="/api/admin", tags=["admin"])


def _raise(e: AuthError):
    raise HTTPException(status_code=e.status, detail=e.detail)


def _set_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=settings.SESSION_TTL_HOURS * 3600,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )


def _clear_cookie(response: Response) -> None:
    response.delete_cookie(settings.SESSION_COOKIE_NAME)


# ───── 회원 ─────

@router.post("/register", response_model=RegisterOut, status_code=201)
async def register(body: RegisterIn, db: Session = Depends(get_db)):
    try:
        user = auth_service.create_user(db, email=body.email, password=body.password,
                                        name=body.name, phone=body.phone)
    except AuthError as e:
        _raise(e)
    ver = auth_service.issue_verification(db, user)
    sent = await send_email_verification(user.email, ver.code, ver.token)
    return {"user": user, "email_sent": sent}


@router.post("/verify-email", response_model=UserOut)
def verify_email(body: VerifyEmailIn, db: Session = Depends(get_db)):
    try:
        return auth_service.verify_code(db, body.email, body.code)
    except AuthError as e:
        _raise(e)


@router.get("/verify-email", response_model=UserOut)
def verify_email_link(token: str = Query(..., min_length=10), db: Session = Depends(get_db)):
    """메일의 인증 링크."""
    try:
        return auth_service.verify_token(db, token)
    except AuthError as e:
        _raise(e)


@router.post("/resend-verification")
async def resend_verification(body: ResendIn, db: Session = Depends(get_db)):
    user = auth_service.get_user_by_email(db, body.email)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    if user.is_email_verified:
        raise HTTPException(status_code=400, detail="Email already verified")
    ver = auth_service.issue_verification(db, user)
    sent = await send_email_verification(user.email, ver.code, ver.token)
    return {"email_sent": sent}


@router.post("/login", response_model=UserOut)
def login(
    body: LoginIn,
    response: Response,
    current: CurrentSession = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    try:
        user = auth_service.authenticate(db, body.email, body.password)
    except AuthError as e:
        _raise(e)
    # 일반 로그인은 기존 세션(관리자 세션 포함)을 대체
    sess = auth_service.create_session(db, user_id=user.id, replace_token=current.token)
    _set_cookie(response, sess.token)
    logger.info("user login id=%s (previous admin=%s)", user.id, current.is_admin)
    return user


@router.post("/logout")
def logout(response: Response, current: CurrentSession = Depends(get_current_session),
           db: Session = Depends(get_db)):
    auth_service.end_session(db, current.token)
    _clear_cookie(response)
    return {"ok": True}


@router.get("/me", response_model=UserOut)
def me(user: User = Depends(require_user)):
    return user


# ───── 관리자 ─────

@admin_router.post("/login", response_model=AdminStatus)
def admin_login(
    body: AdminLoginIn,
    response: Response,
    current: CurrentSession = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    if not auth_service.check_admin_password(body.password):
        logger.warning("admin login rejected")
        raise HTTPException(status_code=401, detail="Invalid admin password")
    # 관리자 로그인 시 일반 계정 세션은 종료
    sess = auth_service.create_session(db, is_admin=True, replace_token=current.token)
    _set_cookie(response, sess.token)
    logger.info("admin login (ended user session=%s)", current.user is not None)
    return {"is_admin": True}


@admin_router.post("/logout", response_model=AdminStatus)
def admin_logout(response: Response, current: CurrentSession = Depends(get_current_session),
                 db: Session = Depends(get_db)):
    if current.is_admin:
        auth_service.end_session(db, current.token)
        _clear_cookie(response)
    return {"is_admin": False}


@admin_router.get("/status", response_model=AdminStatus)
def admin_status(current: CurrentSession = Depends(get_current_session)):
    return {"is_admin": current.is_admin}
