"""Users, password hashing, e-mail verification codes and cookie sessions."""
from __future__ import annotations

import hashlib
import hmac
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from app.core.settings import settings
from app.models import EmailVerification, User, UserSession

logger = logging.getLogger(__name__)

_PBKDF2_ROUNDS = 240_000


class AuthError(Exception):
    """인증 흐름의 사용자 오류. status 는 라우터에서 그대로 HTTP 코드로 씀."""

    def __init__(self, status: int, detail: str):
        super().__init__(detail)
        self.status = status
        self.detail = detail


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _aware(dt: datetime) -> datetime:
    # sqlite는 tz 정보를 버리므로 UTC로 간주
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


# ───── 비밀번호 ─────

def hash_password(password: str) -> str:
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("ascii"), _PBKDF2_ROUNDS)
    return f"pbkdf2_sha256${_PBKDF2_ROUNDS}${salt}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    try:
        algo, rounds, salt, hexdigest = stored.split("$")
    except ValueError:
        return False
    if algo != "pbkdf2_sha256":
        return False
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("ascii"), int(rounds))
    return hmac.compare_digest(digest.hex(), hexdigest)


def check_admin_password(password: Optional[str]) -> bool:
    expected = settings.ADMIN_PASSWORD
    if not expected:
        logger.warning("ADMIN_PASSWORD is not configured; admin login disabled")
        return False
    if not password:
        return False
    return hmac.compare_digest(password.encode("utf-8"), expected.encode("utf-8"))


# ───── 회원가입 / 인증 ─────

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, *, email: str, password: str, name: str, phone: Optional[str]) -> User:
    if get_user_by_email(db, email) is not None:
        raise AuthError(409, "Email already registered")
    user = User(
        email=email,
        name=name,
        phone=phone,
        password_hash=hash_password(password),
        is_email_verified=False,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("user registered id=%s", user.id)
    return user


def issue_verification(db: Session, user: User) -> EmailVerification:
    """새 인증번호 발급. 이전에 발급된 미사용 코드는 모두 무효화."""
    now = _now()
    (
        db.query(EmailVerification)
        .filter(EmailVerification.user_id == user.id, EmailVerification.used_at.is_(None))
        .update({EmailVerification.used_at: now}, synchronize_session=False)
    )
    ver = EmailVerification(
        user_id=user.id,
        code=f"{secrets.randbelow(1_000_000):06d}",
        token=secrets.token_urlsafe(32),
        expires_at=now + timedelta(hours=settings.VERIFICATION_TTL_HOURS),
    )
    db.add(ver)
    db.commit()
    db.refresh(ver)
    return ver


def _consume(db: Session, ver: Optional[EmailVerification]) -> User:
    if ver is None or ver.used_at is not None:
        raise AuthError(400, "Invalid verification code")
    if _aware(ver.expires_at) < _now():
        raise AuthError(400, "Verification code expired")
    user = db.get(User, ver.user_id)
    ver.used_at = _now()
    user.is_email_verified = True
    db.commit()
    db.refresh(user)
    logger.info("email verified user_id=%s", user.id)
    return user


def verify_code(db: Session, email: str, code: str) -> User:
    user = get_user_by_email(db, email)
    if user is None:
        raise AuthError(400, "Invalid verification code")
    ver = (
        db.query(EmailVerification)
        .filter(
            EmailVerification.user_id == user.id,
            EmailVerification.code == code,
            EmailVerification.used_at.is_(None),
        )
        .order_by(EmailVerification.id.desc())
        .first()
    )
    return _consume(db, ver)


def verify_token(db: Session, token: str) -> User:
    ver = db.query(EmailVerification).filter(EmailVerification.token == token).first()
    return _consume(db, ver)


def authenticate(db: Session, email: str, password: str) -> User:
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        raise AuthError(401, "Invalid email or password")
    if not user.is_email_verified:
        raise AuthError(403, "Email not verified")
    return user


# ───── 세션 ─────

def create_session(db: Session, *, user_id: Optional[int] = None, is_admin: bool = False,
                   replace_token: Optional[str] = None) -> UserSession:
    """새 세션 발급. replace_token 이 있으면 그 세션은 종료 (쿠키 하나 = 세션 하나)."""
    if replace_token:
        end_session(db, replace_token)
    sess = UserSession(
        token=secrets.token_urlsafe(32),
        user_id=user_id,
        is_admin=is_admin,
        expires_at=_now() + timedelta(hours=settings.SESSION_TTL_HOURS),
    )
    db.add(sess)
    db.commit()
    return sess


def end_session(db: Session, token: Optional[str]) -> bool:
    if not token:
        return False
    n = db.query(UserSession).filter(UserSession.token == token).delete(synchronize_session=False)
    db.commit()
    return n > 0


def resolve_session(db: Session, token: Optional[str]) -> Tuple[Optional[UserSession], Optional[User]]:
    if not token:
        return None, None
    sess = db.get(UserSession, token)
    if sess is None:
        return None, None
    if _aware(sess.expires_at) < _now():
        end_session(db, token)
        return None, None
    user = db.get(User, sess.user_id) if sess.user_id is not None else None
    return sess, user
