import json
import os
import tempfile
from pathlib import Path
from types import SimpleNamespace

# 앱 import 전에 테스트 환경 고정
_TMP = Path(tempfile.mkdtemp(prefix="housing-buddy-tests-"))
ADMIN_PASSWORD = "test-admin-pw"
os.environ["SYNC_DATABASE_URL"] = f"sqlite:///{_TMP / 'test.db'}"
os.environ["ADMIN_PASSWORD"] = ADMIN_PASSWORD
os.environ["RESEND_API_KEY"] = ""
os.environ["GOOGLE_TRANSLATE_API_KEY"] = ""

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.client import ClientConfig, ClientSession, LocalStorage
from app.db import Base, SessionLocal, sync_engine
from app.db.orm_registry import import_all_models
from app.main import app
from app.models import EmailVerification, User
from app.services.google_translate import GoogleTranslator, get_translator

BASE_URL = "http://testserver"
ADMIN_HEADERS = {"x-admin": ADMIN_PASSWORD}

EN = {
    "홈": "Home",
    "관심 매물": "Favorites",
    "문의 내역": "Inquiries",
    "로그아웃": "Logout",
    "월세": "Monthly rent",
    "보증금": "Deposit",
    "원룸": "Studio",
    "신촌역 도보 5분 원룸": "Studio 5 min walk from Sinchon Station",
}


class _FakeGoogle:
    """Google Translate v2 흉내. fail_status 가 있으면 그 코드로 실패."""

    def __init__(self):
        self.calls = []
        self.fail_status = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.calls.append(body)
        if self.fail_status:
            return httpx.Response(self.fail_status, json={"error": {"message": "upstream boom"}})
        target = body["target"]
        rows = [{"translatedText": self.translate(q, target)} for q in body["q"]]
        return httpx.Response(200, json={"data": {"translations": rows}})

    @staticmethod
    def translate(text: str, target: str) -> str:
        if target == "en" and text in EN:
            return EN[text]
        return f"[{target}] {text}"


@pytest.fixture(autouse=True)
def _database():
    import_all_models()
    Base.metadata.create_all(sync_engine)
    yield
    app.dependency_overrides.clear()
    Base.metadata.drop_all(sync_engine)


@pytest.fixture
def google():
    fake = _FakeGoogle()
    transport = httpx.MockTransport(fake.handler)
    app.dependency_overrides[get_translator] = lambda: GoogleTranslator(
        "test-key", source_language="ko", transport=transport
    )
    return fake


@pytest_asyncio.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL) as c:
        yield c


@pytest_asyncio.fixture
async def make_client():
    """쿠키 저장소가 분리된 클라이언트가 여러 개 필요할 때."""
    opened = []

    def _make():
        c = AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL)
        opened.append(c)
        return c

    yield _make
    for c in opened:
        await c.aclose()


def latest_code(email: str) -> str:
    with SessionLocal() as db:
        user = db.query(User).filter(User.email == email).one()
        ver = (
            db.query(EmailVerification)
            .filter(EmailVerification.user_id == user.id, EmailVerification.used_at.is_(None))
            .order_by(EmailVerification.id.desc())
            .first()
        )
        return ver.code


def latest_token(email: str) -> str:
    with SessionLocal() as db:
        user = db.query(User).filter(User.email == email).one()
        return (
            db.query(EmailVerification)
            .filter(EmailVerification.user_id == user.id)
            .order_by(EmailVerification.id.desc())
            .first()
            .token
        )


@pytest.fixture
def register_user():
    """가입 + 인증까지. 로그인은 하지 않음."""

    async def _register(c: AsyncClient, email: str, name: str = "Tester", password: str = "password123"):
        r = await c.post("/api/auth/register", json={"email": email, "password": password, "name": name})
        assert r.status_code == 201, r.text
        r = await c.post("/api/auth/verify-email", json={"email": email, "code": latest_code(email)})
        assert r.status_code == 200, r.text
        return r.json()

    return _register


@pytest.fixture
def login_user(register_user):
    async def _login(c: AsyncClient, email: str, name: str = "Tester", password: str = "password123"):
        user = await register_user(c, email, name, password)
        r = await c.post("/api/auth/login", json={"email": email, "password": password})
        assert r.status_code == 200, r.text
        return user

    return _login


SAMPLE_PROPERTY = {
    "title": "신촌역 도보 5분 원룸",
    "address": "서울 서대문구 창천동 1-1",
    "deposit": 5_000_000,
    "monthly_rent": 500_000,
    "maintenance_fee": 70_000,
    "description": "풀옵션, 남향",
    "other_info": "반려동물 불가",
    "photos": ["https://res.cloudinary.com/demo/image/upload/a.jpg", "https://res.cloudinary.com/demo/b.jpg"],
    "category": "원룸",
}


@pytest.fixture
def make_property(client):
    async def _make(**overrides):
        data = {**SAMPLE_PROPERTY, **overrides}
        r = await client.post("/api/properties", json=data, headers=ADMIN_HEADERS)
        assert r.status_code == 201, r.text
        return r.json()

    return _make


@pytest_asyncio.fixture
async def client_session(tmp_path, google):
    session = ClientSession(
        ClientConfig(base_url=BASE_URL),
        transport=ASGITransport(app=app),
        storage=LocalStorage(tmp_path / "storage.json"),
    )
    await session.start()
    yield session
    await session.close()


@pytest.fixture
def mailbox():
    """발송 대신 DB 에서 최신 인증번호/토큰을 꺼냄."""
    return SimpleNamespace(code=latest_code, token=latest_token)


@pytest.fixture
def admin_headers():
    return dict(ADMIN_HEADERS)
