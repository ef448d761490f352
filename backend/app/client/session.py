"""클라이언트 상태 묶음 (브라우저 탭 하나에 해당)
- start(): 로컬 스냅샷 복원 + 서버 세션 확인
- close(): HTTP 클라이언트 정리
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import httpx
from dotenv import load_dotenv

from app.client.admin_gate import AdminGate
from app.client.api import ApiClient, ApiError
from app.client.categories import CategoryManager
from app.client.notifications import Notifier
from app.client.orchestrator import TranslationOrchestrator
from app.client.resolver import TextResolver
from app.client.storage import LocalStorage
from app.client.translation_cache import TranslationCache, TranslationState

logger = logging.getLogger(__name__)


@dataclass
class ClientConfig:
    base_url: str = "http://127.0.0.1:8000"
    storage_path: Optional[str] = None
    timeout: float = 10.0
    source_language: str = "ko"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        load_dotenv()
        return cls(
            base_url=os.getenv("HB_API_BASE_URL", cls.base_url),
            storage_path=os.getenv("HB_STORAGE_PATH") or None,
            timeout=float(os.getenv("HB_API_TIMEOUT", cls.timeout)),
            source_language=os.getenv("SOURCE_LANGUAGE", cls.source_language),
        )


class ClientSession:
    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        storage: Optional[LocalStorage] = None,
    ):
        self.config = config or ClientConfig()
        self.storage = storage or LocalStorage(self.config.storage_path)
        self.notifier = Notifier()
        self.api = ApiClient(self.config.base_url, timeout=self.config.timeout, transport=transport)

        source = self.config.source_language
        self.state = TranslationState(target_language=source)
        self.cache = TranslationCache(self.storage, self.state, source_language=source)
        self.orchestrator = TranslationOrchestrator(
            self.api, self.cache, self.state, self.notifier, source_language=source
        )
        self.resolver = TextResolver(self.cache, self.state)
        self.admin = AdminGate(self.api, self.storage, self.notifier, on_forced_user_logout=self._drop_user)
        self.categories = CategoryManager(self.storage, self.notifier)
        self.user: Optional[dict] = None

    async def __aenter__(self) -> "ClientSession":
        await self.start()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    async def start(self) -> None:
        self.cache.restore()
        if self.admin.restore():
            await self.admin.verify()
        try:
            self.user = await self.api.me()
        except ApiError as e:
            if e.status not in (401, 403):
                logger.warning("session check failed: %s", e)
            self.user = None
        if self.user is not None:
            await self.admin.on_user_session_changed(True)
        logger.info("client started: translated=%s lang=%s admin=%s user=%s",
                    self.state.is_translated, self.state.target_language,
                    self.admin.is_admin, self.user and self.user.get("id"))

    async def close(self) -> None:
        await self.api.aclose()

    async def _drop_user(self) -> None:
        # 서버 세션은 관리자 로그인 때 이미 교체됨. 로컬 상태만 정리
        self.user = None

    async def login(self, email: str, password: str) -> bool:
        try:
            self.user = await self.api.login(email, password)
        except ApiError as e:
            if e.status == 403:
                self.notifier.error("로그인 실패", "이메일 인증이 필요합니다.")
            elif e.status == 401:
                self.notifier.error("로그인 실패", "이메일 또는 비밀번호가 올바르지 않습니다.")
            else:
                logger.warning("login failed: %s", e)
                self.notifier.error("로그인 실패", "잠시 후 다시 시도해주세요.")
            return False
        await self.admin.on_user_session_changed(True)
        self.notifier.notify("로그인 성공", f"{self.user.get('name', '')}님 안녕하세요!")
        return True

    async def logout(self) -> None:
        try:
            await self.api.logout()
        except ApiError as e:
            logger.warning("logout request failed: %s", e)
        self.user = None
        # 쿠키 하나 = 세션 하나. 관리자 세션이었어도 이미 끝남
        self.admin.session_ended()

    async def register(self, email: str, password: str, name: str, phone: str | None = None) -> bool:
        try:
            data = await self.api.register(email, password, name, phone)
        except ApiError as e:
            if e.status == 409:
                self.notifier.error("회원가입 실패", "이미 가입된 이메일입니다.")
            else:
                self.notifier.error("회원가입 실패", str(e.detail or "입력값을 확인해주세요."))
            return False
        if data.get("email_sent"):
            self.notifier.notify("회원가입 완료", "인증 메일을 확인해주세요.")
        else:
            self.notifier.notify("회원가입 완료", "인증 메일 발송에 실패했습니다. 인증 메일을 다시 요청해주세요.")
        return True
