"""관리자 모드 / 일반 로그인 상호 배제
- 비밀번호 확인은 서버 (/api/admin/login)
- 관리자 로그인 성공 → 일반 세션 로컬 상태 정리
- 일반 세션 활성화 → 관리자 모드 해제
"""
from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from app.client.api import ApiClient, ApiError
from app.client.notifications import Notifier
from app.client.storage import LocalStorage

logger = logging.getLogger(__name__)

KEY_ADMIN = "housing-buddy-admin"


class AdminGate:
    def __init__(
        self,
        api: ApiClient,
        storage: LocalStorage,
        notifier: Notifier,
        *,
        on_forced_user_logout: Optional[Callable[[], Awaitable[None]]] = None,
    ):
        self.api = api
        self.storage = storage
        self.notifier = notifier
        self.on_forced_user_logout = on_forced_user_logout
        self.is_admin = False

    def restore(self) -> bool:
        self.is_admin = self.storage.get_item(KEY_ADMIN) == "true"
        return self.is_admin

    async def verify(self) -> bool:
        """저장된 관리자 플래그를 서버 세션과 맞춤. 서버가 확인해주지 않으면 내림."""
        if not self.is_admin:
            return False
        try:
            confirmed = await self.api.admin_status()
        except ApiError as e:
            logger.warning("admin status check failed: %s", e)
            confirmed = False
        if not confirmed:
            logger.info("stored admin flag not confirmed by server; clearing")
            self._set(False)
        return self.is_admin

    def session_ended(self) -> None:
        """서버 세션이 다른 경로(일반 로그아웃)로 끝났을 때."""
        if self.is_admin:
            self._set(False)

    def _set(self, value: bool) -> None:
        self.is_admin = value
        if value:
            self.storage.set_item(KEY_ADMIN, "true")
        else:
            self.storage.remove_item(KEY_ADMIN)

    async def admin_login(self, password: str) -> bool:
        try:
            await self.api.admin_login(password)
        except ApiError as e:
            if e.status == 401:
                self.notifier.error("로그인 실패", "관리자 비밀번호가 올바르지 않습니다.")
            else:
                logger.warning("admin login failed: %s", e)
                self.notifier.error("로그인 실패", "잠시 후 다시 시도해주세요.")
            return False
        # 서버는 이미 일반 세션을 관리자 세션으로 교체함
        if self.on_forced_user_logout is not None:
            await self.on_forced_user_logout()
        self._set(True)
        self.notifier.notify("관리자 로그인", "관리자 모드가 활성화되었습니다.")
        return True

    async def admin_logout(self) -> None:
        try:
            await self.api.admin_logout()
        except ApiError as e:
            # 서버 세션 정리가 실패해도 로컬 플래그는 내림
            logger.warning("admin logout request failed: %s", e)
        self._set(False)

    async def on_user_session_changed(self, active: bool) -> None:
        if active and self.is_admin:
            logger.info("user session became active; leaving admin mode")
            await self.admin_logout()
