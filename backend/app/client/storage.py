"""File-backed string key/value store, the local counterpart of browser localStorage."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class LocalStorage:
    """값은 항상 문자열. path 가 없으면 메모리에만 보관 (테스트용)."""

    def __init__(self, path: Optional[os.PathLike | str] = None):
        self.path = Path(path) if path else None
        self._items: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if self.path is None or not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            # 손상된 파일은 빈 저장소로 취급
            logger.warning("local storage unreadable (%s): %s", self.path, e)
            return {}
        if not isinstance(raw, dict):
            logger.warning("local storage has unexpected shape, ignoring: %s", self.path)
            return {}
        return {str(k): v for k, v in raw.items() if isinstance(v, str)}

    def _flush(self) -> None:
        if self.path is None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(self._items, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            # 저장 실패는 치명적이지 않음. 메모리 상태는 유지
            logger.warning("local storage write failed (%s): %s", self.path, e)

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)
        self._flush()

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._flush()

    def clear(self) -> None:
        self._items.clear()
        self._flush()

    def keys(self):
        return list(self._items)
