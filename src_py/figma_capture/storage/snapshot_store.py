"""
목적:
- 정제된 키 하나당 파일 하나로 캡처 결과를 영속화한다.

설명:
- 키 정제는 결정적이고 멱등이다. `:`는 `-`로, 경로 조각에 쓸 수 없는 그 밖의 문자는 `_`로 바꾼다.
- 쓰기는 같은 디렉터리의 임시 파일에 기록한 뒤 `os.replace`로 교체하므로
  읽는 쪽은 부분 기록을 볼 수 없다.
- 서로 다른 키는 서로 다른 파일에 기록되어 잠금 없이 동시에 실행될 수 있다.
- 같은 키에 대한 동시 호출은 마지막 쓰기가 이긴다. 잠금은 두지 않으며 알려진 제약이다.

디자인 패턴:
- 저장소 패턴(Repository Pattern).

참조:
- src_py/figma_capture/config/models.py
- src_py/figma_capture/hooks/pipeline.py
"""

from __future__ import annotations

import json
import os
import re
import tempfile
import time
from pathlib import Path
from typing import Any

from figma_capture.config.models import StoreLayout
from figma_capture.exceptions import SnapshotPersistenceError
from figma_capture.shared.text import scrub_surrogates

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")
_FILE_MODE = 0o644


def sanitize_key(key: str) -> str:
    """키를 파일명에 안전한 형태로 바꾼다. 이미 정제된 키는 그대로 돌려준다."""
    safe = _UNSAFE_CHARS.sub("_", key.replace(":", "-"))
    if safe.startswith("."):
        safe = "_" + safe[1:]
    return safe


def fallback_key() -> str:
    """키가 없는 이벤트용 대체 키를 만든다."""
    return f"unknown-{time.time_ns()}"


class SnapshotStore:
    """단일 디렉터리 스냅샷 저장소."""

    def __init__(self, layout: StoreLayout) -> None:
        self._layout = layout

    @property
    def directory(self) -> Path:
        return self._layout.directory

    def path_for(self, key: str, suffix: str | None = None) -> Path:
        """키가 가리키는 스냅샷 경로를 반환한다.

        Args:
            key: 정제 전 원본 키.
            suffix: 기본 확장자 대신 쓸 접미사 (예: `.xml`, `-dimensions.json`).
        """
        name = f"{self._layout.prefix}{sanitize_key(key)}{suffix or self._layout.suffix}"
        return self._layout.directory / name

    def write_text(self, key: str, text: str, suffix: str | None = None) -> Path:
        """UTF-8 텍스트를 개행 변환 없이 그대로 기록한다. 단독 서로게이트는 U+FFFD로 기록한다."""
        return self.write_bytes(key, scrub_surrogates(text).encode("utf-8"), suffix=suffix)

    def write_json(self, key: str, data: Any, suffix: str | None = None) -> Path:
        return self.write_text(key, json.dumps(data, ensure_ascii=False), suffix=suffix)

    def write_bytes(self, key: str, data: bytes, suffix: str | None = None) -> Path:
        """임시 파일 기록 후 원자적으로 교체한다."""
        target = self.path_for(key, suffix=suffix)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
        except OSError as exc:
            raise SnapshotPersistenceError(f"스냅샷 임시 파일 생성 실패: {target}: {exc}") from exc

        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.chmod(tmp_name, _FILE_MODE)
            os.replace(tmp_name, target)
        except OSError as exc:
            _discard(tmp_name)
            raise SnapshotPersistenceError(f"스냅샷 기록 실패: {target}: {exc}") from exc
        return target

    def read_json(self, key: str, suffix: str | None = None) -> Any | None:
        """키의 JSON 스냅샷을 읽는다. 파일이 없으면 None."""
        target = self.path_for(key, suffix=suffix)
        try:
            raw = target.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise SnapshotPersistenceError(f"스냅샷 읽기 실패: {target}: {exc}") from exc

        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SnapshotPersistenceError(f"스냅샷 JSON 파싱 실패: {target}: {exc}") from exc


def _discard(path: str) -> None:
    try:
        os.unlink(path)
    except OSError:
        pass
