"""
목적:
- 스냅샷 저장 계층의 공개 진입점을 제공한다.

설명:
- 키 정제 함수와 디렉터리 단위 저장소 클래스를 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/figma_capture/storage/snapshot_store.py
"""

from .snapshot_store import SnapshotStore, fallback_key, sanitize_key

__all__ = ["SnapshotStore", "fallback_key", "sanitize_key"]
