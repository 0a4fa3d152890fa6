"""
목적:
- 컴포넌트 이름을 노드 프레임 메타데이터에 연결한다.

설명:
- 크기를 직접 받으면 그대로 기록하고, 생략하면 훅이 저장한 노드 스냅샷에서 읽어 온다.
- 결과는 메타데이터 디렉터리의 `<ComponentName>.json`에 기록한다.

디자인 패턴:
- 서비스 함수(Service Function).

참조:
- src_py/figma_capture/storage/snapshot_store.py
- src_py/figma_capture/cli.py
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from figma_capture.contracts.snapshot_models import ComponentMetadata, FrameDimensions
from figma_capture.exceptions import ComponentLinkError
from figma_capture.shared.logging import get_logger
from figma_capture.storage.snapshot_store import SnapshotStore

logger = get_logger(__name__)


def link_component(
    store: SnapshotStore,
    name: str,
    node_id: str,
    *,
    width: int | None = None,
    height: int | None = None,
    component_path: str = "",
) -> Path:
    """컴포넌트 메타데이터를 기록하고 파일 경로를 반환한다."""
    if (width is None) != (height is None):
        raise ComponentLinkError("width와 height는 함께 지정해야 합니다")

    if width is None or height is None:
        frame = _load_frame(store, node_id)
        width, height = frame.width, frame.height
        action = "Linked"
    else:
        action = "Saved"

    try:
        metadata = ComponentMetadata(
            node_id=node_id,
            width=width,
            height=height,
            name=name,
            component_path=component_path,
        )
    except ValidationError as exc:
        raise ComponentLinkError(f"컴포넌트 메타데이터가 유효하지 않습니다: {exc}") from exc

    path = store.write_json(name, metadata.model_dump(by_alias=True))
    logger.info("%s %s to nodeId %s: %dx%d", action, name, node_id, width, height)
    return path


def _load_frame(store: SnapshotStore, node_id: str) -> FrameDimensions:
    existing = store.read_json(node_id)
    if existing is None:
        raise ComponentLinkError(
            f"No existing entry for nodeId {node_id} at {store.path_for(node_id)}"
        )
    try:
        return FrameDimensions.model_validate(existing)
    except ValidationError as exc:
        raise ComponentLinkError(f"노드 스냅샷 형식이 올바르지 않습니다: {exc}") from exc
