"""
목적:
- 훅 이벤트 1건을 정규화 → 추출 → 영속화 → 게이트 순서로 처리한다.

설명:
- 호출마다 독립적인 단기 작업이며 호출 간 공유 메모리 상태가 없다.
- 콘텐츠 없음/추출 실패/키 누락은 경고로 기록하고 정상 응답을 돌려준다.
- 저장 실패도 오류 로그만 남기고 빈 응답을 돌려준다. `run_hook`은 예외를 던지지 않는다.
- 모든 진단은 로거(stderr)로만 나가며 응답 JSON과 섞이지 않는다.

디자인 패턴:
- 파이프라인(Pipeline) + 전략 분기(도구별 핸들러).

참조:
- src_py/figma_capture/capture/normalizer.py
- src_py/figma_capture/capture/extractor.py
- src_py/figma_capture/capture/gate.py
- src_py/figma_capture/storage/snapshot_store.py
"""

from __future__ import annotations

import base64
import binascii
import json
from abc import ABC, abstractmethod
from io import BytesIO
from typing import Any, Literal

from PIL import Image

from figma_capture.capture.extractor import (
    DimensionExtractor,
    extract_child_dimensions,
    extract_instance_tree,
    extract_raw_code,
)
from figma_capture.capture.gate import ActivationGate, CaptureMode, informational_ack
from figma_capture.capture.normalizer import decode_envelope, find_image_block, normalize_envelope
from figma_capture.config.models import CaptureConfig
from figma_capture.contracts.envelope import CaptureEvent
from figma_capture.contracts.hook_models import HookAck
from figma_capture.exceptions import ConfigurationError, SnapshotPersistenceError
from figma_capture.shared.logging import get_logger
from figma_capture.shared.text import scrub_surrogates
from figma_capture.storage.snapshot_store import SnapshotStore, fallback_key

logger = get_logger(__name__)

HandlerKind = Literal["code", "metadata", "screenshot"]


def parse_capture_event(raw: dict[str, Any]) -> CaptureEvent:
    """호스트 입력 객체를 `CaptureEvent`로 변환한다. 응답 형태는 여기서 한 번만 판별한다."""
    tool_input = raw.get("tool_input")
    node_id = tool_input.get("nodeId") if isinstance(tool_input, dict) else None
    key = scrub_surrogates(node_id) if isinstance(node_id, str) and node_id.strip() else None

    tool_name = raw.get("tool_name")
    return CaptureEvent(
        tool_name=scrub_surrogates(tool_name) if isinstance(tool_name, str) else "",
        key=key,
        envelope=decode_envelope(raw.get("tool_response")),
    )


class CaptureHandler(ABC):
    """도구 응답 1종을 처리하는 핸들러 베이스."""

    name: str = "capture"

    @abstractmethod
    def handle(self, event: CaptureEvent, mode: CaptureMode) -> HookAck:
        """이벤트를 처리하고 훅 응답을 반환한다."""

    def resolve_key(self, event: CaptureEvent) -> str:
        if event.key is not None:
            return event.key
        key = fallback_key()
        logger.warning("No nodeId in %s call, using fallback key %s", self.name, key)
        return key


class CodeCaptureHandler(CaptureHandler):
    """get_design_context 응답의 원문 코드를 그대로 저장한다."""

    name = "get_design_context"

    def __init__(self, store: SnapshotStore, process_script: str) -> None:
        self._store = store
        self._process_script = process_script

    def handle(self, event: CaptureEvent, mode: CaptureMode) -> HookAck:
        key = self.resolve_key(event)
        payload = normalize_envelope(event.envelope)
        if payload is None:
            logger.warning("Could not extract code from response")
            return HookAck.empty()

        snapshot = extract_raw_code(payload, key)
        path = self._store.write_text(key, snapshot.code)
        size_bytes = len(snapshot.code.encode("utf-8"))
        logger.info("✓ Captured: %s (%d bytes) [%s]", path.name, size_bytes, mode.value)

        return ActivationGate(mode, process_script=self._process_script).acknowledge(path, size_bytes)


class MetadataCaptureHandler(CaptureHandler):
    """get_metadata 응답에서 프레임 크기를 추출해 저장한다. 응답은 항상 `{}`이다."""

    name = "get_metadata"

    def __init__(
        self,
        store: SnapshotStore,
        extractor: DimensionExtractor | None = None,
        preview_chars: int = 500,
    ) -> None:
        self._store = store
        self._extractor = extractor or DimensionExtractor()
        self._preview_chars = preview_chars

    def handle(self, event: CaptureEvent, mode: CaptureMode) -> HookAck:
        key = self.resolve_key(event)
        payload = normalize_envelope(event.envelope)
        if payload is None:
            logger.warning("No XML content in get_metadata response")
            return HookAck.empty()

        dimensions = self._extractor.extract(payload, key)
        if dimensions is None:
            logger.warning("Could not extract dimensions from get_metadata response")
            logger.warning("XML preview: %s", payload.text[: self._preview_chars])
            return HookAck.empty()

        self._store.write_json(key, dimensions.model_dump(by_alias=True))
        self._store.write_text(key, payload.text, suffix=".xml")

        children = extract_child_dimensions(payload)
        self._store.write_json(
            key,
            {node_id: child.model_dump() for node_id, child in children.items()},
            suffix="-dimensions.json",
        )
        tree = extract_instance_tree(payload)
        self._store.write_json(
            key,
            {
                parent_id: [child.model_dump(exclude_none=True) for child in nodes]
                for parent_id, nodes in tree.items()
            },
            suffix="-instances.json",
        )

        logger.info(
            "✓ Captured dimensions for %s: %dx%d (+%d child nodes)",
            key,
            dimensions.width,
            dimensions.height,
            len(children),
        )
        return HookAck.empty()


class ScreenshotCaptureHandler(CaptureHandler):
    """get_screenshot 응답의 base64 이미지를 디코딩해 저장한다."""

    name = "get_screenshot"

    def __init__(self, store: SnapshotStore) -> None:
        self._store = store

    def handle(self, event: CaptureEvent, mode: CaptureMode) -> HookAck:
        key = self.resolve_key(event)
        encoded = find_image_block(event.envelope)
        if encoded is None:
            logger.warning("Could not extract image data from response")
            return HookAck.empty()

        try:
            image_bytes = base64.b64decode(encoded, validate=False)
        except (binascii.Error, ValueError) as exc:
            logger.warning("Failed to decode image: %s", exc)
            return HookAck.empty()

        size = _verify_image(image_bytes)
        if size is None:
            logger.warning("Failed to decode image")
            return HookAck.empty()

        path = self._store.write_bytes(key, image_bytes)
        logger.info("Screenshot saved: %s (%d bytes, %dx%d)", path, len(image_bytes), *size)
        return informational_ack(f"Screenshot saved to {path}")


def build_handler(kind: HandlerKind, config: CaptureConfig) -> CaptureHandler:
    """설정 기반 핸들러를 생성한다."""
    if kind == "code":
        return CodeCaptureHandler(SnapshotStore(config.code), process_script=config.process_script)
    if kind == "metadata":
        return MetadataCaptureHandler(SnapshotStore(config.metadata), preview_chars=config.preview_chars)
    if kind == "screenshot":
        return ScreenshotCaptureHandler(SnapshotStore(config.screenshots))
    raise ConfigurationError(f"알 수 없는 핸들러 종류입니다: {kind}")


def run_hook(raw: Any, handler: CaptureHandler, mode: CaptureMode) -> HookAck:
    """이벤트 1건을 처리한다. 어떤 경로에서도 유효한 응답을 반환한다."""
    if not isinstance(raw, dict):
        logger.warning("hook input is not a JSON object")
        return HookAck.empty()

    event = parse_capture_event(raw)
    try:
        return handler.handle(event, mode)
    except SnapshotPersistenceError as exc:
        logger.error("%s", exc)
        return HookAck.empty()


def run_hook_json(raw_text: str, handler: CaptureHandler, mode: CaptureMode) -> dict[str, Any]:
    """stdin 원문을 받아 직렬화 가능한 응답 dict를 반환한다."""
    try:
        raw = json.loads(raw_text) if raw_text.strip() else None
    except json.JSONDecodeError as exc:
        logger.warning("hook input is not valid JSON: %s", exc)
        return HookAck.empty().to_wire()
    return run_hook(raw, handler, mode).to_wire()


def _verify_image(data: bytes) -> tuple[int, int] | None:
    if not data:
        return None
    try:
        with Image.open(BytesIO(data)) as image:
            size = image.size
            image.verify()
    except Image.DecompressionBombError as exc:
        logger.warning("Image rejected by decompression bomb limit: %s", exc)
        return None
    except (OSError, SyntaxError, ValueError):
        return None
    return size
