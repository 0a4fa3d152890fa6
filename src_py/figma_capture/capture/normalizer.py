"""
목적:
- 형태가 제각각인 도구 응답을 정규화 텍스트(canonical text)로 변환한다.

설명:
- `decode_envelope`는 경계에서 런타임 형태를 한 번만 판별해 태그 유니온을 만든다.
- 문자열은 블록 배열 JSON일 수 있으므로 추측 디코딩을 먼저 시도하고,
  실패하면 원문 문자열로 취급한다.
- "콘텐츠 없음"은 오류가 아니라 정상 종료 결과이며 None으로 표현한다.
  이 모듈의 어떤 함수도 예외를 밖으로 던지지 않는다.

디자인 패턴:
- 경계 디코더(Boundary Decoder).

참조:
- src_py/figma_capture/contracts/envelope.py
- src_py/figma_capture/hooks/pipeline.py
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from figma_capture.contracts.envelope import (
    BlockArray,
    CanonicalPayload,
    ContentBlock,
    EncodedString,
    RawString,
    ResponseEnvelope,
)
from figma_capture.shared.text import scrub_surrogates, scrub_value

_IMAGE_KIND = "image"


def decode_envelope(raw: Any) -> ResponseEnvelope | None:
    """원시 `tool_response` 값을 태그 유니온으로 판별한다.

    Args:
        raw: JSON 디코딩된 응답 값.

    Returns:
        `BlockArray`/`EncodedString`/`RawString` 중 하나. 그 밖의 형태면 None.
    """
    raw = scrub_value(raw)
    if isinstance(raw, list):
        return BlockArray(blocks=tuple(_coerce_block(item) for item in raw))

    if isinstance(raw, str):
        blocks = _speculative_blocks(raw)
        if blocks:
            return EncodedString(raw=raw, blocks=blocks)
        return RawString(text=raw)

    return None


def normalize_envelope(envelope: ResponseEnvelope | None) -> CanonicalPayload | None:
    """봉투에서 정규화 텍스트를 만든다. 사용할 텍스트가 없으면 None."""
    if envelope is None:
        return None

    if isinstance(envelope, RawString):
        text = envelope.text
    else:
        text = envelope.blocks[0].text if envelope.blocks else None

    if not text:
        return None
    return CanonicalPayload(text=scrub_surrogates(text))


def find_image_block(envelope: ResponseEnvelope | None) -> str | None:
    """첫 이미지 블록의 base64 데이터를 반환한다."""
    if envelope is None or isinstance(envelope, RawString):
        return None

    for block in envelope.blocks:
        if block.kind != _IMAGE_KIND:
            continue
        if block.source is not None and block.source.data:
            return block.source.data
        if block.data:
            return block.data
    return None


def _speculative_blocks(raw: str) -> tuple[ContentBlock, ...]:
    try:
        parsed = json.loads(raw)
    except (json.JSONDecodeError, RecursionError):
        return ()

    parsed = scrub_value(parsed)
    if not isinstance(parsed, list) or not parsed:
        return ()
    if not all(isinstance(item, dict) for item in parsed):
        return ()
    return tuple(_coerce_block(item) for item in parsed)


def _coerce_block(item: Any) -> ContentBlock:
    # 위치를 보존해야 "첫 블록" 규칙이 유지되므로 해석 불가 항목은 빈 블록으로 남긴다.
    if not isinstance(item, dict):
        return ContentBlock()
    try:
        return ContentBlock.model_validate(item)
    except ValidationError:
        return ContentBlock(kind=str(item.get("type", "")))
