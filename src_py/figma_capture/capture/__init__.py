"""
목적:
- 응답 정규화/필드 추출/활성화 게이트의 공개 진입점을 제공한다.

설명:
- 훅 파이프라인이 조합하는 순수 처리 단계를 한 네임스페이스로 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/figma_capture/capture/normalizer.py
- src_py/figma_capture/capture/extractor.py
- src_py/figma_capture/capture/gate.py
"""

from .extractor import (
    AttributePairMatcher,
    CombinedSizeMatcher,
    DimensionExtractor,
    DimensionMatcher,
    default_dimension_matchers,
    extract_child_dimensions,
    extract_instance_tree,
    extract_raw_code,
    round_half_away,
)
from .gate import ActivationGate, CaptureMode, informational_ack, resolve_capture_mode
from .normalizer import decode_envelope, find_image_block, normalize_envelope

__all__ = [
    "decode_envelope",
    "normalize_envelope",
    "find_image_block",
    "DimensionMatcher",
    "AttributePairMatcher",
    "CombinedSizeMatcher",
    "DimensionExtractor",
    "default_dimension_matchers",
    "round_half_away",
    "extract_raw_code",
    "extract_child_dimensions",
    "extract_instance_tree",
    "CaptureMode",
    "ActivationGate",
    "resolve_capture_mode",
    "informational_ack",
]
