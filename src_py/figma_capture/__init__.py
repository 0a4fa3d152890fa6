"""
목적:
- Figma Capture Python 패키지의 공개 진입점을 제공한다.

설명:
- Figma MCP 응답을 정규화하고 필드를 추출해 키별 스냅샷 파일로 남기는 훅 파이프라인이다.
- 설정/계약 모델/처리 단계/저장소/예외를 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/figma_capture/hooks/pipeline.py
- src_py/figma_capture/cli.py
"""

from .capture import (
    ActivationGate,
    AttributePairMatcher,
    CaptureMode,
    CombinedSizeMatcher,
    DimensionExtractor,
    DimensionMatcher,
    decode_envelope,
    normalize_envelope,
    resolve_capture_mode,
)
from .components import link_component
from .config import CaptureConfig, StoreLayout
from .contracts import (
    BlockArray,
    CanonicalPayload,
    CaptureEvent,
    CodeSnapshot,
    ComponentMetadata,
    ContentBlock,
    EncodedString,
    FrameDimensions,
    HookAck,
    RawString,
)
from .exceptions import (
    ComponentLinkError,
    ConfigurationError,
    FigmaCaptureError,
    SnapshotPersistenceError,
)
from .hooks import (
    CodeCaptureHandler,
    MetadataCaptureHandler,
    ScreenshotCaptureHandler,
    build_handler,
    run_hook,
    run_hook_json,
)
from .storage import SnapshotStore, sanitize_key
from .version import __version__

__all__ = [
    "__version__",
    "CaptureConfig",
    "StoreLayout",
    "ContentBlock",
    "BlockArray",
    "EncodedString",
    "RawString",
    "CaptureEvent",
    "CanonicalPayload",
    "FrameDimensions",
    "CodeSnapshot",
    "ComponentMetadata",
    "HookAck",
    "decode_envelope",
    "normalize_envelope",
    "DimensionMatcher",
    "AttributePairMatcher",
    "CombinedSizeMatcher",
    "DimensionExtractor",
    "CaptureMode",
    "ActivationGate",
    "resolve_capture_mode",
    "SnapshotStore",
    "sanitize_key",
    "CodeCaptureHandler",
    "MetadataCaptureHandler",
    "ScreenshotCaptureHandler",
    "build_handler",
    "run_hook",
    "run_hook_json",
    "link_component",
    "FigmaCaptureError",
    "ConfigurationError",
    "SnapshotPersistenceError",
    "ComponentLinkError",
]
