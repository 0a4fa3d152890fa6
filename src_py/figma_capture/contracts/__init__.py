"""
목적:
- Python 계약 모델 계층의 공개 심볼을 제공한다.

설명:
- 입력 봉투/스냅샷/훅 응답 모델을 하나의 네임스페이스에서 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/figma_capture/contracts/envelope.py
- src_py/figma_capture/contracts/snapshot_models.py
- src_py/figma_capture/contracts/hook_models.py
"""

from .envelope import (
    BlockArray,
    CanonicalPayload,
    CaptureEvent,
    ContentBlock,
    EncodedString,
    ImageSource,
    RawString,
    ResponseEnvelope,
)
from .hook_models import HookAck, HookSpecificOutput
from .snapshot_models import (
    ChildDimension,
    CodeSnapshot,
    ComponentMetadata,
    FrameDimensions,
    InstanceChild,
)

__all__ = [
    "ContentBlock",
    "ImageSource",
    "BlockArray",
    "EncodedString",
    "RawString",
    "ResponseEnvelope",
    "CaptureEvent",
    "CanonicalPayload",
    "FrameDimensions",
    "CodeSnapshot",
    "ChildDimension",
    "InstanceChild",
    "ComponentMetadata",
    "HookAck",
    "HookSpecificOutput",
]
