"""
목적:
- 훅 파이프라인 계층의 공개 진입점을 제공한다.

설명:
- 도구별 핸들러와 이벤트 1건 처리 함수를 외부에 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/figma_capture/hooks/pipeline.py
"""

from .pipeline import (
    CaptureHandler,
    CodeCaptureHandler,
    MetadataCaptureHandler,
    ScreenshotCaptureHandler,
    build_handler,
    parse_capture_event,
    run_hook,
    run_hook_json,
)

__all__ = [
    "CaptureHandler",
    "CodeCaptureHandler",
    "MetadataCaptureHandler",
    "ScreenshotCaptureHandler",
    "build_handler",
    "parse_capture_event",
    "run_hook",
    "run_hook_json",
]
