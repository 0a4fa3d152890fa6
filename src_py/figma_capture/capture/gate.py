"""
목적:
- 활성화 상태에 따라 호스트로 되돌려 줄 훅 응답 형태를 결정한다.

설명:
- 파이프라인은 `CaptureMode` 값을 명시적으로 전달받는다.
- 마커 파일 존재 여부를 읽는 `resolve_capture_mode`는 프로세스 경계(CLI)에서만 호출하며,
  호출마다 새로 확인하고 결과를 캐시하지 않는다.
- 억제 모드는 큰 원문 응답이 호출 컨텍스트에 중복 노출되지 않도록
  방금 기록한 스냅샷 경로를 가리키는 지시문으로 출력을 대체한다.
- 게이트 자체는 부작용이 없으며, 반드시 영속화가 끝난 뒤 평가한다.

디자인 패턴:
- 순수 분기 함수(Pure Branch) + 값 객체(Value Object).

참조:
- src_py/figma_capture/hooks/pipeline.py
- src_py/figma_capture/cli.py
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from figma_capture.contracts.hook_models import HookAck, HookSpecificOutput
from figma_capture.shared.settings import default_settings


class CaptureMode(str, Enum):
    """훅 응답 모드."""

    PASSTHROUGH = "passthrough"
    SUPPRESSED = "suppressed"


def resolve_capture_mode(marker_path: str | Path) -> CaptureMode:
    """마커 파일의 존재 여부(내용 무관)로 모드를 판정한다."""
    if Path(marker_path).exists():
        return CaptureMode.SUPPRESSED
    return CaptureMode.PASSTHROUGH


class ActivationGate:
    """캡처 결과를 훅 응답으로 바꾸는 게이트."""

    def __init__(self, mode: CaptureMode, process_script: str = "$SKILL_DIR/scripts/process-figma.sh") -> None:
        self._mode = mode
        self._process_script = process_script

    @property
    def mode(self) -> CaptureMode:
        return self._mode

    def acknowledge(self, snapshot_path: Path, size_bytes: int) -> HookAck:
        """스냅샷 경로를 반영한 훅 응답을 만든다."""
        if self._mode is CaptureMode.PASSTHROUGH:
            return HookAck.empty()

        context = (
            f"✅ Figma response captured to {snapshot_path} ({size_bytes} bytes)\n\n"
            "NEXT: Run the processing script to extract tokens and download assets:\n\n"
            f"{self._process_script} {snapshot_path} <component.tsx> <asset-dir> <url-prefix> <tokens.css>"
        )
        return HookAck(
            suppress_output=True,
            hook_specific_output=HookSpecificOutput(
                hook_event_name=default_settings().hook_event_name,
                additional_context=context,
            ),
        )


def informational_ack(message: str) -> HookAck:
    """억제 없이 추가 컨텍스트만 전달하는 응답을 만든다."""
    return HookAck(
        hook_specific_output=HookSpecificOutput(
            hook_event_name=default_settings().hook_event_name,
            additional_context=message,
        )
    )
