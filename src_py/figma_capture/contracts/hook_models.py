"""
목적:
- 호스트로 되돌려 주는 훅 응답(acknowledgment) 모델을 정의한다.

설명:
- 빈 응답 `{}`은 항상 유효하다. 억제 모드에서는 후속 지시문을 함께 담는다.
- None 필드는 직렬화에서 제외해 빈 응답이 정확히 `{}`이 되도록 한다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/figma_capture/capture/gate.py
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HookSpecificOutput(BaseModel):
    """호스트 이벤트별 추가 출력 모델."""

    model_config = ConfigDict(populate_by_name=True)

    hook_event_name: str = Field(default="PostToolUse", alias="hookEventName")
    additional_context: str = Field(min_length=1, alias="additionalContext")


class HookAck(BaseModel):
    """훅 응답 모델."""

    model_config = ConfigDict(populate_by_name=True)

    suppress_output: bool | None = Field(default=None, alias="suppressOutput")
    hook_specific_output: HookSpecificOutput | None = Field(default=None, alias="hookSpecificOutput")

    @classmethod
    def empty(cls) -> "HookAck":
        return cls()

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
