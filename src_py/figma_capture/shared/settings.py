"""
목적:
- 프로젝트 기본 메타 설정을 제공한다.

설명:
- 로그/진단/훅 응답에서 공통으로 사용할 식별자 정보를 유지한다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- src_py/figma_capture/shared/logging.py
- src_py/figma_capture/capture/gate.py
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ProjectSettings(BaseModel):
    """Figma Capture 기본 메타 설정 모델."""

    project_name: str = Field(default="Figma Capture")
    python_package: str = Field(default="figma_capture")
    logger_name: str = Field(default="figma_capture")
    hook_event_name: str = Field(default="PostToolUse")


def default_settings() -> ProjectSettings:
    """기본 설정 객체를 생성한다."""
    return ProjectSettings()
