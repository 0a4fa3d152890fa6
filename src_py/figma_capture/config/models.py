"""
목적:
- Figma Capture 훅의 설정 인터페이스를 정의한다.

설명:
- 스냅샷 디렉터리, 파일명 규칙, 활성화 마커 경로를 단일 모델로 관리한다.
- 라이브러리는 환경 변수를 직접 읽지 않고, CLI가 생성한 설정 객체를 주입받는다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- src_py/figma_capture/cli.py
- src_py/figma_capture/hooks/pipeline.py
- src_py/figma_capture/storage/snapshot_store.py
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class StoreLayout(BaseModel):
    """단일 스냅샷 디렉터리의 파일명 규칙 모델."""

    directory: Path
    prefix: str = Field(default="")
    suffix: str = Field(min_length=2)

    @field_validator("suffix")
    @classmethod
    def validate_suffix(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("suffix는 '.'으로 시작해야 합니다")
        return value

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, value: str) -> str:
        if "/" in value or "\\" in value:
            raise ValueError("prefix에는 경로 구분자를 쓸 수 없습니다")
        return value


class CaptureConfig(BaseModel):
    """훅 파이프라인 전체 설정 모델."""

    code: StoreLayout = Field(
        default_factory=lambda: StoreLayout(
            directory=Path("/tmp/figma-captures"), prefix="figma-", suffix=".txt"
        )
    )
    metadata: StoreLayout = Field(
        default_factory=lambda: StoreLayout(
            directory=Path("/tmp/figma-to-react/metadata"), suffix=".json"
        )
    )
    screenshots: StoreLayout = Field(
        default_factory=lambda: StoreLayout(
            directory=Path("/tmp/figma-to-react/screenshots"), prefix="figma-", suffix=".png"
        )
    )
    marker_path: Path = Field(default=Path("/tmp/figma-skill-capture-active"))
    preview_chars: int = Field(default=500, ge=0)
    process_script: str = Field(default="$SKILL_DIR/scripts/process-figma.sh", min_length=1)

    @classmethod
    def rooted_at(cls, root: str | Path, **overrides) -> "CaptureConfig":
        """하나의 스크래치 루트 아래에 모든 디렉터리를 배치한 설정을 만든다."""
        base = Path(root)
        values = {
            "code": StoreLayout(directory=base / "captures", prefix="figma-", suffix=".txt"),
            "metadata": StoreLayout(directory=base / "metadata", suffix=".json"),
            "screenshots": StoreLayout(directory=base / "screenshots", prefix="figma-", suffix=".png"),
            "marker_path": base / "capture-active",
        }
        values.update(overrides)
        return cls(**values)
