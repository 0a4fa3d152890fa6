"""
목적:
- 스냅샷 파일로 영속화되는 추출 결과 모델을 정의한다.

설명:
- 프레임 크기, 원문 코드, 자식 노드 크기 맵, 인스턴스 트리, 컴포넌트 연결 정보를 다룬다.
- 직렬화 필드명은 후속 처리 스크립트가 읽는 camelCase 이름을 유지한다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/figma_capture/capture/extractor.py
- src_py/figma_capture/components/linker.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class FrameDimensions(BaseModel):
    """루트 프레임 크기 스냅샷 모델."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    node_id: str = Field(min_length=1, alias="nodeId")
    width: PositiveInt
    height: PositiveInt


class CodeSnapshot(BaseModel):
    """원문 코드 스냅샷 모델. 파일에는 `code`만 그대로 기록한다."""

    model_config = ConfigDict(frozen=True)

    node_id: str = Field(min_length=1)
    code: str = Field(min_length=1)


class ChildDimension(BaseModel):
    """자식 노드 크기 모델."""

    w: int = Field(ge=0)
    h: int = Field(ge=0)


class InstanceChild(BaseModel):
    """인스턴스 트리의 직계 자식 노드 모델."""

    id: str = Field(min_length=1)
    name: str = Field(default="")
    type: str = Field(min_length=1)
    w: int | None = Field(default=None)
    h: int | None = Field(default=None)


class ComponentMetadata(BaseModel):
    """컴포넌트 이름과 노드 메타데이터의 연결 모델."""

    model_config = ConfigDict(populate_by_name=True)

    node_id: str = Field(min_length=1, alias="nodeId")
    width: PositiveInt
    height: PositiveInt
    name: str = Field(min_length=1)
    component_path: str = Field(default="", alias="componentPath")
