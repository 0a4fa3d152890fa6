"""
목적:
- 훅 입력 이벤트와 응답 봉투(envelope) 인터페이스 모델을 정의한다.

설명:
- 도구 응답은 스키마가 고정되어 있지 않아 블록 배열, JSON 직렬화 문자열, 원문 문자열 중
  하나로 도착한다. 경계에서 한 번만 판별해 명시적 태그 유니온으로 고정한다.
- 이후 단계는 런타임 타입을 다시 검사하지 않고 `variant` 태그만 사용한다.

디자인 패턴:
- 태그 유니온(Tagged Union) + DTO(Data Transfer Object).

참조:
- src_py/figma_capture/capture/normalizer.py
- src_py/figma_capture/hooks/pipeline.py
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ImageSource(BaseModel):
    """이미지 블록의 base64 소스 모델."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str = Field(default="base64")
    media_type: str | None = Field(default=None)
    data: str | None = Field(default=None)


class ContentBlock(BaseModel):
    """응답 봉투 안의 단일 콘텐츠 블록 모델."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    kind: str = Field(default="", alias="type")
    text: str | None = Field(default=None)
    data: str | None = Field(default=None)
    source: ImageSource | None = Field(default=None)


class BlockArray(BaseModel):
    """이미 파싱된 블록 배열 형태의 응답."""

    model_config = ConfigDict(frozen=True)

    variant: Literal["block_array"] = "block_array"
    blocks: tuple[ContentBlock, ...] = Field(default=())


class EncodedString(BaseModel):
    """블록 배열을 JSON 문자열로 직렬화한 응답."""

    model_config = ConfigDict(frozen=True)

    variant: Literal["encoded_string"] = "encoded_string"
    raw: str
    blocks: tuple[ContentBlock, ...] = Field(min_length=1)


class RawString(BaseModel):
    """그대로 사용하는 원문 문자열 응답."""

    model_config = ConfigDict(frozen=True)

    variant: Literal["raw_string"] = "raw_string"
    text: str


ResponseEnvelope = Annotated[
    Union[BlockArray, EncodedString, RawString],
    Field(discriminator="variant"),
]


class CaptureEvent(BaseModel):
    """훅 호출 1회 단위의 입력 이벤트 모델."""

    model_config = ConfigDict(frozen=True)

    tool_name: str = Field(default="")
    key: str | None = Field(default=None)
    envelope: Optional[ResponseEnvelope] = Field(default=None)


class CanonicalPayload(BaseModel):
    """모든 추출 단계가 공유하는 정규화 텍스트 모델."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1)
