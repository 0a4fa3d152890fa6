"""
목적:
- 정규화 텍스트에서 프레임 크기와 원문 코드 같은 구조화 필드를 추출한다.

설명:
- 크기 모드는 우선순위가 고정된 매처 목록을 순서대로 시도한다.
  (a) width=/height= 장형 속성, (b) w=/h= 약식 속성, (c) size="WxH" 결합 토큰.
- 두 값을 모두 얻은 첫 매처의 결과만 사용하며, 매처 간 부분 결과는 합치지 않는다.
- 숫자 토큰은 Decimal로 파싱한 뒤 0.5에서 0 반대 방향으로 반올림한다.
- 원문 코드 모드는 정규화 텍스트를 바이트 단위 그대로 돌려준다.
- 매처 목록은 호출자가 교체/확장할 수 있어 새로운 응답 방언을 제어 흐름 수정 없이 추가한다.

디자인 패턴:
- 전략(Strategy) + 책임 연쇄(Chain of Responsibility).

참조:
- src_py/figma_capture/hooks/pipeline.py
- src_py/figma_capture/contracts/snapshot_models.py
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from html import unescape
from typing import Iterable, Protocol, Sequence

from figma_capture.contracts.envelope import CanonicalPayload
from figma_capture.contracts.snapshot_models import (
    ChildDimension,
    CodeSnapshot,
    FrameDimensions,
    InstanceChild,
)
from figma_capture.shared.logging import get_logger

logger = get_logger(__name__)

_NUMBER = r"(\d+(?:\.\d*)?|\.\d+)"
_ATTR_GUARD = r"(?<![\w:.-])"
_TAG_PATTERN = re.compile(r"<(/?)([A-Za-z][\w:.-]*)((?:\s+[^>]*?)?)(/?)>")
_QUOTED_ATTR_PATTERN = re.compile(r"([A-Za-z_][\w:.-]*)\s*=\s*\"([^\"]*)\"")

DimensionPair = tuple[int, int]


class DimensionMatcher(Protocol):
    """정규화 텍스트에서 (width, height) 한 쌍을 찾는 전략 인터페이스."""

    name: str

    def match(self, text: str) -> DimensionPair | None: ...


def round_half_away(token: str) -> int | None:
    """숫자 토큰을 Decimal로 파싱해 가장 가까운 정수로 반올림한다."""
    try:
        value = Decimal(token.strip())
        if not value.is_finite():
            return None
        return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return None


def _positive_pair(width_token: str, height_token: str) -> DimensionPair | None:
    width = round_half_away(width_token)
    height = round_half_away(height_token)
    if width is None or height is None or width <= 0 or height <= 0:
        return None
    return width, height


@dataclass(frozen=True, slots=True)
class AttributePairMatcher:
    """`{width_attr}="X"`, `{height_attr}="Y"` 형태의 속성 쌍 매처."""

    width_attr: str
    height_attr: str
    name: str = ""
    _width_re: re.Pattern[str] = field(init=False, repr=False, compare=False)
    _height_re: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", f"{self.width_attr}/{self.height_attr}")
        object.__setattr__(self, "_width_re", _attribute_pattern(self.width_attr))
        object.__setattr__(self, "_height_re", _attribute_pattern(self.height_attr))

    def match(self, text: str) -> DimensionPair | None:
        width = self._width_re.search(text)
        height = self._height_re.search(text)
        if width is None or height is None:
            return None
        return _positive_pair(width.group(1), height.group(1))


@dataclass(frozen=True, slots=True)
class CombinedSizeMatcher:
    """`size="WxH"` 결합 토큰 매처."""

    attr: str = "size"
    name: str = "size"
    _size_re: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        pattern = re.compile(
            _ATTR_GUARD + re.escape(self.attr) + r"\s*=\s*[\"']?" + _NUMBER + r"\s*[xX×]\s*" + _NUMBER
        )
        object.__setattr__(self, "_size_re", pattern)

    def match(self, text: str) -> DimensionPair | None:
        found = self._size_re.search(text)
        if found is None:
            return None
        return _positive_pair(found.group(1), found.group(2))


def default_dimension_matchers() -> list[DimensionMatcher]:
    """기본 우선순위의 크기 매처 목록을 만든다."""
    return [
        AttributePairMatcher("width", "height"),
        AttributePairMatcher("w", "h"),
        CombinedSizeMatcher(),
    ]


class DimensionExtractor:
    """매처 목록을 우선순위대로 적용하는 크기 추출기."""

    def __init__(self, matchers: Sequence[DimensionMatcher] | None = None) -> None:
        self._matchers: list[DimensionMatcher] = list(
            default_dimension_matchers() if matchers is None else matchers
        )

    @property
    def matchers(self) -> tuple[DimensionMatcher, ...]:
        return tuple(self._matchers)

    def register(self, matcher: DimensionMatcher, *, index: int | None = None) -> None:
        """매처를 추가한다. index를 주면 해당 우선순위에 끼워 넣는다."""
        if index is None:
            self._matchers.append(matcher)
        else:
            self._matchers.insert(index, matcher)

    def extract(self, payload: CanonicalPayload, node_id: str) -> FrameDimensions | None:
        """첫 번째로 완전한 쌍을 찾은 매처의 결과를 반환한다. 모두 실패하면 None."""
        for matcher in self._matchers:
            pair = matcher.match(payload.text)
            if pair is None:
                continue
            logger.debug("matcher %s matched %sx%s", matcher.name, *pair)
            return FrameDimensions(node_id=node_id, width=pair[0], height=pair[1])
        return None


def extract_raw_code(payload: CanonicalPayload, node_id: str) -> CodeSnapshot:
    return CodeSnapshot(node_id=node_id, code=payload.text)


def extract_child_dimensions(payload: CanonicalPayload) -> dict[str, ChildDimension]:
    """id/width/height를 모두 가진 요소의 크기 맵을 만든다."""
    dimensions: dict[str, ChildDimension] = {}
    for _, attrs in _iter_open_tags(payload.text):
        node_id = attrs.get("id")
        pair = _tag_dimensions(attrs)
        if node_id and pair is not None:
            dimensions[node_id] = ChildDimension(w=pair[0], h=pair[1])
    return dimensions


def extract_instance_tree(payload: CanonicalPayload) -> dict[str, list[InstanceChild]]:
    """부모 id별 직계 자식 목록을 만든다."""
    tree: dict[str, list[InstanceChild]] = {}
    stack: list[str | None] = []

    for match in _TAG_PATTERN.finditer(payload.text):
        closing, tag, raw_attrs, self_closing = match.groups()
        if closing:
            if stack:
                stack.pop()
            continue

        attrs = _parse_attrs(raw_attrs)
        node_id = attrs.get("id")
        parent_id = stack[-1] if stack else None
        if node_id and parent_id:
            pair = _tag_dimensions(attrs, require_both=False)
            tree.setdefault(parent_id, []).append(
                InstanceChild(
                    id=node_id,
                    name=attrs.get("name", ""),
                    type=tag,
                    w=pair[0],
                    h=pair[1],
                )
            )

        if not self_closing and not raw_attrs.rstrip().endswith("/"):
            stack.append(node_id or None)

    return tree


def _attribute_pattern(attr: str) -> re.Pattern[str]:
    return re.compile(_ATTR_GUARD + re.escape(attr) + r"\s*=\s*[\"']?" + _NUMBER)


def _iter_open_tags(text: str) -> Iterable[tuple[str, dict[str, str]]]:
    for match in _TAG_PATTERN.finditer(text):
        closing, tag, raw_attrs, _ = match.groups()
        if closing:
            continue
        yield tag, _parse_attrs(raw_attrs)


def _parse_attrs(raw_attrs: str) -> dict[str, str]:
    return {name: unescape(value) for name, value in _QUOTED_ATTR_PATTERN.findall(raw_attrs or "")}


def _non_negative(token: str | None) -> int | None:
    if token is None:
        return None
    value = round_half_away(token)
    if value is None or value < 0:
        return None
    return value


def _tag_dimensions(
    attrs: dict[str, str], require_both: bool = True
) -> tuple[int | None, int | None] | None:
    width = _non_negative(attrs.get("width"))
    height = _non_negative(attrs.get("height"))
    if require_both and (width is None or height is None):
        return None
    return width, height
