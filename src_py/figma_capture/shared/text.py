"""
목적:
- 외부 입력 문자열을 UTF-8로 안전하게 직렬화할 수 있는 형태로 보정한다.

설명:
- JSON의 `\ud800` 같은 단독 서로게이트 이스케이프는 Python 문자열로는 디코딩되지만
  UTF-8로 인코딩할 수 없고 pydantic 문자열 검증도 통과하지 못한다.
- 단독 서로게이트만 U+FFFD로 바꾸고 나머지 문자는 그대로 둔다.

디자인 패턴:
- 함수형 유틸 모듈(Function Utility Module).

참조:
- src_py/figma_capture/capture/normalizer.py
- src_py/figma_capture/storage/snapshot_store.py
"""

from __future__ import annotations

import re
from typing import Any

_SURROGATES = re.compile("[\ud800-\udfff]")


def scrub_surrogates(text: str) -> str:
    """서로게이트 코드 포인트 하나를 U+FFFD 하나로 치환한다."""
    return _SURROGATES.sub("\ufffd", text)


def scrub_value(value: Any) -> Any:
    """JSON 디코딩 결과 안의 모든 문자열(키 포함)을 보정한다."""
    if isinstance(value, str):
        return scrub_surrogates(value)
    if isinstance(value, list):
        return [scrub_value(item) for item in value]
    if isinstance(value, dict):
        return {scrub_value(key): scrub_value(item) for key, item in value.items()}
    return value
