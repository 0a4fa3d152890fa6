"""
목적:
- 훅 프로세스의 진단 로그 구성을 제공한다.

설명:
- 훅 응답 JSON은 stdout 전용이므로 모든 경고/오류는 stderr로만 출력한다.
- rich `RichHandler`를 stderr 콘솔에 바인딩해 호스트의 응답 파싱과 섞이지 않게 한다.
- 패키지 로거에만 핸들러를 붙여 호스트 프로세스의 루트 로거를 건드리지 않는다.

디자인 패턴:
- 설정 함수(Configuration Function).

참조:
- src_py/figma_capture/cli.py
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from .settings import default_settings

_HANDLER_MARK = "_figma_capture_handler"


def setup_logging(log_level: str = "INFO", *, console: Console | None = None) -> logging.Logger:
    """패키지 로거에 stderr 전용 Rich 핸들러를 설치한다.

    Args:
        log_level: 로깅 레벨 이름 (예: INFO, WARNING). 알 수 없는 이름이면 INFO로 대체한다.
        console: 출력 대상 콘솔. 생략하면 stderr 콘솔을 사용한다.

    Returns:
        구성된 패키지 로거.
    """
    logger = logging.getLogger(default_settings().logger_name)
    level = logging.getLevelName(str(log_level).upper())
    unknown_level = not isinstance(level, int)
    logger.setLevel(logging.INFO if unknown_level else level)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _HANDLER_MARK, True)
    logger.addHandler(handler)
    if unknown_level:
        logger.warning("Unknown log level %r, falling back to INFO", log_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """모듈 이름으로 로거를 반환한다."""
    return logging.getLogger(name)
