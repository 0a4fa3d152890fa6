"""
목적:
- 호스트 훅 계약(stdin JSON → stdout JSON)을 구현하는 명령행 진입점을 제공한다.

설명:
- 라이브러리 본체는 환경 변수를 읽지 않는다. 이 모듈이 `FIGMA_CAPTURE_*` 환경 변수로
  설정 객체를 만들고, 활성화 마커를 확인해 `CaptureMode`를 결정한 뒤 파이프라인에 주입한다.
- 훅 하위 명령은 어떤 경우에도 stdout에 JSON 응답 하나를 출력하고 종료 코드 0을 반환한다.
- 진단은 stderr 로거로만 출력한다.

디자인 패턴:
- 드라이버(Driver Script).

참조:
- src_py/figma_capture/config/models.py
- src_py/figma_capture/hooks/pipeline.py
- src_py/figma_capture/components/linker.py
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Sequence, TextIO

from figma_capture.capture.gate import CaptureMode, resolve_capture_mode
from figma_capture.components.linker import link_component
from figma_capture.config.models import CaptureConfig
from figma_capture.exceptions import FigmaCaptureError
from figma_capture.hooks.pipeline import build_handler, run_hook_json
from figma_capture.shared.logging import get_logger, setup_logging
from figma_capture.storage.snapshot_store import SnapshotStore

logger = get_logger(__name__)

_HOOK_COMMANDS = {
    "capture-code": "code",
    "capture-metadata": "metadata",
    "capture-screenshot": "screenshot",
}


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="figma-capture", description="Figma MCP 응답 캡처 훅")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("FIGMA_CAPTURE_LOG_LEVEL", "INFO"),
        help="stderr 로깅 레벨 (기본: INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, kind in _HOOK_COMMANDS.items():
        hook = subparsers.add_parser(command, help=f"{kind} 응답 캡처 훅 (stdin JSON)")
        hook.add_argument(
            "--mode",
            choices=["auto", *(mode.value for mode in CaptureMode)],
            default="auto",
            help="auto면 활성화 마커 파일 존재 여부로 결정",
        )

    link = subparsers.add_parser("link-component", help="컴포넌트 이름을 노드 메타데이터에 연결")
    link.add_argument("name", help="컴포넌트 이름 (예: LoginScreen)")
    link.add_argument("node_id", help="Figma 노드 ID (예: 237:2571)")
    link.add_argument("--width", type=int, default=None, help="프레임 너비(px)")
    link.add_argument("--height", type=int, default=None, help="프레임 높이(px)")
    link.add_argument("--component-path", default="", help="컴포넌트 파일 경로")
    return parser.parse_args(argv)


def build_config() -> CaptureConfig:
    """환경 변수로 설정 객체를 만든다."""
    overrides: dict[str, object] = {}
    if marker := os.environ.get("FIGMA_CAPTURE_MARKER"):
        overrides["marker_path"] = Path(marker)
    if script := os.environ.get("FIGMA_CAPTURE_PROCESS_SCRIPT"):
        overrides["process_script"] = script

    root = os.environ.get("FIGMA_CAPTURE_ROOT")
    if root:
        return CaptureConfig.rooted_at(root, **overrides)
    return CaptureConfig(**overrides)


def run_capture(
    kind: str,
    mode_name: str,
    config: CaptureConfig,
    stdin: TextIO,
    stdout: TextIO,
) -> int:
    """훅 1회를 실행하고 응답 JSON을 출력한다."""
    ack: dict[str, object] = {}
    try:
        mode = resolve_capture_mode(config.marker_path) if mode_name == "auto" else CaptureMode(mode_name)
        ack = run_hook_json(stdin.read(), build_handler(kind, config), mode)
    except Exception:  # noqa: BLE001
        logger.exception("capture hook failed")
    stdout.write(json.dumps(ack, ensure_ascii=False) + "\n")
    stdout.flush()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = build_config()
    except ValueError as exc:
        logger.error("invalid configuration: %s", exc)
        if args.command in _HOOK_COMMANDS:
            print("{}")
            return 0
        return 1

    if args.command in _HOOK_COMMANDS:
        return run_capture(_HOOK_COMMANDS[args.command], args.mode, config, sys.stdin, sys.stdout)

    try:
        path = link_component(
            SnapshotStore(config.metadata),
            args.name,
            args.node_id,
            width=args.width,
            height=args.height,
            component_path=args.component_path,
        )
    except FigmaCaptureError as exc:
        logger.error("%s", exc)
        return 1

    print(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
