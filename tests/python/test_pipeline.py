import base64
import json
import logging
from io import BytesIO

import pytest
from PIL import Image

from figma_capture.capture.gate import CaptureMode
from figma_capture.config.models import CaptureConfig, StoreLayout
from figma_capture.exceptions import ConfigurationError
from figma_capture.hooks.pipeline import (
    CodeCaptureHandler,
    build_handler,
    parse_capture_event,
    run_hook,
    run_hook_json,
)
from figma_capture.storage.snapshot_store import SnapshotStore

METADATA_XML = """<frame id="237:2571" name="Login" x="0" y="0" width="390.4" height="844">
  <instance id="237:2572" name="Header" x="0" y="0" width="390" height="64" />
</frame>"""


def _event(node_id, response) -> dict:
    tool_input = {} if node_id is None else {"nodeId": node_id}
    return {"tool_name": "mcp__figma__get_design_context", "tool_input": tool_input, "tool_response": response}


def _png_base64() -> str:
    buffer = BytesIO()
    Image.new("RGB", (4, 3), color=(255, 0, 0)).save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("ascii")


def test_parse_capture_event_extracts_key_and_envelope() -> None:
    event = parse_capture_event(_event("1:2", [{"type": "text", "text": "code"}]))

    assert event.key == "1:2"
    assert event.tool_name == "mcp__figma__get_design_context"
    assert event.envelope is not None
    assert event.envelope.variant == "block_array"


def test_parse_capture_event_treats_blank_node_id_as_missing() -> None:
    assert parse_capture_event(_event("  ", "x")).key is None
    assert parse_capture_event({"tool_input": "bad", "tool_response": "x"}).key is None


def test_code_capture_passthrough(capture_config: CaptureConfig) -> None:
    code = "export function Login() {\n\treturn <div className=\"w-[390px]\" />;\n}\n"
    handler = build_handler("code", capture_config)

    ack = run_hook(_event("237:2571", json.dumps([{"type": "text", "text": code}])), handler, CaptureMode.PASSTHROUGH)

    path = capture_config.code.directory / "figma-237-2571.txt"
    assert ack.to_wire() == {}
    assert path.read_bytes() == code.encode("utf-8")


def test_code_capture_suppressed_points_at_written_path(capture_config: CaptureConfig) -> None:
    handler = build_handler("code", capture_config)

    wire = run_hook(_event("237:2571", "raw code"), handler, CaptureMode.SUPPRESSED).to_wire()

    path = capture_config.code.directory / "figma-237-2571.txt"
    assert path.read_text(encoding="utf-8") == "raw code"
    assert wire["suppressOutput"] is True
    assert str(path) in wire["hookSpecificOutput"]["additionalContext"]
    assert "(8 bytes)" in wire["hookSpecificOutput"]["additionalContext"]


def test_code_capture_without_content_writes_nothing(capture_config: CaptureConfig, caplog) -> None:
    handler = build_handler("code", capture_config)

    with caplog.at_level(logging.WARNING):
        ack = run_hook(_event("1:2", {"unexpected": "object"}), handler, CaptureMode.SUPPRESSED)

    assert ack.to_wire() == {}
    assert not capture_config.code.directory.exists()
    assert "Could not extract code" in caplog.text


def test_missing_key_uses_fallback_and_warns(capture_config: CaptureConfig, caplog) -> None:
    handler = build_handler("code", capture_config)

    with caplog.at_level(logging.WARNING):
        run_hook(_event(None, "code"), handler, CaptureMode.PASSTHROUGH)

    written = list(capture_config.code.directory.iterdir())
    assert len(written) == 1
    assert written[0].name.startswith("figma-unknown-")
    assert "No nodeId" in caplog.text


def test_metadata_capture_writes_snapshot_and_side_files(capture_config: CaptureConfig) -> None:
    handler = build_handler("metadata", capture_config)

    ack = run_hook(_event("237:2571", [{"type": "text", "text": METADATA_XML}]), handler, CaptureMode.SUPPRESSED)

    directory = capture_config.metadata.directory
    assert ack.to_wire() == {}
    assert json.loads((directory / "237-2571.json").read_text(encoding="utf-8")) == {
        "nodeId": "237:2571",
        "width": 390,
        "height": 844,
    }
    assert (directory / "237-2571.xml").read_text(encoding="utf-8") == METADATA_XML
    dimensions = json.loads((directory / "237-2571-dimensions.json").read_text(encoding="utf-8"))
    assert dimensions == {"237:2571": {"w": 390, "h": 844}, "237:2572": {"w": 390, "h": 64}}
    instances = json.loads((directory / "237-2571-instances.json").read_text(encoding="utf-8"))
    assert instances == {
        "237:2571": [{"id": "237:2572", "name": "Header", "type": "instance", "w": 390, "h": 64}]
    }


def test_metadata_extraction_miss_writes_nothing(capture_config: CaptureConfig, caplog) -> None:
    handler = build_handler("metadata", capture_config)

    with caplog.at_level(logging.WARNING):
        ack = run_hook(_event("1:2", "<frame name='no size' />"), handler, CaptureMode.PASSTHROUGH)

    assert ack.to_wire() == {}
    assert not capture_config.metadata.directory.exists()
    assert "Could not extract dimensions" in caplog.text
    assert "XML preview: <frame name='no size' />" in caplog.text


def test_screenshot_capture_decodes_and_verifies(capture_config: CaptureConfig) -> None:
    handler = build_handler("screenshot", capture_config)
    response = [{"type": "image", "source": {"type": "base64", "media_type": "image/png", "data": _png_base64()}}]

    wire = run_hook(_event("5:6", response), handler, CaptureMode.PASSTHROUGH).to_wire()

    path = capture_config.screenshots.directory / "figma-5-6.png"
    with Image.open(path) as image:
        assert image.size == (4, 3)
    assert wire["hookSpecificOutput"]["additionalContext"] == f"Screenshot saved to {path}"


def test_screenshot_capture_rejects_non_image_data(capture_config: CaptureConfig) -> None:
    handler = build_handler("screenshot", capture_config)
    bogus = base64.b64encode(b"definitely not a png").decode("ascii")

    wire = run_hook(_event("5:6", [{"type": "image", "data": bogus}]), handler, CaptureMode.PASSTHROUGH).to_wire()

    assert wire == {}
    assert not capture_config.screenshots.directory.exists()


def test_screenshot_over_pixel_limit_is_a_soft_miss(capture_config: CaptureConfig, monkeypatch, caplog) -> None:
    buffer = BytesIO()
    Image.new("RGB", (100, 100)).save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
    handler = build_handler("screenshot", capture_config)

    with caplog.at_level(logging.WARNING):
        wire = run_hook(_event("5:6", [{"type": "image", "data": encoded}]), handler, CaptureMode.PASSTHROUGH).to_wire()

    assert wire == {}
    assert not capture_config.screenshots.directory.exists()
    assert "decompression bomb" in caplog.text


def test_persistence_failure_still_acknowledges(tmp_path, caplog) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = SnapshotStore(StoreLayout(directory=blocker / "captures", prefix="figma-", suffix=".txt"))
    handler = CodeCaptureHandler(store, process_script="process.sh")

    with caplog.at_level(logging.ERROR):
        ack = run_hook(_event("1:2", "code"), handler, CaptureMode.SUPPRESSED)

    assert ack.to_wire() == {}
    assert "스냅샷" in caplog.text
    assert all(record.levelno == logging.ERROR for record in caplog.records)
    assert not any(record.getMessage().startswith("Error:") for record in caplog.records)


@pytest.mark.parametrize("raw_text", ["", "not json", "[1, 2]", '"string"'])
def test_malformed_hook_input_is_soft(capture_config: CaptureConfig, raw_text: str) -> None:
    handler = build_handler("code", capture_config)

    assert run_hook_json(raw_text, handler, CaptureMode.SUPPRESSED) == {}
    assert not capture_config.code.directory.exists()


def test_build_handler_rejects_unknown_kind(capture_config: CaptureConfig) -> None:
    with pytest.raises(ConfigurationError, match="알 수 없는"):
        build_handler("tokens", capture_config)  # type: ignore[arg-type]


def test_lone_surrogate_in_response_is_replaced(capture_config: CaptureConfig) -> None:
    handler = build_handler("code", capture_config)
    raw_text = '{"tool_input": {"nodeId": "1:2"}, "tool_response": "code \\ud800 tail"}'

    assert run_hook_json(raw_text, handler, CaptureMode.PASSTHROUGH) == {}
    path = capture_config.code.directory / "figma-1-2.txt"
    assert path.read_bytes() == "code � tail".encode("utf-8")


def test_lone_surrogate_in_node_id_is_replaced(capture_config: CaptureConfig) -> None:
    handler = build_handler("metadata", capture_config)
    raw_text = '{"tool_input": {"nodeId": "1:\\udc80"}, "tool_response": "<frame width=\\"4\\" height=\\"3\\" />"}'

    assert run_hook_json(raw_text, handler, CaptureMode.PASSTHROUGH) == {}
    saved = json.loads((capture_config.metadata.directory / "1-_.json").read_text(encoding="utf-8"))
    assert saved == {"nodeId": "1:�", "width": 4, "height": 3}
