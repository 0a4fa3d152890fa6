from pathlib import Path

from figma_capture.capture.gate import ActivationGate, CaptureMode, informational_ack, resolve_capture_mode


def test_mode_follows_marker_existence(tmp_path: Path) -> None:
    marker = tmp_path / "capture-active"
    assert resolve_capture_mode(marker) is CaptureMode.PASSTHROUGH

    marker.write_text("", encoding="utf-8")
    assert resolve_capture_mode(marker) is CaptureMode.SUPPRESSED

    marker.unlink()
    assert resolve_capture_mode(marker) is CaptureMode.PASSTHROUGH


def test_passthrough_is_empty_ack(tmp_path: Path) -> None:
    ack = ActivationGate(CaptureMode.PASSTHROUGH).acknowledge(tmp_path / "figma-1-2.txt", 10)
    assert ack.to_wire() == {}


def test_suppressed_ack_references_snapshot_path(tmp_path: Path) -> None:
    path = tmp_path / "figma-1-2.txt"
    wire = ActivationGate(CaptureMode.SUPPRESSED, process_script="process.sh").acknowledge(path, 42).to_wire()

    assert wire["suppressOutput"] is True
    assert wire["hookSpecificOutput"]["hookEventName"] == "PostToolUse"
    context = wire["hookSpecificOutput"]["additionalContext"]
    assert f"captured to {path} (42 bytes)" in context
    assert f"process.sh {path} " in context


def test_informational_ack_does_not_suppress() -> None:
    wire = informational_ack("Screenshot saved to /tmp/x.png").to_wire()

    assert "suppressOutput" not in wire
    assert wire["hookSpecificOutput"]["additionalContext"] == "Screenshot saved to /tmp/x.png"
