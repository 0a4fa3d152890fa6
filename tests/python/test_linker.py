import json

import pytest

from figma_capture.components.linker import link_component
from figma_capture.config.models import CaptureConfig
from figma_capture.exceptions import ComponentLinkError
from figma_capture.storage.snapshot_store import SnapshotStore


def test_link_with_explicit_dimensions(capture_config: CaptureConfig) -> None:
    store = SnapshotStore(capture_config.metadata)

    path = link_component(store, "LoginScreen", "237:2571", width=390, height=844, component_path="src/Login.tsx")

    assert path.name == "LoginScreen.json"
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "nodeId": "237:2571",
        "width": 390,
        "height": 844,
        "name": "LoginScreen",
        "componentPath": "src/Login.tsx",
    }


def test_link_reads_existing_node_snapshot(capture_config: CaptureConfig) -> None:
    store = SnapshotStore(capture_config.metadata)
    store.write_json("237:2571", {"nodeId": "237:2571", "width": 393, "height": 852})

    path = link_component(store, "Home", "237:2571")

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert (saved["width"], saved["height"], saved["componentPath"]) == (393, 852, "")


def test_link_without_node_snapshot_fails(capture_config: CaptureConfig) -> None:
    store = SnapshotStore(capture_config.metadata)

    with pytest.raises(ComponentLinkError, match="No existing entry for nodeId 9:9"):
        link_component(store, "Missing", "9:9")


def test_link_requires_both_dimensions(capture_config: CaptureConfig) -> None:
    with pytest.raises(ComponentLinkError):
        link_component(SnapshotStore(capture_config.metadata), "Half", "1:2", width=10)


def test_link_rejects_non_positive_dimensions(capture_config: CaptureConfig) -> None:
    with pytest.raises(ComponentLinkError):
        link_component(SnapshotStore(capture_config.metadata), "Zero", "1:2", width=0, height=10)
