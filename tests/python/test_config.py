from pathlib import Path

import pytest
from pydantic import ValidationError

from figma_capture.config.models import CaptureConfig, StoreLayout


def test_default_layout_matches_hook_locations() -> None:
    config = CaptureConfig()

    assert config.code.directory == Path("/tmp/figma-captures")
    assert config.metadata.directory == Path("/tmp/figma-to-react/metadata")
    assert config.screenshots.suffix == ".png"
    assert config.marker_path == Path("/tmp/figma-skill-capture-active")


def test_rooted_at_places_everything_under_root(tmp_path: Path) -> None:
    config = CaptureConfig.rooted_at(tmp_path, preview_chars=10)

    for directory in (config.code.directory, config.metadata.directory, config.screenshots.directory):
        assert directory.parent == tmp_path
    assert config.marker_path == tmp_path / "capture-active"
    assert config.preview_chars == 10


def test_store_layout_validation() -> None:
    with pytest.raises(ValidationError, match="suffix"):
        StoreLayout(directory=Path("/tmp"), suffix="json")
    with pytest.raises(ValidationError, match="prefix"):
        StoreLayout(directory=Path("/tmp"), prefix="a/b", suffix=".json")
