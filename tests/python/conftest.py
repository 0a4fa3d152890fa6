from __future__ import annotations

import pytest

from figma_capture.config.models import CaptureConfig


@pytest.fixture
def capture_config(tmp_path) -> CaptureConfig:
    return CaptureConfig.rooted_at(tmp_path)
