from pathlib import Path

import pytest

from src.core.errors import TextDetectionError
from src.test.helpers import PERMITS_JSON, FakeTextDetector


@pytest.fixture
def permits_path() -> Path:
    return PERMITS_JSON


@pytest.fixture
def fake_detector() -> FakeTextDetector:
    return FakeTextDetector()


@pytest.fixture
def failing_detector() -> FakeTextDetector:
    return FakeTextDetector(error=TextDetectionError("Rekognition failed"))
