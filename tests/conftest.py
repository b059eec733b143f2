"""Shared fixtures for the cssvars test suite."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture()
def color_classifier():
    """Classifier that reports hex values as <color> and everything else as *."""

    def classify(key: str, value: str) -> str:
        return "<color>" if value.startswith("#") else "*"

    return classify
