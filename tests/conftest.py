"""Test configuration and shared fixtures."""

import pathlib

import pandas as pd
import pytest

FIXTURES = pathlib.Path(__file__).parent / "fixtures"


@pytest.fixture
def profile_json_path() -> pathlib.Path:
    """Path to a sample JSON document with nested objects and arrays."""
    return FIXTURES / "profile.json"


@pytest.fixture
def profile_json_text(profile_json_path: pathlib.Path) -> str:
    """Sample JSON document text."""
    return profile_json_path.read_text(encoding="utf-8")


@pytest.fixture
def sample_dataframe() -> pd.DataFrame:
    """Sample DataFrame with JSON content for batch processing tests."""
    return pd.read_csv(FIXTURES / "sample_data.csv")
