"""Shared pytest fixtures."""

from datetime import timezone
from pathlib import Path

import pytest

from localeapp_sync.models import OutputFormat, TaskConfig
from localeapp_sync.utils import console
from tests.mocks import MockLocaleappCLI


@pytest.fixture(autouse=True)
def quiet_console():
    console.set_verbose(False)
    yield
    console.set_verbose(False)


@pytest.fixture
def mock_cli() -> MockLocaleappCLI:
    return MockLocaleappCLI()


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def make_config(work_dir: Path):
    """Factory for TaskConfig objects rooted at work_dir."""

    def _make(output_format=OutputFormat.JSON, key="abc123", dest="i18n") -> TaskConfig:
        return TaskConfig(
            name="test",
            key=key,
            output_format=output_format,
            dest=work_dir / dest,
            work_dir=work_dir,
        )

    return _make


@pytest.fixture
def utc():
    return timezone.utc
