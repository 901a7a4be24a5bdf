"""
Pytest configuration and shared fixtures for versionkit tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("versionkit.yaml", {"policy": {...}})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create


@pytest.fixture
def sample_plugin_descriptor() -> dict[str, Any]:
    """Provide a plugin.yml mapping as a host application would ship it."""
    return {
        "name": "FakePlugin",
        "version": "1.0.0",
        "main": "org.example.fake.FakePlugin",
    }


class CaptureLogger:
    """Logger that records every call instead of printing."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def log(self, message: str) -> None:
        self.records.append(("log", message))

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    def verbose(self, prefix: str, message: str) -> None:
        self.records.append(("verbose", f"[{prefix}] {message}"))

    def debug(self, prefix: str, message: str) -> None:
        self.records.append(("debug", f"[{prefix}] {message}"))

    def messages(self, level: str) -> list[str]:
        return [msg for lvl, msg in self.records if lvl == level]


@pytest.fixture
def capture_logger() -> CaptureLogger:
    """Provide a logger that records messages for assertions."""
    return CaptureLogger()
