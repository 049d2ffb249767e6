"""Shared fixtures for input mask tests."""

from pathlib import Path
from typing import Callable

import pytest

from inputmask.core.loader import TokenLoader
from inputmask.engine.mask_engine import MaskEngine
from inputmask.service.pipeline import MaskService


@pytest.fixture(autouse=True)
def reset_singletons():
    """Ensure each test starts without a cached loader or default engine."""
    TokenLoader.reset_instance()
    MaskService.reset()
    yield
    TokenLoader.reset_instance()
    MaskService.reset()


@pytest.fixture
def make_engine() -> Callable[[str], MaskEngine]:
    """Factory building engines over the default token alphabet."""

    def _make(template: str = "") -> MaskEngine:
        return MaskEngine(template)

    return _make


@pytest.fixture
def tokens_file(tmp_path: Path) -> Callable[[str], Path]:
    """Writes YAML content to a temporary tokens file and returns its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "tokens.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
