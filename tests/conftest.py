from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a seeded demo project rooted under the pytest tmp_path."""
    return ProjectBuilder(tmp_path).seed()
