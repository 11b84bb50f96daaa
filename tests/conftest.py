from __future__ import annotations

from datetime import datetime

import pytest

from worktime.container import build_container


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 2, 9, 0, 0)


@pytest.fixture
def container(tmp_path):
    return build_container(data_dir=tmp_path / "data")
