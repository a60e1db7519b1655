from datetime import datetime

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 2, 9, 30)
