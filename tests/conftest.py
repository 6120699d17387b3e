from __future__ import annotations

import pytest

from .data import (
    ALICE,
    CHRISTMAS,
    DAY_AFTER_THANKSGIVING,
    DAY_BEFORE_CHRISTMAS,
    INDEPENDENCE_DAY,
    JANE,
    JOHN,
    LABOR_DAY,
    MEMORIAL_DAY,
    NEW_YEARS,
    THANKSGIVING,
    WANDA,
    Birthday,
    Holiday,
)


@pytest.fixture
def holidays() -> list[Holiday]:
    return [
        NEW_YEARS, MEMORIAL_DAY, INDEPENDENCE_DAY, LABOR_DAY, THANKSGIVING,
        DAY_AFTER_THANKSGIVING, DAY_BEFORE_CHRISTMAS, CHRISTMAS,
    ]


@pytest.fixture
def birthdays() -> list[Birthday]:
    return [JOHN, ALICE, JANE, WANDA]
