"""Pytest fixtures shared across the heatmap tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from libs.fn__libs import Dataset, MonthlyRecord


@pytest.fixture
def payload() -> dict:
    """Return a raw JSON payload shaped like the remote dataset."""

    return {
        "baseTemperature": 8.66,
        "monthlyVariance": [
            {"year": 1753, "month": 1, "variance": -1.366},
            {"year": 1753, "month": 2, "variance": -2.223},
            {"year": 1753, "month": 3, "variance": 0.211},
            {"year": 1754, "month": 1, "variance": -0.843},
            {"year": 1754, "month": 2, "variance": 1.25},
            {"year": 1754, "month": 3, "variance": 0.5},
        ],
    }


@pytest.fixture
def two_year_dataset() -> Dataset:
    """Return 24 records (1800-1801) with variance rising linearly from -2.3 to 2.3."""

    records = []
    for i in range(24):
        year = 1800 + i // 12
        month = i % 12 + 1
        records.append(MonthlyRecord(year=year, month=month, variance=round(-2.3 + i * 0.2, 4)))
    return Dataset(base_temperature=8.66, records=tuple(records))


@pytest.fixture
def single_record_dataset() -> Dataset:
    return Dataset(base_temperature=8.66, records=(MonthlyRecord(year=1753, month=1, variance=-6.98),))


@pytest.fixture
def empty_dataset() -> Dataset:
    return Dataset(base_temperature=8.66, records=())


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker (`unit` or `integration`)."""

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            invalid.append(item.nodeid)

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
