"""Unit tests for the pure time, band, color and legend scales."""

from __future__ import annotations

from datetime import datetime

import pytest

from libs.fn__libs import Dataset, MonthlyRecord
from libs.fn__scales import (
    MONTHS,
    BandScale,
    ChartConfig,
    LinearScale,
    Margin,
    SequentialColorScale,
    TimeScale,
    f301__compute_scales,
    f302__legend_samples,
)

pytestmark = pytest.mark.unit

BLUE_EXTREME = "#053061"
RED_EXTREME = "#67001f"
NEUTRAL_MID = "#f7f7f7"


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    return tuple(int(color[i:i + 2], 16) for i in (1, 3, 5))


def test_chart_config_defaults_and_outer_size() -> None:
    """Defaults match the fixed chart; outer size adds the margins."""

    config = ChartConfig()

    assert (config.width, config.height) == (1200, 400)
    assert config.margin == Margin(top=50, right=50, bottom=100, left=100)
    assert (config.outer_width, config.outer_height) == (1350, 550)
    assert config.band_height == pytest.approx(400 / 12)


def test_linear_scale_maps_domain_to_range() -> None:
    scale = LinearScale(domain=(-2.0, 2.0), range=(0.0, 400.0))

    assert scale(-2.0) == 0.0
    assert scale(0.0) == 200.0
    assert scale(2.0) == 400.0


def test_linear_scale_degenerate_domain_maps_to_range_middle() -> None:
    assert LinearScale(domain=(1.5, 1.5), range=(0.0, 400.0))(1.5) == 200.0


def test_time_scale_maps_extent_to_width() -> None:
    scale = TimeScale(domain=(datetime(1753, 1, 1), datetime(2015, 9, 1)), range=(0.0, 1200.0))

    assert scale(datetime(1753, 1, 1)) == 0.0
    assert scale(datetime(2015, 9, 1)) == pytest.approx(1200.0)
    assert 0 < scale(datetime(1900, 6, 1)) < 1200


def test_time_scale_ticks_use_nice_year_steps() -> None:
    """About 20 ticks over 1753-2015 gives one tick per decade."""

    scale = TimeScale(domain=(datetime(1753, 1, 1), datetime(2015, 12, 1)), range=(0.0, 1200.0))

    ticks = scale.ticks(20)

    assert [t.year for t in ticks] == list(range(1760, 2011, 10))
    assert all(t.month == 1 and t.day == 1 for t in ticks)


def test_time_scale_ticks_short_span_uses_yearly_step() -> None:
    scale = TimeScale(domain=(datetime(1800, 1, 1), datetime(1804, 12, 1)), range=(0.0, 100.0))

    assert [t.year for t in scale.ticks(20)] == [1800, 1801, 1802, 1803, 1804]


def test_time_scale_degenerate_domain() -> None:
    d = datetime(1753, 1, 1)
    scale = TimeScale(domain=(d, d), range=(0.0, 1200.0))

    assert scale(d) == 600.0
    assert scale.ticks(20) == [d]


def test_band_scale_calendar_bands() -> None:
    scale = BandScale(domain=MONTHS, range=(0.0, 400.0))

    assert scale.bandwidth == pytest.approx(400 / 12)
    assert scale(1) == 0.0
    assert scale(12) == pytest.approx(11 * 400 / 12)
    assert scale.center(1) == pytest.approx(400 / 24)
    assert scale(13) is None
    assert scale.center(13) is None


def test_color_scale_extremes_and_midpoint() -> None:
    """Minimum maps to the blue extreme, maximum to red, domain midpoint to neutral."""

    scale = SequentialColorScale(domain=(-2.0, 2.0))

    assert scale(-2.0) == BLUE_EXTREME
    assert scale(2.0) == RED_EXTREME
    assert scale(0.0) == NEUTRAL_MID


def test_color_scale_clamps_outside_domain() -> None:
    scale = SequentialColorScale(domain=(-2.0, 2.0))

    assert scale(-10.0) == BLUE_EXTREME
    assert scale(10.0) == RED_EXTREME


def test_color_scale_below_midpoint_is_blue_above_is_red() -> None:
    """Each side of the domain midpoint stays on its own hue."""

    scale = SequentialColorScale(domain=(-2.0, 2.0))

    for v in (-1.9, -1.0, -0.3):
        r, _, b = _hex_to_rgb(scale(v))
        assert b > r
    for v in (0.3, 1.0, 1.9):
        r, _, b = _hex_to_rgb(scale(v))
        assert r > b


def test_color_scale_is_deterministic() -> None:
    scale = SequentialColorScale(domain=(-2.0, 2.0))

    assert [scale(v) for v in (-1.2, 0.4, 1.7)] == [scale(v) for v in (-1.2, 0.4, 1.7)]
    assert SequentialColorScale(domain=(-2.0, 2.0))(0.4) == scale(0.4)


def test_color_scale_degenerate_domain_is_midpoint() -> None:
    assert SequentialColorScale(domain=(0.5, 0.5))(0.5) == NEUTRAL_MID


def test_compute_scales_domains(two_year_dataset: Dataset) -> None:
    scales = f301__compute_scales(two_year_dataset, ChartConfig())

    assert scales.x.domain == (datetime(1800, 1, 1), datetime(1801, 12, 1))
    assert scales.x.range == (0.0, 1200.0)
    assert scales.y.domain == MONTHS
    assert scales.y.range == (0.0, 400.0)
    assert scales.color.domain == pytest.approx((-2.3, 2.3))
    assert scales.legend.domain == pytest.approx((-2.3, 2.3))
    assert scales.legend.range == (0.0, 400.0)


def test_compute_scales_month_bands_ignore_encounter_order() -> None:
    """December seen first still sits in the last band."""

    dataset = Dataset(
        base_temperature=8.66,
        records=(
            MonthlyRecord(year=1800, month=12, variance=0.1),
            MonthlyRecord(year=1800, month=1, variance=-0.1),
        ),
    )

    scales = f301__compute_scales(dataset)

    assert scales.y(1) == 0.0
    assert scales.y(12) == pytest.approx(11 * 400 / 12)


def test_compute_scales_empty_dataset_does_not_raise(empty_dataset: Dataset) -> None:
    scales = f301__compute_scales(empty_dataset)

    assert scales.color.domain == (0.0, 0.0)
    assert scales.color(0.0) == NEUTRAL_MID
    assert scales.legend(0.0) == 200.0
    assert scales.x.ticks(20)


def test_legend_samples_always_four_even_steps() -> None:
    """Index-based steps never produce a fifth sample from float drift."""

    samples = f302__legend_samples(-6.976, 5.228, 4)

    assert len(samples) == 4
    assert samples[0] == -6.976
    step = (5.228 - -6.976) / 4
    assert samples[3] + step == pytest.approx(5.228)
    assert all(b - a == pytest.approx(step) for a, b in zip(samples, samples[1:]))


def test_legend_samples_degenerate_range() -> None:
    assert f302__legend_samples(0.0, 0.0, 4) == [0.0, 0.0, 0.0, 0.0]
