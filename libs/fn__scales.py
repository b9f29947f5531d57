"""
Pure scale functions for the variance heatmap.

Every scale is an immutable record holding its domain and range, and is
callable as a `value -> pixel` (or `value -> color`) mapping. Nothing here
needs a rendering surface.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from plotly.colors import diverging, sample_colorscale, unlabel_rgb

from libs.fn__libs import Dataset


MONTHS: Tuple[int, ...] = tuple(range(1, 13))

# Low variance -> blue extreme, high variance -> red extreme
DIVERGING_COLORS: Tuple[str, ...] = tuple(reversed(diverging.RdBu))


# -----------------------------
# Chart configuration
# -----------------------------
@dataclass(frozen=True)
class Margin:
    top: int = 50
    right: int = 50
    bottom: int = 100
    left: int = 100


@dataclass(frozen=True)
class ChartConfig:
    """
    Dimensions of one heatmap instance.

    `width`/`height` are the inner plotting area; the margins hold the axes.
    """

    width: int = 1200
    height: int = 400
    margin: Margin = field(default_factory=Margin)
    legend_width: int = 400
    legend_height: int = 30
    x_tick_count: int = 20
    legend_swatches: int = 4
    tooltip_offset: Tuple[int, int] = (10, -30)

    @property
    def outer_width(self) -> int:
        return self.width + self.margin.left + self.margin.right

    @property
    def outer_height(self) -> int:
        return self.height + self.margin.top + self.margin.bottom

    @property
    def band_height(self) -> float:
        return self.height / len(MONTHS)


def _rgb_to_hex(rgb_tuple):
    return "#{:02x}{:02x}{:02x}".format(*(int(round(c)) for c in rgb_tuple[:3]))


def _normalize(value: float, low: float, high: float) -> float:
    # Degenerate domains map to the middle of the range
    if high == low:
        return 0.5
    return (value - low) / (high - low)


# -----------------------------
# Scales
# -----------------------------
@dataclass(frozen=True)
class LinearScale:
    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value: float) -> float:
        r0, r1 = self.range
        return r0 + _normalize(value, *self.domain) * (r1 - r0)


@dataclass(frozen=True)
class TimeScale:
    domain: Tuple[datetime, datetime]
    range: Tuple[float, float]

    def __call__(self, value: datetime) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        span = (d1 - d0).total_seconds()
        t = 0.5 if span == 0 else (value - d0).total_seconds() / span
        return r0 + t * (r1 - r0)

    def ticks(self, count: int = 20) -> List[datetime]:
        """
        January 1 of every year that is a multiple of a nice step (1, 2 or 5 x 10^k).
        """
        d0, d1 = self.domain
        start = d0.year + (d0.month - 1) / 12
        stop = d1.year + (d1.month - 1) / 12
        step = max(1, _tick_increment(start, stop, count))

        first = int(math.ceil(start / step) * step)
        ticks = [datetime(year, 1, 1) for year in range(first, d1.year + 1, step)]
        ticks = [t for t in ticks if d0 <= t <= d1]
        return ticks or [d0]


@dataclass(frozen=True)
class BandScale:
    domain: Tuple[int, ...]
    range: Tuple[float, float]

    @property
    def bandwidth(self) -> float:
        if not self.domain:
            return 0.0
        return (self.range[1] - self.range[0]) / len(self.domain)

    def __call__(self, value: int) -> Optional[float]:
        try:
            index = self.domain.index(value)
        except ValueError:
            return None
        return self.range[0] + index * self.bandwidth

    def center(self, value: int) -> Optional[float]:
        start = self(value)
        return None if start is None else start + self.bandwidth / 2


@dataclass(frozen=True)
class SequentialColorScale:
    domain: Tuple[float, float]
    colors: Tuple[str, ...] = DIVERGING_COLORS

    def __call__(self, value: float) -> str:
        t = min(1.0, max(0.0, _normalize(value, *self.domain)))
        sampled = sample_colorscale(list(self.colors), [t])[0]
        return _rgb_to_hex(unlabel_rgb(sampled))


@dataclass(frozen=True)
class ChartScales:
    x: TimeScale
    y: BandScale
    color: SequentialColorScale
    legend: LinearScale


def _tick_increment(start: float, stop: float, count: int) -> int:
    if count <= 0 or stop <= start:
        return 1
    step = (stop - start) / count
    power = math.floor(math.log10(step))
    error = step / (10 ** power)
    if error >= math.sqrt(50):
        factor = 10
    elif error >= math.sqrt(10):
        factor = 5
    elif error >= math.sqrt(2):
        factor = 2
    else:
        factor = 1
    return int(round(factor * 10 ** power)) if power >= 0 else 1


def variance_extent(dataset: Dataset) -> Tuple[float, float]:
    if dataset.is_empty:
        return (0.0, 0.0)
    variances = [r.variance for r in dataset.records]
    return (min(variances), max(variances))


def date_extent(dataset: Dataset) -> Tuple[datetime, datetime]:
    if dataset.is_empty:
        epoch = datetime(1970, 1, 1)
        return (epoch, epoch)
    dates = [r.date for r in dataset.records]
    return (min(dates), max(dates))


def f301__compute_scales(dataset: Dataset, config: ChartConfig | None = None) -> ChartScales:
    """
    Derive the time, band, color and legend scales from the dataset.

    The month bands always run January..December from top to bottom, whatever
    order the records arrive in. Empty datasets get default domains.
    """
    config = config or ChartConfig()
    low, high = variance_extent(dataset)
    return ChartScales(
        x=TimeScale(domain=date_extent(dataset), range=(0.0, float(config.width))),
        y=BandScale(domain=MONTHS, range=(0.0, float(config.height))),
        color=SequentialColorScale(domain=(low, high)),
        legend=LinearScale(domain=(low, high), range=(0.0, float(config.legend_width))),
    )


def f302__legend_samples(low: float, high: float, count: int = 4) -> List[float]:
    """Start value of each of `count` equal-width legend swatches."""
    step = (high - low) / count
    return [low + i * step for i in range(count)]

