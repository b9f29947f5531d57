"""
Tooltip interaction for heatmap cells.

Each cell is a two-state machine: Idle -> Hovered on `mouseover`,
Hovered -> Idle on `mouseout`. The tooltip itself is an immutable state
record; handlers return the next state instead of mutating a shared element.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Tuple

from libs.fn__libs import MonthlyRecord


SHOW_EVENT = "mouseover"
HIDE_EVENT = "mouseout"
CELSIUS = "℃"


@dataclass(frozen=True)
class TooltipContext:
    """What the handlers need from the render pass."""

    base_temperature: float
    offset_x: float = 10
    offset_y: float = -30


@dataclass(frozen=True)
class TooltipState:
    visible: bool = False
    left: float = 0.0
    top: float = 0.0
    html: str = ""
    data_year: Optional[int] = None


def f405__format_celsius(value: float) -> str:
    """Two decimals, rounding halves away from zero, with the Celsius sign."""
    rounded = Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded} {CELSIUS}"


def f404__tooltip_html(record: MonthlyRecord, ctx: TooltipContext) -> str:
    title = f"{record.year} - {calendar.month_name[record.month]}"
    return (
        f"{title}"
        f"<br>Temperature: {f405__format_celsius(record.temperature(ctx.base_temperature))}"
        f"<br>Variance: {f405__format_celsius(record.variance)}"
    )


def f401__show_tooltip(
    state: TooltipState,
    record: MonthlyRecord,
    pointer: Tuple[float, float],
    ctx: TooltipContext,
) -> TooltipState:
    page_x, page_y = pointer
    return replace(
        state,
        visible=True,
        left=page_x + ctx.offset_x,
        top=page_y + ctx.offset_y,
        html=f404__tooltip_html(record, ctx),
        data_year=record.year,
    )


def f402__hide_tooltip(state: TooltipState) -> TooltipState:
    return replace(state, visible=False)


def f403__handle_pointer_event(
    state: TooltipState,
    event: str,
    record: MonthlyRecord,
    pointer: Tuple[float, float],
    ctx: TooltipContext,
) -> TooltipState:
    if event == SHOW_EVENT:
        return f401__show_tooltip(state, record, pointer, ctx)
    if event == HIDE_EVENT:
        return f402__hide_tooltip(state)
    return state
