from __future__ import annotations

import calendar
import html
from dataclasses import dataclass
from typing import Tuple

import altair as alt
import plotly.graph_objects as go

from libs.fn__libs import Dataset, f104__dataset_to_frame, f105__annual_summary
from libs.fn__scales import (
    DIVERGING_COLORS,
    MONTHS,
    ChartConfig,
    ChartScales,
    f301__compute_scales,
    f302__legend_samples,
)
from libs.fn__tooltip import CELSIUS, HIDE_EVENT, SHOW_EVENT, TooltipContext, f404__tooltip_html


# -----------------------------
# Scene graph
# -----------------------------
@dataclass(frozen=True)
class SvgRect:
    x: float
    y: float
    width: float
    height: float
    fill: str
    css_class: str
    attrs: Tuple[Tuple[str, str], ...] = ()
    events: Tuple[str, ...] = ()
    tooltip: str = ""

    def attr(self, name: str) -> str | None:
        return dict(self.attrs).get(name)


@dataclass(frozen=True)
class AxisTick:
    position: float
    label: str


@dataclass(frozen=True)
class SvgAxis:
    axis_id: str
    orient: str  # "bottom" or "left"
    translate: Tuple[float, float]
    ticks: Tuple[AxisTick, ...]
    tick_size: int = 6

    @property
    def labels(self) -> list[str]:
        return [t.label for t in self.ticks]


@dataclass(frozen=True)
class ChartScene:
    config: ChartConfig
    cells: Tuple[SvgRect, ...]
    x_axis: SvgAxis
    y_axis: SvgAxis
    legend_cells: Tuple[SvgRect, ...]
    legend_axis: SvgAxis
    base_temperature: float


# -----------------------------
# Renderers
# -----------------------------
def f201__render_cells(dataset: Dataset, scales: ChartScales, config: ChartConfig) -> Tuple[SvgRect, ...]:
    """
    One rectangle per record, in record order.

    Width is one year-column (chart width / (records / 12)); height is one month band.
    """
    if dataset.is_empty:
        return ()

    ctx = TooltipContext(
        base_temperature=dataset.base_temperature,
        offset_x=config.tooltip_offset[0],
        offset_y=config.tooltip_offset[1],
    )
    cell_width = config.width / (len(dataset) / 12)
    cell_height = config.band_height

    cells = []
    for r in dataset.records:
        cells.append(
            SvgRect(
                x=scales.x(r.date),
                y=scales.y(r.month),
                width=cell_width,
                height=cell_height,
                fill=scales.color(r.variance),
                css_class="cell",
                attrs=(
                    ("data-year", str(r.year)),
                    ("data-month", str(r.month)),
                    ("data-temp", repr(r.temperature(dataset.base_temperature))),
                ),
                events=(SHOW_EVENT, HIDE_EVENT),
                tooltip=f404__tooltip_html(r, ctx),
            )
        )
    return tuple(cells)


def f202__render_axes(scales: ChartScales, config: ChartConfig) -> Tuple[SvgAxis, SvgAxis]:
    x_ticks = tuple(
        AxisTick(position=scales.x(d), label=f"{d.year:04d}")
        for d in scales.x.ticks(config.x_tick_count)
    )
    x_axis = SvgAxis(axis_id="x-axis", orient="bottom", translate=(0, config.height), ticks=x_ticks)

    # Month names are forced in calendar order at the band centers
    y_ticks = tuple(AxisTick(position=scales.y.center(m), label=calendar.month_name[m]) for m in MONTHS)
    y_axis = SvgAxis(axis_id="y-axis", orient="left", translate=(0, 0), ticks=y_ticks)
    return x_axis, y_axis


def f203__render_legend(scales: ChartScales, config: ChartConfig) -> Tuple[Tuple[SvgRect, ...], SvgAxis]:
    """
    Fixed-size legend strip of equal swatches spanning the variance domain.

    Swatch i covers [low + i*step, low + (i+1)*step]; the last one ends on the
    dataset maximum. Ticks sit at the swatch start values.
    """
    low, high = scales.legend.domain
    count = config.legend_swatches
    samples = f302__legend_samples(low, high, count)
    swatch_width = config.legend_width / count

    legend_cells = tuple(
        SvgRect(
            x=i * swatch_width,
            y=0,
            width=swatch_width,
            height=config.legend_height,
            fill=scales.color(value),
            css_class="legend-cell",
            attrs=(("data-value", f"{value:.1f}"),),
        )
        for i, value in enumerate(samples)
    )
    legend_axis = SvgAxis(
        axis_id="legend",
        orient="bottom",
        translate=(0, config.legend_height),
        ticks=tuple(AxisTick(position=scales.legend(v), label=f"{v:.1f}") for v in samples),
        tick_size=10,
    )
    return legend_cells, legend_axis


def f204__build_heatmap_scene(dataset: Dataset, config: ChartConfig | None = None) -> ChartScene:
    config = config or ChartConfig()
    scales = f301__compute_scales(dataset, config)
    cells = f201__render_cells(dataset, scales, config)
    x_axis, y_axis = f202__render_axes(scales, config)
    legend_cells, legend_axis = f203__render_legend(scales, config)
    return ChartScene(
        config=config,
        cells=cells,
        x_axis=x_axis,
        y_axis=y_axis,
        legend_cells=legend_cells,
        legend_axis=legend_axis,
        base_temperature=dataset.base_temperature,
    )


# -----------------------------
# SVG / HTML output
# -----------------------------
def _num(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _rect_svg(rect: SvgRect) -> str:
    extra = "".join(f' {name}="{html.escape(value)}"' for name, value in rect.attrs)
    if rect.tooltip:
        extra += f' data-tooltip="{html.escape(rect.tooltip)}"'
    return (
        f'<rect class="{rect.css_class}" x="{_num(rect.x)}" y="{_num(rect.y)}" '
        f'width="{_num(rect.width)}" height="{_num(rect.height)}" style="fill: {rect.fill}"{extra}></rect>'
    )


def _axis_svg(axis: SvgAxis) -> str:
    tx, ty = axis.translate
    parts = [f'<g id="{axis.axis_id}" class="axis" transform="translate({_num(tx)},{_num(ty)})">']
    for tick in axis.ticks:
        label = html.escape(tick.label)
        if axis.orient == "bottom":
            parts.append(
                f'<g class="tick" transform="translate({_num(tick.position)},0)">'
                f'<line y2="{axis.tick_size}"></line>'
                f'<text y="{axis.tick_size + 3}" dy="0.71em" text-anchor="middle">{label}</text></g>'
            )
        else:
            parts.append(
                f'<g class="tick" transform="translate(0,{_num(tick.position)})">'
                f'<line x2="-{axis.tick_size}"></line>'
                f'<text x="-{axis.tick_size + 3}" dy="0.32em" text-anchor="end">{label}</text></g>'
            )
    parts.append("</g>")
    return "".join(parts)


def f205__scene_to_svg(scene: ChartScene) -> Tuple[str, str]:
    """Return (heatmap_svg, legend_svg)."""
    cfg = scene.config
    heatmap = "".join(
        [
            f'<svg width="{cfg.outer_width}" height="{cfg.outer_height}">',
            f'<g transform="translate({cfg.margin.left},{cfg.margin.top})">',
            "".join(_rect_svg(c) for c in scene.cells),
            _axis_svg(scene.x_axis),
            _axis_svg(scene.y_axis),
            "</g></svg>",
        ]
    )
    legend = "".join(
        [
            f'<svg width="{cfg.legend_width}" height="{cfg.legend_height + 30}" style="overflow: visible">',
            "".join(_rect_svg(c) for c in scene.legend_cells),
            _axis_svg(scene.legend_axis),
            "</svg>",
        ]
    )
    return heatmap, legend


_PAGE_STYLE = """
  body { font-family: Inter, Helvetica, Arial, sans-serif; margin: 0; }
  h2 { font-family: 'Lora', Georgia, serif; font-weight: 400; margin: 8px 0 0 100px; }
  .subtitle { margin: 2px 0 0 100px; color: rgba(0,0,0,0.65); font-size: 13px; }
  #legend-container { margin-left: 100px; }
  .axis line { stroke: #222; }
  .axis text { font-size: 11px; fill: #222; }
  .cell:hover { stroke: #000; stroke-width: 1; }
  #tooltip {
    position: absolute; pointer-events: none; padding: 6px 8px;
    background: rgba(255,255,255,0.95); border: 1px solid #999; border-radius: 4px;
    font-size: 12px; line-height: 1.35;
  }
  #tooltip.hidden { display: none; }
"""

_TOOLTIP_SCRIPT = """
(function() {
  const tooltip = document.getElementById("tooltip");
  document.querySelectorAll("#heatmap-container .cell").forEach(function(cell) {
    cell.addEventListener("mouseover", function(event) {
      tooltip.style.left = (event.pageX + %(dx)s) + "px";
      tooltip.style.top = (event.pageY + %(dy)s) + "px";
      tooltip.setAttribute("data-year", cell.getAttribute("data-year"));
      tooltip.innerHTML = cell.getAttribute("data-tooltip");
      tooltip.classList.remove("hidden");
    });
    cell.addEventListener("mouseout", function() {
      tooltip.classList.add("hidden");
    });
  });
})();
"""


def f206__heatmap_page_html(scene: ChartScene, *, title: str = "Monthly Global Land-Surface Temperature") -> str:
    """
    Standalone page: heatmap and legend mount points plus a hidden tooltip overlay.
    """
    heatmap_svg, legend_svg = f205__scene_to_svg(scene)
    dx, dy = scene.config.tooltip_offset
    script = _TOOLTIP_SCRIPT % {"dx": dx, "dy": dy}
    subtitle = f"Base temperature {scene.base_temperature} {CELSIUS}"
    return f"""<!doctype html>
<meta charset="utf-8" />
<title>{html.escape(title)}</title>
<style>{_PAGE_STYLE}</style>
<h2 id="title">{html.escape(title)}</h2>
<div class="subtitle" id="description">{html.escape(subtitle)}</div>
<div id="heatmap-container">{heatmap_svg}</div>
<div id="legend-container">{legend_svg}</div>
<div id="tooltip" class="hidden"></div>
<script>{script}</script>
"""


def f207__error_placeholder_html(message: str) -> str:
    return f"""<!doctype html>
<meta charset="utf-8" />
<style>{_PAGE_STYLE}
  .load-error {{ margin: 24px 100px; padding: 12px 16px; border: 1px solid #b2182b;
                 background: #fddbc7; color: #67001f; border-radius: 4px; }}
</style>
<div id="heatmap-container"><div class="load-error">Temperature data could not be loaded.<br>{html.escape(message)}</div></div>
<div id="legend-container"></div>
<div id="tooltip" class="hidden"></div>
"""


# -----------------------------
# Interactive views
# -----------------------------
def f208__plotly_variance_heatmap(dataset: Dataset, config: ChartConfig | None = None) -> go.Figure:
    """
    The same year x month grid as a plotly heatmap (January on top).
    """
    config = config or ChartConfig()
    margin = dict(l=config.margin.left, r=config.margin.right, t=config.margin.top, b=config.margin.bottom)
    df = f104__dataset_to_frame(dataset)
    if df.empty:
        fig = go.Figure()
        fig.update_layout(height=config.outer_height, margin=margin)
        return fig

    variance = df.pivot_table(index="month", columns="year", values="variance", aggfunc="mean").reindex(
        index=list(MONTHS)
    )
    temperature = df.pivot_table(index="month", columns="year", values="temperature", aggfunc="mean").reindex(
        index=list(MONTHS)
    )
    n = len(DIVERGING_COLORS)
    colorscale = [[i / (n - 1), c] for i, c in enumerate(DIVERGING_COLORS)]

    fig = go.Figure(
        data=go.Heatmap(
            z=variance.values,
            x=variance.columns.tolist(),
            y=[calendar.month_name[m] for m in variance.index],
            customdata=temperature.values,
            colorscale=colorscale,
            zmin=float(df["variance"].min()),
            zmax=float(df["variance"].max()),
            colorbar=dict(title="Δ °C", len=0.7, thickness=10),
            hovertemplate="%{x} - %{y}<br>Temperature: %{customdata:.2f} ℃<br>Variance: %{z:.2f} ℃<extra></extra>",
        )
    )
    fig.update_layout(height=config.outer_height, width=config.outer_width, margin=margin)
    fig.update_xaxes(title="Year", nticks=config.x_tick_count)
    fig.update_yaxes(title="Month", autorange="reversed", title_standoff=5, automargin=True)
    return fig


def f209__altair_annual_chart(dataset: Dataset, *, height: int = 260) -> alt.Chart:
    annual = f105__annual_summary(dataset)
    return (
        alt.Chart(annual)
        .mark_line(point=False, strokeWidth=1.5, color="#b2182b")
        .encode(
            x=alt.X("year:Q", title="Year", axis=alt.Axis(format="d")),
            y=alt.Y("temperature:Q", title="Annual mean (°C)", scale=alt.Scale(zero=False)),
            tooltip=[
                alt.Tooltip("year:Q", title="Year", format="d"),
                alt.Tooltip("temperature:Q", title="Temperature (°C)", format=".2f"),
                alt.Tooltip("variance:Q", title="Variance (°C)", format=".2f"),
                alt.Tooltip("months:Q", title="Months"),
            ],
        )
        .properties(height=height)
    )
