import streamlit as st
import streamlit.components.v1 as components

import libs.fn__libs as h
from libs.fn__libs_bilingual import label
from libs.fn__libs_charts import (
    f204__build_heatmap_scene,
    f206__heatmap_page_html,
    f207__error_placeholder_html,
    f208__plotly_variance_heatmap,
    f209__altair_annual_chart,
)
from libs.fn__page_header import (
    f001__create_page_header,
    f002__inject_inter_font,
    f003__enable_altair_inter_theme,
)
from libs.fn__scales import ChartConfig


f001__create_page_header()
f002__inject_inter_font()
f003__enable_altair_inter_theme()


def _load_dataset() -> h.Dataset:
    """Fetch once per browser session; the dataset lives as long as the page."""
    if "dataset" not in st.session_state:
        with st.spinner(label("loading")):
            st.session_state["dataset"] = h.f101__fetch_dataset(h.DATASET_URL)
    return st.session_state["dataset"]


def _sidebar_config() -> ChartConfig:
    defaults = ChartConfig()
    with st.sidebar:
        st.subheader(label("chart_settings"))
        width = st.number_input(label("chart_width"), min_value=400, max_value=2400, value=defaults.width, step=50)
        height = st.number_input(label("chart_height"), min_value=240, max_value=1200, value=defaults.height, step=12)
        x_ticks = st.slider(label("x_ticks"), min_value=5, max_value=40, value=defaults.x_tick_count)
    return ChartConfig(width=int(width), height=int(height), x_tick_count=int(x_ticks))


try:
    dataset = _load_dataset()
except h.DataLoadError as e:
    st.error(f"{label('load_error')} {e}")
    components.html(f207__error_placeholder_html(str(e)), height=160)
    st.stop()

config = _sidebar_config()
summary = h.f106__dataset_summary(dataset)

m1, m2, m3, m4 = st.columns(4)
m1.metric(label("records"), f"{summary['records']:,}")
if summary["records"]:
    m2.metric(label("years"), f"{summary['first_year']}–{summary['last_year']}")
    m4.metric(label("variance_range"), f"{summary['min_variance']:.2f} / {summary['max_variance']:.2f} ℃")
m3.metric(label("base_temperature"), f"{summary['base_temperature']:.2f} ℃")

if dataset.is_empty:
    st.warning(label("no_records"))

tab_svg, tab_plotly, tab_annual, tab_table = st.tabs(
    [label("heatmap"), label("interactive_heatmap"), label("annual_mean"), label("data_table")]
)

with tab_svg:
    scene = f204__build_heatmap_scene(dataset, config)
    components.html(
        f206__heatmap_page_html(scene, title=label("app_title", "EN")),
        height=config.outer_height + config.legend_height + 140,
        width=config.outer_width + 40,
        scrolling=True,
    )

with tab_plotly:
    st.plotly_chart(f208__plotly_variance_heatmap(dataset, config))

with tab_annual:
    st.altair_chart(f209__altair_annual_chart(dataset))

with tab_table:
    st.dataframe(h.f104__dataset_to_frame(dataset), hide_index=True)
    st.caption(h.DATASET_URL)
