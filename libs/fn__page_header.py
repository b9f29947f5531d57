# IMPORT LIBRARIES
import altair as alt
import streamlit as st

from .fn__libs_bilingual import label


def f001__create_page_header():

    ##### PAGE CONFIG
    st.set_page_config(page_title="Global Temperature Heatmap", page_icon="🌡️", layout="wide")

    # Inject fonts and styles
    st.markdown("""
        <link href="https://fonts.googleapis.com/css2?family=Inter:wght@300;400;600&family=Lora:wght@400;600;700&display=swap" rel="stylesheet">
        <style>
            .block-container {
                padding-top: 0.5rem;
                padding-bottom: 0.5rem;
                padding-left: 2rem;
                padding-right: 2rem;
            }
            h2.custom-title {
                font-family: 'Lora', 'Source Serif Pro', 'Source Serif 4', serif;
                font-weight: 400;
                color: #67001f;
                margin-bottom: -20px;
            }
            .custom-caption {
                font-size: 0.8rem;
                color: gray;
            }
            /* Compact App Language radio: less space below label */
            .stRadio label {
                margin-bottom: 0.15rem !important;
            }
            .stRadio [role="radiogroup"] {
                margin-top: 0 !important;
            }
        </style>
    """, unsafe_allow_html=True)

    ##### TOP CONTAINER
    title_col, lang_col = st.columns([200, 40])

    with lang_col:
        st.session_state.setdefault("ui_lang", "EN")
        lang_choice = st.radio(
            "App Language",
            options=["🇬🇧 ENG", "🇮🇹 ITA"],
            index=1 if st.session_state["ui_lang"] == "IT" else 0,
            key="header_lang_radio",
            horizontal=True,
            label_visibility="visible",
        )
        st.session_state["ui_lang"] = "IT" if "ITA" in lang_choice else "EN"

    with title_col:
        st.write('')
        st.markdown(
            f"""
            <div style="margin: -18px 0px;">
                <h2 class="custom-title">{label("app_title")}</h2>
            </div>
            """,
            unsafe_allow_html=True
        )
        st.markdown(f'<p class="custom-caption">{label("app_caption")}</p>', unsafe_allow_html=True)


def f002__inject_inter_font() -> None:
    """
    Apply Inter as the default font across Streamlit UI.
    """
    st.markdown(
        """
<style>
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap');

html, body, .stApp {
  font-family: 'Inter', system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif;
}

h1, h2, h3, h4,
.stMarkdown h1, .stMarkdown h2, .stMarkdown h3, .stMarkdown h4 {
  font-family: 'Lora', 'Source Serif Pro', 'Source Serif 4', serif;
}

code, pre, kbd, samp {
  font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "Liberation Mono", monospace !important;
}

[data-testid="stSidebar"] {
  font-size: 0.8rem !important;
}
</style>
        """,
        unsafe_allow_html=True,
    )


def f003__enable_altair_inter_theme() -> None:
    """
    Make Altair use Inter so charts match the app typography.
    """

    @alt.theme.register("inter", enable=True)
    def _theme():
        return {
            "config": {
                "title": {"font": "Inter", "fontSize": 14},
                "axis": {
                    "labelFont": "Inter",
                    "titleFont": "Inter",
                    "labelFontSize": 12,
                    "titleFontSize": 12,
                },
            }
        }

