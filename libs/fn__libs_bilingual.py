# Bilingual UI labels: EN / IT
# Use label(key) or label(key, lang) for current or explicit language.
# Axis month names and tooltip text stay in English in both languages.

LABELS = {
    "EN": {
        "app_title": "Global Temperature Heatmap",
        "app_caption": "Monthly global land-surface temperature, as variance from the base temperature.",
        "chart_settings": "Chart settings",
        "chart_width": "Chart width (px)",
        "chart_height": "Chart height (px)",
        "x_ticks": "Year ticks",
        "heatmap": "Heatmap",
        "interactive_heatmap": "Interactive heatmap",
        "annual_mean": "Annual mean",
        "data_table": "Data table",
        "loading": "Loading temperature data…",
        "load_error": "Temperature data could not be loaded.",
        "records": "Records",
        "years": "Years",
        "base_temperature": "Base temperature",
        "variance_range": "Variance range",
        "no_records": "The dataset contains no monthly records.",
    },
    "IT": {
        "app_title": "Mappa di calore della temperatura globale",
        "app_caption": "Temperatura globale mensile della superficie terrestre, come scarto dalla temperatura di base.",
        "chart_settings": "Impostazioni grafico",
        "chart_width": "Larghezza grafico (px)",
        "chart_height": "Altezza grafico (px)",
        "x_ticks": "Etichette anni",
        "heatmap": "Mappa di calore",
        "interactive_heatmap": "Mappa interattiva",
        "annual_mean": "Media annuale",
        "data_table": "Tabella dati",
        "loading": "Caricamento dati di temperatura…",
        "load_error": "Impossibile caricare i dati di temperatura.",
        "records": "Record",
        "years": "Anni",
        "base_temperature": "Temperatura di base",
        "variance_range": "Intervallo di scarto",
        "no_records": "Il dataset non contiene record mensili.",
    },
}


def label(key: str, lang: str | None = None) -> str:
    """Return the label for `key` in the current or given language (default: EN)."""
    if lang is None:
        import streamlit as st
        lang = st.session_state.get("ui_lang", "EN")
    return LABELS.get(lang, LABELS["EN"]).get(key, key)
