import os

import streamlit as st
from dotenv import load_dotenv

from bakecalc.config import configure_logging, load_settings
from bakecalc.converter import BakingConverter
from bakecalc.errors import ConversionError
from bakecalc.i18n import available_locales, translate
from bakecalc.presets import GRAM_STEP, MAX_GRAM_AMOUNT, MIN_GRAM_AMOUNT, QUICK_AMOUNTS
from bakecalc.utils import format_amount_input, parse_amount

# Load environment variables from a .env file for local development
load_dotenv()

st.set_page_config(page_title="Bakeutenvekt", page_icon="⚖️", layout="centered")

# ------------------------------------------------------------------
# UTILITY AND HELPER FUNCTIONS
# ------------------------------------------------------------------

def _environment():
    """Process environment, topped up with BAKECALC_* keys from Streamlit secrets."""
    env = dict(os.environ)
    try:
        for key, value in st.secrets.items():
            if key.startswith("BAKECALC_") and key not in env:
                env[key] = str(value)
    except Exception:
        pass
    return env


settings = load_settings(_environment())
configure_logging(settings.log_level)


def t(key, default):
    return translate(key, default, st.session_state.get("locale", settings.locale))


def _slider_value(grams):
    return max(MIN_GRAM_AMOUNT, min(MAX_GRAM_AMOUNT, float(grams)))


def _sync_widgets(converter):
    """Keep the amount widgets showing what the converter holds."""
    st.session_state.gram_slider = _slider_value(converter.gram_amount)
    st.session_state.gram_text = format_amount_input(converter.gram_amount)


def _new_converter(locale, gram_amount, ingredient_name=None):
    converter = BakingConverter(gram_amount=gram_amount, locale=locale)
    if ingredient_name:
        converter.select_ingredient_by_name(ingredient_name)
    converter.subscribe(_sync_widgets)
    return converter


def _get_converter():
    if "converter" not in st.session_state:
        st.session_state.locale = settings.locale
        st.session_state.converter = _new_converter(settings.locale, settings.default_grams)
        _sync_widgets(st.session_state.converter)
    return st.session_state.converter


def on_locale_change():
    old = st.session_state.converter
    st.session_state.converter = _new_converter(
        st.session_state.locale, old.gram_amount, old.selected_ingredient.name
    )


def on_ingredient_change():
    st.session_state.converter.select_ingredient(st.session_state.ingredient_choice)


def on_slider_change():
    st.session_state.amount_error = None
    st.session_state.converter.update_gram_amount(st.session_state.gram_slider)


def on_text_change():
    try:
        grams = parse_amount(st.session_state.gram_text, st.session_state.locale)
    except ConversionError as e:
        st.session_state.amount_error = str(e)
        return
    st.session_state.amount_error = None
    st.session_state.converter.update_gram_amount(grams)


def on_quick_amount(amount):
    st.session_state.amount_error = None
    st.session_state.converter.update_gram_amount(amount)


converter = _get_converter()
state = converter.snapshot()

st.title(t("app.title", "Bakeutenvekt") + " ⚖️")
st.caption(t("app.subtitle", "Convert grams to deciliters for baking"))

# ------------------------------------------------------------------
# SIDEBAR - Language
# ------------------------------------------------------------------
with st.sidebar:
    st.selectbox(
        t("sidebar.language", "Language"),
        available_locales(),
        key="locale",
        on_change=on_locale_change,
    )

# ------------------------------------------------------------------
# MAIN - Ingredient, amount, result
# ------------------------------------------------------------------
locale = st.session_state.locale

st.subheader(t("section.ingredient", "Select Ingredient"))
st.session_state.ingredient_choice = converter.selected_ingredient
st.selectbox(
    t("section.ingredient", "Select Ingredient"),
    converter.ingredients,
    format_func=lambda ingredient: ingredient.localized_name(locale),
    key="ingredient_choice",
    on_change=on_ingredient_change,
    label_visibility="collapsed",
)

colL, colR = st.columns([3, 1])
with colL:
    st.subheader(t("section.amount", "Amount in Grams"))
with colR:
    st.metric(t("section.amount", "Amount in Grams"), state["grams_text"], label_visibility="collapsed")

st.slider(
    t("section.amount", "Amount in Grams"),
    min_value=MIN_GRAM_AMOUNT,
    max_value=MAX_GRAM_AMOUNT,
    step=GRAM_STEP,
    key="gram_slider",
    on_change=on_slider_change,
    label_visibility="collapsed",
)

st.caption(t("section.quick", "Quick amounts"))
for col, amount in zip(st.columns(len(QUICK_AMOUNTS)), QUICK_AMOUNTS):
    with col:
        st.button(
            f"{amount}g",
            key=f"quick_{amount}",
            on_click=on_quick_amount,
            args=(amount,),
            type="primary" if state["gram_amount"] == float(amount) else "secondary",
            width="stretch",
        )

st.text_input(t("input.amount", "Type grams"), key="gram_text", on_change=on_text_change)
if st.session_state.get("amount_error"):
    st.error(st.session_state.amount_error)

st.subheader(t("section.result", "Result"))
st.metric(converter.selected_ingredient.localized_name(locale), state["result_text"])
