"""SkyFrames — Streamlit form for equinox and galactic coordinate conversion."""

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from skyframes import config  # noqa: E402
from skyframes.angles import ARCSEC_PER_RADIAN  # noqa: E402
from skyframes.compute import ConversionError, round_trip_error, run  # noqa: E402
from skyframes.epochs import current_epoch  # noqa: E402
from skyframes.i18n import frame_label, t  # noqa: E402
from skyframes.logging_config import configure_logging  # noqa: E402
from skyframes.models import ConversionRequest, CoordinateInput, InputKind  # noqa: E402
from skyframes.renderers.plotly_2d import render_plotly_chart  # noqa: E402

configure_logging(config.log_level())

# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="✦",
    layout="wide",
)

# Row order and labels of the input form.
_ROWS: tuple[tuple[InputKind, str], ...] = (
    (InputKind.J2000, "frame_j2000"),
    (InputKind.B1950, "frame_b1950"),
    (InputKind.GALACTIC, "frame_galactic"),
    (InputKind.OLD_GALACTIC, "label_old_galactic"),
    (InputKind.USER_EPOCH, "frame_user_epoch"),
    (InputKind.CURRENT_EPOCH, "frame_current_epoch"),
)

# --- Session state initialization ---
if "result" not in st.session_state:
    st.session_state.result = None
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None
if "current_year" not in st.session_state:
    st.session_state.current_year = f"{current_epoch():.2f}"


def _clear_form() -> None:
    for kind, _ in _ROWS:
        st.session_state[f"{kind.value}_lon"] = ""
        st.session_state[f"{kind.value}_lat"] = ""
    st.session_state.user_year = ""
    st.session_state.current_year = f"{current_epoch():.2f}"
    st.session_state.result = None
    st.session_state.error_msg = None


st.title(t("page_title", _lang))
st.caption(t("intro", _lang))

# --- Input form: one row per coordinate kind ---
inputs: list[CoordinateInput] = []
for kind, label_key in _ROWS:
    lon_label, lat_label = (
        ("label_l", "label_b") if kind.is_galactic else ("label_ra", "label_dec")
    )
    col_label, col_lon, col_lat = st.columns([2, 3, 3])
    with col_label:
        st.markdown(f"**{frame_label(label_key, None, _lang)}**")
    with col_lon:
        lon = st.text_input(t(lon_label, _lang), key=f"{kind.value}_lon")
    with col_lat:
        lat = st.text_input(t(lat_label, _lang), key=f"{kind.value}_lat")
    inputs.append(CoordinateInput(kind=kind, lon=lon, lat=lat))

col_user, col_current = st.columns(2)
with col_user:
    user_year = st.text_input(t("label_user_year", _lang), key="user_year")
with col_current:
    current_year = st.text_input(t("label_current_year", _lang), key="current_year")

col_convert, col_clear, _ = st.columns([1, 1, 4])
with col_convert:
    submitted = st.button(t("btn_convert", _lang), use_container_width=True)
with col_clear:
    st.button(t("btn_clear", _lang), use_container_width=True, on_click=_clear_form)

# --- Form submission handler ---
if submitted:
    request = ConversionRequest(
        inputs=tuple(inputs), user_year=user_year, current_year=current_year
    )
    try:
        st.session_state.result = run(request)
        st.session_state.error_msg = None
    except ConversionError as e:
        st.session_state.result = None
        st.session_state.error_msg = t(e.key, _lang, **e.fields)

# --- Error message ---
if st.session_state.error_msg:
    st.error(st.session_state.error_msg)

# --- Result rows and map ---
result = st.session_state.result
if result is not None:
    st.divider()
    for row in result.rows:
        label = frame_label(row.frame, row.epoch, _lang)
        col_label, col_text = st.columns([2, 6])
        with col_label:
            st.markdown(f"**{label}**")
        with col_text:
            st.code(row.text, language=None)
    arcsec = round_trip_error(result) * ARCSEC_PER_RADIAN
    st.caption(t("precision_note", _lang, arcsec=f"{arcsec:.3f}"))

    fig = render_plotly_chart(result, title=t("map_title", _lang))
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})
