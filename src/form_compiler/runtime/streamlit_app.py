"""
Schema-Driven Form Demo

Renders the sign-up form purely from its schema:
- fields, labels and options come from the compiled descriptors
- conditional fields appear and disappear as values change
- switching language re-renders labels and error messages

Usage:
    streamlit run src/form_compiler/runtime/streamlit_app.py
"""

import streamlit as st

from form_compiler.config import load_config
from form_compiler.demo import SIGNUP_DEFAULTS, build_signup_schema
from form_compiler.i18n import available_locales, get_translator
from form_compiler.runtime.form_session import FormSession
from form_compiler.runtime.widget_factory import render_form

config = load_config()

# Initialize session state
if "locale" not in st.session_state:
    st.session_state.locale = config.default_locale
if "form_session" not in st.session_state:
    st.session_state.form_session = FormSession(
        build_signup_schema(),
        get_translator(st.session_state.locale, config.fallback_locale),
        defaults=SIGNUP_DEFAULTS,
        on_submit=lambda data: st.session_state.update(submitted=data),
        config=config,
    )
if "submitted" not in st.session_state:
    st.session_state.submitted = None

session: FormSession = st.session_state.form_session
translate = get_translator(st.session_state.locale, config.fallback_locale)

st.set_page_config(page_title=translate("app.title"), layout="centered")

# Sidebar: locale switcher
locales = available_locales()
selected = st.sidebar.radio(
    translate("app.language"),
    options=locales,
    index=locales.index(st.session_state.locale),
    format_func=str.upper,
)
if selected != st.session_state.locale:
    st.session_state.locale = selected
    session.change_locale(get_translator(selected, config.fallback_locale))
    st.rerun()

st.title(translate("app.title"))
st.caption(translate("app.subtitle"))
st.markdown("---")

changes = render_form(session, translate, radio_threshold=config.radio_threshold)
if changes:
    session.update(changes)
    st.rerun()

col_submit, col_reset = st.columns(2)
with col_submit:
    if st.button(translate("form.submit"), disabled=not session.is_valid, type="primary"):
        session.submit()
with col_reset:
    if st.button(translate("form.reset")):
        session.reset()
        st.session_state.submitted = None
        for name in session.values:
            st.session_state.pop(f"form_{name}", None)
        st.rerun()

if st.session_state.submitted is not None:
    st.success(translate("form.submitted"))
    st.json(st.session_state.submitted)
