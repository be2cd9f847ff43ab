"""Streamlit entry point: ``streamlit run src/gdp/ui/app.py``."""
import streamlit as st

from gdp.domain.roles import Capability
from gdp.ui.state import go, resolve_session
from gdp.ui.validation import run_all_checks

st.set_page_config(page_title="GDP", layout="wide")

errors = run_all_checks()
if errors:
    for err in errors:
        st.error(err)
    st.stop()

session = resolve_session()
if session is None:
    go("/signin")
elif session.can(Capability.VIEW_ADMIN_DASHBOARD):
    go("/Dashboard")
else:
    go("/mes-sprints")
