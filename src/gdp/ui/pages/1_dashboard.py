import streamlit as st
from gdp.domain.calendar import french_month
from gdp.domain.roles import Capability
from gdp.ui.api_client import get_client
from gdp.ui.dashboard import (
    DashboardState, PanelStatus,
    project_status_series, conges_month_series, priority_series,
)
from gdp.ui.guard import MES_SPRINTS
from gdp.ui.state import guard_page

# Non-admins land on their sprints rather than the 403 page
context = guard_page(Capability.VIEW_ADMIN_DASHBOARD, forbidden_target=MES_SPRINTS)

st.title("Tableau de bord")

state_key = f"dashboard_state_{context.session.user_id}"
if state_key not in st.session_state:
    state = DashboardState(client=get_client())
    state.fetch_stats(context.token)
    st.session_state[state_key] = state
state: DashboardState = st.session_state[state_key]

if st.button("Actualiser"):
    state.fetch_stats(context.token)

if state.error:
    st.error(state.error)
    st.stop()

stats = state.stats

# --- Stat cards ---
c1, c2, c3 = st.columns(3)
c1.metric("Utilisateurs", stats.users.total)
c2.metric("Projets", stats.projects.total)
c3.metric("Congés", stats.conges.total)

st.divider()

# --- Project status + filtered project table ---
left, right = st.columns(2)
with left:
    st.subheader("Statut des projets")
    for label, rate in project_status_series(stats):
        col_a, col_b = st.columns([3, 1])
        col_a.progress(rate / 100, text=f"{label}: {rate}%")
        if col_b.button("Filtrer", key=f"status_{label}"):
            state.select_status(label)
    if state.selection.selected_status and st.button("Tous les statuts"):
        state.clear_status()

with right:
    selected = state.selection.selected_status
    st.subheader(f"Projets - {selected}" if selected else "Projets")
    panel = state.load_status_panel()
    if panel.status is PanelStatus.ERROR:
        st.error(f"Failed to load projects: {panel.error}")
    elif panel.data is not None:
        if not panel.data.items:
            st.info("Aucun projet.")
        for p in panel.data.items:
            st.write(f"**{p.name}** · _{p.status.value}_ · {p.priorite.value}")

st.divider()

# --- Priorities ---
st.subheader("Priorités")
for category, counts in priority_series(stats).items():
    if counts:
        st.caption(category)
        st.bar_chart(counts)

st.divider()

# --- Congés by month + month-filtered table ---
left, right = st.columns(2)
with left:
    st.subheader("Congés par mois")
    series = conges_month_series(stats)
    st.bar_chart({label: count for label, count in series})
    month = st.selectbox(
        "Mois", [label for label, _ in series],
        index=None, placeholder="Sélectionner un mois",
    )
    if month and month != state.selection.selected_month:
        state.select_month(month)

with right:
    month = state.selection.selected_month
    st.subheader(f"Congés - {french_month(month)}" if month else "Liste des Congés")
    panel = state.load_month_panel()
    if panel.status is PanelStatus.ERROR:
        st.error(f"Failed to load congés: {panel.error}")
    elif panel.data is not None:
        if not panel.data.items:
            st.info("Aucun congé ce mois-ci.")
        for c in panel.data.items:
            st.write(
                f"**{c.first_name} {c.last_name}** ({c.matricule}) · {c.type.value} · "
                f"{c.start_date:%d/%m/%Y} → {c.end_date:%d/%m/%Y} · {c.status.value}"
            )

st.caption(f"Filtres: statut={state.selection.selected_status or '-'}, mois={state.selection.selected_month or '-'}")
