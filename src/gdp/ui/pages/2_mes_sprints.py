import streamlit as st
from gdp.domain.roles import Capability
from gdp.ui.api_client import APIError, get_client
from gdp.ui.dashboard import PanelStatus
from gdp.ui.sprints import BOARD_COLUMNS, board_columns, load_project_tasks, sprint_progress
from gdp.ui.state import guard_page, handle_api_error

context = guard_page(Capability.VIEW_SPRINTS)
client = get_client()

try:
    user = client.get_user(context.session.user_id)
except APIError as e:
    handle_api_error(e, "Erreur lors du chargement des données utilisateur")

st.title(f"Sprints de {user.first_name or 'Utilisateur'}")

favorites = context.favorites
if favorites.message:
    st.toast(favorites.message)
    favorites.acknowledge()

if not user.projects:
    st.info("Aucun projet assigné.")
    st.stop()

cards = load_project_tasks(client, [p.id for p in user.projects])

for project in user.projects:
    panel = cards.get(project.id)
    with st.container(border=True):
        head, star = st.columns([5, 1])
        head.subheader(project.name)
        is_fav = favorites.is_favorite(project.id)
        if star.button("★" if is_fav else "☆", key=f"fav_{project.id}"):
            favorites.toggle(project.id, name=project.name)
            st.rerun()

        if panel is None or panel.status is PanelStatus.ERROR:
            st.error(f"Tâches indisponibles: {panel.error if panel else 'inconnu'}")
            continue

        tasks = panel.data.items
        st.progress(sprint_progress(tasks) / 100, text=f"{sprint_progress(tasks)}% terminé")
        columns = st.columns(len(BOARD_COLUMNS))
        for col, (status, items) in zip(columns, board_columns(tasks).items()):
            col.markdown(f"**{status.value}** ({len(items)})")
            for t in items:
                col.write(f"- {t.title}")
