import streamlit as st
from gdp.domain.roles import Capability
from gdp.ui.api_client import APIError, get_client
from gdp.ui.state import guard_page, handle_api_error

context = guard_page(Capability.VIEW_SPRINTS)
client = get_client()
favorites = context.favorites

st.title("Mes favoris")

if favorites.message:
    st.toast(favorites.message)
    favorites.acknowledge()

if not favorites.favorites:
    st.info("Aucun projet favori. Ajoutez-en depuis « Mes sprints ».")
    st.stop()

try:
    user = client.get_user(context.session.user_id)
except APIError as e:
    handle_api_error(e, "Erreur lors du chargement des données utilisateur")

for project in [p for p in user.projects if favorites.is_favorite(p.id)]:
    with st.container(border=True):
        c1, c2 = st.columns([5, 1])
        c1.write(f"**{project.name}** · _{project.status.value}_ · {project.priorite.value}")
        if c2.button("Retirer", key=f"unfav_{project.id}"):
            favorites.toggle(project.id, name=project.name)
            st.rerun()
