import streamlit as st
from gdp.api.schemas.conges import CongeStatusDTO
from gdp.domain.roles import Capability
from gdp.ui.api_client import APIError, get_client
from gdp.ui.state import guard_page, handle_api_error

context = guard_page(Capability.LOOKUP_CONGES)
client = get_client()

st.title("Congés")

matricule = st.text_input("Matricule", value=context.session.matricule or "")
if not matricule:
    st.info("Saisissez un matricule.")
    st.stop()

try:
    conges = client.conges_by_matricule(matricule)
except APIError as e:
    handle_api_error(e, "Erreur lors du chargement des congés")

if not conges.items:
    st.info("Aucun congé pour ce matricule.")
for c in conges.items:
    with st.container(border=True):
        st.write(f"**{c.type.value}** · {c.start_date:%d/%m/%Y} → {c.end_date:%d/%m/%Y}")
        st.caption(f"Reprise le {c.date_reprise:%d/%m/%Y} · Service {c.service} · {c.status.value}")
        if context.session.can(Capability.MANAGE_CONGES) and c.status is CongeStatusDTO.PENDING:
            approve, reject = st.columns(2)
            decision = None
            if approve.button("Approuver", key=f"approve_{c.id}"):
                decision = CongeStatusDTO.APPROVED
            if reject.button("Rejeter", key=f"reject_{c.id}"):
                decision = CongeStatusDTO.REJECTED
            if decision is not None:
                try:
                    client.update_conge_status(c.id, decision)
                except APIError as e:
                    handle_api_error(e, "Erreur lors de la mise à jour du congé")
                st.rerun()
