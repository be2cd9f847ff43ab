import streamlit as st
from gdp.domain.roles import Capability
from gdp.ui.api_client import APIError, get_client
from gdp.ui.state import guard_page, handle_api_error

guard_page(Capability.VIEW_ADMIN_NOTIFICATIONS)
client = get_client()

st.title("Notifications")

try:
    notifications = client.list_admin_notifications()
except APIError as e:
    handle_api_error(e, "Erreur lors de la récupération des notifications")

st.caption(f"{notifications.unread} non lue(s) sur {notifications.total}")

for n in notifications.items:
    c1, c2 = st.columns([5, 1])
    icon = "🔔" if not n.is_read else "✔️"
    c1.write(f"{icon} {n.message}")
    if n.created_at:
        c1.caption(n.created_at.strftime("%Y-%m-%d %H:%M"))
    if not n.is_read and c2.button("Lu", key=f"read_{n.id}"):
        try:
            client.mark_notification_read(n.id)
            st.rerun()
        except APIError as e:
            st.error(f"Erreur lors de la mise à jour de la notification: {e.detail}")
