import datetime as dt

import streamlit as st
from gdp.domain.roles import Capability
from gdp.ui.api_client import APIError, get_client
from gdp.ui.periodic_calendar import WEEKDAY_LABELS, month_entries, month_grid, month_title, shift_month
from gdp.ui.state import guard_page, handle_api_error

context = guard_page(Capability.VIEW_PERIODIC_TASKS)
client = get_client()
session = context.session

if "calendar_month" not in st.session_state:
    today = dt.date.today()
    st.session_state["calendar_month"] = (today.year, today.month)
year, month = st.session_state["calendar_month"]

st.title("Tâches périodiques")

mine_only = st.toggle("Mes tâches uniquement", value=not session.can(Capability.MANAGE_PERIODIC_TASKS))
try:
    tasks = client.list_user_periodic_tasks(session.user_id) if mine_only else client.list_periodic_tasks()
except APIError as e:
    handle_api_error(e, "Erreur lors du chargement des tâches périodiques")

prev_col, title_col, next_col = st.columns([1, 4, 1])
if prev_col.button("◀", key="cal_prev"):
    st.session_state["calendar_month"] = shift_month(year, month, -1)
    st.rerun()
title_col.subheader(month_title(year, month))
if next_col.button("▶", key="cal_next"):
    st.session_state["calendar_month"] = shift_month(year, month, 1)
    st.rerun()

entries = month_entries(tasks.items, year, month)
header = st.columns(len(WEEKDAY_LABELS))
for col, label in zip(header, WEEKDAY_LABELS):
    col.markdown(f"**{label}**")
for week in month_grid(year, month):
    cells = st.columns(len(WEEKDAY_LABELS))
    for cell, day in zip(cells, week):
        if not day:
            continue
        cell.markdown(f"`{day}`")
        for entry in entries.get(day, []):
            marker = "↪ " if entry.rescheduled else ""
            cell.caption(f"{marker}{entry.label}")

if session.can(Capability.EDIT_PERIODIC_TASKS) and tasks.items:
    st.divider()
    st.subheader("Activation")
    for task in tasks.items:
        active = st.checkbox(f"{task.title} · {task.periodicite.value}", value=task.est_active, key=f"pt_{task.id}")
        if active != task.est_active:
            try:
                client.set_periodic_task_active(task.id, active)
            except APIError as e:
                handle_api_error(e, "Erreur lors de la mise à jour")
            st.rerun()
