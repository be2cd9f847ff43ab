import streamlit as st
from gdp.ui.state import go, public_page, sign_in

public_page()

st.title("Connexion")
st.caption("Collez le jeton d'accès délivré par le service d'authentification.")

with st.form("signin"):
    token = st.text_input("Jeton", type="password")
    submitted = st.form_submit_button("Se connecter")

if submitted:
    if not token.strip():
        st.error("Jeton requis.")
    elif sign_in(token.strip()) is None:
        st.error("Jeton invalide ou expiré.")
    else:
        go("/Dashboard")
