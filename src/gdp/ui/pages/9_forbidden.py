import streamlit as st
from gdp.ui.state import sign_out

st.title("403")
st.error("Accès interdit : votre rôle ne permet pas d'afficher cette page.")

if st.button("Se déconnecter"):
    sign_out()
    st.switch_page("pages/8_signin.py")
