import logging
import os

import streamlit as st

from utils.formatting import short_id
from utils.session import clear_access_token, get_access_token, set_access_token

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(
    page_title="Invoices Dashboard",
    page_icon="🔑"
)

st.sidebar.header("🔑 Sign in")

if 'sign_in_state' not in st.session_state:
    st.session_state['sign_in_state'] = False

token = get_access_token()

with st.form("sign_in_form", enter_to_submit=False):
    st.subheader("Access Token")
    token_input = st.text_input("Bearer token", type="password")

    submitted = st.form_submit_button("Sign in")

    if submitted:
        if not token_input.strip():
            st.error("Token must not be empty")
        else:
            set_access_token(token_input)
            st.session_state['sign_in_state'] = True
            st.rerun()

if st.session_state['sign_in_state']:
    st.success("Signed in")
    st.session_state['sign_in_state'] = False

if token:
    st.caption(f"Token stored: **{short_id(token)}…**")
    st.caption("Open **Invoices** from the sidebar.")

    if st.button("Sign out", key="sign_out"):
        clear_access_token()
        st.rerun()
else:
    st.info("No access token stored.")
