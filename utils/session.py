# invoices/utils/session.py
import os
from typing import Optional

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

ACCESS_TOKEN_KEY = "accessToken"


def _seed_token() -> None:
    if ACCESS_TOKEN_KEY not in st.session_state:
        st.session_state[ACCESS_TOKEN_KEY] = os.getenv("ACCESS_TOKEN") or None


def get_access_token() -> Optional[str]:
    _seed_token()
    return st.session_state[ACCESS_TOKEN_KEY]


def set_access_token(token: str) -> None:
    st.session_state[ACCESS_TOKEN_KEY] = token.strip() or None


def clear_access_token() -> None:
    st.session_state[ACCESS_TOKEN_KEY] = None


def require_access_token() -> str:
    """
    Guard for pages that talk to the backend. Stops the script run when no
    token is stored.
    """
    token = get_access_token()
    if not token:
        st.warning("You are not signed in. Open the Home page and enter an access token first.")
        st.stop()
    return token
