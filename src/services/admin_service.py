"""Admin authentication backed by Streamlit session state."""
import hmac
import os
from typing import Tuple

import streamlit as st

from src.utils.config import load_env_file


def authenticate_admin(username: str, password: str) -> bool:
    """
    Check admin credentials against ADMIN_USERNAME / ADMIN_PASSWORD.

    Returns:
        True if credentials match; always False while no password is set
    """
    load_env_file()

    admin_username = os.getenv("ADMIN_USERNAME", "admin")
    admin_password = os.getenv("ADMIN_PASSWORD", "")

    if not admin_password:
        return False

    return hmac.compare_digest(username, admin_username) and hmac.compare_digest(
        password, admin_password
    )


def is_admin_authenticated() -> bool:
    return st.session_state.get("admin_authenticated", False)


def login_admin(username: str, password: str) -> Tuple[bool, str]:
    """
    Log in admin user.

    Returns:
        Tuple of (success: bool, message: str)
        - (True, "ログインしました") on success
        - (False, "ユーザー名またはパスワードが正しくありません") on failure
    """
    if authenticate_admin(username, password):
        st.session_state["admin_authenticated"] = True
        return True, "ログインしました"
    return False, "ユーザー名またはパスワードが正しくありません"


def logout_admin() -> None:
    if "admin_authenticated" in st.session_state:
        del st.session_state["admin_authenticated"]
