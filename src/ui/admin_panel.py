"""Admin panel: login and registration list."""
import logging
from datetime import datetime

import streamlit as st

from src.models.seminar import SEMINAR
from src.services.admin_service import is_admin_authenticated, login_admin, logout_admin
from src.services.registration_store import get_all_registrations, registrations_to_csv
from src.ui.html_utils import html_block
from src.utils.exceptions import StorageError

logger = logging.getLogger(__name__)


def _format_created_at(value: str) -> str:
    try:
        return datetime.fromisoformat(value).strftime("%Y-%m-%d %H:%M")
    except ValueError:
        return value


def render_login_page():
    """Render admin login form."""
    with st.form("admin_login_form", clear_on_submit=False):
        st.markdown("<h1>🔐 管理者ログイン</h1>", unsafe_allow_html=True)

        username = st.text_input("ユーザー名", key="admin_username_input")
        password = st.text_input("パスワード", type="password", key="admin_password_input")

        submit_col, cancel_col = st.columns(2, gap="small")
        with submit_col:
            submit = st.form_submit_button("ログイン", type="primary", width='stretch')
        with cancel_col:
            cancel = st.form_submit_button("戻る", width='stretch')

        if submit:
            if not username or not password:
                st.error("❌ ユーザー名とパスワードを入力してください")
            else:
                success, message = login_admin(username, password)
                if success:
                    st.success(f"✅ {message}")
                    st.rerun()
                else:
                    st.error(f"❌ {message}")

        if cancel:
            st.session_state.current_page = "landing"
            st.rerun()


def render_admin_panel():
    """Render admin management panel."""
    if not is_admin_authenticated():
        render_login_page()
        return

    st.markdown(
        html_block(
            f"""
            <div>
                <h1 style="margin-bottom: 4px;">📊 申込一覧</h1>
                <div style="color: #94a3b8;">{SEMINAR.title} · {SEMINAR.schedule}</div>
            </div>
            """
        ),
        unsafe_allow_html=True,
    )

    title_col, home_col, logout_col = st.columns([3, 1, 1], gap="small")
    with home_col:
        if st.button("🏠 トップへ", width='stretch'):
            st.session_state.current_page = "landing"
            st.rerun()
    with logout_col:
        if st.button("🚪 ログアウト", width='stretch'):
            logout_admin()
            st.session_state.current_page = "landing"
            st.rerun()

    try:
        registrations = get_all_registrations()
    except StorageError:
        logger.exception("Failed to load registrations for admin panel")
        st.error("❌ 申込データを読み込めませんでした")
        return

    with title_col:
        st.metric("申込数", len(registrations))

    if not registrations:
        st.info("📝 まだ申込はありません")
        return

    st.dataframe(
        [
            {
                "申込日時": _format_created_at(r.created_at),
                "会社名": r.company,
                "氏名": r.name,
                "役職": r.position,
                "メールアドレス": r.email,
                "電話番号": r.phone,
                "課題": r.challenge or "",
            }
            for r in registrations
        ],
        width='stretch',
        hide_index=True,
    )

    st.download_button(
        "⬇️ CSVダウンロード",
        data=registrations_to_csv(registrations).encode("utf-8-sig"),
        file_name="seminar_registrations.csv",
        mime="text/csv",
    )
