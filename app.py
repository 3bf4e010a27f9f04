"""
セミナー申込ランディングページ
Seminar Registration Landing Page
"""
import logging
import os

import streamlit as st

from src.ui.admin_panel import render_admin_panel
from src.ui.landing_page import render_landing_page

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# Streamlit ページ設定
st.set_page_config(
    page_title="SI・開発営業向けGemini活用セミナー",
    page_icon="🚀",
    layout="centered",
    initial_sidebar_state="collapsed"
)


def initialize_session_state():
    """session state の初期値を設定する。"""
    if "current_page" not in st.session_state:
        st.session_state.current_page = "landing"

    if "registration_errors" not in st.session_state:
        st.session_state.registration_errors = {}

    if "registration_feedback" not in st.session_state:
        st.session_state.registration_feedback = None

    if "registration_completed" not in st.session_state:
        st.session_state.registration_completed = False

    # ?page=admin で管理画面へ直接アクセス
    if "url_params_processed" not in st.session_state:
        if st.query_params.get("page") == "admin":
            st.session_state.current_page = "admin"
        st.session_state.url_params_processed = True


def apply_custom_css():
    """カスタム CSS を適用する。"""
    st.markdown("""
        <style>
        .stApp {
            background: linear-gradient(135deg, #020617 0%, #0f172a 50%, #082f49 100%);
        }

        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}
        header, [data-testid="stHeader"] {
            visibility: hidden;
            height: 0;
        }

        .stButton > button, .stFormSubmitButton > button {
            border-radius: 12px;
            font-weight: 600;
            border: none;
        }

        .stFormSubmitButton > button[kind="primaryFormSubmit"] {
            background: linear-gradient(135deg, #0891b2 0%, #2563eb 100%);
            color: white;
        }

        .stTextInput > div > div > input,
        .stTextArea > div > div > textarea {
            background: #0f172a;
            border: 1px solid #1e293b;
            border-radius: 8px;
            color: #f1f5f9;
        }
        </style>
    """, unsafe_allow_html=True)


def render_current_page():
    """現在のページ状態に応じて描画する。"""
    try:
        if st.session_state.current_page == "landing":
            render_landing_page()

        elif st.session_state.current_page == "admin":
            render_admin_panel()

        else:
            st.error(f"不明なページです：{st.session_state.current_page}")
            if st.button("トップへ戻る"):
                st.session_state.current_page = "landing"
                st.rerun()

    except Exception:
        # エラー境界
        logger.exception("Unhandled exception while rendering page")
        st.error("エラーが発生しました。しばらくしてから再度お試しください。")

        if st.button("トップへ戻る"):
            st.session_state.current_page = "landing"
            st.rerun()


def main():
    """アプリケーションのエントリーポイント。"""
    initialize_session_state()
    apply_custom_css()
    render_current_page()


if __name__ == "__main__":
    main()
