"""Seminar landing page with the registration form."""
from html import escape
from typing import Dict, List, Tuple

import streamlit as st

from src.models.seminar import SEMINAR, Seminar
from src.services.registration_service import submit_registration
from src.ui.html_utils import field_error_html, html_block
from src.utils.exceptions import ProcessingError, ValidationError

# (field key, label, placeholder, required)
FORM_FIELDS: List[Tuple[str, str, str, bool]] = [
    ("company", "会社名", "〇〇システム株式会社", True),
    ("name", "氏名", "山田太郎", True),
    ("position", "役職", "営業部長", True),
    ("email", "メールアドレス", "name@company.com", True),
    ("phone", "電話番号", "090-1234-5678", True),
    ("challenge", "課題に感じていること", "例：提案書作成に時間がかかる、技術調査が属人化している...", False),
]

PROBLEMS = [
    ("提案準備の複雑性", "複数の情報源から必要な情報を収集・整理する作業が煩雑で時間がかかる"),
    ("要件定義の属人化と情報の点在", "営業・SE個人の勘に依存し、情報が点在・継承不能な状態"),
    ("見積もり精度の低さとリスク把握不足", "開発リスクの把握が不十分で赤字案件が発生"),
    ("提案書作成の非効率と品質のばらつき", "トップ営業の暗黙知が形式知化されず、提案の出し遅れで失注"),
]

LEARNINGS = [
    ("🔍 専門知識の整理・要約", "顧客からの技術的な質問に即座に対応できるようになります"),
    ("📄 提案資料の自動生成", "提案書作成時間を70%削減し、商談準備の質を向上させます"),
    ("💬 商談記録の整理とアクション整理の効率化", "毎日30分かかっていた日報作成が5分で完了します"),
    ("🧠 顧客対応の質向上", "提案の出し遅れがなくなり、商機を逃さず受注率が向上します"),
]

FAQ = [
    ("AIの知識がなくても参加できますか？", "はい、AIの専門知識は一切不要です。実務ですぐに使える具体的な活用方法をわかりやすく解説します。"),
    ("途中参加・途中退出は可能ですか？", "はい、可能です。業務の都合で途中参加・途中退出される場合も、お気軽にご参加ください。"),
    ("資料は配布されますか？", "はい、セミナー終了後に参加者の皆様へ資料をメールでお送りします。"),
    ("複数名での参加は可能ですか？", "はい、可能です。お一人ずつお申し込みいただくか、代表者の方がまとめてお申し込みください。"),
    ("録画視聴は可能ですか？", "申し訳ございませんが、録画視聴のご提供は予定しておりません。"),
]

RETRY_MESSAGE = "申し込み処理中にエラーが発生しました。もう一度お試しください。"


def _inject_landing_styles():
    st.markdown(
        html_block(
            """
            <style>
            .hero { text-align: center; padding: 48px 16px 32px; }
            .hero-badge { display: inline-block; padding: 4px 14px; border-radius: 999px;
                          background: #0891b2; color: white; font-size: 13px; font-weight: 600; }
            .hero-title { font-size: 44px; font-weight: 800; color: #f8fafc; line-height: 1.3; margin: 16px 0; }
            .hero-title span { background: linear-gradient(135deg, #22d3ee 0%, #3b82f6 100%);
                               -webkit-background-clip: text; color: transparent; }
            .hero-lead { color: #cbd5e1; font-size: 17px; }
            .overview-card, .problem-card { background: rgba(15, 23, 42, 0.6); border: 1px solid #1e293b;
                                            border-radius: 12px; padding: 20px; margin-bottom: 12px; }
            .overview-card .label { color: #22d3ee; font-weight: 700; }
            .problem-card h4 { color: #f1f5f9; margin: 0 0 6px; }
            .problem-card p { color: #94a3b8; margin: 0; }
            .field-error { color: #fca5a5; font-size: 13px; margin: -8px 0 12px; }
            </style>
            """
        ),
        unsafe_allow_html=True,
    )


def _hero_html(seminar: Seminar) -> str:
    return html_block(
        f"""
        <div class="hero">
            <span class="hero-badge">参加{escape(seminar.fee)}</span>
            <div class="hero-title">SI・開発企業の営業を<br/><span>AIで変革する</span></div>
            <p class="hero-lead">RFP・見積・技術照会などの複雑性が高い業務をAIで効率化し、
            営業マンを「本来の仕事」に集中させる具体的メソッドを解説！</p>
            <p class="hero-lead">📅 {escape(seminar.schedule)}</p>
        </div>
        """
    )


def _overview_html(seminar: Seminar) -> str:
    return html_block(
        f"""
        <div class="overview-card">
            <h3 style="margin-top: 0;">{escape(seminar.title)}</h3>
            <p>{escape(seminar.subtitle)}</p>
            <p><span class="label">日時:</span> {escape(seminar.schedule)}</p>
            <p><span class="label">開催形式:</span> {escape(seminar.format)}</p>
            <p><span class="label">参加費:</span> {escape(seminar.fee)}</p>
            <p><span class="label">途中参加・途中退出:</span> OK</p>
        </div>
        """
    )


def _problem_card_html(title: str, description: str) -> str:
    return html_block(
        f"""
        <div class="problem-card">
            <h4>{escape(title)}</h4>
            <p>{escape(description)}</p>
        </div>
        """
    )


def _render_form_field(key: str, label: str, placeholder: str, required: bool,
                       errors: Dict[str, str]) -> str:
    display_label = f"{label} *" if required else label
    if key == "challenge":
        value = st.text_area(display_label, key=f"registration_{key}", placeholder=placeholder)
    else:
        value = st.text_input(display_label, key=f"registration_{key}", placeholder=placeholder)

    if key in errors:
        st.markdown(field_error_html(errors[key]), unsafe_allow_html=True)
    return value


def _handle_submission(form: Dict[str, str]) -> None:
    """Submit the form and record the outcome in session state."""
    try:
        result = submit_registration(form)
    except ValidationError as e:
        st.session_state.registration_errors = e.errors
        st.session_state.registration_feedback = None
        return
    except ProcessingError:
        st.session_state.registration_errors = {}
        st.session_state.registration_feedback = ("error", RETRY_MESSAGE)
        return

    st.session_state.registration_errors = {}
    st.session_state.registration_feedback = ("success", result["message"])
    st.session_state.registration_completed = True


def render_registration_form():
    """Render the registration form with inline per-field errors."""
    st.markdown("## 参加申し込み")

    feedback = st.session_state.get("registration_feedback")
    if feedback:
        level, message = feedback
        if level == "success":
            st.success(f"✅ {message}")
        else:
            st.error(f"❌ {message}")

    if st.session_state.get("registration_completed"):
        if st.button("別の方を申し込む"):
            for key, *_ in FORM_FIELDS:
                st.session_state.pop(f"registration_{key}", None)
            st.session_state.registration_completed = False
            st.session_state.registration_feedback = None
            st.rerun()
        return

    errors = st.session_state.get("registration_errors", {})

    with st.form("registration_form", clear_on_submit=False):
        values = {
            key: _render_form_field(key, label, placeholder, required, errors)
            for key, label, placeholder, required in FORM_FIELDS
        }
        submitted = st.form_submit_button(
            "今すぐ申し込む（無料）", type="primary", width='stretch'
        )

    if submitted:
        _handle_submission(values)
        st.rerun()


def render_landing_page():
    """Render the full landing page."""
    _inject_landing_styles()

    # ヒーロー
    st.markdown(_hero_html(SEMINAR), unsafe_allow_html=True)

    # セミナー概要
    st.markdown("## セミナー概要")
    st.markdown(_overview_html(SEMINAR), unsafe_allow_html=True)

    st.markdown("## こんなお悩みありませんか？")
    columns = st.columns(2, gap="medium")
    for index, (title, description) in enumerate(PROBLEMS):
        with columns[index % 2]:
            st.markdown(_problem_card_html(title, description), unsafe_allow_html=True)
    st.markdown("#### その課題、**Gemini**で解決できます。")

    st.markdown("## 本セミナーで学べること")
    for title, outcome in LEARNINGS:
        st.markdown(f"**{title}**  \n✔️ {outcome}")

    st.markdown("## よくある質問")
    for question, answer in FAQ:
        with st.expander(question):
            st.write(answer)

    st.divider()
    render_registration_form()
