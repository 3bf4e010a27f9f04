"""Email notifications for seminar registrations via the SendGrid API."""
import logging
from html import escape

import requests

from src.models.registration import RegistrationRecord
from src.models.seminar import SEMINAR
from src.utils.config import get_settings
from src.utils.exceptions import NotificationError

logger = logging.getLogger(__name__)

ADMIN_SUBJECT = "【Geminiセミナー】新規登録通知"
APPLICANT_SUBJECT = "【登録完了】Gemini活用セミナー 営業改革シリーズ"

_BASE_STYLES = """
    body { font-family: 'Noto Sans JP', sans-serif; line-height: 1.6; color: #333; }
    .container { max-width: 600px; margin: 0 auto; padding: 20px; }
    .header { background: linear-gradient(135deg, #0891b2 0%, #2563eb 100%); color: white; padding: 30px; text-align: center; border-radius: 8px 8px 0 0; }
    .content { background: #f8fafc; padding: 30px; border-radius: 0 0 8px 8px; }
    .label { font-weight: bold; color: #0891b2; }
    .value { color: #1e293b; }
    .footer { text-align: center; margin-top: 30px; padding-top: 20px; border-top: 1px solid #e2e8f0; color: #64748b; font-size: 14px; }
"""

_ADMIN_STYLES = """
    .info-row { margin: 15px 0; padding: 15px; background: white; border-left: 4px solid #0891b2; border-radius: 4px; }
    .info-row .label { margin-bottom: 5px; }
"""

_APPLICANT_STYLES = """
    .info-box { background: white; padding: 20px; border-radius: 8px; margin: 20px 0; border: 2px solid #0891b2; }
    .seminar-info { margin: 15px 0; }
    .seminar-info .value { margin-left: 10px; }
    .note { background: #fef3c7; padding: 15px; border-radius: 8px; margin: 20px 0; border-left: 4px solid #f59e0b; }
"""


def _document(styles: str, header_title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8">
  <style>{_BASE_STYLES}{styles}</style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h1 style="margin: 0;">{header_title}</h1>
      <p style="margin: 10px 0 0 0;">{escape(SEMINAR.title)}</p>
    </div>
    <div class="content">
{body}
    </div>
  </div>
</body>
</html>
"""


def _info_row(label: str, value: str) -> str:
    return f"""
      <div class="info-row">
        <div class="label">{label}</div>
        <div class="value">{escape(value)}</div>
      </div>"""


def _seminar_info(label: str, value: str) -> str:
    return f"""
        <div class="seminar-info">
          <span class="label">{label}:</span>
          <span class="value">{escape(value)}</span>
        </div>"""


def render_admin_email(record: RegistrationRecord) -> str:
    """
    Render the admin-facing notification for a new registration.

    The challenge row is omitted entirely when the registrant left it blank.
    """
    rows = [
        _info_row("会社名", record.company),
        _info_row("氏名", record.name),
        _info_row("役職", record.position),
        _info_row("メールアドレス", record.email),
        _info_row("電話番号", record.phone),
    ]
    if record.challenge:
        rows.append(_info_row("課題に感じていること", record.challenge))
    rows_html = "".join(rows)

    body = f"""
      <p>新しいセミナー申込がありました。</p>
      {rows_html}
      <div class="footer">
        <p>このメールは自動送信されています。</p>
        <p>© 2026 {escape(SEMINAR.organizer)}</p>
      </div>"""
    return _document(_ADMIN_STYLES, "🎉 新規セミナー申込", body)


def render_applicant_email(record: RegistrationRecord) -> str:
    """Render the confirmation sent to the registrant."""
    registration_rows = [
        _seminar_info("会社名", record.company),
        _seminar_info("氏名", record.name),
        _seminar_info("役職", record.position),
        _seminar_info("メールアドレス", record.email),
        _seminar_info("電話番号", record.phone),
    ]
    if record.challenge:
        registration_rows.append(_seminar_info("課題に感じていること", record.challenge))

    seminar_rows = [
        _seminar_info("日時", SEMINAR.schedule),
        _seminar_info("形式", SEMINAR.format),
        _seminar_info("参加費", SEMINAR.fee),
    ]
    registration_html = "".join(registration_rows)
    seminar_html = "".join(seminar_rows)

    body = f"""
      <p>{escape(record.name)} 様</p>
      <p>この度は「{escape(SEMINAR.title)}」にお申し込みいただき、誠にありがとうございます。</p>
      <p>以下の内容で受付いたしました。</p>

      <div class="info-box">
        <h3 style="margin-top: 0; color: #0891b2;">📋 登録情報</h3>
        {registration_html}
      </div>

      <div class="info-box">
        <h3 style="margin-top: 0; color: #0891b2;">📅 セミナー情報</h3>
        {seminar_html}
      </div>

      <div class="note">
        <p style="margin: 0;"><strong>📧 参加URLについて</strong></p>
        <p style="margin: 10px 0 0 0;">セミナー開催の前日までに、参加用のURLをメールにてお送りいたします。</p>
      </div>

      <p>ご不明な点がございましたら、お気軽にお問い合わせください。</p>
      <p>当日のご参加を心よりお待ちしております。</p>

      <div class="footer">
        <p><strong>{escape(SEMINAR.organizer)}</strong></p>
        <p>Email: {escape(SEMINAR.contact_email)}</p>
        <p>© 2026 {escape(SEMINAR.organizer)}</p>
      </div>"""
    return _document(_APPLICANT_STYLES, "✅ 申込完了", body)


def _post_to_sendgrid(to: str, subject: str, html: str) -> None:
    """
    Submit one message to SendGrid.

    Raises:
        NotificationError: On a missing API key, a transport error, a
            timeout or any response other than 202 Accepted
    """
    settings = get_settings()
    if not settings.sendgrid_api_key:
        raise NotificationError("API key not configured")

    payload = {
        "personalizations": [{"to": [{"email": to}]}],
        "from": {"email": settings.from_email},
        "subject": subject,
        "content": [{"type": "text/html", "value": html}],
    }
    headers = {
        "Authorization": f"Bearer {settings.sendgrid_api_key}",
        "Content-Type": "application/json",
    }

    try:
        response = requests.post(
            settings.sendgrid_api_url,
            json=payload,
            headers=headers,
            timeout=settings.sendgrid_timeout,
        )
    except requests.Timeout as e:
        raise NotificationError(f"Request timed out after {settings.sendgrid_timeout}s") from e
    except requests.RequestException as e:
        raise NotificationError(f"Transport error: {e}") from e

    if response.status_code != 202:
        raise NotificationError(
            f"Unexpected response {response.status_code}: {response.text[:200]}",
            status_code=response.status_code,
        )


def send_email(to: str, subject: str, html: str, kind: str = "email") -> bool:
    """
    Send an HTML email and report whether the provider accepted it.

    Args:
        to: Recipient address
        subject: Subject line
        html: HTML body
        kind: Label used in log lines (e.g. "admin", "applicant")

    Returns:
        True if SendGrid answered 202, False otherwise; never raises
    """
    try:
        _post_to_sendgrid(to, subject, html)
    except NotificationError as e:
        logger.error("[SendGrid] Failed to send %s notification: %s", kind, e)
        return False

    logger.info("[SendGrid] Sent %s notification", kind)
    return True


def notify_admin(record: RegistrationRecord) -> bool:
    """Notify the admin mailbox about a new registration."""
    return send_email(
        to=get_settings().admin_email,
        subject=ADMIN_SUBJECT,
        html=render_admin_email(record),
        kind="admin",
    )


def notify_applicant(record: RegistrationRecord) -> bool:
    """Send the registration confirmation to the applicant."""
    return send_email(
        to=record.email,
        subject=APPLICANT_SUBJECT,
        html=render_applicant_email(record),
        kind="applicant",
    )
