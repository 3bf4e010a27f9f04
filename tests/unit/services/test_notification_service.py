"""Unit tests for notification_service."""
import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from src.models.registration import RegistrationRecord
from src.services.notification_service import (
    ADMIN_SUBJECT,
    APPLICANT_SUBJECT,
    notify_admin,
    notify_applicant,
    render_admin_email,
    render_applicant_email,
    send_email,
)


@pytest.fixture
def record(valid_form):
    return RegistrationRecord.from_form({**valid_form, "challenge": "提案書作成に時間がかかる"})


@pytest.fixture
def record_without_challenge(valid_form):
    return RegistrationRecord.from_form(valid_form)


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("SENDGRID_API_KEY", "SG.test-key")
    return "SG.test-key"


def _response(status_code, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


class TestRenderAdminEmail:
    """Test render_admin_email function."""

    def test_contains_all_fields(self, record):
        html = render_admin_email(record)

        for value in ("Acme K.K.", "Taro Yamada", "Sales Manager",
                      "taro@acme.co.jp", "03-1234-5678", "提案書作成に時間がかかる"):
            assert value in html
        assert "新しいセミナー申込がありました。" in html

    def test_omits_challenge_section_when_absent(self, record_without_challenge):
        html = render_admin_email(record_without_challenge)

        assert "課題に感じていること" not in html
        assert "Taro Yamada" in html

    def test_escapes_markup_in_values(self, valid_form):
        record = RegistrationRecord.from_form({**valid_form, "company": "<b>Acme</b> & Co"})
        html = render_admin_email(record)

        assert "&lt;b&gt;Acme&lt;/b&gt; &amp; Co" in html
        assert "<b>Acme</b>" not in html


class TestRenderApplicantEmail:
    """Test render_applicant_email function."""

    def test_addresses_applicant_and_includes_seminar_info(self, record):
        html = render_applicant_email(record)

        assert "Taro Yamada 様" in html
        assert "2026年2月3日(火) 14:00～15:00" in html
        assert "オンライン（Google Meet）" in html
        assert "無料" in html
        assert "参加URLについて" in html

    def test_omits_challenge_section_when_absent(self, record_without_challenge):
        html = render_applicant_email(record_without_challenge)
        assert "課題に感じていること" not in html


class TestSendEmail:
    """Test send_email function."""

    def test_missing_api_key_returns_false_without_request(self, caplog):
        with patch("src.services.notification_service.requests.post") as mock_post:
            with caplog.at_level(logging.ERROR):
                result = send_email("a@example.com", "Subject", "<p>hi</p>", kind="admin")

        assert result is False
        mock_post.assert_not_called()
        assert "API key not configured" in caplog.text
        assert "admin" in caplog.text

    def test_posts_sendgrid_payload(self, api_key):
        with patch("src.services.notification_service.requests.post",
                   return_value=_response(202)) as mock_post:
            result = send_email("a@example.com", "Subject", "<p>hi</p>")

        assert result is True
        args, kwargs = mock_post.call_args
        assert args[0] == "https://api.sendgrid.com/v3/mail/send"
        assert kwargs["json"] == {
            "personalizations": [{"to": [{"email": "a@example.com"}]}],
            "from": {"email": "noreply@anyenv-inc.com"},
            "subject": "Subject",
            "content": [{"type": "text/html", "value": "<p>hi</p>"}],
        }
        assert kwargs["headers"]["Authorization"] == f"Bearer {api_key}"
        assert kwargs["timeout"] == 5.0

    def test_uses_configured_timeout(self, api_key, monkeypatch):
        monkeypatch.setenv("SENDGRID_TIMEOUT", "1.5")
        with patch("src.services.notification_service.requests.post",
                   return_value=_response(202)) as mock_post:
            send_email("a@example.com", "Subject", "<p>hi</p>")

        assert mock_post.call_args.kwargs["timeout"] == 1.5

    @pytest.mark.parametrize("status_code", [200, 400, 401, 500])
    def test_non_202_response_returns_false(self, api_key, status_code, caplog):
        with patch("src.services.notification_service.requests.post",
                   return_value=_response(status_code, "error body")):
            with caplog.at_level(logging.ERROR):
                result = send_email("a@example.com", "Subject", "<p>hi</p>")

        assert result is False
        assert str(status_code) in caplog.text

    def test_timeout_returns_false(self, api_key, caplog):
        with patch("src.services.notification_service.requests.post",
                   side_effect=requests.Timeout("slow")):
            with caplog.at_level(logging.ERROR):
                result = send_email("a@example.com", "Subject", "<p>hi</p>")

        assert result is False
        assert "timed out" in caplog.text

    def test_connection_error_returns_false(self, api_key):
        with patch("src.services.notification_service.requests.post",
                   side_effect=requests.ConnectionError("refused")):
            assert send_email("a@example.com", "Subject", "<p>hi</p>") is False


class TestNotify:
    """Test notify_admin and notify_applicant."""

    def test_notify_admin_targets_admin_mailbox(self, record, api_key):
        with patch("src.services.notification_service.requests.post",
                   return_value=_response(202)) as mock_post:
            assert notify_admin(record) is True

        payload = mock_post.call_args.kwargs["json"]
        assert payload["personalizations"][0]["to"] == [{"email": "info@anyenv-inc.com"}]
        assert payload["subject"] == ADMIN_SUBJECT

    def test_notify_admin_uses_configured_mailbox(self, record, api_key, monkeypatch):
        monkeypatch.setenv("SEMINAR_ADMIN_EMAIL", "ops@example.com")
        with patch("src.services.notification_service.requests.post",
                   return_value=_response(202)) as mock_post:
            notify_admin(record)

        payload = mock_post.call_args.kwargs["json"]
        assert payload["personalizations"][0]["to"] == [{"email": "ops@example.com"}]

    def test_notify_applicant_targets_registrant(self, record, api_key):
        with patch("src.services.notification_service.requests.post",
                   return_value=_response(202)) as mock_post:
            assert notify_applicant(record) is True

        payload = mock_post.call_args.kwargs["json"]
        assert payload["personalizations"][0]["to"] == [{"email": "taro@acme.co.jp"}]
        assert payload["subject"] == APPLICANT_SUBJECT

    def test_notify_admin_returns_false_on_rejection(self, record, api_key, caplog):
        with patch("src.services.notification_service.requests.post",
                   return_value=_response(500)):
            with caplog.at_level(logging.ERROR):
                assert notify_admin(record) is False

        assert "admin notification" in caplog.text
