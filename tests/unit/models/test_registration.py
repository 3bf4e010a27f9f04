"""Unit tests for RegistrationRecord."""
import dataclasses
from datetime import datetime

import pytest

from src.models.registration import RegistrationRecord


class TestRegistrationRecord:
    """Test RegistrationRecord model."""

    def test_from_form_trims_values(self):
        """Values are stored trimmed."""
        record = RegistrationRecord.from_form({
            "company": "  テストシステム株式会社 ",
            "name": " 山田太郎",
            "position": "営業部長 ",
            "email": " yamada@test-system.co.jp ",
            "phone": "03-1234-5678",
            "challenge": "  提案書作成に時間がかかる  ",
        })

        assert record.company == "テストシステム株式会社"
        assert record.name == "山田太郎"
        assert record.position == "営業部長"
        assert record.email == "yamada@test-system.co.jp"
        assert record.challenge == "提案書作成に時間がかかる"

    def test_blank_challenge_becomes_none(self, valid_form):
        """Whitespace-only challenge is stored as None."""
        record = RegistrationRecord.from_form({**valid_form, "challenge": "   "})
        assert record.challenge is None

    def test_missing_challenge_becomes_none(self, valid_form):
        record = RegistrationRecord.from_form(valid_form)
        assert record.challenge is None

    def test_generates_id_and_timestamp(self, valid_form):
        """Each record gets a unique id and an ISO 8601 timestamp."""
        first = RegistrationRecord.from_form(valid_form)
        second = RegistrationRecord.from_form(valid_form)

        assert first.id != second.id
        assert len(first.id) == 32
        parsed = datetime.fromisoformat(first.created_at)
        assert parsed.tzinfo is not None

    def test_record_is_immutable(self, valid_form):
        record = RegistrationRecord.from_form(valid_form)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.name = "Someone Else"

    def test_empty_required_field_raises(self):
        with pytest.raises(ValueError, match="company cannot be empty"):
            RegistrationRecord(
                company=" ", name="Taro", position="Manager",
                email="taro@acme.co.jp", phone="03-1234-5678",
            )

    def test_invalid_timestamp_raises(self):
        with pytest.raises(ValueError, match="Invalid timestamp format"):
            RegistrationRecord(
                company="Acme", name="Taro", position="Manager",
                email="taro@acme.co.jp", phone="03-1234-5678",
                created_at="yesterday",
            )

    def test_dict_round_trip(self, valid_form):
        record = RegistrationRecord.from_form({**valid_form, "challenge": "見積もり"})
        assert RegistrationRecord.from_dict(record.to_dict()) == record
