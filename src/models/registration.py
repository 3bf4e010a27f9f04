"""Registration data model for seminar sign-ups."""
import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from src.utils.date_utils import now_iso

REQUIRED_FIELDS = ("company", "name", "position", "email", "phone")


@dataclass(frozen=True)
class RegistrationRecord:
    """A validated seminar registration, stored once and never mutated."""

    company: str
    name: str
    position: str
    email: str
    phone: str
    challenge: Optional[str] = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: str = field(default_factory=now_iso)  # ISO 8601 format

    def __post_init__(self):
        """Validate registration data."""
        for field_name in REQUIRED_FIELDS:
            value = getattr(self, field_name)
            if not value or not value.strip():
                raise ValueError(f"{field_name} cannot be empty")

        try:
            datetime.fromisoformat(self.created_at.replace('Z', '+00:00'))
        except ValueError as e:
            raise ValueError(f"Invalid timestamp format: {self.created_at}") from e

    @classmethod
    def from_form(cls, form: Dict[str, Any]) -> "RegistrationRecord":
        """
        Build a record from already-validated form data.

        Values are trimmed; a blank challenge is stored as None.
        """
        challenge = (form.get("challenge") or "").strip()
        return cls(
            company=form["company"].strip(),
            name=form["name"].strip(),
            position=form["position"].strip(),
            email=form["email"].strip(),
            phone=form["phone"].strip(),
            challenge=challenge or None,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RegistrationRecord":
        return cls(
            company=data["company"],
            name=data["name"],
            position=data["position"],
            email=data["email"],
            phone=data["phone"],
            challenge=data.get("challenge"),
            id=data["id"],
            created_at=data["created_at"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
