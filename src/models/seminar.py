"""Seminar data model."""
from dataclasses import dataclass

from src.utils.date_utils import format_seminar_schedule, parse_date, parse_time


@dataclass(frozen=True)
class Seminar:
    """The seminar advertised on the landing page."""

    title: str
    subtitle: str
    date: str
    time: str
    format: str
    fee: str
    organizer: str
    contact_email: str

    def __post_init__(self):
        """Validate seminar data after initialization."""
        if not self.title or not self.title.strip():
            raise ValueError("Title cannot be empty")

        # Raises ValueError on malformed values
        parse_date(self.date)
        parse_time(self.time)

    @property
    def schedule(self) -> str:
        return format_seminar_schedule(self.date, self.time)


SEMINAR = Seminar(
    title="SI・開発営業向けGemini活用セミナー",
    subtitle="営業改革シリーズ",
    date="2026-02-03",
    time="14:00-15:00",
    format="オンライン（Google Meet）",
    fee="無料",
    organizer="anyenv株式会社",
    contact_email="info@anyenv-inc.com",
)
