"""Registration service for seminar sign-ups."""
import logging
from typing import Any, Dict

from src.models.registration import RegistrationRecord
from src.services.notification_service import notify_admin, notify_applicant
from src.services.registration_store import insert_registration
from src.utils.exceptions import ProcessingError, StorageError, ValidationError
from src.utils.validation import validate_registration

logger = logging.getLogger(__name__)

CONFIRMATION_MESSAGE = "申し込みが完了しました。確認メールをご確認ください。"
PROCESSING_ERROR_MESSAGE = "申し込み処理中にエラーが発生しました。"


def submit_registration(form: Dict[str, Any]) -> Dict[str, Any]:
    """
    Register an applicant for the seminar.

    Args:
        form: Submitted fields: company, name, position, email, phone and
            an optional challenge

    Returns:
        {"success": True, "message": CONFIRMATION_MESSAGE} once the
        registration is stored, whether or not the emails went out

    Raises:
        ValidationError: If any field is missing or malformed; ``errors``
            maps each failing field to its message
        ProcessingError: If the registration could not be stored

    Behavior:
        - Re-validates every field server-side
        - Stores exactly one record per accepted submission
        - Sends the admin and applicant notifications only after the
          record is stored; their failures are logged, never raised
    """
    errors = validate_registration(form)
    if errors:
        logger.debug("[Seminar] Rejected registration, invalid fields: %s", sorted(errors))
        raise ValidationError(errors)

    record = RegistrationRecord.from_form(form)

    try:
        insert_registration(record)
    except StorageError:
        logger.exception("[Seminar] Failed to store registration %s", record.id)
        raise ProcessingError(PROCESSING_ERROR_MESSAGE)

    admin_sent = notify_admin(record)
    applicant_sent = notify_applicant(record)

    logger.info(
        "[Seminar] Registration %s saved. Admin email: %s, Applicant email: %s",
        record.id,
        admin_sent,
        applicant_sent,
    )

    return {"success": True, "message": CONFIRMATION_MESSAGE}
