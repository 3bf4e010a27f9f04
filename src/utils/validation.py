"""Registration form validation utilities."""
import re
from typing import Any, Dict, Optional, Tuple

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

REQUIRED_FIELD_MESSAGES = {
    "company": "会社名は必須です",
    "name": "氏名は必須です",
    "position": "役職は必須です",
    "email": "メールアドレスは必須です",
    "phone": "電話番号は必須です",
}

INVALID_EMAIL_MESSAGE = "有効なメールアドレスを入力してください"
INVALID_CHALLENGE_MESSAGE = "課題はテキストで入力してください"


def is_blank(value: Any) -> bool:
    """True for None, non-strings and whitespace-only strings."""
    return not isinstance(value, str) or not value.strip()


def validate_email(email: Optional[Any]) -> Tuple[bool, str]:
    """
    Validate an email address.

    Args:
        email: Address to validate; None or a non-string counts as empty

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "メールアドレスは必須です") if empty
        - (False, "有効なメールアドレスを入力してください") if malformed
    """
    if is_blank(email):
        return False, REQUIRED_FIELD_MESSAGES["email"]
    if not EMAIL_PATTERN.match(email.strip()):
        return False, INVALID_EMAIL_MESSAGE
    return True, ""


def validate_registration(form: Dict[str, Any]) -> Dict[str, str]:
    """
    Validate a seminar registration form.

    Args:
        form: Mapping with company, name, position, email, phone and an
            optional challenge

    Returns:
        Dict mapping each invalid field to its error message; empty when
        the form is valid

    Behavior:
        - Required fields must be non-empty after trimming
        - Email must have a local part, one "@" and a dotted domain
        - challenge is optional free text; only a non-string value is rejected
    """
    errors: Dict[str, str] = {}

    for field_name, message in REQUIRED_FIELD_MESSAGES.items():
        if field_name == "email":
            is_valid, error_msg = validate_email(form.get("email"))
            if not is_valid:
                errors["email"] = error_msg
        elif is_blank(form.get(field_name)):
            errors[field_name] = message

    challenge = form.get("challenge")
    if challenge is not None and not isinstance(challenge, str):
        errors["challenge"] = INVALID_CHALLENGE_MESSAGE

    return errors
