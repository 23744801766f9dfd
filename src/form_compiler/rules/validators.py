"""
Reusable single-value predicates paired with their localized error message.

Each check is a pure ``(value) -> bool`` plus a message key that is resolved
through the active translator only when the error is displayed, so that a
locale switch re-renders the message in the new language.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict

MIN_PASSWORD_LENGTH = 6
PHONE_NUMBER_DIGITS = 10


def strict_equals(left: Any, right: Any) -> bool:
    """Equality that never conflates booleans with numbers (True != 1)."""
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return left == right


@dataclass(frozen=True)
class ValueCheck:
    """A validation predicate and the message key shown when it fails."""

    name: str
    validation: Callable[[Any], bool]
    message_key: str

    def __call__(self, value: Any) -> bool:
        return self.validation(value)

    def err_message(self, translate: Callable[..., str]) -> str:
        """Resolve the error message with the given translator."""
        return translate(self.message_key)


def _check_password(password: Any) -> bool:
    return isinstance(password, str) and len(password) >= MIN_PASSWORD_LENGTH


def _check_phone_number(phone_number: Any) -> bool:
    if not isinstance(phone_number, str):
        return False
    return len(phone_number) == PHONE_NUMBER_DIGITS and phone_number.isdigit()


PASSWORD_LENGTH = ValueCheck(
    name="password_length",
    validation=_check_password,
    message_key="error.password.length",
)

PHONE_NUMBER = ValueCheck(
    name="phone_number",
    validation=_check_phone_number,
    message_key="error.phoneNumber.length",
)

# Lookup used by schema files that reference checks by name
VALUE_CHECKS: Dict[str, ValueCheck] = {
    PASSWORD_LENGTH.name: PASSWORD_LENGTH,
    PHONE_NUMBER.name: PHONE_NUMBER,
}
