"""
Registration policy - Password composition rules.

Rules are checked in a fixed order and the first violation wins:

1. at least 8 characters        -> "too short"
2. an uppercase ASCII letter    -> "missing uppercase"
3. a lowercase ASCII letter     -> "missing lowercase"
4. a decimal digit              -> "missing digit"
5. a symbol from SYMBOLS        -> "missing symbol"
"""

import re
from dataclasses import dataclass

MIN_LENGTH = 8
SYMBOLS = '!@#$%^&*(),.?":{}|<>'

TOO_SHORT = "too short"
MISSING_UPPERCASE = "missing uppercase"
MISSING_LOWERCASE = "missing lowercase"
MISSING_DIGIT = "missing digit"
MISSING_SYMBOL = "missing symbol"

_RULES = (
    (re.compile(r"[A-Z]"), MISSING_UPPERCASE),
    (re.compile(r"[a-z]"), MISSING_LOWERCASE),
    (re.compile(r"[0-9]"), MISSING_DIGIT),
    (re.compile("[" + re.escape(SYMBOLS) + "]"), MISSING_SYMBOL),
)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a policy check. `reason` is set only when invalid."""

    valid: bool
    reason: str | None = None


def validate_password(password: str) -> ValidationResult:
    """
    Check a password against the registration policy.

    Only the first violated rule is reported, even when several fail.
    """
    if len(password) < MIN_LENGTH:
        return ValidationResult(valid=False, reason=TOO_SHORT)
    for pattern, reason in _RULES:
        if not pattern.search(password):
            return ValidationResult(valid=False, reason=reason)
    return ValidationResult(valid=True)
