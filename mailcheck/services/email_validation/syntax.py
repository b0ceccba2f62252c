"""RFC 5322 address format check.

See https://datatracker.ietf.org/doc/html/rfc5322#section-3.4.1. The pattern
covers the dot-atom form only: quoted local parts and address literals are
rejected.
"""

import re

from .models import ValidationResult

FORMAT_INVALID_REASON = (
    "Email address does not conform to RFC 5322 i.e. is not a valid email address format"
)

# Domain labels: 1-63 chars, alphanumeric at both ends, hyphens inside
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)


def check_format(email_address: str) -> ValidationResult:
    """Check that the whole string matches the address grammar."""
    if EMAIL_PATTERN.fullmatch(email_address):
        return ValidationResult(email_address=email_address, valid=True)

    return ValidationResult(
        email_address=email_address,
        valid=False,
        reason=[FORMAT_INVALID_REASON],
    )


def extract_domain(email_address: str) -> str:
    """Return everything after the first @. Only call on a well-formed address."""
    return email_address.split("@", 1)[1]
