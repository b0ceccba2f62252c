"""Email validation service: RFC 5322 format plus DNS MX lookup."""

from mailcheck.config import get_settings

from .base import BaseEmailValidator
from .models import DnsAnswer, DnsRecord, ValidationResult
from .pipeline import DnsEmailValidator
from .resolver import DnsLookupError, DohResolver

__all__ = [
    "BaseEmailValidator",
    "DnsAnswer",
    "DnsEmailValidator",
    "DnsLookupError",
    "DnsRecord",
    "DohResolver",
    "ValidationResult",
    "get_email_validator",
]

_validator_instance: BaseEmailValidator | None = None


def get_email_validator() -> BaseEmailValidator:
    """
    Get the configured email validator instance.

    The validator only holds configuration, so one instance serves every request.
    """
    global _validator_instance
    if _validator_instance is not None:
        return _validator_instance

    settings = get_settings()

    resolver = DohResolver(
        base_url=settings.doh_url,
        timeout_seconds=settings.doh_timeout,
    )
    _validator_instance = DnsEmailValidator(
        resolver,
        dns_failure_as_invalid=settings.dns_failure_as_invalid,
    )

    return _validator_instance


def reset_email_validator() -> None:
    """Reset the validator instance. Useful for testing."""
    global _validator_instance
    _validator_instance = None
