"""Format check followed by a DNS MX lookup."""

from mailcheck.core.logging import get_logger

from .base import BaseEmailValidator
from .models import ValidationResult
from .mx import has_valid_mx_record, is_domain_registered
from .resolver import DnsLookupError, DohResolver
from .syntax import check_format, extract_domain

logger = get_logger(__name__)

DOMAIN_UNREGISTERED_REASON = "Domain is not registered"
NO_MX_RECORD_REASON = "Domain does not have a valid MX records"
DNS_LOOKUP_FAILED_REASON = "DNS lookup failed"


class DnsEmailValidator(BaseEmailValidator):
    """
    Validate addresses by syntax and MX records.

    Steps short-circuit on the first failure, so an invalid result carries
    exactly one reason:

    1. RFC 5322 format (no network access when this fails)
    2. Domain registered (resolver status NOERROR)
    3. Domain advertises at least one MX record
    """

    provider_name = "dns"

    def __init__(self, resolver: DohResolver, dns_failure_as_invalid: bool = False) -> None:
        """
        Initialize validator.

        Args:
            resolver: Client used for the MX lookup
            dns_failure_as_invalid: Return an invalid result when the lookup fails
                instead of raising DnsLookupError
        """
        self.resolver = resolver
        self.dns_failure_as_invalid = dns_failure_as_invalid

    async def validate(self, email_address: str) -> ValidationResult:
        """Validate one address. Raises DnsLookupError unless dns_failure_as_invalid."""
        log = logger.bind(provider=self.provider_name, email=email_address)

        format_result = check_format(email_address)
        if not format_result.valid:
            log.debug("email_format_invalid")
            return format_result

        domain = extract_domain(email_address)

        try:
            answer = await self.resolver.lookup_mx(domain)
        except DnsLookupError:
            if not self.dns_failure_as_invalid:
                raise
            log.bind(domain=domain).warning("email_dns_lookup_failed")
            return self._invalid_result(email_address, DNS_LOOKUP_FAILED_REASON)

        if not is_domain_registered(answer):
            log.bind(domain=domain, status=answer.status).debug("email_domain_unregistered")
            return self._invalid_result(email_address, DOMAIN_UNREGISTERED_REASON)

        if not has_valid_mx_record(answer):
            log.bind(domain=domain).debug("email_domain_no_mx")
            return self._invalid_result(email_address, NO_MX_RECORD_REASON)

        log.bind(domain=domain).debug("email_valid")
        return ValidationResult(email_address=email_address, valid=True)

    def _invalid_result(self, email_address: str, reason: str) -> ValidationResult:
        """Create an invalid result with a single reason."""
        return ValidationResult(email_address=email_address, valid=False, reason=[reason])
