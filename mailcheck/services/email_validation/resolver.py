"""DNS-over-HTTPS client for MX lookups."""

import aiohttp
from pydantic import ValidationError

from mailcheck.core.logging import get_logger

from .models import DnsAnswer

logger = get_logger(__name__)

DNS_JSON_MEDIA_TYPE = "application/dns-json"


class DnsLookupError(Exception):
    """The resolver could not be reached or returned an unusable answer."""

    def __init__(self, domain: str, message: str) -> None:
        super().__init__(f"DNS lookup for {domain} failed: {message}")
        self.domain = domain


class DohResolver:
    """Resolve MX records through a DNS-over-HTTPS JSON endpoint."""

    def __init__(self, base_url: str, timeout_seconds: int = 300) -> None:
        """
        Initialize DoH resolver.

        Args:
            base_url: Resolver endpoint, e.g. https://cloudflare-dns.com/dns-query
            timeout_seconds: Total request timeout
        """
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def lookup_mx(self, domain: str) -> DnsAnswer:
        """
        Query MX records for a domain.

        One request per call: no retry, no caching.

        Raises:
            DnsLookupError: on transport failure, non-2xx status or a malformed payload
        """
        logger.bind(domain=domain).debug("dns_lookup")

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(
                    self.base_url,
                    params={"name": domain, "type": "MX"},
                    headers={"accept": DNS_JSON_MEDIA_TYPE},
                ) as response:
                    if not 200 <= response.status < 300:
                        logger.bind(domain=domain, status=response.status).warning("dns_lookup_http_error")
                        raise DnsLookupError(domain, f"resolver returned HTTP {response.status}")
                    # DoH servers answer with application/dns-json, not application/json
                    payload = await response.json(content_type=None)
        except TimeoutError as e:
            logger.bind(domain=domain).warning("dns_lookup_timeout")
            raise DnsLookupError(domain, "request timed out") from e
        except aiohttp.ClientError as e:
            logger.bind(domain=domain, error=str(e)).warning("dns_lookup_client_error")
            raise DnsLookupError(domain, f"client error: {e}") from e
        except ValueError as e:
            logger.bind(domain=domain, error=str(e)).warning("dns_lookup_invalid_json")
            raise DnsLookupError(domain, "response is not valid JSON") from e

        try:
            answer = DnsAnswer.model_validate(payload)
        except ValidationError as e:
            logger.bind(domain=domain, error=str(e)).warning("dns_lookup_malformed_answer")
            raise DnsLookupError(domain, "malformed DNS answer") from e

        logger.bind(domain=domain, status=answer.status, records=len(answer.answer)).debug(
            "dns_lookup_complete"
        )
        return answer
