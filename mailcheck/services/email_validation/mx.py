"""Predicates over a DNS MX answer."""

from .models import DnsAnswer

NOERROR = 0
MX_RECORD_TYPE = 15


def is_domain_registered(answer: DnsAnswer) -> bool:
    """True when the resolver answered NOERROR for the domain."""
    return answer.status == NOERROR


def has_valid_mx_record(answer: DnsAnswer) -> bool:
    """True when the answer section holds at least one MX record."""
    return any(record.type == MX_RECORD_TYPE for record in answer.answer)
