"""Email validation models."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ValidationResult(BaseModel):
    """Verdict for a single email address."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    email_address: str = Field(alias="emailAddress")
    valid: bool
    reason: list[str] | None = None

    @model_validator(mode="after")
    def _check_reason(self) -> Self:
        if self.valid and self.reason:
            raise ValueError("a valid result cannot carry a reason")
        if not self.valid and not self.reason:
            raise ValueError("an invalid result needs at least one reason")
        return self


class DnsRecord(BaseModel):
    """
    One resource record from a DNS JSON answer section.

    Only the RR type code is used. A record without a numeric type is kept
    with type None so it never counts as any particular record type.
    """

    type: int | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _numeric_type(cls, v: Any) -> int | None:
        if isinstance(v, int) and not isinstance(v, bool):
            return v
        return None


class DnsAnswer(BaseModel):
    """DNS-over-HTTPS JSON response (application/dns-json)."""

    model_config = ConfigDict(populate_by_name=True)

    status: int = Field(alias="Status")
    answer: list[DnsRecord] = Field(default_factory=list, alias="Answer")
