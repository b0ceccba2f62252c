"""Abstract base class for email validators."""

import asyncio
from abc import ABC, abstractmethod

from .models import ValidationResult


class BaseEmailValidator(ABC):
    """Abstract base class for email validators."""

    provider_name: str = "unknown"

    @abstractmethod
    async def validate(self, email_address: str) -> ValidationResult:
        """
        Validate a single email address.

        Args:
            email_address: The email address to validate

        Returns:
            ValidationResult with the verdict and rejection reasons
        """
        pass

    async def validate_batch(self, email_addresses: list[str]) -> list[ValidationResult]:
        """
        Validate multiple email addresses concurrently.

        Args:
            email_addresses: List of email addresses

        Returns:
            List of ValidationResults in same order
        """
        return list(await asyncio.gather(*(self.validate(email) for email in email_addresses)))
