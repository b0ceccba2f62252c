from typing import Annotated

from fastapi import APIRouter, Query

from mailcheck.dependencies import EmailValidator
from mailcheck.schemas.validation import (
    EMAIL_ADDRESS_DESCRIPTION,
    EMAIL_ADDRESS_EXAMPLE,
    ValidationRequest,
)
from mailcheck.services.email_validation import ValidationResult

router = APIRouter()


@router.get(
    "/isValid",
    response_model=ValidationResult,
    response_model_exclude_none=True,
    summary="Get an email validation passing the email address as a query parameter",
)
async def is_valid(
    validator: EmailValidator,
    email_address: Annotated[
        str,
        Query(
            alias="emailAddress",
            description=EMAIL_ADDRESS_DESCRIPTION,
            examples=[EMAIL_ADDRESS_EXAMPLE],
        ),
    ],
) -> ValidationResult:
    """
    Validate an email address given as the emailAddress query parameter.

    Checks RFC 5322 format, then that the domain resolves and has an MX record.
    """
    return await validator.validate(email_address)


@router.post(
    "/isValid",
    response_model=ValidationResult,
    response_model_exclude_none=True,
    summary="Get an email validation posting the email address as a json in the request body",
)
async def validate(
    body: ValidationRequest,
    validator: EmailValidator,
) -> ValidationResult:
    """Validate the emailAddress field of a JSON request body."""
    return await validator.validate(body.email_address)
